import json
import re
from pathlib import Path
from typing import Any, Dict, Optional, TypeGuard

from jsonschema import Draft7Validator
from jsonschema.exceptions import best_match

from common_py.logging_config import configure_logging

logger = configure_logging("amazon-adapter:validator")

ASIN_FORMAT = re.compile(r"[A-Z0-9]{10}")


class ProductValidator:
    """Validates raw marketplace product records against JSON schemas.

    Hard rules (record shape, non-blank `asin` and `title`) live in
    `schemas/<schema_key>.json` and decide the boolean result. Soft rules
    only emit warnings on the diagnostics logger.
    """

    def __init__(self, schema_key: str = "amazon_product", diagnostics: Optional[Any] = None):
        self.schemas: Dict[str, Dict[str, Any]] = {}
        self._load_schemas()
        if schema_key not in self.schemas:
            raise ValueError(f"Unknown product schema: {schema_key}")
        self.schema_key = schema_key
        self._validator = Draft7Validator(self.schemas[schema_key])
        self.diagnostics = diagnostics or logger

    def _load_schemas(self):
        """Load all JSON schemas from the schemas directory"""
        schemas_dir = Path(__file__).parent / "schemas"

        for schema_file in schemas_dir.glob("*.json"):
            with open(schema_file, "r", encoding="utf-8") as f:
                self.schemas[schema_file.stem] = json.load(f)

    def is_valid_product(
        self, value: Any, diagnostics: Optional[Any] = None
    ) -> TypeGuard[Dict[str, Any]]:
        """
        Check that `value` has the minimum shape the product mapper needs.

        Args:
            value: Untrusted record, usually decoded JSON
            diagnostics: Logger-like sink for soft warnings; overrides the
                instance default for this call only

        Returns:
            True when the record may be converted. Soft-check warnings never
            change the result.
        """
        error = best_match(self._validator.iter_errors(value))
        if error is not None:
            logger.debug(
                "Product record rejected",
                schema=self.schema_key,
                path="/".join(str(p) for p in error.path) or "<root>",
                error=error.message,
            )
            return False

        self._check_soft_rules(value, diagnostics or self.diagnostics)
        return True

    def _check_soft_rules(self, product: Dict[str, Any], diagnostics: Any) -> None:
        asin = product["asin"]
        if not ASIN_FORMAT.fullmatch(asin):
            diagnostics.warning("Invalid ASIN format", asin=asin)

        images = product.get("images")
        if isinstance(images, list) and not images:
            diagnostics.warning("Product has no images", asin=asin)

    def get_schema(self) -> Dict[str, Any]:
        """Get the JSON schema backing the hard rules."""
        return self.schemas[self.schema_key]


# Global validator instance
validator = ProductValidator()


def validate_amazon_product(
    value: Any, diagnostics: Optional[Any] = None
) -> TypeGuard[Dict[str, Any]]:
    """Boolean predicate: True if `value` is a well-shaped Amazon product record."""
    return validator.is_valid_product(value, diagnostics)
