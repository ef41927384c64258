from typing import Any, List, Optional

from pydantic import ValidationError

from adapters.amazon.amazon_data_models import AmazonProduct
from common_py.error_codes import AdapterError, ErrorCode
from common_py.logging_config import configure_logging
from contracts.validator import validator as default_validator

logger = configure_logging("amazon-adapter:amazon_product_parser")


class AmazonProductParser:
    """Parses raw Amazon product records into typed AmazonProduct models.

    The boolean validator decides whether a record is convertible at all;
    this parser additionally checks the optional fields' shapes and raises
    AdapterError instead of returning False.
    """

    def __init__(self, validator: Optional[Any] = None):
        self.validator = validator or default_validator

    def parse_product(self, value: Any) -> AmazonProduct:
        """Parse a single record, raising AdapterError when it is unusable."""
        if not self.validator.is_valid_product(value):
            raise AdapterError(
                ErrorCode.INVALID_PRODUCT_SCHEMA,
                "Amazon product is missing a required field",
                details={"type": type(value).__name__},
            )

        try:
            return AmazonProduct.model_validate(value)
        except ValidationError as e:
            raise AdapterError(
                ErrorCode.INVALID_PRODUCT_SCHEMA,
                "Amazon product has malformed optional fields",
                details={
                    "asin": value.get("asin"),
                    "errors": [
                        {"loc": ".".join(str(p) for p in err["loc"]), "msg": err["msg"]}
                        for err in e.errors()
                    ],
                },
            ) from e

    def parse_products(self, values: List[Any]) -> List[AmazonProduct]:
        """Parse a batch, logging and skipping records that fail."""
        parsed: List[AmazonProduct] = []
        for index, value in enumerate(values):
            try:
                parsed.append(self.parse_product(value))
            except AdapterError as e:
                logger.warning(
                    "Skipping unparseable Amazon product",
                    index=index,
                    error_code=e.error_code.value,
                    error=e.message,
                )
        return parsed
