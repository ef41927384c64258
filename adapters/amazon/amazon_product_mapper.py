from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from pydantic import BaseModel

from common_py.logging_config import configure_logging
from common_py.models import NormalizedProduct, ProductPrice, ProductVariant
from config_loader import config
from contracts.validator import validator as default_validator

logger = configure_logging("amazon-adapter:amazon_product_mapper")

AmazonRecord = Union[Mapping[str, Any], BaseModel]


class AmazonProductMapper:
    """Maps Amazon product records to the platform-neutral NormalizedProduct."""

    def __init__(
        self,
        source_name: Optional[str] = None,
        primary_variant: Optional[str] = None,
    ):
        self.source_name = source_name or config.AMAZON_SOURCE_NAME
        self.primary_variant = primary_variant or config.AMAZON_PRIMARY_IMAGE_VARIANT

    def normalize_amazon_product(self, product: AmazonRecord) -> NormalizedProduct:
        """Normalize a single, already validated, Amazon product."""
        item = self._as_record(product)
        asin = item.get("asin")

        price = item.get("price")
        return NormalizedProduct(
            id=asin,
            title=item.get("title"),
            description=self._build_description(item),
            images=self._sort_images(item.get("images") or []),
            price=(
                ProductPrice(amount=price["amount"], currency=price["currency"])
                if price
                else None
            ),
            variants=self._map_variations(item.get("variations")),
            metadata=self._build_metadata(item),
        )

    def normalize_amazon_products(
        self, records: Iterable[Any], validator: Optional[Any] = None
    ) -> List[NormalizedProduct]:
        """Validate then normalize a batch, skipping records that fail either step."""
        validator = validator or default_validator

        received = 0
        normalized: List[NormalizedProduct] = []
        for index, record in enumerate(records):
            received += 1
            if not validator.is_valid_product(record):
                logger.warning("Skipping invalid Amazon product", index=index)
                continue
            try:
                normalized.append(self.normalize_amazon_product(record))
            except Exception as e:
                logger.error(
                    "Failed to normalize Amazon product",
                    index=index,
                    asin=record.get("asin"),
                    error=str(e),
                )

        logger.info(
            "Normalized Amazon products",
            received=received,
            normalized=len(normalized),
        )
        return normalized

    def _as_record(self, product: AmazonRecord) -> Mapping[str, Any]:
        if isinstance(product, BaseModel):
            return product.model_dump()
        return product

    def _build_description(self, item: Mapping[str, Any]) -> Optional[str]:
        """Bullet points first, then the free-text description after a blank line."""
        description = ""
        bullet_points = item.get("bullet_points")
        if bullet_points:
            description = "\n".join(bullet_points)

        text = item.get("description")
        if text:
            if description:
                description += "\n\n" + text
            else:
                description = text

        return description or None

    def _sort_images(self, images: List[Mapping[str, Any]]) -> List[str]:
        """Primary variant first, then by variant tag; ties keep input order."""

        def sort_key(image: Mapping[str, Any]):
            variant = image.get("variant") or ""
            return (variant != self.primary_variant, variant)

        return [image.get("url") for image in sorted(images, key=sort_key)]

    def _map_variations(
        self, variations: Optional[List[Mapping[str, Any]]]
    ) -> Optional[List[ProductVariant]]:
        if variations is None:
            return None

        return [
            ProductVariant(
                id=variation.get("asin"),
                title=variation.get("title"),
                price=(variation.get("price") or {}).get("amount"),
            )
            for variation in variations
        ]

    def _build_metadata(self, item: Mapping[str, Any]) -> Dict[str, Optional[str]]:
        metadata: Dict[str, Optional[str]] = {
            "source": self.source_name,
            "asin": item.get("asin"),
            "brand": item.get("brand"),
            "category": item.get("category"),
        }
        # Feature keys go last and may overwrite the reserved keys above
        for key, value in (item.get("features") or {}).items():
            metadata[key] = value
        return metadata


# Default mapper built from config_loader settings
mapper = AmazonProductMapper()


def convert_amazon_product(product: AmazonRecord) -> NormalizedProduct:
    """Convert an Amazon product record to the normalized product model."""
    return mapper.normalize_amazon_product(product)
