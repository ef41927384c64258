from typing import Optional, List, Dict
from pydantic import BaseModel, ConfigDict, Field


class ProductPrice(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: str
    currency: str


class ProductVariant(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    price: Optional[str] = None  # bare amount, no currency


class NormalizedProduct(BaseModel):
    """Platform-neutral product shape shared by all marketplace adapters.

    Frozen: fields cannot be reassigned once the mapper returns it.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: Optional[str] = None
    images: List[str] = Field(default_factory=list)
    price: Optional[ProductPrice] = None
    variants: Optional[List[ProductVariant]] = None
    metadata: Dict[str, Optional[str]] = Field(default_factory=dict)
