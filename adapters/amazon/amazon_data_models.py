from typing import Dict, List, Optional

from pydantic import BaseModel


class AmazonImage(BaseModel):
    url: str
    variant: Optional[str] = None  # MAIN, PT01, PT02, ...
    width: Optional[float] = None
    height: Optional[float] = None


class AmazonPrice(BaseModel):
    amount: str
    currency: str


class AmazonVariation(BaseModel):
    asin: str
    title: str
    dimension: Optional[str] = None
    price: Optional[AmazonPrice] = None
    availability: Optional[str] = None


class AmazonProduct(BaseModel):
    """Amazon product record, shaped after SP-API catalog items."""

    asin: str
    title: str
    brand: Optional[str] = None
    bullet_points: Optional[List[str]] = None
    description: Optional[str] = None
    images: Optional[List[AmazonImage]] = None
    price: Optional[AmazonPrice] = None
    variations: Optional[List[AmazonVariation]] = None
    category: Optional[str] = None
    features: Optional[Dict[str, str]] = None
