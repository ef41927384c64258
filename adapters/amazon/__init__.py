from .amazon_data_models import AmazonImage, AmazonPrice, AmazonProduct, AmazonVariation
from .amazon_product_mapper import AmazonProductMapper, convert_amazon_product
from .amazon_product_parser import AmazonProductParser
from .amazon_url_parser import extract_asin_from_url

__all__ = [
    "AmazonImage",
    "AmazonPrice",
    "AmazonProduct",
    "AmazonProductMapper",
    "AmazonProductParser",
    "AmazonVariation",
    "convert_amazon_product",
    "extract_asin_from_url",
]
