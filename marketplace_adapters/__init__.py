"""Adapters that turn third-party marketplace items into catalog ProductInput records."""
from .models import ProductInput, ProductPrice
from .rakuten import (
    RakutenPriceContext,
    RakutenProduct,
    adapt_rakuten_product,
    convert_rakuten_product,
    parse_rakuten_product,
    validate_rakuten_product,
)

__all__ = [
    "ProductInput",
    "ProductPrice",
    "RakutenPriceContext",
    "RakutenProduct",
    "adapt_rakuten_product",
    "convert_rakuten_product",
    "parse_rakuten_product",
    "validate_rakuten_product",
]
