from .rakuten_data_models import RakutenPriceContext, RakutenProduct
from .rakuten_product_adapter import adapt_rakuten_product
from .rakuten_product_mapper import DEFAULT_CURRENCY, convert_rakuten_product
from .rakuten_product_validator import (
    get_validation_errors,
    parse_rakuten_product,
    validate_rakuten_product,
)

__all__ = [
    "DEFAULT_CURRENCY",
    "RakutenPriceContext",
    "RakutenProduct",
    "adapt_rakuten_product",
    "convert_rakuten_product",
    "get_validation_errors",
    "parse_rakuten_product",
    "validate_rakuten_product",
]
