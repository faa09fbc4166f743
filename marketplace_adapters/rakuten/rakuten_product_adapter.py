from typing import Any, Optional

from pydantic import ValidationError

from marketplace_adapters.config import config
from marketplace_adapters.logging_config import configure_logging
from marketplace_adapters.models import ProductInput
from .rakuten_data_models import RakutenPriceContext
from .rakuten_product_mapper import convert_rakuten_product
from .rakuten_product_validator import (
    get_validation_errors,
    parse_rakuten_product,
    validate_rakuten_product,
)

_logger = configure_logging(
    "marketplace-adapters:rakuten_product_adapter",
    log_level=config.LOG_LEVEL,
    log_format=config.LOG_FORMAT,
)


def adapt_rakuten_product(
    candidate: Any,
    price_context: Optional[RakutenPriceContext] = None,
    logger: Optional[Any] = None,
) -> Optional[ProductInput]:
    """Validate, parse and convert a single raw Rakuten item.

    Returns None for items that cannot be converted; the reason is logged.
    """
    logger = logger or _logger

    if not validate_rakuten_product(candidate, logger=logger):
        logger.warning(
            "Rejected Rakuten product",
            extra={"errors": get_validation_errors(candidate)},
        )
        return None

    try:
        product = parse_rakuten_product(candidate)
    except ValidationError as e:
        logger.error(
            "Failed to parse Rakuten product",
            extra={
                "item_code": candidate.get("itemCode") if hasattr(candidate, "get") else None,
                "error": str(e),
            },
        )
        return None

    return convert_rakuten_product(product, price_context)
