import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, List, Optional

from jsonschema import Draft7Validator

from marketplace_adapters.config import config
from marketplace_adapters.logging_config import configure_logging
from .rakuten_data_models import RakutenProduct

_logger = configure_logging(
    "marketplace-adapters:rakuten_product_validator",
    log_level=config.LOG_LEVEL,
    log_format=config.LOG_FORMAT,
)

SCHEMA_PATH = Path(__file__).parent / "schemas" / "rakuten_product.json"

with open(SCHEMA_PATH, "r", encoding="utf-8") as f:
    _schema_validator = Draft7Validator(json.load(f))

IMAGE_FIELDS = ("mediumImageUrls", "smallImageUrls")


def _as_document(candidate: Any) -> Optional[Dict[Any, Any]]:
    """Return the candidate as a plain dict keyed by API field names, or None."""
    if isinstance(candidate, RakutenProduct):
        return candidate.model_dump(by_alias=True, exclude_none=True)
    if isinstance(candidate, dict):
        return candidate
    if isinstance(candidate, Mapping):
        return dict(candidate)
    return None


def _has_images(document: Dict[Any, Any]) -> bool:
    for field_name in IMAGE_FIELDS:
        urls = document.get(field_name)
        if isinstance(urls, (list, tuple)) and len(urls) > 0:
            return True
    return False


def get_validation_errors(candidate: Any) -> List[str]:
    """List the reasons a candidate fails the mandatory field checks."""
    document = _as_document(candidate)
    if document is None:
        return [f"expected an object, got {type(candidate).__name__}"]

    errors = []
    for error in sorted(_schema_validator.iter_errors(document), key=lambda e: list(e.path)):
        location = "/".join(str(part) for part in error.path) or "<root>"
        errors.append(f"{location}: {error.message}")
    return errors


def validate_rakuten_product(candidate: Any, logger: Optional[Any] = None) -> bool:
    """
    Check that a raw value carries the fields needed for conversion.

    Only itemCode, itemName and itemPrice decide the result. A product with no
    images is still valid; it is reported through `logger.warning` so callers
    can inject their own sink.

    Returns:
        True if the candidate can be passed to parse_rakuten_product.
    """
    document = _as_document(candidate)
    if document is None:
        return False

    if not _schema_validator.is_valid(document):
        return False

    if not _has_images(document):
        (logger or _logger).warning(
            "Product has no images", extra={"item_code": document.get("itemCode")}
        )

    return True


def parse_rakuten_product(candidate: Any) -> RakutenProduct:
    """Turn a validated raw value into a RakutenProduct.

    Raises pydantic.ValidationError when the value does not fit the model.
    """
    if isinstance(candidate, RakutenProduct):
        return candidate
    if isinstance(candidate, Mapping) and not isinstance(candidate, dict):
        candidate = dict(candidate)
    return RakutenProduct.model_validate(candidate)
