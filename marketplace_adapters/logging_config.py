import logging
import sys
import json
import inspect
from pathlib import Path
from typing import Any, Dict, Optional


PACKAGE_LOGGER_PREFIX = "marketplace-adapters"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "name": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        if hasattr(record, "extra_kwargs"):
            log_record.update(record.extra_kwargs)
        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_record, default=str)


class ContextLogger:
    """Thin wrapper around stdlib logger that supports structured kwargs.

    Allows calls like `logger.warning("msg", item_code="abc-001")` by
    appending key=value pairs to the message instead of letting stdlib
    Logger._log reject the unknown kwargs. Fields passed through the stdlib
    `extra` argument are rendered the same way, so callers that only know
    the `logging.Logger` interface get the same output.
    """

    def __init__(self, base: logging.Logger):
        self._base = base

    @property
    def name(self) -> str:
        return self._base.name

    def _prepare(self, msg: str, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        std_kwargs: Dict[str, Any] = {}
        for key in ("exc_info", "stack_info", "stacklevel", "extra"):
            if key in kwargs:
                std_kwargs[key] = kwargs.pop(key)

        fields = {**std_kwargs.get("extra", {}), **kwargs}
        if fields:
            extra_parts = [f"{key}={value}" for key, value in fields.items()]
            msg = f"{msg} - {' - '.join(extra_parts)}"
            # JSON formatter reads the raw values back from the record
            std_kwargs["extra"] = {**std_kwargs.get("extra", {}), "extra_kwargs": fields}
        return {"msg": msg, "std": std_kwargs}

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        prepared = self._prepare(msg, kwargs)
        self._base.warning(prepared["msg"], *args, **prepared["std"])

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        prepared = self._prepare(msg, kwargs)
        self._base.error(prepared["msg"], *args, **prepared["std"])


def _standardize_logger_name(name: str) -> str:
    """Ensure logger name follows `marketplace-adapters:module` when possible.

    Names that already contain a colon are returned unchanged. Otherwise the
    module is inferred from the caller's file, falling back to the original
    name when the caller lives outside the package.
    """
    if ":" in name:
        return name

    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    while caller and caller.f_code.co_filename == __file__:
        caller = caller.f_back
    if not caller:
        return name

    p = Path(caller.f_code.co_filename)
    if "marketplace_adapters" not in p.parts:
        return name
    file_part = p.stem if p.name != "__init__.py" else p.parent.name
    return f"{PACKAGE_LOGGER_PREFIX}:{file_part}"


def configure_logging(
    service_name: str,
    log_level: str = "INFO",
    log_format: Optional[str] = None,
) -> ContextLogger:
    """Configure logging and return a ContextLogger that accepts kwargs.

    Usage:
        logger = configure_logging("marketplace-adapters:rakuten_product_validator")
        logger.warning("Product has no images", item_code=item_code)
    """
    service_name = _standardize_logger_name(service_name)
    if log_format == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            log_format or "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    base = logging.getLogger(service_name)
    # Drop handlers from a previous configuration to avoid duplicate lines
    for handler in base.handlers[:]:
        base.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    base.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    base.addHandler(handler)
    base.propagate = False

    return ContextLogger(base)
