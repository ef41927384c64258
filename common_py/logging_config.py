import logging
import sys
import json
from typing import Any, Dict, Optional, TextIO


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

    Allows calls like `logger.warning("Invalid ASIN format", asin=asin)` by
    appending key=value pairs to the text message and passing the raw pairs
    through to `JsonFormatter`.
    """

    def __init__(self, base: logging.Logger):
        self._base = base

    @property
    def name(self) -> str:
        return self._base.name

    @property
    def base(self) -> logging.Logger:
        return self._base

    def setLevel(self, level: int) -> None:
        self._base.setLevel(level)

    def _prepare(self, msg: str, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        std_kwargs: Dict[str, Any] = {}
        for key in ("exc_info", "stack_info", "stacklevel"):
            if key in kwargs:
                std_kwargs[key] = kwargs.pop(key)

        if kwargs:
            extra_parts = [f"{key}={value}" for key, value in kwargs.items()]
            msg = f"{msg} - {' - '.join(extra_parts)}"
            std_kwargs["extra"] = {"extra_kwargs": kwargs}
        return {"msg": msg, "std": std_kwargs}

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        prepared = self._prepare(msg, kwargs)
        self._base.debug(prepared["msg"], *args, **prepared["std"])

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        prepared = self._prepare(msg, kwargs)
        self._base.info(prepared["msg"], *args, **prepared["std"])

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        prepared = self._prepare(msg, kwargs)
        self._base.warning(prepared["msg"], *args, **prepared["std"])

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None:
        prepared = self._prepare(msg, kwargs)
        self._base.error(prepared["msg"], *args, **prepared["std"])

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("exc_info", True)
        prepared = self._prepare(msg, kwargs)
        self._base.exception(prepared["msg"], *args, **prepared["std"])


def configure_logging(
    service_name: str,
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> ContextLogger:
    """Configure a named logger and return a ContextLogger that accepts kwargs.

    Level and format default to the values in `config_loader.config`
    (`LOG_LEVEL`, `LOG_FORMAT`). `log_format` is either "json" or "text".
    Records go to `stream`, stdout unless given.

    Usage:
        logger = configure_logging("amazon-adapter:amazon_product_mapper")
        logger.warning("Product has no images", asin=asin)
    """
    if log_level is None or log_format is None:
        from config_loader import config

        log_level = log_level or config.LOG_LEVEL
        log_format = log_format or config.LOG_FORMAT

    if log_format == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    base = logging.getLogger(service_name)

    # Reconfiguring the same name must not stack handlers
    for handler in base.handlers[:]:
        base.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(formatter)

    base.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    base.addHandler(handler)
    base.propagate = False

    return ContextLogger(base)
