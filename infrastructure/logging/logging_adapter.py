"""
Logging adapter that implements the LoggingPort protocol on top of structlog.
"""
from typing import Any
from domain.interfaces import LoggingPort, BoundLogger
from infrastructure.logging.structlog_logs import logger as structlog_logger


class StructlogBoundLogger:
    """Wraps a structlog bound logger behind the BoundLogger protocol."""

    def __init__(self, bound_logger):
        self._logger = bound_logger

    def debug(self, event: str, **kwargs: Any) -> None:
        self._logger.debug(event, **kwargs)

    def info(self, event: str, **kwargs: Any) -> None:
        self._logger.info(event, **kwargs)

    def warning(self, event: str, **kwargs: Any) -> None:
        self._logger.warning(event, **kwargs)

    def error(self, event: str, exc_info: bool = False, **kwargs: Any) -> None:
        self._logger.error(event, exc_info=exc_info, **kwargs)


class LoggingAdapter(LoggingPort):
    """
    Structured JSON logging for the application layer.

    Each call to ``bind`` returns a fresh logger; the context bound to one
    never leaks into another.
    """

    def bind(self, **kwargs: Any) -> BoundLogger:
        return StructlogBoundLogger(structlog_logger.bind(**kwargs))
