from typing import Any


class NoOpLogger:
    """Stands in for a BoundLogger when no LoggingPort is provided (e.g. in tests)."""

    def debug(self, event: str, **kwargs: Any) -> None: pass
    def info(self, event: str, **kwargs: Any) -> None: pass
    def warning(self, event: str, **kwargs: Any) -> None: pass
    def error(self, event: str, exc_info: bool = False, **kwargs: Any) -> None: pass
