from typing_extensions import Protocol
from typing import Any


class BoundLogger(Protocol):
    """Logger carrying the context it was bound with."""

    def debug(self, event: str, **kwargs: Any) -> None:
        """Log a debug event with extra context fields."""
        ...

    def info(self, event: str, **kwargs: Any) -> None:
        """
        Log an info event.

        Args:
            event: snake_case event name
            **kwargs: Additional context fields
        """
        ...

    def warning(self, event: str, **kwargs: Any) -> None:
        """Log a warning event with extra context fields."""
        ...

    def error(self, event: str, exc_info: bool = False, **kwargs: Any) -> None:
        """
        Log an error event.

        Args:
            event: snake_case event name
            exc_info: Whether to attach the active exception
            **kwargs: Additional context fields
        """
        ...


class LoggingPort(Protocol):
    def bind(self, **kwargs: Any) -> BoundLogger:
        """Return a logger that adds ``kwargs`` to every event it emits."""
        ...
