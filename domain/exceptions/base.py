"""Base class for domain exceptions."""


class DomainException(Exception):
    """Root of every error raised by the domain layer."""

    def __init__(self, message: str, code: str):
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return self.message
