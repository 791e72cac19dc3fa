"""Exceptions raised by the validation readers."""
from typing import Optional


class DataValidationError(Exception):
    """Base exception for the data validation package."""


class ParseError(DataValidationError, ValueError):
    """Raised when a token is not a lexically valid value of the target type."""

    def __init__(self, token: str, type_name: str):
        self.token = token
        self.type_name = type_name
        super().__init__(f"'{token}' is not {type_name}")


class InputExhaustedError(DataValidationError):
    """Raised when the input source has no more tokens to offer."""

    def __init__(self, message: str = "Input source is exhausted", position: Optional[int] = None):
        self.position = position
        super().__init__(message)


class RetryLimitExceededError(DataValidationError):
    """Raised when a reader rejects more tokens than its retry budget allows."""

    def __init__(self, attempts: int, limit: int):
        self.attempts = attempts
        self.limit = limit
        super().__init__(f"Gave up after {attempts} rejected inputs (limit {limit})")


class ConfigurationError(DataValidationError):
    """Raised when an environment setting cannot be used."""
