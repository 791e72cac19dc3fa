"""Repetition type-checking and range-checking data validation."""
from .element import Element, ElementKind, PRESETS, get_preset
from .errors import (
    ConfigurationError,
    DataValidationError,
    InputExhaustedError,
    ParseError,
    RetryLimitExceededError,
)
from .readers import (
    ReadState,
    read_element,
    read_element_in_range,
    read_float,
    read_float_in_range,
    read_in_range,
    read_int,
    read_int_in_range,
    read_value,
)
from .sources import ConsoleSource, InputSource, ParseResult, SequenceSource

__version__ = "1.0.0"
__all__ = [
    "ConfigurationError",
    "ConsoleSource",
    "DataValidationError",
    "Element",
    "ElementKind",
    "InputExhaustedError",
    "InputSource",
    "PRESETS",
    "ParseError",
    "ParseResult",
    "ReadState",
    "RetryLimitExceededError",
    "SequenceSource",
    "get_preset",
    "read_element",
    "read_element_in_range",
    "read_float",
    "read_float_in_range",
    "read_in_range",
    "read_int",
    "read_int_in_range",
    "read_value",
]
