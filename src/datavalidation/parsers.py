"""
Lexical parsers for the token types the readers understand.

Every parser takes a single token and either returns the parsed value or
raises ParseError. Parsers never strip or split the token; token boundaries
belong to the input source.
"""
import math
import re
from typing import Any, Callable, TypeVar

from .errors import ParseError

T = TypeVar("T")
Parser = Callable[[str], T]

INT_NAME = "a whole number"
FLOAT_NAME = "a fractional number"
CHAR_NAME = "a character"
BOOL_NAME = "a boolean"
TEXT_NAME = "a string"

_INT_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)

TRUE_WORDS = frozenset({"true", "1"})
FALSE_WORDS = frozenset({"false", "0"})


def parse_int(token: str) -> int:
    """Parse an optionally signed run of decimal digits."""
    if not _INT_PATTERN.fullmatch(token):
        raise ParseError(token, INT_NAME)
    return int(token)


def parse_float(token: str) -> float:
    """Parse a decimal or exponential floating-point literal."""
    if not _FLOAT_PATTERN.fullmatch(token):
        raise ParseError(token, FLOAT_NAME)
    value = float(token)
    # out of range for a double, e.g. 1e400
    if math.isinf(value):
        raise ParseError(token, FLOAT_NAME)
    return value


def parse_char(token: str) -> str:
    if len(token) != 1:
        raise ParseError(token, CHAR_NAME)
    return token


def parse_bool(token: str) -> bool:
    """Parse true/false in either textual or numeric form."""
    word = token.lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    raise ParseError(token, BOOL_NAME)


def parse_text(token: str) -> str:
    if not token:
        raise ParseError(token, TEXT_NAME)
    return token


def display(value: Any) -> str:
    """Render a value the way the prompts and confirmations show it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)
