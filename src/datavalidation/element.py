"""The configurable "element" target type."""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from .errors import ConfigurationError, ParseError
from .parsers import Parser, parse_bool, parse_char, parse_float, parse_int, parse_text


class ElementKind(Enum):
    """Primitive types an element can stand for."""
    INTEGER = "integer"
    FLOAT = "float"
    CHARACTER = "character"
    BOOLEAN = "boolean"
    TEXT = "text"

    @property
    def parser(self) -> Parser:
        return _PARSERS[self]

    @classmethod
    def from_name(cls, name: str) -> "ElementKind":
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(kind.value for kind in cls)
            raise ConfigurationError(f"Unknown element kind '{name}' (expected one of: {choices})") from None


_PARSERS: Dict[ElementKind, Parser] = {
    ElementKind.INTEGER: parse_int,
    ElementKind.FLOAT: parse_float,
    ElementKind.CHARACTER: parse_char,
    ElementKind.BOOLEAN: parse_bool,
    ElementKind.TEXT: parse_text,
}


@dataclass(frozen=True)
class Element:
    """
    A target type chosen at runtime, with its display name and bounds.

    Attributes:
        kind: Underlying primitive type
        name: Name used in prompts, e.g. "whole number"
        low: Inclusive lower bound, of the kind's type
        high: Inclusive upper bound, of the kind's type
    """
    kind: ElementKind
    name: str
    low: Any
    high: Any

    @property
    def type_name(self) -> str:
        """Type name used in "invalid data type" messages."""
        return f"an element ({self.name})"

    def parse(self, token: str) -> Any:
        return self.kind.parser(token)

    @classmethod
    def from_strings(cls, kind: str, name: str, low: str, high: str) -> "Element":
        """Build an element from textual settings, parsing the bounds as the kind."""
        element_kind = ElementKind.from_name(kind)
        try:
            low_value = element_kind.parser(low)
            high_value = element_kind.parser(high)
        except ParseError as e:
            raise ConfigurationError(f"Bad bound for {element_kind.value} element: {e}") from e
        return cls(kind=element_kind, name=name or element_kind.value, low=low_value, high=high_value)


PRESETS: Dict[str, Element] = {
    "whole number": Element(ElementKind.INTEGER, "whole number", 17, 52),
    "big whole number": Element(ElementKind.INTEGER, "big whole number", 17, 52),
    "fractional number": Element(ElementKind.FLOAT, "fractional number", 28.6, 73.2),
    "big fractional number": Element(ElementKind.FLOAT, "big fractional number", 28.6, 73.2),
    "character": Element(ElementKind.CHARACTER, "character", "a", "z"),
    "boolean": Element(ElementKind.BOOLEAN, "boolean", False, True),
    "string": Element(ElementKind.TEXT, "string", "Alpha", "Omega"),
}

DEFAULT_PRESET = "whole number"


def get_preset(name: str) -> Element:
    try:
        return PRESETS[name.strip().lower()]
    except KeyError:
        raise ConfigurationError(f"Unknown element preset '{name}'") from None
