"""
Repetition data validation readers.

Two readers are provided:

- read_value: type-checking validation. Reads tokens until one parses as
  the target type, discarding each malformed token and asking again.
- read_in_range: type-checking followed by range-checking validation. Only
  values that already passed the type check are compared against the
  inclusive bounds.

Neither reader has a terminal failure state of its own. They return only
validated values; the only exceptions that escape are InputExhaustedError
(the source ran dry) and RetryLimitExceededError (an explicit retry budget
was spent).
"""
import logging
from enum import Enum
from typing import Any, Callable, Optional

from .element import Element
from .errors import RetryLimitExceededError
from .parsers import FLOAT_NAME, INT_NAME, Parser, display, parse_float, parse_int
from .sources import DISCARD_LIMIT, LINE_TERMINATOR, InputSource

logger = logging.getLogger(__name__)

Emit = Callable[[str], None]


class ReadState(Enum):
    """States of a read; ACCEPTED is terminal, both INVALID states re-prompt."""
    AWAITING_INPUT = "awaiting_input"
    TYPE_INVALID = "type_invalid"
    RANGE_INVALID = "range_invalid"
    ACCEPTED = "accepted"


StateListener = Callable[[ReadState], None]


def echo(text: str) -> None:
    """Write a prompt to stdout, leaving the cursor on the same line."""
    print(text, end="", flush=True)


def type_error_message(type_name: str) -> str:
    return f"Invalid data type, should be {type_name}, try again: "


def range_error_message(low: Any, high: Any) -> str:
    return f"Invalid range, should be between {display(low)} and {display(high)}, try again: "


class RetryBudget:
    """Counts rejected inputs and enforces an optional limit."""

    def __init__(self, limit: Optional[int] = None):
        if limit is not None and limit < 0:
            raise ValueError("Retry limit cannot be negative")
        self.limit = limit
        self.rejected = 0

    def spend(self) -> None:
        self.rejected += 1
        if self.limit is not None and self.rejected > self.limit:
            raise RetryLimitExceededError(self.rejected, self.limit)


class _Reader:
    """Shared plumbing for a single read: output, budget and state reporting."""

    def __init__(self, source: InputSource, emit: Optional[Emit], max_retries: Optional[int],
                 listener: Optional[StateListener], discard_limit: int):
        self.source = source
        self.emit = emit or echo
        self.budget = RetryBudget(max_retries)
        self.listener = listener
        self.discard_limit = discard_limit

    def enter(self, state: ReadState) -> None:
        logger.debug(f"Read state -> {state.name}")
        if self.listener is not None:
            self.listener(state)

    def read_typed(self, parser: Parser, type_name: str) -> Any:
        while True:
            self.enter(ReadState.AWAITING_INPUT)
            result = self.source.next_token_as(parser)
            if result.ok:
                return result.value

            self.enter(ReadState.TYPE_INVALID)
            self.source.reset_error_state()
            self.source.discard(self.discard_limit, LINE_TERMINATOR)
            logger.info(f"Rejected '{result.token}': not {type_name}")
            self.budget.spend()
            self.emit(type_error_message(type_name))


def read_value(source: InputSource, parser: Parser, type_name: str, *,
               prompt: Optional[str] = None,
               emit: Optional[Emit] = None,
               max_retries: Optional[int] = None,
               listener: Optional[StateListener] = None,
               discard_limit: int = DISCARD_LIMIT) -> Any:
    """
    Read until a token parses as the target type.

    Args:
        source: Where tokens come from
        parser: Parses one token or raises ParseError
        type_name: Name of the type used in the retry message, e.g. "a whole number"
        prompt: Optional text emitted before the first read
        emit: Output sink for prompts and retry messages (stdout by default)
        max_retries: Maximum number of rejected tokens; None means unbounded
        listener: Called with every state the read passes through
        discard_limit: Bound on characters discarded after a malformed token

    Returns:
        The first successfully parsed value
    """
    reader = _Reader(source, emit, max_retries, listener, discard_limit)
    if prompt:
        reader.emit(prompt)
    value = reader.read_typed(parser, type_name)
    reader.enter(ReadState.ACCEPTED)
    return value


def read_in_range(source: InputSource, parser: Parser, type_name: str, low: Any, high: Any, *,
                  prompt: Optional[str] = None,
                  emit: Optional[Emit] = None,
                  max_retries: Optional[int] = None,
                  listener: Optional[StateListener] = None,
                  discard_limit: int = DISCARD_LIMIT) -> Any:
    """
    Read until a token parses as the target type and lies within [low, high].

    Bounds are inclusive and are not checked against each other; low <= high
    is the caller's responsibility. Type and range rejections share the same
    retry budget. Other arguments are as for read_value().

    Returns:
        The first value that is both type-valid and within bounds
    """
    reader = _Reader(source, emit, max_retries, listener, discard_limit)
    if prompt:
        reader.emit(prompt)
    value = reader.read_typed(parser, type_name)
    while value < low or value > high:
        reader.enter(ReadState.RANGE_INVALID)
        logger.info(f"Rejected {display(value)}: outside [{display(low)}, {display(high)}]")
        reader.budget.spend()
        reader.emit(range_error_message(low, high))
        value = reader.read_typed(parser, type_name)
    reader.enter(ReadState.ACCEPTED)
    return value


def read_int(source: InputSource, **kwargs) -> int:
    return read_value(source, parse_int, INT_NAME, **kwargs)


def read_float(source: InputSource, **kwargs) -> float:
    return read_value(source, parse_float, FLOAT_NAME, **kwargs)


def read_element(source: InputSource, element: Element, **kwargs) -> Any:
    return read_value(source, element.parse, element.type_name, **kwargs)


def read_int_in_range(source: InputSource, low: int, high: int, **kwargs) -> int:
    return read_in_range(source, parse_int, INT_NAME, low, high, **kwargs)


def read_float_in_range(source: InputSource, low: float, high: float, **kwargs) -> float:
    return read_in_range(source, parse_float, FLOAT_NAME, low, high, **kwargs)


def read_element_in_range(source: InputSource, element: Element, **kwargs) -> Any:
    """Read an element within the element's own bounds."""
    return read_in_range(source, element.parse, element.type_name, element.low, element.high, **kwargs)
