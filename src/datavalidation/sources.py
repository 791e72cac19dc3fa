"""
Input sources for the validation readers.

A source hands out one text token at a time. Two bindings are provided:

- SequenceSource: an immutable, replayable sequence of tokens with a cursor.
  Token boundaries are explicit, so nothing is ever left behind after a
  failed parse.
- ConsoleSource: line-buffered standard input. A line may carry several
  whitespace-separated tokens, so after a failed parse the rest of the line
  has to be discarded before the user is asked again.
"""
import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Tuple

from .errors import InputExhaustedError, ParseError
from .parsers import Parser

logger = logging.getLogger(__name__)

DISCARD_LIMIT = 80
LINE_TERMINATOR = "\n"

_TOKEN_PATTERN = re.compile(r"\s*(\S+)")


@dataclass(frozen=True)
class ParseResult:
    """Outcome of reading one token as a given type."""
    token: str
    value: Any = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class InputSource(ABC):
    """Base class for sequential token sources."""

    def __init__(self):
        self._failed = False

    @property
    def failed(self) -> bool:
        """True after a failed parse until reset_error_state() is called."""
        return self._failed

    @abstractmethod
    def next_token(self) -> str:
        """Return the next token, raising InputExhaustedError at end of input."""

    def next_token_as(self, parser: Parser) -> ParseResult:
        """
        Read the next token and parse it.

        Lexical failures are reported in the returned result rather than
        raised, and leave the source in the failed state. Exhaustion of the
        source is still raised.
        """
        token = self.next_token()
        try:
            value = parser(token)
        except ParseError as e:
            self._failed = True
            return ParseResult(token=token, error=e)
        return ParseResult(token=token, value=value)

    def reset_error_state(self) -> None:
        self._failed = False

    def discard(self, max_chars: int = DISCARD_LIMIT, stop_at: str = LINE_TERMINATOR) -> int:
        """Drop pending input; returns the number of characters dropped."""
        return 0


class SequenceSource(InputSource):
    """A finite, replayable sequence of tokens."""

    def __init__(self, tokens: Iterable[str]):
        super().__init__()
        self._tokens: Tuple[str, ...] = tuple(tokens)
        self._cursor = 0

    @property
    def position(self) -> int:
        return self._cursor

    @property
    def remaining(self) -> int:
        return len(self._tokens) - self._cursor

    def next_token(self) -> str:
        if self._cursor >= len(self._tokens):
            raise InputExhaustedError(
                f"No more input after {len(self._tokens)} tokens",
                position=self._cursor,
            )
        token = self._tokens[self._cursor]
        self._cursor += 1
        return token

    def rewind(self) -> None:
        """Start over from the first token."""
        self._cursor = 0
        self.reset_error_state()


class ConsoleSource(InputSource):
    """
    Line-buffered console input.

    Args:
        reader: Callable returning one line of input, raising EOFError at
            end of stream. Defaults to the builtin input().
    """

    def __init__(self, reader: Optional[Callable[[], str]] = None):
        super().__init__()
        self._reader = reader
        self._buffer = ""

    @property
    def pending(self) -> str:
        """Characters read from the console but not yet consumed."""
        return self._buffer

    def _read_line(self) -> str:
        try:
            if self._reader is not None:
                return self._reader()
            return input()
        except EOFError:
            raise InputExhaustedError("End of console input") from None

    def next_token(self) -> str:
        while True:
            match = _TOKEN_PATTERN.match(self._buffer)
            if match:
                self._buffer = self._buffer[match.end():]
                return match.group(1)
            self._buffer = self._read_line() + LINE_TERMINATOR

    def discard(self, max_chars: int = DISCARD_LIMIT, stop_at: str = LINE_TERMINATOR) -> int:
        """Drop up to max_chars pending characters, stopping after stop_at."""
        stop = self._buffer.find(stop_at, 0, max_chars)
        if stop == -1:
            count = min(max_chars, len(self._buffer))
        else:
            count = stop + 1
        if count:
            logger.debug(f"Discarded {count} pending characters: {self._buffer[:count]!r}")
        self._buffer = self._buffer[count:]
        return count
