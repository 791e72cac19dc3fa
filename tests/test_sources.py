"""Tests for the input sources."""
from unittest.mock import patch

import pytest

from datavalidation.errors import InputExhaustedError, ParseError
from datavalidation.parsers import parse_int
from datavalidation.sources import ConsoleSource, InputSource, ParseResult, SequenceSource


class TestSequenceSource:
    """Tests for SequenceSource."""

    def test_tokens_in_order(self):
        source = SequenceSource(["a", "b"])
        assert source.next_token() == "a"
        assert source.next_token() == "b"
        assert source.remaining == 0

    def test_exhaustion_raises(self):
        source = SequenceSource(["a"])
        source.next_token()
        with pytest.raises(InputExhaustedError) as excinfo:
            source.next_token()
        assert excinfo.value.position == 1

    def test_empty_source_raises_immediately(self):
        with pytest.raises(InputExhaustedError):
            SequenceSource([]).next_token()

    def test_rewind_replays_tokens(self):
        source = SequenceSource(["1", "2"])
        source.next_token()
        source.next_token()
        source.rewind()
        assert source.position == 0
        assert source.next_token() == "1"

    def test_accepts_any_iterable(self):
        source = SequenceSource(iter(["x", "y"]))
        assert source.remaining == 2


class TestInputSource:
    """Tests for the InputSource base class."""

    def test_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            InputSource()

    def test_subclass_only_needs_next_token(self):
        class Repeater(InputSource):
            def next_token(self):
                return "5"

        source = Repeater()
        assert source.next_token_as(parse_int).value == 5
        assert source.discard() == 0


class TestNextTokenAs:
    """Tests for InputSource.next_token_as and the error state."""

    def test_successful_parse(self):
        result = SequenceSource(["7"]).next_token_as(parse_int)
        assert result == ParseResult(token="7", value=7)
        assert result.ok

    def test_failed_parse_is_reported_not_raised(self):
        source = SequenceSource(["pizza"])
        result = source.next_token_as(parse_int)
        assert not result.ok
        assert isinstance(result.error, ParseError)
        assert result.token == "pizza"
        assert source.failed

    def test_reset_error_state(self):
        source = SequenceSource(["pizza"])
        source.next_token_as(parse_int)
        source.reset_error_state()
        assert not source.failed

    def test_discard_is_a_no_op_for_sequences(self):
        source = SequenceSource(["pizza", "7"])
        source.next_token()
        assert source.discard() == 0
        assert source.next_token() == "7"


class TestConsoleSource:
    """Tests for ConsoleSource."""

    def test_splits_lines_into_tokens(self):
        with patch('builtins.input', side_effect=["3 4", "  5  "]):
            source = ConsoleSource()
            assert [source.next_token() for _ in range(3)] == ["3", "4", "5"]

    def test_blank_lines_are_skipped(self):
        with patch('builtins.input', side_effect=["", "   ", "9"]):
            assert ConsoleSource().next_token() == "9"

    def test_end_of_stream_raises(self):
        with patch('builtins.input', side_effect=EOFError):
            with pytest.raises(InputExhaustedError):
                ConsoleSource().next_token()

    def test_custom_reader(self):
        lines = iter(["hello world"])
        source = ConsoleSource(reader=lambda: next(lines))
        assert source.next_token() == "hello"
        assert source.pending == " world\n"

    def test_discard_stops_after_line_terminator(self):
        with patch('builtins.input', side_effect=["pizza extra words", "7"]):
            source = ConsoleSource()
            assert source.next_token() == "pizza"
            assert source.discard(80, "\n") == len(" extra words\n")
            assert source.pending == ""
            assert source.next_token() == "7"

    def test_discard_is_bounded(self):
        with patch('builtins.input', side_effect=["bad " + "y" * 100]):
            source = ConsoleSource()
            assert source.next_token() == "bad"
            assert source.discard(80, "\n") == 80
            assert source.next_token() == "y" * 21

    def test_discard_with_empty_buffer(self):
        assert ConsoleSource(reader=lambda: "unused").discard() == 0
