"""Tests for the Parser type.

Covers running, map/bind/filter, alternation, sequencing helpers, the
debugging hooks and sharing one parser across threads.
"""

from __future__ import annotations

import itertools
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

import pytest

from monadparse.cursor import Cursor, ParseResult
from monadparse.diagnostics import Diagnostic, DiagnosticCode, ErrorTemplate, ParseFailedError
from monadparse.parser import Parser, lazy, lift, many, next_token, symbol, wrap
from monadparse.result import (
    AssertionFailed,
    Ok,
    Result,
    UnexpectedEndOfInput,
    UnexpectedToken,
    _Failure,
)

# ============================================================================
# RUNNING
# ============================================================================


class TestRun:
    """Test parse() and run()."""

    def test_parse_returns_value_and_cursor(self) -> None:
        """parse() keeps the remaining cursor."""
        result = symbol("a").parse(Cursor(["a", "b"]))

        assert result == Ok(ParseResult("a", Cursor(["a", "b"], 1)))

    def test_call_is_parse(self) -> None:
        """Calling a parser is the same as parse()."""
        cursor = Cursor(["a"])
        parser = symbol("a")

        assert parser(cursor) == parser.parse(cursor)

    def test_run_discards_cursor(self) -> None:
        """run() yields only the value."""
        assert symbol("a").run(["a", "b"]) == Ok("a")

    def test_run_returns_failure_unchanged(self) -> None:
        """run() passes failures through."""
        assert symbol("a").run(["b"]) == UnexpectedToken("a", "b", 0)

    def test_run_consume_all_accepts_complete_parse(self) -> None:
        """consume_all=True is satisfied when nothing is left."""
        assert symbol("a").run(["a"], consume_all=True) == Ok("a")

    def test_run_consume_all_rejects_leftover(self) -> None:
        """consume_all=True reports the first leftover token."""
        result = symbol("a").run(["a", "b"], consume_all=True)

        assert result == UnexpectedToken(None, "b", 1, trailing=True)
        assert result.diagnostic.code is DiagnosticCode.TRAILING_TOKENS

    def test_run_accepts_any_sequence(self) -> None:
        """Token sequences may be tuples."""
        assert symbol("a").run(("a",)) == Ok("a")

    def test_parse_or_raise_returns_value(self) -> None:
        """parse_or_raise() unwraps success."""
        assert symbol("a").parse_or_raise(["a"]) == "a"

    def test_parse_or_raise_raises(self) -> None:
        """parse_or_raise() raises ParseFailedError on failure."""
        with pytest.raises(ParseFailedError, match="expected 'a', got 'b'"):
            symbol("a").parse_or_raise(["b"])

    def test_failed_run_logs_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """A failed top-level parse leaves a DEBUG record."""
        with caplog.at_level(logging.DEBUG, logger="monadparse.parser.core"):
            symbol("a").run(["b"])

        assert any("failed" in record.getMessage() for record in caplog.records)

    def test_parser_is_reusable(self) -> None:
        """A parser value can be run many times."""
        parser = symbol("a")

        assert parser.run(["a"]) == Ok("a")
        assert parser.run(["b"]) == UnexpectedToken("a", "b", 0)
        assert parser.run(["a"]) == Ok("a")

    def test_custom_parse_function(self) -> None:
        """Parsers can be built from any cursor function."""

        def two_tokens(cursor: Cursor[Any]) -> Result[ParseResult[tuple[Any, Any]]]:
            return next_token().bind(lambda a: next_token(), lambda a, b: (a, b)).parse(cursor)

        parser = Parser(two_tokens)

        assert parser.name == "two_tokens"
        assert parser.run(["x", "y"]) == Ok(("x", "y"))


# ============================================================================
# MONADIC OPERATIONS
# ============================================================================


class TestMap:
    """Test Parser.map()."""

    def test_transforms_value(self) -> None:
        """map() changes the value, not the position."""
        result = symbol("a").map(str.upper).parse(Cursor(["a", "b"]))

        assert result == Ok(ParseResult("A", Cursor(["a", "b"], 1)))

    def test_failure_passes_through(self) -> None:
        """map() is skipped on failure."""
        assert symbol("a").map(str.upper).run(["b"]) == UnexpectedToken("a", "b", 0)

    def test_identity(self) -> None:
        """map(identity) is the same parser."""
        parser = symbol("a")
        tokens = ["a", "b"]

        assert parser.map(lambda x: x).run(tokens) == parser.run(tokens)


class TestBind:
    """Test Parser.bind()."""

    def test_sequences_two_parsers(self) -> None:
        """The second parser continues where the first stopped."""
        parser = symbol("(").bind(lambda _: symbol("x"), lambda open_, x: (open_, x))

        result = parser.parse(Cursor(["(", "x", ")"]))

        assert result == Ok(ParseResult(("(", "x"), Cursor(["(", "x", ")"], 2)))

    def test_second_parser_depends_on_first_value(self) -> None:
        """then() receives the first value."""
        repeat = next_token().bind(symbol, lambda first, second: first + second)

        assert repeat.run(["a", "a"]) == Ok("aa")
        assert repeat.run(["a", "b"]) == UnexpectedToken("a", "b", 1)

    def test_without_combine_keeps_second_value(self) -> None:
        """bind() without combine yields the second value."""
        assert symbol("a").bind(lambda _: symbol("b")).run(["a", "b"]) == Ok("b")

    def test_first_failure_short_circuits(self) -> None:
        """The second parser is never built when the first fails."""
        built = []

        def then(value: str) -> Parser[str]:
            built.append(value)
            return symbol("b")

        result = symbol("a").bind(then).run(["x", "b"])

        assert result == UnexpectedToken("a", "x", 0)
        assert built == []

    def test_second_failure_propagates(self) -> None:
        """The second step's diagnostic is returned."""
        result = symbol("a").bind(lambda _: symbol("b")).run(["a"])

        assert result == UnexpectedEndOfInput(expected="b", position=1)


class TestFilter:
    """Test Parser.filter()."""

    def test_accepts(self) -> None:
        """Accepted values pass through with their cursor."""
        parser = next_token().filter(lambda token: token != "(")

        assert parser.run(["x"]) == Ok("x")

    def test_rejects(self) -> None:
        """Rejected values become AssertionFailed."""
        parser = next_token().filter(lambda token: token != "(")

        assert parser.run(["("]) == AssertionFailed()

    def test_other_failures_unchanged(self) -> None:
        """filter() does not mask the underlying failure."""
        assert next_token().filter(bool).run([]) == UnexpectedEndOfInput(position=0)


# ============================================================================
# ALTERNATION AND SEQUENCING
# ============================================================================


class TestOrElse:
    """Test Parser.or_else() and the | operator."""

    def test_left_wins(self) -> None:
        """A successful left alternative is returned verbatim."""
        assert symbol("add").or_else(symbol("sub")).run(["add"]) == Ok("add")

    def test_right_after_left_fails(self) -> None:
        """The right alternative runs when the left one fails."""
        assert symbol("add").or_else(symbol("sub")).run(["sub"]) == Ok("sub")

    def test_right_starts_from_original_position(self) -> None:
        """A left branch that consumed tokens before failing is forgotten."""
        left = symbol("(").then(symbol("x"))
        right = symbol("(").then(symbol("y"))

        assert (left | right).run(["(", "y"]) == Ok("y")

    def test_both_fail_returns_right_failure(self) -> None:
        """When both fail, the right failure is reported."""
        result = (symbol("add") | symbol("sub")).run(["mul"])

        assert result == UnexpectedToken("sub", "mul", 0)

    def test_left_cursor_kept_on_success(self) -> None:
        """The winning branch's advanced cursor is returned."""
        parser = symbol("a").then(symbol("b")) | symbol("a")

        match parser.parse(Cursor(["a", "b", "c"])):
            case Ok(value=step):
                assert step.cursor.pos == 2
            case failure:
                raise AssertionError(failure)

    def test_name(self) -> None:
        """Alternations describe both branches."""
        assert (symbol("a") | symbol("b")).name == "(symbol('a') | symbol('b'))"


class TestThenSkip:
    """Test the keep-right / keep-left helpers."""

    def test_then_keeps_right(self) -> None:
        """then() yields the second value."""
        assert symbol("a").then(symbol("b")).run(["a", "b"]) == Ok("b")

    def test_skip_keeps_left(self) -> None:
        """skip() yields the first value but consumes both."""
        parser = symbol("a").skip(symbol("b"))

        match parser.parse(Cursor(["a", "b"])):
            case Ok(value=step):
                assert step.value == "a"
                assert step.cursor.is_eof
            case failure:
                raise AssertionError(failure)

    def test_skip_fails_if_second_fails(self) -> None:
        """Both parsers must succeed."""
        assert symbol("a").skip(symbol("b")).run(["a", "c"]) == UnexpectedToken("b", "c", 1)


# ============================================================================
# DEBUGGING HOOKS
# ============================================================================


class TestDebugHooks:
    """Test do() and log()."""

    def test_do_runs_after_success(self) -> None:
        """do() calls its action on success and returns the result unchanged."""
        calls = []
        parser = symbol("a").do(lambda: calls.append("hit"))

        assert parser.run(["a"]) == Ok("a")
        assert calls == ["hit"]

    def test_do_skipped_on_failure(self) -> None:
        """do() is not called when the parse fails."""
        calls = []
        parser = symbol("a").do(lambda: calls.append("hit"))

        assert parser.run(["b"]) == UnexpectedToken("a", "b", 0)
        assert calls == []

    def test_log_emits_record(self, caplog: pytest.LogCaptureFixture) -> None:
        """log() writes the message through the module logger."""
        parser = symbol("a").log("matched a", level=logging.INFO)

        with caplog.at_level(logging.INFO, logger="monadparse.parser.core"):
            parser.run(["a"])

        assert [record.getMessage() for record in caplog.records] == ["matched a"]
        assert caplog.records[0].levelno == logging.INFO

    def test_log_silent_on_failure(self, caplog: pytest.LogCaptureFixture) -> None:
        """Failed parses emit nothing from log()."""
        parser = symbol("a").log("matched a", level=logging.INFO)

        with caplog.at_level(logging.INFO, logger="monadparse.parser.core"):
            parser.run(["b"])

        assert caplog.records == []

    def test_lift_with_do(self) -> None:
        """Hooks work on parsers that consume nothing."""
        calls = []

        assert lift(1).do(lambda: calls.append(1)).run([]) == Ok(1)
        assert calls == [1]

    def test_diagnostic_not_built_when_debug_disabled(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """run() only renders the failure diagnostic when DEBUG is enabled."""
        built: list[int] = []

        @dataclass(frozen=True, slots=True)
        class CountingFailure(_Failure):
            @property
            def diagnostic(self) -> Diagnostic:
                built.append(1)
                return ErrorTemplate.assertion_failed()

        failure = CountingFailure()
        parser: Parser[Any] = Parser(lambda _cursor: failure, "counting")  # type: ignore[arg-type,return-value]

        with caplog.at_level(logging.INFO, logger="monadparse.parser.core"):
            assert parser.run(["a"]) is failure
        assert built == []

        with caplog.at_level(logging.DEBUG, logger="monadparse.parser.core"):
            parser.run(["a"])
        assert built == [1]


# ============================================================================
# CONCURRENCY
# ============================================================================


def _nested_lists() -> Parser[list[Any]]:
    """items := item*, item := "x" | "[" items "]"."""

    def items() -> Parser[list[Any]]:
        return many(item())

    def item() -> Parser[Any]:
        return symbol("x") | wrap("[", lazy(items), "]")

    return items()


class TestConcurrentUse:
    """One parser value shared by many threads."""

    def test_shared_parser_matches_sequential_results(self) -> None:
        """Concurrent runs over separate cursors agree with sequential runs."""
        parser = _nested_lists()
        inputs = [
            list(tokens)
            for length in range(7)
            for tokens in itertools.product(("x", "[", "]"), repeat=length)
        ]
        expected = [parser.run(tokens, consume_all=True) for tokens in inputs]

        with ThreadPoolExecutor(max_workers=8) as executor:
            actual = list(
                executor.map(lambda tokens: parser.run(tokens, consume_all=True), inputs)
            )

        assert actual == expected
        assert any(result.is_ok() for result in actual)
        assert any(result.is_fail() for result in actual)

    def test_shared_parser_under_repeated_load(self) -> None:
        """The same input parsed from many threads always gives one answer."""
        parser = _nested_lists()
        tokens = ["x", "[", "x", "[", "[", "x", "]", "]", "x", "]", "x"]
        expected = parser.run(tokens, consume_all=True)

        with ThreadPoolExecutor(max_workers=16) as executor:
            futures = [
                executor.submit(parser.run, tokens, consume_all=True) for _ in range(500)
            ]
            results = [future.result() for future in futures]

        assert expected == Ok(["x", ["x", [["x"]], "x"], "x"])
        assert all(result == expected for result in results)
