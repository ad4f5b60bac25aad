# Tests for calculator.py - interactive front end

import io
import logging

import pytest

from fractionkit.calculator import (
    OPERATIONS,
    apply_operation,
    calculate,
    cli,
    format_result,
    parse_fraction,
    run,
)
from fractionkit.config import Config
from fractionkit.exceptions import (
    DivisionByZeroError,
    InvalidInputError,
    UnknownOperationError,
    ZeroDenominatorError,
)
from fractionkit.fraction import Fraction


def scripted(*answers):
    """Return an input function that replays answers and records prompts."""
    remaining = list(answers)
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        return remaining.pop(0)

    fake_input.prompts = prompts
    return fake_input


class TestParseFraction:
    """Tests for operand parsing."""

    def test_integer(self):
        f = parse_fraction("5")
        assert (f.numerator, f.denominator) == (5, 1)

    def test_fraction(self):
        f = parse_fraction("3/4")
        assert (f.numerator, f.denominator) == (3, 4)

    def test_surrounding_whitespace_and_signs(self):
        f = parse_fraction("  -6/8 \n")
        assert (f.numerator, f.denominator) == (-6, 8)
        f = parse_fraction("1/-2")
        assert (f.numerator, f.denominator) == (-1, 2)
        f = parse_fraction("+7")
        assert (f.numerator, f.denominator) == (7, 1)

    def test_not_reduced(self):
        f = parse_fraction("4/2")
        assert (f.numerator, f.denominator) == (4, 2)

    def test_too_many_slashes(self):
        with pytest.raises(InvalidInputError, match="Invalid format"):
            parse_fraction("1/2/3")

    @pytest.mark.parametrize("text", [
        "abc", "1.5", "", "3/", "/4", "x/2",
        "1_000", "1_000/3", "٣", "٣/4", "3 / 4", "3 /4", "- 3", "0x10", "1e3",
    ])
    def test_invalid_integer(self, text):
        with pytest.raises(InvalidInputError, match="invalid integer") as exc_info:
            parse_fraction(text)
        assert exc_info.value.text == text
        assert exc_info.value.suggestion is not None

    def test_zero_denominator(self):
        with pytest.raises(ZeroDenominatorError):
            parse_fraction("1/0")


class TestApplyOperation:
    """Tests for operator dispatch."""

    def test_symbols(self):
        assert set(OPERATIONS) == {'+', '-', '*', '/'}

    @pytest.mark.parametrize(("symbol", "expected"), [
        ("+", Fraction(5, 6)),
        ("-", Fraction(1, 6)),
        ("*", Fraction(1, 6)),
        ("/", Fraction(3, 2)),
        (" + \n", Fraction(5, 6)),
    ])
    def test_dispatch(self, symbol, expected):
        assert apply_operation(Fraction(1, 2), symbol, Fraction(1, 3)) == expected

    def test_unknown_symbol(self):
        with pytest.raises(UnknownOperationError, match="Unknown operation") as exc_info:
            apply_operation(Fraction(1), "%", Fraction(2))
        assert isinstance(exc_info.value, InvalidInputError)
        assert exc_info.value.text == "%"

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            apply_operation(Fraction(1), "/", Fraction(0))


class TestFormatting:
    """Tests for result rendering."""

    def test_format_result(self):
        assert format_result(Fraction(10, 8)) == "5/4 = 1.2500"
        assert format_result(Fraction(4, 2)) == "2 = 2.0000"
        assert format_result(Fraction(-1, 3), precision=2) == "-1/3 = -0.33"

    def test_calculate_end_to_end(self):
        assert calculate("3/4", "+", "1/2") == "5/4 = 1.2500"

    def test_calculate_respects_precision(self):
        result = calculate("1", "/", "3", config=Config(float_precision=6))
        assert result == "1/3 = 0.333333"


def exhausted(prompt):
    """Input function for a closed stdin."""
    raise EOFError


class TestRun:
    """Tests for the prompt sequence."""

    def test_successful_session(self):
        fake_input = scripted("3/4", "1/2", "+")
        lines, errors = [], []
        status = run(input_fn=fake_input, output_fn=lines.append, error_fn=errors.append)
        assert status == 0
        assert lines[0] == "Fraction Calculator"
        assert lines[-1] == "\nResult: 5/4 = 1.2500"
        assert errors == []
        assert len(fake_input.prompts) == 3

    def test_bad_operand_stops_early(self):
        fake_input = scripted("3/0")
        lines, errors = [], []
        status = run(input_fn=fake_input, output_fn=lines.append, error_fn=errors.append)
        assert status == 1
        assert errors == ["Error: denominator cannot be zero"]
        assert not any(line.startswith("Error") for line in lines)
        assert len(fake_input.prompts) == 1

    def test_unknown_operation_has_no_prefix(self):
        errors = []
        status = run(input_fn=scripted("1", "2", "^"), output_fn=lambda line: None,
                     error_fn=errors.append)
        assert status == 1
        assert errors == ["Unknown operation! Use +, -, *, or /"]

    def test_division_by_zero_reported(self):
        errors = []
        status = run(input_fn=scripted("1/2", "0", "/"), output_fn=lambda line: None,
                     error_fn=errors.append)
        assert status == 1
        assert errors == ["Error: cannot divide by zero"]

    def test_end_of_input_reads_as_empty_line(self):
        errors = []
        status = run(input_fn=exhausted, output_fn=lambda line: None, error_fn=errors.append)
        assert status == 1
        assert len(errors) == 1
        assert errors[0].startswith("Error: invalid integer: ''")

    def test_end_of_input_at_operator(self):
        remaining = ["1", "2"]

        def partial_input(prompt):
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        errors = []
        status = run(input_fn=partial_input, output_fn=lambda line: None, error_fn=errors.append)
        assert status == 1
        assert errors == ["Unknown operation! Use +, -, *, or /"]

    def test_error_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="fractionkit.calculator"):
            run(input_fn=scripted("oops"), output_fn=lambda line: None,
                error_fn=lambda line: None)
        assert "Calculation aborted" in caplog.text


class TestCli:
    """Tests for the console entry point."""

    def test_cli_precision(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("1/3\n1/3\n+\n"))
        status = cli(["--precision", "2"])
        assert status == 0
        assert "Result: 2/3 = 0.67" in capsys.readouterr().out

    def test_cli_errors_go_to_stderr(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("1/2\n0\n/\n"))
        status = cli([])
        captured = capsys.readouterr()
        assert status == 1
        assert "Error: cannot divide by zero" in captured.err
        assert "Error" not in captured.out

    def test_cli_empty_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        status = cli([])
        assert status == 1
        assert "Error: invalid integer" in capsys.readouterr().err
