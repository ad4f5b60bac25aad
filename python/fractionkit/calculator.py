# FractionKit - Calculator
# Copyright (c) 2024 FractionKit Contributors. All rights reserved.

"""
Interactive fraction calculator built on the Fraction type.

Reads two operands of the form ``<int>`` or ``<int>/<int>`` and one of the
operators ``+ - * /``, then prints the exact result followed by its
floating-point approximation.

Example:
    >>> from fractionkit.calculator import calculate
    >>> calculate("3/4", "+", "1/2")
    '5/4 = 1.2500'
"""

from __future__ import annotations
import functools
import logging
import re
import sys
from typing import Callable, Optional

import plac

from .config import Config
from .exceptions import FractionError, InvalidInputError, UnknownOperationError
from .fraction import Fraction


logger = logging.getLogger(__name__)

BANNER = "Fraction Calculator"

# Operator symbols understood by the calculator
OPERATIONS: dict[str, Callable[[Fraction, Fraction], Fraction]] = {
    '+': Fraction.add,
    '-': Fraction.subtract,
    '*': Fraction.multiply,
    '/': Fraction.divide,
}

# Operands are plain decimal integers with an optional sign
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _parse_int(part: str, text: str) -> int:
    if not _INTEGER_RE.fullmatch(part):
        raise InvalidInputError(
            f"invalid integer: '{part}'",
            text=text,
            suggestion="Use whole numbers such as 3/4 or -5.",
        )
    return int(part)


def parse_fraction(text: str) -> Fraction:
    """
    Parse ``"<int>"`` or ``"<int>/<int>"`` into a Fraction.

    Surrounding whitespace is ignored; spaces inside the operand are
    rejected. The result is not reduced.

    Raises:
        InvalidInputError: If the text is not one of the accepted forms.
        ZeroDenominatorError: If the denominator is 0.
    """
    stripped = text.strip()
    if '/' in stripped:
        parts = stripped.split('/')
        if len(parts) != 2:
            raise InvalidInputError("Invalid format", text=text)
        numerator = _parse_int(parts[0], text)
        denominator = _parse_int(parts[1], text)
        return Fraction(numerator, denominator)
    return Fraction.from_integer(_parse_int(stripped, text))


def apply_operation(left: Fraction, symbol: str, right: Fraction) -> Fraction:
    """
    Apply the operator named by symbol to two fractions.

    Raises:
        UnknownOperationError: If symbol is not one of + - * /.
        DivisionByZeroError: For ``/`` with a zero right operand.
    """
    try:
        operation = OPERATIONS[symbol.strip()]
    except KeyError:
        raise UnknownOperationError(symbol) from None
    return operation(left, right)


def format_result(fraction: Fraction, precision: int = 4) -> str:
    """Render ``<canonical form> = <float approximation>``."""
    return f"{fraction} = {fraction.to_decimal_string(precision)}"


def calculate(
    left_text: str,
    symbol: str,
    right_text: str,
    config: Optional[Config] = None,
) -> str:
    """Parse both operands, apply the operator and format the result."""
    config = config or Config.default()
    left = parse_fraction(left_text)
    right = parse_fraction(right_text)
    logger.debug("Computing %r %s %r", left, symbol.strip(), right)
    result = apply_operation(left, symbol, right)
    return format_result(result, config.float_precision)


def _prompt(input_fn: Callable[[str], str], prompt: str) -> str:
    # End of input reads as an empty line
    try:
        return input_fn(prompt)
    except EOFError:
        return ""


def run(
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
    config: Optional[Config] = None,
    error_fn: Optional[Callable[[str], None]] = None,
) -> int:
    """
    Run one interactive calculation.

    Prompts for two fractions and an operator. The first error aborts the
    session: an ``Error: ...`` line (or the bare usage hint for an unknown
    operator) is written to error_fn, which defaults to stderr. Running
    out of input counts as an empty answer.

    Returns:
        Exit status: 0 on success, 1 after an error.
    """
    config = config or Config.default()
    error_fn = error_fn or functools.partial(print, file=sys.stderr)
    output_fn(BANNER)
    output_fn("=" * len(BANNER))

    try:
        first = parse_fraction(_prompt(input_fn, "Enter first fraction (e.g., 3/4 or 5): "))
        second = parse_fraction(_prompt(input_fn, "Enter second fraction (e.g., 1/2 or 3): "))
        symbol = _prompt(input_fn, "Enter operation (+, -, *, /): ")
        result = apply_operation(first, symbol, second)
    except UnknownOperationError as e:
        logger.warning("Calculation aborted: %s", e)
        error_fn(str(e))
        return 1
    except FractionError as e:
        logger.warning("Calculation aborted: %s", e)
        error_fn(f"Error: {e}")
        return 1

    logger.debug("Result %r", result)
    output_fn(f"\nResult: {format_result(result, config.float_precision)}")
    return 0


@plac.annotations(
    precision=('decimals shown for the float approximation', 'option', 'p', int),
    verbose=('log parsing and arithmetic steps', 'flag', 'v'),
)
def main(precision=4, verbose=False):
    """Interactive exact fraction calculator."""
    config = Config(float_precision=precision, verbose=verbose)
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    return run(config=config)


def cli(argv: Optional[list[str]] = None) -> int:
    """Console script entry point."""
    return plac.call(main, argv)


if __name__ == '__main__':
    sys.exit(cli())
