# FractionKit
# Copyright (c) 2024 FractionKit Contributors. All rights reserved.

"""
FractionKit - Exact Fraction Arithmetic.

This package provides an exact rational number type with explicit reduction,
value-based comparison and checked 64-bit components, plus a small
interactive calculator built on top of it.

Example:
    >>> import fractionkit as fk
    >>> half = fk.Fraction(1, 2)
    >>> third = fk.Fraction(1, 3)
    >>> print(half + third)
    5/6
    >>> (half / third).reduce()
    Fraction(3, 2)

Key Features:
    - Sign always carried by the numerator
    - Equality and ordering by cross-multiplication, never via floats
    - Overflow of the 64-bit components raises instead of wrapping
    - Named methods (add, divide, ...) and matching operators
"""

__version__ = "0.1.0"

# Core value type
from .fraction import (
    Fraction,
    gcd,
    INT64_MIN,
    INT64_MAX,
)

# Configuration
from .config import Config

# Calculator front end
from .calculator import (
    OPERATIONS,
    parse_fraction,
    apply_operation,
    format_result,
    calculate,
    run,
)

# Exceptions
from .exceptions import (
    FractionErrorKind,
    FractionError,
    ZeroDenominatorError,
    DivisionByZeroError,
    FractionOverflowError,
    InvalidInputError,
    UnknownOperationError,
    ERROR_MESSAGES,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Fraction",
    "gcd",
    "INT64_MIN",
    "INT64_MAX",
    # Configuration
    "Config",
    # Calculator
    "OPERATIONS",
    "parse_fraction",
    "apply_operation",
    "format_result",
    "calculate",
    "run",
    # Exceptions
    "FractionErrorKind",
    "FractionError",
    "ZeroDenominatorError",
    "DivisionByZeroError",
    "FractionOverflowError",
    "InvalidInputError",
    "UnknownOperationError",
    "ERROR_MESSAGES",
]
