# FractionKit - Exceptions
# Copyright (c) 2024 FractionKit Contributors. All rights reserved.

"""Exception hierarchy for FractionKit."""

from __future__ import annotations
from enum import Enum
from typing import Optional, Any


class FractionErrorKind(Enum):
    """The closed set of ways a fraction operation can fail."""
    ZERO_DENOMINATOR = "zero_denominator"
    DIVISION_BY_ZERO = "division_by_zero"
    OVERFLOW = "overflow"


# Default messages for each failure kind
ERROR_MESSAGES = {
    FractionErrorKind.ZERO_DENOMINATOR: "denominator cannot be zero",
    FractionErrorKind.DIVISION_BY_ZERO: "cannot divide by zero",
    FractionErrorKind.OVERFLOW: "integer overflow in fraction arithmetic",
}


class FractionError(Exception):
    """Base class for all FractionKit exceptions."""

    kind: Optional[FractionErrorKind] = None

    def __init__(self, message: Optional[str] = None):
        if message is None and self.kind is not None:
            message = ERROR_MESSAGES[self.kind]
        super().__init__(message or "")


class ZeroDenominatorError(FractionError, ValueError):
    """Raised when a fraction is constructed with a zero denominator."""
    kind = FractionErrorKind.ZERO_DENOMINATOR


class DivisionByZeroError(FractionError, ZeroDivisionError):
    """Raised when dividing by, or taking the reciprocal of, a zero fraction."""
    kind = FractionErrorKind.DIVISION_BY_ZERO


class FractionOverflowError(FractionError, OverflowError):
    """Raised when a component leaves the signed 64-bit range."""
    kind = FractionErrorKind.OVERFLOW

    def __init__(self, value: int, operation: Optional[str] = None):
        message = ERROR_MESSAGES[self.kind]
        if operation:
            message += f" during {operation}"
        message += f": {value} does not fit in 64 bits"
        super().__init__(message)
        self.value = value
        self.operation = operation


class InvalidInputError(FractionError, ValueError):
    """Raised when calculator input cannot be understood."""

    def __init__(
        self,
        message: str,
        text: Optional[Any] = None,
        suggestion: Optional[str] = None,
    ):
        full_message = message
        if suggestion:
            full_message += f"\n  Suggestion: {suggestion}"
        super().__init__(full_message)
        self.text = text
        self.suggestion = suggestion


class UnknownOperationError(InvalidInputError):
    """Raised when the calculator is given an operator it does not know."""

    def __init__(self, symbol: str):
        super().__init__("Unknown operation! Use +, -, *, or /", text=symbol)
