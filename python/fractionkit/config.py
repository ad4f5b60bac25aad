# FractionKit - Configuration
# Copyright (c) 2024 FractionKit Contributors. All rights reserved.

"""Configuration settings for the FractionKit calculator."""

from __future__ import annotations
from dataclasses import dataclass
import logging


@dataclass
class Config:
    """
    Configuration for the interactive calculator.

    The Fraction type itself takes no configuration; these settings only
    affect how the front end reports results.

    Attributes:
        float_precision: Number of decimals shown for the float
                         approximation of a result.
        verbose: Log every parsed operand and operation at DEBUG level.
    """
    float_precision: int = 4
    verbose: bool = False

    def __post_init__(self):
        if isinstance(self.float_precision, bool) or not isinstance(self.float_precision, int):
            raise ValueError(
                f"float_precision must be an int, got {type(self.float_precision).__name__}"
            )
        if self.float_precision < 0:
            raise ValueError(
                f"float_precision must be non-negative, got {self.float_precision}"
            )

    @classmethod
    def default(cls) -> Config:
        """Four decimals, quiet logging (matches the classic calculator output)."""
        return cls()

    @classmethod
    def debug(cls) -> Config:
        """Verbose configuration for troubleshooting input handling."""
        return cls(verbose=True)

    @property
    def log_level(self) -> int:
        """Logging level implied by the verbose flag."""
        return logging.DEBUG if self.verbose else logging.WARNING

    def __repr__(self) -> str:
        return (
            f"Config(float_precision={self.float_precision}, "
            f"verbose={self.verbose})"
        )
