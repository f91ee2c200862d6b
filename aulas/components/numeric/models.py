"""
Numeric component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# --- Validation Errors ---


@dataclass(frozen=True)
class NumericValidationError:
    """Numeric argument validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class NumericInput:
    """Input for running one named numeric operation."""

    operation: str
    args: tuple[Any, ...] = ()


# --- Output Models ---


@dataclass(frozen=True)
class NumericOutput:
    """Output from a numeric operation."""

    operation: str
    value: Any
    errors: tuple[NumericValidationError, ...]
    success: bool
