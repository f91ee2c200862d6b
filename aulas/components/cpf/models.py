"""
CPF component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

# --- Validation Errors ---


@dataclass(frozen=True)
class CpfValidationError:
    """CPF input validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class ValidateCpfInput:
    """Input for validating a CPF, punctuated or digits only."""

    cpf: str


# --- Output Models ---


@dataclass(frozen=True)
class CpfValidationOutput:
    """Output from CPF validation."""

    cpf: str | None
    valid: bool
    errors: tuple[CpfValidationError, ...]
    success: bool
