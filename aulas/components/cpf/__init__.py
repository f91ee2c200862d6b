"""
CPF component - Brazilian taxpayer ID checksum.
"""

from ._impl import (
    CPF_LENGTH,
    compute_check_digits,
    cpf_to_digits,
    format_cpf,
    normalize_cpf,
    validate_cpf_digits,
    validate_cpf_digits_alt,
)
from .component import run_validate
from .models import CpfValidationError, CpfValidationOutput, ValidateCpfInput

__all__ = [
    # Entry points
    "run_validate",
    # Models
    "ValidateCpfInput",
    "CpfValidationOutput",
    "CpfValidationError",
    # Functions
    "CPF_LENGTH",
    "compute_check_digits",
    "cpf_to_digits",
    "format_cpf",
    "normalize_cpf",
    "validate_cpf_digits",
    "validate_cpf_digits_alt",
]
