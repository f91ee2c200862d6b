"""
CPF component - checksum validation of Brazilian taxpayer IDs.

Shell Layer - normalizes input and converts argument errors into output
models.
"""

from __future__ import annotations

from aulas.domain.errors import InvalidArgumentError

from ._impl import normalize_cpf, validate_cpf_digits, validate_cpf_digits_alt
from .models import CpfValidationError, CpfValidationOutput, ValidateCpfInput


def run_validate(inp: ValidateCpfInput) -> CpfValidationOutput:
    """
    Validate a CPF with both checksum algorithms.

    Punctuation such as "111.444.777-35" is stripped first. The CPF is
    valid only when both algorithms accept it.

    Returns:
        CpfValidationOutput. success is False when the input is malformed;
        valid is False when it is well formed but the check digits are wrong.
    """
    try:
        cpf = normalize_cpf(inp.cpf)
        valid = validate_cpf_digits(cpf) and validate_cpf_digits_alt(cpf)
    except InvalidArgumentError as e:
        error = CpfValidationError(code="invalid_cpf", message=str(e), field="cpf")
        return CpfValidationOutput(cpf=None, valid=False, errors=(error,), success=False)

    return CpfValidationOutput(cpf=cpf, valid=valid, errors=(), success=True)
