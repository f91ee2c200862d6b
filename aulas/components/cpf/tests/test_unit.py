"""
CPF component unit tests.
"""

from __future__ import annotations

import pytest

from aulas.components.cpf import ValidateCpfInput, run_validate


class TestRunValidate:
    def test_valid_digits_only(self) -> None:
        result = run_validate(ValidateCpfInput(cpf="11144477735"))
        assert result.success
        assert result.valid
        assert result.cpf == "11144477735"

    def test_valid_punctuated(self) -> None:
        result = run_validate(ValidateCpfInput(cpf="529.982.247-25"))
        assert result.success
        assert result.valid
        assert result.cpf == "52998224725"

    def test_wrong_check_digits(self) -> None:
        result = run_validate(ValidateCpfInput(cpf="111.444.777-36"))
        assert result.success
        assert not result.valid
        assert result.errors == ()

    def test_malformed(self) -> None:
        result = run_validate(ValidateCpfInput(cpf="111.444.777"))
        assert not result.success
        assert not result.valid
        assert result.cpf is None
        assert result.errors[0].code == "invalid_cpf"
        assert result.errors[0].field == "cpf"

    @pytest.mark.parametrize("cpf", ["abc11144477735xyz", "111a444777-35", "111/444/777-35"])
    def test_letters_and_symbols_rejected(self, cpf: str) -> None:
        result = run_validate(ValidateCpfInput(cpf=cpf))
        assert not result.success
        assert not result.valid
        assert result.errors[0].code == "invalid_cpf"

    def test_none_rejected(self) -> None:
        result = run_validate(ValidateCpfInput(cpf=None))  # type: ignore[arg-type]
        assert not result.success
        assert result.errors[0].code == "invalid_cpf"
