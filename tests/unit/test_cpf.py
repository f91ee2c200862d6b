"""
Tests for CPF check digit validation.

Both checksum algorithms are exercised separately and cross-checked: they
must agree on every well formed 11-digit string.
"""

from __future__ import annotations

import random

import pytest

from aulas.components.cpf import (
    compute_check_digits,
    cpf_to_digits,
    format_cpf,
    normalize_cpf,
    validate_cpf_digits,
    validate_cpf_digits_alt,
)
from aulas.domain.errors import InvalidArgumentError

VALID_CPFS = ("11144477735", "52998224725")
VALIDATORS = (validate_cpf_digits, validate_cpf_digits_alt)


def single_digit_mutations(cpf: str) -> list[str]:
    """Every string differing from cpf in exactly one digit."""
    mutations = []
    for position, original in enumerate(cpf):
        for digit in "0123456789":
            if digit != original:
                mutations.append(cpf[:position] + digit + cpf[position + 1 :])
    return mutations


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20190304)


class TestValidCpf:
    """Well known valid values."""

    @pytest.mark.parametrize("cpf", VALID_CPFS)
    @pytest.mark.parametrize("validator", VALIDATORS)
    def test_accepted(self, validator, cpf: str) -> None:
        assert validator(cpf) is True

    @pytest.mark.parametrize("validator", VALIDATORS)
    def test_wrong_check_digit_rejected(self, validator) -> None:
        assert validator("11144477736") is False
        assert validator("11144477725") is False


class TestMutations:
    """Changing any single digit of a valid CPF breaks the checksum."""

    @pytest.mark.parametrize("cpf", VALID_CPFS)
    def test_every_mutation_rejected(self, cpf: str) -> None:
        for mutated in single_digit_mutations(cpf):
            assert not (validate_cpf_digits(mutated) and validate_cpf_digits_alt(mutated))


class TestAlgorithmsAgree:
    """Algorithm 1 and algorithm 2 give the same answer."""

    def test_random_strings(self, rng: random.Random) -> None:
        for _ in range(2000):
            cpf = "".join(rng.choice("0123456789") for _ in range(11))
            assert validate_cpf_digits(cpf) == validate_cpf_digits_alt(cpf)

    def test_generated_valid_cpfs(self, rng: random.Random) -> None:
        for _ in range(500):
            base = "".join(rng.choice("0123456789") for _ in range(9))
            cpf = base + compute_check_digits(base)
            assert validate_cpf_digits(cpf) is True
            assert validate_cpf_digits_alt(cpf) is True

    @pytest.mark.parametrize("cpf", VALID_CPFS)
    def test_mutations(self, cpf: str) -> None:
        for mutated in single_digit_mutations(cpf):
            assert validate_cpf_digits(mutated) == validate_cpf_digits_alt(mutated)


class TestMalformedInput:
    """Malformed input raises instead of returning False."""

    @pytest.mark.parametrize(
        "cpf",
        [
            "",
            "1114447773",
            "111444777355",
            "1114447773a",
            "111.444.777-35",
            " 1114447773",
        ],
    )
    @pytest.mark.parametrize("validator", VALIDATORS)
    def test_raises(self, validator, cpf: str) -> None:
        with pytest.raises(InvalidArgumentError):
            validator(cpf)

    @pytest.mark.parametrize("validator", VALIDATORS)
    def test_none_raises(self, validator) -> None:
        with pytest.raises(InvalidArgumentError):
            validator(None)


class TestHelpers:
    """Digit conversion, check digit computation and formatting."""

    def test_cpf_to_digits(self) -> None:
        assert cpf_to_digits("11144477735") == [1, 1, 1, 4, 4, 4, 7, 7, 7, 3, 5]

    def test_compute_check_digits(self) -> None:
        assert compute_check_digits("111444777") == "35"
        assert compute_check_digits("529982247") == "25"

    @pytest.mark.parametrize("base", ["", "12345678", "1234567890", "12345678a"])
    def test_compute_check_digits_invalid(self, base: str) -> None:
        with pytest.raises(InvalidArgumentError):
            compute_check_digits(base)

    def test_normalize(self) -> None:
        assert normalize_cpf("111.444.777-35") == "11144477735"
        assert normalize_cpf(" 111 444 777 35 ") == "11144477735"

    def test_format(self) -> None:
        assert format_cpf("11144477735") == "111.444.777-35"

    def test_format_invalid(self) -> None:
        with pytest.raises(InvalidArgumentError):
            format_cpf("111.444.777-35")

    def test_normalize_keeps_letters(self) -> None:
        assert normalize_cpf("abc111.444.777-35") == "abc11144477735"

    def test_compute_check_digits_none(self) -> None:
        with pytest.raises(InvalidArgumentError):
            compute_check_digits(None)
