"""
CPF checksum - validation of the two trailing check digits.

Functional Core - pure functions, no I/O.

Key behaviors:
- A CPF is an 11-character string of ASCII digits
- Check digits are weighted sums of the first nine (ten) digits,
  mapped through % 11 % 10
- Two derivations of the same checksum are provided and always agree
- Malformed input raises InvalidArgumentError instead of returning False
"""

from __future__ import annotations

import re

from aulas.domain.errors import InvalidArgumentError

CPF_LENGTH = 11
DIGITS = frozenset("0123456789")

_PUNCTUATION = re.compile(r"[.\-\s]")


def _contains_only_digits(cpf: str) -> bool:
    return all(c in DIGITS for c in cpf)


def _validate_cpf(cpf: str | None) -> str:
    if cpf is None:
        raise InvalidArgumentError("argument is None")
    if len(cpf) != CPF_LENGTH:
        raise InvalidArgumentError(f"CPF must have {CPF_LENGTH} digits: {cpf}")
    if not _contains_only_digits(cpf):
        raise InvalidArgumentError(f"CPF must contain only digits (0 to 9): {cpf}")
    return cpf


def cpf_to_digits(cpf: str) -> list[int]:
    """Convert a digit string into a list of ints, one per character."""
    return [int(c) for c in cpf]


def validate_cpf_digits(cpf: str | None) -> bool:
    """
    Check the CPF check digits with positional weights (algorithm 1).

    Digit 10 is d0 + 2*d1 + ... + 9*d8 and digit 11 is
    d1 + 2*d2 + ... + 9*d9, each taken % 11 % 10.

    Raises:
        InvalidArgumentError: If cpf is None, not 11 characters long, or
            contains anything other than digits.
    """
    d = cpf_to_digits(_validate_cpf(cpf))
    partial_10 = d[0]
    partial_11 = d[1]

    for i in range(1, 9):
        partial_10 += d[i] * (i + 1)
    for i in range(2, 10):
        partial_11 += d[i] * i

    digit_10 = (partial_10 % 11) % 10
    digit_11 = (partial_11 % 11) % 10

    return digit_10 == d[9] and digit_11 == d[10]


def validate_cpf_digits_alt(cpf: str | None) -> bool:
    """
    Check the CPF check digits with running sums (algorithm 2).

    Accumulating prefix sums from digit 9 backwards yields the same weighted
    totals as algorithm 1 without any multiplication by position.

    Raises:
        InvalidArgumentError: Same conditions as validate_cpf_digits.
    """
    d = cpf_to_digits(_validate_cpf(cpf))
    partial_11 = d[8]
    partial_10 = partial_11

    for i in range(7, -1, -1):
        partial_11 += d[i]
        partial_10 += partial_11

    digit_10 = (partial_10 % 11) % 10
    digit_11 = ((partial_10 - partial_11 + 9 * d[9]) % 11) % 10

    return digit_10 == d[9] and digit_11 == d[10]


def compute_check_digits(first_nine: str | None) -> str:
    """
    Compute the two check digits for a 9-digit CPF base.

    Example: "111444777" -> "35".
    """
    if first_nine is None:
        raise InvalidArgumentError("argument is None")
    if len(first_nine) != 9 or not _contains_only_digits(first_nine):
        raise InvalidArgumentError(f"CPF base must have 9 digits: {first_nine}")

    d = cpf_to_digits(first_nine)
    digit_10 = sum(d[i] * (i + 1) for i in range(9)) % 11 % 10
    digit_11 = (sum(d[i] * i for i in range(1, 9)) + 9 * digit_10) % 11 % 10

    return f"{digit_10}{digit_11}"


def normalize_cpf(text: str | None) -> str:
    """
    Remove CPF punctuation: "111.444.777-35" -> "11144477735".

    Only dots, hyphens and whitespace are removed; letters and other symbols
    are kept so that validation rejects them.
    """
    if text is None:
        raise InvalidArgumentError("argument is None")
    return _PUNCTUATION.sub("", text)


def format_cpf(cpf: str) -> str:
    """Render an 11-digit CPF as '111.444.777-35'."""
    _validate_cpf(cpf)
    return f"{cpf[:3]}.{cpf[3:6]}.{cpf[6:9]}-{cpf[9:]}"
