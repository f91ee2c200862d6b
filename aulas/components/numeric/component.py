"""
Numeric component - elementary numeric algorithms.

Shell Layer - dispatches named operations and converts argument errors
into output models.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from aulas.domain.errors import InvalidArgumentError

from . import _impl
from .models import NumericInput, NumericOutput, NumericValidationError

OPERATIONS: dict[str, Callable[..., Any]] = {
    "integer_remainder": _impl.integer_remainder,
    "integer_product": _impl.integer_product,
    "integer_power": _impl.integer_power,
    "is_within_range": _impl.is_within_range,
    "has_property_3025": _impl.has_property_3025,
    "has_property_153": _impl.has_property_153,
    "sum_of_naturals": _impl.sum_of_naturals,
    "factorial": _impl.factorial,
    "pi_approximation": _impl.pi_approximation,
    "natural_log_approximation": _impl.natural_log_approximation,
    "golden_ratio_approximation": _impl.golden_ratio_approximation,
    "is_perfect_square": _impl.is_perfect_square,
    "square_root": _impl.square_root,
    "integer_square_root": _impl.integer_square_root,
    "is_prime": _impl.is_prime,
    "gcd_euclidean": _impl.gcd_euclidean,
    "gcd_subtractive": _impl.gcd_subtractive,
    "sieve_of_eratosthenes": _impl.sieve_of_eratosthenes,
    "primes_from_sieve": _impl.primes_from_sieve,
    "evaluate_polynomial": _impl.evaluate_polynomial,
    "nth_fibonacci": _impl.nth_fibonacci,
}


def run(inp: NumericInput) -> NumericOutput:
    """
    Run a named numeric operation.

    Args:
        inp: Operation name and positional arguments.

    Returns:
        NumericOutput with the computed value, or errors if the operation is
        unknown, its arguments are outside the operation's domain, or the
        argument count or types do not fit the operation.
    """
    func = OPERATIONS.get(inp.operation)
    if func is None:
        error = NumericValidationError(
            code="unknown_operation",
            message=f"Unknown operation: {inp.operation}",
            field="operation",
        )
        return NumericOutput(
            operation=inp.operation, value=None, errors=(error,), success=False
        )

    try:
        value = func(*inp.args)
    except (InvalidArgumentError, TypeError) as e:
        error = NumericValidationError(
            code="invalid_argument",
            message=str(e),
            field="args",
        )
        return NumericOutput(
            operation=inp.operation, value=None, errors=(error,), success=False
        )

    return NumericOutput(operation=inp.operation, value=value, errors=(), success=True)
