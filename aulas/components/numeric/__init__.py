"""
Numeric component - elementary numeric algorithms.

Remainder, product and power built from simpler operations, digit
properties, series approximations, roots, primes, GCD, sieve, Horner
evaluation and Fibonacci.
"""

from ._impl import (
    SIEVE_SQRT_ITERATIONS,
    evaluate_polynomial,
    factorial,
    gcd_euclidean,
    gcd_subtractive,
    golden_ratio_approximation,
    has_property_153,
    has_property_3025,
    integer_power,
    integer_product,
    integer_remainder,
    integer_square_root,
    is_perfect_square,
    is_prime,
    is_within_range,
    natural_log_approximation,
    nth_fibonacci,
    pi_approximation,
    primes_from_sieve,
    sieve_of_eratosthenes,
    square_root,
    sum_of_naturals,
)
from .component import OPERATIONS, run
from .models import NumericInput, NumericOutput, NumericValidationError

__all__ = [
    # Entry points
    "run",
    "OPERATIONS",
    # Models
    "NumericInput",
    "NumericOutput",
    "NumericValidationError",
    # Functions
    "SIEVE_SQRT_ITERATIONS",
    "evaluate_polynomial",
    "factorial",
    "gcd_euclidean",
    "gcd_subtractive",
    "golden_ratio_approximation",
    "has_property_153",
    "has_property_3025",
    "integer_power",
    "integer_product",
    "integer_remainder",
    "integer_square_root",
    "is_perfect_square",
    "is_prime",
    "is_within_range",
    "natural_log_approximation",
    "nth_fibonacci",
    "pi_approximation",
    "primes_from_sieve",
    "sieve_of_eratosthenes",
    "square_root",
    "sum_of_naturals",
]
