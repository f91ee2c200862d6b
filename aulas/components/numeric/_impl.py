"""
Numeric algorithms - elementary integer and series computations.

Functional Core - pure functions, no I/O.

Key behaviors:
- Every function validates its arguments at entry and raises
  InvalidArgumentError before doing any work
- Arithmetic is built from simpler operations where the exercise asks for it
  (remainder by subtraction, product by addition, power by products)
- Iterative implementations only; nothing recurses
- The sieve returns a fresh list and leaves its input untouched
"""

from __future__ import annotations

from collections.abc import Sequence

from aulas.domain.errors import InvalidArgumentError

# Newton steps used when the sieve needs floor(sqrt(len)).
SIEVE_SQRT_ITERATIONS = 100


# --- Basic Arithmetic ---


def integer_remainder(numerator: int, denominator: int) -> int:
    """
    Remainder of numerator / denominator computed by repeated subtraction.

    A zero denominator leaves the numerator unchanged.

    Raises:
        InvalidArgumentError: If numerator <= 0 or denominator < 0.
    """
    if numerator <= 0 or denominator < 0:
        raise InvalidArgumentError(
            f"invalid numerator or denominator: numerator = {numerator}, "
            f"denominator = {denominator}"
        )

    if denominator == 0:
        return numerator

    remainder = numerator
    while remainder >= denominator:
        remainder -= denominator

    return remainder


def integer_product(a: int, b: int) -> int:
    """
    Product of two non-negative integers by repeated addition.

    The larger operand is added to itself as many times as the smaller one.
    """
    if a < 0 or b < 0:
        raise InvalidArgumentError(f"invalid operand: a = {a}, b = {b}")

    times, addend = (b, a) if b < a else (a, b)

    product = 0
    for _ in range(times):
        product += addend
    return product


def integer_power(base: int, exponent: int) -> int:
    """Base raised to exponent via repeated integer_product calls."""
    if base < 0 or exponent < 0:
        raise InvalidArgumentError(
            f"invalid base or exponent: base = {base}, exponent = {exponent}"
        )

    power = 1
    for _ in range(exponent):
        power = integer_product(power, base)

    return power


def is_within_range(n: int, lo: int, hi: int) -> bool:
    """Inclusive range check: lo <= n <= hi."""
    return lo <= n <= hi


# --- Digit Properties ---


def has_property_3025(n: int) -> bool:
    """
    Check the 3025 property: 30 + 25 = 55 and 55 ** 2 = 3025.

    Args:
        n: Number in [0, 9999].

    Returns:
        True if the square of the sum of both halves equals n.
    """
    if not is_within_range(n, 0, 9999):
        raise InvalidArgumentError(f"invalid number: {n}")

    upper, lower = divmod(n, 100)
    return n == integer_power(upper + lower, 2)


def has_property_153(n: int) -> bool:
    """
    Check the 153 property: 1 ** 3 + 5 ** 3 + 3 ** 3 = 153.

    Args:
        n: Three-digit number in [100, 999].

    Returns:
        True if the sum of the cubes of its digits equals n.
    """
    if not is_within_range(n, 100, 999):
        raise InvalidArgumentError(f"invalid number: {n}")

    hundreds, rest = divmod(n, 100)
    tens, units = divmod(rest, 10)
    total = (
        integer_power(hundreds, 3)
        + integer_power(tens, 3)
        + integer_power(units, 3)
    )

    return total == n


# --- Sums and Products ---


def sum_of_naturals(n: int) -> int:
    """Sum 1 + 2 + ... + n."""
    if n < 1:
        raise InvalidArgumentError(f"invalid number: {n}")

    total = 1
    for i in range(2, n + 1):
        total += i

    return total


def factorial(n: int) -> int:
    """n! computed iteratively."""
    if n < 1:
        raise InvalidArgumentError(f"invalid number: {n}")

    result = 1
    for i in range(2, n + 1):
        result *= i

    return result


# --- Series Approximations ---


def pi_approximation(terms: int) -> float:
    """
    Approximate pi with the first `terms` terms of the Leibniz series.

    More terms give a closer value.
    """
    if terms < 1:
        raise InvalidArgumentError(f"invalid terms: {terms}")

    pi = 0.0
    sign = -1.0
    divisor = -1.0

    for _ in range(terms):
        divisor += 2
        sign = -sign
        pi += 4 * sign / divisor

    return pi


def natural_log_approximation(x: float, terms: int) -> float:
    """
    Approximate the number whose natural logarithm is x, i.e. e ** x.

    Sums the Taylor series 1 + x + x**2/2! + ... + x**terms/terms!.
    With x = 1 this converges to Euler's number.

    Args:
        x: Exponent, at least 1.
        terms: Highest power in the series, at least 2.

    Returns:
        The partial sum of the series.
    """
    if x < 1 or terms < 2:
        raise InvalidArgumentError(
            f"invalid exponent or terms: x = {x}, terms = {terms}"
        )

    total = 1.0 + x
    numerator = float(x)
    denominator = 1.0

    for i in range(2, int(terms) + 1):
        numerator *= x
        denominator *= i
        total += numerator / denominator

    return total


def golden_ratio_approximation(a: float, b: float, iterations: int) -> float:
    """
    Approximate the golden ratio from two seeds 0 <= a < b.

    Each step replaces (numerator, denominator) with
    (numerator + denominator, numerator).
    """
    if a < 0 or a >= b or iterations <= 0:
        raise InvalidArgumentError(
            f"invalid a, b or iterations: a = {a}, b = {b}, "
            f"iterations = {iterations}"
        )

    numerator = float(b)
    denominator = float(a)
    for _ in range(int(iterations)):
        numerator, denominator = numerator + denominator, numerator

    return numerator / denominator


# --- Roots and Squares ---


def is_perfect_square(n: int) -> bool:
    """Check whether n is a perfect square by summing consecutive odd numbers."""
    if n < 1:
        raise InvalidArgumentError(f"invalid number: {n}")

    total = 1
    odd = 3
    while total < n:
        total += odd
        odd += 2

    return total == n


def square_root(radicand: float, iterations: int) -> float:
    """
    Square root by Newton's method, starting from 1.

    Runs iterations + 1 refinement steps; more iterations give a closer value.
    """
    if radicand <= 0:
        raise InvalidArgumentError(f"invalid radicand: {radicand}")
    if iterations < 0:
        raise InvalidArgumentError(f"invalid iterations: {iterations}")

    root = 1.0
    for _ in range(iterations + 1):
        root = (root + radicand / root) / 2

    return root


def integer_square_root(
    radicand: float, iterations: int = SIEVE_SQRT_ITERATIONS
) -> int:
    """Floor of square_root(radicand, iterations)."""
    return int(square_root(radicand, iterations))


# --- Primes and Divisors ---


def is_prime(n: int) -> bool:
    """Primality by trial division."""
    if n <= 1:
        raise InvalidArgumentError(f"invalid number: {n}")

    for divisor in range(2, n):
        if integer_remainder(n, divisor) == 0:
            return False

    return True


def _validate_gcd_arguments(a: int, b: int) -> None:
    """Both GCD variants require 0 < b <= a."""
    if b > a or b <= 0:
        raise InvalidArgumentError(f"invalid a or b: a = {a}, b = {b}")


def gcd_euclidean(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's remainder algorithm."""
    _validate_gcd_arguments(a, b)

    while b != 0:
        a, b = b, integer_remainder(a, b)

    return a


def gcd_subtractive(a: int, b: int) -> int:
    """Greatest common divisor by repeated subtraction."""
    _validate_gcd_arguments(a, b)

    while a != b:
        if a > b:
            a -= b
        else:
            b -= a

    return a


def sieve_of_eratosthenes(zeros: Sequence[int]) -> list[int]:
    """
    Mark composite numbers with the Sieve of Eratosthenes.

    Index i stands for the number i. In the returned list every composite
    index holds 1; indices 0 and 1 and every prime index stay 0. The input
    sequence is not modified.

    Args:
        zeros: Sequence of at least two elements, all equal to 0.

    Returns:
        A new list with composite positions marked.

    Raises:
        InvalidArgumentError: If zeros is too short or holds a non-zero value.
    """
    if len(zeros) <= 1:
        raise InvalidArgumentError(f"invalid length: {len(zeros)}")
    for index, value in enumerate(zeros):
        if value != 0:
            raise InvalidArgumentError(f"invalid zeros[{index}]: {value}")

    marks = list(zeros)
    limit = integer_square_root(len(marks))
    for i in range(2, limit + 1):
        if marks[i] == 0:
            for multiple in range(2 * i, len(marks), i):
                marks[multiple] = 1

    return marks


def primes_from_sieve(marks: Sequence[int]) -> list[int]:
    """Indices >= 2 left unmarked by sieve_of_eratosthenes."""
    return [i for i in range(2, len(marks)) if marks[i] == 0]


# --- Polynomials and Sequences ---


def evaluate_polynomial(x: int, coefficients: Sequence[int]) -> int:
    """
    Evaluate a polynomial at x using Horner's method.

    Coefficients are ordered lowest degree first: [c0, c1, c2] is
    c0 + c1*x + c2*x**2.
    """
    if len(coefficients) < 1:
        raise InvalidArgumentError("invalid polynomial degree: no coefficients")

    result = coefficients[-1]
    for coefficient in reversed(coefficients[:-1]):
        result = result * x + coefficient

    return result


def nth_fibonacci(n: int) -> int:
    """n-th Fibonacci number (F0 = 0, F1 = 1), iterative with constant space."""
    if n < 0:
        raise InvalidArgumentError(f"invalid term: {n}")

    if n in (0, 1):
        return n

    previous, current = 0, 1
    for _ in range(2, n + 1):
        previous, current = current, current + previous

    return current
