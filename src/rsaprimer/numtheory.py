"""Number theory toolkit behind the RSA Primer key generation and cipher.

Provides the elementary, deliberately transparent building blocks of textbook RSA: trial division primality,
divisor enumeration, coprimality, Euler's totient for a two-prime modulus, modular inverses and integer powers.
None of these are tuned for speed, `is_prime` in particular is linear in its input and meant for the small
primes an academic demonstration uses.

Typical usage example:

    is_prime(17)
    phi = totient(33, 3, 11)
    d = modular_inverse(3, phi)
    c = power(7, 3, 33)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsaprimer.errors import ArithmeticOverflow
from rsaprimer.errors import InvalidArgument

MAX_POWER_BITS: int = 1 << 16


def is_prime(x: int) -> bool:
    """Checks whether `x` is prime by trial division.

    Every integer `i` with `2 <= i < x` is tried as a divisor, there is no square root cut-off or wheel.

    Args:
        x: The candidate.

    Returns:
        True if `x` is prime, False otherwise. Anything below 2 is not prime.
    """
    if x < 2:
        return False
    for i in range(2, x):
        if x % i == 0:
            return False
    return True


def divisors(x: int) -> list[int]:
    """Lists all positive divisors of `x` in ascending order, including 1 and `x` itself.

    Raises:
        InvalidArgument: If `x` is not positive.
    """
    if x < 1:
        raise InvalidArgument(f"Divisors are only enumerated for positive integers, got {x}.")
    return [i for i in range(1, x + 1) if x % i == 0]


def eea(a: int, b: int) -> tuple[int, int, int]:
    """Implements the Extended Euclidean Algorithm.

    Such a that a*s0 + b*t0 = r0 = gcd(a, b).

    Args:
        a: The first natural number.
        b: The second natural number.

    Returns:
        Greatest common divisor of two integers.
        As well as the Bezout coefficients.
    """
    r0, r1 = a, b
    s0, s1, t0, t1 = 1, 0, 0, 1
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        s0, s1 = s1, s0 - q * s1
        t0, t1 = t1, t0 - q * t1
    return r0, s0, t0


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of `a` and `b`, always non-negative."""
    return abs(eea(a, b)[0])


def are_coprime(a: int, b: int) -> bool:
    """Checks whether `a` and `b` share no divisor other than 1.

    A 1 on either side is trivially coprime with anything and short-circuits.
    """
    if a == 1 or b == 1:
        return True
    return gcd(a, b) == 1


def modular_inverse(a: int, m: int) -> int:
    """Finds the modular multiplicative inverse of `a` modulo `m`.

    Equivalent to searching the smallest `k >= 1` for which `(1 + k*m) / a` is whole, but solved directly through
    the Bezout coefficients, so the result is exact for any size of `m`.

    Args:
        a: The element to invert.
        m: The modulus. Must be at least 2.

    Returns:
        The unique `x` in `[1, m)` such that `a*x mod m == 1`.

    Raises:
        InvalidArgument: If `m` is below 2 or `a` is not invertible modulo `m`.
    """
    if m < 2:
        raise InvalidArgument(f"Modulus must be at least 2, got {m}.")
    g, s, _ = eea(a % m, m)
    if g != 1:
        raise InvalidArgument(f"{a} has no inverse modulo {m}, gcd is {g}.")
    return s % m


def totient(n: int, p: int, q: int) -> int:
    """Euler's totient of a modulus built from two primes.

    The formula assumes `p != q`. For a prime square it does not give φ(p**2), key generation rejects that case.

    Args:
        n: The modulus. Must equal `p * q`.
        p: The first prime factor.
        q: The second prime factor.

    Returns:
        `(p - 1) * (q - 1)`

    Raises:
        InvalidArgument: If `n != p * q` or either factor is not prime.
    """
    if p * q != n:
        raise InvalidArgument(f"Modulus {n} is not the product of {p} and {q}.")
    if not is_prime(p) or not is_prime(q):
        raise InvalidArgument(f"Totient factors must be prime, got p={p}, q={q}.")
    return (p - 1) * (q - 1)


def power(base: int, exponent: int, modulus: int | None = None) -> int:
    """Integer exponentiation, optionally reduced modulo `modulus`.

    Without a modulus `base` is multiplied by itself `exponent` times. Since the unreduced result grows with the
    exponent, results known to exceed `MAX_POWER_BITS` bits are refused up front rather than computed.
    With a modulus the square-and-multiply form of the builtin `pow` is used and intermediates stay below the
    modulus.

    Args:
        base: The base.
        exponent: The exponent. Must be non-negative.
        modulus: Optional modulus to reduce by. Must be positive.

    Returns:
        `base**exponent`, or `base**exponent % modulus` if a modulus was provided.

    Raises:
        InvalidArgument: If `exponent` is negative or `modulus` is not positive.
        ArithmeticOverflow: If the unreduced result would need more than `MAX_POWER_BITS` bits.
    """
    if exponent < 0:
        raise InvalidArgument(f"Exponent must be non-negative, got {exponent}.")
    if modulus is not None:
        if modulus < 1:
            raise InvalidArgument(f"Modulus must be positive, got {modulus}.")
        return pow(base, exponent, modulus)
    if exponent == 0:
        return 1
    if base in (0, 1):
        return base
    if base == -1:
        return -1 if exponent % 2 else 1
    # A base of at least 2 yields at least (bits - 1) * exponent + 1 bits.
    if (abs(base).bit_length() - 1) * exponent + 1 > MAX_POWER_BITS:
        raise ArithmeticOverflow(
            f"{base}**{exponent} exceeds {MAX_POWER_BITS} bits. Provide a modulus to reduce intermediates.")
    result = base
    for _ in range(1, exponent):
        result *= base
    return result
