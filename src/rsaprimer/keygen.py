"""Key Generation Utility, deriving a textbook RSA key pair from two caller-provided primes.

The public exponent is the smallest integer above 1 that is coprime with the totient, and the private exponent is
its modular inverse. Both choices are deterministic, so the same primes always produce the same keys.

Typical usage example:

    pub = public_key(3, 11)
    priv = private_key(3, 11, pub)
    pub, priv = generate_key_pair(61, 53)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import typing
import warnings

from rsaprimer import numtheory
from rsaprimer.errors import InvalidArgument
from rsaprimer.errors import NoValidExponent

SLOW_PRIME_THRESHOLD: int = 10**7


class PublicKey(typing.NamedTuple):
    """The public half of a key pair.

    Attributes:
        n: The modulus, product of the two primes.
        e: The public exponent.
    """
    n: int
    e: int


class PrivateKey(typing.NamedTuple):
    """The private half of a key pair.

    Attributes:
        p: Private prime 1.
        q: Private prime 2.
        d: The private exponent.
    """
    p: int
    q: int
    d: int

    @property
    def n(self) -> int:
        """The modulus the key belongs to."""
        return self.p * self.q


def _check_primes(p: int, q: int) -> None:
    """Validates the prime pair both key halves are derived from.

    Raises:
        InvalidArgument: If either number is not prime or both are the same prime.
    """
    if max(p, q) > SLOW_PRIME_THRESHOLD:
        warnings.warn(f"Primality of {max(p, q)} is checked by trial division, this may take a while.", RuntimeWarning)
    for name, value in (("p", p), ("q", q)):
        if not numtheory.is_prime(value):
            raise InvalidArgument(f"{name} must be a prime number, got {value}.")
    if p == q:
        raise InvalidArgument(f"p and q must be distinct primes, got {p} twice.")


def public_key(p: int, q: int) -> PublicKey:
    """Derives the public key from two distinct primes.

    Scans exponent candidates upward from 2 and picks the first one coprime with the totient.

    Args:
        p: The first prime.
        q: The second prime.

    Returns:
        The public key `(n, e)`.

    Raises:
        InvalidArgument: If `p` and `q` are not two distinct primes.
        NoValidExponent: If no exponent in `[2, φ)` is coprime with `φ`, which happens for totients of 2 or less.
    """
    _check_primes(p, q)
    n = p * q
    phi = numtheory.totient(n, p, q)
    for e in range(2, phi):
        if numtheory.are_coprime(e, phi):
            return PublicKey(n, e)
    raise NoValidExponent(f"No exponent in [2, {phi}) is coprime with the totient {phi} of p={p}, q={q}.")


def private_key(p: int, q: int, pub: PublicKey) -> PrivateKey:
    """Derives the private key matching `pub`.

    Args:
        p: The first prime `pub` was generated from.
        q: The second prime `pub` was generated from.
        pub: The public key.

    Returns:
        The private key `(p, q, d)` with `d` the unique value in `[1, φ)` satisfying `e*d mod φ == 1`.

    Raises:
        InvalidArgument: If `p` and `q` are not two distinct primes, do not make up `pub.n`, or `pub.e` is not
            invertible modulo the totient.
    """
    _check_primes(p, q)
    phi = numtheory.totient(pub.n, p, q)
    d = numtheory.modular_inverse(pub.e, phi)
    return PrivateKey(p, q, d)


def generate_key_pair(p: int, q: int) -> tuple[PublicKey, PrivateKey]:
    """Generates both halves of a key pair from two distinct primes."""
    pub = public_key(p, q)
    return pub, private_key(p, q, pub)
