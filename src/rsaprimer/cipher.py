"""Textbook RSA encoding and decoding of integer messages.

Both directions are the bare RSA primitive: a modular exponentiation of the message by the key exponent. There is
no padding and no message marshalling, the caller supplies and receives integers below the modulus.

Typical usage example:

    pub, priv = generate_key_pair(3, 11)
    c = encode(pub, 7)
    m = decode(pub, priv, c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsaprimer import numtheory
from rsaprimer.errors import InvalidArgument
from rsaprimer.keygen import PrivateKey
from rsaprimer.keygen import PublicKey


def encode(pub: PublicKey, m: int) -> int:
    """Encodes the message `m` with the public key.

    Args:
        pub: The recipient's public key.
        m: The message. Must be in range `(0, n)`.

    Returns:
        The ciphertext `m^e mod n`.

    Raises:
        InvalidArgument: If the message is out of range for the key.
    """
    if not 0 < m < pub.n:
        raise InvalidArgument(f"Message {m} must be in range [1, {pub.n - 1}].")
    return numtheory.power(m, pub.e, pub.n)


def decode(pub: PublicKey, priv: PrivateKey, c: int) -> int:
    """Decodes the ciphertext `c` with the private key.

    Args:
        pub: The public key the message was encoded with. Provides the modulus.
        priv: The matching private key.
        c: The ciphertext. Must be in range `[0, n)`.

    Returns:
        The message `c^d mod n`.

    Raises:
        InvalidArgument: If the ciphertext is out of range or the keys do not share a modulus.
    """
    if priv.n != pub.n:
        raise InvalidArgument(f"Private key modulus {priv.n} does not match public key modulus {pub.n}.")
    if not 0 <= c < pub.n:
        raise InvalidArgument(f"Ciphertext {c} must be in range [0, {pub.n - 1}].")
    return numtheory.power(c, priv.d, pub.n)
