"""Textbook RSA from first principles, in an Academic Sense.

Derives an RSA key pair from two caller-chosen primes, encodes integer messages with the public key and decodes
them with the private key. All arithmetic is exact and arbitrary precision, but the algorithms are the plain
classroom ones (trial division, linear exponent scan), so keep the primes small.

Typical usage example:

    pub, priv = generate_key_pair(3, 11)
    c = encode(pub, 7)
    m = decode(pub, priv, c)
    save_key("publickey.txt", pub)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsaprimer.cipher import decode
from rsaprimer.cipher import encode
from rsaprimer.errors import ArithmeticOverflow
from rsaprimer.errors import InvalidArgument
from rsaprimer.errors import NoValidExponent
from rsaprimer.errors import RSAPrimerError
from rsaprimer.keyfile import export_private_pem
from rsaprimer.keyfile import export_public_pem
from rsaprimer.keyfile import import_private_pem
from rsaprimer.keyfile import import_public_pem
from rsaprimer.keyfile import load_private_key
from rsaprimer.keyfile import load_public_key
from rsaprimer.keyfile import save_key
from rsaprimer.keygen import generate_key_pair
from rsaprimer.keygen import private_key
from rsaprimer.keygen import PrivateKey
from rsaprimer.keygen import public_key
from rsaprimer.keygen import PublicKey
from rsaprimer.numtheory import are_coprime
from rsaprimer.numtheory import divisors
from rsaprimer.numtheory import is_prime
from rsaprimer.numtheory import modular_inverse
from rsaprimer.numtheory import power
from rsaprimer.numtheory import totient

__version__ = "0.1.0"
__all__ = [
    "PublicKey",
    "PrivateKey",
    "public_key",
    "private_key",
    "generate_key_pair",
    "encode",
    "decode",
    "is_prime",
    "divisors",
    "are_coprime",
    "totient",
    "power",
    "modular_inverse",
    "save_key",
    "load_public_key",
    "load_private_key",
    "export_public_pem",
    "import_public_pem",
    "export_private_pem",
    "import_private_pem",
    "RSAPrimerError",
    "InvalidArgument",
    "NoValidExponent",
    "ArithmeticOverflow",
]
