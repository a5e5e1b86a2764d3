# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math
import warnings

import pytest
import sympy

from rsaprimer import keygen
from rsaprimer.errors import InvalidArgument
from rsaprimer.errors import NoValidExponent

known_pairs = [
    # (p, q, n, e, d)
    (3, 11, 33, 3, 7),
    (11, 3, 33, 3, 7),
    (5, 11, 55, 3, 27),
    (61, 53, 3233, 7, 1783),
    (2, 5, 10, 3, 3),
    (7, 13, 91, 5, 29),
]


@pytest.mark.parametrize("p,q,n,e,_", known_pairs)
def test_public_key(p, q, n, e, _):
    assert keygen.public_key(p, q) == keygen.PublicKey(n, e)


def test_public_key_deterministic():
    keys = {keygen.public_key(3, 11) for _ in range(10)}
    assert keys == {keygen.PublicKey(33, 3)}


def test_public_key_smallest_exponent(small_primes):
    for p in small_primes[1:12]:
        for q in small_primes[1:12]:
            if p == q:
                continue
            phi = (p - 1) * (q - 1)
            pub = keygen.public_key(p, q)
            assert 1 < pub.e < phi
            assert math.gcd(pub.e, phi) == 1
            assert all(math.gcd(c, phi) != 1 for c in range(2, pub.e))


@pytest.mark.parametrize("p,q", [(4, 11), (3, 9), (1, 7), (0, 5), (-3, 5), (15, 17)])
def test_public_key_validates_primes(p, q):
    with pytest.raises(InvalidArgument, match="must be a prime number"):
        keygen.public_key(p, q)


@pytest.mark.parametrize("p", [2, 3, 11])
def test_public_key_validates_distinct(p):
    with pytest.raises(InvalidArgument, match="distinct"):
        keygen.public_key(p, p)


@pytest.mark.parametrize("p,q", [(2, 3), (3, 2)])
def test_public_key_no_exponent(p, q):
    with pytest.raises(NoValidExponent):
        keygen.public_key(p, q)


def test_public_key_warns_slow_primes(mocker):
    mocker.patch("rsaprimer.keygen.SLOW_PRIME_THRESHOLD", 10)
    with pytest.warns(RuntimeWarning, match="trial division"):
        assert keygen.public_key(3, 11) == keygen.PublicKey(33, 3)


def test_public_key_quiet_small_primes():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        keygen.public_key(61, 53)


@pytest.mark.parametrize("p,q,n,e,d", known_pairs)
def test_private_key(p, q, n, e, d):
    assert keygen.private_key(p, q, keygen.PublicKey(n, e)) == keygen.PrivateKey(p, q, d)


def test_private_key_inverse(small_primes):
    for p in small_primes[1:12]:
        for q in small_primes[1:12]:
            if p == q:
                continue
            phi = (p - 1) * (q - 1)
            pub = keygen.public_key(p, q)
            priv = keygen.private_key(p, q, pub)
            assert 1 <= priv.d < phi
            assert (pub.e * priv.d) % phi == 1
            assert priv.d == sympy.mod_inverse(pub.e, phi)


@pytest.mark.parametrize("p,q,pub", [(4, 11, keygen.PublicKey(44, 3)), (3, 3, keygen.PublicKey(9, 3)),
                                     (3, 11, keygen.PublicKey(35, 3)), (3, 11, keygen.PublicKey(33, 4))])
def test_private_key_validates(p, q, pub):
    with pytest.raises(InvalidArgument):
        keygen.private_key(p, q, pub)


def test_private_key_modulus():
    assert keygen.PrivateKey(3, 11, 7).n == 33


def test_keys_immutable():
    pub, priv = keygen.generate_key_pair(3, 11)
    with pytest.raises(AttributeError):
        pub.e = 5
    with pytest.raises(AttributeError):
        priv.d = 5


def test_generate_key_pair():
    pub, priv = keygen.generate_key_pair(3, 11)
    assert pub == keygen.PublicKey(33, 3)
    assert priv == keygen.PrivateKey(3, 11, 7)


def test_generate_key_pair_functional(mocker):
    spy = mocker.spy(keygen, "private_key")
    pub, priv = keygen.generate_key_pair(61, 53)
    spy.assert_called_once_with(61, 53, pub)
    assert priv.d == pow(pub.e, -1, 3120)


@pytest.mark.slow
def test_generate_key_pair_larger_primes():
    p, q = 1000003, 999983
    pub, priv = keygen.generate_key_pair(p, q)
    phi = (p - 1) * (q - 1)
    assert pub.n == p * q
    assert math.gcd(pub.e, phi) == 1
    assert (pub.e * priv.d) % phi == 1
