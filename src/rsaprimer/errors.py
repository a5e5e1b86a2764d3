"""Error kinds raised by the RSA Primer core.

Every error derives from `RSAPrimerError` as well as from the builtin exception that best describes it, so callers
may catch either the library-specific class or the generic builtin.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class RSAPrimerError(Exception):
    """Base class of every error raised by rsaprimer."""


class InvalidArgument(RSAPrimerError, ValueError):
    """A mathematical precondition was violated by the provided values."""


class NoValidExponent(RSAPrimerError, RuntimeError):
    """No public exponent coprime with the totient exists in the search range."""


class ArithmeticOverflow(RSAPrimerError, OverflowError):
    """An unreduced intermediate value would exceed the configured size ceiling."""
