"""Configures pytest further."""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import pytest
import sympy

MARK_GATES = {
    "slow": ("--skip-slow", True, "Slow test: needs no --skip-slow option"),
    "extreme": ("--run-extreme", False, "Extreme test: needs --run-extreme option"),
}


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip slower tests")
    parser.addoption("--run-extreme", action="store_true", default=False, help="run tests with primes in the millions")


def pytest_collection_modifyitems(config, items):
    skipdict = {}
    for mark, (option, skip_when_set, reason) in MARK_GATES.items():
        if bool(config.getoption(option)) == skip_when_set:
            skipdict[mark] = pytest.mark.skip(reason=reason)
    for item in items:
        for k, v in skipdict.items():
            if k in item.keywords:
                item.add_marker(v)


@pytest.fixture(scope="session")
def small_primes() -> list[int]:
    """All primes below 200, from an independent source."""
    return list(sympy.primerange(2, 200))
