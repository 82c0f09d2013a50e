"""
Copyright (c) 2026, the field25519 developers
See LICENSE for details
"""

import random

import pytest

from field25519.util import helpers


# Seed initialization is delegated to tests.
# random.seed(0)


@pytest.fixture
def randField():
    def _randField():
        """
        A random 32-byte encoding with bit 255 clear.
        """
        b = bytearray(random.getrandbits(8) for _ in range(32))
        b[31] &= 0x7F
        return bytes(b)

    return _randField


@pytest.fixture(scope="module")
def prepareLogger(request):
    helpers.prepareLogging()
