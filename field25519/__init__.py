"""
Copyright (c) 2026, the field25519 developers
See LICENSE for details
"""


class FieldError(Exception):
    pass


def checkLength(name, b, length):
    """
    Check the length of a fixed-width input.

    Args:
        name str: the name that will appear in error messages.
        b bytes-like: the input being checked.
        length int: the exact length expected.

    Raises:
        FieldError if the input does not have the expected length.
    """
    if len(b) != length:
        raise FieldError(f"{name}: expected {length} bytes, got {len(b)}")
