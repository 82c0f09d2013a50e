"""
Copyright (c) 2026, the field25519 developers
See LICENSE for details
"""

from field25519 import field


H1 = "20e1c2ef33c204ed3a633c688e5fcdd4218ce7c7535b38b41039e4c5c9aad933"
H2 = "968875ec4182fc9050eb958846af8f6d76b9aa4780121a6a3684ea600392ba30"


class Test_Field:
    def test_unpack(self, benchmark):
        benchmark(field.unpack, bytes.fromhex(H1))

    def test_pack(self, benchmark):
        n = field.unpack(bytes.fromhex(H1))
        benchmark(field.pack, n)

    def test_carry(self, benchmark):
        n = [0x1FFFF] * 16
        benchmark(field.carry, n)

    def test_add(self, benchmark):
        a = field.unpack(bytes.fromhex(H1))
        b = field.unpack(bytes.fromhex(H2))
        benchmark(field.add, a, b)

    def test_sub(self, benchmark):
        a = field.unpack(bytes.fromhex(H1))
        b = field.unpack(bytes.fromhex(H2))
        benchmark(field.sub, a, b)

    def test_mul(self, benchmark):
        a = field.unpack(bytes.fromhex(H1))
        b = field.unpack(bytes.fromhex(H2))
        benchmark(field.mul, a, b)

    def test_inverse(self, benchmark):
        a = field.unpack(bytes.fromhex(H1))
        benchmark(field.inverse, a)

    def test_swap(self, benchmark):
        a = field.unpack(bytes.fromhex(H1))
        b = field.unpack(bytes.fromhex(H2))
        benchmark(field.swap, a, b, 1)
