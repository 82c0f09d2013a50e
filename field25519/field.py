"""
Copyright (c) 2026, the field25519 developers
See LICENSE for details

Arithmetic over the prime field GF(2^255 - 19), the field underlying
Curve25519 and Ed25519.

Elements travel in two forms. The external form is a 32-byte little-endian
encoding. The internal form is a list of 16 signed integers ("limbs") in base
2^16. The module-level functions operate on limb lists and make up the whole
engine: unpack, pack, add, sub, mul, carry, inverse and swap. FieldElem wraps
them in a value type for callers that do not want to touch limbs.

The CPython interpreter cannot promise hardware-level constant time. swap and
the final reduction inside pack are written without branches or
data-dependent indexing, which removes the algorithmic timing channels.
"""

from typing import List, NewType, Sequence

from field25519 import FieldError, checkLength


# Constants used to make the code more readable.
eightBitsMask = 0xFF

# fieldWords is the number of limbs used to internally represent the
# 255-bit value.
fieldWords = 16

# fieldBase is the exponent used to form the numeric base of each limb.
# 2^(fieldBase*i) where i is the limb position.
fieldBase = 16

# fieldBaseMask is the mask for the bits in each limb needed to represent
# the numeric base of each limb.
fieldBaseMask = (1 << fieldBase) - 1

# fieldMSBMask is the mask for the 15 value bits of the most significant
# limb. Bit 255 of an encoding never reaches the internal form.
fieldMSBMask = 0x7FFF

# packedLen is the width of the external encoding.
packedLen = 32

# The prime 2^255 - 19 in limb form is
# n[0] = 0xffed
# n[1..14] = 0xffff
# n[15] = 0x7fff
primeWordZero = 0xFFED
primeWordMid = 0xFFFF
primeWordTop = 0x7FFF

# Since 2^255 = 19 (mod p), 2^256 = 38 (mod p). A carry out of the top limb
# has weight 2^256 and comes back in at limb zero multiplied by 38.
foldFactor = 38

P = (1 << 255) - 19

# The inverse is a^(p-2). p - 2 = 2^255 - 21, whose bits are all ones below
# bit 255 except for bits 2 and 4. The chain starts at bit 253 because the
# accumulator is seeded with the input itself, which accounts for bit 254.
inverseTopBit = 253
inverseZeroBits = (2, 4)

# maxMulLimb bounds the magnitude of any limb handed to mul. Python integers
# do not overflow, but keeping every intermediate inside a signed 64-bit
# accumulator keeps results identical to 64-bit implementations. With limbs
# below 2^26, each of the 16 product terms in a column is below 2^52 and the
# folded column (39 column sums at most) stays below 2^62. Freshly unpacked or
# carried limbs are below 2^17, so dozens of chained add/sub calls fit.
maxMulLimb = 1 << 26

# Limbs holds a redundant limb list, fresh out of unpack, add, sub or mul's
# raw product. CarriedLimbs holds a list that has been through at least one
# carry pass, which is what the reduction inside pack requires.
Limbs = NewType("Limbs", List[int])
CarriedLimbs = NewType("CarriedLimbs", List[int])


def _encoding(name, b):
    """
    _encoding copies a bytes-like input, or a sequence of ints in 0..255, into
    bytes of the external width.

    Raises:
        FieldError if an item is not a byte value or the length is wrong.
    """
    if isinstance(b, int):
        raise FieldError(f"{name}: expected 32 bytes, got an integer")
    try:
        b = bytes(b)
    except (TypeError, ValueError) as e:
        raise FieldError(f"{name}: input is not a sequence of byte values") from e
    checkLength(name, b, packedLen)
    return b


def unpack(b: Sequence[int]) -> Limbs:
    """
    unpack decodes the 32-byte little-endian encoding into limbs. Every two
    adjacent bytes form one limb, the second byte weighted by 2^8.

    Bit 255 is masked off rather than rejected, so the decoder is total over
    32-byte inputs. Values in [p, 2^255) are accepted as-is and reduced later
    by pack. Use unpackStrict to reject such input instead.

    Args:
        b (bytes-like): the 32-byte encoding. A sequence of ints must hold
            byte values only.

    Returns:
        Limbs: the 16 limbs.

    Raises:
        FieldError if the input is not 32 byte values.
    """
    b = _encoding("unpack", b)
    n = [b[2 * i] | (b[2 * i + 1] << 8) for i in range(fieldWords)]
    n[15] &= fieldMSBMask
    return Limbs(n)


def unpackStrict(b: Sequence[int]) -> Limbs:
    """
    unpackStrict is the validating variant of unpack. It raises instead of
    masking when bit 255 is set, and also refuses non-canonical encodings of
    values in [p, 2^255).

    Args:
        b (bytes-like): the 32-byte encoding.

    Returns:
        Limbs: the 16 limbs, identical to what unpack returns.

    Raises:
        FieldError if the encoding is out of range.
    """
    b = _encoding("unpackStrict", b)
    if b[31] & 0x80:
        raise FieldError("unpackStrict: bit 255 is set")
    if int.from_bytes(b, byteorder="little") >= P:
        raise FieldError("unpackStrict: value is not reduced modulo 2^255-19")
    return unpack(b)


def add(a: Sequence[int], b: Sequence[int]) -> Limbs:
    """
    add is limb-wise addition. The result is not normalized.
    """
    return Limbs([a[i] + b[i] for i in range(fieldWords)])


def sub(a: Sequence[int], b: Sequence[int]) -> Limbs:
    """
    sub is limb-wise subtraction. Limbs of the result may be negative, which
    the next carry resolves.
    """
    return Limbs([a[i] - b[i] for i in range(fieldWords)])


def carry(n: List[int]) -> CarriedLimbs:
    """
    carry performs one left-to-right ripple over the limbs, in place. Each
    limb keeps its low 16 bits and passes the rest up to the next limb. The
    overflow of the top limb wraps to limb zero, multiplied by 38.

    The shift is arithmetic, so a negative limb borrows from its neighbour
    instead of going wrong. One pass settles a carry chain of length 16 at
    most; mul and pack call it repeatedly for that reason.

    Args:
        n (list(int)): the limbs. Modified.

    Returns:
        CarriedLimbs: the same list.
    """
    for i in range(fieldWords):
        c = n[i] >> fieldBase
        n[i] -= c << fieldBase
        if i < 15:
            n[i + 1] += c
        else:
            n[0] += foldFactor * c
    return CarriedLimbs(n)


def mul(a: Sequence[int], b: Sequence[int]) -> CarriedLimbs:
    """
    mul multiplies two elements. The schoolbook product is folded back with
    2^256 = 38 (mod p) and carried twice.

    Preconditions:
      - Every limb of both inputs MUST have a magnitude below maxMulLimb.

    Returns:
        CarriedLimbs: the product.
    """
    product = [0] * (2 * fieldWords)
    for i in range(fieldWords):
        ai = a[i]
        for j in range(fieldWords):
            product[i + j] += ai * b[j]
    # product[31] is always zero, so limb 15 has nothing to fold.
    for i in range(15):
        product[i] += foldFactor * product[i + 16]
    n = product[:fieldWords]
    carry(n)
    return carry(n)


def inverse(a: Sequence[int]) -> CarriedLimbs:
    """
    inverse computes a^(p-2), which by Fermat's little theorem is the
    multiplicative inverse of a nonzero a. The chain runs over the bits of
    p-2 from the top, squaring for every bit and multiplying by the input for
    every set bit.

    The chain is total: an input congruent to zero comes back as zero.
    """
    c = list(a)
    for i in range(inverseTopBit, -1, -1):
        c = mul(c, c)
        if i not in inverseZeroBits:
            c = mul(c, a)
    return CarriedLimbs(c)


def swap(p: List[int], q: List[int], bit: int):
    """
    swap exchanges the contents of p and q, in place, when bit is 1 and
    leaves both alone when bit is 0. The same instructions run either way:
    the bit only becomes an all-ones or all-zeros mask.

    Args:
        p (list(int)): the first limb list. Modified.
        q (list(int)): the second limb list. Modified.
        bit (int): 0 or 1.
    """
    c = ~(bit - 1)
    for i in range(fieldWords):
        t = c & (p[i] ^ q[i])
        p[i] ^= t
        q[i] ^= t


def _reduce(t: CarriedLimbs) -> CarriedLimbs:
    """
    _reduce subtracts p from a carried element twice, keeping each difference
    only when it did not borrow. A triple-carried element is below 2^256, that
    is below 2p + 38, so two rounds bring it into [0, p).
    """
    m = [0] * fieldWords
    for _ in range(2):
        m[0] = t[0] - primeWordZero
        for i in range(1, 15):
            m[i] = t[i] - primeWordMid - ((m[i - 1] >> fieldBase) & 1)
            m[i - 1] &= fieldBaseMask
        m[15] = t[15] - primeWordTop - ((m[14] >> fieldBase) & 1)
        borrow = (m[15] >> fieldBase) & 1
        m[14] &= fieldBaseMask
        swap(t, m, 1 - borrow)
    return t


def pack(n: Sequence[int]) -> bytes:
    """
    pack encodes the limbs as the canonical 32-byte little-endian encoding,
    the unique representative in [0, p). The input is not modified.

    Args:
        n (list(int)): the limbs, normalized or not.

    Returns:
        bytes: the 32-byte encoding.
    """
    t = list(n)
    carry(t)
    carry(t)
    t = _reduce(carry(t))
    b = bytearray(packedLen)
    for i in range(fieldWords):
        b[2 * i] = t[i] & eightBitsMask
        b[2 * i + 1] = (t[i] >> 8) & eightBitsMask
    return bytes(b)


class FieldElem:
    """
    FieldElem is an element of GF(2^255 - 19) held as 16 redundant limbs.

    Every arithmetic method returns a new FieldElem and leaves its operands
    untouched, so elements can be shared freely. The only exception is swap,
    which exchanges two elements in place for use in a Montgomery ladder.

    Limbs are not kept normalized between operations. add and sub leave
    their limbs as they fall; mul and carry normalize. Comparison methods go
    through pack and are therefore insensitive to the representation.

    WARNING: no magnitude checks are made on the hot path. Keep limb
    magnitudes under maxMulLimb before calling mul or inverse, by calling
    carry after long add/sub chains if needed.
    """

    def __init__(self, n=None):
        """
        Args:
            n (list(int)): optional limbs. The element is zero if not given.

        Raises:
            FieldError if n does not hold exactly 16 limbs.
        """
        self.n = list(n) if n is not None else [0] * fieldWords
        if len(self.n) != fieldWords:
            raise FieldError(
                f"FieldElem: expected {fieldWords} limbs, got {len(self.n)}"
            )

    @staticmethod
    def unpack(b, strict=False):
        """
        unpack creates a FieldElem from its 32-byte encoding.

        Args:
            b (bytes-like): the encoding.
            strict (bool): optional. Use the validating decoder, rejecting
                encodings with bit 255 set or not reduced modulo p.

        Returns:
            FieldElem: the decoded element.
        """
        return FieldElem(unpackStrict(b) if strict else unpack(b))

    @staticmethod
    def fromInt(i):
        """
        fromInt creates a FieldElem with the passed integer value.

        Args:
            i (int): a non-negative integer below 2^255.

        Returns:
            FieldElem: the created object.
        """
        if i < 0 or i >> 255:
            raise FieldError(f"fromInt: {i} is outside [0, 2^255)")
        return FieldElem(unpack(i.to_bytes(packedLen, byteorder="little")))

    @staticmethod
    def fromHex(hexString, strict=False):
        """
        fromHex decodes a 64-character hex string. The byte order is
        little-endian, the same as the output of pack.

        Args:
            hexString (str): the hex string.
            strict (bool): optional. Use the validating decoder.

        Returns:
            FieldElem: the decoded element.
        """
        try:
            b = bytes.fromhex(hexString)
        except ValueError as e:
            raise FieldError(f"fromHex: invalid hex {hexString!r}") from e
        return FieldElem.unpack(b, strict=strict)

    @staticmethod
    def zero():
        return FieldElem()

    @staticmethod
    def one():
        return FieldElem.fromInt(1)

    def add(self, f):
        return FieldElem(add(self.n, f.n))

    def sub(self, f):
        return FieldElem(sub(self.n, f.n))

    def mul(self, f):
        return FieldElem(mul(self.n, f.n))

    def inverse(self):
        """
        inverse returns the multiplicative inverse, or zero for zero.
        """
        return FieldElem(inverse(self.n))

    def carry(self):
        """
        carry returns a copy with one carry pass applied.
        """
        return FieldElem(carry(list(self.n)))

    def swap(self, f, bit):
        """
        swap exchanges the limbs of self and f in place when bit is 1.
        """
        swap(self.n, f.n, bit)

    def pack(self):
        """
        pack returns the canonical 32-byte encoding.
        """
        return pack(self.n)

    def toInt(self):
        return int.from_bytes(self.pack(), byteorder="little")

    def equals(self, f):
        """
        equals returns whether the two elements represent the same value
        modulo p, whatever their limbs look like.
        """
        return self.pack() == f.pack()

    def isZero(self):
        return not any(self.pack())

    def string(self):
        """
        string returns the canonical encoding as a hex string.
        """
        return self.pack().hex()

    def __repr__(self):
        return f"FieldElem({self.n})"
