UINT16_MASK = 2**16 - 1
UINT32_MASK = 2**32 - 1
UINT64_MASK = 2**64 - 1

#===================================================================================================
# Bignum
#===================================================================================================

class Bignum:
    """An unbounded non-negative integer which is modified in place.

    Every instance belongs to a single conversion. The assign* methods copy a
    new value in, all other methods mutate the current value.
    """

    def __init__(self, value = 0):
        assert value >= 0
        self.value = value

    def AssignUInt16(self, value):
        self.value = value & UINT16_MASK

    def AssignUInt(self, value):
        self.value = value & UINT32_MASK

    def AssignUInt64(self, value):
        # Negative inputs are 64-bit patterns, not signed values.
        self.value = value & UINT64_MASK

    def AssignBignum(self, other):
        self.value = other.value

    def AssignDecimalString(self, s):
        assert len(s) > 0
        assert all(c in '0123456789' for c in s)
        self.value = int(s, 10)

    def AssignHexString(self, s):
        assert len(s) > 0
        assert all(c in '0123456789abcdefABCDEF' for c in s)
        self.value = int(s, 16)

    def AssignPower(self, base, exponent):
        assert base >= 0
        assert exponent >= 0
        self.value = base**exponent

    def AddUInt64(self, operand):
        self.value += operand & UINT64_MASK

    def AddBignum(self, other):
        self.value += other.value

    def SubtractBignum(self, other):
        """Precondition: self >= other"""

        assert self.value >= other.value
        self.value -= other.value

    def Square(self):
        self.value *= self.value

    def ShiftLeft(self, shift_amount):
        assert shift_amount >= 0
        self.value <<= shift_amount

    def MultiplyByUInt32(self, factor):
        self.value *= factor & UINT32_MASK

    def MultiplyByUInt64(self, factor):
        self.value *= factor & UINT64_MASK

    def MultiplyByPowerOfTen(self, exponent):
        assert exponent >= 0
        self.value *= 10**exponent

    def Times10(self):
        self.MultiplyByUInt32(10)

    def DivideModuloIntBignum(self, other):
        """Returns self // other and sets self to self % other"""

        assert other.value > 0
        q, r = divmod(self.value, other.value)
        self.value = r
        return q

    def BitLength(self):
        return self.value.bit_length()

    def ToHexString(self):
        return '{:X}'.format(self.value)

    def __repr__(self):
        return 'Bignum(0x{})'.format(self.ToHexString())

#===================================================================================================
# Comparisons
#===================================================================================================

def Compare(a, b):
    """Returns -1 if a < b, 0 if a == b, and +1 if a > b"""

    return (a.value > b.value) - (a.value < b.value)

def Equal(a, b):
    return Compare(a, b) == 0

def LessEqual(a, b):
    return Compare(a, b) <= 0

def Less(a, b):
    return Compare(a, b) < 0

def PlusCompare(a, b, c):
    """Returns Compare(a + b, c)"""

    s = a.value + b.value
    return (s > c.value) - (s < c.value)

def PlusEqual(a, b, c):
    return PlusCompare(a, b, c) == 0

def PlusLessEqual(a, b, c):
    return PlusCompare(a, b, c) <= 0

def PlusLess(a, b, c):
    return PlusCompare(a, b, c) < 0
