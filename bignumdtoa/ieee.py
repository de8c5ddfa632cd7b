import math
import struct

PRECISION = 53
EXPONENT_BITS = 11

HIDDEN_BIT = 2**(PRECISION - 1)
BIAS = 2**(EXPONENT_BITS - 1) - 1 + (PRECISION - 1)
MIN_EXPONENT = 1 - BIAS
MAX_EXPONENT = 2**EXPONENT_BITS - 2 - BIAS

SIGNIFICAND_MASK = HIDDEN_BIT - 1
EXPONENT_MASK = (2**EXPONENT_BITS - 1) << (PRECISION - 1)
SIGN_MASK = 2**(PRECISION + EXPONENT_BITS - 1)

DENORMAL_EXPONENT = MIN_EXPONENT
INFINITY_BITS = EXPONENT_MASK

#===================================================================================================
# Bits
#===================================================================================================

def DoubleToBits(v):
    return struct.unpack('<Q', struct.pack('<d', v))[0]

def BitsToDouble(bits):
    assert bits >= 0
    assert bits < 2**64
    return struct.unpack('<d', struct.pack('<Q', bits))[0]

#===================================================================================================
# Double
#===================================================================================================

class Double:
    """The binary64 value v = (-1)^sign * significand * 2^exponent"""

    def __init__(self, v):
        self.bits = DoubleToBits(v)

    @classmethod
    def FromBits(cls, bits):
        d = cls(0.0)
        d.bits = bits
        return d

    def Value(self):
        return BitsToDouble(self.bits)

    def IsDenormal(self):
        return (self.bits & EXPONENT_MASK) == 0

    def IsSpecial(self):
        return (self.bits & EXPONENT_MASK) == EXPONENT_MASK

    def IsNan(self):
        return self.IsSpecial() and (self.bits & SIGNIFICAND_MASK) != 0

    def IsInfinite(self):
        return self.IsSpecial() and (self.bits & SIGNIFICAND_MASK) == 0

    def Sign(self):
        return -1 if (self.bits & SIGN_MASK) != 0 else 1

    def Significand(self):
        assert not self.IsSpecial()
        f = self.bits & SIGNIFICAND_MASK
        if not self.IsDenormal():
            f += HIDDEN_BIT
        return f

    def Exponent(self):
        assert not self.IsSpecial()
        if self.IsDenormal():
            return DENORMAL_EXPONENT
        biased = (self.bits & EXPONENT_MASK) >> (PRECISION - 1)
        return biased - BIAS

    def LowerBoundaryIsCloser(self):
        # The gap to the next smaller double is only half as large when the
        # significand is the hidden bit alone, except for the smallest normal.
        physicalSignificandIsZero = (self.bits & SIGNIFICAND_MASK) == 0
        return physicalSignificandIsZero and self.Exponent() != DENORMAL_EXPONENT

    def NextDouble(self):
        if self.bits == INFINITY_BITS:
            return math.inf
        if self.Sign() < 0 and self.Significand() == 0:
            # -0.0
            return 0.0
        if self.Sign() < 0:
            return BitsToDouble(self.bits - 1)
        return BitsToDouble(self.bits + 1)

    def PreviousDouble(self):
        if self.bits == (INFINITY_BITS | SIGN_MASK):
            return -math.inf
        if self.Sign() < 0:
            return BitsToDouble(self.bits + 1)
        if self.Significand() == 0:
            return -0.0
        return BitsToDouble(self.bits - 1)

    def __repr__(self):
        return 'Double(0x{:016X})'.format(self.bits)
