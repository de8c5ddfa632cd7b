import fractions
import math

from .ieee import HIDDEN_BIT, MAX_EXPONENT, MIN_EXPONENT, PRECISION

HALF = fractions.Fraction(1, 2)

#===================================================================================================
# Decimal to double
#===================================================================================================

def DoubleFromFraction(x):
    """Returns the double nearest to the positive rational x.

    Ties go to the even significand, values past the largest double become
    inf and values at or below half the smallest denormal become 0.0.
    """

    x = fractions.Fraction(x)
    assert x > 0

    # 2^(e+p-1) < x < 2^(e+p+1), so at most one correction is needed.
    e = x.numerator.bit_length() - x.denominator.bit_length() - PRECISION
    if x >= fractions.Fraction(2)**(e + PRECISION):
        e += 1
    # Denormals have fewer significant bits.
    e = max(e, MIN_EXPONENT)

    scaled = x / fractions.Fraction(2)**e
    f = math.floor(scaled)
    rest = scaled - f
    if rest > HALF or (rest == HALF and f % 2 != 0):
        f += 1
        if f == 2**PRECISION:
            f = HIDDEN_BIT
            e += 1

    if e > MAX_EXPONENT:
        return math.inf
    return math.ldexp(f, e)

def DoubleFromDecimal(digits, point):
    """Reads back digits * 10^(point - len(digits)) as the nearest double"""

    assert len(digits) > 0
    x = fractions.Fraction(int(digits)) * fractions.Fraction(10)**(point - len(digits))
    return DoubleFromFraction(x)
