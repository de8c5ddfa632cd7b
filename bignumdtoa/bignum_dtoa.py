import logging
import math
from enum import Enum

from .bignum import Bignum, Equal, Less, LessEqual, PlusCompare
from .ieee import Double, HIDDEN_BIT, MAX_EXPONENT, MIN_EXPONENT, PRECISION

logger = logging.getLogger(__name__)

LOG10_2 = 0.30102999566398114 # 1/lg(10)
ESTIMATE_EPSILON = 1e-10

class BignumDtoaMode(Enum):
    # Shortest digits which still read back as v. 0.299999999999999988897
    # becomes 3 with point 0.
    SHORTEST = 'shortest'
    # The digits needed for a fixed number of digits after the decimal point.
    # Halfway cases round up.
    FIXED = 'fixed'
    # A fixed number of significant digits. Halfway cases round up.
    PRECISION = 'precision'

class InvalidInputError(ValueError):
    """Raised when a conversion is requested outside of its input domain"""

#===================================================================================================
# Boundary deltas
#===================================================================================================

class BoundaryDeltas:
    """v - m- and m+ - v, both over the denominator of v.

    Most doubles have symmetric boundaries. In that case `shared` is set and a
    single Bignum stands for both deltas, so every multiplication is done once.
    """

    def __init__(self):
        self.minus = Bignum()
        self._plus = Bignum()
        self.shared = False

    def Plus(self):
        return self.minus if self.shared else self._plus

    def Share(self):
        if not self.shared and Equal(self.minus, self._plus):
            self.shared = True
            self._plus = None

    def Unshare(self):
        if self.shared:
            self._plus = Bignum(self.minus.value)
            self.shared = False

    def ShiftPlusLeft(self, shift_amount):
        self.Unshare()
        self._plus.ShiftLeft(shift_amount)

    def Times10(self):
        self.minus.Times10()
        if not self.shared:
            self._plus.Times10()

#===================================================================================================
# Power estimation
#===================================================================================================

def NormalizedExponent(significand, exponent):
    assert significand > 0
    while (significand & HIDDEN_BIT) == 0:
        significand <<= 1
        exponent -= 1
    return exponent

def EstimatePower(exponent):
    """Returns k such that 10^(k-1) <= v < 10^k, or k one too small.

    Here v = f * 2^exponent with 2^52 <= f < 2^53. The same holds for the
    upper boundary m+ of v.

        EstimatePower(0)   => 16
        EstimatePower(-52) => 0
    """

    # log10(v) is close to (exponent + 52) * log10(2). The result undershoots
    # by less than 0.631 and the epsilon keeps rounding errors of the product
    # from making it overshoot.
    return math.ceil((exponent + PRECISION - 1) * LOG10_2 - ESTIMATE_EPSILON)

#===================================================================================================
# Start values
#===================================================================================================

#
# v / 10^estimatedPower == numerator / denominator
# m- == v - deltas.minus * 10^estimatedPower / denominator
# m+ == v + deltas.plus  * 10^estimatedPower / denominator
#
# Since 10^(k-1) <= v < 10^k or 10^k <= v < 10^(k+1) we get
#   0.1 <= numerator / denominator < 1 or 1 <= numerator / denominator < 10.
#

def InitialScaledStartValuesPositiveExponent(significand, exponent, estimatedPower, needBoundaryDeltas,
                                             numerator, denominator, deltas):
    # A positive exponent implies a positive power.
    assert estimatedPower >= 0

    numerator.AssignUInt64(significand)
    numerator.ShiftLeft(exponent)
    denominator.AssignPower(10, estimatedPower)

    if needBoundaryDeltas:
        # m+ - v = 2^(exponent-1). Doubling the common denominator makes the
        # deltas integers.
        denominator.ShiftLeft(1)
        numerator.ShiftLeft(1)
        deltas.Plus().AssignUInt(1)
        deltas.Plus().ShiftLeft(exponent)
        deltas.minus.AssignUInt(1)
        deltas.minus.ShiftLeft(exponent)

def InitialScaledStartValuesNegativeExponentPositivePower(significand, exponent, estimatedPower, needBoundaryDeltas,
                                                          numerator, denominator, deltas):
    # The exponent is close to 0 here.
    numerator.AssignUInt64(significand)
    denominator.AssignPower(10, estimatedPower)
    denominator.ShiftLeft(-exponent)

    if needBoundaryDeltas:
        # The denominator already contains 2^-exponent, so after doubling the
        # distance to either boundary is 1.
        denominator.ShiftLeft(1)
        numerator.ShiftLeft(1)
        deltas.Plus().AssignUInt(1)
        deltas.minus.AssignUInt(1)

def InitialScaledStartValuesNegativeExponentNegativePower(significand, exponent, estimatedPower, needBoundaryDeltas,
                                                          numerator, denominator, deltas):
    # Multiply numerator and deltas by 10^-estimatedPower instead of dividing
    # the denominator.
    powerTen = Bignum()
    powerTen.AssignPower(10, -estimatedPower)

    if needBoundaryDeltas:
        deltas.Plus().AssignBignum(powerTen)
        deltas.minus.AssignBignum(powerTen)

    numerator.AssignBignum(powerTen)
    numerator.MultiplyByUInt64(significand)

    denominator.AssignUInt(1)
    denominator.ShiftLeft(-exponent)

    if needBoundaryDeltas:
        numerator.ShiftLeft(1)
        denominator.ShiftLeft(1)

def InitialScaledStartValues(significand, exponent, lowerBoundaryIsCloser, estimatedPower, needBoundaryDeltas):
    """Returns (numerator, denominator, deltas) for v = significand * 2^exponent.

    The deltas are zero unless needBoundaryDeltas is set.
    """

    numerator = Bignum()
    denominator = Bignum()
    deltas = BoundaryDeltas()

    if exponent >= 0:
        InitialScaledStartValuesPositiveExponent(
            significand, exponent, estimatedPower, needBoundaryDeltas, numerator, denominator, deltas)
    elif estimatedPower >= 0:
        InitialScaledStartValuesNegativeExponentPositivePower(
            significand, exponent, estimatedPower, needBoundaryDeltas, numerator, denominator, deltas)
    else:
        InitialScaledStartValuesNegativeExponentNegativePower(
            significand, exponent, estimatedPower, needBoundaryDeltas, numerator, denominator, deltas)

    if needBoundaryDeltas and lowerBoundaryIsCloser:
        # The lower boundary is at half the usual distance. Double everything
        # except deltas.minus.
        denominator.ShiftLeft(1)
        numerator.ShiftLeft(1)
        deltas.ShiftPlusLeft(1)

    deltas.Share()
    return numerator, denominator, deltas

#===================================================================================================
# Fixup
#===================================================================================================

def FixupMultiply10(estimatedPower, isEven, numerator, denominator, deltas):
    """Scales numerator/denominator so that 1 <= (numerator + deltas.plus) / denominator < 10.

    Returns the decimal point such that v = numerator / denominator * 10^(point - 1).
    """

    # Halfway cases read back as the double with the even significand, so the
    # upper boundary itself belongs to v iff isEven.
    if isEven:
        inRange = PlusCompare(numerator, deltas.Plus(), denominator) >= 0
    else:
        inRange = PlusCompare(numerator, deltas.Plus(), denominator) > 0

    if inRange:
        return estimatedPower + 1

    numerator.Times10()
    deltas.Times10()
    return estimatedPower

#===================================================================================================
# Generate
#===================================================================================================

def GenerateShortestDigits(numerator, denominator, deltas, isEven, buf):
    """Generates the shortest digits d with m- <= d <= m+ (strictly inside unless isEven).

    Precondition: 1 <= (numerator + deltas.plus) / denominator < 10
    """

    buf.Clear()
    while True:
        digit = numerator.DivideModuloIntBignum(denominator)
        assert digit <= 9
        buf.Append(digit)

        # The remainder is what gets dropped when stopping here (round down),
        # denominator - remainder is what gets added when rounding up.
        if isEven:
            tc1 = LessEqual(numerator, deltas.minus)
            tc2 = PlusCompare(numerator, deltas.Plus(), denominator) >= 0
        else:
            tc1 = Less(numerator, deltas.minus)
            tc2 = PlusCompare(numerator, deltas.Plus(), denominator) > 0

        if not tc1 and not tc2:
            numerator.Times10()
            deltas.Times10()
        elif tc1 and tc2:
            # Return the number closer to v. If the two are equidistant from v
            # use the one with the even last digit.
            compare = PlusCompare(numerator, numerator, denominator)
            if compare > 0 or (compare == 0 and buf.LastDigit() % 2 != 0):
                # A 9 would have stopped the loop one digit earlier.
                buf.IncrementLastNoOverflow()
            return
        elif tc1:
            return
        else:
            buf.IncrementLastNoOverflow()
            return

def GenerateCountedDigits(count, numerator, denominator, buf):
    """Generates count digits of numerator / denominator < 10, rounding halfway up.

    Rounding up might change the point (0.9999 -> 1.000).
    """

    assert count >= 1
    buf.Clear()
    for _ in range(count - 1):
        digit = numerator.DivideModuloIntBignum(denominator)
        assert digit <= 9
        buf.Append(digit)
        numerator.Times10()

    digit = numerator.DivideModuloIntBignum(denominator)
    assert digit <= 9
    buf.Append(digit)
    if PlusCompare(numerator, numerator, denominator) >= 0:
        buf.RoundUp()

def BignumToFixed(requestedDigits, numerator, denominator, buf):
    """Generates requestedDigits digits after the point, possibly without trailing 0s.

    Precondition: 1 <= numerator / denominator < 10
    """

    decimalPoint = buf.point
    if -decimalPoint > requestedDigits:
        # Too small, ex: 0.001 with requestedDigits == 1.
        buf.Clear()
        buf.point = -requestedDigits
    elif -decimalPoint == requestedDigits:
        # Only the rounding digit is left, ex: 0.04 and 0.06 with
        # requestedDigits == 1. Compare against 0.5 with one more digit in the
        # denominator.
        denominator.Times10()
        buf.Clear()
        if PlusCompare(numerator, numerator, denominator) >= 0:
            buf.Append(1)
            buf.point = decimalPoint + 1
    else:
        # The point might move when rounding 0.5 to 1 with no digits after
        # the point, so the digits before the point are counted too.
        neededDigits = decimalPoint + requestedDigits
        GenerateCountedDigits(neededDigits, numerator, denominator, buf)

#===================================================================================================
# BignumDtoa
#===================================================================================================

def BignumDtoaFromParts(significand, exponent, lowerBoundaryIsCloser, mode, requestedDigits, buf):
    """Converts v = significand * 2^exponent into decimal digits and a point.

    The result is buf.digits * 10^(buf.point - buf.Length()). The sign of buf
    is not touched.

    SHORTEST ignores requestedDigits. FIXED might return fewer digits than
    requested (trailing 0s), or none at all if v is too small. PRECISION
    returns at most requestedDigits digits, the first of them non-zero.
    """

    if not isinstance(mode, BignumDtoaMode):
        raise InvalidInputError('unknown conversion mode: {!r}'.format(mode))
    if significand <= 0 or significand >= 2**PRECISION:
        raise InvalidInputError('significand out of range: {}'.format(significand))
    if exponent < MIN_EXPONENT or exponent > MAX_EXPONENT:
        raise InvalidInputError('exponent out of range: {}'.format(exponent))
    if mode != BignumDtoaMode.SHORTEST and requestedDigits < 0:
        raise InvalidInputError('requested digits must not be negative: {}'.format(requestedDigits))

    if mode == BignumDtoaMode.PRECISION and requestedDigits == 0:
        buf.Clear()
        buf.point = 0
        return

    isEven = (significand % 2 == 0)
    normalizedExponent = NormalizedExponent(significand, exponent)
    # Might be too low by 1.
    estimatedPower = EstimatePower(normalizedExponent)

    if mode == BignumDtoaMode.FIXED and -estimatedPower - 1 > requestedDigits:
        # The requested digits are all after the point and v is much too small
        # to produce any of them. The point is set the way Gay's dtoa does.
        logger.debug('fixed(%d): no digits for 2^%d', requestedDigits, exponent)
        buf.Clear()
        buf.point = -requestedDigits
        return

    needBoundaryDeltas = (mode == BignumDtoaMode.SHORTEST)
    numerator, denominator, deltas = InitialScaledStartValues(
        significand, exponent, lowerBoundaryIsCloser, estimatedPower, needBoundaryDeltas)

    buf.point = FixupMultiply10(estimatedPower, isEven, numerator, denominator, deltas)
    logger.debug('estimated power %d, decimal point %d', estimatedPower, buf.point)

    if mode == BignumDtoaMode.SHORTEST:
        GenerateShortestDigits(numerator, denominator, deltas, isEven, buf)
    elif mode == BignumDtoaMode.FIXED:
        BignumToFixed(requestedDigits, numerator, denominator, buf)
    else:
        GenerateCountedDigits(requestedDigits, numerator, denominator, buf)

def BignumDtoa(v, mode, requestedDigits, buf):
    """Converts the positive, finite double v. See BignumDtoaFromParts."""

    d = Double(v)
    if d.IsSpecial() or not v > 0.0:
        raise InvalidInputError('expected a positive finite double, got {!r}'.format(v))

    BignumDtoaFromParts(d.Significand(), d.Exponent(), d.LowerBoundaryIsCloser(), mode, requestedDigits, buf)
