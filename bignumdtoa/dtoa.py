from .bignum_dtoa import BignumDtoa, BignumDtoaMode, InvalidInputError
from .decimal_rep import DecimalRepBuf
from .ieee import Double

DtoaMode = BignumDtoaMode

#===================================================================================================
# DoubleToAscii
#===================================================================================================

def DoubleToAscii(v, mode, requestedDigits, buf):
    """Converts any finite double v into buf.

    Unlike BignumDtoa this accepts zero and negative values: the sign is stored
    in buf.sign and zero becomes "0" with point 1. NaN and infinities are
    rejected.
    """

    d = Double(v)
    if d.IsSpecial():
        raise InvalidInputError('cannot convert {!r} to decimal digits'.format(v))
    if not isinstance(mode, BignumDtoaMode):
        raise InvalidInputError('unknown conversion mode: {!r}'.format(mode))

    buf.sign = d.Sign() < 0

    if mode == BignumDtoaMode.PRECISION and requestedDigits == 0:
        buf.Clear()
        buf.point = 0
        return

    if v == 0:
        buf.Clear()
        buf.Append(0)
        buf.point = 1
        return

    BignumDtoa(abs(v), mode, requestedDigits, buf)

def Dtoa(v, mode = BignumDtoaMode.SHORTEST, requestedDigits = 0):
    """Returns (digits, point) with v = 0.digits * 10^point, ignoring the sign"""

    buf = DecimalRepBuf()
    DoubleToAscii(v, mode, requestedDigits, buf)
    return buf.Digits(), buf.point
