import math

import pytest

from bignumdtoa import DecimalRepBuf, DoubleToAscii, Dtoa, DtoaMode, InvalidInputError

SHORTEST = DtoaMode.SHORTEST
FIXED = DtoaMode.FIXED
PRECISION = DtoaMode.PRECISION


def Convert(v, mode, requestedDigits = 0):
    buf = DecimalRepBuf()
    DoubleToAscii(v, mode, requestedDigits, buf)
    return buf


def Trimmed(buf):
    buf.TruncateAllZeros()
    return buf.Digits(), buf.point, buf.sign


class TestDoubleToAscii:

    @pytest.mark.parametrize('v, mode, requestedDigits, expected', [
        (-2147483648.0, SHORTEST, 0, ('2147483648', 10, True)),
        (-2147483648.0, PRECISION, 5, ('21475', 10, True)),
        (-2147483648.0, FIXED, 2, ('2147483648', 10, True)),
        (-3.5844466002796428e+298, SHORTEST, 0, ('35844466002796428', 299, True)),
        (-3.5844466002796428e+298, PRECISION, 10, ('35844466', 299, True)),
        (-1.5, SHORTEST, 0, ('15', 1, True)),
        (1.5, SHORTEST, 0, ('15', 1, False)),
        (4294967272.0, FIXED, 5, ('4294967272', 10, False)),
        (5e-324, PRECISION, 5, ('49407', -323, False)),
    ])
    def test_values(self, v, mode, requestedDigits, expected):
        assert Trimmed(Convert(v, mode, requestedDigits)) == expected

    @pytest.mark.parametrize('mode, requestedDigits', [(SHORTEST, 0), (FIXED, 0), (FIXED, 5), (PRECISION, 3)])
    def test_zero(self, mode, requestedDigits):
        buf = Convert(0.0, mode, requestedDigits)
        assert (buf.Digits(), buf.point, buf.sign) == ('0', 1, False)

    def test_negative_zero(self):
        buf = Convert(-0.0, SHORTEST)
        assert (buf.Digits(), buf.point, buf.sign) == ('0', 1, True)

    @pytest.mark.parametrize('v', [0.0, 1.0, -1.0])
    def test_precision_zero_digits(self, v):
        buf = Convert(v, PRECISION, 0)
        assert buf.Digits() == ''
        assert buf.point == 0

    def test_fixed_zero_digits(self):
        assert Convert(1.0, FIXED, 0).Digits() == '1'
        assert Convert(0.0, FIXED, 0).Digits() == '0'

    def test_fixed_too_small_keeps_sign(self):
        buf = Convert(-0.001, FIXED, 1)
        assert buf.Digits() == ''
        assert buf.sign is True

    @pytest.mark.parametrize('v', [math.nan, math.inf, -math.inf])
    def test_special_values(self, v):
        with pytest.raises(InvalidInputError):
            Convert(v, SHORTEST)

    def test_bad_mode(self):
        with pytest.raises(InvalidInputError):
            Convert(1.0, 0)

    def test_negative_requested_digits(self):
        with pytest.raises(InvalidInputError):
            Convert(-1.0, PRECISION, -3)


class TestDtoa:

    def test_default_mode_is_shortest(self):
        assert Dtoa(0.1) == ('1', 0)
        assert Dtoa(1.7976931348623157e308) == ('17976931348623157', 309)

    def test_sign_is_dropped(self):
        assert Dtoa(-2.2250738585072014e-308) == ('22250738585072014', -307)

    def test_counted_modes(self):
        assert Dtoa(0.125, PRECISION, 2) == ('13', 0)
        assert Dtoa(9.9999, PRECISION, 3) == ('100', 2)
        assert Dtoa(0.5, FIXED, 0) == ('1', 1)
        assert Dtoa(0.001, FIXED, 1) == ('', -1)

    @pytest.mark.parametrize('digits, k, v', [
        # Pairs (digits, exponent) such that v == digits * 10^exponent.
        ('5', -324, 5e-324),
        ('17976931348623157', 292, 1.7976931348623157e308),
        ('1', 23, 1e23),
        ('9007199254740992', 0, 9007199254740992.0),
        ('123', -5, 0.00123),
        ('3', -1, 0.3),
    ])
    def test_shortest_pairs(self, digits, k, v):
        assert Dtoa(v) == (digits, k + len(digits))
