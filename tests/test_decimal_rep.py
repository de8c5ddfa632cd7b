from bignumdtoa.decimal_rep import DecimalRepBuf


def Buf(digits, point = 0):
    buf = DecimalRepBuf()
    for c in digits:
        buf.Append(int(c))
    buf.point = point
    return buf


class TestDecimalRepBuf:

    def test_empty(self):
        buf = DecimalRepBuf()
        assert buf.Length() == 0
        assert buf.Digits() == ''
        assert buf.point == 0
        assert buf.sign is False
        assert buf.Value() == (0, 0)

    def test_append(self):
        buf = Buf('12345', 3)
        assert buf.Length() == 5
        assert str(buf) == '12345'
        assert buf.LastDigit() == 5
        assert buf.Value() == (12345, -2)

    def test_clear_keeps_point_and_sign(self):
        buf = Buf('12', 7)
        buf.sign = True
        buf.Clear()
        assert buf.Length() == 0
        assert buf.point == 7
        assert buf.sign is True

    def test_reset(self):
        buf = Buf('12', 7)
        buf.sign = True
        buf.Reset()
        assert (buf.Digits(), buf.point, buf.sign) == ('', 0, False)

    def test_increment_last(self):
        buf = Buf('128')
        buf.IncrementLastNoOverflow()
        assert buf.Digits() == '129'

    def test_round_up(self):
        buf = Buf('1234', 1)
        buf.RoundUp()
        assert buf.Digits() == '1235'
        assert buf.point == 1

    def test_round_up_carry(self):
        buf = Buf('12999', 2)
        buf.RoundUp()
        assert buf.Digits() == '13000'
        assert buf.point == 2

    def test_round_up_carry_to_front(self):
        buf = Buf('9999', 1)
        buf.RoundUp()
        assert buf.Digits() == '1000'
        assert buf.point == 2

    def test_round_up_single_nine(self):
        buf = Buf('9', -5)
        buf.RoundUp()
        assert buf.Digits() == '1'
        assert buf.point == -4

    def test_truncate_all_zeros(self):
        buf = Buf('1200', 4)
        buf.TruncateAllZeros()
        assert buf.Digits() == '12'
        assert buf.point == 4
        assert buf.Value() == (12, 2)

    def test_truncate_only_zeros(self):
        buf = Buf('000', 1)
        buf.TruncateAllZeros()
        assert buf.Digits() == ''

    def test_grows_as_needed(self):
        buf = Buf('9' * 400, 400)
        assert buf.Length() == 400
        buf.RoundUp()
        assert buf.Digits() == '1' + '0' * 399
        assert buf.point == 401
