#===================================================================================================
# DecimalRepBuf
#===================================================================================================

class DecimalRepBuf:
    """Decimal digits d[0] d[1] ... d[n-1] and a decimal point.

    The represented value is (-1)^sign * d * 10^(point - n). The digit
    generators never look at the sign.
    """

    def __init__(self):
        self.digits = []
        self.point = 0
        self.sign = False

    def Clear(self):
        """Drops all digits, the point and the sign are left alone"""

        self.digits = []

    def Reset(self):
        self.digits = []
        self.point = 0
        self.sign = False

    def Length(self):
        return len(self.digits)

    def Append(self, digit):
        assert digit >= 0
        assert digit <= 9
        self.digits.append(digit)

    def LastDigit(self):
        assert len(self.digits) > 0
        return self.digits[-1]

    def IncrementLastNoOverflow(self):
        assert len(self.digits) > 0
        assert self.digits[-1] < 9
        self.digits[-1] += 1

    def RoundUp(self):
        """Adds one unit in the last place, carrying through trailing 9s.

        If the carry reaches the front the digits become 1 followed by zeros
        and the point moves one position to the right (9.99 -> 10.0).
        """

        assert len(self.digits) > 0
        i = len(self.digits) - 1
        while i >= 0 and self.digits[i] == 9:
            self.digits[i] = 0
            i -= 1
        if i < 0:
            self.digits[0] = 1
            self.point += 1
        else:
            self.digits[i] += 1

    def TruncateAllZeros(self):
        while self.digits and self.digits[-1] == 0:
            self.digits.pop()

    def Digits(self):
        return ''.join(map(str, self.digits))

    def Value(self):
        """Returns (d, k) such that the buffer represents d * 10^k"""

        if not self.digits:
            return 0, self.point
        return int(self.Digits()), self.point - len(self.digits)

    def __str__(self):
        return self.Digits()

    def __repr__(self):
        return 'DecimalRepBuf({!r}, point={}, sign={})'.format(self.Digits(), self.point, self.sign)
