import sys

from bignumdtoa.bignum_dtoa import EstimatePower
from bignumdtoa.ieee import HIDDEN_BIT, MAX_EXPONENT, MIN_EXPONENT, PRECISION

#===================================================================================================
#
#===================================================================================================

def IsEstimate(k, f, e):
    """Returns 0 if 10^(k-1) <= f * 2^e < 10^k, 1 if 10^k <= f * 2^e < 10^(k+1), else None"""

    # Compare x = 10^k with y = f * 2^e as integers.
    x = 1
    y = f
    if k >= 0:
        x *= 10**k
    else:
        y *= 10**(-k)
    if e >= 0:
        y *= 2**e
    else:
        x *= 2**(-e)
    if x <= y * 10 and y < x:
        return 0
    if x <= y and y < x * 10:
        return 1
    return None

def CheckEstimatePower(min_exponent, max_exponent):
    """Checks the estimate for the smallest and largest significand of every exponent.

    Returns the number of undershoots, fails on any other error.
    """

    undershoots = 0
    for e in range(min_exponent, max_exponent + 1):
        k = EstimatePower(e)
        # Largest upper boundary: m+ = (2^p - 1/2) * 2^e
        for f, ee in [(HIDDEN_BIT, e), (2**PRECISION - 1, e), (2**(PRECISION + 1) - 1, e - 1)]:
            r = IsEstimate(k, f, ee)
            if r is None:
                print('estimate failed: k = {:4d}, f = {}, e = {:5d}'.format(k, f, ee))
                return None
            undershoots += r
    return undershoots

if __name__ == '__main__':
    # Denormals are normalized first, so the smallest exponent is 52 below MIN_EXPONENT.
    min_exponent = MIN_EXPONENT - (PRECISION - 1)
    max_exponent = MAX_EXPONENT
    print('Check EstimatePower for e in [{}, {}]'.format(min_exponent, max_exponent))
    undershoots = CheckEstimatePower(min_exponent, max_exponent)
    if undershoots is None:
        sys.exit(1)
    print('ok, {} undershoots'.format(undershoots))
