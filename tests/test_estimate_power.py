import importlib.util
import pathlib

from bignumdtoa.bignum_dtoa import EstimatePower
from bignumdtoa.ieee import MAX_EXPONENT, MIN_EXPONENT, PRECISION

SCRIPT = pathlib.Path(__file__).resolve().parent.parent / 'scripts' / 'check_estimate_power.py'


def LoadScript():
    spec = importlib.util.spec_from_file_location('check_estimate_power', SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestCheckEstimatePower:

    def test_is_estimate(self):
        script = LoadScript()
        assert script.IsEstimate(1, 5, 0) == 0
        assert script.IsEstimate(0, 5, 0) == 1
        assert script.IsEstimate(0, 1, 0) == 1
        assert script.IsEstimate(3, 5, 0) is None
        assert script.IsEstimate(-1, 1, -4) == 0

    def test_full_exponent_range(self):
        script = LoadScript()
        undershoots = script.CheckEstimatePower(MIN_EXPONENT - (PRECISION - 1), MAX_EXPONENT)
        assert undershoots is not None
        assert undershoots > 0

    def test_monotonic(self):
        previous = EstimatePower(MIN_EXPONENT - (PRECISION - 1))
        for e in range(MIN_EXPONENT - (PRECISION - 1) + 1, MAX_EXPONENT + 1):
            k = EstimatePower(e)
            assert previous <= k <= previous + 1
            previous = k
