import time

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

from .bignum_dtoa import BignumDtoa, BignumDtoaMode
from .decimal_rep import DecimalRepBuf

KINDS = ('uniform', 'bits')

#===================================================================================================
# Input
#===================================================================================================

def RandomDoubles(n, kind = 'uniform', seed = 0):
    """Returns up to n positive finite doubles.

    'uniform' draws from (0,1), 'bits' draws positive finite non-zero binary64
    bit patterns.
    """

    assert n >= 0
    rng = np.random.default_rng(seed)
    if kind == 'uniform':
        values = rng.uniform(0.0, 1.0, size=n)
        values = values[values > 0.0]
    elif kind == 'bits':
        # Everything below the bit pattern of +Infinity.
        bits = rng.integers(1, 2**63 - 2**52, size=n, dtype=np.uint64)
        values = bits.view(np.float64)
    else:
        raise ValueError('unknown kind: {!r}'.format(kind))
    return [float(v) for v in values]

#===================================================================================================
# Timing
#===================================================================================================

def Benchmark(values, mode = BignumDtoaMode.SHORTEST, requestedDigits = 0, repeat = 3):
    """Times BignumDtoa for every value, keeping the best of `repeat` runs.

    Returns a DataFrame with one row per value: len(N) is the number of digits
    produced, E the decimal point and ns the time per call.
    """

    assert repeat > 0
    buf = DecimalRepBuf()
    rows = []
    for v in values:
        best = None
        for _ in range(repeat):
            t0 = time.perf_counter_ns()
            BignumDtoa(v, mode, requestedDigits, buf)
            t1 = time.perf_counter_ns()
            best = t1 - t0 if best is None else min(best, t1 - t0)
        rows.append([buf.Length(), buf.point, best])
    return pd.DataFrame(rows, columns=['len(N)', 'E', 'ns'])

def Summary(df):
    """Mean time per call for every digit count"""

    return df.groupby('len(N)')['ns'].agg(['mean', 'min', 'max', 'count'])

#===================================================================================================
# Plots
#===================================================================================================

def PlotHeatmap(df, filename, vmax = None):
    data = df.pivot_table(index='len(N)', columns='E', values='ns', aggfunc='mean')
    data = data.transpose()
    ax = sns.heatmap(data, vmin=0.0, vmax=vmax, cmap="inferno")
    plt.savefig(filename)
    plt.close()
    return ax

def PlotLines(frames, filename):
    """Plots the mean time per digit count, one line per named frame"""

    data = pd.DataFrame({name: df.groupby('len(N)')['ns'].mean() for name, df in frames.items()})
    ax = sns.lineplot(data=data, dashes=False)
    plt.savefig(filename)
    plt.close()
    return ax
