import argparse
import logging

import matplotlib
matplotlib.use('Agg')

from bignumdtoa.bench import KINDS, Benchmark, PlotHeatmap, PlotLines, RandomDoubles, Summary
from bignumdtoa.bignum_dtoa import BignumDtoaMode

logger = logging.getLogger('bench')

def main():
    parser = argparse.ArgumentParser(description='Time the bignum digit generator.')
    parser.add_argument('-n', type=int, default=10000, help='number of doubles per run')
    parser.add_argument('--kind', choices=KINDS, default='uniform')
    parser.add_argument('--seed', type=int, default=0)
    parser.add_argument('--precision', type=int, default=17, help='digits for the precision run')
    parser.add_argument('--fixed', type=int, default=6, help='digits for the fixed run')
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

    values = RandomDoubles(args.n, kind=args.kind, seed=args.seed)
    runs = {
        'shortest': (BignumDtoaMode.SHORTEST, 0),
        'precision': (BignumDtoaMode.PRECISION, args.precision),
        'fixed': (BignumDtoaMode.FIXED, args.fixed),
    }

    frames = {}
    for name, (mode, digits) in runs.items():
        logger.info('%s: %d values (%s)', name, len(values), args.kind)
        df = Benchmark(values, mode, digits)
        df.to_csv('{}-{}.csv'.format(name, args.kind), index=False)
        PlotHeatmap(df, '{}-{}.png'.format(name, args.kind))
        logger.info('%s:\n%s', name, Summary(df))
        frames[name] = df

    PlotLines(frames, 'bench-{}.png'.format(args.kind))

if __name__ == '__main__':
    main()
