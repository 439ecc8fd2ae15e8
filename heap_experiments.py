'''
    Experiments comparing the four heap variants of binomial_heaps.py.

    Every run draws a random permutation of the keys 1..n and uses it for
    all variants and experiments:

      1. insert the n keys, then one delete_min.
      2. as 1, then delete_min until 46 items remain.
      3. as 1, then decrease the floor(n / 10) largest keys to 0, then
         one delete_min.

    For each run the time, the final size and number of trees, the total
    number of links, cuts and item swaps, and the maximum cost of a single
    operation are recorded. The cost of an operation is the increase of
    links + cuts + heapify cost. Averages over the runs are printed.

    Usage: python heap_experiments.py [n] [runs]
'''


import math
import random
import sys
from timeit import default_timer

from binomial_heaps import Heap, VARIANTS


DEFAULT_N = 464646
DEFAULT_RUNS = 20
BASE_SEED = 20260115  # run i uses seed BASE_SEED + i
REMAINING = 46  # size where experiment 2 stops deleting
EXPERIMENTS = (1, 2, 3)

FIELDS = ('time_ms', 'size', 'trees', 'links', 'cuts', 'heapify', 'max_cost')


def permutation(n, seed):
    '''Return the keys 1..n in a random order determined by seed.'''

    keys = list(range(1, n + 1))
    random.Random(seed).shuffle(keys)
    return keys


def total_cost(heap):
    '''Return links + cuts + heapify cost of heap so far.'''

    return heap.total_links() + heap.total_cuts() + heap.total_heapify_cost()


def run_single(experiment, variant, keys):
    '''Run one experiment on one heap variant. Returns dict of FIELDS.'''

    n = len(keys)
    heap = Heap.variant(variant)
    items = {}
    max_cost = 0

    def measure(operation, *args):
        '''Apply operation and update max_cost.'''

        nonlocal max_cost
        before = total_cost(heap)
        result = operation(*args)
        max_cost = max(max_cost, total_cost(heap) - before)
        return result

    start = default_timer()
    for key in keys:
        items[key] = measure(heap.insert, key, str(key))
    measure(heap.delete_min)
    if experiment == 2:
        while heap.size() > REMAINING:
            measure(heap.delete_min)
    elif experiment == 3:
        for key in range(n, n - math.floor(0.1 * n), -1):
            item = items[key]
            if item.deleted() or item.key() <= 0:
                continue
            measure(heap.decrease_key, item, item.key())
        measure(heap.delete_min)
    elapsed = default_timer() - start

    return {
        'time_ms': int(elapsed * 1000),
        'size': heap.size(),
        'trees': heap.num_trees(),
        'links': heap.total_links(),
        'cuts': heap.total_cuts(),
        'heapify': heap.total_heapify_cost(),
        'max_cost': max_cost,
    }


def average(stats):
    '''Average (rounded down) each field over a list of run results.'''

    return {field: sum(s[field] for s in stats) // len(stats)
            for field in FIELDS}


def run_experiments(n, runs):
    '''Run all experiments on all variants. Returns averages by
    (experiment, variant).'''

    results = {(experiment, variant): []
               for experiment in EXPERIMENTS for variant in VARIANTS}
    for run in range(runs):
        keys = permutation(n, BASE_SEED + run)
        for experiment in EXPERIMENTS:
            for variant in VARIANTS:
                stats = run_single(experiment, variant, keys)
                results[experiment, variant].append(stats)
        print('run', run + 1, '/', runs, 'done', flush=True)
    return {key: average(stats) for key, stats in results.items()}


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    n = int(argv[0]) if len(argv) >= 1 else DEFAULT_N
    runs = int(argv[1]) if len(argv) >= 2 else DEFAULT_RUNS

    print('n =', n, 'runs =', runs, 'seed base =', BASE_SEED)
    averages = run_experiments(n, runs)
    print()
    print('Averages over', runs, 'runs')
    for experiment in EXPERIMENTS:
        print()
        print('Experiment', experiment)
        for variant in VARIANTS:
            avg = averages[experiment, variant]
            print(f'  {variant:<20}',
                  ' | '.join(f'{field}={avg[field]}' for field in FIELDS))
    return averages


if __name__ == '__main__':
    main()
