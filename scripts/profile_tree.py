"""
Profiling script for bstree performance analysis.

Times construction, skewed insertion, balance checking and rebalancing
for a few tree sizes.
"""

import argparse
import cProfile
import pstats
import io
from pstats import SortKey
import time
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np
from bstree import Tree


def random_keys(n, seed=42):
    """Draw n random integer keys (duplicates allowed)."""
    rng = np.random.default_rng(seed)
    return rng.integers(0, n * 10, size=n)


def profile_build(n):
    """Build a balanced tree from n random keys."""
    Tree(random_keys(n))


def profile_skewed_inserts(n):
    """Insert n ascending keys into a small tree, then rebalance."""
    tree = Tree(random_keys(16))
    # Ascending keys chain down the right spine, keep below the warning depth
    base = n * 10
    for key in range(base, base + min(n, Tree.DEEP_TREE_WARNING_DEPTH)):
        tree.insert(key)
    tree.is_balanced()
    tree.rebalance()


def profile_balance_check(n):
    """Check balance and traverse a tree of n keys."""
    tree = Tree(random_keys(n))
    tree.is_balanced()
    tree.level_order()
    tree.in_order()
    tree.pre_order()
    tree.post_order()


def profile_churn(n):
    """Interleave random inserts and deletes, then rebalance."""
    rng = np.random.default_rng(7)
    tree = Tree(random_keys(n))
    for key in rng.integers(0, n * 10, size=n):
        tree.insert(int(key))
    for key in rng.integers(0, n * 10, size=n):
        tree.delete_item(int(key))
    tree.rebalance()


def scenarios(scale=1.0):
    """Scenario names and callables, sized by scale."""
    big = max(1, int(100_000 * scale))
    skew = max(1, int(400 * scale))
    churn = max(1, int(20_000 * scale))
    return [
        (f"Build ({big} keys)", lambda: profile_build(big)),
        (f"Skewed inserts ({skew} keys)", lambda: profile_skewed_inserts(skew)),
        (f"Balance check and traversals ({big} keys)", lambda: profile_balance_check(big)),
        (f"Insert/delete churn ({churn} keys)", lambda: profile_churn(churn)),
    ]


def benchmark_scenario(name, func, top=15):
    """Profile func once and print its wall time and hottest calls."""
    print(f"\n{'=' * 60}\nProfiling: {name}\n{'=' * 60}")

    profiler = cProfile.Profile()
    start_time = time.perf_counter()
    profiler.runcall(func)
    elapsed = time.perf_counter() - start_time
    print(f"\nTotal time: {elapsed:.3f}s")

    stream = io.StringIO()
    pstats.Stats(profiler, stream=stream).sort_stats(SortKey.CUMULATIVE).print_stats(top)
    print(f"\nTop {top} functions by cumulative time:")
    print(stream.getvalue())
    return elapsed


def main(argv=None):
    parser = argparse.ArgumentParser(description="Profile bstree operations.")
    parser.add_argument("--scale", type=float, default=1.0,
                        help="multiplier applied to every scenario size")
    parser.add_argument("--top", type=int, default=15,
                        help="number of functions listed per scenario")
    args = parser.parse_args(argv)

    print("bstree Performance Profiling")
    print("=" * 60)

    timings = {}
    for name, func in scenarios(args.scale):
        timings[name] = benchmark_scenario(name, func, args.top)

    print("\nSummary:")
    for name, elapsed in timings.items():
        print(f"  {name}: {elapsed:.3f}s")
    return timings


if __name__ == "__main__":
    main()
