"""
Demonstration driver for bstree.

Builds a tree from random keys, unbalances it with a run of large keys,
then rebalances it, printing the shape and traversals at each step.
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np
from bstree import Tree

SKEW_KEYS = [501, 210, 999, 102, 2024]


def random_keys(length, seed=None):
    """Return length random integers below 100."""
    rng = np.random.default_rng(seed)
    return rng.integers(0, 100, size=length)


def print_orders(tree):
    print(f"Level order: {tree.level_order()}")
    print(f"Preorder: {tree.pre_order()}")
    print(f"Postorder: {tree.post_order()}")
    print(f"Inorder: {tree.in_order()}")


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--size", type=int, default=8, help="number of random keys")
    args = parser.parse_args(argv)

    print("Creating BST...")
    tree = Tree(random_keys(args.size, args.seed))
    tree.pretty_print()
    print(f"Balanced: {tree.is_balanced()}")
    print_orders(tree)
    print("-" * 58)

    print("Unbalancing tree...")
    for key in SKEW_KEYS:
        tree.insert(key)
    tree.pretty_print()
    print(f"Balanced: {tree.is_balanced()}")
    print("-" * 58)

    print("Rebalancing tree...")
    tree.rebalance()
    tree.pretty_print()
    print(f"Balanced: {tree.is_balanced()}")
    print_orders(tree)


if __name__ == "__main__":
    main()
