"""Demonstration driver for ``unique_tree``.

Builds the 17-node example tree, doubles its even values and prints the
statistics in the order leaf parents, odd average, right-children sum and
greatest difference. The tree is printed before and after doubling so the
effect of the mutation is visible.
"""

from __future__ import annotations

from unique_tree import UniqueTree
from unique_tree.cli import DEFAULT_RECORDS


def main() -> None:
    """Execute the demonstration flow on the built-in example."""

    tree = UniqueTree(DEFAULT_RECORDS)
    print("Original tree:")
    print(tree.render())
    print()

    tree.double_even_values()
    print("After doubling even values:")
    print(tree.render())
    print()

    print(f"Count of leaf parents: {tree.count_leaf_parents()}")
    print(f"Average of all odd numbers: {tree.average_of_odd_values()}")
    print(f"Sum of all right children (excluding root): {tree.sum_of_right_children()}")
    print(
        "Greatest difference between two numbers in the tree: "
        f"{tree.greatest_difference()}"
    )


if __name__ == "__main__":
    main()
