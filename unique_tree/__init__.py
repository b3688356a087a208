"""Unique-valued binary trees built from flattened records, with statistics."""

from .analyzer import (
    TreeStatistics,
    UniqueTree,
    average_of_odd_values,
    count_leaf_parents,
    double_even_values,
    greatest_difference,
    iter_nodes,
    sum_of_right_children,
)
from .builder import (
    DuplicateValueError,
    InvalidInputError,
    TreeConstructionError,
    TreeNode,
    TreeRecord,
    build_tree,
)
from .loader import RecordFormatError, load_records, parse_records
from .rendering import render_tree

__all__ = [
    "DuplicateValueError",
    "InvalidInputError",
    "RecordFormatError",
    "TreeConstructionError",
    "TreeNode",
    "TreeRecord",
    "TreeStatistics",
    "UniqueTree",
    "average_of_odd_values",
    "build_tree",
    "count_leaf_parents",
    "double_even_values",
    "greatest_difference",
    "iter_nodes",
    "load_records",
    "parse_records",
    "render_tree",
    "sum_of_right_children",
]
