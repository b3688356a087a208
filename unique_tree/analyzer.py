"""Statistics and value transformations over unique binary trees.

Every function accepts the root of a tree built by
:func:`unique_tree.builder.build_tree` (``None`` for an empty tree) and visits
each node exactly once using an explicit stack, so degenerate chain-shaped trees
do not run into the interpreter's recursion limit.

The read-only statistics are total: they return ``0`` (or ``0.0``) for empty
trees rather than raising. :func:`double_even_values` is the only operation
that mutates the tree and it is not idempotent, so calling it changes the
results of every statistic computed afterwards.

:class:`UniqueTree` bundles construction and the operations behind a single
owner object.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
import logging
from typing import Any, Iterator, List, Optional, Sequence

from .builder import RecordInput, TreeNode, build_tree
from .rendering import render_tree

logger = logging.getLogger(__name__)

__all__ = [
    "TreeStatistics",
    "UniqueTree",
    "average_of_odd_values",
    "count_leaf_parents",
    "double_even_values",
    "greatest_difference",
    "iter_nodes",
    "sum_of_right_children",
]


def iter_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Yield every node of the tree in pre-order."""

    stack: List[TreeNode] = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def double_even_values(root: Optional[TreeNode]) -> None:
    """Replace every even value in the tree with twice its value."""

    doubled = 0
    for node in iter_nodes(root):
        if node.value % 2 == 0:
            node.value *= 2
            doubled += 1
    logger.debug("Doubled %d even values", doubled)


def sum_of_right_children(root: Optional[TreeNode]) -> int:
    """Return the sum of all nodes reached through a right link.

    The root is nobody's right child and therefore never contributes.
    """

    total = 0
    for node in iter_nodes(root):
        if node.right is not None:
            total += node.right.value
    return total


def count_leaf_parents(root: Optional[TreeNode]) -> int:
    """Count the nodes that have at least one childless child."""

    count = 0
    for node in iter_nodes(root):
        if (node.left is not None and node.left.is_leaf) or (
            node.right is not None and node.right.is_leaf
        ):
            count += 1
    return count


def average_of_odd_values(root: Optional[TreeNode]) -> float:
    """Return the mean of all odd values, or ``0.0`` when there are none."""

    total = 0
    count = 0
    for node in iter_nodes(root):
        if node.value % 2 != 0:
            total += node.value
            count += 1
    if count == 0:
        return 0.0
    return total / count


def greatest_difference(root: Optional[TreeNode]) -> int:
    """Return the difference between the largest and smallest values.

    Empty and single-node trees yield ``0``.
    """

    nodes = iter_nodes(root)
    first = next(nodes, None)
    if first is None:
        return 0

    largest = smallest = first.value
    for node in nodes:
        if node.value > largest:
            largest = node.value
        elif node.value < smallest:
            smallest = node.value
    return largest - smallest


@dataclass(frozen=True)
class TreeStatistics:
    """Snapshot of the read-only statistics of a tree."""

    node_count: int
    leaf_parents: int
    odd_average: float
    right_children_sum: int
    greatest_difference: int

    def to_dict(self) -> dict[str, Any]:
        """Expose a JSON-serialisable mapping of the captured statistics."""

        return asdict(self)


class UniqueTree:
    """A binary tree with pairwise distinct integer values.

    The tree is built once from a flattened record sequence (see
    :func:`~unique_tree.builder.build_tree`) and owned by this instance. Apart
    from :meth:`double_even_values`, all methods are read-only.
    """

    __slots__ = ("_root",)

    def __init__(self, records: Optional[Sequence[RecordInput]]) -> None:
        self._root = build_tree(records)

    @property
    def root(self) -> Optional[TreeNode]:
        return self._root

    def __len__(self) -> int:
        return sum(1 for _ in iter_nodes(self._root))

    def __contains__(self, value: object) -> bool:
        return any(node.value == value for node in iter_nodes(self._root))

    def values(self) -> List[int]:
        """Return the node values in pre-order."""

        return [node.value for node in iter_nodes(self._root)]

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def double_even_values(self) -> None:
        double_even_values(self._root)

    def sum_of_right_children(self) -> int:
        return sum_of_right_children(self._root)

    def count_leaf_parents(self) -> int:
        return count_leaf_parents(self._root)

    def average_of_odd_values(self) -> float:
        return average_of_odd_values(self._root)

    def greatest_difference(self) -> int:
        return greatest_difference(self._root)

    def statistics(self) -> TreeStatistics:
        """Compute every read-only statistic in one call."""

        return TreeStatistics(
            node_count=len(self),
            leaf_parents=self.count_leaf_parents(),
            odd_average=self.average_of_odd_values(),
            right_children_sum=self.sum_of_right_children(),
            greatest_difference=self.greatest_difference(),
        )

    def render(self) -> str:
        """Return the level-order ASCII rendering of the tree."""

        return render_tree(self._root)
