"""Construction of unique-valued binary trees from flattened record lists.

A tree arrives as an ordered sequence of records where every record holds a
node value together with the positions of its left and right children inside
the same sequence::

    [
        (52, 1, 2),      # index 0 is always the root
        (23, None, None),
        (87, None, None),
    ]

The module offers:

* ``TreeNode`` – a ``@dataclass`` with optional owned left/right children.
* ``TreeRecord`` – the normalised ``(value, left, right)`` input unit.
* ``build_tree`` – converts a record sequence into a tree while rejecting
  repeated values with :class:`DuplicateValueError`.

Children are always freshly allocated for every reference, so the resulting
structure is a strict tree even when a malformed input points at the same slot
twice (such inputs are rejected anyway because the repeated slot repeats its
value).
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import List, NamedTuple, Optional, Sequence, Set, Tuple, Union

logger = logging.getLogger(__name__)

__all__ = [
    "DuplicateValueError",
    "InvalidInputError",
    "RecordInput",
    "TreeConstructionError",
    "TreeNode",
    "TreeRecord",
    "build_tree",
]


class TreeConstructionError(ValueError):
    """Base class for errors raised while building a tree."""


class InvalidInputError(TreeConstructionError):
    """Raised when the record sequence is absent, empty or malformed."""


class DuplicateValueError(TreeConstructionError):
    """Raised when the same value is reachable from more than one record."""

    def __init__(self, value: int) -> None:
        super().__init__(f"Duplicate value found: {value}")
        self.value = value


@dataclass(slots=True)
class TreeNode:
    """Node representation used by the unique tree algorithms."""

    value: int
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None

    def __post_init__(self) -> None:
        if not _is_int(self.value):
            raise TypeError("TreeNode value must be an integer")

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class TreeRecord(NamedTuple):
    """A single flattened node: its value and the slots of its children."""

    value: int
    left: Optional[int] = None
    right: Optional[int] = None


RecordInput = Union[TreeRecord, Sequence[Optional[int]], None]

# (record slot, parent node, attach to left side)
_PendingSlot = Tuple[Optional[int], Optional[TreeNode], bool]


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _coerce_record(slot: int, raw: RecordInput) -> Optional[TreeRecord]:
    """Return ``raw`` as a :class:`TreeRecord` or ``None`` for an empty slot."""

    if raw is None:
        return None
    if isinstance(raw, TreeRecord):
        record = raw
    elif isinstance(raw, (tuple, list)) and len(raw) == 3:
        record = TreeRecord(*raw)
    else:
        raise InvalidInputError(
            f"Record at index {slot} must be a (value, left, right) triple, got {raw!r}"
        )

    if not _is_int(record.value):
        raise InvalidInputError(
            f"Record at index {slot} has a non-integer value: {record.value!r}"
        )
    for side, index in (("left", record.left), ("right", record.right)):
        if index is not None and not _is_int(index):
            raise InvalidInputError(
                f"Record at index {slot} has a non-integer {side} index: {index!r}"
            )
    return record


def build_tree(records: Optional[Sequence[RecordInput]]) -> Optional[TreeNode]:
    """Build a tree from ``records`` and return its root.

    Slot 0 is the root. A child index that is ``None``, negative or outside the
    sequence, or that points at a ``None`` slot, denotes a missing child. Nodes
    are created in pre-order and every value is checked against the values seen
    so far in this call; the first repeat raises :class:`DuplicateValueError`.

    Returns ``None`` when slot 0 itself is empty.
    """

    if records is None or len(records) == 0:
        raise InvalidInputError("Tree data cannot be None or empty.")

    seen: Set[int] = set()
    root: Optional[TreeNode] = None
    count = 0
    # Right is pushed before left so that nodes are created in pre-order.
    stack: List[_PendingSlot] = [(0, None, True)]

    while stack:
        slot, parent, is_left = stack.pop()
        if slot is None or slot < 0 or slot >= len(records):
            continue
        record = _coerce_record(slot, records[slot])
        if record is None:
            continue

        if record.value in seen:
            raise DuplicateValueError(record.value)
        seen.add(record.value)

        node = TreeNode(record.value)
        count += 1
        if parent is None:
            root = node
        elif is_left:
            parent.left = node
        else:
            parent.right = node

        stack.append((record.right, node, False))
        stack.append((record.left, node, True))

    logger.debug("Built tree with %d nodes from %d records", count, len(records))
    return root
