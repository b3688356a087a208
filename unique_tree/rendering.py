"""Plain-text view of a unique tree.

``render_tree`` prints one row per depth level. Each row lists the left and
right child slots of every real node on the row above, with ``·`` marking a
missing child, which keeps the rendering stable enough to be compared verbatim
in tests and demo output. Missing children are not expanded further, so a row
never holds more than two entries per node of the previous row.
"""

from __future__ import annotations

from typing import List, Optional

from .builder import TreeNode

__all__ = ["render_tree"]

PLACEHOLDER = "·"


def _format_row(row: List[Optional[TreeNode]]) -> str:
    return " ".join(PLACEHOLDER if node is None else str(node.value) for node in row)


def render_tree(root: Optional[TreeNode]) -> str:
    """Render *root* level-by-level, marking missing children with ``·``.

    Rendering stops after the deepest level that still holds a real node.
    """

    if root is None:
        return "<empty>"

    rows: List[str] = [_format_row([root])]
    parents: List[TreeNode] = [root]
    while parents:
        row: List[Optional[TreeNode]] = []
        for node in parents:
            row.append(node.left)
            row.append(node.right)
        parents = [node for node in row if node is not None]
        if parents:
            rows.append(_format_row(row))

    return "\n".join(rows)
