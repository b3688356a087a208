from __future__ import annotations

from unique_tree.builder import TreeNode, build_tree
from unique_tree.cli import DEFAULT_RECORDS
from unique_tree.rendering import render_tree


def test_render_tree_renders_structure_with_placeholders() -> None:
    root = TreeNode(1, TreeNode(2, right=TreeNode(4)), TreeNode(3))
    expected = "\n".join(["1", "2 3", "· 4 · ·"])
    assert render_tree(root) == expected


def test_render_tree_empty_tree() -> None:
    assert render_tree(None) == "<empty>"


def test_render_tree_stops_after_last_real_level() -> None:
    root = TreeNode(1, TreeNode(2), TreeNode(3))
    assert render_tree(root) == "\n".join(["1", "2 3"])


def test_render_tree_does_not_expand_missing_children() -> None:
    root = TreeNode(1, TreeNode(2, TreeNode(4)), None)
    assert render_tree(root) == "\n".join(["1", "2 ·", "4 ·"])


def test_render_tree_example() -> None:
    rendered = render_tree(build_tree(DEFAULT_RECORDS))
    assert rendered.splitlines() == [
        "52",
        "23 87",
        "34 45 67 78",
        "12 19 33 49 56 · 69 85",
        "· · · · 62 13 · · · · 24 · · ·",
    ]


def test_render_tree_deep_chain_stays_linear() -> None:
    depth = 200
    root = build_tree([(value, value + 1, None) for value in range(depth)])

    lines = render_tree(root).splitlines()

    assert len(lines) == depth
    assert lines[0] == "0"
    assert lines[1:3] == ["1 ·", "2 ·"]
    assert lines[-1] == f"{depth - 1} ·"
