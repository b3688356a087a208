"""Tests for the ``unique_tree_demo`` demonstration script."""

from __future__ import annotations

import unique_tree_demo


def test_demo_outputs_statistics_after_doubling(capsys) -> None:
    """Ensure the demo reports the statistics of the doubled example tree."""

    unique_tree_demo.main()
    lines = capsys.readouterr().out.splitlines()

    assert lines[0] == "Original tree:"
    assert lines[1] == "52"
    assert "After doubling even values:" in lines
    after = lines.index("After doubling even values:")
    assert lines[after + 1 : after + 4] == ["104", "23 87", "68 45 67 156"]
    assert lines[-4:] == [
        "Count of leaf parents: 6",
        "Average of all odd numbers: 49.0",
        "Sum of all right children (excluding root): 454",
        "Greatest difference between two numbers in the tree: 143",
    ]
