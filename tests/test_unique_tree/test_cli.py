from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from unique_tree.cli import main


def test_cli_text_report_for_default_tree(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--double-even"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Node count: 17",
        "Count of leaf parents: 6",
        "Average of all odd numbers: 49.0",
        "Sum of all right children (excluding root): 454",
        "Greatest difference between two numbers in the tree: 143",
    ]


def test_cli_json_output_without_doubling(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--output-format", "json"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload == {
        "node_count": 17,
        "leaf_parents": 6,
        "odd_average": 49.0,
        "right_children_sum": 376,
        "greatest_difference": 75,
    }


def test_cli_table_output_with_render(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--output-format", "table", "--render"]) == 0

    output = capsys.readouterr().out
    assert output.startswith("52\n23 87\n")
    assert "Unique Tree Statistics" in output
    assert "Count of leaf parents" in output


def test_cli_reads_records_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "tree.json"
    path.write_text(json.dumps([[4, 1, 2], [3, None, None], [9, None, None]]), encoding="utf-8")

    assert main([str(path), "--output-format", "json", "--double-even"]) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["node_count"] == 3
    assert payload["greatest_difference"] == 6
    assert payload["right_children_sum"] == 9
    assert payload["odd_average"] == 6.0


def test_cli_reports_duplicate_values(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    path = tmp_path / "tree.yaml"
    path.write_text("- [1, 1, null]\n- [1, null, null]\n", encoding="utf-8")

    with caplog.at_level(logging.ERROR, logger="unique_tree.cli"):
        assert main([str(path)]) == 2
    assert "Duplicate value found: 1" in caplog.text


def test_cli_reports_missing_file(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="unique_tree.cli"):
        assert main([str(tmp_path / "missing.json")]) == 2
    assert "Records file not found" in caplog.text


def test_cli_reports_undecodable_file(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "binary.json"
    path.write_bytes(b"\xff\xfe[[1, null, null]]")

    with caplog.at_level(logging.ERROR, logger="unique_tree.cli"):
        assert main([str(path)]) == 2
    assert "Failed to build tree" in caplog.text


def test_cli_reports_unreadable_path(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="unique_tree.cli"):
        assert main([str(tmp_path)]) == 2
    assert "Failed to read records file" in caplog.text
