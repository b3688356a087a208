"""Command line report for unique tree statistics.

Builds a tree either from a JSON/YAML records file or from the built-in
17-node example, optionally doubles its even values, and prints the leaf-parent
count, odd-value average, right-children sum and greatest difference as text,
JSON or a Rich table.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table

from .analyzer import TreeStatistics, UniqueTree
from .builder import TreeConstructionError, TreeRecord
from .loader import RecordFormatError, load_records

logger = logging.getLogger(__name__)

__all__ = ["DEFAULT_RECORDS", "main"]

DEFAULT_RECORDS: tuple[TreeRecord, ...] = (
    TreeRecord(52, 1, 2),
    TreeRecord(23, 3, 4),
    TreeRecord(87, 5, 6),
    TreeRecord(34, 7, 8),
    TreeRecord(45, 9, 10),
    TreeRecord(67, 11, None),
    TreeRecord(78, 12, 13),
    TreeRecord(12, None, None),
    TreeRecord(19, None, None),
    TreeRecord(33, 14, 15),
    TreeRecord(49, None, None),
    TreeRecord(56, None, None),
    TreeRecord(69, 16, None),
    TreeRecord(85, None, None),
    TreeRecord(62, None, None),
    TreeRecord(13, None, None),
    TreeRecord(24, None, None),
)

_LABELS = (
    ("node_count", "Node count"),
    ("leaf_parents", "Count of leaf parents"),
    ("odd_average", "Average of all odd numbers"),
    ("right_children_sum", "Sum of all right children (excluding root)"),
    ("greatest_difference", "Greatest difference between two numbers in the tree"),
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build a unique-valued binary tree and report its statistics.",
    )
    parser.add_argument(
        "records",
        nargs="?",
        type=Path,
        default=None,
        help=(
            "JSON or YAML file holding the flattened records. "
            "Defaults to the built-in 17-node example."
        ),
    )
    parser.add_argument(
        "--double-even",
        action="store_true",
        help="Double every even value before computing the statistics.",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Print a level-order rendering of the tree before the report.",
    )
    parser.add_argument(
        "--output-format",
        choices=("text", "json", "table"),
        default="text",
        help="Print the statistics as text lines, a JSON object or a Rich table.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        help="Configure logging verbosity for troubleshooting.",
    )
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING))


def _print_table(statistics: TreeStatistics, console: Console) -> None:
    table = Table(title="Unique Tree Statistics")
    table.add_column("Statistic", justify="left")
    table.add_column("Value", justify="right")
    values = statistics.to_dict()
    for key, label in _LABELS:
        table.add_row(label, str(values[key]))
    console.print(table)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point printing the statistics report."""

    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    try:
        records = (
            load_records(args.records) if args.records is not None else DEFAULT_RECORDS
        )
        tree = UniqueTree(records)
    except FileNotFoundError as error:
        logger.error("Records file not found: %s", error.filename)
        return 2
    except OSError as error:
        logger.error("Failed to read records file: %s", error)
        return 2
    except (RecordFormatError, TreeConstructionError) as error:
        logger.error("Failed to build tree: %s", error)
        return 2

    if args.double_even:
        tree.double_even_values()
    statistics = tree.statistics()
    logger.info("Computed statistics for %d nodes", statistics.node_count)

    if args.output_format == "json":
        print(json.dumps(statistics.to_dict()))
        return 0

    if args.render:
        print(tree.render())
        print()
    if args.output_format == "table":
        _print_table(statistics, Console())
    else:
        values = statistics.to_dict()
        for key, label in _LABELS:
            print(f"{label}: {values[key]}")
    return 0


if __name__ == "__main__":  # pragma: no cover - exercised via CLI
    sys.exit(main())
