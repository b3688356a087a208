"""Load flattened tree records from JSON or YAML documents.

Two document shapes are accepted, either a bare list of records or a mapping
with a ``records`` key::

    records:
      - [52, 1, 2]
      - {value: 23}
      - {value: 87, left: null, right: null}
      - null

A record is ``null`` (an empty slot), a ``[value, left, right]`` list or a
mapping with a ``value`` key and optional ``left``/``right`` keys.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

import yaml

from .builder import TreeRecord

logger = logging.getLogger(__name__)

__all__ = ["RecordFormatError", "load_records", "parse_records"]

_YAML_SUFFIXES = {".yaml", ".yml"}
_RECORD_KEYS = {"value", "left", "right"}


class RecordFormatError(ValueError):
    """Raised when a records document does not have the expected shape."""


def _parse_record(position: int, raw: Any) -> Optional[TreeRecord]:
    if raw is None:
        return None
    if isinstance(raw, Mapping):
        unknown = set(raw) - _RECORD_KEYS
        if unknown:
            raise RecordFormatError(
                f"Record {position} has unknown keys: {', '.join(sorted(map(str, unknown)))}"
            )
        if "value" not in raw:
            raise RecordFormatError(f"Record {position} is missing the 'value' key")
        return TreeRecord(raw["value"], raw.get("left"), raw.get("right"))
    if isinstance(raw, list):
        if len(raw) != 3:
            raise RecordFormatError(
                f"Record {position} must contain exactly three items, got {len(raw)}"
            )
        return TreeRecord(*raw)
    raise RecordFormatError(
        f"Record {position} must be null, a list or a mapping, got {type(raw).__name__}"
    )


def parse_records(document: Any) -> List[Optional[TreeRecord]]:
    """Convert a decoded JSON/YAML *document* into tree records.

    Value and index types are left for :func:`~unique_tree.builder.build_tree`
    to validate so that unreachable slots are never rejected.
    """

    if isinstance(document, Mapping):
        if "records" not in document:
            raise RecordFormatError("Records document must define a 'records' list")
        document = document["records"]
    if not isinstance(document, list):
        raise RecordFormatError("Records must be provided as a list")
    return [_parse_record(position, raw) for position, raw in enumerate(document)]


def load_records(path: Union[str, Path]) -> List[Optional[TreeRecord]]:
    """Read and parse the records stored at *path*.

    Files ending in ``.yaml`` or ``.yml`` are parsed with ``yaml.safe_load``;
    everything else is treated as JSON.
    """

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
        if path.suffix.lower() in _YAML_SUFFIXES:
            document = yaml.safe_load(text)
        else:
            document = json.loads(text)
    except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise RecordFormatError(f"Failed to parse {path}: {exc}") from exc

    records = parse_records(document)
    logger.debug("Loaded %d records from %s", len(records), path)
    return records
