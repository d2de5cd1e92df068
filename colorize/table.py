"""
Plain-text table rendering for mappings and record lists.
"""

from __future__ import annotations
from collections.abc import Mapping, Sequence, Set
from dataclasses import asdict, is_dataclass
from types import ModuleType
from typing import Any, Optional

INDEX_HEADER = "(index)"
VALUES_HEADER = "Values"


def _is_record_sequence(value: Any) -> bool:
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, (Sequence, Set))


def _has_attributes(value: Any) -> bool:
    # Plain objects such as SimpleNamespace; classes and modules are not records
    return hasattr(value, "__dict__") and not isinstance(value, (type, ModuleType))


def is_tabular(data: Any) -> bool:
    """True if data is structured enough to show as a table."""
    if data is None:
        return False
    if is_dataclass(data) and not isinstance(data, type):
        return True
    return isinstance(data, Mapping) or _is_record_sequence(data) or _has_attributes(data)


def _as_record(value: Any) -> Optional[dict]:
    """Columns of a row value, or None for scalars."""
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, Mapping):
        return dict(value)
    if _is_record_sequence(value):
        return dict(enumerate(value))
    if _has_attributes(value):
        return dict(vars(value))
    return None


def _cell(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _line(cells: list[str], widths: list[int]) -> str:
    return "  ".join(f"{cell:<{width}}" for cell, width in zip(cells, widths)).rstrip()


def render_table(data: Any) -> list[str]:
    """
    Render data as table lines.

    Mappings use their keys as the index column, sequences use 0-based
    positions. Rows that are themselves records spread into one column per
    key (first-seen order); scalar rows go into a "Values" column.

    Args:
        data: Mapping, sequence, set, dataclass instance or plain object

    Returns:
        Header line, separator line, then one line per row

    Raises:
        TypeError: data is not tabular
    """
    if not is_tabular(data):
        raise TypeError(f"cannot render {type(data).__name__} as a table")

    data = _as_record(data)
    entries = [(str(key), value) for key, value in data.items()]

    columns: list = []
    has_values = False
    for _, value in entries:
        record = _as_record(value)
        if record is None:
            has_values = True
            continue
        for key in record:
            if key not in columns:
                columns.append(key)

    headers = [INDEX_HEADER] + [str(c) for c in columns]
    if has_values:
        headers.append(VALUES_HEADER)

    body = []
    for index, value in entries:
        record = _as_record(value)
        row = [index]
        row += [_cell(record.get(c)) if record is not None else "" for c in columns]
        if has_values:
            row.append(_cell(value) if record is None else "")
        body.append(row)

    widths = [
        max([len(header)] + [len(row[i]) for row in body])
        for i, header in enumerate(headers)
    ]

    lines = [_line(headers, widths), _line(["-" * w for w in widths], widths)]
    lines.extend(_line(row, widths) for row in body)
    return lines
