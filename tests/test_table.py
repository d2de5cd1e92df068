from dataclasses import dataclass
from types import SimpleNamespace

import pytest

from colorize.table import INDEX_HEADER, VALUES_HEADER, is_tabular, render_table


@dataclass
class Row:
    name: str
    port: int


@pytest.mark.parametrize("data,expected", [
    ({}, True),
    ([], True),
    ((1, 2), True),
    (Row("a", 1), True),
    ({"x", "y"}, True),
    (SimpleNamespace(name="a"), True),
    (None, False),
    ("abc", False),
    (b"abc", False),
    (7, False),
    (Row, False),
    (pytest, False),
])
def test_is_tabular(data, expected):
    assert is_tabular(data) is expected


def test_records_union_columns_in_first_seen_order():
    table = render_table([
        {"name": "leaf-1", "port": 22},
        {"name": "leaf-2", "vendor": "arista"},
    ])
    assert table == [
        "(index)  name    port  vendor",
        "-------  ------  ----  ------",
        "0        leaf-1  22",
        "1        leaf-2        arista",
    ]


def test_mixed_scalars_and_records():
    table = render_table({"a": {"x": 1}, "b": "plain"})
    assert table[0].split() == [INDEX_HEADER, "x", VALUES_HEADER]
    assert table[2].split() == ["a", "1"]
    assert table[3].split() == ["b", "plain"]


def test_sequence_of_scalars():
    assert render_table(["red", None]) == [
        "(index)  Values",
        "-------  ------",
        "0        red",
        "1",
    ]


def test_dataclass_rows():
    table = render_table([Row("core", 830)])
    assert table[0].split() == [INDEX_HEADER, "name", "port"]
    assert table[2].split() == ["0", "core", "830"]


def test_empty_mapping_renders_header_only():
    assert render_table({}) == [INDEX_HEADER, "-" * len(INDEX_HEADER)]


def test_rejects_scalars():
    with pytest.raises(TypeError):
        render_table(None)


def test_plain_object_rows():
    table = render_table(SimpleNamespace(host="web-01", up=True))
    assert table == [
        "(index)  Values",
        "-------  ------",
        "host     web-01",
        "up       True",
    ]


def test_set_of_scalars():
    table = render_table(frozenset({"only"}))
    assert table[2].split() == ["0", "only"]


def test_objects_as_records():
    table = render_table([SimpleNamespace(name="core", port=830)])
    assert table[0].split() == [INDEX_HEADER, "name", "port"]
    assert table[2].split() == ["0", "core", "830"]
