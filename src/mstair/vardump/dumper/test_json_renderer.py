# File: src/mstair/vardump/dumper/test_json_renderer.py
"""
Tests for the JSON-like dump: array/object shape, composites, truncation markers
and back-references.
"""

from __future__ import annotations

import io
import sys
from collections.abc import Iterator
from dataclasses import dataclass

import pytest

from mstair.vardump.dumper.json_renderer import JsonRenderer, json_literal
from mstair.vardump.dumper.model import DumpContext


@dataclass
class Point:
    x: int
    y: int


class Node:
    def __init__(self, name: str) -> None:
        self.name = name
        self.next: Node | None = None


def encode(value: object, depth: int = 10) -> str:
    return JsonRenderer(context=DumpContext(depth_limit=depth)).render(value)


@pytest.fixture
def int_digit_limit() -> Iterator[None]:
    """Pin the int-to-str digit limit so long ints cannot be written in decimal."""
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    yield
    sys.set_int_max_str_digits(previous)


# ---------- Scalars ----------


@pytest.mark.unit
@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "null"),
        (True, "true"),
        (False, "false"),
        (3, "3"),
        (1.5, "1.5"),
        (float("nan"), "nan"),
        (float("inf"), "inf"),
        (1e100, "1e+100"),
    ],
)
def test_json_literal(value: None | bool | float, expected: str) -> None:
    assert json_literal(value) == expected
    assert encode(value) == expected


@pytest.mark.unit
def test_long_int_in_hex(int_digit_limit: None) -> None:
    big = 10**5000
    assert encode([big]) == f"[{hex(big)}]"
    assert encode({big: 1}) == f'{{"{hex(big)}":1}}'


@pytest.mark.unit
def test_strings_are_escaped() -> None:
    assert encode('a"b/c\n') == '"a\\"b\\/c\\n"'
    assert encode("é") == '"\\u00e9"'
    assert encode("😀") == '"\\ud83d\\ude00"'


# ---------- Containers ----------


@pytest.mark.unit
def test_list_is_array() -> None:
    assert encode([1, 2, 3]) == "[1,2,3]"
    assert encode((1, "a")) == '[1,"a"]'


@pytest.mark.unit
def test_mapping_is_object() -> None:
    assert encode({"x": 1, "y": 2}) == '{"x":1,"y":2}'


@pytest.mark.unit
def test_mapping_with_list_keys_is_array() -> None:
    assert encode({0: "a", 1: "b"}) == '["a","b"]'


@pytest.mark.unit
def test_out_of_order_int_keys_stay_object() -> None:
    assert encode({1: "b", 0: "a"}) == '{"1":"b","0":"a"}'


@pytest.mark.unit
def test_bool_keys_are_not_list_keys() -> None:
    assert encode({False: "a", True: "b"}) == '{"False":"a","True":"b"}'


@pytest.mark.unit
def test_empty_containers_are_arrays() -> None:
    assert encode([]) == "[]"
    assert encode({}) == "[]"


@pytest.mark.unit
def test_keys_are_trimmed_and_nul_replaced() -> None:
    assert encode({" a\0b ": 1}) == '{"a:b":1}'


@pytest.mark.unit
def test_truncated_container() -> None:
    assert encode([[1]], depth=1) == '["Array:[...]"]'
    assert encode({"k": 1}, depth=0) == '"Array:[...]"'


# ---------- Objects ----------


@pytest.mark.unit
def test_composite_has_class_member() -> None:
    assert encode(Point(1, 2)) == '{"class": "Point","x":1,"y":2}'


@pytest.mark.unit
def test_truncated_composite() -> None:
    assert encode(Point(1, 2), depth=0) == '"Point:{...}"'


@pytest.mark.unit
def test_cycle_renders_back_reference() -> None:
    node = Node("x")
    node.next = node
    assert encode(node) == '{"class": "Node","name":"x","next":"Node#1(...)"}'


@pytest.mark.unit
def test_functions_and_resources() -> None:
    assert encode([lambda: None, io.BytesIO()]) == '["{Closure}","{Resource}"]'


# End of file: src/mstair/vardump/dumper/test_json_renderer.py
