# File: src/mstair/vardump/dumper/test_dumper_api.py
"""
Tests for the public entry points: dump(), dump_as_string(), dump_as_json() and export().
"""

from __future__ import annotations

import threading
from typing import Any

import pytest

import mstair.vardump as vardump
from mstair.vardump.base import config as cfg
from mstair.vardump.dumper.dumper_api import DumpMode, dump, dump_as_json, dump_as_string, export
from mstair.vardump.dumper.errors import InvalidModeError, VarDumpError
from mstair.vardump.dumper.export_engine import reconstruct


class Tree:
    def __init__(self, label: str, *children: Tree) -> None:
        self.label = label
        self.children = list(children)


class Bracketing:
    """Highlighter stand-in: wraps each line in brackets."""

    def colorize(self, text: str) -> str:
        return "\n".join(f"[{line}]" for line in text.split("\n"))


@pytest.fixture
def depth_override() -> Any:
    """Reset the thread-local default depth after the test."""
    yield cfg.default_depth
    cfg.default_depth(unset_override=True)


# ---------- dump() ----------


@pytest.mark.unit
def test_dump_defaults_to_string_mode() -> None:
    assert dump([1, "a", None]) == "[\n    0 => 1,\n    1 => 'a',\n    2 => null\n]"


@pytest.mark.unit
@pytest.mark.parametrize("mode", [DumpMode.JSON, "json"])
def test_dump_json_mode(mode: DumpMode | str) -> None:
    assert dump({"x": 1, "y": 2}, 10, mode) == '{"x":1,"y":2}'


@pytest.mark.unit
def test_dump_highlight_mode_uses_highlighter() -> None:
    assert dump([], mode="highlight", highlighter=Bracketing()) == "[[]]"


@pytest.mark.unit
@pytest.mark.parametrize("mode", ["xml", "", "JSON", None])
def test_dump_rejects_unknown_mode(mode: Any) -> None:
    with pytest.raises(InvalidModeError) as exc_info:
        dump(1, mode=mode)
    assert exc_info.value.mode == mode
    assert "Use only string, highlight, json." in str(exc_info.value)
    assert isinstance(exc_info.value, ValueError)
    assert isinstance(exc_info.value, VarDumpError)


# ---------- depth ----------


@pytest.mark.unit
def test_depth_zero_truncates_root() -> None:
    assert dump_as_string([1], 0) == "[...]"
    assert dump_as_json([1], 0) == '"Array:[...]"'
    assert dump_as_string(Tree("t"), 0) == "Tree(...)"
    assert dump_as_json(Tree("t"), 0) == '"Tree:{...}"'


@pytest.mark.unit
@pytest.mark.parametrize("depth", [-1, -10])
def test_negative_depth_raises(depth: int) -> None:
    with pytest.raises(ValueError, match="Depth must be >= 0"):
        dump_as_string([], depth)


@pytest.mark.unit
@pytest.mark.parametrize("depth", [1.5, "3", True])
def test_non_int_depth_raises(depth: Any) -> None:
    with pytest.raises(TypeError):
        dump_as_json([], depth)


@pytest.mark.unit
def test_default_depth_comes_from_config(depth_override: Any) -> None:
    depth_override(override=1)
    assert dump_as_string([[1]]) == "[\n    0 => [...]\n]"


@pytest.mark.unit
def test_default_depth_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VARDUMP_DEPTH", "0")
    cfg.default_depth(unset_override=True)
    assert dump_as_json([1]) == '"Array:[...]"'


# ---------- object graphs ----------


@pytest.mark.unit
def test_tree_dump() -> None:
    tree = Tree("root", Tree("leaf"))
    expected = (
        "Tree#1\n"
        "(\n"
        "    [label] => 'root'\n"
        "    [children] => [\n"
        "        0 => Tree#2\n"
        "        (\n"
        "            [label] => 'leaf'\n"
        "            [children] => []\n"
        "        )\n"
        "    ]\n"
        ")"
    )
    assert dump_as_string(tree) == expected


@pytest.mark.unit
def test_cycle_terminates_in_all_modes() -> None:
    parent = Tree("p")
    child = Tree("c", parent)
    parent.children.append(child)
    text = dump_as_string(parent)
    assert text.count("Tree#1(...)") == 1
    assert dump_as_json(parent) == (
        '{"class": "Tree","label":"p","children":'
        '[{"class": "Tree","label":"c","children":["Tree#1(...)"]}]}'
    )


@pytest.mark.unit
def test_calls_do_not_share_state() -> None:
    """Indices restart at 1 for every call."""
    tree = Tree("x")
    assert dump_as_string(tree).startswith("Tree#1")
    assert dump_as_string(tree).startswith("Tree#1")


@pytest.mark.unit
def test_concurrent_calls() -> None:
    results: list[str] = []
    lock = threading.Lock()

    def worker() -> None:
        text = dump_as_json([Tree(str(n)) for n in range(50)])
        with lock:
            results.append(text)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert len(set(results)) == 1


# ---------- export() ----------


@pytest.mark.unit
def test_export_round_trip() -> None:
    value = {"name": "x", "tags": ("a", "b"), "nested": [{"k": {1, 2}}]}
    assert reconstruct(export(value)) == value


@pytest.mark.unit
def test_package_reexports() -> None:
    assert vardump.dump_as_json([1]) == "[1]"
    assert vardump.DumpMode("string") is DumpMode.STRING
    assert vardump.__version__


# End of file: src/mstair/vardump/dumper/test_dumper_api.py
