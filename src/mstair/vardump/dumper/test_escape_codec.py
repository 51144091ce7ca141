# File: src/mstair/vardump/dumper/test_escape_codec.py
"""
Tests for the UTF-8 escape codec: escape(), pre_escape() and quote_json_string().

Covers:
- ASCII pass-through and control escapes
- 2, 3 and 4 byte sequences, including surrogate pairs
- Malformed input: truncation, stray continuations, invalid leads
"""

from __future__ import annotations

import pytest

from mstair.vardump.dumper.escape_codec import escape, pre_escape, quote_json_string


# ---------- escape() ----------


@pytest.mark.unit
def test_printable_ascii_passes_through() -> None:
    printable = bytes(range(0x20, 0x7F))
    assert escape(printable) == printable.decode("ascii")


@pytest.mark.unit
@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (b"\x00", "\\u0000"),
        (b"\x01", "\\u0001"),
        (b"\x1f", "\\u001f"),
        ("é".encode(), "\\u00e9"),
        ("€".encode(), "\\u20ac"),
        ("😀".encode(), "\\ud83d\\ude00"),
        ("aĀb".encode(), "a\\u0100b"),
    ],
)
def test_escape_well_formed(data: bytes, expected: str) -> None:
    assert escape(data) == expected


@pytest.mark.unit
def test_hex_digits_are_lower_case() -> None:
    assert escape("ÿꯍ".encode()) == "\\u00ff\\uabcd"


@pytest.mark.unit
def test_highest_code_point_is_surrogate_pair() -> None:
    assert escape("\U0010ffff".encode()) == "\\udbff\\udfff"


@pytest.mark.unit
@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (b"ab\xe2\x82", "ab"),  # 3-byte sequence cut short
        (b"ab\xf0", "ab"),  # lone 4-byte lead at the end
        (b"\x80a", "\\ufffda"),  # stray continuation
        (b"\xffa", "\\ufffda"),  # invalid lead
        (b"\xc3a", "\\ufffda"),  # lead followed by ASCII
        (b"\xe2\x82a", "\\ufffda"),  # 3-byte lead, bad second continuation
        (b"\xf7\xbf\xbf\xbf", "\\ufffd"),  # decodes past U+10FFFF
    ],
)
def test_escape_malformed_input(data: bytes, expected: str) -> None:
    assert escape(data) == expected


@pytest.mark.unit
def test_escape_accepts_bytearray_and_memoryview() -> None:
    assert escape(bytearray(b"x\x02")) == "x\\u0002"
    assert escape(memoryview(b"y")) == "y"


# ---------- pre_escape() / quote_json_string() ----------


@pytest.mark.unit
def test_pre_escape_specials() -> None:
    assert pre_escape('a"b\\c/d') == b'a\\"b\\\\c\\/d'
    assert pre_escape("\n\r\t\b\f") == b"\\n\\r\\t\\b\\f"


@pytest.mark.unit
def test_pre_escape_returns_utf8_bytes() -> None:
    assert pre_escape("é") == "é".encode()


@pytest.mark.unit
@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("", '""'),
        ("plain", '"plain"'),
        ('say "hi"', '"say \\"hi\\""'),
        ("a/b\n", '"a\\/b\\n"'),
        ("café", '"caf\\u00e9"'),
        (b"\xff", '"\\ufffd"'),
        ("\x07", '"\\u0007"'),
    ],
)
def test_quote_json_string(value: str | bytes, expected: str) -> None:
    assert quote_json_string(value) == expected


# End of file: src/mstair/vardump/dumper/test_escape_codec.py
