# File: src/mstair/vardump/dumper/escape_codec.py
"""
UTF-8 to JSON string escaping.

`escape()` scans a UTF-8 byte string and returns ASCII text in which control
characters and every non-ASCII code point are written as ``\\uXXXX`` escapes.
Code points above U+FFFF become a UTF-16 surrogate pair. Hex digits are lower case.

Quote, backslash, slash and the C-style control escapes are applied beforehand by
`pre_escape()`; `quote_json_string()` runs both stages and adds the quotes.

Malformed input never reads past the end of the buffer:

- a multi-byte lead whose continuation bytes run off the end stops the scan;
- a stray continuation byte, an invalid lead byte, or a lead followed by a
  non-continuation byte emits ``\\ufffd`` and scanning resumes at the next
  unconsumed byte.
"""

from __future__ import annotations

import re
from typing import Final


__all__ = [
    "escape",
    "pre_escape",
    "quote_json_string",
]

_REPLACEMENT: Final[str] = "\\ufffd"

_PRE_ESCAPES: Final[dict[bytes, bytes]] = {
    b"\\": b"\\\\",
    b'"': b'\\"',
    b"/": b"\\/",
    b"\n": b"\\n",
    b"\r": b"\\r",
    b"\t": b"\\t",
    b"\b": b"\\b",
    b"\f": b"\\f",
}
_PRE_ESCAPE_RX: Final[re.Pattern[bytes]] = re.compile(rb'[\\"/\n\r\t\b\f]')

# Payload bits kept from a lead byte, by sequence width
_LEAD_MASK: Final[dict[int, int]] = {2: 0x1F, 3: 0x0F, 4: 0x07}


def _sequence_width(lead: int) -> int:
    """Return the UTF-8 sequence width announced by a non-ASCII lead byte, 0 if invalid."""
    if lead & 0xE0 == 0xC0:
        return 2
    if lead & 0xF0 == 0xE0:
        return 3
    if lead & 0xF8 == 0xF0:
        return 4
    return 0


def _surrogate_pair(code_point: int) -> str:
    offset = code_point - 0x10000
    high = 0xD800 + (offset >> 10)
    low = 0xDC00 + (offset & 0x3FF)
    return f"\\u{high:04x}\\u{low:04x}"


def escape(data: bytes | bytearray | memoryview) -> str:
    """
    Convert UTF-8 bytes into a JSON-safe string body.

    Printable ASCII passes through unchanged.

    :param data: UTF-8 encoded bytes, already processed by `pre_escape()`.
    :return str: ASCII-only text.
    """
    buf = bytes(data)
    size = len(buf)
    chunks: list[str] = []
    i = 0
    while i < size:
        lead = buf[i]
        if lead < 0x80:
            chunks.append(chr(lead) if lead > 0x1F else f"\\u{lead:04x}")
            i += 1
            continue

        width = _sequence_width(lead)
        if not width:
            chunks.append(_REPLACEMENT)
            i += 1
            continue

        tail = buf[i + 1 : min(i + width, size)]
        bad = next((k for k, b in enumerate(tail) if b & 0xC0 != 0x80), None)
        if bad is not None:
            chunks.append(_REPLACEMENT)
            i += 1 + bad
            continue
        if i + width > size:
            break  # truncated sequence at end of input

        code_point = lead & _LEAD_MASK[width]
        for b in tail:
            code_point = (code_point << 6) | (b & 0x3F)
        if code_point > 0x10FFFF:
            chunks.append(_REPLACEMENT)
        elif code_point > 0xFFFF:
            chunks.append(_surrogate_pair(code_point))
        else:
            chunks.append(f"\\u{code_point:04x}")
        i += width
    return "".join(chunks)


def pre_escape(data: str | bytes | bytearray | memoryview) -> bytes:
    """Backslash-escape ``\\ " /``, newline, carriage return, tab, backspace and form-feed."""
    raw = data.encode("utf-8", errors="surrogatepass") if isinstance(data, str) else bytes(data)
    return _PRE_ESCAPE_RX.sub(lambda m: _PRE_ESCAPES[m.group()], raw)


def quote_json_string(data: str | bytes | bytearray | memoryview) -> str:
    """Return ``data`` as a double-quoted JSON string literal."""
    return '"' + escape(pre_escape(data)) + '"'


# End of file: src/mstair/vardump/dumper/escape_codec.py
