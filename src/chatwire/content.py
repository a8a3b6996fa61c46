"""Message content encoding for the chat-completions wire format."""

from __future__ import annotations

import json

_SUPPLEMENTARY_START = 0x10000


class Content(str):
    """Message text that is serialized through :func:`encode_content`."""

    def to_json(self) -> str:
        return f'"{encode_content(self)}"'


def encode_content(text: str) -> str:
    """Return the JSON string interior for ``text`` without outer quotes.

    Code points outside the BMP are written as a UTF-16 surrogate pair of
    two ``\\uXXXX`` escapes. Every other run of characters is escaped by the
    standard ASCII-safe JSON quoter.
    """
    parts: list[str] = []
    start = 0
    for index, char in enumerate(text):
        code_point = ord(char)
        if code_point < _SUPPLEMENTARY_START:
            continue
        if index > start:
            parts.append(_quote_ascii(text[start:index]))
        high, low = surrogate_pair(code_point)
        parts.append(f"\\u{high:04x}\\u{low:04x}")
        start = index + 1
    if start < len(text):
        parts.append(_quote_ascii(text[start:]))
    return "".join(parts)


def surrogate_pair(code_point: int) -> tuple[int, int]:
    if code_point < _SUPPLEMENTARY_START or code_point > 0x10FFFF:
        raise ValueError(f"Not a supplementary-plane code point: U+{code_point:X}")
    offset = code_point - _SUPPLEMENTARY_START
    return 0xD800 + (offset >> 10), 0xDC00 + (offset & 0x3FF)


def _quote_ascii(run: str) -> str:
    quoted = json.dumps(run, ensure_ascii=True)
    return quoted[1:-1]
