"""Small text helpers."""

from __future__ import annotations

import string as _string

_LOWER = str.maketrans(_string.ascii_uppercase, _string.ascii_lowercase)
_UPPER = str.maketrans(_string.ascii_lowercase, _string.ascii_uppercase)


def split(text: str, delim: str) -> list[str]:
    """Split on ``delim``; a trailing empty piece is dropped, empty text gives []."""
    parts = text.split(delim)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def to_lower(text: str) -> str:
    """Lower-case ASCII letters only."""
    return text.translate(_LOWER)


def to_upper(text: str) -> str:
    """Upper-case ASCII letters only."""
    return text.translate(_UPPER)


def starts_with(text: str, substring: str) -> bool:
    return text.startswith(substring)


def ends_with(text: str, substring: str) -> bool:
    return text.endswith(substring)


def dump_hex(data: bytes | bytearray | memoryview | str, separator: str = " ") -> str:
    """Render each byte as two upper-case hex digits joined by ``separator``."""
    if isinstance(data, str):
        values = [ord(ch) & 0xFF for ch in data]
    else:
        values = list(bytes(data))
    return separator.join(f"{value:02X}" for value in values)


def strip_colors(text: str, max_length: int | None = None) -> str:
    """Remove ``^N`` colour codes; output is limited to ``max_length - 1`` characters."""
    text = text.split("\0", 1)[0]
    limit = None if max_length is None else max_length - 1
    out: list[str] = []
    i = 0
    while i < len(text) and (limit is None or len(out) < limit):
        ch = text[i]
        if ch == "^":
            if i + 1 >= len(text):
                break
            nxt = text[i + 1]
            code = ord(nxt) - 48
            color = 7 if code >= 0xC else code
            if color != 7 or nxt == "7":
                i += 2
                continue
        out.append(ch)
        i += 1
    return "".join(out)


def replace(text: str, old: str, new: str) -> str:
    """Replace every occurrence of ``old``; an empty ``old`` leaves text unchanged."""
    if not old:
        return text
    return text.replace(old, new)