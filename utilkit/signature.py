"""Byte pattern search with wildcards, e.g. ``"48 8B ? 05"``."""

from __future__ import annotations

import re
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class SignatureError(ValueError):
    """Raised for a malformed pattern."""


def _parse_pattern(pattern: str) -> tuple[str, bytes]:
    mask: list[str] = []
    values: list[int] = []
    nibble = 0
    has_nibble = False

    for char in pattern:
        if char == " ":
            continue
        if char == "?":
            mask.append("?")
            values.append(0)
            continue
        if char not in _HEX_DIGITS:
            raise SignatureError("Invalid pattern")
        current = int(char, 16)
        if not has_nibble:
            nibble = current
            has_nibble = True
        else:
            has_nibble = False
            mask.append("x")
            values.append((nibble << 4) | current)

    while mask and mask[-1] == "?":
        mask.pop()
        values.pop()

    if has_nibble:
        raise SignatureError("Invalid pattern")

    return "".join(mask), bytes(values)


class Signature:
    """A wildcard byte pattern bound to the buffer it is searched in."""

    def __init__(self, pattern: str, data: BytesLike) -> None:
        self._data = data
        self._mask, self._pattern = _parse_pattern(pattern)
        parts = [
            b"." if flag == "?" else re.escape(bytes([value]))
            for flag, value in zip(self._mask, self._pattern)
        ]
        self._regex = re.compile(b"(?=" + b"".join(parts) + b")", re.DOTALL)

    @property
    def mask(self) -> str:
        """One character per byte: ``x`` must match, ``?`` matches anything."""
        return self._mask

    @property
    def pattern(self) -> bytes:
        """The bytes to compare against; wildcard positions hold zero."""
        return self._pattern

    def process(self) -> list[int]:
        """Offsets of every (possibly overlapping) match, in ascending order."""
        size = len(self._data)
        if not self._mask:
            return list(range(size))
        return [match.start() for match in self._regex.finditer(self._data)]


def find_signature(pattern: str, data: BytesLike) -> list[int]:
    """Offsets in ``data`` where ``pattern`` matches."""
    return Signature(pattern, data).process()