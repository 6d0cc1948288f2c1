"""Backslash-separated key/value strings such as ``\\key\\value``."""

from __future__ import annotations

from typing import Iterator

from .strings import split


class InfoString:
    """A mapping of keys to values that renders as ``\\k1\\v1\\k2\\v2``."""

    def __init__(self, buffer: str | None = None) -> None:
        self._pairs: dict[str, str] = {}
        if buffer is not None:
            self._parse(buffer)

    def _parse(self, buffer: str) -> None:
        if buffer.startswith("\\"):
            buffer = buffer[1:]
        parts = split(buffer, "\\")
        for key, value in zip(parts[::2], parts[1::2]):
            self._pairs[key] = value

    def set(self, key: str, value: str) -> None:
        self._pairs[key] = value

    def get(self, key: str) -> str:
        """Return the value for ``key``, or an empty string."""
        return self._pairs.get(key, "")

    def build(self) -> str:
        return "".join(f"\\{key}\\{value}" for key, value in self._pairs.items())

    def __contains__(self, key: object) -> bool:
        return key in self._pairs

    def __iter__(self) -> Iterator[str]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)