"""Command-line switches given as ``-name``."""

from __future__ import annotations

import sys
from functools import lru_cache
from typing import Iterable, Sequence

from .strings import to_lower


def parse_flags(argv: Iterable[str] | None = None) -> list[str]:
    """Return the arguments that start with ``-``, without that first dash."""
    args = sys.argv if argv is None else argv
    return [arg[1:] for arg in args if arg.startswith("-")]


@lru_cache(maxsize=32)
def _lowered_flags(args: tuple[str, ...]) -> frozenset[str]:
    return frozenset(to_lower(flag) for flag in parse_flags(args))


def has_flag(flag: str, argv: Sequence[str] | None = None) -> bool:
    """Whether ``-flag`` was given, ignoring ASCII case. Defaults to ``sys.argv``."""
    args = tuple(sys.argv if argv is None else argv)
    return to_lower(flag) in _lowered_flags(args)