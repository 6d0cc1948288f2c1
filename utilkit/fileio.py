"""File and directory helpers."""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Union

StrPath = Union[str, "os.PathLike[str]"]


def remove_file(path: StrPath) -> bool:
    """Delete a file; True if it is gone afterwards, including when it never existed."""
    try:
        os.remove(path)
    except FileNotFoundError:
        return True
    except OSError:
        return False
    return True


def move_file(src: StrPath, target: StrPath) -> bool:
    """Move ``src`` to ``target``; fails when ``target`` already exists."""
    if os.path.lexists(target):
        return False
    try:
        os.rename(src, target)
    except OSError:
        return False
    return True


def file_exists(path: StrPath) -> bool:
    """Whether ``path`` can be opened for reading as a file."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def write_file(path: StrPath, data: bytes | bytearray | str, append: bool = False) -> bool:
    """Write (or append) ``data``, creating parent directories; False on failure."""
    name = os.fspath(path)
    cut = max(name.rfind("/"), name.rfind("\\"))
    if cut > 0:
        create_directory(name[:cut])
    payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    try:
        with open(name, "ab" if append else "wb") as stream:
            stream.write(payload)
    except OSError:
        return False
    return True


def read_file(path: StrPath) -> bytes | None:
    """Return the file's contents, or None when it cannot be read."""
    if not file_exists(path):
        return None
    try:
        with open(path, "rb") as stream:
            return stream.read()
    except OSError:
        return None


def file_size(path: StrPath) -> int:
    """Size in bytes, or 0 when the file cannot be read."""
    if not file_exists(path):
        return 0
    try:
        return os.path.getsize(path)
    except OSError:
        return 0


def create_directory(directory: StrPath) -> bool:
    """Create ``directory`` and its parents; False if it already existed."""
    try:
        os.makedirs(directory)
    except FileExistsError:
        if os.path.isdir(directory):
            return False
        raise
    return True


def directory_exists(directory: StrPath) -> bool:
    return os.path.isdir(directory)


def directory_is_empty(directory: StrPath) -> bool:
    """True for a directory without entries or an empty file; raises if missing."""
    target = Path(directory)
    if target.is_dir():
        with os.scandir(target) as entries:
            return next(entries, None) is None
    return target.stat().st_size == 0


def list_files(directory: StrPath) -> list[str]:
    """Paths of the entries in ``directory``, with forward slashes."""
    base = Path(directory)
    with os.scandir(base) as entries:
        return [(base / entry.name).as_posix() for entry in entries]


def copy_folder(src: StrPath, target: StrPath) -> None:
    """Copy ``src`` recursively into ``target``, overwriting existing files."""
    if os.path.isdir(src):
        shutil.copytree(src, target, dirs_exist_ok=True)
    else:
        shutil.copy2(src, target)