"""zlib streams and zip archives held in memory."""

from __future__ import annotations

import io
import os
import zipfile
import zlib
from typing import Union

from .fileio import remove_file, write_file

BytesLike = Union[bytes, bytearray, memoryview]

_CORRUPT_ENTRY_ERRORS = (
    zipfile.BadZipFile,
    zlib.error,
    NotImplementedError,
    RuntimeError,
    ValueError,
    EOFError,
    OSError,
)


def _as_bytes(data: BytesLike | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def zlib_compress(data: BytesLike | str) -> bytes:
    """Compress ``data`` as a zlib stream at the best compression level."""
    try:
        return zlib.compress(_as_bytes(data), zlib.Z_BEST_COMPRESSION)
    except zlib.error:
        return b""


def zlib_decompress(data: BytesLike) -> bytes:
    """Inflate a zlib stream; returns b"" if it is corrupt or incomplete."""
    inflater = zlib.decompressobj()
    try:
        result = inflater.decompress(bytes(data))
    except zlib.error:
        return b""
    if not inflater.eof:
        return b""
    return result


class ZipArchive:
    """Collects named files in memory and writes them as one zip archive."""

    def __init__(self) -> None:
        self._files: dict[str, bytes] = {}

    def __len__(self) -> int:
        return len(self._files)

    def __contains__(self, filename: object) -> bool:
        return filename in self._files

    def add(self, filename: str, data: BytesLike | str) -> None:
        """Add or replace the entry ``filename``."""
        self._files[filename] = _as_bytes(data)

    def write(self, filename: str | os.PathLike[str], comment: str = "") -> bool:
        """Write all entries to ``filename``, creating its directory; False on failure."""
        # Writing and removing an empty file creates the parent directories.
        write_file(filename, b"")
        remove_file(filename)

        try:
            with zipfile.ZipFile(
                filename,
                "w",
                compression=zipfile.ZIP_DEFLATED,
                compresslevel=zlib.Z_BEST_COMPRESSION,
                allowZip64=True,
            ) as archive:
                if comment:
                    archive.comment = comment.encode("utf-8")
                for name, data in self._files.items():
                    archive.writestr(name, data)
        except (OSError, ValueError, zipfile.LargeZipFile):
            return False
        return True


def zip_extract(data: BytesLike) -> dict[str, bytes]:
    """Read every entry of a zip archive held in ``data``.

    Entries that cannot be read are skipped; an unreadable archive gives {}.
    """
    try:
        archive = zipfile.ZipFile(io.BytesIO(bytes(data)))
    except (zipfile.BadZipFile, OSError, ValueError, EOFError):
        return {}

    files: dict[str, bytes] = {}
    with archive:
        for info in archive.infolist():
            try:
                files[info.filename] = archive.read(info)
            except _CORRUPT_ENTRY_ERRORS:
                continue
    return files