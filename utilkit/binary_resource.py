"""Embedded binary data that can be written out to a temporary file."""

from __future__ import annotations

import os
import tempfile
from typing import Union

from .fileio import read_file, write_file

BytesLike = Union[bytes, bytearray, memoryview]


class ResourceError(RuntimeError):
    """Raised when a resource is missing or cannot be extracted."""


def _write_existing_temp_file(
    directory: str, filename: str, data: bytes, fatal_if_overwrite_fails: bool
) -> str:
    file_path = os.path.join(directory, filename)

    current = read_file(file_path)
    if current is None:
        if not write_file(file_path, data):
            raise ResourceError(f"Failed to write file: {file_path}")
        return file_path

    if current == data or write_file(file_path, data) or not fatal_if_overwrite_fails:
        return file_path

    raise ResourceError(
        "Temporary file was already written, but differs. "
        f"It can't be overwritten as it's still in use: {file_path}"
    )


class BinaryResource:
    """A named blob of bytes that is extracted to the temp folder on demand."""

    def __init__(self, data: BytesLike, filename: str, directory: str | None = None) -> None:
        self._data = bytes(data)
        if not self._data:
            raise ResourceError(f"Unable to load resource: {filename}")
        self._filename = filename
        self._directory = directory
        self._path: str | None = None

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def filename(self) -> str:
        return self._filename

    def get_extracted_file(self, fatal_if_overwrite_fails: bool = False) -> str:
        """Write the data to the temp folder once and return the file's path.

        An existing file with the same content is reused. One that differs is
        overwritten; if that fails, the path is still returned unless
        ``fatal_if_overwrite_fails`` is set, in which case ResourceError is raised.
        """
        if self._path is None:
            directory = self._directory if self._directory is not None else tempfile.gettempdir()
            self._path = _write_existing_temp_file(
                directory, self._filename, self._data, fatal_if_overwrite_fails
            )
        return self._path