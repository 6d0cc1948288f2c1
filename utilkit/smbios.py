"""Reading the system UUID out of an SMBIOS table."""

from __future__ import annotations

import struct
from pathlib import Path
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]

_RAW_HEADER = struct.Struct("<BBBBI")
_DMI_HEADER_SIZE = 4
_SYSTEM_INFORMATION = 0x01
_MIN_SYSTEM_INFORMATION_LENGTH = 0x19
_UUID_OFFSET = 0x8
_UUID_SIZE = 16
_SYSFS_TABLE = Path("/sys/firmware/dmi/tables/DMI")


def is_set(data: BytesLike, value: int, length: int | None = None) -> bool:
    """Whether the first ``length`` bytes all equal ``value`` (taken modulo 256)."""
    view = bytes(data) if length is None else bytes(data[:length])
    if length is not None and len(view) < length:
        raise ValueError("data is shorter than length")
    target = value & 0xFF
    return all(byte == target for byte in view)


def parse_uuid(data: BytesLike) -> bytes:
    """Turn a 16-byte SMBIOS UUID into big-endian order; b"" if all 0x00 or 0xFF."""
    raw = bytes(data[:_UUID_SIZE])
    if len(raw) < _UUID_SIZE:
        raise ValueError("a UUID needs 16 bytes")
    if is_set(raw, 0) or is_set(raw, -1):
        return b""
    return raw[3::-1] + raw[5:3:-1] + raw[7:5:-1] + raw[8:]


def _read_firmware_table() -> bytes:
    """The raw SMBIOS blob (header plus table) as the firmware exposes it, or b""."""
    try:
        table = _SYSFS_TABLE.read_bytes()
    except OSError:
        return b""
    return _RAW_HEADER.pack(0, 0, 0, 0, len(table)) + table


def get_uuid(raw_data: BytesLike | None = None) -> bytes:
    """Find the system-information structure and return its UUID, or b"".

    ``raw_data`` is the firmware blob: an 8-byte header whose last field is the
    table length, followed by the table. Without it the firmware is read.
    """
    blob = _read_firmware_table() if raw_data is None else bytes(raw_data)
    if len(blob) < _RAW_HEADER.size:
        return b""

    *_, declared_length = _RAW_HEADER.unpack_from(blob)
    table = blob[_RAW_HEADER.size:]
    length = min(declared_length, len(table))

    i = 0
    while i + _DMI_HEADER_SIZE < length:
        kind, struct_length = table[i], table[i + 1]
        if struct_length < _DMI_HEADER_SIZE:
            return b""

        if kind == _SYSTEM_INFORMATION and struct_length >= _MIN_SYSTEM_INFORMATION_LENGTH:
            start = i + _UUID_OFFSET
            uuid = table[start:start + _UUID_SIZE]
            if len(uuid) < _UUID_SIZE:
                return b""
            return parse_uuid(uuid)

        # Skip the formatted area, then the string set ending in a double NUL.
        i += struct_length
        while i + 1 < length and table[i:i + 2] != b"\0\0":
            i += 1
        i += 2

    return b""