"""Small utilities: locked containers, strings, info strings, flags, file I/O, compression,
byte signatures, HTTP fetching, debug-register bookkeeping, SMBIOS parsing and resources."""

__version__ = "0.1.0"