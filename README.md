# utilkit

Small helpers for everyday Python work. The package uses only the standard library.

## Modules

### `utilkit.concurrency`

`Container(value=None, lock=None)` holds a value behind a lock. If no lock is given, it
uses a `threading.Lock`.

- `access(accessor)` calls `accessor(value)` while the lock is held and returns the result.
- `access_with_lock(accessor)` calls `accessor(value, guard)`. The accessor can use
  `guard.release()` and `guard.acquire()` to let go of the lock and take it back.
  `guard.owns_lock` says whether the lock is held at that moment.
- `raw` gives the value without taking the lock.

### `utilkit.strings`

- `split(text, delim)` splits on `delim` and drops a trailing empty piece. Empty text gives `[]`.
- `to_lower(text)` and `to_upper(text)` change ASCII letters only.
- `starts_with(text, substring)` and `ends_with(text, substring)` test how text begins or ends.
- `dump_hex(data, separator=" ")` writes each byte as two upper-case hex digits.
- `strip_colors(text, max_length=None)` removes `^N` colour codes. When `max_length` is
  given, the output holds at most `max_length - 1` characters.
- `replace(text, old, new)` replaces every occurrence of `old`. If `old` is empty, the text
  comes back unchanged.

### `utilkit.info_string`

`InfoString(buffer=None)` parses and builds backslash-separated key/value strings such as
`\name\player\map\dust`.

- `get(key)` returns the value, or `""` if the key is missing.
- `set(key, value)` stores a value.
- `build()` renders the pairs in insertion order.
- The class also supports `in`, `len()` and iteration over its keys.

### `utilkit.flags`

- `parse_flags(argv=None)` returns every argument that starts with `-`, with that dash removed.
- `has_flag(flag, argv=None)` tells whether `-flag` was given. The match ignores ASCII case.

Both functions read `sys.argv` when `argv` is `None`.

### `utilkit.fileio`

Path helpers that report failure through their return value:

- `read_file(path)` returns `bytes`, or `None` if the file cannot be read.
- `write_file(path, data, append=False)` creates missing parent directories and returns
  `False` on failure.
- `remove_file(path)` returns `True` once the file is gone, including when it never existed.
- `move_file(src, target)` refuses to overwrite an existing `target`.
- `file_exists(path)` and `file_size(path)`.
- `create_directory(directory)` returns `False` if the directory already existed.
- `directory_exists(directory)`.
- `directory_is_empty(directory)` raises if the path does not exist.
- `list_files(directory)` returns paths with forward slashes.
- `copy_folder(src, target)` copies recursively and overwrites existing files.

### `utilkit.compression`

- `zlib_compress(data)` compresses at the best compression level.
- `zlib_decompress(data)` returns `b""` for a corrupt or incomplete stream.
- `ZipArchive` collects entries with `add(filename, data)`. `write(filename, comment="")`
  creates the target directory, writes a deflated archive and returns `True` or `False`.
- `zip_extract(data)` reads an in-memory archive into a `dict[str, bytes]`. It skips entries
  it cannot read and returns `{}` for an archive it cannot open.

### `utilkit.signature`

`Signature(pattern, data)` and `find_signature(pattern, data)` search a byte buffer for a hex
pattern with `?` wildcards.

- The result lists the offsets of every match, overlapping matches included, in ascending order.
- A malformed pattern raises `SignatureError`, which is a `ValueError`.
- A `Signature` has two properties: `mask`, where `x` marks a byte that must match and `?`
  marks a wildcard, and `pattern`, which holds the bytes to compare.

### `utilkit.http`

- `get_data(url)` returns the response body as `bytes`, or `None` if the fetch fails.
- `get_data_async(url)` does the same work on a background thread and returns a
  `concurrent.futures.Future`.

### `utilkit.hardware_breakpoint`

`DebugContext` holds four address registers (`addresses`) and the control register (`dr7`).

- `activate(address, length, cond, context)` uses the first free slot and returns its index.
  `length` must be 1, 2 or 4. `cond` is a `Condition`: `EXECUTE`, `WRITE` or `READ_WRITE`.
- `deactivate(index, context)` turns off one slot.
- `deactivate_all(context)` turns off every slot.

A bad length, a bad index or having no free slot raises `HardwareBreakpointError`.

### `utilkit.smbios`

- `get_uuid(raw_data=None)` walks a raw SMBIOS blob and returns the system UUID in big-endian
  byte order. The blob is an 8-byte header ending in the table length, followed by the table.
  The function returns `b""` when there is no UUID. Without `raw_data`, it reads
  `/sys/firmware/dmi/tables/DMI`.
- `parse_uuid(data)` converts 16 raw bytes. If they are all `0x00` or all `0xFF`, it returns `b""`.
- `is_set(data, value, length=None)` checks that the bytes all equal `value`.

### `utilkit.binary_resource`

`BinaryResource(data, filename, directory=None)` holds a blob of bytes. Empty data raises
`ResourceError`.

`get_extracted_file(fatal_if_overwrite_fails=False)` writes the blob into the temp folder, or
into `directory` if one was given, and returns the path. The file is written only on the first
call; later calls return the same path.

- An existing file with the same content is reused.
- An existing file that differs is overwritten.
- If that overwrite fails, the path is still returned. With `fatal_if_overwrite_fails=True`,
  `ResourceError` is raised instead.

## Example

```python
from utilkit.info_string import InfoString
from utilkit.signature import find_signature
from utilkit.compression import zlib_compress, zlib_decompress

info = InfoString("\\name\\player\\map\\dust")
info.get("map")        # "dust"
info.build()           # "\\name\\player\\map\\dust"

find_signature("DE ? BE", b"\x00\xde\xad\xbe\xef")   # [1]

zlib_decompress(zlib_compress(b"hello"))             # b"hello"
```

## What it does not do

- It is a library only and installs no command-line tool.
- `utilkit.hardware_breakpoint` works only on a `DebugContext` object. It does not read or
  change the registers of real threads.
- Called without data, `get_uuid` only finds a UUID on systems that expose
  `/sys/firmware/dmi/tables/DMI` to the current user. Elsewhere it returns `b""`.

## Installing for development

```
pip install -e .[test]
pytest
```