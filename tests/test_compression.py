import io
import zipfile

import pytest

from utilkit.compression import ZipArchive, zip_extract, zlib_compress, zlib_decompress


@pytest.mark.parametrize(
    "payload",
    [b"a", b"hello world" * 100, bytes(range(256)) * 64, b"\x00" * 40000],
)
def test_zlib_round_trip(payload):
    assert zlib_decompress(zlib_compress(payload)) == payload


def test_zlib_compress_accepts_text():
    assert zlib_decompress(zlib_compress("text value")) == b"text value"


def test_zlib_compress_uses_best_compression_header():
    assert zlib_compress(b"abc")[:2] == b"\x78\xda"


def test_zlib_compress_shrinks_repetitive_data():
    payload = b"abcd" * 10000
    assert len(zlib_compress(payload)) < len(payload)


def test_zlib_decompress_garbage_is_empty():
    assert zlib_decompress(b"not a zlib stream") == b""


def test_zlib_decompress_truncated_is_empty():
    packed = zlib_compress(b"some data to be cut short" * 50)
    assert zlib_decompress(packed[: len(packed) // 2]) == b""


def test_zlib_decompress_empty_input_is_empty():
    assert zlib_decompress(b"") == b""


def test_zip_write_and_extract(tmp_path):
    archive = ZipArchive()
    archive.add("one.txt", b"first")
    archive.add("dir/two.bin", bytes(range(256)))
    target = tmp_path / "nested" / "deeper" / "out.zip"

    assert archive.write(str(target)) is True
    assert zip_extract(target.read_bytes()) == {
        "one.txt": b"first",
        "dir/two.bin": bytes(range(256)),
    }


def test_zip_add_replaces_entry(tmp_path):
    archive = ZipArchive()
    archive.add("a.txt", b"old")
    archive.add("a.txt", "new")
    target = tmp_path / "a.zip"
    assert archive.write(str(target))
    assert len(archive) == 1
    assert zip_extract(target.read_bytes()) == {"a.txt": b"new"}


def test_zip_write_stores_comment(tmp_path):
    archive = ZipArchive()
    archive.add("x", b"y")
    target = tmp_path / "c.zip"
    assert archive.write(str(target), "archive note")
    with zipfile.ZipFile(target) as handle:
        assert handle.comment == b"archive note"


def test_zip_write_uses_deflate(tmp_path):
    archive = ZipArchive()
    archive.add("x", b"z" * 1000)
    target = tmp_path / "d.zip"
    assert archive.write(str(target))
    with zipfile.ZipFile(target) as handle:
        assert handle.getinfo("x").compress_type == zipfile.ZIP_DEFLATED


def test_zip_write_to_directory_fails(tmp_path):
    archive = ZipArchive()
    archive.add("x", b"y")
    assert archive.write(str(tmp_path)) is False


def test_zip_extract_invalid_data_is_empty():
    assert zip_extract(b"definitely not a zip archive") == {}


def test_zip_extract_skips_corrupt_entry():
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_STORED) as handle:
        handle.writestr("good.txt", b"payload-good")
        handle.writestr("bad.txt", b"payload-bad!")
    data = bytearray(buffer.getvalue())
    pos = data.index(b"payload-bad!")
    data[pos] ^= 0xFF

    assert zip_extract(bytes(data)) == {"good.txt": b"payload-good"}