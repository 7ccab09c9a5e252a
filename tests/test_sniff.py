"""Tests for the magic-byte file sniffer."""

import pytest

from byteops import sniff
from byteops.sniff import SIGNATURES, detect, has_header


@pytest.fixture
def write_file(tmp_path):
    def _write(name: str, content: bytes):
        path = tmp_path / name
        path.write_bytes(content)
        return path

    return _write


def test_signature_table():
    """Magic numbers as published for each format."""
    assert list(SIGNATURES["png"]) == [137, 80, 78, 71, 13, 10, 26, 10]
    assert list(SIGNATURES["jpeg"]) == [255, 216, 255]
    assert list(SIGNATURES["gif"]) == [71, 73, 70, 56, 57, 97]
    assert list(SIGNATURES["bmp"]) == [66, 77]
    assert list(SIGNATURES["mng"]) == [138, 77, 78, 71, 13, 10, 26, 10]
    assert list(SIGNATURES["ppm"]) == [80, 52]
    assert list(SIGNATURES["psd"]) == [56, 66, 80, 83]


@pytest.mark.parametrize("name", sorted(SIGNATURES))
def test_detect_each_format(write_file, name):
    path = write_file(f"sample.{name}", SIGNATURES[name] + b"\x00" * 16)
    assert detect(path) == name
    assert getattr(sniff, f"is_{name}")(path)


def test_has_header_exact_prefix(write_file):
    path = write_file("a.png", SIGNATURES["png"] + b"rest")
    assert has_header(path, SIGNATURES["png"])
    assert not has_header(path, SIGNATURES["jpeg"])


def test_has_header_diverges(write_file):
    path = write_file("broken.png", b"\x89PNX\r\n\x1a\n")
    assert not sniff.is_png(path)


def test_short_file_is_not_a_match(write_file):
    """A file shorter than the signature does not match."""
    path = write_file("short.png", SIGNATURES["png"][:4])
    assert not sniff.is_png(path)
    assert detect(path) is None


def test_missing_file(tmp_path):
    missing = tmp_path / "nope.png"
    assert not has_header(missing, SIGNATURES["png"])
    assert detect(missing) is None


def test_unknown_content(write_file):
    assert detect(write_file("notes.txt", b"just text")) is None
    assert detect(write_file("empty", b"")) is None
