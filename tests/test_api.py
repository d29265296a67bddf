# tests/test_api.py
from __future__ import annotations

from pathlib import Path

import pytest
from conftest import HELLO_BE, HELLO_LE

import unutf16
from unutf16 import BOMReader, Strategy


def test_public_names():
    for name in unutf16.__all__:
        assert hasattr(unutf16, name)


def test_version():
    assert unutf16.__version__ == "1.0.0"


def test_decode_le():
    assert unutf16.decode(HELLO_LE) == b"hello"


def test_decode_be():
    assert unutf16.decode(bytearray(HELLO_BE)) == b"hello"


def test_decode_passthrough():
    assert unutf16.decode(b"hello world") == b"hello world"


def test_decode_empty():
    assert unutf16.decode(b"") == b""


def test_decode_errors_option():
    data = b"\xff\xfe" + b"x\x00" + b"\x00\xdc"
    assert unutf16.decode(data, errors="ignore") == b"x"
    with pytest.raises(UnicodeDecodeError):
        unutf16.decode(data)


def test_decode_error_positions_include_bom():
    data = b"\xff\xfe" + b"a\x00" + b"\x3d\xd8" + b"b\x00"
    with pytest.raises(UnicodeDecodeError) as excinfo:
        unutf16.decode(data)
    assert excinfo.value.object == data
    assert (excinfo.value.start, excinfo.value.end) == (4, 6)


def test_detect_bom_reexported():
    assert unutf16.detect_bom(HELLO_LE) is Strategy.UTF16_LE


def test_open_utf8_utf16_file(tmp_path: Path):
    f = tmp_path / "notes.txt"
    f.write_bytes("Grüße\r\n".encode("utf-16"))
    with unutf16.open_utf8(f) as reader:
        assert isinstance(reader, BOMReader)
        assert reader.read() == "Grüße\r\n".encode()
        assert reader.strategy in (Strategy.UTF16_LE, Strategy.UTF16_BE)
    assert reader.source.closed


def test_open_utf8_plain_file(tmp_path: Path):
    f = tmp_path / "plain.txt"
    f.write_bytes(b"already utf-8")
    with unutf16.open_utf8(str(f), chunk_size=4) as reader:
        assert reader.read() == b"already utf-8"
        assert reader.strategy is Strategy.PASSTHROUGH


def test_open_utf8_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        unutf16.open_utf8(tmp_path / "nope.txt")


def test_open_utf8_invalid_option_closes_file(tmp_path: Path, monkeypatch):
    f = tmp_path / "plain.txt"
    f.write_bytes(b"x")
    opened = []
    original_open = Path.open

    def recording_open(self, *args, **kwargs):
        handle = original_open(self, *args, **kwargs)
        opened.append(handle)
        return handle

    monkeypatch.setattr(Path, "open", recording_open)
    with pytest.raises(ValueError):
        unutf16.open_utf8(f, errors="nope")
    assert opened
    assert opened[0].closed
