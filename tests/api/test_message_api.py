from __future__ import annotations

import logging

import pytest

from chunkstego import api
from chunkstego.exceptions import ChunkNotFoundError
from chunkstego.framing import Png
from chunkstego.framing.errors import FormatError, SignatureMismatchError


def test_hide_message_appends_chunk_in_place(png_path):
    chunk = api.hide_message(png_path, "ruSt", "This is a secret message!")

    assert chunk.data == b"This is a secret message!"
    chunks = api.list_chunks(png_path)
    assert [str(c.chunk_type) for c in chunks] == ["IHDR", "IDAT", "IEND", "ruSt"]
    assert chunks[-1] == chunk


def test_hide_message_to_output_leaves_input_untouched(png_path, tmp_path):
    original = png_path.read_bytes()
    output = tmp_path / "out.png"

    api.hide_message(png_path, "ruSt", "hidden", output_path=output)

    assert png_path.read_bytes() == original
    assert output.read_bytes().startswith(original)
    assert [c.data for c in api.find_messages(output, "ruSt")] == [b"hidden"]


def test_hide_message_stores_text_as_utf8(png_path):
    api.hide_message(png_path, "ruSt", "سلام")
    (chunk,) = api.find_messages(png_path, "ruSt")
    assert chunk.data_as_utf8() == "سلام"


def test_hide_message_warns_on_reserved_bit(png_path, caplog):
    with caplog.at_level(logging.WARNING, logger="chunkstego.api"):
        api.hide_message(png_path, "Rust", "x")
    assert "reserved bit" in caplog.text


def test_hide_message_rejects_bad_chunk_type(png_path):
    original = png_path.read_bytes()
    with pytest.raises(FormatError):
        api.hide_message(png_path, "ru5t", "x")
    assert png_path.read_bytes() == original


def test_find_messages_returns_all_matches_in_order(png_path):
    api.hide_message(png_path, "ruSt", "one")
    api.hide_message(png_path, "teXt", "other")
    api.hide_message(png_path, "ruSt", "two")

    assert [c.data for c in api.find_messages(png_path, "ruSt")] == [b"one", b"two"]
    assert api.find_messages(png_path, "noNe") == []


def test_remove_message_removes_first_match(png_path):
    api.hide_message(png_path, "ruSt", "one")
    api.hide_message(png_path, "ruSt", "two")

    removed = api.remove_message(png_path, "ruSt")

    assert removed.data == b"one"
    assert [c.data for c in api.find_messages(png_path, "ruSt")] == [b"two"]


def test_remove_message_missing_chunk_raises_and_keeps_file(png_path):
    original = png_path.read_bytes()
    with pytest.raises(ChunkNotFoundError) as excinfo:
        api.remove_message(png_path, "ruSt")
    assert excinfo.value.chunk_type == "ruSt"
    assert png_path.read_bytes() == original


def test_read_png_rejects_non_png(tmp_path):
    path = tmp_path / "not.png"
    path.write_bytes(b"GIF89a" + b"\x00" * 16)
    with pytest.raises(SignatureMismatchError):
        api.read_png(path)


def test_write_png_roundtrip(png_path, tmp_path):
    png = api.read_png(png_path)
    copy = tmp_path / "copy.png"
    api.write_png(copy, png)
    assert copy.read_bytes() == png_path.read_bytes()
    assert api.read_png(copy) == png
    assert isinstance(png, Png)
