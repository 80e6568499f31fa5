import base64
import os
import sys
from datetime import datetime

import pytest

from image_browser import config
from image_browser.exceptions import ErrorKind, FileReadError
from image_browser.metadata.extract import FileReader, file_name_of


@pytest.mark.parametrize("size", [0, 1, 3 * 1024 * 1024 + 7])
def test_read_bytes_base64_round_trip(tmp_path, size):
    data = os.urandom(size)
    p = tmp_path / "blob.png"
    p.write_bytes(data)

    raw = FileReader().read_file_bytes(p)
    assert raw == data
    assert base64.b64decode(base64.b64encode(raw)) == data


def test_read_missing_file_is_not_found(tmp_path):
    with pytest.raises(FileReadError) as exc:
        FileReader().read_file_bytes(tmp_path / "missing.png")
    assert exc.value.kind == ErrorKind.NOT_FOUND


def test_read_directory_is_unreadable(tmp_path):
    with pytest.raises(FileReadError) as exc:
        FileReader().read_file_bytes(tmp_path)
    assert exc.value.kind == ErrorKind.UNREADABLE


def test_get_metadata(gallery):
    path = str(gallery / "x.png")
    meta = FileReader().get_metadata(path)

    assert meta.path == path
    assert meta.name == "x.png"
    assert meta.size_bytes == os.path.getsize(path)
    assert meta.width is None and meta.height is None
    datetime.fromisoformat(meta.created_at)


def test_get_metadata_missing_file(tmp_path):
    with pytest.raises(FileReadError) as exc:
        FileReader().get_metadata(tmp_path / "ghost.jpg")
    assert exc.value.kind == ErrorKind.NOT_FOUND


@pytest.mark.skipif(sys.platform == "win32", reason="directories can't be opened with os.open on Windows")
def test_get_metadata_without_final_name_uses_placeholder(tmp_path):
    (tmp_path / "sub").mkdir()
    meta = FileReader().get_metadata(os.path.join(str(tmp_path), "sub", ".."))
    assert meta.name == config.UNKNOWN_NAME


def test_get_metadata_bad_clock_is_unreadable(monkeypatch, gallery):
    import image_browser.metadata.extract as extract_module

    def broken_clock(st):
        raise extract_module.TimestampError("pre-epoch")

    monkeypatch.setattr(extract_module, "resolve_created_at", broken_clock)
    with pytest.raises(FileReadError) as exc:
        FileReader().get_metadata(gallery / "x.png")
    assert exc.value.kind == ErrorKind.UNREADABLE


@pytest.mark.parametrize(
    "path,expected",
    [
        ("/photos/a.png", "a.png"),
        ("photos/sub/", "sub"),
        ("/", None),
        ("photos/..", None),
        ("", None),
    ],
)
def test_file_name_of(path, expected):
    assert file_name_of(path) == expected
