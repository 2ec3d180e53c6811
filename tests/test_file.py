import os

import pytest

from nexusgate.file import Asset, content_type


@pytest.mark.parametrize(
    "path, expected",
    [
        ("robots.txt", "text/plain"),
        ("./pages/home.html", "text/html"),
        ("noextension", "text/unknown"),
        ("style.css", "unknown"),
    ],
)
def test_content_type(path, expected):
    assert content_type(path) == expected


def _write(path, data, mtime):
    path.write_bytes(data)
    os.utime(path, (mtime, mtime))


def test_load_reads_content(tmp_path):
    page = tmp_path / "page.html"
    _write(page, b"first", 1000)
    asset = Asset(str(page))
    assert asset.load() == b"first"
    assert asset.modified == 1000
    assert asset.hydrated is False
    asset.close()


def test_reload_on_new_mtime(tmp_path):
    page = tmp_path / "page.html"
    _write(page, b"first", 1000)
    asset = Asset(str(page))
    asset.load()
    asset.hydrated = True
    _write(page, b"second", 2000)
    assert asset.load() == b"second"
    assert asset.hydrated is False
    asset.close()


def test_cached_when_mtime_unchanged(tmp_path):
    page = tmp_path / "page.html"
    _write(page, b"first", 1000)
    asset = Asset(str(page))
    asset.load()
    asset.hydrated = True
    _write(page, b"fresh", 1000)
    assert asset.load() == b"first"
    assert asset.hydrated is True
    asset.close()


def test_missing_file_raises(tmp_path):
    asset = Asset(str(tmp_path / "missing.html"))
    with pytest.raises(FileNotFoundError):
        asset.load()
    assert asset.content is None


def test_close_reports_open_state(tmp_path):
    page = tmp_path / "page.txt"
    _write(page, b"text", 1000)
    asset = Asset(str(page))
    assert asset.close() is False
    asset.load()
    assert asset.close() is True
    assert asset.close() is False
    assert asset.load() == b"text"
    asset.close()