import pytest

from nexusgate.file import Asset
from nexusgate.serve import Response, serve

PAGE = (
    b"<html>\n<head><style></style></head>"
    b'<body><div class="flex">{version}</div></body></html>'
)


@pytest.fixture
def page(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "home.html"
    path.write_bytes(PAGE)
    asset = Asset(str(path))
    yield asset
    asset.close()


def test_serve_page(page):
    response = Response()
    serve(page, response, "1.2.3", "abc1234")
    assert response.status == 200
    assert b"text/html" in response.header
    assert f"content-length:{len(response.body)}\r\n".encode() in response.header
    assert b"1.2.3" in response.body
    assert b"{version}" not in response.body
    assert b"display:flex" in response.body
    assert page.hydrated is True


def test_serve_is_stable_across_calls(page):
    first = Response()
    second = Response()
    serve(page, first, "1.2.3", "abc1234")
    serve(page, second, "1.2.3", "abc1234")
    assert first.body == second.body
    assert second.status == 200


def test_serve_keeps_preset_status(page):
    response = Response(status=404)
    serve(page, response, "1.2.3", "abc1234")
    assert response.status == 404
    assert b"1.2.3" in response.body


def test_serve_missing_file(tmp_path):
    response = Response()
    serve(Asset(str(tmp_path / "absent.html")), response, "1.2.3", "abc1234")
    assert response.status == 500
    assert response.body == b""


def test_serve_body_too_large(page):
    response = Response(body_capacity=16)
    serve(page, response, "1.2.3", "abc1234")
    assert response.status == 500
    assert response.body == b""


def test_serve_plain_text(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    content = b"User-agent: *\nDisallow:\n"
    path = tmp_path / "robots.txt"
    path.write_bytes(content)
    asset = Asset(str(path))
    response = Response()
    serve(asset, response, "1.2.3", "abc1234")
    asset.close()
    assert response.status == 200
    assert response.body == content
    assert b"text/plain" in response.header


def test_serve_missing_component(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "page.html"
    path.write_bytes(b'<html><body><x ref="missing.html"></x></body></html>')
    asset = Asset(str(path))
    response = Response()
    serve(asset, response, "1.2.3", "abc1234")
    asset.close()
    assert response.status == 500
    assert asset.hydrated is False


def test_write_header_format():
    response = Response()
    response.write_header("x", "y")
    assert response.header == b"x:y\r\n"


def test_write_body_capacity():
    response = Response(body_capacity=4)
    response.write_body(b"abcd")
    assert response.body == b"abcd"
    with pytest.raises(ValueError):
        response.write_body(b"e")