import socket
import threading

import pytest

from nexusgate.http import FetchError, HttpResponse, Request, encode_request, fetch, parse_response


def test_encode_request():
    request = Request(
        method="POST",
        pathname="/api/signin",
        header=b"cookie:auth=token\r\n",
        body=b"abc",
    )
    assert encode_request(request) == b"POST /api/signin HTTP/1.1\r\ncookie:auth=token\r\n\r\nabc"


def test_parse_response_status_and_header():
    data = b"HTTP/1.1 201 Created\r\nSet-Cookie: auth=token; Path=/\r\n\r\n"
    response = parse_response(data, 256)
    assert response == HttpResponse(status=201, header=b"set-cookie: auth=token; path=/")


def test_parse_response_keeps_first_header_only():
    data = b"HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\nContent-Length: 2\r\n\r\nhi"
    response = parse_response(data, 256)
    assert response.status == 200
    assert response.header == b"content-type: text/plain"


def test_parse_response_header_cap():
    data = b"HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\n\r\n"
    with pytest.raises(FetchError):
        parse_response(data, 10)


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"HTTP/1.1",
        b"HTTP/1.1 2x0 OK\r\n\r\n",
        b"HTTP/1.1 200 OK",
        b"HTTP/1.1 200 OK\r\nx",
    ],
)
def test_parse_response_rejects_malformed(data):
    with pytest.raises(FetchError):
        parse_response(data, 256)


def _serve_once(reply):
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)
    received = []

    def run():
        conn, _ = listener.accept()
        with conn:
            received.append(conn.recv(4096))
            conn.sendall(reply)
        listener.close()

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    return listener.getsockname()[1], received, thread


def test_fetch_round_trip():
    port, received, thread = _serve_once(b"HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\n\r\nhi")
    request = Request(method="GET", pathname="/", body=b"ping")
    response = fetch("127.0.0.1", port, request)
    thread.join(timeout=5)
    assert response.status == 200
    assert response.header == b"content-type: text/plain"
    assert received == [encode_request(request)]


def test_fetch_refused():
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    with pytest.raises(FetchError):
        fetch("127.0.0.1", port, Request(method="GET", pathname="/"))


def test_fetch_rejects_oversized_request():
    request = Request(method="POST", pathname="/", body=b"x" * 4096)
    with pytest.raises(FetchError):
        fetch("127.0.0.1", 1, request)