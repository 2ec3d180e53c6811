"""Minimal HTTP/1.1 client used to talk to upstream hosts."""

from __future__ import annotations

import logging
import re
import socket
from dataclasses import dataclass
from itertools import islice

log = logging.getLogger(__name__)

_BUFFER_SIZE = 2048
_HEADER_CAP = 256
_DIGITS = re.compile(rb"[0-9]*")
_LINE_BREAK = re.compile(rb"[\r\n]")


@dataclass
class Request:
    """An outgoing request; ``header`` holds raw CRLF-terminated lines."""

    method: str
    pathname: str
    protocol: str = "HTTP/1.1"
    header: bytes = b""
    body: bytes = b""


@dataclass
class HttpResponse:
    """Status code and the first header line, lower-cased."""

    status: int
    header: bytes


class FetchError(Exception):
    """Raised when a request cannot be sent or its response parsed."""


def encode_request(request: Request) -> bytes:
    """Serialise a request into its wire form."""
    line = f"{request.method} {request.pathname} {request.protocol}\r\n".encode("ascii")
    return line + bytes(request.header) + b"\r\n" + bytes(request.body)


def parse_response(data: bytes, header_cap: int = _HEADER_CAP) -> HttpResponse:
    """Parse the status and first header line of a raw response.

    Only bytes before offset ``header_cap`` of the response are considered
    for the header line.
    """
    data = bytes(data)
    space = data.find(b" ")
    if space < 0:
        raise FetchError("failed to parse response")

    digits = _DIGITS.match(data, space + 1)
    end = digits.end()
    if end >= len(data) or data[end] != ord(" "):
        raise FetchError("failed to parse response")
    status = int(digits.group() or b"0") & 0xFFFF

    line_end = data.find(b"\n", end + 1)
    if line_end < 0:
        raise FetchError("failed to parse response")
    header_start = line_end + 1

    region = data[header_start:min(header_cap, len(data))]
    breaks = [match.start() for match in islice(_LINE_BREAK.finditer(region), 2)]
    if len(breaks) < 2:
        raise FetchError("failed to parse response")
    header_len = breaks[1] - 1
    return HttpResponse(status=status, header=region[:header_len].lower())


def fetch(address: str, port: int, request: Request) -> HttpResponse:
    """Send a request to an IPv4 address and parse the reply."""
    payload = encode_request(request)
    if len(payload) > _BUFFER_SIZE:
        raise FetchError(f"request of {len(payload)} bytes exceeds {_BUFFER_SIZE} bytes")

    try:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM, socket.IPPROTO_TCP) as sock:
            sock.connect((address, port))
            sock.sendall(payload)
            data = sock.recv(_BUFFER_SIZE)
    except OSError as exc:
        log.error("failed to fetch from %s:%d because %s", address, port, exc)
        raise FetchError(f"failed to reach {address}:{port}: {exc}") from exc

    return parse_response(data)