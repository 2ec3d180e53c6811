"""Signing in to an upstream host and keeping its session cookie."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional

from nexusgate.http import FetchError, Request, fetch

log = logging.getLogger(__name__)

COOKIE_CAP = 128
COOKIE_LIFETIME = 3600
_SET_COOKIE = b"set-cookie"
_AUTH_KEY = b"auth="


@dataclass
class Host:
    """An upstream host that receives forwarded traffic."""

    id: bytes
    address: str
    port: int
    username: str
    password: str


@dataclass
class Cookie:
    """The session cookie issued by a host and when it was obtained."""

    value: bytes = b""
    cap: int = COOKIE_CAP
    age: float = 0

    def expired(self, now: Optional[float] = None) -> bool:
        """Whether the cookie is older than its lifetime at ``now``."""
        if now is None:
            now = time.time()
        return self.age + COOKIE_LIFETIME < now


class AuthError(Exception):
    """Raised when a host does not issue a session cookie."""


def signin_body(host: Host) -> bytes:
    """The sign-in payload: username and password, each NUL-terminated."""
    return host.username.encode() + b"\x00" + host.password.encode() + b"\x00"


def parse_cookie(header: bytes, cap: int = COOKIE_CAP) -> bytes:
    """Return the auth value from a set-cookie header line."""
    data = bytes(header)
    position = data.lower().find(_SET_COOKIE)
    if position < 0:
        log.warning("host did not return a set cookie header")
        raise AuthError("host did not return a set cookie header")

    rest = data[position + len(_SET_COOKIE):]
    if rest.startswith(b":"):
        rest = rest[1:]
    if rest.startswith(b" "):
        rest = rest[1:]

    start = rest.find(_AUTH_KEY)
    if start < 0:
        log.warning("no auth value in set cookie header")
        raise AuthError("no auth value in set cookie header")
    value = rest[start + len(_AUTH_KEY):]
    end = value.find(b";")
    if end >= 0:
        value = value[:end]
    if len(value) > cap:
        raise AuthError(f"auth value of {len(value)} bytes exceeds {cap} bytes")
    return value


def auth(host: Host, cookie: Cookie) -> Cookie:
    """Sign in to the host and store the issued cookie; return the cookie."""
    request = Request(method="POST", pathname="/api/signin", body=signin_body(host))
    try:
        response = fetch(host.address, host.port, request)
    except FetchError as exc:
        raise AuthError(f"failed to reach {host.address}:{host.port}") from exc

    if response.status != 201:
        log.error("host rejected auth with status %d", response.status)
        raise AuthError(f"host rejected auth with status {response.status}")

    cookie.value = parse_cookie(response.header, cookie.cap)
    cookie.age = time.time()
    return cookie