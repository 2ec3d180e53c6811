"""Serving cached, assembled and hydrated page assets."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from nexusgate.assemble import AssembleError, assemble
from nexusgate.file import Asset, content_type
from nexusgate.hydrate import HydrateError, extract, hydrate

log = logging.getLogger(__name__)

DEFAULT_BODY_CAPACITY = 65536


@dataclass
class Response:
    """An outgoing response being filled in by a handler."""

    status: int = 0
    header: bytearray = field(default_factory=bytearray)
    body: bytearray = field(default_factory=bytearray)
    body_capacity: int = DEFAULT_BODY_CAPACITY

    def write_header(self, name: str, value) -> None:
        self.header += f"{name}:{value}\r\n".encode("latin-1")

    def write_body(self, data: bytes) -> None:
        if len(self.body) + len(data) > self.body_capacity:
            raise ValueError(
                f"body of {len(self.body) + len(data)} bytes exceeds {self.body_capacity} bytes"
            )
        self.body += data


def serve(asset: Asset, response: Response, version: str, commit: str) -> None:
    """Write the asset into the response, preparing it on first use.

    Failures set the status to 500 and leave the body empty.
    """
    try:
        asset.load()
    except OSError:
        response.status = 500
        return

    with asset.lock:
        if not asset.hydrated:
            try:
                assembled = assemble(asset.content, version, commit)
                asset.content = assembled
                asset.content = hydrate(assembled, extract(assembled))
            except (AssembleError, HydrateError) as exc:
                log.error("failed to prepare %s because %s", asset.path, exc)
                response.status = 500
                return
            asset.hydrated = True
        content = asset.content

    if content is None:
        return

    log.info("sending file %s", asset.path)
    if len(content) > response.body_capacity:
        log.error(
            "file length %d exceeds buffer length %d", len(content), response.body_capacity
        )
        response.status = 500
        return

    if response.status == 0:
        response.status = 200
    response.write_header("content-type", content_type(asset.path))
    response.write_header("content-length", len(content))
    response.write_body(content)