"""Cached file assets that reload when their modification time changes."""

from __future__ import annotations

import logging
import os
import threading
from typing import BinaryIO

log = logging.getLogger(__name__)


def content_type(path: str) -> str:
    """Return the content type for a path based on its last dot."""
    path = os.fspath(path)
    dot = path.rfind(".")
    if dot < 0:
        log.error("file path %s has no extension", path)
        return "text/unknown"
    extension = path[dot:]
    if extension == ".txt":
        return "text/plain"
    if extension == ".html":
        return "text/html"
    log.error("unknown content type %s", extension)
    return "unknown"


class Asset:
    """A file kept open and cached in memory."""

    def __init__(self, path) -> None:
        self.path = path
        self.content: bytes | None = None
        self.modified = 0
        self.hydrated = False
        self.lock = threading.RLock()
        self._handle: BinaryIO | None = None

    def load(self) -> bytes:
        """Return the file content, reading it again if it changed on disk."""
        with self.lock:
            if self._handle is None:
                log.debug("opening file %s", self.path)
                try:
                    self._handle = open(self.path, "rb")
                except OSError as exc:
                    log.error("failed to open %s because %s", self.path, exc)
                    raise

            stat = os.fstat(self._handle.fileno())
            modified = int(stat.st_mtime)
            if self.content is None or self.modified != modified:
                log.debug("reading file %s", self.path)
                self._handle.seek(0)
                data = self._handle.read(stat.st_size)
                if len(data) != stat.st_size:
                    raise OSError(
                        f"failed to read {stat.st_size - len(data)} bytes from {self.path}"
                    )
                self.content = data
                self.modified = modified
                self.hydrated = False
            return self.content

    def close(self) -> bool:
        """Close the underlying file; return whether it was open."""
        with self.lock:
            if self._handle is None:
                return False
            self._handle.close()
            self._handle = None
            return True