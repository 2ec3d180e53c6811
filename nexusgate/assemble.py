"""Expansion of component references, imports and build placeholders."""

from __future__ import annotations

import logging
import os
from typing import Callable, Optional

log = logging.getLogger(__name__)

Reader = Callable[[str], bytes]

_PATH_MAX = 64
_REF = b' ref="'
_LT, _GT, _QUOTE, _LBRACE, _LF = ord("<"), ord(">"), ord('"'), ord("{"), ord("\n")


class AssembleError(Exception):
    """Raised when a referenced component or script cannot be read."""


def _read_file(path: str) -> bytes:
    with open(path, "rb") as handle:
        return handle.read()


def _load(reader: Reader, raw_path: bytes) -> bytes:
    path = os.fsdecode(raw_path)
    try:
        return bytes(reader(path))
    except OSError as exc:
        raise AssembleError(f"failed to read {path}: {exc}") from exc


def _expand_markup(src: bytes, version: bytes, commit: bytes, reader: Reader):
    """Expand the document up to the closing body tag."""
    out = bytearray()
    size = len(src)
    index = 0
    tag = quote = recurse = False

    while index < size:
        byte = src[index]
        if byte == _LT and not tag and not quote:
            if index + 7 < size and src.startswith(b"/body>", index + 1):
                break
            tag = True
        elif byte == _GT and tag and not quote:
            tag = False
        elif byte == _QUOTE and tag:
            quote = not quote

        if tag and not quote and index + 6 < size and src.startswith(_REF, index):
            index += 6
            start = index
            while index < size and src[index] != _QUOTE and index - start < _PATH_MAX:
                index += 1
            path_end = index
            close = src.find(b">", index)
            index = size if close < 0 else close

            component = _load(reader, src[start:path_end])
            cut = out.rfind(b"<")
            del out[max(cut, 0):]
            out += component
            recurse = recurse or _REF in component
        elif (
            not tag
            and not quote
            and byte == _LBRACE
            and index + 9 < size
            and src.startswith(b"version}", index + 1)
        ):
            index += 8
            out += version
        elif (
            not tag
            and not quote
            and byte == _LBRACE
            and index + 8 < size
            and src.startswith(b"commit}", index + 1)
        ):
            index += 7
            out += commit
        else:
            out.append(byte)
        index += 1

    return out, index, recurse


def _expand_imports(src: bytes, index: int, reader: Reader, out: bytearray) -> None:
    """Inline script imports found after the closing body tag."""
    size = len(src)
    while index < size:
        if index + 8 < size and src.startswith(b"import '", index):
            index += 8
            start = index
            length = 0
            while index < size and src[index] != _LF and length < _PATH_MAX:
                index += 1
                if index >= size or src[index] not in b"';":
                    length += 1
            out += _load(reader, src[start:start + length])
        else:
            out.append(src[index])
        index += 1


def assemble(source: bytes, version: str, commit: str, reader: Optional[Reader] = None) -> bytes:
    """Return the document with components, scripts and placeholders expanded.

    ``reader`` maps a referenced path to its bytes; by default files are read
    relative to the working directory.
    """
    read = reader or _read_file
    version_bytes = version.encode()
    commit_bytes = commit.encode()
    content = bytes(source)

    while True:
        out, index, recurse = _expand_markup(content, version_bytes, commit_bytes, read)
        _expand_imports(content, index, read, out)
        content = bytes(out)
        if not recurse:
            return content
        log.debug("recursing assembled document")