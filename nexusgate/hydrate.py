"""Collection of utility classes from a page and injection of their CSS."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from nexusgate.palette import color
from nexusgate.styles import cursor, font, layout, opacity, table, text
from nexusgate.utility import (
    Breakpoint,
    RuleBuffer,
    UtilityClass,
    border,
    common,
    display,
    flex,
    overflow,
    position,
    sizing,
    spacing,
)

log = logging.getLogger(__name__)

_MAX_CLASSES = 256
_STYLE_TAG = b"<style>"

_LT, _GT, _QUOTE, _APOS = ord("<"), ord(">"), ord('"'), ord("'")
_SPACE, _COMMA, _LPAREN, _RPAREN = ord(" "), ord(","), ord("("), ord(")")

GLOBAL = Breakpoint(tag="")
RESPONSIVE: Tuple[Breakpoint, ...] = (
    Breakpoint("xs", "@media (min-width:512px){", "}"),
    Breakpoint("sm", "@media (min-width:640px){", "}"),
    Breakpoint("md", "@media (min-width:768px){", "}"),
    Breakpoint("lg", "@media (min-width:1024px){", "}"),
    Breakpoint("xl", "@media (min-width:1280px){", "}"),
)
DARK = Breakpoint("dark", "@media (prefers-color-scheme:dark){", "}")

_PER_BREAKPOINT = (display, spacing, sizing, border, overflow, flex)


class HydrateError(Exception):
    """Raised when classes cannot be collected or their CSS cannot be placed."""


class _Collector:
    """Gathers unique class names as the scanner marks their boundaries."""

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.names: List[str] = []
        self.start = 0
        self.length = 0

    def append(self, next_start: Optional[int] = None) -> None:
        if len(self.names) + 1 >= _MAX_CLASSES:
            raise HydrateError(f"can not handle more than {_MAX_CLASSES} classes")
        if self.length:
            name = self.data[self.start:self.start + self.length].decode("latin-1")
            if name not in self.names:
                self.names.append(name)
            self.length = 0
        if next_start is not None:
            self.start = next_start


def extract(content: bytes) -> List[str]:
    """Return the unique class names used in the body and its script.

    Classes come from ``class="..."`` attributes after the opening body tag
    and from ``classList.add('...')`` calls after the first script tag.
    """
    data = bytes(content)
    size = len(data)
    collector = _Collector(data)

    body = data.find(b"<body")
    if body < 0 or body + 5 >= size:
        return collector.names

    tag, in_class, quote = True, False, False
    index = body + 1
    in_script = False

    while not in_script and index < size:
        byte = data[index]
        if byte == _LT and not tag and not quote:
            if index + 7 < size and data.startswith(b"script", index + 1):
                in_script = True
            tag = True
        elif byte == _GT and tag and not quote:
            tag = False
        elif byte == _QUOTE and tag and not quote:
            quote = True
            if index > 6 and data[index - 6:index] == b"class=":
                collector.append(index + 1)
                in_class = True
        elif byte == _QUOTE and tag and quote:
            quote = False
            if in_class:
                collector.append()
                in_class = False
        elif tag and in_class and quote:
            if byte == _SPACE:
                collector.append(index + 1)
            else:
                collector.length += 1
        index += 1

    while in_script and index < size:
        byte = data[index]
        if byte == _LPAREN and not tag and not in_class:
            if index > 13 and data[index - 13:index] == b"classList.add":
                tag = True
        elif byte == _RPAREN and tag and not quote:
            tag = False
        elif byte == _APOS and tag and not quote:
            quote = True
            collector.append(index + 1)
        elif byte == _APOS and tag and quote:
            quote = False
            collector.append()
        elif tag and quote:
            if byte == _COMMA:
                collector.append(index + 1)
            else:
                collector.length += 1
        index += 1

    return collector.names


def _split(name: str) -> UtilityClass:
    if ":" in name:
        prefix, _, rest = name.partition(":")
        return UtilityClass(prefix=prefix, name=rest)
    return UtilityClass(prefix="", name=name)


def _render(
    cls: UtilityClass,
    global_rules: RuleBuffer,
    responsive: List[Tuple[Breakpoint, RuleBuffer]],
    dark_rules: RuleBuffer,
) -> None:
    common(cls, global_rules)
    position(cls, global_rules)
    for apply in _PER_BREAKPOINT:
        apply(cls, global_rules, GLOBAL)
        for breakpoint, rules in responsive:
            apply(cls, rules, breakpoint)
    text(cls, global_rules)
    font(cls, global_rules)
    color(cls, global_rules, GLOBAL)
    color(cls, dark_rules, DARK)
    opacity(cls, global_rules)
    cursor(cls, global_rules)
    layout(cls, global_rules)
    table(cls, global_rules)


def _style_end(data: bytes) -> Optional[int]:
    """Offset just past the first style tag that starts at offset 7 or later."""
    start = data.find(_STYLE_TAG, 7)
    if start < 0 or start + len(_STYLE_TAG) >= len(data):
        return None
    return start + len(_STYLE_TAG)


def hydrate(content: bytes, classes: Iterable[str]) -> bytes:
    """Return the content with CSS for ``classes`` inserted after its style tag."""
    data = bytes(content)
    names = list(classes)
    log.debug("extracted %d classes", len(names))

    global_rules = RuleBuffer()
    responsive = [(breakpoint, RuleBuffer()) for breakpoint in RESPONSIVE]
    dark_rules = RuleBuffer()

    for name in names:
        cls = _split(name)
        _render(cls, global_rules, responsive, dark_rules)
        if not cls.known:
            log.warning("unknown class %s", name)

    insert = _style_end(data)
    if insert is None:
        if names:
            raise HydrateError("document does not contain a style tag")
        insert = len(data)

    parts = [data[:insert], str(global_rules).encode("latin-1")]
    for breakpoint, rules in [*responsive, (DARK, dark_rules)]:
        if len(rules):
            parts.append(breakpoint.prefix.encode("latin-1"))
            parts.append(str(rules).encode("latin-1"))
            parts.append(breakpoint.suffix.encode("latin-1"))
    parts.append(data[insert:])
    return b"".join(parts)