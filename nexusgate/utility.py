"""Utility-class tables that turn class names into CSS rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Tuple

DEFAULT_CAPACITY = 8192
_HEADROOM = 64


@dataclass
class UtilityClass:
    """A class name split into its breakpoint prefix and its utility name."""

    prefix: str
    name: str
    known: bool = False


@dataclass(frozen=True)
class Breakpoint:
    """A responsive variant: the prefix tag and the wrapper around its rules."""

    tag: str
    prefix: str = ""
    suffix: str = ""


class RuleBuffer:
    """Accumulates generated CSS rules up to a fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._parts: list[str] = []
        self._length = 0

    def append(self, text: str) -> None:
        self._parts.append(text)
        self._length += len(text)

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return "".join(self._parts)

    def _has_room(self) -> bool:
        return self._length < self.capacity - _HEADROOM


def _escape(name: str) -> str:
    return "".join("\\" + char if char in "./" else char for char in name)


def stamp(
    cls: UtilityClass,
    buffer: RuleBuffer,
    declaration: str,
    value: Optional[str] = None,
    suffix: Optional[str] = None,
    prefixed: bool = False,
) -> bool:
    """Write one rule for ``cls`` into ``buffer``; return False if it is full."""
    if not buffer._has_room():
        return False
    selector = "."
    if prefixed and cls.prefix:
        selector += cls.prefix + "\\:"
    selector += _escape(cls.name)
    body = declaration
    if value is not None:
        body += ":" + value
    if suffix is not None:
        body += suffix
    buffer.append(f"{selector}{{{body}}}")
    return True


def _exact(cls: UtilityClass, buffer: RuleBuffer, table: Mapping[str, str], prefixed: bool) -> None:
    declaration = table.get(cls.name)
    if declaration is not None:
        cls.known = stamp(cls, buffer, declaration, None, None, prefixed)


def _variants(
    cls: UtilityClass,
    buffer: RuleBuffer,
    variants: Sequence[Tuple[str, str]],
    mappings: Mapping[str, str],
) -> bool:
    """Stamp every matching variant; return False when a variant has no mapping."""
    for key, declaration in variants:
        if len(cls.name) > len(key) and cls.name.startswith(key):
            value = mappings.get(cls.name[len(key):])
            if value is None:
                return False
            cls.known = stamp(cls, buffer, declaration, value, None, True)
    return True


def _applies(cls: UtilityClass, breakpoint: Breakpoint) -> bool:
    return cls.prefix == breakpoint.tag


_COMMONS = {
    "font-sans": "font-family:ui-sans-serif,system-ui,sans-serif,"
    "'Apple Color Emoji','Segoe UI Emoji','Segoe UI Symbol','Noto Color Emoji'",
    "font-serif": "font-family:ui-serif,Georgia,Cambria,'Times New Roman',Times,serif",
    "font-mono": "font-family:ui-monospace,"
    "SFMono-Regular,Menlo,Monaco,Consolas,'Liberation Mono','Courier New',monospace",
    "box-border": "box-sizing:border-box",
    "box-content": "box-sizing:content-box",
}

_POSITIONS = {
    "static": "position:static",
    "relative": "position:relative",
    "absolute": "position:absolute",
    "fixed": "position:fixed",
    "sticky": "position:sticky",
}

_DISPLAYS = {
    "block": "display:block",
    "inline": "display:inline",
    "flex": "display:flex",
    "grid": "display:grid",
    "hidden": "display:none",
    "contents": "display:contents",
}

_SPACING_VARIANTS = (
    ("m-", "margin"),
    ("mt-", "margin-top"),
    ("mr-", "margin-right"),
    ("mb-", "margin-bottom"),
    ("ml-", "margin-left"),
    ("p-", "padding"),
    ("pt-", "padding-top"),
    ("pr-", "padding-right"),
    ("pb-", "padding-bottom"),
    ("pl-", "padding-left"),
    ("top-", "top"),
    ("right-", "right"),
    ("bottom-", "bottom"),
    ("left-", "left"),
)

_SPACING_VALUES = {
    "0": "0px", "0.5": "2px", "1": "4px", "1.5": "6px", "2": "8px", "2.5": "10px",
    "3": "12px", "3.5": "14px", "4": "16px", "4.5": "18px", "5": "20px", "5.5": "22px",
    "6": "24px", "6.5": "26px", "7": "28px", "7.5": "30px", "8": "32px", "9": "36px",
    "10": "40px", "11": "44px", "12": "48px", "13": "52px", "14": "56px", "15": "60px",
    "16": "64px", "20": "80px", "24": "96px", "28": "112px", "32": "128px", "40": "160px",
    "48": "192px", "56": "224px", "64": "256px", "72": "288px", "80": "320px",
    "88": "352px", "96": "384px",
}

_SIZING_VARIANTS = (
    ("w-", "width"),
    ("min-w-", "min-width"),
    ("max-w-", "max-width"),
    ("h-", "height"),
    ("min-h-", "min-height"),
    ("max-h-", "max-height"),
    ("gap-", "gap"),
)

_SIZING_VALUES = {
    **_SPACING_VALUES,
    "xs": "512px", "sm": "640px", "md": "768px", "lg": "1024px", "xl": "1280px",
    "full": "100%",
    "vh": "100vh", "svh": "100svh", "lvh": "100lvh", "dvh": "100dvh",
    "vw": "100vw", "svw": "100svw", "lvw": "100lvw", "dvw": "100dvw",
    "min": "min-content", "max": "max-content", "fit": "fit-content",
}

_BORDER_STYLES = {
    "border-solid": "border-style:solid",
    "border-dashed": "border-style:dashed",
    "border-dotted": "border-style:dotted",
    "border-double": "border-style:double",
    "border-hidden": "border-style:hidden",
    "border-none": "border-style:none",
}

_BORDER_VARIANTS = (
    ("border-t-", "border-top-width"),
    ("border-r-", "border-right-width"),
    ("border-b-", "border-bottom-width"),
    ("border-l-", "border-left-width"),
    ("border-", "border-width"),
)

_BORDER_WIDTHS = {
    "0": "0px", "1": "1px", "2": "2px", "3": "3px", "4": "4px", "6": "6px", "8": "8px",
}

_OUTLINES = {
    "outline-0": "outline-width:0px",
    "outline-1": "outline-width:1px",
    "outline-2": "outline-width:2px",
    "outline-4": "outline-width:4px",
    "outline-8": "outline-width:8px",
    "outline-none": "outline-style:none",
    "outline-solid": "outline-style:solid",
    "outline-dashed": "outline-style:dashed",
    "outline-dotted": "outline-style:dotted",
    "outline-double": "outline-style:double",
}

_SCROLLBARS = {
    "scrollbar-auto": "scrollbar-width:auto",
    "scrollbar-thin": "scrollbar-width:thin",
    "scrollbar-none": "scrollbar-width:none",
}

_OVERFLOW_VARIANTS = (
    ("overflow-x-", "overflow-x"),
    ("overflow-y-", "overflow-y"),
    ("overflow-", "overflow"),
)

_OVERFLOW_VALUES = {
    "auto": "auto",
    "hidden": "hidden",
    "clip": "clip",
    "visible": "visible",
    "scroll": "scroll",
}

_FLEXES = {
    "flex-1": "flex:1 1 0%",
    "flex-auto": "flex:1 1 auto",
    "flex-initial": "flex:0 1 auto",
    "flex-none": "flex:none",
    "flex-row": "flex-direction:row",
    "flex-row-reverse": "flex-direction:row-reverse",
    "flex-col": "flex-direction:column",
    "flex-col-reverse": "flex-direction:column-reverse",
    "justify-normal": "justify-content:normal",
    "justify-start": "justify-content:flex-start",
    "justify-end": "justify-content:flex-end",
    "justify-center": "justify-content:center",
    "justify-between": "justify-content:space-between",
    "justify-around": "justify-content:space-around",
    "justify-evenly": "justify-content:space-evenly",
    "justify-stretch": "justify-content:stretch",
    "items-start": "align-items:flex-start",
    "items-end": "align-items:flex-end",
    "items-center": "align-items:center",
    "items-baseline": "align-items:baseline",
    "items-stretch": "align-items:stretch",
    "grow": "flex-grow:1",
    "grow-0": "flex-grow:0",
    "shrink": "flex-shrink:1",
    "shrink-0": "flex-shrink:0",
}


def common(cls: UtilityClass, buffer: RuleBuffer) -> None:
    """Font families and box sizing."""
    _exact(cls, buffer, _COMMONS, prefixed=False)


def position(cls: UtilityClass, buffer: RuleBuffer) -> None:
    """Positioning schemes."""
    _exact(cls, buffer, _POSITIONS, prefixed=False)


def display(cls: UtilityClass, buffer: RuleBuffer, breakpoint: Breakpoint) -> None:
    """Display modes, per breakpoint."""
    if _applies(cls, breakpoint):
        _exact(cls, buffer, _DISPLAYS, prefixed=True)


def spacing(cls: UtilityClass, buffer: RuleBuffer, breakpoint: Breakpoint) -> None:
    """Margins, paddings and insets, per breakpoint."""
    if _applies(cls, breakpoint):
        _variants(cls, buffer, _SPACING_VARIANTS, _SPACING_VALUES)


def sizing(cls: UtilityClass, buffer: RuleBuffer, breakpoint: Breakpoint) -> None:
    """Widths, heights and gaps, per breakpoint."""
    if _applies(cls, breakpoint):
        _variants(cls, buffer, _SIZING_VARIANTS, _SIZING_VALUES)


def border(cls: UtilityClass, buffer: RuleBuffer, breakpoint: Breakpoint) -> None:
    """Border styles and widths and outlines, per breakpoint."""
    if not _applies(cls, breakpoint):
        return
    _exact(cls, buffer, _BORDER_STYLES, prefixed=True)
    if not _variants(cls, buffer, _BORDER_VARIANTS, _BORDER_WIDTHS):
        return
    _exact(cls, buffer, _OUTLINES, prefixed=True)


def overflow(cls: UtilityClass, buffer: RuleBuffer, breakpoint: Breakpoint) -> None:
    """Scrollbar widths and overflow behaviour, per breakpoint."""
    if not _applies(cls, breakpoint):
        return
    _exact(cls, buffer, _SCROLLBARS, prefixed=True)
    _variants(cls, buffer, _OVERFLOW_VARIANTS, _OVERFLOW_VALUES)


def flex(cls: UtilityClass, buffer: RuleBuffer, breakpoint: Breakpoint) -> None:
    """Flexbox layout, per breakpoint."""
    if _applies(cls, breakpoint):
        _exact(cls, buffer, _FLEXES, prefixed=True)