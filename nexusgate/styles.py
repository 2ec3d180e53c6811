"""Unprefixed utility classes: typography, opacity, cursors, stacking, tables."""

from __future__ import annotations

from typing import Mapping

from nexusgate.utility import RuleBuffer, UtilityClass, stamp

_TEXTS = {
    "text-xs": "font-size:12px",
    "text-sm": "font-size:14px",
    "text-base": "font-size:16px",
    "text-lg": "font-size:18px",
    "text-xl": "font-size:20px",
    "text-2xl": "font-size:24px",
    "text-3xl": "font-size:30px",
    "text-4xl": "font-size:36px",
    "text-left": "text-align:left",
    "text-center": "text-align:center",
    "text-right": "text-align:right",
    "text-justify": "text-align:justify",
    "text-start": "text-align:start",
    "text-end": "text-align:end",
    "text-wrap": "text-wrap:wrap",
    "text-nowrap": "text-wrap:nowrap",
    "text-balance": "text-wrap:balance",
    "text-pretty": "text-wrap:pretty",
    "leading-none": "line-height:1",
    "leading-slim": "line-height:1.125",
    "leading-tight": "line-height:1.25",
    "leading-snug": "line-height:1.375",
    "leading-normal": "line-height:1.5",
    "leading-relaxed": "line-height:1.625",
    "leading-loose": "line-height:2",
    "underline": "text-decoration-line:underline",
    "overline": "text-decoration-line:overline",
    "line-through": "text-decoration-line:line-through",
    "no-underline": "text-decoration-line:none",
}

# "font-bold" and "font-black" are deliberately absent: they never match.
_FONTS = {
    "font-thin": "font-weight:100",
    "font-extralight": "font-weight:200",
    "font-light": "font-weight:300",
    "font-normal": "font-weight:400",
    "font-medium": "font-weight:500",
    "font-semibold": "font-weight:600",
    "font-extrabold": "font-weight:800",
}

_OPACITIES = {
    "opacity-0": "opacity:0",
    "opacity-5": "opacity:0.05",
    "opacity-10": "opacity:0.1",
    "opacity-15": "opacity:0.15",
    "opacity-20": "opacity:0.2",
    "opacity-25": "opacity:0.25",
    "opacity-30": "opacity:0.3",
    "opacity-35": "opacity:0.35",
    "opacity-40": "opacity:0.4",
    "opacity-45": "opacity:0.45",
    "opacity-50": "opacity:0.5",
    "opacity-55": "opacity:0.55",
    "opacity-60": "opacity:0.6",
    "opacity-65": "opacity:0.65",
    "opacity-70": "opacity:0.7",
    "opacity-75": "opacity:0.75",
    "opacity-80": "opacity:0.8",
    "opacity-85": "opacity:0.85",
    "opacity-90": "opacity:0.9",
    "opacity-95": "opacity:0.95",
    "opacity-100": "opacity:1",
}

_CURSORS = {
    "cursor-auto": "cursor:auto",
    "cursor-default": "cursor:default",
    "cursor-pointer": "cursor:pointer",
    "cursor-wait": "cursor:wait",
    "cursor-text": "cursor:text",
    "cursor-move": "cursor:move",
    "cursor-help": "cursor:help",
    "cursor-not-allowed": "cursor:not-allowed",
    "cursor-none": "cursor-none",
    "cursor-context-menu": "cursor:context-menu",
    "cursor-progress": "cursor:progress",
    "cursor-cell": "cursor:cell",
    "cursor-crosshair": "cursor:crosshair",
    "cursor-vertical-text": "cursor:vertical-text",
    "cursor-alias": "cursor:alias",
    "cursor-copy": "cursor:copy",
    "cursor-no-drop": "cursor:no-drop",
    "cursor-grab": "cursor:grab",
    "cursor-grabbing": "cursor:grabbing",
}

_LAYOUTS = {
    "z-0": "z-index:0",
    "z-4": "z-index:4",
    "z-8": "z-index:8",
    "z-12": "z-index:12",
    "z-16": "z-index:16",
}

_TABLES = {
    "border-collapse": "border-collapse:collapse",
    "border-separate": "border-collapse:separate",
    "table-auto": "table-layout:auto",
    "table-fixed": "table-layout:fixed",
}


def _stamp_exact(cls: UtilityClass, buffer: RuleBuffer, table: Mapping[str, str]) -> None:
    declaration = table.get(cls.name)
    if declaration is not None:
        cls.known = stamp(cls, buffer, declaration, None, None, False)


def text(cls: UtilityClass, buffer: RuleBuffer) -> None:
    """Font sizes, alignment, wrapping, line height and decoration."""
    _stamp_exact(cls, buffer, _TEXTS)


def font(cls: UtilityClass, buffer: RuleBuffer) -> None:
    """Font weights."""
    _stamp_exact(cls, buffer, _FONTS)


def opacity(cls: UtilityClass, buffer: RuleBuffer) -> None:
    """Opacity steps of five percent."""
    _stamp_exact(cls, buffer, _OPACITIES)


def cursor(cls: UtilityClass, buffer: RuleBuffer) -> None:
    """Mouse cursors."""
    _stamp_exact(cls, buffer, _CURSORS)


def layout(cls: UtilityClass, buffer: RuleBuffer) -> None:
    """Stacking order."""
    _stamp_exact(cls, buffer, _LAYOUTS)


def table(cls: UtilityClass, buffer: RuleBuffer) -> None:
    """Table border collapsing and layout."""
    _stamp_exact(cls, buffer, _TABLES)