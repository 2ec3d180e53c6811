import pytest

from nexusgate.styles import cursor, font, layout, opacity, table, text
from nexusgate.utility import RuleBuffer, UtilityClass


def _run(function, name, prefix="", capacity=8192):
    cls = UtilityClass(prefix=prefix, name=name)
    buffer = RuleBuffer(capacity)
    function(cls, buffer)
    return cls, str(buffer)


@pytest.mark.parametrize(
    "function, name, declaration",
    [
        (text, "text-lg", "font-size:18px"),
        (text, "text-center", "text-align:center"),
        (text, "leading-relaxed", "line-height:1.625"),
        (text, "no-underline", "text-decoration-line:none"),
        (font, "font-thin", "font-weight:100"),
        (font, "font-extrabold", "font-weight:800"),
        (opacity, "opacity-50", "opacity:0.5"),
        (opacity, "opacity-100", "opacity:1"),
        (cursor, "cursor-pointer", "cursor:pointer"),
        (cursor, "cursor-none", "cursor-none"),
        (layout, "z-12", "z-index:12"),
        (table, "table-fixed", "table-layout:fixed"),
        (table, "border-collapse", "border-collapse:collapse"),
    ],
)
def test_known_class_is_stamped(function, name, declaration):
    cls, css = _run(function, name)
    assert cls.known is True
    assert css == "." + name + "{" + declaration + "}"


def test_pinned_rule():
    _, css = _run(text, "text-lg")
    assert css == ".text-lg{font-size:18px}"


@pytest.mark.parametrize(
    "function, name",
    [
        (text, "text-5xl"),
        (font, "font-bold"),
        (font, "font-black"),
        (opacity, "opacity-7"),
        (cursor, "cursor-zoom-in"),
        (layout, "z-2"),
        (table, "table-row"),
    ],
)
def test_unknown_class_leaves_buffer_empty(function, name):
    cls, css = _run(function, name)
    assert cls.known is False
    assert css == ""


def test_breakpoint_prefix_is_not_written():
    cls, css = _run(text, "text-sm", prefix="md")
    assert cls.known is True
    assert css.startswith(".text-sm{")
    assert "md" not in css


def test_full_buffer_marks_class_unknown():
    cls, css = _run(opacity, "opacity-25", capacity=64)
    assert cls.known is False
    assert css == ""


def test_other_table_is_ignored():
    cls, css = _run(cursor, "text-lg")
    assert cls.known is False
    assert css == ""


def test_rules_accumulate_in_order():
    buffer = RuleBuffer()
    first = UtilityClass(prefix="", name="z-0")
    second = UtilityClass(prefix="", name="table-auto")
    layout(first, buffer)
    table(second, buffer)
    css = str(buffer)
    assert css.index("z-index:0") < css.index("table-layout:auto")
    assert len(buffer) == len(css)