from __future__ import annotations

import pytest

from quickinfo_html.errors import IndentUnderflowError
from quickinfo_html.renderers.html import IndentingWriter


def test_indent_applies_to_lines_started_afterwards():
    writer = IndentingWriter()

    writer.write("a")
    writer.indent()
    writer.write_line("b")
    writer.write("c")

    assert writer.getvalue() == "ab\n  c"


def test_each_line_of_multiline_text_is_indented():
    writer = IndentingWriter()
    writer.indent()
    writer.indent()

    writer.write("x\ny")

    assert writer.getvalue() == "    x\n    y"


def test_blank_lines_are_not_indented():
    writer = IndentingWriter()
    writer.indent()

    writer.write("\n\nz")

    assert writer.getvalue() == "\n\n  z"


def test_unindent_restores_previous_depth():
    writer = IndentingWriter(unit="\t")
    writer.indent()
    writer.write_line("inner")
    writer.unindent()
    writer.write_line("outer")

    assert writer.depth == 0
    assert str(writer) == "\tinner\nouter\n"


def test_custom_newline():
    writer = IndentingWriter(newline="\r\n")
    writer.indent()
    writer.write("a\r\nb")
    writer.write_line("")

    assert writer.getvalue() == "  a\r\n  b\r\n"


def test_unindent_below_zero_is_fatal():
    writer = IndentingWriter()
    writer.indent()
    writer.unindent()

    with pytest.raises(IndentUnderflowError):
        writer.unindent()
