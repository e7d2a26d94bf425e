"""Append-only text sink that indents each line by nesting depth."""

from __future__ import annotations

from quickinfo_html.errors import IndentUnderflowError


class IndentingWriter:
    """Accumulate text, prefixing every started line with ``depth * unit``.

    Indentation is applied lazily, when the first non-empty text of a line is
    written, so ``indent``/``unindent`` in the middle of a line only affect
    the lines that follow.
    """

    __slots__ = ("_parts", "_depth", "_at_line_start", "_unit", "_newline")

    def __init__(self, unit: str = "  ", newline: str = "\n") -> None:
        self._parts: list[str] = []
        self._depth = 0
        self._at_line_start = True
        self._unit = unit
        self._newline = newline

    @property
    def depth(self) -> int:
        return self._depth

    def write(self, text: str) -> None:
        if not text:
            return
        for index, line in enumerate(text.split(self._newline)):
            if index:
                self._parts.append(self._newline)
                self._at_line_start = True
            if not line:
                continue
            if self._at_line_start:
                self._parts.append(self._unit * self._depth)
                self._at_line_start = False
            self._parts.append(line)

    def write_line(self, text: str = "") -> None:
        self.write(text)
        self._parts.append(self._newline)
        self._at_line_start = True

    def indent(self) -> None:
        self._depth += 1

    def unindent(self) -> None:
        if self._depth == 0:
            raise IndentUnderflowError("unindent called at depth 0")
        self._depth -= 1

    def getvalue(self) -> str:
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.getvalue()


__all__ = ["IndentingWriter"]
