"""
Indentation-aware text writer.

Newlines are deferred: write_line() only requests one, and it is
materialized by the next write. This keeps unused line breaks from
leaving trailing blank lines and lets indentation follow the depth in
effect when the next line actually starts.
"""

from __future__ import annotations

import re

_LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")


class TextWriter:
    """Accumulates generated source text line by line."""

    def __init__(self, indent_unit: str = "    ", newline: str = "\n"):
        """
        Initialize the writer.

        Args:
            indent_unit: Text for one indentation level
            newline: Line separator written to the output
        """
        self.newline = newline
        self._parts: list[str] = []
        self._indent_depth = 0
        self._indenting_suspended_depth = 0
        self._indent_levels = ["", indent_unit]
        self._newline_requested = False
        self._wrote_since_newline = False

    @property
    def indent_depth(self) -> int:
        return self._indent_depth

    def write(self, text: str | None) -> None:
        """Append text, starting a new line for every line break it contains."""
        if not text:
            return

        for i, line in enumerate(_LINE_BREAK_PATTERN.split(text)):
            if i > 0:
                self._newline_requested = True

            self._try_write_newline()
            if line:
                if self._at_line_start():
                    self._try_write_indent()
                self._parts.append(line)
                self._wrote_since_newline = True

    def write_line(self, text: str | None = None) -> None:
        """Write text, if any, and request a line break before the next write.

        Without text, a pending break is flushed so that the next line is
        preceded by a blank one. Repeated calls with nothing written in
        between produce no more than that single blank line.
        """
        if text:
            self.write(text)
        elif self._newline_requested and self._wrote_since_newline:
            self._write_newline()

        self._newline_requested = True

    def indent(self) -> None:
        self._indent_depth += 1

    def dedent(self) -> None:
        self._indent_depth = max(0, self._indent_depth - 1)

    def suspend_indenting(self) -> None:
        self._indenting_suspended_depth += 1

    def resume_indenting(self) -> None:
        self._indenting_suspended_depth = max(0, self._indenting_suspended_depth - 1)

    def getvalue(self) -> str:
        """The text written so far. A pending line break is not included."""
        return "".join(self._parts)

    def _at_line_start(self) -> bool:
        return not self._wrote_since_newline and bool(self._parts)

    def _try_write_newline(self) -> None:
        if not self._newline_requested:
            return
        self._newline_requested = False
        self._write_newline()

    def _write_newline(self) -> None:
        self._parts.append(self.newline)
        self._wrote_since_newline = False

    def _try_write_indent(self) -> None:
        if self._indenting_suspended_depth or not self._indent_depth:
            return
        self._parts.append(self._get_indent(self._indent_depth))

    def _get_indent(self, level: int) -> str:
        if level < len(self._indent_levels):
            return self._indent_levels[level]
        indent = self._get_indent(level - 1) + self._indent_levels[1]
        self._indent_levels.append(indent)
        return indent
