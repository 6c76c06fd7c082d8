"""
Preamble and enclosing module of the generated file.
"""

from __future__ import annotations

from .base import Synthesizer


class ModuleSynthesizer(Synthesizer):
    """Writes the file preamble and opens/closes the outer module."""

    def write_prefix(self) -> None:
        self._write_template(
            "prefix",
            generation_comment=self.config.generation_comment,
            references=self.config.references,
        )
        self.writer.write_line()
        self.writer.write_line(f"module {self.config.module_name} {{")
        self.writer.indent()

    def write_suffix(self) -> None:
        self.writer.dedent()
        self.writer.write_line("}")
