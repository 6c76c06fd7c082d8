"""
Shared state and helpers for the synthesizers.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jinja2

from ..analyzer.indexer import SyntaxTables
from ..config import GeneratorConfig
from ..emitter import TextWriter
from ..schema.nodes import NodeDef

TEMPLATE_DIR = Path(__file__).parent.parent / "templates"


@dataclass
class GenerationContext:
    """Everything one generation run reads and writes.

    Built once per run and dropped after the output text is taken.
    """

    definitions: list[NodeDef]
    tables: SyntaxTables
    config: GeneratorConfig
    writer: TextWriter

    @classmethod
    def create(cls, definitions: list[NodeDef], tables: SyntaxTables, config: GeneratorConfig) -> GenerationContext:
        writer = TextWriter(indent_unit=config.indent_unit, newline=config.newline)
        return cls(definitions=definitions, tables=tables, config=config, writer=writer)


class Synthesizer:
    """Base class for the code synthesizers."""

    # Template directory name
    TEMPLATE_LANG: str = "ts"

    # File extension
    FILE_EXTENSION: str = "ts"

    def __init__(self, context: GenerationContext):
        """
        Initialize the synthesizer.

        Args:
            context: The generation run to write into
        """
        self.context = context
        self.writer = context.writer
        self.config = context.config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR / self.TEMPLATE_LANG)),
            lstrip_blocks=True,
            trim_blocks=True,
        )

    def _write_template(self, name: str, **context: Any) -> None:
        """Render a template and write it as whole lines at the current depth."""
        template = self.jinja_env.get_template(f"{name}.{self.FILE_EXTENSION}.jinja2")
        self.writer.write_line(template.render(**context).rstrip("\r\n"))
