"""
Factory generator pipeline.

1. Phase 1 (Parser): decoded JSON records -> NodeDef model
2. Phase 2 (Indexer): canonicalize names/types and build lookup tables
3. Phase 3 (Synthesizers): preamble, factory module, visitor module
4. Phase 4 (Writer): the accumulated text, written by the caller
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .analyzer.indexer import SyntaxIndexer, SyntaxTables
from .config import GeneratorConfig
from .schema.parser import SchemaParser
from .synthesizers import FactorySynthesizer, GenerationContext, ModuleSynthesizer, VisitorSynthesizer
from .writer import AtomicWriter


class SyntaxFactoryGenerator:
    """Generates factory and visitor functions from a syntax schema."""

    def __init__(self, syntax: list[dict[str, Any]], config: GeneratorConfig | None = None):
        """
        Initialize the generator.

        Args:
            syntax: Decoded syntax JSON, one record per node definition
            config: Code generation configuration
        """
        self.syntax = syntax
        self.config = config or GeneratorConfig()
        self.tables: SyntaxTables | None = None

    def generate(self) -> str:
        """
        Run the whole pipeline.

        Every call starts from the raw records, so repeated calls return
        identical text.

        Returns:
            Generated TypeScript source
        """
        definitions = SchemaParser().parse(self.syntax)
        self.tables = SyntaxIndexer().index(definitions)

        context = GenerationContext.create(definitions, self.tables, self.config)

        module = ModuleSynthesizer(context)
        module.write_prefix()
        FactorySynthesizer(context).write_module()
        VisitorSynthesizer(context).write_module()
        module.write_suffix()

        return context.writer.getvalue()

    def output_path_for(self, input_path: str | Path) -> Path:
        """Where the generated file goes for a given schema path."""
        return Path(input_path).parent / self.config.output_filename

    def write(self, output_path: str | Path) -> Path:
        """Generate and write the result to output_path."""
        output_path = Path(output_path)
        content = self.generate()
        writer = AtomicWriter()
        validate = self.config.output.validate_before_write
        if self.config.output.atomic_write:
            writer.write(output_path, content, validate=validate)
        else:
            writer.write_direct(output_path, content, validate=validate)
        return output_path
