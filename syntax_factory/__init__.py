"""Syntax Factory Generator

Generates TypeScript create/update factory functions and a recursive
visitor for every node kind of a declarative syntax schema.
"""

__version__ = "1.0.0"

from .analyzer import SyntaxIndexer, SyntaxTables
from .config import GeneratorConfig, OutputConfig
from .emitter import TextWriter
from .generator import SyntaxFactoryGenerator
from .schema import MemberDef, NodeDef, SchemaParser
from .writer import AtomicWriter, OutputValidationError

__all__ = [
    "SyntaxFactoryGenerator",
    "GeneratorConfig",
    "OutputConfig",
    "NodeDef",
    "MemberDef",
    "SchemaParser",
    "SyntaxIndexer",
    "SyntaxTables",
    "TextWriter",
    "AtomicWriter",
    "OutputValidationError",
]
