"""
Analyzer - canonicalizes the schema model and builds lookup tables.
"""

from __future__ import annotations

from .indexer import SyntaxIndexer, SyntaxTables

__all__ = [
    "SyntaxIndexer",
    "SyntaxTables",
]
