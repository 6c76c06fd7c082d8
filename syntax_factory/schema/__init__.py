"""
Schema model for syntax definitions.

Phase 1 of the pipeline: decoded JSON records become NodeDef/MemberDef
instances that the rest of the generator consumes.
"""

from __future__ import annotations

from .nodes import MemberDef, NodeDef
from .parser import SchemaParser

__all__ = [
    "MemberDef",
    "NodeDef",
    "SchemaParser",
]
