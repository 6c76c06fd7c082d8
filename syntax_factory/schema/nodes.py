"""
Node and member definitions for a syntax schema.

A NodeDef describes one AST node kind (or a union of node types) and a
MemberDef describes one of its fields. These carry data only; the
indexer rewrites them into canonical form before synthesis.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class MemberDef:
    """One field of a node definition."""

    name: str | None = None
    param_name: str | None = None  # Constructor parameter name, defaults to name
    type: str | None = None

    is_node_array: bool = False
    is_modifiers_array: bool = False
    optional: bool = False

    # Name of a function wrapping the raw argument before assignment
    converter: str | None = None

    # Readonly members are kept out of update functions
    readonly: bool = False

    @property
    def is_array(self) -> bool:
        """Whether the member is emitted with an array type."""
        return self.is_node_array or self.is_modifiers_array


@dataclass
class NodeDef:
    """One node kind or node-type union."""

    kind: str | None = None
    type: str | None = None
    base_type: str | None = None
    types: str | None = None
    name: str | None = None
    children: list[MemberDef] | None = None

    @property
    def can_create(self) -> bool:
        """Only definitions with a kind get a create function."""
        return bool(self.kind)

    @property
    def mutable_members(self) -> list[MemberDef]:
        """Children that take part in update functions, in declaration order."""
        return [member for member in self.children or [] if not member.readonly]

    @property
    def can_update(self) -> bool:
        """Creatable definitions with at least one non-readonly child get an update function."""
        return self.can_create and bool(self.mutable_members)
