"""
Normalizer and indexer for syntax definitions.

Rewrites every NodeDef and MemberDef into canonical form (sorted,
whitespace-free unions and identifier-safe names) and builds the kind,
type and subtype tables consulted during synthesis.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from ..schema.nodes import MemberDef, NodeDef
from ..utils import format_name, normalize_type, strip_whitespace, union_key


@dataclass
class SyntaxTables:
    """Lookup tables over the normalized definitions."""

    # kind -> creatable definition
    kinds: dict[str, NodeDef] = field(default_factory=dict)

    # tight type key ("A|B") -> definition with that authored type
    types: dict[str, NodeDef] = field(default_factory=dict)

    # tight base type key -> definitions specializing it, in schema order
    subtypes: dict[str, list[NodeDef]] = field(default_factory=dict)

    def lookup_type(self, type_name: str | None) -> NodeDef | None:
        """Find the definition whose type matches, in either rendering."""
        key = union_key(type_name)
        if key is None:
            return None
        return self.types.get(key)

    def lookup_kind(self, kind: str) -> NodeDef | None:
        return self.kinds.get(kind)

    def subtypes_of(self, base_type: str) -> list[NodeDef]:
        return self.subtypes.get(union_key(base_type), [])


class SyntaxIndexer:
    """Normalizes definitions in place and indexes them."""

    def index(self, definitions: list[NodeDef]) -> SyntaxTables:
        """
        Normalize every definition and build the lookup tables.

        All definitions are normalized before any is committed, so an
        error on a malformed entry leaves the list as it was.

        Args:
            definitions: The parsed schema model, in schema order

        Returns:
            Tables referencing the normalized definitions
        """
        normalized = [self.normalize_node(node) for node in definitions]
        authored_types = [bool(node.type) for node in definitions]
        definitions[:] = normalized

        tables = SyntaxTables()
        for node, has_authored_type in zip(definitions, authored_types):
            self._register(tables, node, has_authored_type)
        return tables

    def normalize_node(self, node: NodeDef) -> NodeDef:
        """Return a canonical copy of a node definition."""
        kind = strip_whitespace(node.kind) if node.kind else node.kind

        if node.type:
            type_name = normalize_type(node.type)
        else:
            type_name = normalize_type(node.types or node.base_type)

        types = normalize_type(node.types) if node.types else node.types
        base_type = normalize_type(node.base_type) if node.base_type else node.base_type

        if node.name:
            name = format_name(node.name)
        else:
            name = format_name(kind or type_name)

        children = node.children
        if children is not None:
            children = [self.normalize_member(member) for member in children]

        return replace(
            node,
            kind=kind,
            type=type_name,
            types=types,
            base_type=base_type,
            name=name,
            children=children,
        )

    def normalize_member(self, member: MemberDef) -> MemberDef:
        """Return a canonical copy of a member definition."""
        name = format_name(member.name)
        if member.param_name:
            param_name = format_name(member.param_name)
        else:
            param_name = name

        return replace(
            member,
            name=name,
            param_name=param_name,
            type=normalize_type(member.type),
        )

    def _register(self, tables: SyntaxTables, node: NodeDef, has_authored_type: bool) -> None:
        if node.kind:
            tables.kinds[node.kind] = node

        # A type derived from types/baseType names a union or supertype,
        # not this definition
        if has_authored_type:
            tables.types[union_key(node.type)] = node

        if node.base_type:
            tables.subtypes.setdefault(union_key(node.base_type), []).append(node)
