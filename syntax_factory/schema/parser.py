"""
Syntax schema parser.

Builds the schema model from decoded JSON records. The records are not
modified, so the same decoded document can be parsed any number of times.
"""

from __future__ import annotations

from typing import Any

from .nodes import MemberDef, NodeDef


class SchemaParser:
    """Parses decoded syntax JSON into NodeDef instances."""

    def parse(self, records: list[dict[str, Any]]) -> list[NodeDef]:
        """
        Parse a sequence of node records.

        Args:
            records: The decoded JSON array, in schema order

        Returns:
            One NodeDef per record, in the same order
        """
        return [self._parse_node(record) for record in records]

    def _parse_node(self, record: dict[str, Any]) -> NodeDef:
        children = record.get("children")
        if children is not None:
            children = [self._parse_member(member) for member in children]

        return NodeDef(
            kind=record.get("kind"),
            type=record.get("type"),
            base_type=record.get("baseType"),
            types=record.get("types"),
            name=record.get("name"),
            children=children,
        )

    def _parse_member(self, record: dict[str, Any]) -> MemberDef:
        return MemberDef(
            name=record.get("name"),
            param_name=record.get("paramName"),
            type=record.get("type"),
            is_node_array=bool(record.get("isNodeArray")),
            is_modifiers_array=bool(record.get("isModifiersArray")),
            optional=bool(record.get("optional")),
            converter=record.get("converter"),
            readonly=bool(record.get("readonly")),
        )
