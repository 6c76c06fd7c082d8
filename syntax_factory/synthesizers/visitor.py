"""
Visitor synthesizer.

Emits the public fallback entry point and the accept function, a switch
over every creatable node kind. Updatable kinds rebuild themselves
through their update function with each node-typed member visited;
consecutive kinds without an update function share one
`return node;` body.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..schema.nodes import MemberDef, NodeDef
from .base import Synthesizer


@dataclass
class DispatchGroup:
    """Switch cases sharing one body.

    An updatable group holds exactly one node; a non-updatable group holds
    a maximal run of consecutive kinds without an update function.
    """

    updatable: bool
    nodes: list[NodeDef] = field(default_factory=list)


def partition_dispatch_groups(definitions: list[NodeDef]) -> list[DispatchGroup]:
    """Split the creatable definitions into switch groups, in schema order."""
    groups: list[DispatchGroup] = []
    for node in definitions:
        if not node.can_create:
            continue

        if node.can_update:
            groups.append(DispatchGroup(updatable=True, nodes=[node]))
        elif groups and not groups[-1].updatable:
            groups[-1].nodes.append(node)
        else:
            groups.append(DispatchGroup(updatable=False, nodes=[node]))
    return groups


class VisitorSynthesizer(Synthesizer):
    """Writes the visitor module."""

    KIND_ENUM = "SyntaxKind"
    VISIT = "visit"
    VISIT_NODES = "visitNodes"

    def write_module(self) -> None:
        w = self.writer
        w.write_line(f"export module {self.config.visitor_module} {{")
        w.indent()
        self.write_fallback_function()
        self.write_accept_function()
        w.dedent()
        w.write_line("}")

    def write_fallback_function(self) -> None:
        self._write_template("fallback")
        self.writer.write_line()

    def write_accept_function(self) -> None:
        w = self.writer
        w.write_line("function accept(node: Node, cbNode: Visitor, state?: any): Node {")
        w.indent()
        w.write_line("switch (node.kind) {")
        w.indent()

        for group in partition_dispatch_groups(self.context.definitions):
            for node in group.nodes:
                w.write_line(f"case {self.KIND_ENUM}.{node.kind}:")

            w.indent()
            if group.updatable:
                self._write_update_node(group.nodes[0])
            else:
                w.write_line("return node;")
            w.dedent()

        w.dedent()
        w.write_line("}")
        w.dedent()
        w.write_line("}")

    def _write_update_node(self, node: NodeDef) -> None:
        w = self.writer
        w.write_line(f"return {self.config.factory_module}.update{node.name}(")
        w.indent()
        w.write(f"<{node.type}>node")
        for member in node.mutable_members:
            w.write_line(",")
            w.write(self._visit_member(node, member))
        w.write_line(");")
        w.dedent()

    def _visit_member(self, node: NodeDef, member: MemberDef) -> str:
        """Expression passing a member's current value, visited when it is a node type."""
        value = f"(<{node.type}>node).{member.name}"
        if self.context.tables.lookup_type(member.type) is None:
            return value

        visit = self.VISIT_NODES if member.is_node_array else self.VISIT
        return f"{visit}<{member.type}>({value}, cbNode, state)"
