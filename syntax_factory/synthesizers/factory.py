"""
Factory synthesizer.

Emits, for every creatable node kind, a create function building the
node from its members and, when the kind has non-readonly members, an
update function that returns the original node unless some member
argument differs by reference.
"""

from __future__ import annotations

from ..schema.nodes import MemberDef, NodeDef
from .base import GenerationContext, Synthesizer


class FactorySynthesizer(Synthesizer):
    """Writes the factory module."""

    # Runtime helpers the generated functions call into
    BEGIN_NODE = "beginNode"
    FINISH_NODE = "finishNode"
    CREATE_NODE_ARRAY = "createNodeArray"
    MODIFIERS_ARRAY_TYPE = "ModifiersArray"
    KIND_ENUM = "SyntaxKind"

    # Trailing parameters of every create function
    LOCATION_PARAMS = "location?: TextRange, flags?: NodeFlags"

    def __init__(self, context: GenerationContext):
        super().__init__(context)
        self._last_write_succeeded = False

    def write_module(self) -> None:
        w = self.writer
        w.write_line(f"export module {self.config.factory_module} {{")
        w.indent()

        self._last_write_succeeded = False
        for node in self.context.definitions:
            self.write_create_function(node)
            self.write_update_function(node)

        w.dedent()
        w.write_line("}")
        w.write_line()

    def write_create_function(self, node: NodeDef) -> None:
        """Write create<Name>(...) for a creatable node; others are skipped."""
        if not node.can_create:
            return

        w = self.writer
        self._write_separator()

        children = node.children or []
        modifiers = None

        w.write(f"export function create{node.name}(")
        for member in children:
            w.write(member.param_name)
            if member.optional:
                w.write("?")
            w.write(f": {member.type}")
            if member.is_modifiers_array:
                modifiers = member.param_name
            if member.is_array:
                w.write("[]")
            w.write(", ")
        w.write(self.LOCATION_PARAMS)
        w.write_line(f"): {node.type} {{")

        w.indent()
        w.write_line(f"var node = {self.BEGIN_NODE}<{node.type}>({self.KIND_ENUM}.{node.kind});")
        for member in children:
            w.write_line(f"node.{member.name} = {self._member_initializer(member)};")

        finish_args = "node, location, flags"
        if modifiers:
            finish_args += f", {modifiers}"
        w.write_line(f"return {self.FINISH_NODE}({finish_args});")
        w.dedent()
        w.write_line("}")

        self._last_write_succeeded = True

    def write_update_function(self, node: NodeDef) -> None:
        """Write update<Name>(node, ...) for a node with non-readonly members."""
        if not node.can_update:
            return

        w = self.writer
        self._write_separator()

        mutable = node.mutable_members

        w.write(f"export function update{node.name}(node: {node.type}")
        for member in mutable:
            w.write(f", {member.param_name}: {member.type}")
            if member.is_array:
                w.write("[]")
        w.write_line(f"): {node.type} {{")
        w.indent()

        changed = " || ".join(f"node.{member.name} !== {member.param_name}" for member in mutable)
        w.write_line(f"if ({changed}) {{")
        w.indent()

        # Readonly members carry over from the existing node
        args = [f"node.{member.name}" if member.readonly else f"{member.param_name}" for member in node.children]
        args.extend(["node", "node.flags"])
        w.write_line(f"return create{node.name}({', '.join(args)});")

        w.dedent()
        w.write_line("}")
        w.write_line("return node;")
        w.dedent()
        w.write_line("}")

        self._last_write_succeeded = True

    def _member_initializer(self, member: MemberDef) -> str:
        if member.converter:
            return f"{member.converter}({member.param_name})"
        if member.is_node_array:
            return f"{self.CREATE_NODE_ARRAY}({member.param_name})"
        if member.is_modifiers_array:
            return f"<{self.MODIFIERS_ARRAY_TYPE}>{member.param_name}"
        return f"{member.param_name}"

    def _write_separator(self) -> None:
        if self._last_write_succeeded:
            self.writer.write_line()
