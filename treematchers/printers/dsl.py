"""Printer dumping a subtree to the matcher script that matches it.

The output can be pasted into a test, e.g. for ``Declaration(Type(Primitive),
Declarator)``::

    with match_node(node, Declaration) as it:
        with it.child_block(Type) as it1:
            it1.child(Primitive)
        it.child(Declarator)

By default only the structure is dumped. Subclasses add assertions on node
values through the hooks, see AttributeTreePrinter.
"""

from typing import Any, Dict, List, Optional

from ..core.adapter import TreeLikeAdapter
from .base import TreePrinter, child_depth, depth_exhausted


class DslStructurePrinter(TreePrinter):
    """Dumps a node of a hierarchy to its matcher script."""

    def __init__(self, adapter: TreeLikeAdapter, indent_size: int = 4):
        """Initialize the printer.

        Args:
            adapter: Adapter for the tree hierarchy
            indent_size: Number of spaces of each indent level
        """
        self.adapter = adapter
        self.indent_size = indent_size

    # Hooks

    def get_additional_assertions(self, node: Any, cursor_name: str) -> List[str]:
        """Return statements added at the start of the block of ``node``.

        E.g. if ``node`` has a ``prefix`` attribute that should be asserted
        to be ``"pre"``, return ``['assert it.node.prefix == "pre"']``, using
        ``cursor_name`` for the cursor variable. Statements may span several
        lines. By default no assertion is added.
        """
        return []

    def get_child_call_contexts(self, parent: Any) -> Dict[int, str]:
        """Map child indices to the attribute of ``parent`` holding that child.

        E.g. if ``parent.value`` is its second child, return ``{1: "value"}``.
        An identity assertion is then rendered right after the child is
        matched, see ``format_child_alias_assertion``. Indices that don't
        exist are ignored. By default no context is added.
        """
        return {}

    def get_custom_child_assertion(self, parent: Any, child: Any, cursor_name: str) -> Optional[str]:
        """Return a statement replacing the whole match of ``child``.

        If not None, the returned string is rendered instead of the
        ``child`` call and ``get_child_call_contexts`` is ignored for that
        child. The statement must consume exactly one child of the cursor
        named ``cursor_name``, or the dumped structure is wrong.
        """
        return None

    def format_child_alias_assertion(self, parent_cursor: str, access: str, child_ref: str) -> str:
        """Format the assertion that an attribute of a parent is a given child."""
        return f"assert {parent_cursor}.node.{access} is {child_ref}"

    def get_type_expression(self, node: Any) -> str:
        """Return the expression naming the type of ``node`` in the script.

        Override to qualify names, e.g. ``ast.Assign``.
        """
        return type(node).__name__

    def get_root_matching_method_name(self, node: Any) -> str:
        """Return the name of the function opening the root block."""
        return "match_node"

    def get_root_matching_method_arguments(self, node: Any, should_only_dump_root: bool) -> str:
        """Return the arguments of the root matching function call.

        Args:
            node: Root of the tree
            should_only_dump_root: Whether only the root is dumped (because
                of max_dump_depth=0), in which case children are ignored
        """
        arguments = f"node, {self.get_type_expression(node)}"
        if should_only_dump_root:
            arguments += ", ignore_children=True"
        return arguments

    def get_root_spec_prefix(self, node: Any, should_only_dump_root: bool) -> str:
        """Return the expression of the root ``with`` statement."""
        return (
            f"{self.get_root_matching_method_name(node)}"
            f"({self.get_root_matching_method_arguments(node, should_only_dump_root)})"
        )

    def cursor_name(self, depth: int) -> str:
        """Return the name of the cursor variable at the given depth."""
        return "it" if depth == 0 else f"it{depth}"

    # Rendering

    def dump_subtree(self, node: Any, max_dump_depth: Optional[int] = None) -> str:
        name = self.cursor_name(0)
        lines = [f"with {self.get_root_spec_prefix(node, depth_exhausted(max_dump_depth))} as {name}:"]
        body = self._render_body(node, 0, max_dump_depth)
        lines.extend(self._indent(body or ["pass"]))
        return "\n".join(lines)

    def _render_body(self, node: Any, depth: int, max_dump_depth: Optional[int]) -> List[str]:
        name = self.cursor_name(depth)
        lines: List[str] = []

        additional = self.get_additional_assertions(node, name)
        for assertion in additional:
            lines.extend(assertion.split("\n"))

        if depth_exhausted(max_dump_depth):
            return lines

        children = self.adapter.get_children(node)
        contexts = self.get_child_call_contexts(node)
        for i, child in enumerate(children):
            custom = self.get_custom_child_assertion(node, child, name)
            access = contexts.get(i) if custom is None else None
            if (additional and i == 0) or access is not None:
                lines.append("")
            if custom is not None:
                lines.extend(custom.split("\n"))
                continue
            lines.extend(self._render_child(child, depth + 1, child_depth(max_dump_depth), access))
        return lines

    def _render_child(self, child: Any, depth: int, max_dump_depth: Optional[int],
                      access: Optional[str]) -> List[str]:
        parent_name = self.cursor_name(depth - 1)
        name = self.cursor_name(depth)
        arguments = self.get_type_expression(child)
        if depth_exhausted(max_dump_depth):
            arguments += ", ignore_children=True"

        body = self._render_body(child, depth, max_dump_depth)
        lines: List[str] = []
        if body:
            lines.append(f"with {parent_name}.child_block({arguments}) as {name}:")
            lines.extend(self._indent(body))
            child_ref = f"{name}.node"
        elif access is not None:
            lines.append(f"{name} = {parent_name}.child({arguments})")
            child_ref = name
        else:
            lines.append(f"{parent_name}.child({arguments})")
            return lines

        if access is not None:
            lines.append(self.format_child_alias_assertion(parent_name, access, child_ref))
        return lines

    def _indent(self, lines: List[str]) -> List[str]:
        prefix = " " * self.indent_size
        return [prefix + line if line else line for line in lines]
