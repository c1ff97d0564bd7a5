"""Outline printer for tree-matchers.

Renders a subtree like::

    +--Declaration
       +--Type
       |  +--Primitive
       +--Declarator
          +--1 child is not shown
"""

from dataclasses import dataclass
from typing import Any, List, Optional

from ..core.adapter import TreeLikeAdapter
from .base import TreePrinter, child_depth, depth_exhausted


@dataclass(frozen=True)
class StrConfig:
    """Strings used to draw the branches of the outline.

    Attributes:
        fork: Connector of a node that has a next sibling
        last_fork: Connector of a node that is the last of its siblings
        vertical: Indent below a node that has a next sibling
        blank: Indent below a node that is the last of its siblings
    """
    fork: str
    last_fork: str
    vertical: str
    blank: str


ASCII_STRINGS = StrConfig(fork="+--", last_fork="+--", vertical="|  ", blank="   ")
UNICODE_STRINGS = StrConfig(fork="├── ", last_fork="└── ", vertical="│   ", blank="    ")


class SimpleTreePrinter(TreePrinter):
    """A simple recursive printer that only shows the structure of a tree.

    Override ``append_single_node`` to render nodes differently, e.g. to add
    some of their attributes.
    """

    def __init__(self, adapter: TreeLikeAdapter, str_config: StrConfig = ASCII_STRINGS):
        """Initialize the printer.

        Args:
            adapter: Adapter for the tree hierarchy
            str_config: Strings used to draw branches
        """
        self.adapter = adapter
        self.str_config = str_config

    def dump_subtree(self, node: Any, max_dump_depth: Optional[int] = None) -> str:
        out: List[str] = []
        self._print_inner_node(out, node, 0, max_dump_depth, [False])
        return "".join(out)

    def append_single_node(self, out: List[str], node: Any) -> None:
        """Render a single node, without indent or line feed."""
        out.append(self.adapter.node_name(node))

    def append_boundary_for_node(self, out: List[str], node: Any, level: int,
                                 has_follower: List[bool]) -> None:
        """Render the line standing for the hidden children of a node.

        Called when the depth limit is reached on a node that has children.
        Responsible for the whole line: indent, content and line feed.
        Override with a no-op to hide boundaries completely.
        """
        self.append_indent(out, level + 1, has_follower + [False])
        count = self.adapter.num_children(node)
        if count == 1:
            out.append("1 child is not shown")
        else:
            out.append(f"{count} children are not shown")
        out.append("\n")

    def append_indent(self, out: List[str], level: int, has_follower: List[bool]) -> None:
        """Append the indent and connector of a node at the given level.

        Position i of ``has_follower`` is True if the i-th node on the path
        from the root to the current node has a next sibling. Level zero is
        the root.
        """
        strings = self.str_config
        for i in range(level):
            out.append(strings.vertical if has_follower[i] else strings.blank)
        out.append(strings.fork if has_follower[level] else strings.last_fork)

    def _print_inner_node(self, out: List[str], node: Any, level: int,
                          max_dump_depth: Optional[int], has_follower: List[bool]) -> None:
        self.append_indent(out, level, has_follower)
        self.append_single_node(out, node)
        out.append("\n")

        children = self.adapter.get_children(node)
        if depth_exhausted(max_dump_depth):
            if children:
                self.append_boundary_for_node(out, node, level, has_follower)
            return

        last = len(children) - 1
        for i, child in enumerate(children):
            has_follower.append(i < last)
            self._print_inner_node(out, child, level + 1, child_depth(max_dump_depth), has_follower)
            has_follower.pop()
