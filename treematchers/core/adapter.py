"""TreeLikeAdapter abstraction for tree-matchers.

The TreeLikeAdapter is what lets the matchers and printers work on ANY
tree hierarchy. Nodes stay opaque values owned by the caller; the adapter
knows how to list a node's children and how to name it in messages.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Optional


class TreeLikeAdapter(ABC):
    """Abstract adapter giving structural access to one node hierarchy.

    Only two facts about a node are required: its ordered children and a
    display name. Everything else has a default implementation that
    adapters can override with something more efficient.

    Example:
        class NodeAdapter(TreeLikeAdapter):
            def get_children(self, node):
                return list(node.children)

            def type_name(self, node_type):
                return node_type.__name__.replace("AST", "", 1)
    """

    @abstractmethod
    def get_children(self, node: Any) -> List[Any]:
        """Return all the children of the node, in order.

        Must be deterministic and free of side effects for a given node
        while a match is running.

        Args:
            node: The parent node

        Returns:
            List of child nodes
        """
        pass

    def node_name(self, node: Any) -> str:
        """Return the display name of a node, used in error messages."""
        return self.type_name(type(node))

    def type_name(self, node_type: type) -> str:
        """Return the display name of a node type.

        Override if it differs from the simple name of the class.
        """
        return node_type.__name__

    # Convenience methods, override for more efficient implementations

    def num_children(self, node: Any) -> int:
        """Return the number of children of the node."""
        return len(self.get_children(node))

    def get_child(self, node: Any, index: int) -> Optional[Any]:
        """Return the child at the given index, or None if it doesn't exist."""
        children = self.get_children(node)
        if 0 <= index < len(children):
            return children[index]
        return None

    def is_leaf(self, node: Any) -> bool:
        """Return True if the node has no children."""
        return self.num_children(node) == 0

    def descendants(self, node: Any) -> Iterator[Any]:
        """Yield all descendants of the node in pre-order, excluding itself."""
        for child in self.get_children(node):
            yield from self.descendants_or_self(child)

    def descendants_or_self(self, node: Any) -> Iterator[Any]:
        """Yield the node, then all its descendants in pre-order."""
        yield node
        yield from self.descendants(node)

    # Capability flags - adapters declare what they support

    def supports_parent(self) -> bool:
        """Check if the adapter can report the parent of a node.

        The matching engine checks parent consistency of every matched
        child when this returns True.

        Returns:
            True if get_parent is implemented
        """
        return False


class DoublyLinkedTreeLikeAdapter(TreeLikeAdapter):
    """A TreeLikeAdapter where each node knows its parent.

    For every node ``c`` in ``get_children(p)``, ``get_parent(c)`` is
    expected to be ``p``. The matchers assert it on each matched child.
    """

    @abstractmethod
    def get_parent(self, node: Any) -> Optional[Any]:
        """Get the parent node of the given node.

        Args:
            node: The child node

        Returns:
            Parent node or None if node is a root
        """
        pass

    def supports_parent(self) -> bool:
        return True

    def has_parent_link(self, node: Any) -> bool:
        """Check if ``get_parent`` is meaningful for this node.

        The matching engine skips the parent check of nodes for which this
        returns False. Override when parents are only known for part of the
        nodes, e.g. for trees registered with the adapter.

        Returns:
            True by default
        """
        return True

    def get_child_index(self, node: Any) -> int:
        """Return the index of the node among its parent's children.

        The default implementation scans the parent's children by identity.

        Returns:
            The index, or -1 if the node has no parent
        """
        parent = self.get_parent(node)
        if parent is None:
            return -1
        for i, child in enumerate(self.get_children(parent)):
            if child is node:
                return i
        return -1

    def get_depth(self, node: Any) -> int:
        """Calculate the depth of a node, walking up to the root.

        Returns:
            Depth where root = 0
        """
        depth = 0
        current = self.get_parent(node)
        while current is not None:
            depth += 1
            current = self.get_parent(current)
        return depth

    def ancestors(self, node: Any) -> Iterator[Any]:
        """Yield the parent of the node, then its parent, up to the root."""
        current = self.get_parent(node)
        while current is not None:
            yield current
            current = self.get_parent(current)

    def ancestors_or_self(self, node: Any) -> Iterator[Any]:
        yield node
        yield from self.ancestors(node)

    def following_siblings(self, node: Any) -> Iterator[Any]:
        """Yield the siblings after the node, nearest first."""
        parent = self.get_parent(node)
        if parent is None:
            return  # Root has no siblings
        index = self.get_child_index(node)
        yield from self.get_children(parent)[index + 1:]

    def preceding_siblings(self, node: Any) -> Iterator[Any]:
        """Yield the siblings before the node, nearest first."""
        parent = self.get_parent(node)
        if parent is None:
            return
        index = self.get_child_index(node)
        if index <= 0:
            return
        yield from reversed(self.get_children(parent)[:index])

    def next_sibling(self, node: Any) -> Optional[Any]:
        return next(self.following_siblings(node), None)

    def previous_sibling(self, node: Any) -> Optional[Any]:
        return next(self.preceding_siblings(node), None)
