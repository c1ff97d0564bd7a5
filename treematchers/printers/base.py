"""TreePrinter abstraction for tree-matchers."""

from abc import ABC, abstractmethod
from typing import Any, Optional


class TreePrinter(ABC):
    """Pretty prints a node of a hierarchy to a string.

    Used to enrich error messages, or to generate unit tests.
    """

    @abstractmethod
    def dump_subtree(self, node: Any, max_dump_depth: Optional[int] = None) -> str:
        """Dump the given subtree to a string.

        Args:
            node: Root of the subtree to dump
            max_dump_depth: Maximum depth on which to recurse. Zero only
                dumps the node itself. None, or a negative value, dumps the
                whole subtree.

        Returns:
            The rendered subtree
        """
        pass


def depth_exhausted(max_dump_depth: Optional[int]) -> bool:
    """Return True if a dump must not descend below the current node."""
    return max_dump_depth is not None and max_dump_depth == 0


def child_depth(max_dump_depth: Optional[int]) -> Optional[int]:
    """Return the depth limit to apply to the children of the current node."""
    if max_dump_depth is None or max_dump_depth < 0:
        return None
    return max_dump_depth - 1
