"""Test helpers for tree-matchers consumers.

The adapter and config are the same for every assertion of a test suite,
so a TreeMatcher binds them once and exposes short matching methods.
"""

from typing import Any, Callable, Optional, TypeVar

from ..config import MatchingConfig
from ..core.adapter import TreeLikeAdapter
from ..matching.api import extract_from_subtree, match_subtree, matching
from ..matching.cursor import MatchFrame, NodeCursor
from ..printers.base import TreePrinter
from ..printers.dsl import DslStructurePrinter

R = TypeVar("R")


class TreeMatcher:
    """Matching helper bound to one MatchingConfig.

    Example:
        matcher = TreeMatcher(MatchingConfig(adapter=NodeAdapter()))
        match_node = matcher.match_node

        def test_declaration():
            with match_node(parse("int i = 0;"), Declaration) as it:
                it.child(Type, ignore_children=True)
                it.skip_child()

        # Print the script of a tree to paste into a test
        print(matcher.dump(parse("int[] i = 0;")))
    """

    def __init__(self, config: MatchingConfig, dump_printer: Optional[TreePrinter] = None):
        """Initialize with a config.

        Args:
            config: Config used by every match
            dump_printer: Printer used by ``dump``. Defaults to the config's
                error printer if it is set, else to a DslStructurePrinter.
        """
        self.config = config
        if dump_printer is None:
            dump_printer = config.error_printer or DslStructurePrinter(config.adapter)
        self.dump_printer = dump_printer

    @classmethod
    def for_adapter(cls, adapter: TreeLikeAdapter, **kwargs: Any) -> "TreeMatcher":
        """Create a matcher with a default config for the adapter.

        Args:
            adapter: Adapter for the tree hierarchy
            **kwargs: Other MatchingConfig fields
        """
        return cls(MatchingConfig(adapter=adapter, **kwargs))

    def match(self,
              root: Optional[Any],
              node_type: type,
              spec: Optional[Callable[[NodeCursor], Any]] = None,
              ignore_children: bool = False) -> Any:
        """Assert that ``root`` matches ``spec``; see ``match_subtree``."""
        return match_subtree(root, self.config, node_type, spec, ignore_children)

    def extract(self,
                root: Optional[Any],
                node_type: type,
                spec: Callable[[NodeCursor], R],
                ignore_children: bool = False) -> R:
        """Match ``root`` and return the value of ``spec``; see ``extract_from_subtree``."""
        return extract_from_subtree(root, self.config, node_type, spec, ignore_children)

    def match_node(self,
                   root: Optional[Any],
                   node_type: type,
                   ignore_children: bool = False) -> MatchFrame:
        """Match ``root`` in a ``with`` block; see ``matching``."""
        return matching(root, self.config, node_type, ignore_children)

    def dump(self, node: Any, max_dump_depth: Optional[int] = None) -> str:
        """Return the matcher script of a subtree, for copy-pasting into a test."""
        return self.dump_printer.dump_subtree(node, max_dump_depth)
