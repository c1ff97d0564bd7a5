"""Configuration system for tree-matchers.

A MatchingConfig bundles everything the matching engine needs to know
about a tree hierarchy, plus some optional behaviour for error messages.
It is built once per call site, or once per test suite, and never mutated.
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional, Union

from .core.adapter import TreeLikeAdapter
from .printers.base import TreePrinter
from .printers.dsl import DslStructurePrinter

logger = logging.getLogger(__name__)

PrinterFactory = Callable[[TreeLikeAdapter], Optional[TreePrinter]]


@dataclass(frozen=True)
class MatchingConfig:
    """Complete configuration for tree matching.

    Attributes:
        adapter: The TreeLikeAdapter used to roam the tree
        error_printer: If not None, error messages include a dump of the
            subtree where the error occurred. Either a TreePrinter, or a
            factory called with the adapter to build one. Defaults to a
            DslStructurePrinter on the adapter.
        max_dump_depth: Maximum depth to which the error printer dumps
            nodes. Zero only dumps the node itself; None dumps the whole
            subtree.
        implicit_assertions: Called on every successfully matched node,
            after its children were matched. Use it for invariants that
            should hold everywhere in the tree.
    """

    adapter: TreeLikeAdapter
    error_printer: Union[TreePrinter, PrinterFactory, None] = DslStructurePrinter
    max_dump_depth: Optional[int] = None
    implicit_assertions: Optional[Callable[[Any], None]] = None

    def __post_init__(self):
        if not isinstance(self.adapter, TreeLikeAdapter):
            raise TypeError(
                f"adapter must be a TreeLikeAdapter, got {type(self.adapter).__name__}"
            )
        # Resolve printer factories once, against our own adapter
        if self.error_printer is not None and not isinstance(self.error_printer, TreePrinter):
            printer = self.error_printer(self.adapter)
            logger.debug("Resolved error printer %r for %r", printer, self.adapter)
            object.__setattr__(self, "error_printer", printer)

    def with_options(self, **changes: Any) -> "MatchingConfig":
        """Return a copy of this config with some fields replaced.

        Example:
            quiet = config.with_options(error_printer=None)
        """
        return replace(self, **changes)

    def run_implicit_assertions(self, node: Any) -> None:
        """Run the implicit assertions on a node, if any are configured."""
        if self.implicit_assertions is not None:
            self.implicit_assertions(node)

    @classmethod
    def without_dumps(cls, adapter: TreeLikeAdapter, **kwargs: Any) -> "MatchingConfig":
        """Create a config whose error messages carry no subtree dump.

        Args:
            adapter: The adapter for the tree hierarchy
            **kwargs: Other MatchingConfig fields

        Returns:
            MatchingConfig with error_printer set to None
        """
        return cls(adapter=adapter, error_printer=None, **kwargs)
