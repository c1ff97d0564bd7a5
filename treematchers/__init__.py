"""tree-matchers - Assertions on the shape of trees.

tree-matchers lets tests state, node by node, what a tree (e.g. a parser's
syntax tree) must look like, and reports the first mismatch with the path
to the offending node and a dump of its subtree. It also dumps trees to
matcher scripts that can be pasted into tests.

    from treematchers import MatchingConfig, matching

    with matching(tree, MatchingConfig(adapter=NodeAdapter()), Declaration) as it:
        with it.child_block(Type) as type_:
            type_.child(Primitive)
        it.skip_child()

Any hierarchy can be matched once a TreeLikeAdapter is written for it.
"""

import logging

__version__ = "1.0.0"

from .core.adapter import TreeLikeAdapter, DoublyLinkedTreeLikeAdapter
from .config import MatchingConfig
from .matching import (
    match_subtree,
    extract_from_subtree,
    matching,
    NodeCursor,
    TreeMatchersError,
    TreeMatchError,
    MatcherUsageError,
)
from .printers import (
    TreePrinter,
    SimpleTreePrinter,
    DslStructurePrinter,
    AttributeTreePrinter,
)
from .adapters import PythonAstAdapter

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "TreeLikeAdapter",
    "DoublyLinkedTreeLikeAdapter",
    "MatchingConfig",
    # Matching
    "match_subtree",
    "extract_from_subtree",
    "matching",
    "NodeCursor",
    "TreeMatchersError",
    "TreeMatchError",
    "MatcherUsageError",
    # Printers
    "TreePrinter",
    "SimpleTreePrinter",
    "DslStructurePrinter",
    "AttributeTreePrinter",
    # Adapters
    "PythonAstAdapter",
]
