"""Tree adapters for specific tree structures.

Adapters implement the TreeLikeAdapter interface for different tree types,
enabling tree-matchers to work with any tree structure.
"""

from .python_ast import PythonAstAdapter

__all__ = [
    "PythonAstAdapter",
]
