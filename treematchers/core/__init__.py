"""Core abstractions for tree-matchers.

This module contains the adapter base classes that give the matchers and
printers structural access to a tree hierarchy.
"""

from .adapter import TreeLikeAdapter, DoublyLinkedTreeLikeAdapter

__all__ = [
    "TreeLikeAdapter",
    "DoublyLinkedTreeLikeAdapter",
]
