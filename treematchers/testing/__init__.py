"""Testing utilities for tree-matchers consumers."""

from .fixtures import TreeMatcher

__all__ = ['TreeMatcher']
