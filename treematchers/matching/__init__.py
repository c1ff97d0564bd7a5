"""Recursive tree matching with path-aware error reporting."""

from .api import match_subtree, extract_from_subtree, matching
from .cursor import NodeCursor, MatchFrame, execute_matcher
from .errors import TreeMatchersError, TreeMatchError, MatcherUsageError
from .formatting import format_path, format_error_message

__all__ = [
    "match_subtree",
    "extract_from_subtree",
    "matching",
    "NodeCursor",
    "MatchFrame",
    "execute_matcher",
    "TreeMatchersError",
    "TreeMatchError",
    "MatcherUsageError",
    "format_path",
    "format_error_message",
]
