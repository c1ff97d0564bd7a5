"""Exception classes for tree-matchers.

Every data mismatch found while matching a tree is a TreeMatchError, which
is an AssertionError so that test runners report it as a plain test
failure. Misuse of the matching API is a MatcherUsageError instead: it
signals a bug in the assertion script, not in the tree under test.
"""

from typing import Optional, Tuple


class TreeMatchersError(Exception):
    """Base class for all errors raised by tree-matchers."""
    pass


class TreeMatchError(TreeMatchersError, AssertionError):
    """Raised when a node does not match its expected shape.

    The ``path`` attribute holds the display names of the nodes from the
    root to the node where the failure was detected. It is set exactly once,
    at the innermost point of detection; an error whose path is set is
    re-raised unchanged by enclosing matchers.

    Attributes:
        path: Names of the nodes on the failure path, or None if the
              message has not been annotated with a location yet
    """

    def __init__(self, message: str, path: Optional[Tuple[str, ...]] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    @property
    def annotated(self) -> bool:
        """True if the message already carries a location prefix."""
        return self.path is not None


class MatcherUsageError(TreeMatchersError, RuntimeError):
    """Raised when the matching API is used incorrectly.

    For example, calling ``child`` on a cursor whose children were declared
    ignored. This is never converted to a TreeMatchError.
    """
    pass
