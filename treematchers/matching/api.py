"""High-level API for tree-matchers.

These are the functions most callers invoke directly. Everything else is
reached through the NodeCursor handed to the assertions block.
"""

from typing import Any, Callable, Optional, TypeVar

from .cursor import MatchFrame, NodeCursor, execute_matcher
from .errors import TreeMatchError

R = TypeVar("R")


def _check_root(root: Any, config, node_type: type) -> None:
    if root is None:
        raise TreeMatchError(
            f"Expected node of type {config.adapter.type_name(node_type)}, but was None",
            path=(),
        )


def match_subtree(root: Optional[Any],
                  config,
                  node_type: type,
                  spec: Optional[Callable[[NodeCursor], Any]] = None,
                  ignore_children: bool = False) -> Any:
    """Assert that a node matches the subtree specified by ``spec``.

    The root is first asserted not to be None, then to be an instance of
    ``node_type``, and is then fed to the assertions of ``spec``.

    Args:
        root: The node to match
        config: MatchingConfig defining the adapter and error reporting
        node_type: Expected type of the root
        spec: Assertions to carry out on the root's cursor. Calls to
              ``child`` in it match the children of the root, in order.
        ignore_children: If True, the number of children of the root is not
              asserted, and calls to ``child`` in ``spec`` are forbidden

    Returns:
        The root node

    Raises:
        TreeMatchError: If one of the assertions is violated, e.g. a node is
            not of the expected type, a child doesn't exist, etc.

    Example:
        >>> match_subtree(tree, config, Declaration, lambda it: (
        ...     it.child(Type, ignore_children=True),
        ...     it.skip_child(),
        ... ))
    """
    def spec_returning_root(cursor: NodeCursor) -> Any:
        if spec is not None:
            spec(cursor)
        return cursor.node

    return extract_from_subtree(root, config, node_type, spec_returning_root, ignore_children)


def extract_from_subtree(root: Optional[Any],
                         config,
                         node_type: type,
                         spec: Callable[[NodeCursor], R],
                         ignore_children: bool = False) -> R:
    """Match a subtree like ``match_subtree``, returning the value of ``spec``.

    Returns:
        Whatever ``spec`` returned
    """
    _check_root(root, config, node_type)
    return execute_matcher(config, node_type, root, (), ignore_children, spec)


def matching(root: Optional[Any],
             config,
             node_type: type,
             ignore_children: bool = False) -> MatchFrame:
    """Match a subtree with nested ``with`` blocks.

    Example:
        with matching(tree, config, Declaration) as it:
            with it.child_block(Type) as type_:
                type_.child(Primitive)
            it.skip_child()

    Returns:
        A context manager yielding the root's cursor
    """
    _check_root(root, config, node_type)
    return MatchFrame(config, node_type, root, (), ignore_children)
