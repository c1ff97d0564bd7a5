"""Error message formatting for the matchers.

Messages are prefixed with the path from the root to the node where the
failure occurred, e.g. ``At /Declaration/Type: ...``, and optionally
followed by a dump of the offending subtree.
"""

from typing import Any, Sequence

from ..core.adapter import TreeLikeAdapter

ROOT_PATH = "<root>"
SUBTREE_BANNER = "The error occurred in this subtree:"


def format_path(adapter: TreeLikeAdapter, path: Sequence[Any]) -> str:
    """Render a matcher path as a string.

    Args:
        adapter: Adapter used to name the nodes
        path: Nodes from the root to the current node

    Returns:
        ``"<root>"`` for an empty path, else ``"/A/B/C"``
    """
    if not path:
        return ROOT_PATH
    return "/" + "/".join(adapter.node_name(node) for node in path)


def path_names(adapter: TreeLikeAdapter, path: Sequence[Any]) -> tuple:
    """Return the display names of the nodes of a path."""
    return tuple(adapter.node_name(node) for node in path)


def format_error_message(config, path: Sequence[Any], message: str) -> str:
    """Build the full message of a matching failure.

    Args:
        config: The MatchingConfig of the running match
        path: Nodes from the root to the node where the error occurred
        message: The raw failure description

    Returns:
        ``"At <path>: <message>"``, followed by a subtree dump of the last
        node of the path if the config has an error printer
    """
    formatted = f"At {format_path(config.adapter, path)}: {message}"
    if config.error_printer is not None and path:
        dump = config.error_printer.dump_subtree(path[-1], config.max_dump_depth)
        formatted += f"\n\n{SUBTREE_BANNER}\n\n{dump}"
    return formatted
