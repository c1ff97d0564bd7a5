"""Node cursors: the recursive tree-matching engine.

A NodeCursor wraps one node being matched and owns a positional cursor
into that node's children. Assertion scripts declare, in order, what each
child must look like; every ``child`` call consumes the next child and
recursively matches it. When the script for a node is done, the cursor
checks that every child was accounted for.

Scripts can be plain functions taking the cursor::

    def declaration(it):
        it.child(Type, ignore_children=True)
        it.skip_child()

    match_subtree(root, config, Declaration, declaration)

or nested ``with`` blocks::

    with matching(root, config, Declaration) as it:
        with it.child_block(Type) as it1:
            it1.child(Primitive)
        it.skip_child()

Both forms run the same algorithm, one MatchFrame per visited node.
"""

import logging
from typing import Any, Callable, List, Optional, Sequence, Tuple, TypeVar

from .errors import MatcherUsageError, TreeMatchError
from .formatting import format_error_message, path_names

logger = logging.getLogger(__name__)

R = TypeVar("R")

NO_EXPLANATION = "No explanation provided"


def _fail(config, path: Sequence[Any], message: str) -> TreeMatchError:
    """Build a TreeMatchError located at the given path."""
    return TreeMatchError(
        format_error_message(config, path, message),
        path=path_names(config.adapter, path),
    )


def _annotate(config, path: Sequence[Any], error: AssertionError) -> TreeMatchError:
    """Attach a location to an assertion raised by user code."""
    message = str(error) or NO_EXPLANATION
    logger.debug("Annotating %s raised at %s", type(error).__name__, path_names(config.adapter, path))
    return _fail(config, path, message)


def _is_annotated(error: BaseException) -> bool:
    return isinstance(error, TreeMatchError) and error.annotated


def _index_by_identity(children: Sequence[Any], node: Any) -> int:
    for i, child in enumerate(children):
        if child is node:
            return i
    return -1


class NodeCursor:
    """Wraps a node being matched and tracks how many children were matched.

    Cursors are created by the engine, never by user code. A cursor is only
    valid while the assertions block of its node runs.

    Attributes:
        node: The node being matched
    """

    def __init__(self,
                 node: Any,
                 config,
                 parent_path: Tuple[Any, ...],
                 ignore_children: bool):
        """Initialize a cursor.

        Args:
            node: The node being matched
            config: MatchingConfig of the running match
            parent_path: Nodes from the root to the parent, excluding this node
            ignore_children: If True, calls to child matching methods are forbidden
        """
        self._node = node
        self._config = config
        self._parent_path = parent_path
        self._path = parent_path + (node,)
        self._ignore_children = ignore_children
        # Snapshot, the tree is assumed frozen for the duration of the match
        self._children: List[Any] = list(config.adapter.get_children(node))
        # Index to which the next child matcher will apply
        self._next_child_index = 0
        # Cursor of the child whose block is running, if any
        self._active_child: Optional["NodeCursor"] = None
        self._closed = False

    @property
    def node(self) -> Any:
        """The node being matched."""
        return self._node

    @property
    def path(self) -> Tuple[Any, ...]:
        """Nodes from the root to this node, inclusive."""
        return self._path

    @property
    def num_children(self) -> int:
        return len(self._children)

    @property
    def ignores_children(self) -> bool:
        return self._ignore_children

    def child(self,
              node_type: type,
              spec: Optional[Callable[["NodeCursor"], Any]] = None,
              ignore_children: bool = False) -> Any:
        """Match the next child against a type and a sequence of assertions.

        Asserts that the child exists and is an instance of ``node_type``,
        then runs ``spec`` on its cursor. Subsequent calls at the same level
        match the next children.

        Args:
            node_type: Expected type of the child
            spec: Assertions to carry out on the child's cursor. If None,
                  the child is only checked for its type and, unless
                  ``ignore_children`` is set, for having no children.
            ignore_children: If True, the number of children of the child
                  is not asserted, and calls to ``child`` in ``spec`` raise
                  MatcherUsageError

        Returns:
            The child node

        Raises:
            TreeMatchError: If the child doesn't exist, is not of type
                ``node_type``, or fails the assertions of ``spec``
        """
        def spec_returning_node(cursor: NodeCursor) -> Any:
            if spec is not None:
                spec(cursor)
            return cursor.node

        return self._match_next_child(node_type, ignore_children, spec_returning_node)

    def extract_from_child(self,
                           node_type: type,
                           spec: Callable[["NodeCursor"], R],
                           ignore_children: bool = False) -> R:
        """Match the next child like ``child``, returning the value of ``spec``.

        Useful to fetch values from a subtree while keeping each assertion
        on the node it is about.

        Example:
            name = it.extract_from_child(Declarator, lambda d: d.child(Name).id)

        Returns:
            Whatever ``spec`` returned
        """
        return self._match_next_child(node_type, ignore_children, spec)

    def child_block(self, node_type: type, ignore_children: bool = False) -> "MatchFrame":
        """Match the next child in a ``with`` block.

        The type of the child is checked on entering the block. Leaving the
        block normally runs the implicit assertions and checks the number of
        children of the child. The child is only consumed when the block is
        entered, so a ``child_block`` call outside of a ``with`` statement
        matches nothing.

        Example:
            with it.child_block(Type) as type_:
                type_.child(Primitive)

        Returns:
            A context manager yielding the child's cursor
        """
        self._check_usable()
        self._check_children_not_ignored()
        return MatchFrame(self._config, node_type, None, self._path, ignore_children, parent_cursor=self)

    def skip_children(self, count: int) -> None:
        """Specify that the next children are only tested for existence.

        Their type, children and anything else are not checked.

        Args:
            count: Number of children to skip

        Raises:
            TreeMatchError: If the node has fewer children than that
        """
        if count < 0:
            raise ValueError(f"Cannot skip a negative number of children: {count}")
        self._check_usable()
        self._check_children_not_ignored()
        new_index = self._next_child_index + count
        if new_index > len(self._children):
            raise self._missing_child(new_index - 1)
        self._next_child_index = new_index

    def skip_child(self) -> None:
        """Specify that the next child is only tested for existence."""
        self.skip_children(1)

    def _match_next_child(self,
                          node_type: type,
                          ignore_children: bool,
                          spec: Callable[["NodeCursor"], R]) -> R:
        self._check_usable()
        self._check_children_not_ignored()
        frame = MatchFrame(self._config, node_type, None, self._path, ignore_children, parent_cursor=self)
        return frame.run(spec)

    def _check_usable(self) -> None:
        if self._closed:
            message = "Cursor used after the block of its node returned"
        elif self._active_child is not None:
            message = (
                f"Cursor used inside the block of its child "
                f"{self._config.adapter.node_name(self._active_child.node)}"
            )
        else:
            return
        raise MatcherUsageError(format_error_message(self._config, self._path, message))

    def _take_next_child(self) -> Any:
        index = self._next_child_index
        if index >= len(self._children):
            raise self._missing_child(index)
        self._next_child_index += 1
        return self._children[index]

    def _missing_child(self, index: int) -> TreeMatchError:
        return _fail(
            self._config,
            self._path,
            f"Node has fewer children than expected, child #{index} doesn't exist",
        )

    def _check_children_not_ignored(self) -> None:
        if self._ignore_children:
            raise MatcherUsageError(
                format_error_message(
                    self._config,
                    self._path,
                    "Calling child when ignore_children=True is forbidden",
                )
            )

    def _check_child_count(self) -> None:
        if not self._ignore_children and self._next_child_index != len(self._children):
            raise _fail(
                self._config,
                self._path,
                f"Wrong number of children, expected {self._next_child_index}, "
                f"actual {len(self._children)}",
            )

    def __repr__(self) -> str:
        return f"NodeCursor<{self._config.adapter.node_name(self._node)}>"


class MatchFrame:
    """Matching of one node, from the type check to the child count check.

    A frame is opened before the assertions of its node run, and closed
    after they returned. It is also usable as a context manager, in which
    case the body of the ``with`` statement is the assertions block.

    A frame created by a parent cursor takes the parent's next child when
    it is opened. A root frame is given its node directly.
    """

    def __init__(self,
                 config,
                 node_type: type,
                 node: Any,
                 parent_path: Tuple[Any, ...],
                 ignore_children: bool,
                 parent_cursor: Optional[NodeCursor] = None):
        self.config = config
        self.node_type = node_type
        self.node = node
        self.parent_path = parent_path
        self.ignore_children = ignore_children
        self.parent_cursor = parent_cursor
        self.cursor: Optional[NodeCursor] = None

    def open(self) -> NodeCursor:
        """Take the node, check its type and parent, and create its cursor.

        Failures are reported at the parent's path.

        Raises:
            TreeMatchError: On a missing child, or a type or parent mismatch
            MatcherUsageError: If the frame was already opened, or its
                parent cursor is not usable anymore
        """
        if self.cursor is not None:
            raise MatcherUsageError("A match block can only be entered once")
        parent_cursor = self.parent_cursor
        if parent_cursor is not None:
            parent_cursor._check_usable()
            self.node = parent_cursor._take_next_child()

        config = self.config
        adapter = config.adapter
        parent_path = self.parent_path
        label = self._label()

        if not isinstance(self.node, self.node_type):
            raise _fail(
                config,
                parent_path,
                f"Expected {label} to have type {adapter.type_name(self.node_type)}, "
                f"actual {adapter.type_name(type(self.node))}",
            )

        if parent_path and adapter.supports_parent() and adapter.has_parent_link(self.node):
            expected_parent = parent_path[-1]
            actual_parent = adapter.get_parent(self.node)
            if actual_parent is not expected_parent:
                actual_name = None if actual_parent is None else adapter.node_name(actual_parent)
                raise _fail(
                    config,
                    parent_path,
                    f"Expected {label} to have parent {adapter.node_name(expected_parent)}, "
                    f"actual {actual_name}",
                )

        logger.debug("Matching %s as %s", label, adapter.type_name(self.node_type))
        self.cursor = NodeCursor(self.node, config, parent_path, self.ignore_children)
        if parent_cursor is not None:
            parent_cursor._active_child = self.cursor
        return self.cursor

    def close(self) -> None:
        """Run the implicit assertions, then check the number of children."""
        try:
            self.config.run_implicit_assertions(self.node)
        except AssertionError as e:
            if _is_annotated(e):
                raise
            raise _annotate(self.config, self.cursor.path, e) from e
        self.cursor._check_child_count()

    def run(self, spec: Callable[[NodeCursor], R]) -> R:
        """Open the frame, run the assertions block, and close the frame."""
        cursor = self.open()
        try:
            try:
                result = spec(cursor)
            except AssertionError as e:
                if _is_annotated(e):
                    raise
                raise _annotate(self.config, cursor.path, e) from e
            self.close()
            return result
        finally:
            self._release()

    def _release(self) -> None:
        # The cursor must not be used once its block is over, and the parent
        # cursor is usable again
        self.cursor._closed = True
        if self.parent_cursor is not None:
            self.parent_cursor._active_child = None

    def _label(self) -> str:
        if not self.parent_path:
            return "root"
        parent = self.parent_path[-1]
        siblings = self.config.adapter.get_children(parent)
        return f"child #{_index_by_identity(siblings, self.node)}"

    def __enter__(self) -> NodeCursor:
        return self.open()

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        try:
            if exc_value is None:
                self.close()
            elif isinstance(exc_value, AssertionError) and not _is_annotated(exc_value):
                raise _annotate(self.config, self.cursor.path, exc_value) from exc_value
        finally:
            self._release()
        return False


def execute_matcher(config,
                    node_type: type,
                    node: Any,
                    parent_path: Tuple[Any, ...],
                    ignore_children: bool,
                    spec: Callable[[NodeCursor], R]) -> R:
    """Match a node against a type and a sequence of assertions.

    Args:
        config: MatchingConfig of the running match
        node_type: Expected type of ``node``
        node: Node on which to execute the assertions
        parent_path: Nodes from the root to the parent of ``node``
        ignore_children: If True, the number of children is not asserted
        spec: Assertions to carry out on the cursor of ``node``

    Returns:
        The return value of ``spec``

    Raises:
        TreeMatchError: If some assertion fails
    """
    return MatchFrame(config, node_type, node, parent_path, ignore_children).run(spec)
