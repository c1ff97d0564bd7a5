"""Adapter for syntax trees of the standard library ``ast`` module.

Expression contexts (``Load``, ``Store``) and operators (``Add``, ``And``,
``Not``, ``Eq``, ...) are not considered children. The parser shares one
instance of each between all the nodes using it, so they have no single
parent. Read them from the attribute of their owner, e.g. ``BinOp.op``.
"""

import ast
from typing import Any, Dict, List, Optional, Tuple

from ..core.adapter import DoublyLinkedTreeLikeAdapter

SHARED_NODE_TYPES = (ast.expr_context, ast.boolop, ast.operator, ast.unaryop, ast.cmpop)


class PythonAstAdapter(DoublyLinkedTreeLikeAdapter):
    """Adapter for ``ast.AST`` trees.

    AST nodes don't know their parent. Parents are only known for the nodes
    of trees registered with ``register_root`` (or ``parse``). Nodes of other
    trees can still be matched, their parent check is skipped.

    Example:
        tree = ast.parse("i = 0")
        adapter = PythonAstAdapter(tree)
        adapter.get_parent(tree.body[0])  # -> tree
        adapter.unregister_root(tree)
    """

    def __init__(self, *roots: ast.AST):
        """Initialize the adapter.

        Args:
            *roots: Trees whose parent links should be recorded
        """
        self._roots: List[ast.AST] = []
        # id(child) -> (child, parent); holding the child makes a stale id harmless
        self._links: Dict[int, Tuple[ast.AST, ast.AST]] = {}
        for root in roots:
            self.register_root(root)

    def register_root(self, root: ast.AST) -> ast.AST:
        """Record the parent of every node of a tree.

        Returns:
            The root, for chaining
        """
        self._roots.append(root)
        for parent in ast.walk(root):
            for child in self.get_children(parent):
                self._links[id(child)] = (child, parent)
        return root

    def unregister_root(self, root: ast.AST) -> None:
        """Forget the parent links of a registered tree.

        Raises:
            ValueError: If the tree was not registered
        """
        for i, registered in enumerate(self._roots):
            if registered is root:
                del self._roots[i]
                break
        else:
            raise ValueError(f"{type(root).__name__} tree is not registered")
        for node in ast.walk(root):
            link = self._links.get(id(node))
            if link is not None and link[0] is node:
                del self._links[id(node)]

    def clear(self) -> None:
        """Forget every registered tree."""
        self._roots.clear()
        self._links.clear()

    @property
    def roots(self) -> List[ast.AST]:
        """The registered trees."""
        return list(self._roots)

    def get_children(self, node: ast.AST) -> List[ast.AST]:
        return [
            child for child in ast.iter_child_nodes(node)
            if not isinstance(child, SHARED_NODE_TYPES)
        ]

    def get_parent(self, node: ast.AST) -> Optional[ast.AST]:
        link = self._links.get(id(node))
        if link is None or link[0] is not node:
            return None
        return link[1]

    def has_parent_link(self, node: ast.AST) -> bool:
        link = self._links.get(id(node))
        return link is not None and link[0] is node

    def supports_parent(self) -> bool:
        return bool(self._roots)

    def parse(self, source: str, **kwargs: Any) -> ast.Module:
        """Parse source code and register the resulting tree.

        Args:
            source: Python source code
            **kwargs: Passed to ``ast.parse``

        Returns:
            The ``ast.Module`` root
        """
        return self.register_root(ast.parse(source, **kwargs))
