"""Dummy syntax tree hierarchy used across the test suite.

Models the tree of a Java-like local variable declaration::

    int i = 0;      Declaration(Type(Primitive), Declarator(DeclaratorId, Literal))
    int[] i = 0;    Declaration(Type(ArrayType(Primitive)), Declarator(DeclaratorId, Literal))
"""

from typing import List, Optional

from treematchers import DoublyLinkedTreeLikeAdapter, TreeLikeAdapter


class Node:
    """Base node, children get their parent set on construction."""

    def __init__(self, *children: "Node", image: Optional[str] = None):
        self._children: List[Node] = list(children)
        self._parent: Optional[Node] = None
        self.image = image
        for child in children:
            child._parent = self

    @property
    def children(self) -> List["Node"]:
        return self._children

    @property
    def parent(self) -> Optional["Node"]:
        return self._parent

    def set_parent(self, parent: Optional["Node"]) -> None:
        self._parent = parent


class Declaration(Node):
    pass


class Type(Node):
    pass


class ArrayType(Node):
    pass


class Primitive(Node):
    pass


class Declarator(Node):

    @property
    def id(self) -> Node:
        return self._children[0]

    @property
    def initializer(self) -> Optional[Node]:
        return self._children[1] if len(self._children) > 1 else None


class DeclaratorId(Node):
    pass


class Expression(Node):
    pass


class Literal(Expression):
    pass


class DummyAdapter(DoublyLinkedTreeLikeAdapter):
    """Adapter with parent links."""

    def get_children(self, node: Node) -> List[Node]:
        return list(node.children)

    def get_parent(self, node: Node) -> Optional[Node]:
        return node.parent


class SinglyLinkedDummyAdapter(TreeLikeAdapter):
    """Adapter without parent links, so no parent check is carried out."""

    def get_children(self, node: Node) -> List[Node]:
        return list(node.children)


def declaration() -> Declaration:
    """Tree of ``int i = 0;``."""
    return Declaration(
        Type(Primitive(image="int"), image="int"),
        Declarator(DeclaratorId(image="i"), Literal(image="0")),
    )


def array_declaration() -> Declaration:
    """Tree of ``int[] i = 0;``."""
    return Declaration(
        Type(ArrayType(Primitive(image="int")), image="int"),
        Declarator(DeclaratorId(image="i"), Literal(image="0")),
    )


def should_be(actual, expected) -> None:
    """Equality assertion with a fixed message format."""
    if actual != expected:
        raise AssertionError(f"expected: {expected!r} but was: {actual!r}")


NODE_CLASSES = {
    cls.__name__: cls
    for cls in (Declaration, Type, ArrayType, Primitive, Declarator, DeclaratorId, Expression, Literal)
}
