"""A DSL printer that also asserts the values of node attributes.

Useful to generate complete unit tests from a parsed tree: every public
attribute with a literal representation becomes an assertion, and every
attribute referencing a child becomes an identity assertion on that child.
"""

import enum
import math
from typing import Any, Dict, List, Optional, Tuple

from .dsl import DslStructurePrinter


class AttributeTreePrinter(DslStructurePrinter):
    """A DslStructurePrinter adding assertions for the attributes of nodes.

    Attributes are the public instance attributes of a node plus the
    properties declared on its runtime class, sorted by name.

    * override ``take_attribute_if`` to select other attributes
    * override ``value_to_string`` to support more value types
    * override ``format_attribute_assertion`` to change the assertion style
    """

    def take_attribute_if(self, node: Any, name: str, value: Any) -> bool:
        """Return True if the attribute should be dumped.

        By default, filters out private attributes.
        """
        return not name.startswith("_")

    def value_to_string(self, value: Any) -> Optional[str]:
        """Return Python source representing ``value``.

        Supports strings, numbers, booleans, None, enum members and classes.
        Infinite floats are written ``float("inf")``. Returns None for anything
        else, including NaN which equals nothing, in which case no assertion
        is generated for the attribute.
        """
        if isinstance(value, float) and not math.isfinite(value):
            if math.isnan(value):
                return None
            return 'float("inf")' if value > 0 else 'float("-inf")'
        if value is None or isinstance(value, (str, bool, int, float)):
            return repr(value)
        if isinstance(value, enum.Enum):
            return f"{type(value).__qualname__}.{value.name}"
        if isinstance(value, type):
            return value.__qualname__
        return None

    def format_attribute_assertion(self, cursor_name: str, name: str, value: Any) -> Optional[str]:
        """Format the assertion that attribute ``name`` of the node is ``value``.

        Returns:
            The assertion, or None to skip the attribute
        """
        literal = self.value_to_string(value)
        if literal is None:
            return None
        operator = "is" if value is None or isinstance(value, bool) else "=="
        return f"assert {cursor_name}.node.{name} {operator} {literal}"

    def get_attributes(self, node: Any) -> List[Tuple[str, Any]]:
        """Return the (name, value) pairs of the attributes of the node, sorted by name."""
        attributes: Dict[str, Any] = {}
        for name, value in getattr(node, "__dict__", {}).items():
            attributes[name] = value
        for name, member in vars(type(node)).items():
            if isinstance(member, property):
                try:
                    attributes[name] = getattr(node, name)
                except Exception:
                    # Properties that can't be read are not dumped
                    continue
        return sorted(
            ((name, value) for name, value in attributes.items()
             if self.take_attribute_if(node, name, value)),
            key=lambda item: item[0],
        )

    def get_additional_assertions(self, node: Any, cursor_name: str) -> List[str]:
        assertions = []
        for name, value in self.get_attributes(node):
            assertion = self.format_attribute_assertion(cursor_name, name, value)
            if assertion is not None:
                assertions.append(assertion)
        return assertions

    def get_child_call_contexts(self, parent: Any) -> Dict[int, str]:
        children = self.adapter.get_children(parent)
        contexts: Dict[int, str] = {}
        for name, value in self.get_attributes(parent):
            if isinstance(value, (list, tuple)):
                for k, item in enumerate(value):
                    self._add_context(contexts, children, item, f"{name}[{k}]")
            else:
                self._add_context(contexts, children, value, name)
        return contexts

    @staticmethod
    def _add_context(contexts: Dict[int, str], children: List[Any], value: Any, access: str) -> None:
        for i, child in enumerate(children):
            if child is value:
                contexts.setdefault(i, access)
                return
