"""Printers rendering subtrees as outlines or as matcher scripts."""

from .base import TreePrinter
from .simple import SimpleTreePrinter, StrConfig, ASCII_STRINGS, UNICODE_STRINGS
from .dsl import DslStructurePrinter
from .attributes import AttributeTreePrinter

__all__ = [
    "TreePrinter",
    "SimpleTreePrinter",
    "StrConfig",
    "ASCII_STRINGS",
    "UNICODE_STRINGS",
    "DslStructurePrinter",
    "AttributeTreePrinter",
]
