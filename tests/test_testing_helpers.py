"""
Tests for the TreeMatcher test helper.
"""

import pytest

from treematchers import (
    AttributeTreePrinter,
    DslStructurePrinter,
    SimpleTreePrinter,
    TreeMatchError,
)
from treematchers.testing import TreeMatcher

from dummy_tree import (
    NODE_CLASSES,
    Declaration,
    Declarator,
    DeclaratorId,
    DummyAdapter,
    Type,
    array_declaration,
    declaration,
)


@pytest.fixture
def matcher(config):
    return TreeMatcher(config)


class TestTreeMatcher:
    """Matching through a bound config."""

    def test_match(self, matcher, decl):
        def spec(it):
            it.child(Type, ignore_children=True)
            it.skip_child()

        assert matcher.match(decl, Declaration, spec) is decl

    def test_match_failure(self, matcher, decl):
        with pytest.raises(TreeMatchError, match=r"^At /Declaration: Wrong number of children"):
            matcher.match(decl, Declaration)

    def test_extract(self, matcher, decl):
        def spec(it):
            it.skip_child()
            return it.extract_from_child(
                Declarator,
                lambda d: (d.child(DeclaratorId), d.skip_child())[0].image,
            )

        assert matcher.extract(decl, Declaration, spec) == "i"

    def test_match_node(self, matcher, decl):
        with matcher.match_node(decl, Declaration) as it:
            it.skip_children(2)

    def test_for_adapter(self, decl):
        matcher = TreeMatcher.for_adapter(DummyAdapter(), error_printer=None)
        assert matcher.config.error_printer is None
        assert isinstance(matcher.dump_printer, DslStructurePrinter)
        matcher.match(decl, Declaration, ignore_children=True)

    def test_dump_uses_error_printer(self, adapter, decl):
        matcher = TreeMatcher.for_adapter(adapter, error_printer=SimpleTreePrinter)
        assert matcher.dump(decl, 0) == "+--Declaration\n   +--2 children are not shown\n"

    def test_explicit_dump_printer(self, config, adapter, decl):
        printer = AttributeTreePrinter(adapter)
        matcher = TreeMatcher(config, dump_printer=printer)
        assert matcher.dump(decl) == printer.dump_subtree(decl)


class TestDumpedScripts:
    """Scripts printed by ``dump`` are valid tests for the dumped tree."""

    def run_script(self, matcher, script, node):
        namespace = dict(NODE_CLASSES)
        namespace.update(node=node, match_node=matcher.match_node)
        exec(script, namespace)

    @pytest.mark.parametrize("tree_factory", [declaration, array_declaration])
    def test_structure_dump_matches(self, matcher, tree_factory):
        tree = tree_factory()
        self.run_script(matcher, matcher.dump(tree), tree)

    def test_attribute_dump_matches(self, config, adapter):
        matcher = TreeMatcher(config, dump_printer=AttributeTreePrinter(adapter))
        tree = declaration()
        self.run_script(matcher, matcher.dump(tree), tree)

    def test_depth_limited_dump_matches(self, matcher):
        tree = array_declaration()
        self.run_script(matcher, matcher.dump(tree, 1), tree)

    def test_attribute_dump_detects_changes(self, config, adapter):
        """A dumped script fails once the tree changes."""
        matcher = TreeMatcher(config, dump_printer=AttributeTreePrinter(adapter))
        tree = declaration()
        script = matcher.dump(tree)
        tree.children[1].children[0].image = "j"

        with pytest.raises(TreeMatchError, match=r"^At /Declaration/Declarator/DeclaratorId: "):
            self.run_script(matcher, script, tree)
