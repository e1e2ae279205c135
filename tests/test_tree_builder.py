"""Unit tests for tree construction.

Covers the node wrapper, the builder's expansion order, depth bounding and
the failure modes of the children producer.
"""

import unittest

from treesift import (
    BuildFailureError,
    ChildrenProducer,
    NilParameterError,
    TraversalFailureError,
    Tree,
    TreeBuilder,
    TreeNode,
    build_tree,
)
from treesift.testing import (
    FailingProducer,
    RecordingProducer,
    named_children,
    named_tree,
    names,
)


def sample_document():
    """root -> {a, b}, a -> {a1, a2}, b -> {}"""
    return named_tree({'root': {'a': {'a1': {}, 'a2': {}}, 'b': {}}})


class TestTreeNode(unittest.TestCase):
    """Test the node wrapper on its own."""

    def test_wraps_any_value(self):
        node = TreeNode(42)
        self.assertEqual(node.element, 42)
        self.assertTrue(node.has_element)
        self.assertTrue(node.is_root())
        self.assertTrue(node.is_leaf())
        self.assertEqual(node.depth, 0)

    def test_none_is_a_valid_wrapped_state(self):
        node = TreeNode(None)
        self.assertIsNone(node.element)
        self.assertFalse(node.has_element)

    def test_falsy_elements_still_count_as_present(self):
        for value in (0, '', [], False):
            self.assertTrue(TreeNode(value).has_element)


class TestTreeBuilder(unittest.TestCase):
    """Test building trees from a children producer."""

    def setUp(self):
        self.document = sample_document()

    def test_root_wraps_original_element(self):
        tree = build_tree(self.document, named_children)
        self.assertIs(tree.root.element, self.document)
        self.assertTrue(tree.root.is_root())

    def test_builds_every_node_in_breadth_first_order(self):
        tree = build_tree(self.document, named_children)
        self.assertEqual(len(tree), 5)
        self.assertEqual(names(tree.elements()), ['root', 'a', 'b', 'a1', 'a2'])

    def test_structure_and_depths(self):
        tree = build_tree(self.document, named_children)
        a, b = tree.get_direct_children()
        self.assertEqual(names([a.element, b.element]), ['a', 'b'])
        self.assertEqual(names(child.element for child in a.children), ['a1', 'a2'])
        self.assertTrue(b.is_leaf())

        a1 = a.children[0]
        self.assertEqual(a1.depth, 2)
        self.assertIs(a1.parent, a)
        self.assertEqual(names(a1.path()), ['root', 'a', 'a1'])
        self.assertTrue(tree.root.is_ancestor_of(a1))
        self.assertTrue(a.is_ancestor_of(a1))
        self.assertFalse(b.is_ancestor_of(a1))
        self.assertFalse(a1.is_ancestor_of(a1))
        self.assertEqual(tree.height(), 2)

    def test_children_are_read_only(self):
        tree = build_tree(self.document, named_children)
        self.assertIsInstance(tree.root.children, tuple)

    def test_tree_build_shortcut(self):
        tree = Tree.build(self.document, named_children)
        self.assertEqual(len(tree), 5)

    def test_producer_called_once_per_node(self):
        producer = RecordingProducer(named_children)
        build_tree(self.document, producer)
        self.assertEqual(names(producer.calls), ['root', 'a', 'b', 'a1', 'a2'])

    def test_max_depth_bounds_expansion(self):
        self.assertEqual(len(build_tree(self.document, named_children, max_depth=0)), 1)
        self.assertEqual(len(build_tree(self.document, named_children, max_depth=1)), 3)

        producer = RecordingProducer(named_children)
        TreeBuilder(producer, max_depth=1).build(self.document)
        self.assertEqual(names(producer.calls), ['root'])

    def test_producer_returning_none_means_no_children(self):
        tree = build_tree('leaf', lambda element: None)
        self.assertEqual(len(tree), 1)

    def test_lazy_producer(self):
        def counting(n):
            if n < 3:
                yield n + 1

        tree = build_tree(0, counting)
        self.assertEqual(tree.elements(), [0, 1, 2, 3])

    def test_deep_chain_does_not_recurse(self):
        tree = build_tree(0, lambda n: [n + 1] if n < 5000 else [])
        self.assertEqual(len(tree), 5001)
        self.assertEqual(tree.height(), 5000)


class TestBuildFailures(unittest.TestCase):
    """Test how producer failures surface."""

    def setUp(self):
        self.document = sample_document()

    def test_producer_error_aborts_build(self):
        error = OSError("boom")
        producer = FailingProducer(named_children, lambda n: n.name == 'a', error)

        with self.assertRaises(BuildFailureError) as ctx:
            build_tree(self.document, producer)

        self.assertIs(ctx.exception.cause, error)
        self.assertIs(ctx.exception.__cause__, error)
        self.assertEqual(ctx.exception.element.name, 'a')
        self.assertIsNone(ctx.exception.stage)
        self.assertIn("boom", str(ctx.exception))

    def test_error_raised_while_iterating_lazy_children(self):
        def broken(n):
            yield n + 1
            raise ValueError("second child unreadable")

        with self.assertRaises(BuildFailureError) as ctx:
            build_tree(0, broken)
        self.assertIsInstance(ctx.exception.cause, ValueError)

    def test_none_root_is_rejected(self):
        with self.assertRaises(NilParameterError):
            build_tree(None, named_children)

    def test_none_child_is_rejected_when_expanded(self):
        with self.assertRaises(NilParameterError) as ctx:
            build_tree('root', lambda element: [None] if element == 'root' else [])
        self.assertEqual(ctx.exception.parameter, 'node.element')

    def test_none_child_beyond_max_depth_is_kept(self):
        tree = build_tree('root', lambda element: [None], max_depth=1)
        (child,) = tree.get_direct_children()
        self.assertFalse(child.has_element)

    def test_producer_nil_error_propagates_unwrapped(self):
        class Picky(ChildrenProducer):
            def get_children(self, element):
                raise NilParameterError("element.data")

        with self.assertRaises(NilParameterError) as ctx:
            build_tree('x', Picky())
        self.assertEqual(ctx.exception.parameter, 'element.data')

    def test_producer_treesift_error_is_wrapped(self):
        failure = TraversalFailureError(KeyError("child"))

        def nested(element):
            raise failure

        with self.assertRaises(BuildFailureError) as ctx:
            build_tree('x', nested)
        self.assertIs(ctx.exception.cause, failure)
        self.assertEqual(ctx.exception.element, 'x')

    def test_builder_requires_a_producer(self):
        with self.assertRaises(TypeError):
            TreeBuilder(None)
        with self.assertRaises(TypeError):
            TreeBuilder("not callable")


if __name__ == '__main__':
    unittest.main()
