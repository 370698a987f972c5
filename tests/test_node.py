"""Unit tests for the composite tree structure.

Covers Branch mutation (add/remove), ownership and cycle rules, the remove
policies, and the guarantees a Leaf gives about never changing.
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from compositree import (
    Branch,
    Leaf,
    Node,
    TreeConfig,
    RemovePolicy,
    CycleDetectedError,
    ChildNotFoundError,
    ChildAlreadyAttachedError,
    CompositeTreeError,
)


class TestBranchAdd(unittest.TestCase):
    """Test appending children to a Branch."""

    def test_new_branch_is_empty(self):
        branch = Branch()
        self.assertEqual(len(branch), 0)
        self.assertEqual(branch.children, ())
        self.assertFalse(branch.is_leaf())
        self.assertIsNone(branch.parent)

    def test_add_preserves_insertion_order(self):
        branch = Branch()
        a, b, c = Leaf("a"), Leaf("b"), Leaf("c")
        branch.add(a)
        branch.add(b)
        branch.add(c)

        self.assertEqual(len(branch), 3)
        self.assertIs(branch.children[0], a)
        self.assertIs(branch.children[1], b)
        self.assertIs(branch.children[2], c)

    def test_add_returns_child_and_sets_parent(self):
        root = Branch()
        child = root.add(Branch("sub"))
        self.assertIsInstance(child, Branch)
        self.assertIs(child.parent, root)

    def test_extend(self):
        branch = Branch()
        leaves = [Leaf(i) for i in range(4)]
        branch.extend(leaves)
        self.assertEqual([leaf.payload for leaf in branch], [0, 1, 2, 3])

    def test_add_rejects_non_node(self):
        with self.assertRaises(TypeError):
            Branch().add("not a node")

    def test_add_self_raises(self):
        branch = Branch()
        with self.assertRaises(CycleDetectedError):
            branch.add(branch)
        self.assertEqual(len(branch), 0)

    def test_add_self_raises_even_without_cycle_checks(self):
        branch = Branch(config=TreeConfig(check_cycles=False))
        with self.assertRaises(CycleDetectedError):
            branch.add(branch)

    def test_add_ancestor_raises(self):
        root = Branch("root")
        middle = root.add(Branch("middle"))
        bottom = middle.add(Branch("bottom"))

        with self.assertRaises(CycleDetectedError) as ctx:
            bottom.add(root)

        self.assertIs(ctx.exception.parent, bottom)
        self.assertIs(ctx.exception.child, root)
        self.assertEqual(len(bottom), 0)

    def test_disabling_cycle_checks_allows_adding_ancestor(self):
        unchecked = TreeConfig(check_cycles=False)
        root = Branch("root", config=unchecked)
        middle = root.add(Branch("middle", config=unchecked))

        middle.add(root)
        self.assertIs(root.parent, middle)
        self.assertIs(middle.children[0], root)

        # Break the loop again; nothing should walk a cyclic structure
        middle.remove(root)
        self.assertIsNone(root.parent)

    def test_cycle_checks_on_by_default_reject_same_add(self):
        root = Branch("root")
        middle = root.add(Branch("middle"))

        with self.assertRaises(CycleDetectedError):
            middle.add(root)
        self.assertIsNone(root.parent)
        self.assertEqual(len(middle), 0)

    def test_cycle_error_is_value_error(self):
        branch = Branch()
        with self.assertRaises(ValueError):
            branch.add(branch)

    def test_child_cannot_have_two_owners(self):
        first, second = Branch("first"), Branch("second")
        shared = Leaf("shared")
        first.add(shared)

        with self.assertRaises(ChildAlreadyAttachedError) as ctx:
            second.add(shared)

        self.assertIs(ctx.exception.owner, first)
        self.assertEqual(len(second), 0)
        self.assertIs(shared.parent, first)

    def test_same_child_twice_rejected(self):
        branch = Branch()
        leaf = branch.add(Leaf("x"))
        with self.assertRaises(ChildAlreadyAttachedError):
            branch.add(leaf)
        self.assertEqual(len(branch), 1)

    def test_library_errors_share_base(self):
        branch = Branch()
        with self.assertRaises(CompositeTreeError):
            branch.add(branch)


class TestBranchRemove(unittest.TestCase):
    """Test removing children from a Branch."""

    def setUp(self):
        self.branch = Branch()
        self.a = self.branch.add(Leaf("a"))
        self.b = self.branch.add(Leaf("b"))
        self.c = self.branch.add(Leaf("c"))

    def test_remove_middle_keeps_order(self):
        self.branch.remove(self.b)
        self.assertEqual(self.branch.children, (self.a, self.c))
        self.assertIsNone(self.b.parent)

    def test_remove_absent_is_noop_by_default(self):
        before = self.branch.children
        self.branch.remove(Leaf("a"))  # equal payload, different node
        self.assertEqual(self.branch.children, before)
        for original, current in zip(before, self.branch.children):
            self.assertIs(original, current)

    def test_remove_is_idempotent(self):
        self.branch.remove(self.a)
        after_first = self.branch.children
        self.branch.remove(self.a)
        self.assertEqual(self.branch.children, after_first)

    def test_remove_absent_raises_under_raise_policy(self):
        strict = Branch(config=TreeConfig(remove_policy=RemovePolicy.RAISE))
        strict.add(Leaf("kept"))
        stranger = Leaf("stranger")

        with self.assertRaises(ChildNotFoundError) as ctx:
            strict.remove(stranger)

        self.assertIs(ctx.exception.child, stranger)
        self.assertIsInstance(ctx.exception, LookupError)
        self.assertEqual(len(strict), 1)

    def test_strict_preset(self):
        config = TreeConfig.strict()
        self.assertEqual(config.remove_policy, RemovePolicy.RAISE)
        self.assertTrue(config.check_cycles)

    def test_add_then_remove_restores_sequence(self):
        before = self.branch.children
        extra = self.branch.add(Branch("extra"))
        self.branch.remove(extra)
        self.assertEqual(self.branch.children, before)

    def test_removed_child_can_be_reattached(self):
        other = Branch("other")
        self.branch.remove(self.c)
        other.add(self.c)
        self.assertIs(self.c.parent, other)

    def test_remove_compares_identity(self):
        branch = Branch()
        first = branch.add(Leaf("same"))
        second = branch.add(Leaf("same"))

        branch.remove(second)

        self.assertEqual(len(branch), 1)
        self.assertIs(branch.children[0], first)

    def test_index_and_contains(self):
        self.assertEqual(self.branch.index(self.c), 2)
        self.assertIn(self.b, self.branch)
        self.assertNotIn(Leaf("b"), self.branch)
        with self.assertRaises(ChildNotFoundError):
            self.branch.index(Leaf("missing"))


class TestLeaf(unittest.TestCase):
    """Test Leaf immutability."""

    def test_payload_is_read_only(self):
        leaf = Leaf("fixed")
        with self.assertRaises(AttributeError):
            leaf.payload = "changed"
        self.assertEqual(leaf.payload, "fixed")

    def test_leaf_has_no_children_or_mutators(self):
        leaf = Leaf(1)
        self.assertTrue(leaf.is_leaf())
        self.assertEqual(leaf.children, ())
        self.assertFalse(hasattr(leaf, "add"))
        self.assertFalse(hasattr(leaf, "remove"))

    def test_leaf_unchanged_by_tree_operations(self):
        leaf = Leaf({"name": "A"})
        branch = Branch()
        branch.add(leaf)
        branch.remove(leaf)
        branch.add(leaf)

        self.assertEqual(leaf.payload, {"name": "A"})
        self.assertEqual(leaf.children, ())
        self.assertTrue(leaf.is_leaf())

    def test_node_is_abstract(self):
        with self.assertRaises(TypeError):
            Node()


class TestNavigation(unittest.TestCase):
    """Test parent links, depth and root lookup."""

    def test_depth_and_root(self):
        root = Branch("root")
        middle = root.add(Branch("middle"))
        leaf = middle.add(Leaf("leaf"))

        self.assertEqual(root.depth(), 0)
        self.assertEqual(middle.depth(), 1)
        self.assertEqual(leaf.depth(), 2)
        self.assertIs(leaf.root(), root)
        self.assertIs(root.root(), root)
        self.assertEqual(list(leaf.ancestors()), [middle, root])

    def test_children_snapshot_is_detached(self):
        branch = Branch()
        branch.add(Leaf(1))
        snapshot = branch.children
        branch.add(Leaf(2))
        self.assertEqual(len(snapshot), 1)
        self.assertEqual(len(branch.children), 2)

    def test_empty_branch_is_truthy(self):
        self.assertTrue(Branch())

    def test_repr(self):
        self.assertEqual(repr(Leaf("A")), "Leaf('A')")
        branch = Branch("g")
        branch.add(Leaf(1))
        self.assertEqual(repr(branch), "Branch('g', children=1)")
        self.assertEqual(repr(Branch()), "Branch(children=0)")


if __name__ == '__main__':
    unittest.main()
