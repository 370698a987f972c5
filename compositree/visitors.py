"""Stock visitors for compositree.

These visitors are meant to be run by a traversal driver (see api.traverse),
which handles recursion. Each one keeps its accumulated result on the
instance; a fresh visitor should be used per traversal.

RenderVisitor is the exception: it is a DescendingVisitor and walks the tree
itself when called through node.accept().
"""

from typing import Any, Callable, List, Optional

from .core.node import Leaf, Branch
from .core.visitor import Visitor, DescendingVisitor


class CollectPayloadsVisitor(Visitor):
    """Collects payloads in visitation order.

    Only leaf payloads are collected unless include_branches is set.
    """

    def __init__(self, include_branches: bool = False):
        self.include_branches = include_branches
        self.payloads: List[Any] = []

    def visit_leaf(self, leaf: Leaf) -> Any:
        self.payloads.append(leaf.payload)
        return leaf.payload

    def visit_branch(self, branch: Branch) -> Any:
        if self.include_branches:
            self.payloads.append(branch.payload)
        return branch.payload


class TagVisitor(Visitor):
    """Returns the variant tag of each node and records the sequence."""

    LEAF = "leaf"
    BRANCH = "branch"

    def __init__(self):
        self.tags: List[str] = []

    def visit_leaf(self, leaf: Leaf) -> str:
        self.tags.append(self.LEAF)
        return self.LEAF

    def visit_branch(self, branch: Branch) -> str:
        self.tags.append(self.BRANCH)
        return self.BRANCH


class CountingVisitor(Visitor):
    """Counts leaves and branches."""

    def __init__(self):
        self.leaves = 0
        self.branches = 0

    @property
    def total(self) -> int:
        return self.leaves + self.branches

    def visit_leaf(self, leaf: Leaf) -> None:
        self.leaves += 1

    def visit_branch(self, branch: Branch) -> None:
        self.branches += 1


class ReducingVisitor(Visitor):
    """Folds leaf payloads into a single value.

    Example:
        >>> total_area = ReducingVisitor(lambda acc, shape: acc + shape.area(), 0.0)
        >>> traverse(drawing, total_area)
        >>> total_area.result
    """

    def __init__(self, func: Callable[[Any, Any], Any], initial: Any,
                 key: Optional[Callable[[Any], Any]] = None):
        """Initialize with a fold function.

        Args:
            func: Function(accumulator, value) -> new accumulator
            initial: Starting accumulator value
            key: Optional function mapping a leaf payload to the folded value
        """
        self.func = func
        self.key = key
        self.result = initial

    def visit_leaf(self, leaf: Leaf) -> Any:
        value = self.key(leaf.payload) if self.key else leaf.payload
        self.result = self.func(self.result, value)
        return self.result

    def visit_branch(self, branch: Branch) -> Any:
        return self.result


class RenderVisitor(DescendingVisitor):
    """Renders a tree as an indented outline.

    Each node contributes one line; children are indented one level below
    their branch. Call root.accept(renderer) directly rather than through a
    traversal driver, then read renderer.lines or str(renderer).
    """

    def __init__(self, indent: str = "  ",
                 label: Optional[Callable[[Any], str]] = None):
        """Initialize renderer.

        Args:
            indent: String repeated once per level
            label: Function(node) -> str (default: str of payload)
        """
        self.indent = indent
        self.label = label or self._default_label
        self.lines: List[str] = []
        self._level = 0

    @staticmethod
    def _default_label(node) -> str:
        if node.is_leaf():
            return str(node.payload)
        return str(node.payload) if node.payload is not None else "+"

    def visit_leaf(self, leaf: Leaf) -> None:
        self.lines.append(f"{self.indent * self._level}{self.label(leaf)}")

    def visit_branch(self, branch: Branch) -> None:
        self.lines.append(f"{self.indent * self._level}{self.label(branch)}")
        self._level += 1
        try:
            self.descend(branch)
        finally:
            self._level -= 1

    def __str__(self) -> str:
        return "\n".join(self.lines)
