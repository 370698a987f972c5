"""Visitor dispatch for compositree.

A Visitor supplies one operation per node variant. Calling node.accept(visitor)
routes to the operation for the node's runtime class, so new operations over
a tree are added by writing a new visitor rather than by touching Leaf or
Branch.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

from .node import Node, Leaf, Branch


class Visitor(ABC):
    """Abstract visitor over the closed variant set {Leaf, Branch}.

    Both operations are abstract, so a subclass that forgets one cannot be
    instantiated (TypeError at construction time).

    Operations may return None (side-effecting visitor) or a value
    (reducer-style visitor). When a traversal driver runs the visitor, it
    handles recursion and visit_branch should not descend. DescendingVisitor
    is the alternative where the visitor drives recursion itself.
    """

    @abstractmethod
    def visit_leaf(self, leaf: Leaf) -> Any:
        """Handle a Leaf node."""
        pass

    @abstractmethod
    def visit_branch(self, branch: Branch) -> Any:
        """Handle a Branch node."""
        pass


def dispatch(node: Node, visitor: Visitor) -> Any:
    """Route node to the visitor operation for its runtime type.

    Functional spelling of node.accept(visitor).
    """
    return node.accept(visitor)


class DescendingVisitor(Visitor):
    """Visitor that decides for itself how to recurse into branches.

    The default visit_branch dispatches every child in insertion order and
    returns the list of their results. Override visit_branch to do work
    before or after calling descend(), or to skip a subtree entirely.

    Do not hand a DescendingVisitor to a traversal driver unless its
    visit_branch stops descending; the driver already recurses and nodes
    would be visited twice.
    """

    def visit_branch(self, branch: Branch) -> Any:
        return self.descend(branch)

    def descend(self, branch: Branch) -> List[Any]:
        """Dispatch each child of branch and return their results."""
        return [child.accept(self) for child in branch.children]


class FunctionVisitor(Visitor):
    """Visitor built from plain callables.

    Allows ad-hoc visitors without subclassing.
    """

    def __init__(self,
                 on_leaf: Callable[[Leaf], Any],
                 on_branch: Optional[Callable[[Branch], Any]] = None):
        """Initialize with per-variant callables.

        Args:
            on_leaf: Function(leaf) -> Any
            on_branch: Function(branch) -> Any (default: returns None)
        """
        self.on_leaf = on_leaf
        self.on_branch = on_branch or (lambda branch: None)

    def visit_leaf(self, leaf: Leaf) -> Any:
        return self.on_leaf(leaf)

    def visit_branch(self, branch: Branch) -> Any:
        return self.on_branch(branch)
