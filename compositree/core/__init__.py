"""Core abstractions for compositree.

This module contains the node variants, the visitor interface and the
traversal strategies that the rest of the library is built on.
"""

from .node import Node, Leaf, Branch
from .visitor import Visitor, DescendingVisitor, FunctionVisitor, dispatch
from .traverser import (
    TreeTraverser,
    PreOrderTraverser,
    RecursivePreOrderTraverser,
    PostOrderTraverser,
    RecursivePostOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
)

__all__ = [
    "Node",
    "Leaf",
    "Branch",
    "Visitor",
    "DescendingVisitor",
    "FunctionVisitor",
    "dispatch",
    "TreeTraverser",
    "PreOrderTraverser",
    "RecursivePreOrderTraverser",
    "PostOrderTraverser",
    "RecursivePostOrderTraverser",
    "BreadthFirstTraverser",
    "create_traverser",
]
