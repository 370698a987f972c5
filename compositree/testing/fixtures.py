"""Test fixtures for compositree consumers.

These helpers make it quick to build small trees and to observe exactly what
a traversal did, without writing a visitor per test.
"""

from typing import Any, List, Optional, Sequence, Tuple

from .._common.config import TreeConfig
from ..core.node import Node, Leaf, Branch
from ..core.visitor import Visitor


def build_tree(structure: Any, config: Optional[TreeConfig] = None) -> Node:
    """Build a composite tree from nested lists.

    Lists and tuples become branches, anything else becomes a leaf with that
    payload. A list whose first element is a dict is a labelled branch; the
    dict's "label" value becomes the branch payload.

    Example:
        >>> root = build_tree(["A", ["B", "C"]])
        >>> # Branch(Leaf A, Branch(Leaf B, Leaf C))
        >>> build_tree([{"label": "group"}, "x"]).payload
        'group'

    Args:
        structure: Nested list structure
        config: TreeConfig for every branch created

    Returns:
        Root node
    """
    if not isinstance(structure, (list, tuple)):
        return Leaf(structure)

    items: Sequence[Any] = structure
    payload = None
    if items and isinstance(items[0], dict):
        payload = items[0].get("label")
        items = items[1:]

    branch = Branch(payload, config=config)
    for item in items:
        branch.add(build_tree(item, config=config))
    return branch


class RecordingVisitor(Visitor):
    """Visitor that records every call as (kind, payload).

    Returns the same tuple from each operation so it can be used with
    collect_results as well.
    """

    def __init__(self):
        self.calls: List[Tuple[str, Any]] = []
        self.nodes: List[Node] = []

    def visit_leaf(self, leaf: Leaf) -> Tuple[str, Any]:
        record = ("leaf", leaf.payload)
        self.calls.append(record)
        self.nodes.append(leaf)
        return record

    def visit_branch(self, branch: Branch) -> Tuple[str, Any]:
        record = ("branch", branch.payload)
        self.calls.append(record)
        self.nodes.append(branch)
        return record

    @property
    def kinds(self) -> List[str]:
        return [kind for kind, _ in self.calls]
