"""Index-addressed composite trees for compositree.

NodeArena stores every node of one or more trees in flat lists and refers to
nodes by integer index. A branch holds a list of child indices instead of
object references. This makes ownership explicit and lets the acyclicity
invariant be checked with a walk over parent indices.

Trees built in an arena can be materialised as Leaf/Branch objects with
to_tree() and then traversed with any visitor.
"""

import logging
from typing import Any, Iterator, List, Optional, Tuple

from ._common.config import TreeConfig, RemovePolicy, DEFAULT_TREE_CONFIG
from .core.node import Node, Leaf, Branch
from .errors import (
    ChildAlreadyAttachedError,
    ChildNotFoundError,
    CycleDetectedError,
)

logger = logging.getLogger(__name__)


class NodeArena:
    """Flat storage for composite tree nodes addressed by index.

    Leaves are stored with children set to None; branches with a list of
    child indices in insertion order.
    """

    def __init__(self, config: Optional[TreeConfig] = None):
        self.config = config or DEFAULT_TREE_CONFIG
        self._payloads: List[Any] = []
        self._children: List[Optional[List[int]]] = []
        self._parents: List[Optional[int]] = []

    def __len__(self) -> int:
        return len(self._payloads)

    def _new(self, payload: Any, children: Optional[List[int]]) -> int:
        self._payloads.append(payload)
        self._children.append(children)
        self._parents.append(None)
        return len(self._payloads) - 1

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._payloads):
            raise IndexError(f"No node at index {index}")

    def new_leaf(self, payload: Any) -> int:
        """Store a leaf and return its index."""
        return self._new(payload, None)

    def new_branch(self, payload: Any = None) -> int:
        """Store an empty branch and return its index."""
        return self._new(payload, [])

    def is_leaf(self, index: int) -> bool:
        self._check(index)
        return self._children[index] is None

    def payload(self, index: int) -> Any:
        self._check(index)
        return self._payloads[index]

    def parent(self, index: int) -> Optional[int]:
        self._check(index)
        return self._parents[index]

    def children(self, index: int) -> Tuple[int, ...]:
        """Child indices of a node in insertion order (empty for leaves)."""
        self._check(index)
        return tuple(self._children[index] or ())

    def _ancestors(self, index: int) -> Iterator[int]:
        current = self._parents[index]
        while current is not None:
            yield current
            current = self._parents[current]

    def add(self, parent: int, child: int) -> None:
        """Append child to parent's child list.

        Raises:
            IndexError: If either index is unknown
            TypeError: If parent is a leaf
            CycleDetectedError: If child is parent or one of its ancestors
            ChildAlreadyAttachedError: If child already has a parent
        """
        self._check(parent)
        self._check(child)

        siblings = self._children[parent]
        if siblings is None:
            raise TypeError(f"Node {parent} is a leaf and cannot hold children")

        if child == parent:
            raise CycleDetectedError(parent, child)

        if self.config.check_cycles and child in self._ancestors(parent):
            raise CycleDetectedError(parent, child)

        if self._parents[child] is not None:
            raise ChildAlreadyAttachedError(child, self._parents[child])

        siblings.append(child)
        self._parents[child] = parent
        logger.debug("Arena: added node %d to branch %d", child, parent)

    def remove(self, parent: int, child: int) -> None:
        """Remove child from parent's child list, keeping sibling order.

        Raises:
            ChildNotFoundError: If child is absent and the remove policy is RAISE
        """
        self._check(parent)
        siblings = self._children[parent] or []

        if child in siblings:
            siblings.remove(child)
            self._parents[child] = None
            logger.debug("Arena: removed node %d from branch %d", child, parent)
            return

        if self.config.remove_policy == RemovePolicy.RAISE:
            raise ChildNotFoundError(parent, child)

    def iter_pre_order(self, root: int) -> Iterator[Tuple[int, int]]:
        """Yield (index, depth) pairs in pre-order using an explicit stack."""
        self._check(root)
        stack: List[Tuple[int, int]] = [(root, 0)]

        while stack:
            index, depth = stack.pop()
            yield (index, depth)

            for child in reversed(self._children[index] or ()):
                stack.append((child, depth + 1))

    def to_tree(self, root: int) -> Node:
        """Materialise the subtree at root as Leaf/Branch objects.

        Branches in the result share this arena's TreeConfig. Children are
        attached deepest branch first, so no branch has a parent yet when it
        receives its children and each add is constant time.
        """
        order = [index for index, _ in self.iter_pre_order(root)]
        built = {}
        for index in order:
            if self._children[index] is None:
                built[index] = Leaf(self._payloads[index])
            else:
                built[index] = Branch(self._payloads[index], config=self.config)

        for index in reversed(order):
            for child in self._children[index] or ():
                built[index].add(built[child])

        return built[root]
