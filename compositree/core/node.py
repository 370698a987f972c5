"""Composite tree nodes for compositree.

A tree is made of two node variants: Leaf, which holds a payload and nothing
else, and Branch, which owns an ordered sequence of child nodes. Both share
the Node interface so client code can treat single items and groups
uniformly.

Each node knows its owning branch. Ownership is exclusive, so the structure
is always a tree and never a DAG.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, List, Optional, Tuple, TYPE_CHECKING

from .._common.config import TreeConfig, RemovePolicy, DEFAULT_TREE_CONFIG
from ..errors import (
    ChildAlreadyAttachedError,
    ChildNotFoundError,
    CycleDetectedError,
)

if TYPE_CHECKING:
    from .visitor import Visitor

logger = logging.getLogger(__name__)


class Node(ABC):
    """Abstract base class for composite tree nodes.

    Subclasses implement accept() by calling the visitor operation that
    matches their own concrete type, which is what gives the visitor double
    dispatch.
    """

    def __init__(self):
        self._parent: Optional['Branch'] = None

    @abstractmethod
    def accept(self, visitor: 'Visitor') -> Any:
        """Dispatch to the visitor operation for this node's runtime type.

        Args:
            visitor: Visitor to call back into

        Returns:
            Whatever the visitor operation returns
        """
        pass

    @abstractmethod
    def is_leaf(self) -> bool:
        """Check if this node is a Leaf."""
        pass

    @property
    def children(self) -> Tuple['Node', ...]:
        """Snapshot of the child sequence. Always empty for leaves."""
        return ()

    @property
    def parent(self) -> Optional['Branch']:
        """Branch that owns this node, or None for a root."""
        return self._parent

    def ancestors(self) -> Iterator['Branch']:
        """Yield the owning branches from the immediate parent up to the root."""
        current = self._parent
        while current is not None:
            yield current
            current = current._parent

    def depth(self) -> int:
        """Number of ancestors (root = 0)."""
        return sum(1 for _ in self.ancestors())

    def root(self) -> 'Node':
        """Topmost node of the tree this node belongs to."""
        node = self
        for node in self.ancestors():
            pass
        return node


class Leaf(Node):
    """Terminal node holding a single payload.

    The payload is fixed at construction and a leaf never has children.
    """

    def __init__(self, payload: Any):
        super().__init__()
        self._payload = payload

    @property
    def payload(self) -> Any:
        return self._payload

    def accept(self, visitor: 'Visitor') -> Any:
        return visitor.visit_leaf(self)

    def is_leaf(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Leaf({self._payload!r})"


class Branch(Node):
    """Node owning an ordered sequence of children.

    Children keep insertion order. Mutation follows the TreeConfig given at
    construction: cycles are rejected on add() and remove() of an absent
    child either does nothing or raises.

    The child list is not locked. Callers that share a tree between threads
    must serialize add()/remove() against running traversals.
    """

    def __init__(self, payload: Any = None, config: Optional[TreeConfig] = None):
        """Initialize an empty branch.

        Args:
            payload: Optional label for the group (e.g. a name)
            config: Structural policies, defaults to DEFAULT_TREE_CONFIG
        """
        super().__init__()
        self._payload = payload
        self._children: List[Node] = []
        self._config = config or DEFAULT_TREE_CONFIG

    @property
    def payload(self) -> Any:
        return self._payload

    @property
    def config(self) -> TreeConfig:
        return self._config

    @property
    def children(self) -> Tuple[Node, ...]:
        return tuple(self._children)

    def accept(self, visitor: 'Visitor') -> Any:
        return visitor.visit_branch(self)

    def is_leaf(self) -> bool:
        return False

    def add(self, child: Node) -> Node:
        """Append a child to the end of the child sequence.

        Args:
            child: Leaf or Branch with no current owner

        Returns:
            The child, so calls can be chained

        Raises:
            TypeError: If child is not a Node
            CycleDetectedError: If child is this branch or one of its ancestors
            ChildAlreadyAttachedError: If child already belongs to a branch
        """
        if not isinstance(child, Node):
            raise TypeError(f"Branch children must be Node instances, got {type(child).__name__}")

        if child is self:
            raise CycleDetectedError(self, child)

        if self._config.check_cycles and not child.is_leaf():
            for ancestor in self.ancestors():
                if ancestor is child:
                    raise CycleDetectedError(self, child)

        if child._parent is not None:
            raise ChildAlreadyAttachedError(child, child._parent)

        self._children.append(child)
        child._parent = self
        logger.debug("Added %r to %r (now %d children)", child, self, len(self._children))
        return child

    def extend(self, children: Iterable[Node]) -> None:
        """Append several children in order."""
        for child in children:
            self.add(child)

    def remove(self, child: Node) -> None:
        """Remove the first occurrence of child, compared by identity.

        The relative order of the remaining children is unchanged.

        Raises:
            ChildNotFoundError: If child is absent and the remove policy is RAISE
        """
        for position, existing in enumerate(self._children):
            if existing is child:
                del self._children[position]
                child._parent = None
                logger.debug("Removed %r from %r", child, self)
                return

        if self._config.remove_policy == RemovePolicy.RAISE:
            raise ChildNotFoundError(self, child)
        logger.debug("Remove of absent child %r from %r ignored", child, self)

    def index(self, child: Node) -> int:
        """Position of child in the child sequence, compared by identity.

        Raises:
            ChildNotFoundError: If child is not held by this branch
        """
        for position, existing in enumerate(self._children):
            if existing is child:
                return position
        raise ChildNotFoundError(self, child)

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[Node]:
        return iter(tuple(self._children))

    def __contains__(self, node: object) -> bool:
        return any(existing is node for existing in self._children)

    def __bool__(self) -> bool:
        # An empty branch is still a node
        return True

    def __repr__(self) -> str:
        if self._payload is None:
            return f"Branch(children={len(self._children)})"
        return f"Branch({self._payload!r}, children={len(self._children)})"
