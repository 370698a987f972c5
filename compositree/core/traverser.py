"""Tree traversal strategies for compositree.

Traversers implement different algorithms for walking through a composite
tree. They only produce the visitation order; applying a visitor to each
node is the job of the ExecutionPlan.

Every traverser snapshots a branch's children at the moment the branch is
expanded and checks its cancellation token before each descent. None of
them detect cycles.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple

from .._common.cancellation import CancellationToken
from .node import Node


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    def __init__(self, cancel_token: Optional[CancellationToken] = None):
        """Initialize traverser.

        Args:
            cancel_token: Token checked before each descent
        """
        self.cancel_token = cancel_token

    @abstractmethod
    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None) -> Iterator[Tuple[Node, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Deepest level to yield (None = unlimited)

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _check_cancelled(self) -> None:
        if self.cancel_token is not None:
            self.cancel_token.raise_if_cancelled()

    def _should_explore(self, node: Node, depth: int, max_depth: Optional[int]) -> bool:
        """Check if children of node at given depth should be expanded."""
        if node.is_leaf():
            return False
        if max_depth is None:
            return True
        return depth < max_depth


class RecursivePreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal using the call stack.

    Visits parent before children and siblings left to right. Depth is
    limited by the interpreter's recursion limit; RecursionError is raised
    on trees deeper than that (or on cyclic structures).
    """

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None) -> Iterator[Tuple[Node, int]]:

        def _traverse_recursive(node: Node, depth: int) -> Iterator[Tuple[Node, int]]:
            self._check_cancelled()

            # Yield parent first (pre-order)
            yield (node, depth)

            if self._should_explore(node, depth, max_depth):
                for child in node.children:
                    yield from _traverse_recursive(child, depth + 1)

        yield from _traverse_recursive(root, 0)


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal using an explicit stack.

    Same visitation order as RecursivePreOrderTraverser but independent of
    the interpreter's recursion limit.
    """

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None) -> Iterator[Tuple[Node, int]]:
        stack: List[Tuple[Node, int]] = [(root, 0)]

        while stack:
            self._check_cancelled()
            node, depth = stack.pop()

            yield (node, depth)

            if self._should_explore(node, depth, max_depth):
                # Push in reverse so the first child is popped first
                for child in reversed(node.children):
                    stack.append((child, depth + 1))


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal.

    Visits children before parent. Good for aggregation where a branch's
    value depends on its subtree. Uses an explicit stack.
    """

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None) -> Iterator[Tuple[Node, int]]:
        # (node, depth, expanded)
        stack: List[Tuple[Node, int, bool]] = [(root, 0, False)]

        while stack:
            self._check_cancelled()
            node, depth, expanded = stack.pop()

            if expanded or not self._should_explore(node, depth, max_depth):
                yield (node, depth)
                continue

            stack.append((node, depth, True))
            for child in reversed(node.children):
                stack.append((child, depth + 1, False))


class RecursivePostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal using the call stack."""

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None) -> Iterator[Tuple[Node, int]]:

        def _traverse_recursive(node: Node, depth: int) -> Iterator[Tuple[Node, int]]:
            self._check_cancelled()

            # First traverse children
            if self._should_explore(node, depth, max_depth):
                for child in node.children:
                    yield from _traverse_recursive(child, depth + 1)

            # Then yield parent (post-order)
            yield (node, depth)

        yield from _traverse_recursive(root, 0)


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1.
    """

    def traverse(self,
                 root: Node,
                 max_depth: Optional[int] = None) -> Iterator[Tuple[Node, int]]:
        queue: Deque[Tuple[Node, int]] = deque([(root, 0)])

        while queue:
            self._check_cancelled()
            node, depth = queue.popleft()

            yield (node, depth)

            if self._should_explore(node, depth, max_depth):
                for child in node.children:
                    queue.append((child, depth + 1))


_ITERATIVE = {
    'pre_order': PreOrderTraverser,
    'post_order': PostOrderTraverser,
    'breadth_first': BreadthFirstTraverser,
}

_RECURSIVE = {
    'pre_order': RecursivePreOrderTraverser,
    'post_order': RecursivePostOrderTraverser,
}

_ALIASES = {
    'pre': 'pre_order',
    'preorder': 'pre_order',
    'dfs': 'pre_order',
    'dfs_pre': 'pre_order',
    'depth_first_pre': 'pre_order',
    'post': 'post_order',
    'postorder': 'post_order',
    'dfs_post': 'post_order',
    'depth_first_post': 'post_order',
    'bfs': 'breadth_first',
    'level': 'breadth_first',
    'level_order': 'breadth_first',
}


def normalize_strategy_name(strategy: str) -> str:
    """Map a strategy name or alias to its canonical name.

    Raises:
        ValueError: If strategy name is not recognized
    """
    name = strategy.lower()
    name = _ALIASES.get(name, name)
    if name not in _ITERATIVE:
        choices = sorted(set(_ITERATIVE) | set(_ALIASES))
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(choices)}"
        )
    return name


def create_traverser(strategy: str,
                     cancel_token: Optional[CancellationToken] = None,
                     recursive: bool = False) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (pre_order, post_order, bfs, ...)
        cancel_token: Token checked before each descent
        recursive: Use the call-stack variant instead of an explicit stack

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized or has no
            recursive form
    """
    name = normalize_strategy_name(strategy)

    if recursive:
        if name not in _RECURSIVE:
            raise ValueError(f"Traversal strategy {name} has no recursive form")
        return _RECURSIVE[name](cancel_token)

    return _ITERATIVE[name](cancel_token)
