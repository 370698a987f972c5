"""High-level API for compositree.

This module provides simple, functional interfaces for common traversal
operations. These functions wrap ExecutionPlan and TraversalConfig for ease
of use in simple cases.
"""

from dataclasses import fields
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

from ._common.cancellation import CancellationToken
from ._common.config import TraversalConfig, TraversalStrategy
from .core.node import Node, Leaf
from .core.traverser import normalize_strategy_name
from .core.visitor import Visitor, FunctionVisitor
from .planning import ExecutionPlan
from .visitors import CollectPayloadsVisitor, CountingVisitor


def traverse(
    root: Node,
    visitor: Visitor,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER,
    max_depth: Optional[int] = None,
    max_nodes: Optional[int] = None,
    cancel_token: Optional[CancellationToken] = None,
    recursive: bool = False,
    on_error: Optional[Callable[[Node, Exception], None]] = None,
    skip_errors: bool = False,
) -> None:
    """Run visitor over every node of the tree rooted at root.

    By default the walk is depth-first pre-order: each node is visited
    before any of its descendants and siblings are visited left to right in
    insertion order. Accumulating visitors keep their own results.

    Args:
        root: Starting node for traversal
        visitor: Visitor applied to every node
        strategy: Traversal order (pre_order, post_order, breadth_first)
        max_depth: Deepest level to visit (root = 0)
        max_nodes: Stop after this many visits
        cancel_token: Token checked before each descent
        recursive: Use call-stack recursion instead of an explicit stack
        on_error: Callback(node, exception) for visitor errors
        skip_errors: Continue past visitor errors instead of raising

    Example:
        >>> names = CollectPayloadsVisitor()
        >>> traverse(root, names)
        >>> names.payloads
        ['A', 'B', 'C']
    """
    plan = ExecutionPlan(_build_config(
        strategy=strategy,
        max_depth=max_depth,
        max_nodes=max_nodes,
        cancel_token=cancel_token,
        recursive=recursive,
        on_error=on_error,
        skip_errors=skip_errors,
    ))
    plan.run(root, visitor)


def iter_visit(root: Node, visitor: Visitor, **kwargs) -> Iterator[Tuple[Node, Any]]:
    """Traverse lazily, yielding each node with its visitor result.

    Options are validated when iter_visit is called, before the first node
    is requested.

    Args:
        root: Starting node for traversal
        visitor: Visitor applied to every node
        **kwargs: Traversal options (see traverse)

    Returns:
        Iterator of (node, visitor_result) tuples

    Raises:
        ConfigurationError: If the options are inconsistent
    """
    plan = ExecutionPlan(_build_config(**kwargs))
    return plan.execute(root, visitor)


def collect_results(root: Node, visitor: Visitor, **kwargs) -> List[Any]:
    """Return the visitor's result for every node, in visitation order.

    Example:
        >>> collect_results(root, TagVisitor())
        ['branch', 'leaf', 'branch', 'leaf', 'leaf']
    """
    return [result for _, result in iter_visit(root, visitor, **kwargs)]


def collect_payloads(root: Node, include_branches: bool = False, **kwargs) -> List[Any]:
    """Return payloads in visitation order (leaf payloads only by default)."""
    collector = CollectPayloadsVisitor(include_branches=include_branches)
    traverse(root, collector, **kwargs)
    return collector.payloads


def count_nodes(root: Node, **kwargs) -> int:
    """Count the nodes reached by a traversal.

    Args:
        root: Starting node for traversal
        **kwargs: Traversal options (see traverse)

    Returns:
        Number of nodes visited
    """
    counter = CountingVisitor()
    traverse(root, counter, **kwargs)
    return counter.total


def find_nodes(root: Node, predicate: Callable[[Node], bool], **kwargs) -> Iterator[Node]:
    """Lazily find nodes for which predicate returns True.

    Example:
        >>> list(find_nodes(root, lambda n: n.payload == "B"))
        [Leaf('B')]
    """
    matcher = FunctionVisitor(predicate, predicate)
    results = iter_visit(root, matcher, **kwargs)
    return (node for node, matched in results if matched)


def get_leaves(root: Node, **kwargs) -> List[Leaf]:
    """Return every leaf in visitation order."""
    return list(find_nodes(root, lambda node: node.is_leaf(), **kwargs))


def get_tree_stats(root: Node, **kwargs) -> Dict[str, Any]:
    """Get statistics about a tree.

    Args:
        root: Starting node for traversal
        **kwargs: Traversal options (see traverse)

    Returns:
        Dictionary with tree statistics
    """
    stats: Dict[str, Any] = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'branch_nodes': 0,
        'max_depth': 0,
        'depths': {},
    }

    # Depth comes from the traverser and is relative to root
    plan = ExecutionPlan(_build_config(**kwargs))
    noop = FunctionVisitor(lambda leaf: None)

    for node, depth, _ in plan.execute_with_depth(root, noop):
        stats['total_nodes'] += 1
        if node.is_leaf():
            stats['leaf_nodes'] += 1
        else:
            stats['branch_nodes'] += 1

        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['average_branching'] = (
        (stats['total_nodes'] - 1) / stats['branch_nodes']
        if stats['branch_nodes'] > 0 else 0
    )

    return stats


# Helper functions

def _parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Raises:
        ValueError: If the name is not a known strategy
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy
    return TraversalStrategy(normalize_strategy_name(str(strategy)))


def _build_config(**kwargs) -> TraversalConfig:
    """Build TraversalConfig from keyword arguments.

    Raises:
        TypeError: For unknown option names
    """
    config = TraversalConfig()

    if 'strategy' in kwargs:
        config.strategy = _parse_strategy(kwargs.pop('strategy'))

    known = {f.name for f in fields(config)}
    for key, value in kwargs.items():
        if key not in known:
            raise TypeError(f"Unknown traversal option: {key}")
        setattr(config, key, value)

    return config
