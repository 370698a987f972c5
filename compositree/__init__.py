"""compositree - Composite Trees with Visitor Dispatch.

compositree models tree-structured data as Leaf and Branch nodes under one
Node interface and runs Visitor objects over them with double dispatch.
New operations are new visitors; the node classes never change.

Typical use:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from compositree import Branch, Leaf, traverse
    from compositree.visitors import CollectPayloadsVisitor

    root = Branch()
    root.add(Leaf("A"))
    child = root.add(Branch())
    child.add(Leaf("B"))

    names = CollectPayloadsVisitor()
    traverse(root, names)      # names.payloads == ["A", "B"]
━━━━━━━━━━━━━━━━━━━━━━━━━━

Traversal is pre-order, depth-first and left to right unless configured
otherwise. Everything is synchronous and in memory.
"""

__version__ = "0.1.0"

from .core import (
    Node,
    Leaf,
    Branch,
    Visitor,
    DescendingVisitor,
    FunctionVisitor,
    dispatch,
)
from ._common import (
    CancellationToken,
    TraversalConfig,
    TraversalStrategy,
    TreeConfig,
    RemovePolicy,
)
from .errors import (
    CompositeTreeError,
    CycleDetectedError,
    ChildNotFoundError,
    ChildAlreadyAttachedError,
    TraversalCancelledError,
    ConfigurationError,
)
from .planning import ExecutionPlan
from .arena import NodeArena
from .api import (
    traverse,
    iter_visit,
    collect_results,
    collect_payloads,
    count_nodes,
    find_nodes,
    get_leaves,
    get_tree_stats,
)

__all__ = [
    "__version__",
    # Core
    "Node",
    "Leaf",
    "Branch",
    "Visitor",
    "DescendingVisitor",
    "FunctionVisitor",
    "dispatch",
    # Config
    "CancellationToken",
    "TraversalConfig",
    "TraversalStrategy",
    "TreeConfig",
    "RemovePolicy",
    # Errors
    "CompositeTreeError",
    "CycleDetectedError",
    "ChildNotFoundError",
    "ChildAlreadyAttachedError",
    "TraversalCancelledError",
    "ConfigurationError",
    # Planning
    "ExecutionPlan",
    "NodeArena",
    # API
    "traverse",
    "iter_visit",
    "collect_results",
    "collect_payloads",
    "count_nodes",
    "find_nodes",
    "get_leaves",
    "get_tree_stats",
]
