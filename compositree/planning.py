"""Execution planning for compositree.

The ExecutionPlan validates a TraversalConfig, selects the matching
traverser and coordinates running a visitor over every node it yields.
"""

import logging
from typing import Any, Dict, Iterator, List, Tuple

from ._common.config import TraversalConfig
from .core.node import Node
from .core.traverser import TreeTraverser, create_traverser
from .core.visitor import Visitor
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


class ExecutionPlan:
    """Validated execution plan for one kind of traversal.

    The plan is the bridge between the caller's TraversalConfig and the
    traverser that does the walking. Configuration problems are reported
    before any node is visited.

    A plan can be executed many times; counters are reset on each run.
    """

    def __init__(self, config: TraversalConfig):
        """Create and validate an execution plan.

        Args:
            config: Traversal configuration

        Raises:
            ConfigurationError: If the configuration is inconsistent
        """
        self.config = config

        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(config_errors)

        self.traverser = self._select_traverser()

        # Track execution state
        self.nodes_processed = 0
        self.errors_encountered: List[Tuple[Node, Exception]] = []

        logger.debug("Created execution plan: %s", self.get_summary())

    def _select_traverser(self) -> TreeTraverser:
        return create_traverser(
            self.config.strategy.value,
            cancel_token=self.config.cancel_token,
            recursive=self.config.recursive,
        )

    def _limit_reached(self) -> bool:
        max_nodes = self.config.max_nodes
        return max_nodes is not None and self.nodes_processed >= max_nodes

    def _handle_error(self, node: Node, error: Exception) -> None:
        """Handle an exception raised by a visitor operation.

        Args:
            node: Node being visited when the error occurred
            error: The exception that was raised
        """
        self.errors_encountered.append((node, error))

        # Call user's error handler if provided
        if self.config.on_error:
            self.config.on_error(node, error)

        # Raise if not skipping errors
        if not self.config.skip_errors:
            raise error

        logger.warning("Skipping %r after visitor error: %s", node, error)

    def execute(self, root: Node, visitor: Visitor) -> Iterator[Tuple[Node, Any]]:
        """Execute the traversal plan.

        Same as execute_with_depth without the depth column.
        """
        for node, _, result in self.execute_with_depth(root, visitor):
            yield (node, result)

    def execute_with_depth(self, root: Node,
                           visitor: Visitor) -> Iterator[Tuple[Node, int, Any]]:
        """Execute the traversal plan, keeping the depth reported by the traverser.

        Each node yielded by the traverser is dispatched to the visitor
        before the traverser is asked for the next one. Nodes whose visit
        failed under skip_errors are not yielded.

        Args:
            root: Root node to start traversal from
            visitor: Visitor applied to every node

        Yields:
            Tuples of (node, depth, visitor_result), depth relative to root

        Raises:
            TraversalCancelledError: If the cancel token fires mid-traversal
        """
        # Reset execution state
        self.nodes_processed = 0
        self.errors_encountered = []

        for node, depth in self.traverser.traverse(root, max_depth=self.config.max_depth):
            if self._limit_reached():
                logger.debug("Node limit %d reached, stopping", self.config.max_nodes)
                break

            self.nodes_processed += 1
            try:
                result = node.accept(visitor)
            except Exception as e:
                self._handle_error(node, e)
                continue

            yield (node, depth, result)

        logger.debug(
            "Traversal finished: %d nodes, %d errors",
            self.nodes_processed, len(self.errors_encountered),
        )

    def run(self, root: Node, visitor: Visitor) -> None:
        """Execute the plan to completion, discarding visitor results."""
        for _ in self.execute(root, visitor):
            pass

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Useful for debugging and logging.

        Returns:
            Dictionary with plan details
        """
        return {
            'strategy': self.config.strategy.value,
            'recursive': self.config.recursive,
            'max_depth': self.config.max_depth,
            'max_nodes': self.config.max_nodes,
            'skip_errors': self.config.skip_errors,
            'cancellable': self.config.cancel_token is not None,
            'traverser': self.traverser.__class__.__name__,
        }
