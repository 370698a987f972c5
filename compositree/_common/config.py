"""Configuration system for compositree.

This module defines how callers tune tree mutation policies and traversal
behaviour: which order to visit nodes in, how deep to go, how much work to
allow, and what to do when a visitor raises.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Callable, Any, List

from .cancellation import CancellationToken


class TraversalStrategy(Enum):
    """Order in which the driver visits nodes."""
    PRE_ORDER = "pre_order"           # Parent before children
    POST_ORDER = "post_order"         # Children before parent
    BREADTH_FIRST = "breadth_first"   # Level by level


class RemovePolicy(Enum):
    """What Branch.remove does with a child it does not hold."""
    IGNORE = "ignore"   # Idempotent no-op
    RAISE = "raise"     # ChildNotFoundError


@dataclass(frozen=True)
class TreeConfig:
    """Structural policies applied by a Branch when it is mutated.

    Attributes:
        remove_policy: Behaviour of remove() for an absent child
        check_cycles: Walk the ancestors on add() and reject cycles.
            Self-containment is always rejected regardless of this flag.
    """

    remove_policy: RemovePolicy = RemovePolicy.IGNORE
    check_cycles: bool = True

    @classmethod
    def strict(cls) -> 'TreeConfig':
        """Config that reports every structural misuse."""
        return cls(remove_policy=RemovePolicy.RAISE, check_cycles=True)


DEFAULT_TREE_CONFIG = TreeConfig()


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class TraversalConfig:
    """Complete configuration for one traversal.

    The ExecutionPlan validates this configuration before any node is
    visited.
    """

    # Traversal algorithm
    strategy: TraversalStrategy = TraversalStrategy.PRE_ORDER
    recursive: bool = False  # Call-stack recursion instead of explicit stack

    # Limits
    max_depth: Optional[int] = None   # Deepest level to visit (root = 0)
    max_nodes: Optional[int] = None   # Stop after this many visits

    # Cancellation
    cancel_token: Optional[CancellationToken] = None

    # Error handling
    on_error: Optional[Callable[[Any, Exception], None]] = None
    skip_errors: bool = False  # Fail fast unless told otherwise

    @classmethod
    def bounded(cls, max_depth: int) -> 'TraversalConfig':
        """Create config that stops descending below max_depth.

        Args:
            max_depth: Deepest level to visit (0 = root only)

        Returns:
            TraversalConfig for a depth-limited pre-order walk
        """
        return cls(max_depth=max_depth)

    @classmethod
    def deep_tree(cls) -> 'TraversalConfig':
        """Create config for trees deeper than the interpreter stack."""
        return cls(strategy=TraversalStrategy.PRE_ORDER, recursive=False)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"unknown strategy {self.strategy!r}")

        if self.recursive and self.strategy == TraversalStrategy.BREADTH_FIRST:
            errors.append("breadth_first traversal has no recursive form")

        if self.max_depth is not None:
            if not _is_int(self.max_depth):
                errors.append(f"max_depth must be an integer, got {self.max_depth!r}")
            elif self.max_depth < 0:
                errors.append("max_depth cannot be negative")

        if self.max_nodes is not None:
            if not _is_int(self.max_nodes):
                errors.append(f"max_nodes must be an integer, got {self.max_nodes!r}")
            elif self.max_nodes <= 0:
                errors.append("max_nodes must be positive")

        if self.on_error is not None and not callable(self.on_error):
            errors.append("on_error must be callable")

        return errors
