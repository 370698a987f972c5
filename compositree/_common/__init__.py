"""Common components shared across compositree.

This internal package contains configuration and cancellation primitives.
It should NOT be imported directly by users.

Important: This package must NEVER import from core to avoid
circular dependencies.
"""

from .cancellation import CancellationToken
from .config import (
    TraversalConfig,
    TraversalStrategy,
    TreeConfig,
    RemovePolicy,
    DEFAULT_TREE_CONFIG,
)

__all__ = [
    'CancellationToken',
    'TraversalConfig',
    'TraversalStrategy',
    'TreeConfig',
    'RemovePolicy',
    'DEFAULT_TREE_CONFIG',
]
