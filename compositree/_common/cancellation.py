"""Cooperative cancellation for traversals."""

import logging

from ..errors import TraversalCancelledError

logger = logging.getLogger(__name__)


class CancellationToken:
    """Flag shared between a traversal and whoever may want to stop it.

    Traversers check the token before each descent. Cancelling is one-way;
    create a new token for the next traversal.
    """

    def __init__(self):
        self._cancelled = False

    def cancel(self) -> None:
        """Request that any traversal holding this token stop."""
        if not self._cancelled:
            logger.info("Traversal cancellation requested")
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def raise_if_cancelled(self) -> None:
        """Raise TraversalCancelledError if cancel() has been called."""
        if self._cancelled:
            raise TraversalCancelledError("Traversal was cancelled")

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self._cancelled})"
