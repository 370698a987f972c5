"""Exception hierarchy for compositree.

Every failure raised by the library derives from CompositeTreeError so callers
can catch library errors in one place. Where a standard exception already
describes the situation, the library error also inherits from it.
"""

from typing import Any


class CompositeTreeError(Exception):
    """Base class for all compositree errors."""
    pass


class CycleDetectedError(CompositeTreeError, ValueError):
    """Raised when an add would make a branch contain itself."""

    def __init__(self, parent: Any, child: Any):
        self.parent = parent
        self.child = child
        super().__init__(
            f"Adding {child!r} to {parent!r} would create a cycle"
        )


class ChildNotFoundError(CompositeTreeError, LookupError):
    """Raised by remove() under RemovePolicy.RAISE when the child is absent."""

    def __init__(self, parent: Any, child: Any):
        self.parent = parent
        self.child = child
        super().__init__(f"{child!r} is not a child of {parent!r}")


class ChildAlreadyAttachedError(CompositeTreeError, ValueError):
    """Raised when a node that already has an owner is added to a branch."""

    def __init__(self, child: Any, owner: Any):
        self.child = child
        self.owner = owner
        super().__init__(f"{child!r} is already a child of {owner!r}")


class TraversalCancelledError(CompositeTreeError):
    """Raised when a traversal observes a cancelled CancellationToken."""
    pass


class ConfigurationError(CompositeTreeError, ValueError):
    """Raised when a TraversalConfig fails validation."""

    def __init__(self, problems):
        self.problems = list(problems)
        super().__init__(f"Invalid configuration: {'; '.join(self.problems)}")
