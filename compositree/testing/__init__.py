"""Testing utilities for compositree consumers."""

from .fixtures import build_tree, RecordingVisitor

__all__ = ['build_tree', 'RecordingVisitor']
