"""CLI command handlers."""

from .transform import transform_tree

__all__ = ['transform_tree']
