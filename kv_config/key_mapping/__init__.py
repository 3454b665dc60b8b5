"""Prefix handling and nested document construction utilities."""

from .mapper import KeyMapper, normalize_prefix
from .nested import build_tree, flatten_tree


__all__ = ["KeyMapper", "build_tree", "flatten_tree", "normalize_prefix"]
