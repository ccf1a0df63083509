"""Shapes drawn on a character screen, and AVL-tree set and sequence operations."""

__version__ = "0.1.0"