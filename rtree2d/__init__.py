"""Two-dimensional R-tree spatial index for axis-aligned rectangles, with a demonstration command."""

__version__ = "0.1.0"
__all__ = ["geometry", "tree", "cli"]