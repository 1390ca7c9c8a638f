"""A terminal game of steering down a scrolling, winding tunnel."""

__version__ = "0.1.0"