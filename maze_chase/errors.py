"""
errors.py — Exception types for Maze Chase.
"""


class LoadError(ValueError):
    """The maze or the glyph config could not be read or is malformed."""


class BoundsError(IndexError):
    """A cell outside the maze grid was read or written."""


class DotCountError(RuntimeError):
    """The remaining-dot counter disagrees with the dots left in the maze."""
