import pytest

from maze_chase.maze import Maze


class FixedRng:
    """Random source whose choice() always returns the same direction."""

    def __init__(self, direction):
        self.direction = direction
        self.calls = 0

    def choice(self, seq):
        assert self.direction in seq
        self.calls += 1
        return self.direction


@pytest.fixture
def open_maze():
    """A 3x4 maze with no walls at all."""
    return Maze.from_lines(["    ", "    ", "    "])
