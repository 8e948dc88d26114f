"""
engine.py — Movement rules for Maze Chase.

A single movement primitive shared by the player and every ghost, so
both obey identical wraparound and wall rules.  No I/O happens here.
"""

import random

from maze_chase.constants import DIR_DELTA, DIRECTIONS
from maze_chase.maze import Cell


def move(maze, direction, pos: tuple) -> tuple:
    """
    Return where an entity at *pos* ends up after one step *direction*.

    Steps off the grid wrap to the opposite edge on that axis.  If the
    (wrapped) target cell is a wall the entity stays at *pos*.  An
    unknown or None direction is a no-op.  *maze* is never modified.
    """
    if direction not in DIR_DELTA:
        return pos

    dr, dc = DIR_DELTA[direction]
    r, c = pos
    target = ((r + dr) % maze.rows, (c + dc) % maze.cols)

    if maze.cell_at(target) is Cell.WALL:
        return pos
    return target


def random_direction(rng=random) -> str:
    """Draw one of the four directions uniformly at random."""
    return rng.choice(DIRECTIONS)
