"""
entities.py — Game entity classes for Maze Chase.
"""

import random

from maze_chase.constants import START_LIVES
from maze_chase.engine import move, random_direction


class Player:
    """
    The player-controlled entity.

    Attributes
    ----------
    position : tuple – (row, col) in the maze.
    lives    : int   – remaining lives; the game is lost at zero.
    score    : int   – dots collected so far.
    """

    def __init__(self, position: tuple, lives: int = START_LIVES, score: int = 0):
        self.position = position
        self.lives    = lives
        self.score    = score

    @property
    def alive(self) -> bool:
        """True while the player has lives left."""
        return self.lives > 0

    def move(self, maze, direction):
        """Step one cell in *direction*, obeying walls and wraparound."""
        self.position = move(maze, direction, self.position)

    def lose_life(self):
        """Drop one life.  Going below zero is not prevented here."""
        self.lives -= 1

    def collect_dot(self):
        """Add one point for an eaten dot."""
        self.score += 1

    def __repr__(self):
        return (f"Player(position={self.position}, lives={self.lives}, "
                f"score={self.score})")


class Ghost:
    """A ghost: a position that random-walks one step per tick."""

    def __init__(self, position: tuple):
        self.position = position

    def move_randomly(self, maze, rng=random):
        """Step one cell in a uniformly random direction."""
        self.position = move(maze, random_direction(rng), self.position)

    def __repr__(self):
        return f"Ghost(position={self.position})"
