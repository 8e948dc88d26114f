"""
game.py — Game controller for Maze Chase.

Owns the maze, the player, the ghosts and the remaining-dot counter, and
advances them one tick at a time.  Rendering and input are injected by
the caller: run() takes a queue of decoded input events and an optional
*on_frame* callback that draws the current state.

Each tick runs these phases in a fixed order:

    1. input        – at most one queued event; "quit" ends at once.
    2. pre-check    – no lives → LOST, no dots → WON; stop here if so.
    3. ghosts       – every ghost takes one random step.
    4. collision    – first ghost on the player costs one life.
    5. scoring      – a dot under the player is eaten.
"""

import os
import queue
import random
import time

from maze_chase.config import Glyphs, load_config
from maze_chase.constants import (
    DEFAULT_CONFIG_FILE, DIR_DELTA, KEY_QUIT, LOST, QUIT, RUNNING,
    SYM_GHOST, SYM_PLAYER, TICK_INTERVAL, WON,
)
from maze_chase.entities import Ghost, Player
from maze_chase.errors import DotCountError, LoadError
from maze_chase.maze import Cell, load_maze


class Game:
    """
    Aggregate game state.

    Attributes
    ----------
    maze   : Maze
    player : Player
    ghosts : list[Ghost] – update / draw order only; all are equivalent.
    dots   : int         – Dot cells left in the maze.
    state  : str         – RUNNING | WON | LOST | QUIT.
    glyphs : Glyphs
    rng    : random source used for ghost moves (anything with .choice).
    """

    def __init__(self, maze, player, ghosts, glyphs=None, rng=None):
        self.maze   = maze
        self.player = player
        self.ghosts = list(ghosts)
        self.glyphs = glyphs if glyphs is not None else Glyphs()
        self.rng    = rng if rng is not None else random.Random()
        self.state  = RUNNING
        self.dots   = maze.count(Cell.DOT)
        self._check_dots()

    @classmethod
    def from_maze(cls, maze, glyphs=None, rng=None):
        """
        Scan *maze* for spawn markers and build a fresh game.

        Raises LoadError when the maze has no player spawn or more than
        one.  A maze without ghost spawns is accepted.
        """
        spawns = maze.find(SYM_PLAYER)
        if not spawns:
            raise LoadError(f"maze has no player spawn '{SYM_PLAYER}'")
        if len(spawns) > 1:
            raise LoadError(
                f"maze has {len(spawns)} player spawns, expected exactly one")

        player = Player(spawns[0])
        ghosts = [Ghost(pos) for pos in maze.find(SYM_GHOST)]
        return cls(maze, player, ghosts, glyphs=glyphs, rng=rng)

    # ── Phases ─────────────────────────────────────────────────────────

    def _check_dots(self):
        actual = self.maze.count(Cell.DOT)
        if self.dots != actual:
            raise DotCountError(
                f"dot counter {self.dots} out of sync with maze ({actual})")

    def can_continue(self) -> bool:
        """True while the player has lives and dots remain."""
        return self.player.lives > 0 and self.dots > 0

    def move_player(self, direction):
        """Apply one directional input to the player."""
        self.player.move(self.maze, direction)

    def move_ghosts(self):
        """Give every ghost one independent random step."""
        for ghost in self.ghosts:
            ghost.move_randomly(self.maze, self.rng)

    def detect_collision(self) -> bool:
        """Take one life if any ghost shares the player's cell."""
        for ghost in self.ghosts:
            if ghost.position == self.player.position:
                self.player.lose_life()
                return True
        return False

    def score(self) -> bool:
        """Eat the dot under the player, if there is one."""
        pos = self.player.position
        if self.maze.cell_at(pos) is not Cell.DOT:
            return False

        self.maze.set_cell(pos, Cell.EMPTY)
        self.dots -= 1
        self.player.collect_dot()
        self._check_dots()
        return True

    # ── Loop ───────────────────────────────────────────────────────────

    def tick(self, event=None) -> str:
        """
        Advance the game by one tick, applying *event* first.

        Returns the resulting state.  Once the state has left RUNNING
        further calls change nothing.
        """
        if self.state != RUNNING:
            return self.state

        if event == KEY_QUIT:
            self.state = QUIT
            return self.state
        if event in DIR_DELTA:
            self.move_player(event)

        if not self.can_continue():
            self.state = LOST if self.player.lives <= 0 else WON
            return self.state

        self.move_ghosts()
        self.detect_collision()
        self.score()
        return self.state

    @staticmethod
    def poll(inbox):
        """Return the next queued event, or None without waiting."""
        try:
            return inbox.get_nowait()
        except queue.Empty:
            return None

    def run(self, inbox, on_frame=None, tick_interval=TICK_INTERVAL,
            sleep=time.sleep) -> str:
        """
        Play until the game is won, lost or quit.

        Parameters
        ----------
        inbox    : queue.Queue of decoded input events.
        on_frame : callable or None
            Invoked once before the first tick and after every tick that
            leaves the game running (for drawing).

        Returns the final state.
        """
        if on_frame:
            on_frame()

        while True:
            if self.tick(self.poll(inbox)) != RUNNING:
                break
            if on_frame:
                on_frame()
            sleep(tick_interval)

        return self.state


def load_game(maze_path: str, config_path: str = None, rng=None) -> Game:
    """
    Load the glyph config and the maze, and build a Game.

    With no *config_path*, DEFAULT_CONFIG_FILE is used when it exists and
    the built-in ASCII glyphs otherwise.  An explicitly given config that
    cannot be read is an error.
    """
    if config_path is None and os.path.exists(DEFAULT_CONFIG_FILE):
        config_path = DEFAULT_CONFIG_FILE
    glyphs = load_config(config_path) if config_path is not None else Glyphs()

    maze = load_maze(maze_path)
    return Game.from_maze(maze, glyphs=glyphs, rng=rng)
