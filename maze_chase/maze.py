"""
maze.py — Maze grid and loader for Maze Chase.

A maze file is plain text, one row per line:

    #   wall
    .   dot
    P   player spawn   (exactly one)
    G   ghost spawn    (zero or more)

Any other character is empty floor.  Rows must all have the same width;
ragged mazes are rejected by the loader rather than truncated.
"""

from enum import Enum

from maze_chase.constants import (
    ASCII_GLYPHS, SYM_DOT, SYM_EMPTY, SYM_GHOST, SYM_PLAYER, SYM_WALL,
)
from maze_chase.errors import BoundsError, LoadError


class Cell(Enum):
    WALL         = "wall"
    DOT          = "dot"
    EMPTY        = "empty"
    PLAYER_SPAWN = "player_spawn"
    GHOST_SPAWN  = "ghost_spawn"


# Raw maze character → cell kind.  Anything missing here is EMPTY.
SYMBOL_TO_CELL = {
    SYM_WALL:   Cell.WALL,
    SYM_DOT:    Cell.DOT,
    SYM_PLAYER: Cell.PLAYER_SPAWN,
    SYM_GHOST:  Cell.GHOST_SPAWN,
}

# Cell kind → character written back into the grid.
CELL_TO_SYMBOL = {
    Cell.WALL:         SYM_WALL,
    Cell.DOT:          SYM_DOT,
    Cell.EMPTY:        SYM_EMPTY,
    Cell.PLAYER_SPAWN: SYM_PLAYER,
    Cell.GHOST_SPAWN:  SYM_GHOST,
}


def cell_for(symbol: str) -> Cell:
    """Map a raw maze character to its cell kind."""
    return SYMBOL_TO_CELL.get(symbol, Cell.EMPTY)


class Maze:
    """
    A rectangular grid of raw maze characters.

    Attributes
    ----------
    grid : list – one list of single-character strings per row.
                  grid[row][col] is the raw symbol at that position.
    """

    def __init__(self, grid: list):
        self.grid = [list(row) for row in grid]

    @classmethod
    def from_lines(cls, lines):
        """
        Build a Maze from an iterable of text lines.

        Each line becomes one row verbatim; only the line terminator is
        stripped, so leading and trailing spaces are kept as floor cells.

        Raises LoadError for an empty maze or rows of unequal width.
        """
        rows = [line.rstrip("\r\n") for line in lines]
        while rows and not rows[-1]:
            rows.pop()
        if not rows:
            raise LoadError("maze is empty")

        width = len(rows[0])
        for r, row in enumerate(rows):
            if len(row) != width:
                raise LoadError(
                    f"maze row {r} is {len(row)} cells wide, "
                    f"expected {width} (rows must all have the same width)")
        return cls(rows)

    @property
    def rows(self) -> int:
        """Number of rows in the grid."""
        return len(self.grid)

    @property
    def cols(self) -> int:
        """Width of every row."""
        return len(self.grid[0])

    def in_bounds(self, pos: tuple) -> bool:
        """True if *pos* lies inside the grid."""
        r, c = pos
        return 0 <= r < self.rows and 0 <= c < self.cols

    def _check(self, pos: tuple):
        if not self.in_bounds(pos):
            raise BoundsError(
                f"position {pos} is outside the {self.rows}x{self.cols} maze")

    def find(self, symbol: str) -> list:
        """Return every (row, col) holding *symbol*, in row-major order."""
        found = []
        for r, row in enumerate(self.grid):
            for c, ch in enumerate(row):
                if ch == symbol:
                    found.append((r, c))
        return found

    def count(self, cell: Cell) -> int:
        """Number of cells of kind *cell* in the grid."""
        return sum(1 for row in self.grid for ch in row if cell_for(ch) is cell)

    def cell_at(self, pos: tuple) -> Cell:
        """Kind of the cell at *pos*; BoundsError outside the grid."""
        self._check(pos)
        r, c = pos
        return cell_for(self.grid[r][c])

    def set_cell(self, pos: tuple, cell: Cell):
        """
        Overwrite the cell at *pos*.

        The wall layout is fixed: the only legal change is turning a DOT
        into EMPTY once it has been eaten.
        """
        self._check(pos)
        current = self.cell_at(pos)
        if current is not Cell.DOT or cell is not Cell.EMPTY:
            raise ValueError(
                f"cannot change {current.value} at {pos} to {cell.value}")
        r, c = pos
        self.grid[r][c] = CELL_TO_SYMBOL[cell]

    def render(self, glyphs=None) -> str:
        """
        Return the display form of the maze: walls and dots drawn with
        their glyphs, every other cell blank.  Players and ghosts are
        overlaid by the renderer, never baked in here.
        """
        if glyphs is None:
            wall, dot, space = (ASCII_GLYPHS["block"], ASCII_GLYPHS["dot"],
                                ASCII_GLYPHS["space"])
        else:
            wall, dot, space = glyphs.block, glyphs.dot, glyphs.space

        lines = []
        for row in self.grid:
            parts = []
            for ch in row:
                cell = cell_for(ch)
                if cell is Cell.WALL:
                    parts.append(wall)
                elif cell is Cell.DOT:
                    parts.append(dot)
                else:
                    parts.append(space)
            lines.append("".join(parts))
        return "\n".join(lines) + "\n"

    def __str__(self):
        return self.render()


def load_maze(path: str) -> Maze:
    """Read a maze file from *path*.  Any failure is raised as LoadError."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"cannot read maze '{path}': {exc}") from exc
    return Maze.from_lines(lines)
