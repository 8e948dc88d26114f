"""
renderer.py — Terminal rendering for Maze Chase.

Builds each frame as a single string of ANSI escape sequences: clear the
screen, print the maze, print the score / lives line, then overlay the
ghosts and the player at their cursor positions.
"""

import sys

from maze_chase.constants import (
    ANSI_BOLD, ANSI_CLEAR, ANSI_COLORS, ANSI_CURSOR_POS, ANSI_RESET,
)


def move_cursor(row: int, col: int, cell_width: int = 1) -> str:
    """Escape sequence placing the cursor on maze cell (row, col)."""
    return ANSI_CURSOR_POS.format(row=row + 1, col=col * cell_width + 1)


def clear_screen() -> str:
    return ANSI_CLEAR + move_cursor(0, 0)


def _paint(glyph: str, color: str, use_emoji: bool) -> str:
    # Emoji carry their own colours.
    if use_emoji:
        return glyph
    return f"{ANSI_COLORS[color]}{ANSI_BOLD}{glyph}{ANSI_RESET}"


def compose_frame(game) -> str:
    """Return the full frame for *game* as one string."""
    glyphs = game.glyphs
    width  = glyphs.cell_width
    parts  = [clear_screen(), game.maze.render(glyphs)]

    # ── HUD, one blank row below the maze ──
    hud_row = game.maze.rows + 1
    parts.append(move_cursor(hud_row, 0))
    parts.append(f"Score: {game.player.score}")
    parts.append(move_cursor(hud_row + 1, 0))
    parts.append(f"Lives: {game.player.lives}")

    # ── Entities ──
    for ghost in game.ghosts:
        r, c = ghost.position
        parts.append(move_cursor(r, c, width))
        parts.append(_paint(glyphs.ghost, "red", glyphs.use_emoji))

    player = game.player
    glyph = glyphs.player if player.alive else glyphs.death
    r, c = player.position
    parts.append(move_cursor(r, c, width))
    parts.append(_paint(glyph, "yellow", glyphs.use_emoji))

    # Park the cursor under the HUD so typed noise does not land on the maze.
    parts.append(move_cursor(hud_row + 2, 0))
    return "".join(parts)


def render(game, out=None):
    """Draw *game* to *out* (stdout by default)."""
    out = out if out is not None else sys.stdout
    out.write(compose_frame(game))
    out.flush()
