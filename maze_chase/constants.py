"""
constants.py — Shared constants for Maze Chase.

ANSI escape codes, maze symbols, directional data, glyph sets and timing
values live here so every other module can import them from a single
authoritative source.
"""

# ═══════════════════════════════════════════════════════════════════════════
#  ANSI ESCAPE CODES
# ═══════════════════════════════════════════════════════════════════════════

ANSI_RESET = "\033[0m"
ANSI_BOLD  = "\033[1m"

ANSI_CLEAR       = "\033[2J"
ANSI_CURSOR_POS  = "\033[{row};{col}f"    # 1-based row / column
ANSI_HIDE_CURSOR = "\033[?25l"
ANSI_SHOW_CURSOR = "\033[?25h"

ANSI_COLORS = {
    "red":    "\033[91m",
    "yellow": "\033[93m",
}

# ═══════════════════════════════════════════════════════════════════════════
#  MAZE SYMBOLS  (raw characters in a maze file)
# ═══════════════════════════════════════════════════════════════════════════

SYM_WALL   = "#"
SYM_DOT    = "."
SYM_PLAYER = "P"
SYM_GHOST  = "G"
SYM_EMPTY  = " "

# ═══════════════════════════════════════════════════════════════════════════
#  DIRECTIONAL DATA
# ═══════════════════════════════════════════════════════════════════════════

# Row / column deltas for each compass direction.
DIR_DELTA = {
    "up":    (-1,  0),
    "down":  ( 1,  0),
    "left":  ( 0, -1),
    "right": ( 0,  1),
}

# Draw order for ghosts' random walk.
DIRECTIONS = ("up", "down", "right", "left")

# Input event that ends the session.
KEY_QUIT = "quit"

# ═══════════════════════════════════════════════════════════════════════════
#  GLYPH SETS  (keys match the JSON config file)
# ═══════════════════════════════════════════════════════════════════════════

ASCII_GLYPHS = {
    "player": "P",
    "ghost":  "G",
    "block":  "#",
    "dot":    ".",
    "pill":   "X",
    "death":  "X",
    "space":  " ",
}

EMOJI_GLYPHS = {
    "player": "\U0001F600",     # grinning face
    "ghost":  "\U0001F47B",     # ghost
    "block":  "\U0001F9F1",     # brick
    "dot":    "\U0001F538",     # small orange diamond
    "pill":   "\U0001F48A",     # pill
    "death":  "\U0001F480",     # skull
    "space":  "  ",
}

# ═══════════════════════════════════════════════════════════════════════════
#  GAME RULES & TIMING
# ═══════════════════════════════════════════════════════════════════════════

START_LIVES = 1

# Seconds between two ticks of the game loop.
TICK_INTERVAL = 0.2

# Game states.
RUNNING = "running"
WON     = "won"
LOST    = "lost"
QUIT    = "quit"

DEFAULT_MAZE_FILE   = "maze.txt"
DEFAULT_CONFIG_FILE = "config.json"
