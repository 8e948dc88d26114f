#!/usr/bin/env python3
"""
main.py — Entry point for Maze Chase.

Run from the repository root:
    python main.py                                  # maze.txt, config.json
    python main.py --maze my_maze.txt
    python main.py --config config_emoji.json

Arrow keys (or WASD) move, ESC or q quits.
"""

import argparse
import queue
import sys

from maze_chase.constants import (
    ANSI_BOLD, ANSI_RESET, DEFAULT_MAZE_FILE, LOST, QUIT, WON,
)
from maze_chase.errors import LoadError
from maze_chase.game import load_game
from maze_chase.renderer import render
from maze_chase.terminal import raw_mode, start_reader

OUTCOME_TEXT = {
    WON:  "CONGRATULATIONS!  Maze cleared!",
    LOST: "GAME OVER!  Caught by a ghost.",
    QUIT: "Goodbye!",
}


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Terminal maze chase: eat every dot, dodge the ghosts.")
    parser.add_argument(
        "--config", default=None,
        help="path to a JSON glyph config (default: ./config.json if present)")
    parser.add_argument(
        "--maze", default=DEFAULT_MAZE_FILE,
        help=f"path to the maze file (default: ./{DEFAULT_MAZE_FILE})")
    return parser.parse_args(argv)


def print_outcome(game):
    bar = "=" * 42
    print(f"\n  {ANSI_BOLD}{bar}")
    print(f"  {OUTCOME_TEXT[game.state]}")
    print(f"  Score: {game.player.score:<6} Lives: {game.player.lives}")
    print(f"  {bar}{ANSI_RESET}\n")


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        game = load_game(args.maze, args.config)
    except LoadError as exc:
        print(f"failed to load game: {exc}", file=sys.stderr)
        return 1

    inbox = queue.Queue()
    with raw_mode():
        start_reader(inbox)
        try:
            game.run(inbox, on_frame=lambda: render(game))
        except KeyboardInterrupt:
            game.state = QUIT

    print_outcome(game)
    return 0


if __name__ == "__main__":
    sys.exit(main())
