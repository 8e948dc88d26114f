from maze_chase.constants import START_LIVES
from maze_chase.entities import Ghost, Player
from maze_chase.maze import Maze

from conftest import FixedRng


def test_player_defaults():
    player = Player((1, 1))
    assert player.lives == START_LIVES == 1
    assert player.score == 0
    assert player.alive


def test_player_move_uses_maze_rules():
    maze = Maze.from_lines(["#####", "#P. #", "#####"])
    player = Player((1, 1))
    player.move(maze, "right")
    assert player.position == (1, 2)
    player.move(maze, "up")
    assert player.position == (1, 2)


def test_lose_life_and_collect_dot():
    player = Player((0, 0))
    player.collect_dot()
    player.collect_dot()
    player.lose_life()
    assert player.score == 2
    assert player.lives == 0
    assert not player.alive


def test_lives_have_no_lower_bound():
    player = Player((0, 0), lives=0)
    player.lose_life()
    assert player.lives == -1


def test_ghost_moves_randomly():
    maze = Maze.from_lines(["     "])
    ghost = Ghost((0, 2))
    rng = FixedRng("right")
    ghost.move_randomly(maze, rng)
    ghost.move_randomly(maze, rng)
    assert ghost.position == (0, 4)
    assert rng.calls == 2


def test_ghost_blocked_by_wall():
    maze = Maze.from_lines(["#G#"])
    ghost = Ghost((0, 1))
    ghost.move_randomly(maze, FixedRng("left"))
    assert ghost.position == (0, 1)
