import queue

import pytest

from maze_chase.config import Glyphs
from maze_chase.constants import LOST, QUIT, RUNNING, WON
from maze_chase.errors import DotCountError, LoadError
from maze_chase.game import Game, load_game
from maze_chase.maze import Maze

from conftest import FixedRng


def make_game(lines, direction="up"):
    return Game.from_maze(Maze.from_lines(lines), rng=FixedRng(direction))


class FakeSleep:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


def test_from_maze_finds_spawns_and_dots():
    game = make_game(["#####", "#P.G#", "#.G.#", "#####"])
    assert game.player.position == (1, 1)
    assert [g.position for g in game.ghosts] == [(1, 3), (2, 2)]
    assert game.dots == 3
    assert game.state == RUNNING


def test_no_player_spawn_fails():
    with pytest.raises(LoadError, match="no player"):
        make_game(["#..G#"])


def test_two_player_spawns_fail():
    with pytest.raises(LoadError, match="2 player spawns"):
        make_game(["#P.P#"])


def test_ghosts_are_optional():
    game = make_game(["#P.#"])
    assert game.ghosts == []


def test_eat_last_dot_then_win():
    game = make_game(["#####", "#P.G#", "#####"])

    assert game.tick("right") == RUNNING
    assert game.player.position == (1, 2)
    assert game.player.score == 1
    assert game.dots == 0
    assert game.maze.find(".") == []

    assert game.tick(None) == WON


def test_ghost_catches_player_in_single_row():
    game = make_game(["#P G#.#"], direction="left")

    assert game.tick("right") == RUNNING
    assert game.ghosts[0].position == game.player.position == (0, 2)
    assert game.player.lives == 0

    assert game.tick(None) == LOST


def test_one_life_per_tick_however_many_ghosts():
    game = make_game(["#P G G#"])
    game.player.lives = 3
    for ghost in game.ghosts:
        ghost.position = game.player.position

    assert game.detect_collision()
    assert game.player.lives == 2


def test_no_collision_when_apart():
    game = make_game(["#P G#"])
    assert not game.detect_collision()
    assert game.player.lives == 1


def test_lost_stops_before_ghosts_move():
    game = make_game(["#P..G#"], direction="left")
    game.player.lives = 0

    assert game.tick("right") == LOST
    assert game.rng.calls == 0
    assert game.ghosts[0].position == (0, 4)
    # the input phase still ran, the scoring phase did not
    assert game.player.position == (0, 2)
    assert game.player.score == 0
    assert game.dots == 2


def test_won_stops_before_ghosts_move():
    game = make_game(["#P  G#"], direction="left")
    assert game.dots == 0

    assert game.tick(None) == WON
    assert game.rng.calls == 0
    assert game.ghosts[0].position == (0, 4)


def test_lost_takes_priority_over_won():
    game = make_game(["#P G#"])
    game.player.lives = 0
    assert game.tick(None) == LOST


@pytest.mark.parametrize("lines", [
    ["#####", "#P.G#", "#####"],
    ["P.G"],
    ["#P#", "#G#"],
])
def test_quit_changes_nothing(lines):
    game = make_game(lines, direction="left")
    before = ([row[:] for row in game.maze.grid], game.player.position,
              [g.position for g in game.ghosts], game.dots)

    assert game.tick("quit") == QUIT
    assert game.rng.calls == 0

    after = ([row[:] for row in game.maze.grid], game.player.position,
             [g.position for g in game.ghosts], game.dots)
    assert after == before


def test_finished_game_ignores_further_ticks():
    game = make_game(["#P G#"])
    game.tick("quit")
    assert game.tick("right") == QUIT
    assert game.player.position == (0, 1)


def test_unrecognised_event_is_noop():
    game = make_game(["#P.#"])
    game.tick("jump")
    assert game.player.position == (0, 1)
    assert game.state == RUNNING


def test_dot_count_is_monotonic():
    game = make_game(["P....#"])
    counts = [game.dots]
    for _ in range(6):
        game.tick("right")
        counts.append(game.dots)
        assert game.dots == len(game.maze.find("."))
    assert counts == [4, 3, 2, 1, 0, 0, 0]
    assert game.state == WON
    assert game.player.score == 4


def test_revisiting_eaten_cell_scores_nothing():
    game = make_game(["P..#"])
    game.tick("right")
    game.tick("left")
    game.tick("right")
    assert game.player.score == 1
    assert game.dots == 1


def test_poll_is_non_blocking():
    inbox = queue.Queue()
    assert Game.poll(inbox) is None
    inbox.put("up")
    inbox.put("down")
    assert Game.poll(inbox) == "up"
    assert Game.poll(inbox) == "down"


def test_run_until_won():
    game = make_game(["#####", "#P.G#", "#####"])
    inbox = queue.Queue()
    inbox.put("right")
    frames = []
    sleep = FakeSleep()

    state = game.run(inbox, on_frame=lambda: frames.append(game.dots),
                     tick_interval=0.05, sleep=sleep)

    assert state == WON
    assert frames == [1, 0]
    assert sleep.calls == [0.05]


def test_run_consumes_one_event_per_tick():
    game = make_game(["#P...#"])
    inbox = queue.Queue()
    for event in ("right", "right", "quit"):
        inbox.put(event)
    sleep = FakeSleep()

    assert game.run(inbox, sleep=sleep) == QUIT
    assert game.player.position == (0, 3)
    assert len(sleep.calls) == 2


def test_run_quit_without_frames():
    game = make_game(["#P.G#"])
    inbox = queue.Queue()
    inbox.put("quit")
    sleep = FakeSleep()

    assert game.run(inbox, sleep=sleep) == QUIT
    assert sleep.calls == []


def test_load_game_without_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "maze.txt").write_text("#P.G#\n", encoding="utf-8")

    game = load_game("maze.txt")
    assert game.glyphs == Glyphs()
    assert game.dots == 1


def test_load_game_picks_up_default_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "maze.txt").write_text("#P.G#\n", encoding="utf-8")
    (tmp_path / "config.json").write_text('{"ghost": "@"}', encoding="utf-8")

    game = load_game("maze.txt")
    assert game.glyphs.ghost == "@"


def test_load_game_explicit_config_must_exist(tmp_path):
    maze = tmp_path / "maze.txt"
    maze.write_text("#P.G#\n", encoding="utf-8")
    with pytest.raises(LoadError, match="cannot read config"):
        load_game(str(maze), str(tmp_path / "missing.json"))


def test_load_game_bad_maze(tmp_path):
    maze = tmp_path / "maze.txt"
    maze.write_text("#..G#\n", encoding="utf-8")
    with pytest.raises(LoadError):
        load_game(str(maze), None)


def test_out_of_sync_dot_counter_is_an_error():
    game = make_game(["#P.#"])
    game.dots = 5
    with pytest.raises(DotCountError, match="out of sync"):
        game.tick("right")


def test_can_continue():
    game = make_game(["#P.#"])
    assert game.can_continue()
    game.player.lives = 0
    assert not game.can_continue()
