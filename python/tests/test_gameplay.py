"""Replaying moves through the game engine."""

from __future__ import annotations

from backend.engine.gameplay import GamePlay
from backend.engine.gridloader import GridLoader
from backend.models.grid import Direction, Position


def test_move_tracks_position_and_steps() -> None:
    game = GamePlay(GridLoader.parse(["S..", "0.F"]))

    assert game.move(Direction.RIGHT)
    assert game.state.position == Position(0, 2)
    assert (game.state.moves, game.state.steps) == (1, 2)
    assert not game.is_won

    assert game.move(Direction.DOWN)
    assert game.is_won
    assert game.state.steps == 3
    assert game.state.history == [Position(0, 0), Position(0, 2), Position(1, 2)]


def test_blocked_move_leaves_state_untouched() -> None:
    game = GamePlay(GridLoader.parse(["S..", "0.F"]))

    assert not game.move(Direction.DOWN)
    assert game.state.position == Position(0, 0)
    assert game.state.moves == 0


def test_no_moves_after_finish() -> None:
    game = GamePlay(GridLoader.parse(["S.F."]))

    assert game.replay([Direction.RIGHT])
    assert game.is_won
    assert not game.move(Direction.LEFT)


def test_replay_stops_at_first_invalid_move() -> None:
    game = GamePlay(GridLoader.parse(["S..", "0.F"]))

    assert not game.replay([Direction.RIGHT, Direction.UP, Direction.DOWN])
    assert game.state.position == Position(0, 2)
