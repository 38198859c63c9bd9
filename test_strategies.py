"""
Tests for the move-selection strategies and players.
"""
import sys
from pathlib import Path

import pytest

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from hexreversi.game import Coordinate, HexReversiGame, PlayColor
from hexreversi.players import (
    AIPlayer,
    AvoidCorners,
    CaptureMostPieces,
    HumanPlayer,
    RandomStrategy,
    get_strategy,
)
from hexreversi.players.strategies import corner_neighbors, corners


class FakeGame:
    """Private game copy whose score depends only on the move played."""

    def __init__(self, scores):
        self.scores = scores
        self.last = None

    def move(self, q, r):
        self.last = Coordinate(q, r)

    def get_score(self, color):
        return self.scores[self.last]


class FakeView:
    def __init__(self, size, scores):
        self.size = size
        self.scores = scores

    def legal_moves(self):
        return list(self.scores)

    def get_board_size(self):
        return self.size

    def current_color(self):
        return PlayColor.BLACK

    def copy_game(self):
        return FakeGame(self.scores)


def test_corners():
    assert set(corners(3)) == {
        Coordinate(2, 0), Coordinate(0, 2), Coordinate(-2, 2),
        Coordinate(-2, 0), Coordinate(0, -2), Coordinate(2, -2),
    }
    for corner in corners(5):
        assert corner.on_board(5)
        assert sorted([abs(corner.q), abs(corner.r), abs(corner.s)]) == [0, 4, 4]


def test_corner_neighbors():
    risky = corner_neighbors(4)
    assert Coordinate(2, 0) in risky
    assert Coordinate(3, -1) in risky
    assert Coordinate(2, 1) in risky
    assert Coordinate(2, -1) not in risky
    assert Coordinate(1, -2) not in risky
    assert not risky & set(corners(4))
    # three on-board neighbors per corner, none shared
    assert len(risky) == 18


def test_capture_most_pieces_prefers_highest_score():
    view = FakeView(4, {Coordinate(2, 0): 10, Coordinate(1, -2): 5})
    assert CaptureMostPieces().choose_move(view) == Coordinate(2, 0)


def test_capture_most_pieces_on_real_game():
    game = HexReversiGame(3)
    game.move(-2, 1)
    game.move(2, -1)
    assert CaptureMostPieces().choose_move(game.read_only()) == Coordinate(1, 1)


def test_capture_most_pieces_ties_go_to_board_order():
    game = HexReversiGame(3)
    assert CaptureMostPieces().choose_move(game.read_only()) == Coordinate(-2, 1)


def test_avoid_corners_takes_corner():
    view = FakeView(4, {Coordinate(2, 0): 10, Coordinate(1, -2): 5, Coordinate(3, 0): 4})
    assert AvoidCorners().choose_move(view) == Coordinate(3, 0)


def test_avoid_corners_skips_corner_neighbors():
    view = FakeView(4, {Coordinate(2, 0): 10, Coordinate(1, -2): 5})
    assert AvoidCorners().choose_move(view) == Coordinate(1, -2)


def test_avoid_corners_falls_back_when_every_move_is_risky():
    view = FakeView(4, {Coordinate(2, 0): 3, Coordinate(3, -1): 7})
    assert AvoidCorners().choose_move(view) == Coordinate(3, -1)

    game = HexReversiGame(3)
    game.move(-2, 1)
    game.move(2, -1)
    assert AvoidCorners().choose_move(game.read_only()) == Coordinate(1, 1)


def test_strategies_do_not_touch_live_game():
    game = HexReversiGame(4)
    before = game.snapshot()
    for strategy in (CaptureMostPieces(), AvoidCorners(), RandomStrategy(1)):
        move = strategy.choose_move(game.read_only())
        assert move in game.legal_moves()
    assert game.snapshot() == before
    assert game.current_color is PlayColor.BLACK


def test_no_preference_without_moves():
    view = FakeView(3, {})
    assert CaptureMostPieces().choose_move(view) is None
    assert AvoidCorners().choose_move(view) is None
    assert RandomStrategy(0).choose_move(view) is None


def test_random_strategy_is_seedable():
    game = HexReversiGame(5)
    picks_a = [RandomStrategy(7).choose_move(game.read_only()) for _ in range(3)]
    picks_b = [RandomStrategy(7).choose_move(game.read_only()) for _ in range(3)]
    assert picks_a == picks_b


def test_get_strategy():
    assert isinstance(get_strategy("capture"), CaptureMostPieces)
    assert isinstance(get_strategy("corners"), AvoidCorners)
    assert isinstance(get_strategy("random", seed=3), RandomStrategy)
    with pytest.raises(ValueError):
        get_strategy("minimax")


def test_players():
    human = HumanPlayer()
    assert not human.is_ai
    assert human.color is None
    assert human.choose_move(HexReversiGame(3).read_only()) is None

    ai = AIPlayer(CaptureMostPieces())
    assert ai.is_ai
    assert ai.name == "capture"
    ai.color = PlayColor.WHITE
    assert ai.choose_move(HexReversiGame(3).read_only()) == Coordinate(-2, 1)
