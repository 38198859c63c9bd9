"""
Tests for the textual view and the turn controller.
"""
import io
import sys
from pathlib import Path

import pytest

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from hexreversi.controller import Controller, GameRunner, parse_command, seat_players
from hexreversi.game import CellState, Coordinate, HexReversiGame, MoveResult, PlayColor
from hexreversi.players import AIPlayer, AvoidCorners, CaptureMostPieces, HumanPlayer, RandomStrategy
from hexreversi.view import TextualView

INITIAL_3 = (
    "  _ _ _\n"
    " _ X O _\n"
    "_ O _ X _\n"
    " _ X O _\n"
    "  _ _ _"
)


def test_textual_view_initial_board():
    view = TextualView(HexReversiGame(3).read_only())
    assert str(view) == INITIAL_3


def test_textual_view_after_move():
    game = HexReversiGame(3)
    game.move(2, -1)
    lines = str(TextualView(game.read_only())).splitlines()
    assert lines[1] == " _ X X X"
    assert lines[0] == "  _ _ _"


def test_textual_view_sizes():
    text = str(TextualView(HexReversiGame(5).read_only()))
    lines = text.splitlines()
    assert len(lines) == 9
    assert [len(line.split()) for line in lines] == [5, 6, 7, 8, 9, 8, 7, 6, 5]
    assert text.count("X") == 3
    assert text.count("O") == 3
    assert not any(line.endswith(" ") for line in lines)


def test_textual_view_render():
    out = io.StringIO()
    TextualView(HexReversiGame(3).read_only()).render(out)
    assert out.getvalue() == INITIAL_3 + "\n"


def test_textual_view_requires_model():
    with pytest.raises(ValueError):
        TextualView(None)


def test_parse_command():
    assert parse_command("2 -1") == Coordinate(2, -1)
    assert parse_command(" -1,2 ") == Coordinate(-1, 2)
    assert parse_command("2") is None
    assert parse_command("a b") is None


def seated(player, color):
    player.color = color
    return player


def test_controller_redraws_on_update():
    game = HexReversiGame(3)
    out = io.StringIO()
    Controller(game, seated(HumanPlayer(), PlayColor.BLACK), out)
    game.start_game()
    assert out.getvalue() == INITIAL_3 + "\n"


def test_controller_move_and_errors():
    game = HexReversiGame(3)
    out = io.StringIO()
    black = Controller(game, seated(HumanPlayer(), PlayColor.BLACK), out)
    white = Controller(game, seated(HumanPlayer(), PlayColor.WHITE), io.StringIO(), draw=False)

    assert white.player_move(Coordinate(2, -1)) is None
    assert "Not your turn." in white.out.getvalue()

    assert black.player_move(Coordinate(2, 0)) is None
    assert "INCORRECT MOVE: (2, 0) IS NOT VALID" in out.getvalue()
    assert black.player_move(Coordinate(9, 9)) is None
    assert black.player_move(None) is None
    assert "you are not selecting a hexagon!" in out.getvalue()

    assert black.player_move(Coordinate(2, -1)) is MoveResult.PLACED
    assert game.current_color is PlayColor.WHITE
    assert white.player_pass()
    assert game.current_color is PlayColor.BLACK


def test_controller_stops_after_game_over():
    game = HexReversiGame(3)
    out = io.StringIO()
    black = Controller(game, seated(HumanPlayer(), PlayColor.BLACK), out)
    game.start_game()
    game.pass_turn()
    game.pass_turn()
    assert "GAME IS OVER!" in out.getvalue()
    assert not black.player_pass()
    assert black.player_move(Coordinate(2, -1)) is None
    assert game.consecutive_passes == 2


def white_without_moves():
    """White to move with no capture anywhere while Black can still play (0, 0)."""
    game = HexReversiGame(3)
    for coord in game.board.coordinates():
        game.board.set(coord, CellState.EMPTY)
    game.board.set(Coordinate(2, 0), CellState.BLACK)
    game.board.set(Coordinate(1, 0), CellState.WHITE)
    game.start_game()
    game.current_color = PlayColor.WHITE
    return game


def test_controller_reports_forced_pass():
    game = white_without_moves()
    assert game.consecutive_passes == 0
    assert not game.is_game_over()

    out = io.StringIO()
    white = Controller(game, seated(HumanPlayer(), PlayColor.WHITE), out, draw=False)
    assert white.player_move(Coordinate(-1, 1)) is MoveResult.FORCED_PASS
    assert "White has no legal moves and passes." in out.getvalue()
    assert "GAME IS OVER!" not in out.getvalue()
    assert game.current_color is PlayColor.BLACK
    assert game.consecutive_passes == 1
    assert game.get_cell(-1, 1) == CellState.EMPTY
    assert not game.is_game_over()
    assert game.legal_moves() == [Coordinate(0, 0)]


def test_runner_between_strategies():
    game = HexReversiGame(4)
    out = io.StringIO()
    black = AIPlayer(CaptureMostPieces())
    white = AIPlayer(AvoidCorners())
    winner = GameRunner(game, black, white, out=out).play()

    assert game.is_game_over()
    black_score = game.get_score(PlayColor.BLACK)
    white_score = game.get_score(PlayColor.WHITE)
    assert f"Final score - Black: {black_score}, White: {white_score}" in out.getvalue()
    if black_score == white_score:
        assert winner is None
    else:
        assert winner is (PlayColor.BLACK if black_score > white_score else PlayColor.WHITE)


def test_runner_with_scripted_humans():
    commands = iter(["2 -1", "nonsense", "pass", "pass"])
    out = io.StringIO()
    game = HexReversiGame(3)
    winner = GameRunner(game, HumanPlayer("a"), HumanPlayer("b"), out=out,
                        read_input=lambda prompt: next(commands)).play()
    assert winner is PlayColor.BLACK
    assert "Could not read that move." in out.getvalue()
    assert "Final score - Black: 5, White: 2" in out.getvalue()


def test_runner_quit():
    game = HexReversiGame(3)
    winner = GameRunner(game, HumanPlayer(), HumanPlayer(), out=io.StringIO(),
                        read_input=lambda prompt: "quit").play()
    assert winner is None
    assert not game.is_game_over()


def test_seating_fills_the_missing_color():
    black = seated(HumanPlayer("a"), PlayColor.BLACK)
    white = AIPlayer(RandomStrategy(0))
    seat_players(black, white)
    assert white.color is PlayColor.WHITE

    first = HumanPlayer("a")
    second = seated(HumanPlayer("b"), PlayColor.BLACK)
    seat_players(first, second)
    assert first.color is PlayColor.WHITE

    with pytest.raises(ValueError):
        seat_players(seated(HumanPlayer(), PlayColor.WHITE), seated(HumanPlayer(), PlayColor.WHITE))


def test_runner_with_one_seated_player():
    black = seated(AIPlayer(CaptureMostPieces()), PlayColor.BLACK)
    white = AIPlayer(RandomStrategy(0))
    game = HexReversiGame(3)
    GameRunner(game, black, white, out=io.StringIO()).play()
    assert white.color is PlayColor.WHITE
    assert game.is_game_over()
