"""
Turn orchestration between two players and a game.
"""
from typing import Callable, Dict, Optional, TextIO
import logging
import sys

from ..errors import HexReversiError
from ..game import Coordinate, GameStatus, HexReversiGame, MoveResult, PlayColor
from ..players import Player
from ..view import TextualView

logger = logging.getLogger(__name__)


class Controller:
    """
    Connects one player to the game. Listens for changes, redraws the board
    and turns rejected input into messages instead of exceptions.
    """

    def __init__(self, model: HexReversiGame, player: Player, out: Optional[TextIO] = None,
                 draw: bool = True):
        self.model = model
        self.player = player
        self.out = out if out is not None else sys.stdout
        self.draw = draw
        self.view = TextualView(model.read_only())
        model.subscribe(self)

    def show_error(self, message: str) -> None:
        self.out.write(f"{message}\n")

    def update(self) -> None:
        """Redraw after a completed move, pass or start."""
        if not self.draw:
            return
        self.view.render(self.out)
        if self.model.status() is GameStatus.END:
            self.show_error("GAME IS OVER!")

    def _can_act(self) -> bool:
        if self.model.status() is GameStatus.END:
            self.show_error("GAME IS OVER!")
            return False
        if self.player.color != self.model.current_color:
            self.show_error("Not your turn.")
            return False
        return True

    def player_move(self, coord: Optional[Coordinate]) -> Optional[MoveResult]:
        """
        Submit a move for this controller's player.

        Returns:
            The MoveResult, or None if the move was rejected
        """
        if not self._can_act():
            return None
        if coord is None:
            self.show_error("you are not selecting a hexagon!")
            return None
        try:
            result = self.model.move(coord.q, coord.r)
        except HexReversiError as e:
            logger.debug("Rejected move %s: %s", coord, e)
            self.show_error(f"INCORRECT MOVE: {coord} IS NOT VALID")
            return None
        if result is MoveResult.FORCED_PASS:
            self.show_error(f"{self.player.color} has no legal moves and passes.")
        return result

    def player_pass(self) -> bool:
        """Pass for this controller's player. Returns False if not allowed now."""
        if not self._can_act():
            return False
        self.model.pass_turn()
        return True


def parse_command(text: str) -> Optional[Coordinate]:
    """Turn "q r" (or "q,r") into a Coordinate. Returns None if it does not parse."""
    parts = text.replace(',', ' ').split()
    if len(parts) != 2:
        return None
    try:
        return Coordinate(int(parts[0]), int(parts[1]))
    except ValueError:
        return None


def seat_players(first: Player, second: Player) -> None:
    """
    Give each player a color. Unseated players take whatever color is left,
    with the first player getting Black when neither is seated.

    Raises:
        ValueError: both players already hold the same color
    """
    if first.color is None:
        first.color = second.color.opponent if second.color is not None else PlayColor.BLACK
    if second.color is None:
        second.color = first.color.opponent
    if first.color is second.color:
        raise ValueError(f"{first.name} and {second.name} are both seated as {first.color}")


class GameRunner:
    """Plays a full game between two players, one controller per seat."""

    def __init__(self, game: HexReversiGame, black: Player, white: Player,
                 out: Optional[TextIO] = None,
                 read_input: Callable[[str], str] = input,
                 max_turns: int = 10000):
        self.game = game
        self.out = out if out is not None else sys.stdout
        self.read_input = read_input
        self.max_turns = max_turns

        seat_players(black, white)

        # Both seats share one screen, so only the first one draws the board
        self.controllers: Dict[PlayColor, Controller] = {
            black.color: Controller(game, black, self.out),
        }
        self.controllers[white.color] = Controller(game, white, self.out, draw=False)

    def _human_turn(self, controller: Controller) -> bool:
        """Read one command for a human player. Returns False on quit."""
        prompt = f"{controller.player.color} to move (q r | pass | quit): "
        text = self.read_input(prompt).strip().lower()
        if text in ('quit', 'exit'):
            return False
        if text == 'pass':
            controller.player_pass()
            return True
        coord = parse_command(text)
        if coord is None:
            self.out.write("Could not read that move.\n")
            return True
        controller.player_move(coord)
        return True

    def play(self) -> Optional[PlayColor]:
        """
        Run the game until it ends.

        Returns:
            Winning color, or None for a draw or an abandoned game
        """
        self.game.start_game()
        turns = 0
        while not self.game.is_game_over() and turns < self.max_turns:
            turns += 1
            controller = self.controllers[self.game.current_color]
            player = controller.player
            if player.is_ai:
                move = player.choose_move(self.game.read_only())
                if move is None:
                    controller.player_pass()
                else:
                    controller.player_move(move)
            elif not self._human_turn(controller):
                logger.info("Game abandoned by %s", player.name)
                return None

        black = self.game.get_score(PlayColor.BLACK)
        white = self.game.get_score(PlayColor.WHITE)
        self.out.write(f"Final score - Black: {black}, White: {white}\n")
        return self.game.winner()

