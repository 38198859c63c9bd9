"""
Play a game of hex Reversi in the terminal.
"""
import os
import sys
from pathlib import Path

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from hexreversi.config import Config, get_default_config
from hexreversi.controller import GameRunner
from hexreversi.game import HexReversiGame
from hexreversi.logger import setup_logging
from hexreversi.players import AIPlayer, HumanPlayer, STRATEGIES, get_strategy


def make_player(kind: str, seed=None):
    """Build a human player or an AI player for a strategy name."""
    if kind == 'human':
        return HumanPlayer()
    return AIPlayer(get_strategy(kind, seed=seed))


def main():
    """Run a single game with the specified configuration."""
    import argparse

    choices = ['human'] + list(STRATEGIES)
    parser = argparse.ArgumentParser(description='Play hex Reversi')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--size', type=int, default=None,
                        help='Side length of the hexagonal board')
    parser.add_argument('--black', type=str, choices=choices, default=None,
                        help='Who plays black')
    parser.add_argument('--white', type=str, choices=choices, default=None,
                        help='Who plays white')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the random strategy')
    args = parser.parse_args()

    # Load configuration
    if os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        config = get_default_config()

    if args.size is not None:
        config.game.board_size = args.size
    if args.black is not None:
        config.game.black_player = args.black
    if args.white is not None:
        config.game.white_player = args.white

    log = setup_logging(config)

    game = HexReversiGame(config.game.board_size)
    runner = GameRunner(
        game,
        make_player(config.game.black_player, args.seed),
        make_player(config.game.white_player, args.seed),
    )

    try:
        winner = runner.play()
    except KeyboardInterrupt:
        print("\nGame interrupted.")
        return
    finally:
        log.close()

    if game.is_game_over():
        print("It's a draw!" if winner is None else f"{winner} wins!")


if __name__ == "__main__":
    main()
