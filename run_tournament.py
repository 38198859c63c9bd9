"""
Script for running tournaments between hex Reversi strategies.
"""
import os
import sys
import argparse
from datetime import datetime
from pathlib import Path

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from hexreversi.arena import Arena, ELORatingSystem
from hexreversi.config import Config, get_default_config
from hexreversi.logger import setup_logging
from hexreversi.players import STRATEGIES, get_strategy


def main():
    parser = argparse.ArgumentParser(description='Run a tournament between hex Reversi strategies')

    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--strategies', nargs='+', choices=list(STRATEGIES),
                        default=list(STRATEGIES),
                        help='Strategies taking part')
    parser.add_argument('--size', type=int, default=None,
                        help='Side length of the hexagonal board')
    parser.add_argument('--rounds', type=int, default=None,
                        help='Number of rounds to play')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the random strategy')
    parser.add_argument('--output-dir', type=str, default=None,
                        help='Directory to save tournament results')
    parser.add_argument('--elo-file', type=str, default=None,
                        help='File to save/load ELO ratings')
    parser.add_argument('--verbose', action='store_true',
                        help='Log every game')

    args = parser.parse_args()

    # Load configuration
    if os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        config = get_default_config()

    # Command line overrides the config file
    arena_config = config.arena
    if args.size is not None:
        arena_config.board_size = args.size
    if args.rounds is not None:
        arena_config.rounds = args.rounds
    if args.seed is not None:
        arena_config.seed = args.seed
    if args.output_dir is not None:
        arena_config.output_dir = args.output_dir
    if args.elo_file is not None:
        arena_config.elo_file = args.elo_file
    if args.verbose:
        config.logging.log_level = 'DEBUG'

    log = setup_logging(config)

    os.makedirs(arena_config.output_dir, exist_ok=True)

    elo_file = os.path.join(arena_config.output_dir, arena_config.elo_file)
    if os.path.exists(elo_file):
        print(f"Loading ELO ratings from {elo_file}")
        elo = ELORatingSystem.load_ratings(elo_file)
    else:
        print("Starting new ELO rating system")
        elo = ELORatingSystem(k_factor=arena_config.k_factor,
                              initial_rating=arena_config.initial_rating)

    arena = Arena(board_size=arena_config.board_size, elo_system=elo)
    for name in args.strategies:
        arena.add_player(name, get_strategy(name, seed=arena_config.seed))

    if len(arena.players) < 2:
        print("Need at least 2 players to start a tournament")
        log.close()
        return

    print("\nTournament Participants:")
    for i, player_id in enumerate(arena.players.keys(), 1):
        print(f"{i}. {player_id}")

    print(f"\nStarting tournament with {arena_config.rounds} rounds "
          f"on a size {arena_config.board_size} board...")
    try:
        results = arena.run_tournament(rounds=arena_config.rounds)
        arena.print_leaderboard()

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        arena.save_results(results, os.path.join(arena_config.output_dir,
                                                 f'tournament_{timestamp}.json'))
        arena.elo.save_ratings(elo_file)
    finally:
        log.close()


if __name__ == "__main__":
    main()
