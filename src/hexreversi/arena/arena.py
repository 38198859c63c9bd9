"""
Arena for running tournaments between move-selection strategies with ELO rating.
"""
import json
import logging
import time
from datetime import datetime
from typing import Dict, List, NamedTuple, Optional

from tqdm import tqdm

from ..game import HexReversiGame, PlayColor
from ..players import AIPlayer, Strategy

logger = logging.getLogger(__name__)


class MatchResult(NamedTuple):
    """Final position of one arena game, seen from the two seats."""
    black_id: str
    white_id: str
    black_tiles: int
    white_tiles: int

    @property
    def score(self) -> float:
        """Black's result: 1.0 for a win, 0.5 for a draw, 0.0 for a loss."""
        if self.black_tiles > self.white_tiles:
            return 1.0
        if self.white_tiles > self.black_tiles:
            return 0.0
        return 0.5

    @property
    def winner_id(self) -> Optional[str]:
        if self.score == 1.0:
            return self.black_id
        if self.score == 0.0:
            return self.white_id
        return None


def _empty_record() -> Dict[str, int]:
    return {'wins': 0, 'draws': 0, 'losses': 0, 'games_as_black': 0, 'tile_margin': 0}


class ELORatingSystem:
    """
    ELO ratings plus a win/draw/loss record for every strategy.

    Games are recorded from the seats: black's rating moves by
    k_factor * (score - expected) and white's by the mirror amount, so the
    sum of all ratings never changes.
    """

    def __init__(self, k_factor: float = 32.0, initial_rating: float = 1500.0):
        self.k_factor = k_factor
        self.initial_rating = initial_rating
        self.ratings: Dict[str, float] = {}
        self.records: Dict[str, Dict[str, int]] = {}
        self.history: List[Dict] = []

    def add_player(self, player_id: str, rating: Optional[float] = None):
        """Start tracking a player. Known players keep their rating."""
        if player_id not in self.ratings:
            self.ratings[player_id] = rating if rating is not None else self.initial_rating
            self.records[player_id] = _empty_record()

    def get_rating(self, player_id: str) -> float:
        return self.ratings.get(player_id, self.initial_rating)

    def games_played(self, player_id: str) -> int:
        record = self.records.get(player_id, _empty_record())
        return record['wins'] + record['draws'] + record['losses']

    def get_expected_score(self, rating: float, opponent_rating: float) -> float:
        """Expected score of a player rated `rating` against `opponent_rating`."""
        return 1.0 / (1.0 + 10.0 ** ((opponent_rating - rating) / 400.0))

    def record_game(self, result: MatchResult) -> Dict:
        """
        Apply one finished game to the ratings and records.

        Args:
            result: Final tile counts of the game

        Returns:
            History entry with the ratings before and after the game
        """
        self.add_player(result.black_id)
        self.add_player(result.white_id)

        black_before = self.ratings[result.black_id]
        white_before = self.ratings[result.white_id]
        change = self.k_factor * (result.score - self.get_expected_score(black_before, white_before))

        self.ratings[result.black_id] = black_before + change
        self.ratings[result.white_id] = white_before - change

        black_record = self.records[result.black_id]
        white_record = self.records[result.white_id]
        black_record['games_as_black'] += 1
        margin = result.black_tiles - result.white_tiles
        black_record['tile_margin'] += margin
        white_record['tile_margin'] -= margin
        if result.score == 1.0:
            black_record['wins'] += 1
            white_record['losses'] += 1
        elif result.score == 0.0:
            black_record['losses'] += 1
            white_record['wins'] += 1
        else:
            black_record['draws'] += 1
            white_record['draws'] += 1

        entry = {
            'timestamp': time.time(),
            'black': result.black_id,
            'white': result.white_id,
            'black_tiles': result.black_tiles,
            'white_tiles': result.white_tiles,
            'score': result.score,
            'black_before': black_before,
            'white_before': white_before,
            'black_after': self.ratings[result.black_id],
            'white_after': self.ratings[result.white_id],
        }
        self.history.append(entry)
        return entry

    def get_leaderboard(self) -> List[Dict]:
        """Players by rating, highest first; equal ratings fall back to the name."""
        board = []
        for player_id in sorted(self.ratings):
            row = {'player_id': player_id, 'rating': self.ratings[player_id],
                   'games_played': self.games_played(player_id)}
            row.update(self.records[player_id])
            board.append(row)
        board.sort(key=lambda row: row['rating'], reverse=True)
        return board

    def save_ratings(self, filepath: str):
        """Write ratings, records and game history to a JSON file."""
        data = {
            'k_factor': self.k_factor,
            'initial_rating': self.initial_rating,
            'ratings': self.ratings,
            'records': self.records,
            'history': self.history,
            'last_updated': datetime.now().isoformat()
        }
        with open(filepath, 'w') as f:
            json.dump(data, f, indent=2)

    @classmethod
    def load_ratings(cls, filepath: str) -> 'ELORatingSystem':
        with open(filepath, 'r') as f:
            data = json.load(f)

        elo = cls(k_factor=data['k_factor'], initial_rating=data['initial_rating'])
        for player_id, rating in data['ratings'].items():
            elo.add_player(player_id, float(rating))
            elo.records[player_id].update(data.get('records', {}).get(player_id, {}))
        elo.history = data.get('history', [])
        return elo


class Arena:
    """Arena for running tournaments between strategy-driven players."""

    def __init__(self, board_size: int = 6, elo_system: Optional[ELORatingSystem] = None,
                 max_turns: int = 10000):
        """
        Initialize the arena.

        Args:
            board_size: Side length of the boards games are played on
            elo_system: Optional ELO rating system to use
            max_turns: Safety cap on moves and passes per game
        """
        self.board_size = board_size
        self.elo = elo_system if elo_system is not None else ELORatingSystem()
        self.players: Dict[str, AIPlayer] = {}
        self.max_turns = max_turns

    def add_player(self, player_id: str, strategy: Strategy):
        """Add a strategy to the arena under `player_id`."""
        self.players[player_id] = AIPlayer(strategy, name=player_id)
        self.elo.add_player(player_id)

    def play_match(self, black_id: str, white_id: str) -> MatchResult:
        """
        Play one game to the end and report the final tile counts.

        A strategy with no move to offer passes.
        """
        if black_id not in self.players or white_id not in self.players:
            raise ValueError(f"One or both players not found: {black_id}, {white_id}")

        seats = {
            PlayColor.BLACK: self.players[black_id],
            PlayColor.WHITE: self.players[white_id],
        }

        game = HexReversiGame(self.board_size)
        game.start_game()
        logger.debug("Starting game: %s (Black) vs %s (White)", black_id, white_id)

        turns = 0
        while not game.is_game_over() and turns < self.max_turns:
            turns += 1
            move = seats[game.current_color].choose_move(game.read_only())
            if move is None:
                game.pass_turn()
            else:
                game.move(move.q, move.r)

        result = MatchResult(black_id, white_id,
                             game.get_score(PlayColor.BLACK), game.get_score(PlayColor.WHITE))
        logger.debug("Game over after %d turns. Black: %d, White: %d",
                     turns, result.black_tiles, result.white_tiles)
        return result

    def play_game(self, black_id: str, white_id: str) -> float:
        """
        Play a single game between two players.

        Returns:
            1.0 if black wins, 0.5 for a draw, 0.0 if white wins
        """
        return self.play_match(black_id, white_id).score

    def run_tournament(self, rounds: int = 10, progress: bool = True) -> Dict:
        """
        Run a round-robin tournament between all players.

        Every pair meets once per round and the first move alternates
        between rounds.

        Args:
            rounds: Number of rounds
            progress: Whether to show a progress bar

        Returns:
            Dictionary with tournament results
        """
        player_ids = list(self.players.keys())
        if len(player_ids) < 2:
            raise ValueError("Need at least 2 players for a tournament")

        pairs = [(player_ids[i], player_ids[j])
                 for i in range(len(player_ids)) for j in range(i + 1, len(player_ids))]

        results = {
            'board_size': self.board_size,
            'games_played': 0,
            'matchups': {
                f"{p1}_vs_{p2}": {'player1': p1, 'player2': p2, 'games_played': 0,
                                  'wins1': 0, 'wins2': 0, 'draws': 0}
                for p1, p2 in pairs
            },
            'start_time': time.time(),
            'end_time': None,
            'rounds': []
        }

        for round_num in tqdm(range(rounds), desc="Rounds", disable=not progress):
            round_results = {'round': round_num + 1, 'games': []}

            for index, (p1, p2) in enumerate(pairs):
                black, white = (p1, p2) if (index + round_num) % 2 == 0 else (p2, p1)
                match = self.play_match(black, white)
                entry = self.elo.record_game(match)

                matchup = results['matchups'][f"{p1}_vs_{p2}"]
                matchup['games_played'] += 1
                results['games_played'] += 1
                if match.winner_id is None:
                    matchup['draws'] += 1
                elif match.winner_id == p1:
                    matchup['wins1'] += 1
                else:
                    matchup['wins2'] += 1

                round_results['games'].append(entry)

            results['rounds'].append(round_results)
            logger.info("Round %d/%d finished", round_num + 1, rounds)

        results['end_time'] = time.time()
        results['duration'] = results['end_time'] - results['start_time']
        results['leaderboard'] = self.elo.get_leaderboard()

        return results

    def print_leaderboard(self):
        """Print the current leaderboard."""
        print("\nCurrent Leaderboard:")
        print("Rank  Player ID               Rating     W    D    L  Margin")
        print("----  ---------------------  -------  ---- ---- ----  ------")

        for i, row in enumerate(self.elo.get_leaderboard(), 1):
            print(f"{i:4d}  {row['player_id']:22s}  {row['rating']:7.1f}  "
                  f"{row['wins']:4d} {row['draws']:4d} {row['losses']:4d}  {row['tile_margin']:+6d}")

    def save_results(self, results: Dict, filepath: str):
        """Save tournament results to a JSON file."""
        with open(filepath, 'w') as f:
            json.dump(results, f, indent=2)
