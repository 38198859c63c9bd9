"""
Configuration parameters for hex Reversi.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, Optional
import json


@dataclass
class GameConfig:
    """Configuration for a single game."""
    board_size: int = 6
    black_player: str = "human"  # "human" or a strategy name
    white_player: str = "capture"


@dataclass
class ArenaConfig:
    """Configuration for strategy tournaments."""
    rounds: int = 10
    board_size: int = 6
    k_factor: float = 32.0
    initial_rating: float = 1500.0
    output_dir: str = "tournament_results"
    elo_file: str = "elo_ratings.json"
    seed: Optional[int] = None


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: Optional[str] = None  # console only when unset
    log_level: str = "INFO"


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "HexReversi"
    game: GameConfig = field(default_factory=GameConfig)
    arena: ArenaConfig = field(default_factory=ArenaConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'HexReversi'),
            game=GameConfig(**config_dict.get('game', {})),
            arena=ArenaConfig(**config_dict.get('arena', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config() -> Config:
    """Get default configuration."""
    config = Config()

    # Tournaments use the same board as regular games unless told otherwise
    config.arena.board_size = config.game.board_size

    return config
