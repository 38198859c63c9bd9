"""
Logging utilities for hex Reversi.
"""
import os
import logging
from datetime import datetime
from typing import Optional

from .config import Config

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Logger:
    """Console and optional file logging for a run."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir)
        """
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir
        self.run_dir = None
        level = getattr(logging, config.logging.log_level.upper(), logging.INFO)
        formatter = logging.Formatter(FORMAT)

        self.handlers = []

        # Set up console logging
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(formatter)
        self.handlers.append(console)

        # Set up file logging
        if self.log_dir:
            run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
            self.run_dir = os.path.join(self.log_dir, run_name)
            os.makedirs(self.run_dir, exist_ok=True)
            file_handler = logging.FileHandler(os.path.join(self.run_dir, 'hexreversi.log'))
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.handlers.append(file_handler)

        # Configure the package logger
        self.logger = logging.getLogger('hexreversi')
        self.logger.setLevel(level)
        for handler in self.handlers:
            self.logger.addHandler(handler)

        if self.run_dir:
            self.save_config()

    def save_config(self):
        """Save the configuration next to the log file."""
        self.config.save(os.path.join(self.run_dir, 'config.json'))

    def close(self):
        """Detach and close this run's handlers."""
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []


def setup_logging(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
