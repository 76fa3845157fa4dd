"""
Logging utilities for terminal Reversi.
"""
import os
import sys
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from .config import Config
from .game import Outcome, Player


class Logger:
    """Logger for game events and results."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir)
        """
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir
        self.run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.run_dir = os.path.join(self.log_dir, self.run_name)
        level = logging.getLevelName(config.logging.log_level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
        if config.logging.verbose:
            level = min(level, logging.INFO)

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        # Console logging goes to stderr so it stays out of the board output
        self.console = logging.StreamHandler(sys.stderr)
        self.console.setLevel(level)
        self.console.setFormatter(formatter)

        self.logger = logging.getLogger('reversi')
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False
        self.logger.addHandler(self.console)

        # Set up file logging
        self.log_file = None
        if config.logging.log_to_file:
            os.makedirs(self.run_dir, exist_ok=True)
            self.log_file = os.path.join(self.run_dir, 'game.log')
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
            self.save_config()

    def save_config(self):
        """Save the configuration to a JSON file."""
        self.config.save(os.path.join(self.run_dir, 'config.json'))

    def log_metrics(self, metrics: Dict[str, Any], step: int):
        """
        Log metrics to the console and the log file.

        Args:
            metrics: Dictionary of metrics to log
            step: Current move number
        """
        log_str = f"Step {step}:"
        for name, value in metrics.items():
            if isinstance(value, float):
                log_str += f" {name}={value:.4f}"
            else:
                log_str += f" {name}={value}"
        self.logger.info(log_str)

    def log_move(self, step: int, player: Player, move: Tuple[int, int],
                 flipped: List[Tuple[int, int]]):
        row, col = move
        self.logger.debug("Step %d: %s plays (%d, %d), flipping %d stone(s)",
                          step, player.label, row, col, len(flipped))

    def log_rejected(self, player: Player, text: str, reason: str):
        self.logger.debug("Rejected input %r from %s: %s", text, player.label, reason)

    def log_pass(self, player: Player):
        self.logger.info("%s has no legal move and passes", player.label)

    def log_aborted(self):
        self.logger.info("Input closed before the game finished")

    def log_game_over(self, step: int, score: Tuple[int, int], outcome: Outcome):
        """Log the final score and the result."""
        black, white = score
        self.log_metrics({'black': black, 'white': white, 'result': outcome.name}, step)

    def close(self):
        """Close the logger and flush all pending logs."""
        # Remove handlers to prevent duplicate logging
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)
            handler.close()


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
