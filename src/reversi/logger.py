"""
Logging utilities for Reversi.
"""
import os
import json
import logging
from datetime import datetime
from typing import Dict, Any, Optional

from .config import Config


class Logger:
    """Sets up console/file logging for a run and records summary metrics."""

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
        level = getattr(logging, config.logging.log_level.upper(), logging.INFO)
        if config.logging.verbose:
            level = logging.DEBUG

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        self.handlers = []

        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(formatter)
        self.handlers.append(console)

        if config.logging.log_to_file:
            os.makedirs(self.run_dir, exist_ok=True)
            file_handler = logging.FileHandler(os.path.join(self.run_dir, 'reversi.log'))
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.handlers.append(file_handler)
            self.save_config()

        self.logger = logging.getLogger('reversi')
        self.logger.setLevel(level)
        for handler in self.handlers:
            self.logger.addHandler(handler)

    def save_config(self):
        """Save the configuration next to the log file."""
        with open(os.path.join(self.run_dir, 'config.json'), 'w') as f:
            json.dump(self.config.to_dict(), f, indent=2)

    def log_metrics(self, metrics: Dict[str, Any], step: int, prefix: str = ''):
        """
        Log a flat dict of metrics on one line.

        Args:
            metrics: Dictionary of metrics to log
            step: Current step/round
            prefix: Prefix for metric names (e.g., 'tournament/')
        """
        log_str = f"Step {step}:"
        for name, value in metrics.items():
            if isinstance(value, float):
                log_str += f" {prefix}{name}={value:.4f}"
            else:
                log_str += f" {prefix}{name}={value}"
        self.logger.info(log_str)

    def close(self):
        """Remove and close the handlers this logger added."""
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
