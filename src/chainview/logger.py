"""
This module provides logging functionality for the chain viewer.

The viewer is read-only, so nothing is written by default: every logger gets a
``NullHandler``. A log file is attached only when asked for on the command line
(``--log-file`` or ``--debug``).
"""

import logging
from pathlib import Path

CHAINVIEW = 'chainview'
DEFAULT_LOG_FILE = 'logs/chainview.log'


class Logger:
    """Hands out named loggers and attaches the optional file handler to all of them."""

    def __init__(self):
        self.null_handler = logging.NullHandler()
        self.logging_file_handler: logging.FileHandler | None = None
        self.formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        self.level = logging.INFO
        self._loggers: list[logging.Logger] = []

    def setup_logger(self, logger_name=None):
        """Set up a logger with the given name and return it.

        Args:
            logger_name (str, optional): Name of the logger. Defaults to None.

        Returns:
            logging.Logger: The configured logger.
        """
        if not logger_name:
            logger_name = CHAINVIEW
        else:
            logger_name = CHAINVIEW + ' ' + logger_name

        logger = logging.getLogger(f"{logger_name:<24}")
        logger.setLevel(self.level)
        logger.propagate = False

        if self.null_handler not in logger.handlers:
            logger.addHandler(self.null_handler)
        if self.logging_file_handler is not None and self.logging_file_handler not in logger.handlers:
            logger.addHandler(self.logging_file_handler)

        if logger not in self._loggers:
            self._loggers.append(logger)
        return logger

    def enable_file_handler(self, path=DEFAULT_LOG_FILE) -> Path:
        """Start writing every logger's records to ``path``, creating its folder if needed."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.disable_file_handler()

        self.logging_file_handler = logging.FileHandler(path, encoding='utf-8')
        self.logging_file_handler.setFormatter(self.formatter)
        for logger in self._loggers:
            logger.addHandler(self.logging_file_handler)
        return path

    def disable_file_handler(self) -> None:
        """Detach and close the log file, if one is open."""
        if self.logging_file_handler is None:
            return
        for logger in self._loggers:
            logger.removeHandler(self.logging_file_handler)
        self.logging_file_handler.close()
        self.logging_file_handler = None

    def set_level(self, level: int) -> None:
        """Change the level of every logger handed out so far (and of future ones)."""
        self.level = level
        for logger in self._loggers:
            logger.setLevel(level)


LOGGER = Logger()
