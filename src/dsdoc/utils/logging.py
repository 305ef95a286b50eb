"""
Logging configuration for dsdoc.

The library logs through a single 'dsdoc' logger that stays silent until
``DSDocLogger.setup_logger`` is called by the host application. Messages go
to the console and, optionally, to a UTF-8 log file.
"""

import logging
from pathlib import Path
from typing import Optional, Union


class DSDocLogger:
    """Centralized logger for dsdoc operations."""

    _logger: Optional[logging.Logger] = None
    _current_log_file: Optional[Path] = None

    @classmethod
    def setup_logger(
        cls,
        log_level: int = logging.INFO,
        log_file: Optional[Union[str, Path]] = None,
    ) -> logging.Logger:
        """
        Setup the dsdoc logger.

        Args:
            log_level: Logging level (default: INFO)
            log_file: Optional path of a log file; its directory is created
                if it doesn't exist

        Returns:
            Configured logger instance
        """
        # Remove existing handlers if logger already exists
        if cls._logger:
            for handler in cls._logger.handlers[:]:
                cls._logger.removeHandler(handler)
                handler.close()

        cls._logger = logging.getLogger("dsdoc")
        cls._logger.setLevel(log_level)

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        cls._logger.addHandler(console_handler)

        cls._current_log_file = None
        if log_file:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_path, mode="w", encoding="utf-8")
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            cls._logger.addHandler(file_handler)

            cls._current_log_file = log_path
            cls._logger.info(f"Log file: {log_path}")

        return cls._logger

    @classmethod
    def get_logger(cls) -> Optional[logging.Logger]:
        """Get the current logger instance."""
        return cls._logger

    @classmethod
    def get_log_file_path(cls) -> Optional[Path]:
        """Get the current log file path."""
        return cls._current_log_file

    @classmethod
    def info(cls, message: str) -> None:
        """Log info message."""
        if cls._logger:
            cls._logger.info(message)

    @classmethod
    def warning(cls, message: str) -> None:
        """Log warning message."""
        if cls._logger:
            cls._logger.warning(message)

    @classmethod
    def error(cls, message: str) -> None:
        """Log error message."""
        if cls._logger:
            cls._logger.error(message)

    @classmethod
    def debug(cls, message: str) -> None:
        """Log debug message."""
        if cls._logger:
            cls._logger.debug(message)

    @classmethod
    def cleanup(cls) -> None:
        """Clean up logger resources."""
        if cls._logger:
            for handler in cls._logger.handlers[:]:
                cls._logger.removeHandler(handler)
                handler.close()
            cls._logger = None
            cls._current_log_file = None
