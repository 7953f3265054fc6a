# json_overflow/infrastructure/logging/_setup.py

"""Logging configuration for applications embedding json_overflow"""

# Standard library imports
from logging import DEBUG
from logging import FileHandler
from logging import Formatter
from logging import INFO
from logging import StreamHandler
from logging import getLevelName
from logging import getLogger


def set_up_logging(
    log_level: str = "INFO",
    log_file: str | None = None,
    silent: bool = False,
) -> str | None:
    """Configure the root logger

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Path to log file, None disables file logging
        silent: If True, suppress console output

    Returns:
        Path to log file if file logging is enabled, None otherwise
    """
    level = getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = INFO

    root_logger = getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_formatter = Formatter("%(asctime)s - %(levelname)s - %(message)s")
    file_formatter = Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not silent:
        console_handler = StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = FileHandler(log_file)
        file_handler.setLevel(DEBUG)  # Always log debug to file
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

        getLogger(__name__).info(f"Logging to file: {log_file}")

    return log_file
