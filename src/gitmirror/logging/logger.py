"""
Main logging module for git-mirror.

Sets up the append-only operation log for a run and hands out named
loggers underneath the ``gitmirror`` root.
"""

import logging
from typing import Dict, Optional

from .config import LogConfig
from .formatters import MirrorFormatter

ROOT_LOGGER_NAME = "gitmirror"

# Global logger registry
_loggers: Dict[str, logging.Logger] = {}
_logging_configured = False


def setup_logging(config: Optional[LogConfig] = None, force_reconfigure: bool = False) -> None:
    """
    Set up the git-mirror logging system.

    Args:
        config: LogConfig instance, uses default if None
        force_reconfigure: Force reconfiguration even if already set up
    """
    global _logging_configured

    if _logging_configured and not force_reconfigure:
        return

    if config is None:
        config = LogConfig()

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(getattr(logging, config.level.value))

    # Clear existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    # Append only; the run timestamp in the file name keeps runs apart
    config.output_dir.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(
        filename=config.log_file_path,
        mode="a",
        encoding="utf-8",
    )
    file_handler.setLevel(getattr(logging, config.level.value))
    file_handler.setFormatter(
        MirrorFormatter(sanitize_sensitive=config.sanitize_sensitive_data)
    )
    root_logger.addHandler(file_handler)

    # Console output goes through gitmirror.utils.console
    root_logger.propagate = False

    _logging_configured = True


def shutdown_logging() -> None:
    """Flush and close the run's log handlers"""
    global _logging_configured

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root_logger.handlers):
        handler.flush()
        root_logger.removeHandler(handler)
        handler.close()
    _logging_configured = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified name.

    Args:
        name: Logger name (e.g., 'gitmirror.commands.mirror')

    Returns:
        logging.Logger: Logger instance
    """
    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)

    return _loggers[name]
