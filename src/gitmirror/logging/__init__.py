"""
git-mirror logging module

Provides the two per-run artifacts of a mirror operation:

- the operation log, a chronological record of every step, success,
  warning and fatal error
- the summary file, a short human readable report of the configuration
  and the outcome of each push category

Both file names embed the run start timestamp and both are append-only.
"""

from .logger import get_logger, setup_logging, shutdown_logging
from .config import LogConfig, LogLevel
from .summary import SummaryWriter
from .utils import sanitize_url

__all__ = [
    "get_logger",
    "setup_logging",
    "shutdown_logging",
    "LogConfig",
    "LogLevel",
    "SummaryWriter",
    "sanitize_url",
]
