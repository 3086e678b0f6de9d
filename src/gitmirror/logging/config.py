"""
Logging configuration for git-mirror.

This module describes where a run's operation log and summary file live
and how their lines are formatted.
"""

from datetime import datetime
from enum import Enum
from pathlib import Path
from dataclasses import dataclass, field
from gitmirror.constants import (
    LOG_FILE_PREFIX,
    RUN_TIMESTAMP_FORMAT,
)


class LogLevel(Enum):
    """Log levels for git-mirror logging"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def run_timestamp(moment: datetime) -> str:
    """Compact YYYYMMDD_HHMMSS stamp embedded in artifact names"""
    return moment.strftime(RUN_TIMESTAMP_FORMAT)


@dataclass
class LogConfig:
    """Configuration class for a run's log and summary files"""

    output_dir: Path = field(default_factory=Path.cwd)
    started_at: datetime = field(default_factory=datetime.now)
    file_prefix: str = LOG_FILE_PREFIX
    level: LogLevel = LogLevel.INFO

    sanitize_sensitive_data: bool = True

    @property
    def timestamp(self) -> str:
        return run_timestamp(self.started_at)

    @property
    def log_file_path(self) -> Path:
        return self.output_dir / f"{self.file_prefix}_{self.timestamp}.log"

    @property
    def summary_file_path(self) -> Path:
        return self.output_dir / f"{self.file_prefix}_summary_{self.timestamp}.txt"
