"""
Runtime settings for git-mirror.

The tool takes no command-line flags; the few knobs it has are read from
GIT_MIRROR_* environment variables.
"""

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path

from gitmirror.constants import (
    ENV_LOG_LEVEL,
    ENV_OUTPUT_DIR,
    ENV_TEMP_DIR,
    MIRROR_BRANCH_PREFIX,
)
from gitmirror.logging.config import LogLevel


@dataclass
class MirrorSettings:
    """Configuration for a single mirror run"""

    output_dir: Path = field(default_factory=Path.cwd)
    temp_root: Path = field(default_factory=lambda: Path(tempfile.gettempdir()))
    log_level: LogLevel = LogLevel.INFO
    mirror_branch_prefix: str = MIRROR_BRANCH_PREFIX

    @classmethod
    def from_env(cls) -> "MirrorSettings":
        """Build settings, letting GIT_MIRROR_* variables override defaults"""
        settings = cls()

        output_dir = os.environ.get(ENV_OUTPUT_DIR, "").strip()
        if output_dir:
            settings.output_dir = Path(output_dir).expanduser()

        temp_root = os.environ.get(ENV_TEMP_DIR, "").strip()
        if temp_root:
            settings.temp_root = Path(temp_root).expanduser()

        level = os.environ.get(ENV_LOG_LEVEL, "").strip().upper()
        if level in [lev.value for lev in LogLevel]:
            settings.log_level = LogLevel(level)

        return settings
