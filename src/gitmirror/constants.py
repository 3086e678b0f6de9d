"""
Global constants for git-mirror.
"""

# Application naming
APP_NAME = "Git Repository Mirror Tool"
LOG_FILE_PREFIX = "git_mirror"
TEMP_DIR_PREFIX = "git-mirror"
CREDENTIALS_FILE_PREFIX = "git-credentials"

# Mirror branch naming
MIRROR_BRANCH_PREFIX = "mirror"
FALLBACK_DEFAULT_BRANCH = "master"
CLONE_DIR_NAME = "repo.git"

# Timestamp formats
RUN_TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Workflow
TOTAL_STEPS = 4

# Environment overrides
ENV_OUTPUT_DIR = "GIT_MIRROR_OUTPUT_DIR"
ENV_TEMP_DIR = "GIT_MIRROR_TEMP_DIR"
ENV_LOG_LEVEL = "GIT_MIRROR_LOG_LEVEL"
