"""
Default branch detection and mirror branch naming.
"""

from git import Repo, GitCommandError
from gitmirror.constants import FALLBACK_DEFAULT_BRANCH, MIRROR_BRANCH_PREFIX
from gitmirror.logging import get_logger

logger = get_logger("gitmirror.utils.git.branches")


def get_default_branch(repo: Repo) -> str:
    """
    Determine the branch the mirrored HEAD points to.

    Falls back to "master" when the symbolic lookup fails, even though the
    real default may be "main" or something else.
    """
    try:
        branch = repo.git.symbolic_ref("--short", "HEAD").strip()
    except GitCommandError as e:
        logger.warning(
            f"Could not resolve HEAD ({e.status}), assuming '{FALLBACK_DEFAULT_BRANCH}'"
        )
        return FALLBACK_DEFAULT_BRANCH

    return branch or FALLBACK_DEFAULT_BRANCH


def mirror_branch_name(
    default_branch: str, timestamp: str, prefix: str = MIRROR_BRANCH_PREFIX
) -> str:
    """Destination branch the default branch is pushed under, e.g. mirror_main_20240101_120000"""
    return f"{prefix}_{default_branch}_{timestamp}"
