"""
Git push operations against the mirror destination.

Each push category reports its own outcome and never raises on a git
failure, so one rejected category cannot stop the others.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from git import Repo, GitCommandError
from gitmirror.errors import PushFailedError
from gitmirror.logging import get_logger
from gitmirror.utils.git.credentials import CredentialContext
from gitmirror.utils.git.url import RepositoryRef

logger = get_logger("gitmirror.utils.git.operations")


class PushCategory(Enum):
    """The three independently tracked push categories"""
    DEFAULT_BRANCH = "default_branch"
    ALL_BRANCHES = "all_branches"
    TAGS = "tags"

    @property
    def label(self) -> str:
        return {
            PushCategory.DEFAULT_BRANCH: "default branch",
            PushCategory.ALL_BRANCHES: "all branches",
            PushCategory.TAGS: "tags",
        }[self]


@dataclass
class PushOutcome:
    """Result of one push category"""

    category: PushCategory
    succeeded: bool
    error: Optional[PushFailedError] = None


def _push(
    repo: Repo,
    category: PushCategory,
    dest: RepositoryRef,
    credentials: CredentialContext,
    *args: str,
) -> PushOutcome:
    logger.debug(f"git push {' '.join(args)} ({category.label})")
    try:
        repo.git.push(*args, env=credentials.git_env())
    except GitCommandError as e:
        logger.debug(f"Push of {category.label} failed: {e}")
        return PushOutcome(
            category=category,
            succeeded=False,
            error=PushFailedError(category, dest.url, e.status),
        )
    return PushOutcome(category=category, succeeded=True)


def push_default_branch(
    repo: Repo,
    dest: RepositoryRef,
    credentials: CredentialContext,
    default_branch: str,
    mirror_branch: str,
) -> PushOutcome:
    """Push the default branch under the mirror branch name, never its own name"""
    return _push(
        repo,
        PushCategory.DEFAULT_BRANCH,
        dest,
        credentials,
        dest.url,
        f"{default_branch}:{mirror_branch}",
    )


def push_all_branches(
    repo: Repo, dest: RepositoryRef, credentials: CredentialContext
) -> PushOutcome:
    """Push every branch under its own name; protected ones may be rejected"""
    return _push(
        repo, PushCategory.ALL_BRANCHES, dest, credentials, "--all", dest.url
    )


def push_tags(repo: Repo, dest: RepositoryRef, credentials: CredentialContext) -> PushOutcome:
    """Push every tag"""
    return _push(repo, PushCategory.TAGS, dest, credentials, "--tags", dest.url)
