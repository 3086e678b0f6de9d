"""
Git repository access (prerequisite check, reachability probe, mirror clone).
"""

import shutil
from pathlib import Path
from git import Git, Repo, GitCommandError
from gitmirror.constants import CLONE_DIR_NAME
from gitmirror.errors import CloneFailedError, MissingPrerequisiteError, UnreachableError
from gitmirror.logging import get_logger
from gitmirror.utils.git.credentials import CredentialContext
from gitmirror.utils.git.url import RepositoryRef

logger = get_logger("gitmirror.utils.git.repository")


def check_git_installed() -> str:
    """Return the path of the git executable or raise MissingPrerequisiteError"""
    git_path = shutil.which("git")
    if not git_path:
        raise MissingPrerequisiteError("git")
    return git_path


def probe_repository(ref: RepositoryRef, credentials: CredentialContext) -> None:
    """
    Verify the repository is reachable with the given credentials.

    Runs a remote listing; there is no retry and no fallback transport.

    Raises:
        UnreachableError: If git cannot list the remote refs
    """
    logger.info(f"Checking repository access: {ref.url}")
    try:
        Git().ls_remote(ref.url, env=credentials.git_env())
    except GitCommandError as e:
        logger.debug(f"git ls-remote failed: {e}")
        raise UnreachableError(ref.url, e.status)


def mirror_clone(ref: RepositoryRef, credentials: CredentialContext, workspace: Path) -> Repo:
    """
    Mirror-clone ref into workspace.

    A mirror clone is bare and copies every ref (branches, tags, notes and
    other namespaces) exactly as the source has them.

    Raises:
        CloneFailedError: If the clone fails
    """
    target = Path(workspace) / CLONE_DIR_NAME
    logger.info(f"Cloning {ref.url} into {target}")
    try:
        repo = Repo.clone_from(
            ref.url, str(target), mirror=True, env=credentials.git_env()
        )
    except GitCommandError as e:
        logger.debug(f"git clone --mirror failed: {e}")
        raise CloneFailedError(ref.url, e.status)

    logger.info(f"Repository cloned to: {target}")
    return repo
