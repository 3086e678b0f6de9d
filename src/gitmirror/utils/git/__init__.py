"""
Git utilities package.
"""

from gitmirror.utils.git.url import (
    RepositoryRef,
    UrlScheme,
    extract_host,
    parse_repository_url,
    validate_git_url,
)
from gitmirror.utils.git.credentials import (
    AuthMethod,
    CredentialBundle,
    CredentialContext,
    provision_credentials,
)
from gitmirror.utils.git.repository import (
    check_git_installed,
    mirror_clone,
    probe_repository,
)
from gitmirror.utils.git.branches import get_default_branch, mirror_branch_name
from gitmirror.utils.git.operations import (
    PushCategory,
    PushOutcome,
    push_all_branches,
    push_default_branch,
    push_tags,
)

__all__ = [
    "RepositoryRef",
    "UrlScheme",
    "extract_host",
    "parse_repository_url",
    "validate_git_url",
    "AuthMethod",
    "CredentialBundle",
    "CredentialContext",
    "provision_credentials",
    "check_git_installed",
    "mirror_clone",
    "probe_repository",
    "get_default_branch",
    "mirror_branch_name",
    "PushCategory",
    "PushOutcome",
    "push_all_branches",
    "push_default_branch",
    "push_tags",
]
