"""
Git URL validation and parsing.

Three URL shapes are recognized:

- ``https://host/path`` (and plain ``http://``)
- ``git@host:path`` (SCP-like SSH)
- ``ssh://[user@]host[:port]/path``
"""

import re
from dataclasses import dataclass
from enum import Enum

from gitmirror.errors import InvalidUrlError

VALID_URL_PATTERN = re.compile(r"^(https?://|git@|ssh://).+")

_HTTP_HOST = re.compile(r"^https?://([^/]+)")
_SCP_HOST = re.compile(r"^git@([^:]+):")
_SSH_HOST = re.compile(r"^ssh://(?:[^@/]+@)?([^:/]+)(?::[0-9]+)?(?:/|$)")


class UrlScheme(Enum):
    """Transport a repository URL uses"""
    HTTPS = "https"
    HTTP = "http"
    SCP = "scp"
    SSH = "ssh"

    @property
    def uses_credentials(self) -> bool:
        return self in (UrlScheme.HTTPS, UrlScheme.HTTP)


@dataclass(frozen=True)
class RepositoryRef:
    """A validated source or destination repository URL"""

    url: str
    scheme: UrlScheme
    host: str

    @property
    def needs_credentials(self) -> bool:
        return self.scheme.uses_credentials


def validate_git_url(url: str) -> None:
    """Raise InvalidUrlError unless url has one of the recognized shapes"""
    if not url or not VALID_URL_PATTERN.match(url):
        raise InvalidUrlError(url)


def detect_scheme(url: str) -> UrlScheme:
    """Classify a validated URL by transport"""
    if url.startswith("https://"):
        return UrlScheme.HTTPS
    if url.startswith("http://"):
        return UrlScheme.HTTP
    if url.startswith("git@"):
        return UrlScheme.SCP
    if url.startswith("ssh://"):
        return UrlScheme.SSH
    raise InvalidUrlError(url)


def extract_host(url: str) -> str:
    """
    Extract the host name from a Git URL.

    Examples:
        https://github.com/user/repo.git     -> github.com
        git@gitlab.com:user/repo.git         -> gitlab.com
        ssh://git@example.com:2222/repo.git  -> example.com

    Raises:
        InvalidUrlError: If the URL has none of the recognized shapes
    """
    for pattern in (_HTTP_HOST, _SCP_HOST, _SSH_HOST):
        match = pattern.match(url)
        if match:
            return match.group(1)
    raise InvalidUrlError(url)


def parse_repository_url(url: str) -> RepositoryRef:
    """Validate url and derive its scheme and host"""
    url = url.strip()
    validate_git_url(url)
    return RepositoryRef(url=url, scheme=detect_scheme(url), host=extract_host(url))
