"""
Git credentials provisioning for HTTP(S) remotes.

Credentials are collected interactively, written to a private per-run
credential store file and handed to git through an explicit environment
mapping. Nothing is exported into the process environment, so source and
destination can hold different credentials at the same time.
"""

import os
import shlex
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Optional
from urllib.parse import quote

import typer
from rich.markup import escape

from gitmirror.constants import CREDENTIALS_FILE_PREFIX
from gitmirror.logging import get_logger
from gitmirror.utils.console import console, warning
from gitmirror.utils.git.url import RepositoryRef

logger = get_logger("gitmirror.utils.git.credentials")


class AuthMethod(Enum):
    """Authentication choices offered for an HTTP(S) host"""
    PASSWORD = "1"
    TOKEN = "2"

    @property
    def description(self) -> str:
        if self is AuthMethod.PASSWORD:
            return "username/password"
        return "access token"

    @property
    def secret_label(self) -> str:
        if self is AuthMethod.PASSWORD:
            return "Password"
        return "Token"


@dataclass(frozen=True)
class CredentialBundle:
    """Username and password or token for one host"""

    host: str
    username: str
    secret: str
    method: AuthMethod
    scheme: str = "https"

    def store_line(self) -> str:
        """Render the bundle in git-credential-store format"""
        username = quote(self.username, safe="")
        secret = quote(self.secret, safe="")
        return f"{self.scheme}://{username}:{secret}@{self.host}"

    def __repr__(self) -> str:
        return (
            f"CredentialBundle(host={self.host!r}, username={self.username!r}, "
            f"secret='***', method={self.method.name})"
        )


@dataclass
class CredentialContext:
    """
    Authentication context for every git call against one repository.

    An empty context (no bundle) is used for SSH remotes, which rely on the
    operator's own key setup; it still disables interactive prompts.
    """

    bundle: Optional[CredentialBundle] = None
    store_file: Optional[Path] = None

    @classmethod
    def none(cls) -> "CredentialContext":
        return cls()

    @property
    def is_authenticated(self) -> bool:
        return self.bundle is not None and self.store_file is not None

    def git_env(self) -> Dict[str, str]:
        """Environment overrides passed to git for this repository only"""
        env = {
            # Fail instead of hanging on an interactive prompt
            "GIT_TERMINAL_PROMPT": "0",
            "GIT_ASKPASS": "true",
        }
        if self.is_authenticated:
            helper = f"store --file={shlex.quote(str(self.store_file))}"
            env.update(
                {
                    "GIT_CONFIG_COUNT": "2",
                    # An empty value resets helpers from the user's config
                    "GIT_CONFIG_KEY_0": "credential.helper",
                    "GIT_CONFIG_VALUE_0": "",
                    "GIT_CONFIG_KEY_1": "credential.helper",
                    "GIT_CONFIG_VALUE_1": helper,
                }
            )
        return env

    def discard(self) -> None:
        """Remove the credential store file if it still exists"""
        if self.store_file is not None and self.store_file.exists():
            self.store_file.unlink()
            logger.debug(f"Removed credential file {self.store_file}")


def prompt_auth_method(host: str) -> AuthMethod:
    """Ask for an authentication method until the answer is 1 or 2"""
    while True:
        console.print(f"Select authentication method for [bold]{escape(host)}[/bold]:")
        console.print("1) Username/Password", markup=False)
        console.print("2) Access Token", markup=False)
        choice = typer.prompt(">", default="", show_default=False).strip()

        try:
            return AuthMethod(choice)
        except ValueError:
            warning("Please enter 1 or 2")
            logger.info("Warning: Please enter 1 or 2")


def write_credential_file(bundle: CredentialBundle, path: Path) -> Path:
    """
    Write the bundle to a credential store file readable by the owner only.

    Args:
        bundle: Credentials to store
        path: Target file, replaced if it exists

    Returns:
        Path: The written file
    """
    fd = os.open(str(path), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(bundle.store_line() + "\n")
    # O_CREAT mode is ignored when the file already exists
    os.chmod(path, 0o600)
    return path


def credential_file_path(directory: Path, side: str) -> Path:
    """Process-unique credential file name for one side of the mirror"""
    return Path(directory) / f"{CREDENTIALS_FILE_PREFIX}-{os.getpid()}-{side}"


def provision_credentials(ref: RepositoryRef, directory: Path, side: str) -> CredentialContext:
    """
    Interactively collect credentials for ref's host.

    Args:
        ref: HTTP(S) repository the credentials are for
        directory: Private run directory the credential file is written to
        side: "source" or "destination", keeps the two files apart

    Returns:
        CredentialContext: Context to pass to every git call for ref
    """
    if "@" in ref.host:
        # git matches stored credentials on the bare host, not user@host
        message = (
            f"URL for {ref.host} already names a user; "
            "the stored credentials may not be offered to git"
        )
        warning(message)
        logger.warning(f"Warning: {message}")

    method = prompt_auth_method(ref.host)
    username = typer.prompt("Username")
    secret = typer.prompt(method.secret_label, hide_input=True)

    bundle = CredentialBundle(
        host=ref.host,
        username=username,
        secret=secret,
        method=method,
        scheme=ref.scheme.value,
    )
    store_file = write_credential_file(bundle, credential_file_path(directory, side))
    logger.info(f"Authentication set up for {ref.host} using {method.description}")

    return CredentialContext(bundle=bundle, store_file=store_file)
