"""
Mirror workflow.

A run walks four fixed steps:

1. Source repository configuration (URL, credentials, reachability)
2. Destination repository configuration
3. Mirror clone of the source into a private temporary workspace
4. Three independent pushes to the destination: the default branch under
   a timestamped ``mirror_`` name, all branches, and all tags

Steps 1 and 2 are interactive and produce a MirrorConfig; steps 3 and 4
only consume it. Any MirrorError raised in steps 1 to 3 aborts the run,
push failures in step 4 are warnings.
"""

import os
import shutil
import signal
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

import typer
from git import Repo
from rich.markup import escape

from gitmirror.constants import (
    APP_NAME,
    LOG_DATE_FORMAT,
    MIRROR_BRANCH_PREFIX,
    TEMP_DIR_PREFIX,
)
from gitmirror.errors import MirrorError
from gitmirror.logging import (
    LogConfig,
    SummaryWriter,
    get_logger,
    setup_logging,
    shutdown_logging,
)
from gitmirror.logging.config import run_timestamp
from gitmirror.settings import MirrorSettings
from gitmirror.utils.console import console, error, header, info, step, success, warning
from gitmirror.utils.git import (
    CredentialContext,
    PushCategory,
    PushOutcome,
    RepositoryRef,
    check_git_installed,
    get_default_branch,
    mirror_branch_name,
    mirror_clone,
    parse_repository_url,
    probe_repository,
    provision_credentials,
    push_all_branches,
    push_default_branch,
    push_tags,
)

logger = get_logger("gitmirror.commands.mirror")

SOURCE = "source"
DESTINATION = "destination"

# category -> (success message, warning message, summary label, summary ok, summary failed)
_PUSH_REPORTING = {
    PushCategory.DEFAULT_BRANCH: (
        "Default branch mirrored to: {mirror_branch}",
        "Failed to push default branch",
        "Default Branch Status",
        "Successfully mirrored",
        "Failed to mirror",
    ),
    PushCategory.ALL_BRANCHES: (
        "All branches mirrored",
        "Some branches were not pushed (possibly protected)",
        "All Branches Status",
        "Successfully mirrored",
        "Partial success (some branches protected)",
    ),
    PushCategory.TAGS: (
        "All tags mirrored",
        "Some tags were not pushed",
        "Tags Status",
        "Successfully mirrored",
        "Failed to mirror some tags",
    ),
}


@dataclass(frozen=True)
class MirrorConfig:
    """Validated input of a mirror run"""

    source: RepositoryRef
    destination: RepositoryRef
    source_credentials: CredentialContext
    destination_credentials: CredentialContext


@dataclass
class MirrorReport:
    """What step 4 did"""

    default_branch: str
    mirror_branch: str
    outcomes: List[PushOutcome] = field(default_factory=list)

    @property
    def all_succeeded(self) -> bool:
        return all(outcome.succeeded for outcome in self.outcomes)

    def outcome(self, category: PushCategory) -> Optional[PushOutcome]:
        for item in self.outcomes:
            if item.category == category:
                return item
        return None


def report_step(number: int, title: str) -> None:
    step(number, title)
    logger.info(f"Step {number}: {title}")


def report_success(message: str) -> None:
    success(message)
    logger.info(f"Success: {message}")


def report_warning(message: str) -> None:
    warning(message)
    logger.info(f"Warning: {message}")


def configure_repository(
    side: str, url: str, credentials_dir: Path
) -> Tuple[RepositoryRef, CredentialContext]:
    """
    Validate a repository URL, provision credentials and probe it.

    Credentials are only requested for HTTP(S) URLs; SSH URLs rely on the
    operator's keys. Raises a MirrorError on any failure.
    """
    ref = parse_repository_url(url)
    if ref.needs_credentials:
        credentials = provision_credentials(ref, credentials_dir, side)
    else:
        credentials = CredentialContext.none()

    probe_repository(ref, credentials)
    return ref, credentials


def collect_config(credentials_dir: Path, summary: SummaryWriter) -> MirrorConfig:
    """Run the two interactive configuration steps"""
    report_step(1, "Source Repository Configuration")
    source_url = typer.prompt("Enter source repository URL")
    source, source_credentials = configure_repository(
        SOURCE, source_url, credentials_dir
    )
    report_success("Source repository validated")
    summary.write(f"Source Repository: {source.url}")

    report_step(2, "Destination Repository Configuration")
    destination_url = typer.prompt("Enter destination repository URL")
    destination, destination_credentials = configure_repository(
        DESTINATION, destination_url, credentials_dir
    )
    report_success("Destination repository validated")
    summary.write(f"Destination Repository: {destination.url}")

    return MirrorConfig(
        source=source,
        destination=destination,
        source_credentials=source_credentials,
        destination_credentials=destination_credentials,
    )


class MirrorWorkflow:
    """Clone and push half of a mirror run, driven by a MirrorConfig"""

    def __init__(
        self,
        config: MirrorConfig,
        summary: SummaryWriter,
        started_at: datetime,
        branch_prefix: str = MIRROR_BRANCH_PREFIX,
    ):
        self.config = config
        self.summary = summary
        self.started_at = started_at
        self.branch_prefix = branch_prefix

    def clone(self, workspace: Path) -> Repo:
        """Step 3: mirror clone of the source"""
        report_step(3, "Cloning Source Repository")
        repo = mirror_clone(
            self.config.source, self.config.source_credentials, workspace
        )
        report_success("Repository cloned successfully")
        return repo

    def mirror(self, repo: Repo) -> MirrorReport:
        """Step 4: push the three categories, each regardless of the others"""
        report_step(4, "Mirroring to Destination")

        default_branch = get_default_branch(repo)
        mirror_branch = mirror_branch_name(
            default_branch, run_timestamp(self.started_at), self.branch_prefix
        )
        report = MirrorReport(default_branch=default_branch, mirror_branch=mirror_branch)

        self.summary.section("Mirror Operation Summary")
        self.summary.write(f"Timestamp: {datetime.now().strftime(LOG_DATE_FORMAT)}")
        self.summary.write(f"Default Branch: {default_branch}")
        self.summary.write(f"Mirror Branch: {mirror_branch}")

        destination = self.config.destination
        credentials = self.config.destination_credentials
        pushes = [
            lambda: push_default_branch(
                repo, destination, credentials, default_branch, mirror_branch
            ),
            lambda: push_all_branches(repo, destination, credentials),
            lambda: push_tags(repo, destination, credentials),
        ]
        for push in pushes:
            outcome = push()
            self._record(outcome, mirror_branch)
            report.outcomes.append(outcome)

        return report

    def execute(self, workspace: Path) -> MirrorReport:
        repo = self.clone(workspace)
        return self.mirror(repo)

    def _record(self, outcome: PushOutcome, mirror_branch: str) -> None:
        ok_message, warn_message, label, ok_status, failed_status = _PUSH_REPORTING[
            outcome.category
        ]
        if outcome.succeeded:
            report_success(ok_message.format(mirror_branch=mirror_branch))
            self.summary.write(f"{label}: {ok_status}")
        else:
            report_warning(warn_message)
            if outcome.error is not None:
                logger.debug(f"{outcome.error} (exit code {outcome.error.exit_code})")
            self.summary.write(f"{label}: {failed_status}")


def _raise_exit(signum, _frame):
    raise SystemExit(128 + signum)


@contextmanager
def run_workspace(temp_root: Path) -> Iterator[Path]:
    """
    Private temporary directory for one run.

    Holds the credential files and the mirror clone. It is removed on every
    exit path, including SIGTERM/SIGHUP, which are turned into SystemExit
    for the duration of the run.
    """
    temp_root = Path(temp_root)
    temp_root.mkdir(parents=True, exist_ok=True)
    workspace = Path(
        tempfile.mkdtemp(prefix=f"{TEMP_DIR_PREFIX}-{os.getpid()}-", dir=str(temp_root))
    )

    handled = [signal.SIGTERM]
    if hasattr(signal, "SIGHUP"):
        handled.append(signal.SIGHUP)
    previous = {signum: signal.signal(signum, _raise_exit) for signum in handled}

    try:
        yield workspace
    finally:
        logger.info("Cleaning up temporary files")
        if workspace.exists():
            shutil.rmtree(workspace)
        for signum, handler in previous.items():
            signal.signal(signum, handler)


def print_completion(report: MirrorReport, log_config: LogConfig) -> None:
    console.print()
    console.print("Mirroring Complete!", style="bold green")
    console.print(
        f"Protected branches were mirrored with prefix: [bold]{escape(report.mirror_branch)}[/bold]"
    )
    console.print(
        "Please verify the mirrored repositories and update branch protection rules as needed."
    )
    console.print()
    info(f"Log file: {log_config.log_file_path}")
    info(f"Summary file: {log_config.summary_file_path}")


def run_mirror(settings: Optional[MirrorSettings] = None) -> MirrorReport:
    """
    Run one complete mirror operation.

    Raises:
        typer.Exit: With code 1 on any fatal error
    """
    if settings is None:
        settings = MirrorSettings.from_env()

    log_config = LogConfig(output_dir=settings.output_dir, level=settings.log_level)
    setup_logging(log_config, force_reconfigure=True)
    summary = SummaryWriter(log_config.summary_file_path)

    try:
        check_git_installed()
        header(APP_NAME)
        logger.info("Starting new mirror operation")

        with run_workspace(settings.temp_root) as workspace:
            config = collect_config(workspace, summary)
            workflow = MirrorWorkflow(
                config, summary, log_config.started_at, settings.mirror_branch_prefix
            )
            try:
                report = workflow.execute(workspace)
            finally:
                config.source_credentials.discard()
                config.destination_credentials.discard()

        print_completion(report, log_config)
        summary.write()
        summary.write("Operation completed successfully")
        logger.info("Mirror operation completed")
        return report
    except MirrorError as e:
        logger.error(str(e))
        error(str(e))
        raise typer.Exit(1)
    finally:
        shutdown_logging()
