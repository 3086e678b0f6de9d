from datetime import datetime
from unittest.mock import MagicMock

from git import GitCommandError

from gitmirror.logging.config import run_timestamp
from gitmirror.utils.git.branches import get_default_branch, mirror_branch_name


def test_get_default_branch_from_symbolic_ref():
    repo = MagicMock()
    repo.git.symbolic_ref.return_value = "main\n"

    assert get_default_branch(repo) == "main"
    repo.git.symbolic_ref.assert_called_once_with("--short", "HEAD")


def test_get_default_branch_falls_back_to_master():
    repo = MagicMock()
    repo.git.symbolic_ref.side_effect = GitCommandError(["git", "symbolic-ref"], 128)

    assert get_default_branch(repo) == "master"


def test_get_default_branch_empty_output_falls_back_to_master():
    repo = MagicMock()
    repo.git.symbolic_ref.return_value = ""

    assert get_default_branch(repo) == "master"


def test_mirror_branch_name_format():
    stamp = run_timestamp(datetime(2024, 3, 5, 14, 7, 9))
    assert mirror_branch_name("main", stamp) == "mirror_main_20240305_140709"


def test_mirror_branch_name_custom_prefix():
    assert mirror_branch_name("dev", "20240101_000000", "backup") == "backup_dev_20240101_000000"


def test_mirror_branch_name_differs_between_runs():
    first = mirror_branch_name("main", run_timestamp(datetime(2024, 1, 1, 12, 0, 0)))
    second = mirror_branch_name("main", run_timestamp(datetime(2024, 1, 1, 12, 0, 1)))
    assert first != second
