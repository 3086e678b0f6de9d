"""
Summary sink for git-mirror.

The summary is a short report, separate from the chronological operation
log, holding only configuration facts and push outcomes.
"""

from pathlib import Path
from typing import Union

from .utils import sanitize_url


class SummaryWriter:
    """Append-only writer for a run's summary file"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def write(self, line: str = "") -> None:
        """Append one line, credentials masked"""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(sanitize_url(line) + "\n")

    def section(self, title: str) -> None:
        """Append a blank line, a title and its underline"""
        self.write()
        self.write(f"{title}:")
        self.write("=" * (len(title) + 1))
