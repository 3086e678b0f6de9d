"""
Error taxonomy for git-mirror.

Every failure carries structured fields; the human readable message is
produced by ``str()`` and only rendered by the console/logging layer.
"""

from typing import Optional


class MirrorError(Exception):
    """Base class for all fatal and non-fatal mirror failures"""

    def __init__(self, url: Optional[str] = None, exit_code: Optional[int] = None):
        self.url = url
        self.exit_code = exit_code
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return "Mirror operation failed"

    def __str__(self) -> str:
        return self.message


class MissingPrerequisiteError(MirrorError):
    """A required external tool is not installed"""

    def __init__(self, tool: str):
        self.tool = tool
        super().__init__()

    @property
    def message(self) -> str:
        return f"{self.tool.capitalize()} is not installed"


class InvalidUrlError(MirrorError):
    """URL does not match any recognized Git URL shape"""

    @property
    def message(self) -> str:
        return f"Invalid Git URL: {self.url}"


class UnreachableError(MirrorError):
    """Remote listing failed (network, permissions or bad credentials)"""

    @property
    def message(self) -> str:
        return f"Cannot access repository: {self.url}"


class CloneFailedError(MirrorError):
    """Mirror clone of the source repository failed"""

    @property
    def message(self) -> str:
        return f"Failed to clone repository: {self.url}"


class PushFailedError(MirrorError):
    """One push category was rejected fully or partially by the destination"""

    def __init__(self, category, url: str, exit_code: Optional[int] = None):
        self.category = category
        super().__init__(url, exit_code)

    @property
    def message(self) -> str:
        return f"Push of {self.category.label} to {self.url} failed"
