"""Exception hierarchy for VCS backend operations.

Every failure surfaced by a registry lookup or a backend operation derives
from VCSBackendError, so callers can handle the whole layer with one clause.
"""

from pathlib import Path
from typing import Optional, Sequence


class VCSBackendError(Exception):
    """Base class for all VCS backend failures."""


class UnknownBackendError(VCSBackendError):
    """Raised when an identifier is not present in the registry."""

    def __init__(self, identifier: str):
        super().__init__(f"Unknown VCS backend: {identifier!r}")
        self.identifier = identifier


class DirectoryPreparationError(VCSBackendError):
    """Raised when the destination's parent directory cannot be created."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Could not create directory {path}: {reason}")
        self.path = path


class ToolNotAvailableError(VCSBackendError):
    """Raised when an external tool cannot be located or executed."""

    def __init__(self, tool: str, executable: str, reason: str):
        super().__init__(f"{tool} is not available ({executable}): {reason}")
        self.tool = tool
        self.executable = executable


class ExternalToolError(VCSBackendError):
    """Raised when an external tool exits with a non-zero status."""

    def __init__(
        self,
        tool: str,
        args: Sequence[str],
        returncode: int,
        stderr: Optional[str] = None,
    ):
        message = f"{tool} {' '.join(args)} exited with status {returncode}"
        if stderr:
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)
        self.tool = tool
        self.command_args = list(args)
        self.returncode = returncode
        self.stderr = stderr or ""


class UnsupportedOperationError(VCSBackendError):
    """Raised by backends that deliberately do not support an operation."""

    def __init__(self, backend: str, operation: str):
        super().__init__(f"{backend} {operation} is not supported")
        self.backend = backend
        self.operation = operation


class MissingWorkingCopyError(VCSBackendError):
    """Raised when an update targets a directory that does not exist."""

    def __init__(self, path: Path):
        super().__init__(f"Working copy not found: {path}")
        self.path = path
