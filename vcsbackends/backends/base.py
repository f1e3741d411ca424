"""Base classes and helpers for VCS backends.

Defines the interface that every version-control backend implements, along
with the directory preparation shared by all clone operations.
"""

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union
from urllib.parse import ParseResult, SplitResult

from .errors import DirectoryPreparationError
from .runner import CommandRunner, PathLike, SubprocessRunner

RemoteRef = Union[str, ParseResult, SplitResult]

DIRECTORY_MODE = 0o755


def ensure_parent_directory(local: PathLike) -> Path:
    """Create every missing ancestor directory of a destination path.

    An already existing parent is not an error, so concurrent callers
    preparing disjoint subtrees do not interfere with each other.

    Args:
        local: Destination path of a working copy

    Returns:
        The parent directory

    Raises:
        DirectoryPreparationError: If the directory cannot be created
    """
    parent = Path(os.fspath(local)).parent
    try:
        parent.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryPreparationError(parent, e.strerror or str(e)) from e
    return parent


def remote_to_str(remote: RemoteRef) -> str:
    """Render a remote reference as the URL string passed to a tool."""
    if isinstance(remote, (ParseResult, SplitResult)):
        return remote.geturl()
    return str(remote)


class VCSBackend(ABC):
    """Abstract base class for version-control backends.

    Each backend must implement:
    - clone: first-time acquisition of a working copy
    - update: safe refresh of an existing working copy

    Backends hold no mutable state. The command runner passed at
    construction is the only collaborator.
    """

    #: Name of the external tool the backend invokes.
    tool: str = ""

    def __init__(self, runner: Optional[CommandRunner] = None):
        """Initialize backend.

        Args:
            runner: Command runner (a SubprocessRunner if None)
        """
        self._runner = runner if runner is not None else SubprocessRunner()

    @property
    def runner(self) -> CommandRunner:
        """Return the command runner used by this backend."""
        return self._runner

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the backend name (e.g. 'git', 'fossil')."""
        pass

    @property
    def supports_shallow(self) -> bool:
        """Whether clone honours the shallow flag."""
        return False

    @abstractmethod
    def clone(self, remote: RemoteRef, local: PathLike, shallow: bool = False) -> None:
        """Clone a remote repository into a local path.

        Args:
            remote: Remote repository URL
            local: Destination path of the working copy
            shallow: Prefer a depth-limited fetch where the tool supports it

        Raises:
            DirectoryPreparationError: If the parent directory cannot be created
            ToolNotAvailableError: If the tool cannot be started
            ExternalToolError: If the tool exits with a non-zero status
        """
        pass

    @abstractmethod
    def update(self, local: PathLike) -> None:
        """Refresh an existing working copy without discarding local changes.

        Args:
            local: Path of the working copy; used as the tool's working directory

        Raises:
            MissingWorkingCopyError: If the working copy does not exist
            ToolNotAvailableError: If the tool cannot be started
            ExternalToolError: If the tool exits with a non-zero status
        """
        pass

    def _run(self, *args: str, cwd: Optional[PathLike] = None) -> None:
        self._runner.run(self.tool, list(args), cwd=cwd)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
