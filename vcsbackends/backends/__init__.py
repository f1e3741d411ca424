"""Version-control backend abstraction.

This module provides one backend per version-control system (Git,
Subversion, git-svn, Mercurial, Darcs, Fossil and a CVS placeholder)
behind a common clone/update interface, plus the registry that maps
backend identifiers to them.
"""

from .base import VCSBackend, ensure_parent_directory
from .errors import (
    VCSBackendError,
    UnknownBackendError,
    DirectoryPreparationError,
    ExternalToolError,
    ToolNotAvailableError,
    UnsupportedOperationError,
    MissingWorkingCopyError,
)
from .registry import (
    BackendRegistry,
    build_registry,
    get_registry,
    lookup_backend,
    resolve,
)
from .runner import CommandRunner, SubprocessRunner, build_runner

__all__ = [
    "VCSBackend",
    "ensure_parent_directory",
    "VCSBackendError",
    "UnknownBackendError",
    "DirectoryPreparationError",
    "ExternalToolError",
    "ToolNotAvailableError",
    "UnsupportedOperationError",
    "MissingWorkingCopyError",
    "BackendRegistry",
    "build_registry",
    "get_registry",
    "lookup_backend",
    "resolve",
    "CommandRunner",
    "SubprocessRunner",
    "build_runner",
]
