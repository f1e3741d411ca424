"""Git-over-Subversion backend (``git svn``)."""

import os

from .base import VCSBackend, RemoteRef, ensure_parent_directory, remote_to_str
from .runner import PathLike


class GitSvnBackend(VCSBackend):
    """Backend tracking a Subversion repository with git-svn.

    git-svn has no shallow clone, so the shallow flag is ignored and a full
    history import is always performed.
    """

    tool = "git"

    @property
    def name(self) -> str:
        return "git-svn"

    def clone(self, remote: RemoteRef, local: PathLike, shallow: bool = False) -> None:
        ensure_parent_directory(local)
        self._run("svn", "clone", remote_to_str(remote), os.fspath(local))

    def update(self, local: PathLike) -> None:
        self._run("svn", "rebase", cwd=local)
