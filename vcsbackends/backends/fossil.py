"""Fossil backend.

Fossil keeps history in a single repository database that is opened into
a separate working checkout, so a clone takes two commands:

1. ``fossil clone <remote> <parent>/.fossil`` creates the database
2. ``fossil open <parent>/.fossil --workdir <local>`` checks it out

The second command only runs when the first succeeds.
"""

import os

from .base import VCSBackend, RemoteRef, ensure_parent_directory, remote_to_str
from .runner import PathLike

FOSSIL_REPO_NAME = ".fossil"


class FossilBackend(VCSBackend):
    """Backend for Fossil repositories. The shallow flag is ignored."""

    tool = "fossil"

    @property
    def name(self) -> str:
        return "fossil"

    def clone(self, remote: RemoteRef, local: PathLike, shallow: bool = False) -> None:
        parent = ensure_parent_directory(local)
        # Absolute paths, since the open step runs with cwd set to parent.
        repo_file = os.path.abspath(parent / FOSSIL_REPO_NAME)
        workdir = os.path.abspath(local)

        self._run("clone", remote_to_str(remote), repo_file)
        self._run("open", repo_file, "--workdir", workdir, cwd=parent)

    def update(self, local: PathLike) -> None:
        self._run("update", cwd=local)
