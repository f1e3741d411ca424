"""Subversion backend."""

import os

from .base import VCSBackend, RemoteRef, ensure_parent_directory, remote_to_str
from .runner import PathLike


class SubversionBackend(VCSBackend):
    """Backend for Subversion repositories, using ``svn checkout``."""

    tool = "svn"

    @property
    def name(self) -> str:
        return "subversion"

    @property
    def supports_shallow(self) -> bool:
        return True

    def clone(self, remote: RemoteRef, local: PathLike, shallow: bool = False) -> None:
        ensure_parent_directory(local)

        args = ["checkout"]
        if shallow:
            args += ["--depth", "1"]
        args += [remote_to_str(remote), os.fspath(local)]

        self._run(*args)

    def update(self, local: PathLike) -> None:
        self._run("update", cwd=local)
