"""Darcs backend."""

import os

from .base import VCSBackend, RemoteRef, ensure_parent_directory, remote_to_str
from .runner import PathLike


class DarcsBackend(VCSBackend):
    """Backend for Darcs repositories.

    A shallow clone maps to ``darcs get --lazy``, which defers fetching
    patches until they are needed.
    """

    tool = "darcs"

    @property
    def name(self) -> str:
        return "darcs"

    @property
    def supports_shallow(self) -> bool:
        return True

    def clone(self, remote: RemoteRef, local: PathLike, shallow: bool = False) -> None:
        ensure_parent_directory(local)

        args = ["get"]
        if shallow:
            args.append("--lazy")
        args += [remote_to_str(remote), os.fspath(local)]

        self._run(*args)

    def update(self, local: PathLike) -> None:
        self._run("pull", cwd=local)
