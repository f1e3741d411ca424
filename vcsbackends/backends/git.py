"""Git backend."""

import os

from .base import VCSBackend, RemoteRef, ensure_parent_directory, remote_to_str
from .runner import PathLike


class GitBackend(VCSBackend):
    """Backend for Git repositories.

    Shallow clones fetch only the latest commit (``--depth 1``). Updates
    are fast-forward only, so diverged local history makes the update fail
    instead of producing a merge.
    """

    tool = "git"

    @property
    def name(self) -> str:
        return "git"

    @property
    def supports_shallow(self) -> bool:
        return True

    def clone(self, remote: RemoteRef, local: PathLike, shallow: bool = False) -> None:
        ensure_parent_directory(local)

        args = ["clone"]
        if shallow:
            args += ["--depth", "1"]
        args += [remote_to_str(remote), os.fspath(local)]

        self._run(*args)

    def update(self, local: PathLike) -> None:
        self._run("pull", "--ff-only", cwd=local)
