"""Mercurial backend."""

import os

from .base import VCSBackend, RemoteRef, ensure_parent_directory, remote_to_str
from .runner import PathLike


class MercurialBackend(VCSBackend):
    """Backend for Mercurial repositories.

    Mercurial clones always carry full history; the shallow flag is ignored.
    ``hg pull --update`` only moves the working directory when it can do so
    without merging.
    """

    tool = "hg"

    @property
    def name(self) -> str:
        return "mercurial"

    def clone(self, remote: RemoteRef, local: PathLike, shallow: bool = False) -> None:
        ensure_parent_directory(local)
        self._run("clone", remote_to_str(remote), os.fspath(local))

    def update(self, local: PathLike) -> None:
        self._run("pull", "--update", cwd=local)
