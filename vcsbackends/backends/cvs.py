"""CVS placeholder backend.

CVS checkouts are not supported. The backend exists so that a resolved
``cvs`` identifier fails with a clear error instead of being unknown.
"""

from .base import VCSBackend, RemoteRef
from .errors import UnsupportedOperationError
from .runner import PathLike


class CvsBackend(VCSBackend):
    """Backend whose operations always raise UnsupportedOperationError."""

    tool = "cvs"

    @property
    def name(self) -> str:
        return "cvs"

    def clone(self, remote: RemoteRef, local: PathLike, shallow: bool = False) -> None:
        raise UnsupportedOperationError("CVS", "clone")

    def update(self, local: PathLike) -> None:
        raise UnsupportedOperationError("CVS", "update")
