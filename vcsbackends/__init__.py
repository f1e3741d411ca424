"""vcsbackends: clone and update working copies through external VCS tools."""

from .backends import (
    VCSBackend,
    VCSBackendError,
    get_registry,
    lookup_backend,
    resolve,
)

__version__ = "0.1.0"

__all__ = [
    "VCSBackend",
    "VCSBackendError",
    "get_registry",
    "lookup_backend",
    "resolve",
]
