"""Registry of VCS backends.

Maps backend identifiers, including aliases, to backend instances. The
registry is built once and never modified afterwards, so lookups are safe
from any thread without locking.
"""

from types import MappingProxyType
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Type

from ..common.logger import get_logger
from .base import VCSBackend
from .cvs import CvsBackend
from .darcs import DarcsBackend
from .errors import UnknownBackendError
from .fossil import FossilBackend
from .git import GitBackend
from .gitsvn import GitSvnBackend
from .mercurial import MercurialBackend
from .runner import CommandRunner
from .subversion import SubversionBackend

logger = get_logger("backend_registry")


# Identifiers for each built-in backend; the first one is the canonical name.
BUILTIN_BACKENDS: List[Tuple[Tuple[str, ...], Type[VCSBackend]]] = [
    (("git", "github"), GitBackend),
    (("svn", "subversion"), SubversionBackend),
    (("git-svn",), GitSvnBackend),
    (("hg", "mercurial"), MercurialBackend),
    (("darcs",), DarcsBackend),
    (("fossil",), FossilBackend),
    (("cvs",), CvsBackend),
]


class BackendRegistry:
    """Immutable mapping of backend identifiers to backend instances.

    Every alias of one version-control system resolves to the same
    instance, and no identifier may map to two different backends.
    """

    def __init__(self, entries: Iterable[Tuple[Sequence[str], VCSBackend]]):
        """Build the registry.

        Args:
            entries: Pairs of (identifiers, backend instance)

        Raises:
            ValueError: If an identifier is claimed by two backends
        """
        backends: Dict[str, VCSBackend] = {}
        for identifiers, backend in entries:
            for identifier in identifiers:
                existing = backends.get(identifier)
                if existing is not None and existing is not backend:
                    raise ValueError(
                        f"Identifier {identifier!r} already maps to {existing.name}"
                    )
                backends[identifier] = backend

        self._backends = MappingProxyType(backends)
        logger.debug(f"Built backend registry: {', '.join(backends)}")

    def lookup(self, identifier: str) -> Optional[VCSBackend]:
        """Get backend by identifier.

        Args:
            identifier: Exact, case-sensitive backend identifier or alias

        Returns:
            VCSBackend or None if the identifier is unknown
        """
        return self._backends.get(identifier)

    def get(self, identifier: str) -> VCSBackend:
        """Get backend by identifier, raising if it is unknown.

        Raises:
            UnknownBackendError: If the identifier is not registered
        """
        backend = self.lookup(identifier)
        if backend is None:
            raise UnknownBackendError(identifier)
        return backend

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._backends

    def __len__(self) -> int:
        return len(self._backends)

    def list_identifiers(self) -> List[str]:
        """List all registered identifiers, aliases included, sorted."""
        return sorted(self._backends)

    def list_backends(self) -> List[VCSBackend]:
        """List distinct backend instances in registration order."""
        seen: List[VCSBackend] = []
        for backend in self._backends.values():
            if not any(backend is other for other in seen):
                seen.append(backend)
        return seen

    def aliases_for(self, backend: VCSBackend) -> List[str]:
        """Get every identifier that resolves to the given backend."""
        return [
            identifier
            for identifier, candidate in self._backends.items()
            if candidate is backend
        ]

    def get_identifier_mapping(self) -> Dict[str, str]:
        """Get mapping of identifiers to backend names."""
        return {identifier: b.name for identifier, b in self._backends.items()}


def build_registry(runner: Optional[CommandRunner] = None) -> BackendRegistry:
    """Build a registry of the built-in backends.

    Args:
        runner: Command runner shared by all backends (subprocess if None)

    Returns:
        New BackendRegistry
    """
    return BackendRegistry(
        (identifiers, backend_cls(runner)) for identifiers, backend_cls in BUILTIN_BACKENDS
    )


# Global registry instance
_registry = build_registry()


def get_registry() -> BackendRegistry:
    """Get the process-wide backend registry."""
    return _registry


def lookup_backend(identifier: str) -> Optional[VCSBackend]:
    """Look up a backend in the global registry.

    Returns:
        VCSBackend or None if the identifier is unknown
    """
    return _registry.lookup(identifier)


def resolve(identifier: str) -> VCSBackend:
    """Resolve an identifier to a backend in the global registry.

    Raises:
        UnknownBackendError: If the identifier is not registered
    """
    return _registry.get(identifier)
