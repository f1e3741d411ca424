"""CLI interface for VCS backends."""

import sys
from typing import List, Optional

from .backends.errors import VCSBackendError
from .backends.registry import BackendRegistry, build_registry
from .backends.runner import build_runner
from .common.config import VCSBackendsConfig, load_typed_config
from .common.logger import setup_logger

USAGE = """Usage:
  python -m vcsbackends clone <vcs> <remote> <local> [--shallow]
  python -m vcsbackends update <vcs> <local>
  python -m vcsbackends list"""


def _load_config() -> VCSBackendsConfig:
    try:
        return load_typed_config()
    except FileNotFoundError:
        # Use defaults if config not found
        return VCSBackendsConfig()


def _list(registry: BackendRegistry) -> None:
    for backend in registry.list_backends():
        aliases = ", ".join(registry.aliases_for(backend))
        shallow = "shallow" if backend.supports_shallow else "full"
        print(f"{backend.name:<12} {shallow:<8} {aliases}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the VCS backend CLI."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(USAGE, file=sys.stderr)
        return 2

    config = _load_config()
    logger = setup_logger(
        "vcsbackends",
        log_dir=config.logging.log_dir,
        level=config.logging.level,
        file_logging=config.logging.file_logging,
        console_logging=config.logging.console_logging,
    )
    registry = build_registry(build_runner(config))

    command, rest = args[0], args[1:]
    shallow = "--shallow" in rest
    rest = [arg for arg in rest if arg != "--shallow"]

    try:
        if command == "list" and not rest:
            _list(registry)
        elif command == "clone" and len(rest) == 3:
            vcs, remote, local = rest
            registry.get(vcs).clone(remote, local, shallow=shallow)
            logger.info(f"Cloned {remote} into {local}")
        elif command == "update" and len(rest) == 2 and not shallow:
            vcs, local = rest
            registry.get(vcs).update(local)
            logger.info(f"Updated {local}")
        else:
            print(USAGE, file=sys.stderr)
            return 2
    except VCSBackendError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
