"""Common utilities for vcsbackends."""

from .logger import setup_logger, get_logger
from .config import VCSBackendsConfig, load_config, load_typed_config

__all__ = [
    "VCSBackendsConfig",
    "get_logger",
    "load_config",
    "load_typed_config",
    "setup_logger",
]
