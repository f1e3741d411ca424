"""Configuration management for vcsbackends.

Handles loading and parsing of the YAML configuration file that controls
which executables are invoked and how their output and logs are handled.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_ENV_VAR = "VCSBACKENDS_CONFIG"
DEFAULT_CONFIG_PATH = "~/.config/vcsbackends/config.yaml"
DEFAULT_LOG_DIR = "~/.local/state/vcsbackends/logs"


@dataclass
class LoggingConfig:
    """Configuration for log output."""

    level: str = "INFO"
    log_dir: str = DEFAULT_LOG_DIR
    file_logging: bool = False
    console_logging: bool = True


@dataclass
class VCSBackendsConfig:
    """Top-level configuration for vcsbackends."""

    executables: Dict[str, str] = field(default_factory=dict)  # tool -> path
    capture_output: bool = True
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def parse_logging_config(logging_dict: Dict[str, Any]) -> LoggingConfig:
    """Parse logging configuration dictionary.

    Args:
        logging_dict: Logging configuration dictionary

    Returns:
        LoggingConfig instance
    """
    return LoggingConfig(
        level=logging_dict.get("level", "INFO"),
        log_dir=logging_dict.get("log_dir", DEFAULT_LOG_DIR),
        file_logging=logging_dict.get("file_logging", False),
        console_logging=logging_dict.get("console_logging", True),
    )


def parse_config(config_dict: Dict[str, Any]) -> VCSBackendsConfig:
    """Parse the full configuration dictionary.

    Args:
        config_dict: Full configuration dictionary

    Returns:
        VCSBackendsConfig instance

    Raises:
        TypeError: If ``executables`` is not a mapping
    """
    executables = config_dict.get("executables") or {}
    if not isinstance(executables, dict):
        raise TypeError(
            f"'executables' must be a mapping, got {type(executables).__name__}"
        )

    logging_config = LoggingConfig()
    if config_dict.get("logging"):
        logging_config = parse_logging_config(config_dict["logging"])

    return VCSBackendsConfig(
        executables={str(tool): str(path) for tool, path in executables.items()},
        capture_output=config_dict.get("capture_output", True),
        logging=logging_config,
    )


def default_config_path() -> str:
    """Return the configuration path, honouring ``VCSBACKENDS_CONFIG``."""
    return os.path.expanduser(os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_PATH))


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Path to configuration file (default location if None)

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
        TypeError: If the document root is not a mapping
    """
    config_file = Path(config_path or default_config_path())

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    with config_file.open("r") as f:
        config = yaml.safe_load(f)

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise TypeError(
            f"Configuration root must be a mapping, got {type(config).__name__}"
        )

    return _expand_env_vars(config)


def _expand_env_vars(obj: Any) -> Any:
    """Recursively expand environment variables in configuration values."""
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    elif isinstance(obj, str):
        return os.path.expandvars(obj)
    else:
        return obj


def load_typed_config(config_path: Optional[str] = None) -> VCSBackendsConfig:
    """Load and parse configuration into typed dataclass.

    Args:
        config_path: Path to configuration file (default location if None)

    Returns:
        VCSBackendsConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
    """
    return parse_config(load_config(config_path))
