"""Transmote configuration processing module."""

import sys
from pathlib import Path
from typing import Any

import msgspec
import yaml
from platformdirs import user_config_dir

from . import logger
from .transport import DEFAULT_TIMEOUT, parse_daemon_url

APPNAME = "transmote"


class GlobalConfig(msgspec.Struct):
    """Global configuration."""

    loglevel: str = "info"

    def __post_init__(self):
        if self.loglevel not in logger.LOG_LEVELS:
            raise ValueError(f"Invalid loglevel '{self.loglevel}'. Must be one of: {logger.LOG_LEVELS}")


class DaemonConfig(msgspec.Struct):
    """Daemon connection configuration."""

    url: str = ""
    username: str | None = None
    password: str | None = None
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self):
        if not self.url:
            raise ValueError("Daemon URL is required")

        # Raises ValueError on unsupported schemes
        parse_daemon_url(self.url)

        if self.timeout <= 0:
            raise ValueError(f"Daemon timeout must be positive, got {self.timeout}")


class TransmoteConfig(msgspec.Struct):
    """Transmote main configuration class."""

    global_config: GlobalConfig = msgspec.field(name="global", default_factory=GlobalConfig)
    daemon: DaemonConfig | None = None


def get_user_config_path() -> str:
    """Get configuration file path in user config directory.

    Returns:
        str: Configuration file path.
    """
    return str(Path(user_config_dir(APPNAME)) / "config.yml")


def find_config_path(config_path: str | None = None) -> str:
    """Find configuration file path.

    Args:
        config_path: Specified configuration file path, if None uses user config directory.

    Returns:
        Absolute path of the configuration file.

    Raises:
        FileNotFoundError: Raised when configuration file is not found.
    """
    if config_path:
        path = Path(config_path)
        if path.exists():
            return str(path.absolute())
        raise FileNotFoundError(f"Specified config file not found: {path}")

    user_config_path = Path(get_user_config_path())
    if user_config_path.exists():
        return str(user_config_path.absolute())

    raise FileNotFoundError(f"Config file not found at: {user_config_path}")


def _parse_config(config_path: str) -> dict[str, Any]:
    try:
        with open(config_path, encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
            return config_data or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML config file '{config_path}': {e}") from e
    except OSError as e:
        raise ValueError(f"Error reading config file '{config_path}': {e}") from e


def setup_config(config_path: str | None = None) -> TransmoteConfig:
    """Set up and load configuration.

    Args:
        config_path: Configuration file path, if None auto-detect.

    Returns:
        TransmoteConfig instance.

    Raises:
        ValueError: Raised when configuration loading or validation fails.
    """
    try:
        actual_config_path = find_config_path(config_path)
        config_data = _parse_config(actual_config_path)
        return msgspec.convert(config_data, type=TransmoteConfig)
    except FileNotFoundError as e:
        raise ValueError(f"Configuration file not found: {e}") from e
    except (msgspec.ValidationError, ValueError) as e:
        raise ValueError(f"Error parsing configuration file: {e}") from e


def create_default_config(target_path: str | None = None) -> str:
    """Create default configuration file.

    Args:
        target_path: Target path, if None create in user config directory.

    Returns:
        Created configuration file path.
    """
    path = Path(target_path or get_user_config_path())
    path.parent.mkdir(parents=True, exist_ok=True)

    default_config = {
        "global": {"loglevel": "info"},
        "daemon": {
            "url": "http://localhost:9091/transmission/rpc",
            "username": "admin",
            "password": "your_password_here",
            "timeout": DEFAULT_TIMEOUT,
        },
    }

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(default_config, f, default_flow_style=False, allow_unicode=True, indent=2)

    return str(path)


# Global configuration object
cfg: TransmoteConfig | None = None


def init_config(config_path: str | None = None) -> TransmoteConfig:
    """Initialize global configuration object.

    A default configuration file is written, and the program exits, when no
    configuration file exists yet.

    Args:
        config_path: Configuration file path, if None auto-detect.

    Returns:
        The loaded configuration.

    Raises:
        ValueError: Raised when configuration loading or validation fails.
    """
    global cfg

    try:
        cfg = setup_config(config_path)
    except ValueError as e:
        if not isinstance(e.__cause__, FileNotFoundError):
            raise

        logger.warning("Configuration file not found. Creating default configuration...")
        created_path = create_default_config(config_path)
        logger.success(f"Default configuration created at: {created_path}")
        logger.info("Please edit the configuration file with your settings and run transmote again.")
        sys.exit(0)

    logger.debug(f"Configuration loaded from: {find_config_path(config_path)}")
    return cfg
