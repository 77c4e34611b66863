"""
================================================================================
Bank Test Tools Common Utilities
================================================================================

This module provides configuration management and logging setup shared by
the UI framework, the pytest configuration and the test runner.

Exports:
    - GlobalConfig: Singleton configuration manager
    - get_config: Convenience function to get configuration values
    - init_logger: Function to initialize loguru logger with standard settings

Usage:
    from bank_tools.common import get_config, init_logger

    init_logger()
    base_url = get_config("ui.base_url", "http://localhost:8080")

================================================================================
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger


DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "config.yaml"

DEFAULT_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


class ConfigurationError(Exception):
    """Raised when the configuration file or an override value is invalid."""
    pass


# ============================================================
# Configuration Management
# ============================================================

class GlobalConfig:
    """
    Singleton class to manage the suite configuration.

    Loads settings from the YAML configuration file and environment variables.
    Environment variables take precedence over file-based configuration.
    """
    _instance: Optional["GlobalConfig"] = None

    # Environment variable -> dot-notation config key
    ENV_MAPPING: Dict[str, str] = {
        "UI_BASE_URL": "ui.base_url",
        "UI_BROWSER": "ui.browser",
        "UI_HEADLESS": "ui.headless",
        "UI_SLOW_MO": "ui.slow_mo",
        "UI_TIMEOUT": "ui.default_timeout",
        "UI_RUN_E2E": "ui.run_e2e",
        "SCREENSHOT_DIR": "paths.screenshots",
        "LOG_LEVEL": "logging.level",
        "LOG_FILE": "logging.file",
    }

    def __new__(cls, config_path: Optional[Path] = None) -> "GlobalConfig":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None):
        if self._initialized:
            return
        self._config_path = Path(config_path or os.getenv("BANK_CONFIG", DEFAULT_CONFIG_PATH))
        self._config: Dict[str, Any] = {}
        self._load_configs()
        self._initialized = True

    def _load_configs(self) -> None:
        """
        Loads configurations from the YAML file and environment variables.
        """
        if self._config_path.exists():
            try:
                with open(self._config_path, "r", encoding="utf-8") as f:
                    self._config = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(
                    f"Invalid YAML in configuration file {self._config_path}: {e}"
                ) from e
            logger.debug(f"Loaded configuration from {self._config_path}")
        else:
            logger.warning(
                f"Configuration file not found: {self._config_path}. "
                f"Using defaults and environment variables only."
            )

        for env_key, config_key in self.ENV_MAPPING.items():
            if env_key in os.environ:
                self._set_nested(config_key, os.environ[env_key])

    def _set_nested(self, key: str, value: Any) -> None:
        """
        Sets a nested configuration value using dot notation.
        """
        keys = key.split(".")
        current = self._config
        for k in keys[:-1]:
            if not isinstance(current.get(k), dict):
                current[k] = {}
            current = current[k]
        current[keys[-1]] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Retrieves a configuration value using dot notation.

        Values coming from environment variables are strings; they are
        converted to the type of ``default`` when one is given.

        Args:
            key: Configuration key (e.g., "ui.base_url")
            default: Default value if key is not found

        Returns:
            Configuration value or default
        """
        value: Any = self._config
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        if isinstance(value, str):
            try:
                return _convert_type(value, default)
            except ValueError as e:
                raise ConfigurationError(
                    f"Invalid value {value!r} for {key}: expected {type(default).__name__}"
                ) from e
        return value

    def set(self, key: str, value: Any) -> None:
        """
        Sets a configuration value.

        Args:
            key: Configuration key (e.g., "ui.headless")
            value: Value to set
        """
        self._set_nested(key, value)

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton so the next access reloads file and environment."""
        cls._instance = None


def _convert_type(value: str, reference: Any) -> Any:
    """
    Convert a string value to match the reference type.

    Raises:
        ValueError: the value is not a valid int or float
    """
    if reference is None or isinstance(reference, str):
        return value
    if isinstance(reference, bool):
        return value.strip().lower() in ("true", "1", "yes", "on")
    if isinstance(reference, int):
        return int(value)
    if isinstance(reference, float):
        return float(value)
    return value


def get_config(key: str, default: Any = None) -> Any:
    """
    Convenience function to get a configuration value.

    Args:
        key: Configuration key using dot notation
        default: Default value if not found

    Returns:
        Configuration value or default

    Example:
        headless = get_config("ui.headless", True)
    """
    return GlobalConfig().get(key, default)


def set_config(key: str, value: Any) -> None:
    """
    Convenience function to set a configuration value.

    Args:
        key: Configuration key using dot notation
        value: Value to set
    """
    GlobalConfig().set(key, value)


def reset_config() -> None:
    """Forget the loaded configuration (used by unit tests)."""
    GlobalConfig.reset()


# ============================================================
# Logging Setup
# ============================================================

_logger_initialized = False


def init_logger(
    level: str = None,
    format_string: str = None,
    log_file: str = None,
    force: bool = False,
) -> None:
    """
    Initializes the loguru logger with standard settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_string: Log format string. Uses default if not provided.
        log_file: Optional file path to write logs to.
        force: Re-initialize even if already configured.

    Example:
        init_logger()  # Use defaults
        init_logger(level="DEBUG", log_file="logs/ui.log")
    """
    global _logger_initialized

    if _logger_initialized and not force:
        return

    logger.remove()

    level = (level or get_config("logging.level", "INFO")).upper()
    format_string = format_string or get_config("logging.format", DEFAULT_LOG_FORMAT)

    logger.add(
        sys.stderr,
        format=format_string,
        level=level,
        colorize=True,
    )

    log_file = log_file or get_config("logging.file")
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        logger.add(
            log_file,
            format=format_string,
            level=level,
            rotation=get_config("logging.rotation", "10 MB"),
            retention=get_config("logging.retention", "7 days"),
        )

    _logger_initialized = True
    logger.debug("Logger initialized successfully")


# ============================================================
# Common Utilities
# ============================================================

def ensure_directory(path) -> Path:
    """
    Ensures a directory exists, creating it if necessary.

    Args:
        path: Directory path

    Returns:
        The path as a ``Path`` (for chaining)
    """
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


# Export public API
__all__ = [
    "ConfigurationError",
    "GlobalConfig",
    "get_config",
    "set_config",
    "reset_config",
    "init_logger",
    "ensure_directory",
]
