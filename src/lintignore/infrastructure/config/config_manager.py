"""Configuration manager for loading and validating .lintignore.yml files"""

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

import yaml
from pydantic import ValidationError

from lintignore.domain.config import AppConfig, IgnoreConfig
from lintignore.domain.exceptions import ConfigurationError
from lintignore.domain.models.ignore_pattern import IgnorePattern

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".lintignore.yml"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def discover_configs(start_dir: Path) -> List[Tuple[Path, Dict[str, Any]]]:
    """Find and parse config files from start_dir up to the filesystem root

    Stops after the first file declaring ``root: true``. Each file is read once.

    Args:
        start_dir: Directory to start searching from

    Returns:
        (path, raw config) pairs, nearest first
    """
    current = Path(os.path.abspath(start_dir))
    found = []
    for parent in [current] + list(current.parents):
        config_file = parent / CONFIG_FILE_NAME
        if not config_file.is_file():
            continue
        logger.info(f"Found config file: {config_file}")
        file_config = _read_yaml(config_file)
        found.append((config_file, file_config))
        if file_config.get("root") is True:
            logger.debug(f"{config_file} is a root config, stopping search")
            break
    if not found:
        logger.debug(f"No {CONFIG_FILE_NAME} found, using defaults")
    return found


def find_config_files(start_dir: Path) -> List[Path]:
    """Find config file paths, nearest first (see discover_configs)"""
    return [path for path, _ in discover_configs(start_dir)]


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to load config from {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def _format_validation_error(path: Optional[Path], error: ValidationError) -> str:
    errors = []
    for item in error.errors():
        field = ".".join(str(x) for x in item["loc"])
        errors.append(f"  - {field}: {item['msg']}")
    source = f" ({path})" if path else ""
    return f"Configuration validation failed{source}:\n" + "\n".join(errors)


class ConfigManager:
    """Manages configuration from .lintignore.yml files and environment variables

    Configuration files cascade: every ``.lintignore.yml`` from the working
    directory up to the first one with ``root: true`` contributes its ignore
    patterns, anchored at its own directory. Scalar options come from the
    nearest file. Configuration priority:
    1. Default values (defined in Pydantic models)
    2. .lintignore.yml files, farther ones first
    3. Environment variables (LINTIGNORE_*)
    4. CLI arguments (handled by CLI layer)
    """

    DEFAULT_CONFIG = {
        "root": False,
        "ignore": {
            "patterns": [],
            "dot": False,
            "ignore_file": ".lintignore",
            "use_ignore_file": True,
        },
    }

    def __init__(
        self,
        config_path: Optional[Path] = None,
        cwd: Optional[Path] = None,
        env: Optional[Mapping[str, str]] = None,
    ):
        """Initialize config manager

        Args:
            config_path: Explicit config file; disables the upward search
            cwd: Directory the upward search starts from (current dir if None)
            env: Environment mapping (os.environ if None)

        Raises:
            ConfigurationError: If a configuration file is invalid
        """
        if isinstance(config_path, str):
            config_path = Path(config_path)
        self.cwd = Path(os.path.abspath(cwd)) if cwd is not None else Path.cwd()
        self.env = os.environ if env is None else env

        if config_path is not None:
            explicit = Path(os.path.abspath(config_path))
            discovered = [(explicit, _read_yaml(explicit))]
        else:
            discovered = discover_configs(self.cwd)
        self.config_paths = [path for path, _ in discovered]

        # Farthest first so nearer files override
        self.sources: List[Tuple[Path, AppConfig]] = []
        merged = copy.deepcopy(self.DEFAULT_CONFIG)
        for path, file_config in reversed(discovered):
            self.sources.append((path, self._validate(file_config, path)))
            merged = self._merge_config(merged, file_config)
            logger.info(f"Loaded configuration from {path}")

        merged = self._apply_env_overrides(merged)
        self.config: AppConfig = self._validate(merged, None)

    def _validate(self, config_dict: Dict[str, Any], path: Optional[Path]) -> AppConfig:
        try:
            return AppConfig(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(_format_validation_error(path, e)) from e

    def _merge_config(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge configuration dictionaries

        Args:
            base: Base configuration
            override: Override configuration

        Returns:
            Merged configuration
        """
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_config(result[key], value)
            else:
                result[key] = value
        return result

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides

        Args:
            config: Configuration dictionary

        Returns:
            Configuration with env overrides applied
        """
        if self.env.get("LINTIGNORE_DOT"):
            config["ignore"]["dot"] = self.env["LINTIGNORE_DOT"].lower() in _TRUE_VALUES

        if self.env.get("LINTIGNORE_NO_IGNORE_FILE", "").lower() in _TRUE_VALUES:
            config["ignore"]["use_ignore_file"] = False

        return config

    def get_ignore_config(self) -> IgnoreConfig:
        """Get effective ignore configuration

        Returns:
            Ignore configuration model
        """
        return self.config.ignore

    def get_ignore_patterns(self) -> List[IgnorePattern]:
        """Get the ignore patterns of every loaded config file

        Returns:
            One IgnorePattern per file that declares patterns, anchored at the
            file's directory, farther files first
        """
        return [
            IgnorePattern(list(app_config.ignore.patterns), str(path.parent))
            for path, app_config in self.sources
            if app_config.ignore.patterns
        ]

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by key (supports dot notation)

        Args:
            key: Configuration key (e.g., "ignore.dot" or "ignore")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        keys = key.split(".")
        value = self.config.model_dump()
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value
