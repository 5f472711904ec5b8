"""Configuration models with Pydantic validation."""

from lintignore.domain.config.app import AppConfig
from lintignore.domain.config.ignore import IgnoreConfig

__all__ = [
    "AppConfig",
    "IgnoreConfig",
]
