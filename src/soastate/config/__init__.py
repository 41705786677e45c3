"""Application configuration helpers."""

from __future__ import annotations

from .database import ProviderConfig, get_provider_config
from .env import optional_env_var, optional_int_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError

__all__ = [
    "ConfigurationError",
    "MissingConfigurationError",
    "ProviderConfig",
    "get_provider_config",
    "optional_env_var",
    "optional_int_env_var",
    "require_env_vars",
]
