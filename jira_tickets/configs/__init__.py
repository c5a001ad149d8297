"""
Configuration module for the Jira ticket viewer.

This module handles loading configuration from YAML files and environment variables.
"""

from .config import (
    Config,
    ConfigError,
    DEFAULT_JQL,
    DEFAULT_MAX_RESULTS,
    load_config,
    setup_logging,
)

__all__ = [
    "Config",
    "ConfigError",
    "DEFAULT_JQL",
    "DEFAULT_MAX_RESULTS",
    "load_config",
    "setup_logging",
]
