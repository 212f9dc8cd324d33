"""Configuration loading for workflow settings."""

from branchflow.config.settings import (
    get_config,
    get_config_loaded_sources,
    load_workflow_config,
    to_workflow_config,
)
from branchflow.config.utils import ConfigError

__all__ = [
    "ConfigError",
    "get_config",
    "get_config_loaded_sources",
    "load_workflow_config",
    "to_workflow_config",
]
