"""Workflow config loading with layered overrides.

Priority chain: bundled defaults < ~/.config/branchflow/config.yaml < .branchflow/config.yaml
Deep merge: dicts merge recursively, lists/scalars replace.

The merged mapping is converted once into an immutable WorkflowConfig which the
CLI hands to every workflow; nothing downstream reads config on its own.
"""

import importlib.resources
from pathlib import Path
from typing import Optional

import yaml

from branchflow.config.utils import ConfigError, deep_merge, load_yaml, require
from branchflow.models.core import ReleaseTarget, WorkflowConfig

_config: Optional[dict] = None
_loaded_sources: list[str] = []

GLOBAL_CONFIG = Path.home() / ".config" / "branchflow" / "config.yaml"
PROJECT_CONFIG = Path(".branchflow") / "config.yaml"


def _load_defaults() -> dict:
    """Load bundled default config."""
    try:
        files = importlib.resources.files("branchflow")
        content = (files / "defaults" / "config.yaml").read_text()
        return yaml.safe_load(content)
    except (FileNotFoundError, TypeError):
        dev_path = Path(__file__).parent.parent / "defaults" / "config.yaml"
        if dev_path.exists():
            with open(dev_path) as f:
                return yaml.safe_load(f)
        raise FileNotFoundError("Could not find defaults/config.yaml")


def load_config() -> dict:
    """Load config with layered overrides: defaults < global < project."""
    global _loaded_sources
    _loaded_sources = []

    result = _load_defaults()
    _loaded_sources.append("defaults")

    for path in (GLOBAL_CONFIG, PROJECT_CONFIG):
        overrides = load_yaml(path)
        if overrides:
            result = deep_merge(result, overrides)
            _loaded_sources.append(str(path))

    return result


def get_config() -> dict:
    """Get cached config (loads on first access)."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def get_config_loaded_sources() -> list[str]:
    """Return list of config sources that were loaded (for logging)."""
    return _loaded_sources


def _release_target(data: dict, section: str) -> ReleaseTarget:
    block = require(data, section)
    if not isinstance(block, dict):
        raise ConfigError(f"{section}: expected a mapping")
    return ReleaseTarget(
        head=str(require(block, "head", section)),
        base=str(require(block, "base", section)),
        environment=str(require(block, "environment", section)),
    )


def to_workflow_config(data: dict) -> WorkflowConfig:
    """Validate a merged config mapping and freeze it."""
    prefixes = require(data, "ticket_prefixes")
    if isinstance(prefixes, str):
        prefixes = [prefixes]
    prefixes = tuple(str(p).strip() for p in prefixes if str(p).strip())
    if not prefixes:
        raise ConfigError("ticket_prefixes must list at least one prefix")

    ticket_url = str(require(data, "ticket_url"))
    if "{ticket}" not in ticket_url:
        raise ConfigError("ticket_url must contain a {ticket} placeholder")
    release_url = str(require(data, "release_url"))
    if "{release_id}" not in release_url:
        raise ConfigError("release_url must contain a {release_id} placeholder")

    return WorkflowConfig(
        project_path=Path(str(require(data, "project_path"))).expanduser().resolve(),
        remote=str(data.get("remote") or "origin"),
        ticket_prefixes=prefixes,
        ticket_url=ticket_url,
        release_url=release_url,
        release_pr=_release_target(data, "release_pr"),
        stable_release_pr=_release_target(data, "stable_release_pr"),
    )


def load_workflow_config() -> WorkflowConfig:
    """Load (cached) layered config and convert it to a WorkflowConfig."""
    return to_workflow_config(get_config())
