"""Load defaults and report strings from config.yml."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

# Resolved against the working directory unless an absolute path is given
_CONFIG_PATH = Path(os.environ.get("DOMAIN_VALIDATOR_CONFIG_PATH", "config.yml"))

_DEFAULT_OUTPUT = {
    "tld_line": "Valid TLD? {valid}, {domain}",
    "domain_line": "Valid Domain? {valid}, {domain}",
}

_cache: dict | None = None


def _load() -> dict:
    global _cache
    if _cache is None:
        with open(_CONFIG_PATH) as f:
            _cache = yaml.safe_load(f) or {}
    return _cache


def _load_optional() -> dict:
    try:
        return _load()
    except (FileNotFoundError, OSError):
        return {}


def reset_cache() -> None:
    global _cache
    _cache = None


def get_defaults() -> dict:
    """Return the defaults section, or empty dict if config is unavailable."""
    return _load_optional().get("defaults") or {}


def get_output_strings() -> dict[str, str]:
    return {**_DEFAULT_OUTPUT, **(_load_optional().get("output") or {})}
