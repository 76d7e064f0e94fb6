"""Configuration file overrides for runtime tunables.

Loads an optional YAML file and applies the keys it knows onto ``Constants``.
CLI flags are applied afterwards by the entrypoint and therefore win.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import yaml

from constants import Constants
from versioning.errors import InputError

logger = logging.getLogger(__name__)

# config key -> (Constants attribute, coercion)
_CONFIG_KEYS = {
    "hexpm_mirrors": ("HEXPM_MIRRORS", lambda v: [str(m) for m in v]),
    "request_timeout": ("REQUEST_TIMEOUT", int),
    "http_retry_max": ("HTTP_RETRY_MAX", int),
    "http_retry_base_delay_sec": ("HTTP_RETRY_BASE_DELAY_SEC", float),
    "release_pages": ("RELEASE_PAGES", lambda v: [int(p) for p in v]),
}


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load the YAML config at ``path`` (or $BEAMVER_CONFIG); empty when unset.

    Raises:
        InputError: the file is missing or is not a YAML mapping.
    """
    config_path = path or os.environ.get(Constants.ENV_CONFIG)
    if not config_path:
        return {}
    if not os.path.isfile(config_path):
        raise InputError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh) or {}
        except yaml.YAMLError as exc:
            raise InputError(f"Failed to parse config {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise InputError(f"Config {config_path} must be a mapping")
    logger.info("Loaded config from: %s", config_path)
    return data


def apply_config(config: Dict[str, Any]) -> None:
    """Apply known config keys onto ``Constants``; unknown keys are logged and ignored."""
    for key, value in config.items():
        if key not in _CONFIG_KEYS:
            logger.warning("Ignoring unknown config key: %s", key)
            continue
        attr, convert = _CONFIG_KEYS[key]
        try:
            setattr(Constants, attr, convert(value))
        except (TypeError, ValueError) as exc:
            raise InputError(f"Invalid value for {key}: {value!r}") from exc
