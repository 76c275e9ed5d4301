# interim/config.py
"""
Load YAML config and env overrides.

Config precedence (low → high):
  1) Defaults in code
  2) YAML file: ~/.interim.yml or ~/.interim.yaml
  3) Environment variables: INTERIM_DIALECT, INTERIM_TZ, INTERIM_FORMAT
  4) CLI options

Example ~/.interim.yml:
  dialect: us              # or "uk"
  timezone: Europe/London  # empty → local zone
  format: "%a %d %b %Y %H:%M %Z"   # or "iso"
"""
from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

from .model import Dialect

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "dialect": "uk",
    "timezone": None,
    "format": "iso",
}

ENV = {
    "INTERIM_DIALECT": "dialect",
    "INTERIM_TZ": "timezone",
    "INTERIM_FORMAT": "format",
}


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        data = yaml.safe_load(path.read_text())
    except (OSError, yaml.YAMLError) as e:
        logger.warning("ignoring unreadable config %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: expected a mapping", path)
        return {}
    return data


def load(home: Optional[Path] = None) -> Dict[str, Any]:
    cfg = DEFAULTS.copy()
    home = home or Path.home()
    for fname in (".interim.yml", ".interim.yaml"):
        data = _read_yaml(home / fname)
        if data:
            cfg.update({k: v for k, v in data.items() if k in DEFAULTS})
            break

    # env overrides
    for var, key in ENV.items():
        val = os.getenv(var)
        if val and val.strip():
            cfg[key] = val.strip()

    return cfg


def dialect_from(value: Any) -> Dialect:
    # YAML may hand over numbers or booleans
    key = str(value).strip().lower() if value is not None else ""
    key = key or DEFAULTS["dialect"]
    try:
        return Dialect(key)
    except ValueError:
        raise ValueError(f"unknown dialect {value!r} (use uk|us)") from None


def tzinfo_from(name: Optional[str]) -> Optional[ZoneInfo]:
    """None/empty means the local zone."""
    if not name or not str(name).strip():
        return None
    try:
        return ZoneInfo(str(name).strip())
    except (ZoneInfoNotFoundError, ValueError):
        raise ValueError(f"unknown timezone {name!r}") from None
