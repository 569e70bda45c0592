"""Runtime settings for the org hierarchy console.

All settings can be overridden via environment variables or by passing
values directly to ``HierarchyConfig``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _parse_bool(value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "f", "no", "n", "off"}:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


@dataclass
class HierarchyConfig:
    """Settings shared by the tree, the exporter and the console."""

    export_path: str = "employees.txt"
    enforce_unique_ids: bool = True
    clear_screen: bool = True
    log_level: str = "WARNING"


def load_config(**overrides) -> HierarchyConfig:
    """Build a HierarchyConfig with env-var and keyword overrides.

    Resolution order (later wins):
      1. Dataclass defaults
      2. Environment variables (``ORG_HIERARCHY_EXPORT_PATH``, etc.)
      3. Explicit keyword arguments

    Supported env vars:
      - ORG_HIERARCHY_EXPORT_PATH
      - ORG_HIERARCHY_UNIQUE_IDS  ("true"/"false")
      - ORG_HIERARCHY_CLEAR_SCREEN  ("true"/"false")
      - ORG_HIERARCHY_LOG_LEVEL  (DEBUG, INFO, ...)
    """
    cfg = HierarchyConfig()

    # Env-var layer
    export_path = os.getenv("ORG_HIERARCHY_EXPORT_PATH")
    if export_path:
        cfg.export_path = export_path

    unique_ids = os.getenv("ORG_HIERARCHY_UNIQUE_IDS")
    if unique_ids is not None:
        cfg.enforce_unique_ids = _parse_bool(unique_ids)

    clear_screen = os.getenv("ORG_HIERARCHY_CLEAR_SCREEN")
    if clear_screen is not None:
        cfg.clear_screen = _parse_bool(clear_screen)

    log_level = os.getenv("ORG_HIERARCHY_LOG_LEVEL")
    if log_level:
        cfg.log_level = log_level.strip().upper()

    # Explicit overrides layer
    for key, value in overrides.items():
        if hasattr(cfg, key):
            setattr(cfg, key, value)
        else:
            raise TypeError(f"Unknown config key: {key!r}")

    return cfg
