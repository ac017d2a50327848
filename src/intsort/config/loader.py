from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_CONFIG: Dict[str, Any] = {
    "paths": {
        "input": "input.txt",
        "output": "output.txt",
    },
    "logging": {
        "level": "INFO",
        "log_file": None,
    },
    "runtime": {
        "show_progress": False,
        "show_summary": True,
    },
}


class ConfigError(ValueError):
    pass


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Config file is not valid YAML: {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must be a YAML mapping: {path}")
    return data


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _validate(cfg: Dict[str, Any]) -> Dict[str, Any]:
    for section in ("paths", "logging", "runtime"):
        if not isinstance(cfg.get(section), dict):
            raise ConfigError(f"Config section '{section}' must be a mapping")

    for key in ("input", "output"):
        v = cfg["paths"].get(key)
        if not isinstance(v, str) or not v.strip():
            raise ConfigError(f"paths.{key} must be a non-empty string")

    level = str(cfg["logging"].get("level", "INFO")).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"logging.level must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    cfg["logging"]["level"] = level

    log_file = cfg["logging"].get("log_file")
    if log_file is not None and not isinstance(log_file, str):
        raise ConfigError("logging.log_file must be a path string or null")

    for key in ("show_progress", "show_summary"):
        if not isinstance(cfg["runtime"].get(key), bool):
            raise ConfigError(f"runtime.{key} must be true or false")
    return cfg


def load_config(
    config_path: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Build the run config: defaults <- YAML file <- overrides (e.g. CLI flags)."""
    merged = copy.deepcopy(DEFAULT_CONFIG)
    if config_path:
        merged = _deep_merge(merged, _load_yaml(Path(config_path)))
    if overrides:
        merged = _deep_merge(merged, overrides)
    return _validate(merged)
