from __future__ import annotations
from pathlib import Path
from typing import Any, Dict
import yaml

DEFAULTS: Dict[str, Any] = {
    "max_solutions": 2,
    "time_limit_ms": 800,
    "max_steps": 10000,
    "max_trace_steps": 5000,
    "poll_every_nodes": 5000,
}

class DotDict(dict):
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__

def load_yaml(path: str | Path) -> DotDict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return DotDict(data)

def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg

def load_config(path: str | Path | None = None, **overrides) -> DotDict:
    """Defaults, then the YAML file (if any), then non-None keyword overrides."""
    cfg = DotDict(DEFAULTS)
    if path is not None:
        data = load_yaml(path)
        unknown = sorted(set(data) - set(DEFAULTS))
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        cfg.update(data)
    merge_overrides(cfg, **overrides)
    return cfg
