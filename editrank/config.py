"""Run configuration: defaults, optional YAML file, command-line flags."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional

import yaml

from editrank.ranking.distance import ENGINES, DEFAULT_ENGINE
from editrank.ranking.io import DEFAULT_SEPARATOR
from editrank.shared.log import debug

DEFAULT_CONFIG_NAMES = ("editrank.yaml", ".editrank.yaml")


@dataclass
class RankConfig:
    ignore_case: bool = False
    substitutions: Optional[str] = None
    reverse: bool = False
    scale: bool = False
    separator: str = DEFAULT_SEPARATOR
    engine: str = DEFAULT_ENGINE
    regex_rules: bool = False
    precision: Optional[int] = None

    def validate(self) -> None:
        for name in ("ignore_case", "reverse", "scale", "regex_rules"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(f"{name} must be true or false, got {value!r}")
        for name in ("engine", "separator"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise ValueError(f"{name} must be a string, got {value!r}")
        if self.substitutions is not None and not isinstance(self.substitutions, str):
            raise ValueError(f"substitutions must be a path, got {self.substitutions!r}")
        if self.engine not in ENGINES:
            raise ValueError(f"unknown engine {self.engine!r} (choose from {', '.join(sorted(ENGINES))})")
        if self.precision is not None:
            # bool is an int subclass.
            if isinstance(self.precision, bool) or not isinstance(self.precision, int):
                raise ValueError(f"precision must be an integer, got {self.precision!r}")
            if self.precision < 0:
                raise ValueError(f"precision must be >= 0, got {self.precision}")


CONFIG_KEYS = {f.name for f in fields(RankConfig)}


def _candidate_config_paths(config_path: Optional[str]) -> List[str]:
    if config_path:
        return [config_path]
    return [os.path.join(os.getcwd(), name) for name in DEFAULT_CONFIG_NAMES]


def load_config_file(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load the first config file found; an explicit path must exist.

    Returns {} when no path was given and no default file is present.
    """
    for p in _candidate_config_paths(config_path):
        if not config_path and not os.path.isfile(p):
            continue
        with open(p, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"invalid YAML in {p}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"config root must be a mapping: {p}")
        unknown = sorted(set(data) - CONFIG_KEYS)
        if unknown:
            raise ValueError(f"unknown config key(s) in {p}: {', '.join(unknown)}")
        subs = data.get("substitutions")
        if isinstance(subs, str) and subs and not os.path.isabs(subs):
            # Relative rule paths are relative to the config file.
            data["substitutions"] = os.path.join(os.path.dirname(os.path.abspath(p)), subs)
        debug(f"loaded config from {p}")
        return dict(data)
    return {}


def build_config(args: Any) -> RankConfig:
    """Merge defaults, the config file, then flags present on the args namespace."""
    values: Dict[str, Any] = load_config_file(getattr(args, "config", None))
    for key in CONFIG_KEYS:
        if hasattr(args, key):
            values[key] = getattr(args, key)
    cfg = RankConfig(**values)
    cfg.validate()
    return cfg
