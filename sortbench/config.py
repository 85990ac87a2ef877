"""Configuration loading.

The benchmark is driven by a YAML file (JSON is accepted as well)::

    log_level: INFO
    output_dir: results
    benchmark:
      min_size: 2
      max_size: 200
      value_low: 0
      value_high: 100
      seed: null
      verify: false
      quick_worst_case: true
      log_every: 50
"""

from __future__ import annotations

import json
import os
from dataclasses import fields
from typing import Any, Dict

import yaml

from sortbench.experiments.runner import BenchmarkConfig

DEFAULT_CONFIG_FILE = "config.yaml"
DEFAULT_OUTPUT_DIR = "results"
DEFAULT_LOG_LEVEL = "INFO"


def load_config(config_file: str = DEFAULT_CONFIG_FILE) -> Dict[str, Any]:
    """Load configuration from a YAML (or JSON) file."""
    if not os.path.isfile(config_file):
        raise FileNotFoundError(f"Config file not found: {config_file}")
    with open(config_file, "r", encoding="utf-8") as f:
        text = f.read()
    if config_file.endswith(".json"):
        cfg = json.loads(text)
    else:
        cfg = yaml.safe_load(text)
    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ValueError(f"Config root must be a mapping, got {type(cfg).__name__}")
    return cfg


def build_config(cfg: Dict[str, Any], **overrides: Any) -> BenchmarkConfig:
    """Build ``BenchmarkConfig`` from the ``benchmark`` section.

    Keyword overrides with a value of ``None`` are ignored so CLI flags that
    were not given fall through to the file values.

    Raises:
        ValueError: On unknown keys or invalid ranges.
    """
    section = cfg.get("benchmark") or {}
    if not isinstance(section, dict):
        raise ValueError("'benchmark' section must be a mapping")
    known = {f.name for f in fields(BenchmarkConfig)}
    unknown = set(section) - known
    if unknown:
        raise ValueError(f"Unknown benchmark keys: {', '.join(sorted(unknown))}")
    params = dict(section)
    params.update({k: v for k, v in overrides.items() if v is not None})
    return BenchmarkConfig(**params)
