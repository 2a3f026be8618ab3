"""Runtime configuration for fakestore.

Configuration comes from an optional YAML file and is then overridden by
environment variables, so a container can be pointed at a mounted volume
with nothing but `STORAGE_ROOT=...`:

    storage_backend: filesystem   # or "memory"
    storage_root: /storage
    seed_dir: /seed               # optional tree of raw files to preload
    log_level: INFO
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path, PurePosixPath
from typing import Any, Dict, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_ROOT = "storage"


@dataclass
class Config:
    storage_backend: str = "filesystem"
    storage_root: str = str(PurePosixPath("/", DEFAULT_STORAGE_ROOT))
    seed_dir: Optional[str] = None
    log_level: str = "WARNING"


def load_config(path: Optional[str | Path] = None, environ: Optional[Mapping[str, str]] = None) -> Config:
    """Build a `Config` from an optional YAML file plus environment overrides.

    Recognised environment variables: `STORAGE_ROOT` (always anchored at
    `/`), `STORAGE_BACKEND`, `SEED_DIR` and `LOG_LEVEL`.
    """
    env = os.environ if environ is None else environ
    values: Dict[str, Any] = {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"config file {path} must contain a mapping")
        known = {f.name for f in fields(Config)}
        for key, value in data.items():
            if key in known:
                values[key] = value
            else:
                logger.warning("Ignoring unknown config key %r in %s", key, path)

    if env.get("STORAGE_ROOT"):
        values["storage_root"] = str(PurePosixPath("/", env["STORAGE_ROOT"]))
    if env.get("STORAGE_BACKEND"):
        values["storage_backend"] = env["STORAGE_BACKEND"]
    if env.get("SEED_DIR"):
        values["seed_dir"] = env["SEED_DIR"]
    if env.get("LOG_LEVEL"):
        values["log_level"] = env["LOG_LEVEL"]

    return Config(**values)
