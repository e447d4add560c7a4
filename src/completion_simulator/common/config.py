"""Server settings from a YAML file with environment overrides."""
from __future__ import annotations
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CONFIG_PATH = "configs/simulator.yaml"
DEFAULT_PORT = 8081

@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    corpus_path: str = "data/corpus.txt"
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = ("*",)

def load_cfg(path: str) -> dict[str, Any]:
    """Read a YAML mapping; a missing file yields an empty mapping."""
    cfg_file = Path(path)
    if not cfg_file.exists():
        return {}
    with open(cfg_file, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return data

def _origins(value: Any) -> tuple[str, ...]:
    """A single origin string or a list of origins."""
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"cors_origins must be a string or a list, got {value!r}")
    return tuple(str(origin) for origin in value)

def load_settings(
    path: str | None = DEFAULT_CONFIG_PATH,
    env: Mapping[str, str] | None = None,
) -> Settings:
    """
    Build settings: defaults, then YAML values, then environment.

    Args:
        path: YAML config path, or None to skip the file.
        env: Environment mapping; defaults to ``os.environ``.

    Recognised variables are PORT, HOST, CORPUS_PATH and LOG_LEVEL. Empty
    values are ignored, so an empty PORT keeps the default port.
    """
    env = os.environ if env is None else env
    cfg = load_cfg(path) if path else {}

    settings = Settings(
        host=str(cfg.get("host", Settings.host)),
        port=int(cfg.get("port", DEFAULT_PORT)),
        corpus_path=str(cfg.get("corpus_path", Settings.corpus_path)),
        log_level=str(cfg.get("log_level", Settings.log_level)),
        cors_origins=_origins(cfg.get("cors_origins", Settings.cors_origins)),
    )

    if env.get("PORT"):
        settings = replace(settings, port=int(env["PORT"]))
    if env.get("HOST"):
        settings = replace(settings, host=env["HOST"])
    if env.get("CORPUS_PATH"):
        settings = replace(settings, corpus_path=env["CORPUS_PATH"])
    if env.get("LOG_LEVEL"):
        settings = replace(settings, log_level=env["LOG_LEVEL"])
    return settings
