"""Load page settings from config/settings.yaml and the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from jobboard.log import ENV_PATH, get_logger

log = get_logger(__name__)

load_dotenv(ENV_PATH)

CONFIG_DIR: Path = Path(__file__).resolve().parent.parent / "config"
SETTINGS_PATH: Path = CONFIG_DIR / "settings.yaml"

ZIPPIA_API_URL = "https://www.zippia.com/api/jobs/"


@dataclass
class Settings:
    source: str = "zippia"
    api_url: str = ZIPPIA_API_URL
    job_title: str = "Business Analyst"
    num_jobs: int = 20
    timeout: float = 15.0
    page_size: int = 10
    recency_days: int = 7


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def load_settings(path: str | Path | None = None) -> Settings:
    """Defaults, overridden by the YAML file (if present), then by JOB_SOURCE."""
    path = Path(path) if path is not None else SETTINGS_PATH
    data: dict[str, Any] = {}
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            try:
                loaded = yaml.safe_load(f)
            except yaml.YAMLError as exc:
                raise ValueError(f"{path.name}: {exc}") from exc
        if loaded is not None and not isinstance(loaded, dict):
            raise ValueError(f"{path.name}: expected a mapping, got {type(loaded).__name__}")
        data = loaded or {}
    else:
        log.debug("No settings file at %s, using defaults", path)

    known = {f.name for f in fields(Settings)}
    values: dict[str, Any] = {}
    for key, value in data.items():
        if key not in known:
            log.warning("Ignoring unknown setting %r in %s", key, path.name)
            continue
        values[key] = value

    source = get_env("JOB_SOURCE")
    if source:
        values["source"] = source

    settings = Settings(**values)
    _coerce(settings)
    return settings


def _coerce(settings: Settings) -> None:
    """YAML hands back whatever the user typed; pin numeric fields to their types."""
    try:
        settings.num_jobs = int(settings.num_jobs)
        settings.page_size = int(settings.page_size)
        settings.recency_days = int(settings.recency_days)
        settings.timeout = float(settings.timeout)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid numeric setting: {exc}") from exc
    if settings.page_size < 1:
        raise ValueError("page_size must be at least 1")
    if settings.num_jobs < 1:
        raise ValueError("num_jobs must be at least 1")
    if settings.timeout <= 0:
        raise ValueError("timeout must be greater than 0 seconds")
    settings.source = str(settings.source).strip().lower()
