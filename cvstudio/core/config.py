from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

STARTER_STRATEGIES = {"random", "round_robin"}


def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_int(name: str, default: int | None) -> int | None:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    log_level: str
    max_upload_bytes: int
    starter_strategy: str
    starter_seed: int | None
    default_job_field: str
    storage_dir: str | None
    max_sessions: int


settings = Settings(
    log_level=(_get_env("LOG_LEVEL", "INFO") or "INFO").upper(),
    max_upload_bytes=_get_env_int("MAX_UPLOAD_BYTES", 10 * 1024 * 1024) or 10 * 1024 * 1024,
    starter_strategy=(_get_env("STARTER_STRATEGY", "random") or "random").strip().lower(),
    starter_seed=_get_env_int("STARTER_SEED", None),
    default_job_field=_get_env("DEFAULT_JOB_FIELD", "General") or "General",
    storage_dir=_get_env("STORAGE_DIR"),
    max_sessions=max(_get_env_int("MAX_SESSIONS", 1000) or 1000, 1),
)

if settings.starter_strategy not in STARTER_STRATEGIES:
    raise RuntimeError("STARTER_STRATEGY must be either 'random' or 'round_robin'.")
