from __future__ import annotations

import logging
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Dict


_TRUTHY = {"1", "true", "yes", "on"}


def _load_env_file(env_path: Path) -> Dict[str, str]:
    data: Dict[str, str] = {}
    if not env_path.exists():
        return data
    for line in env_path.read_text(encoding="utf-8").splitlines():
        s = line.strip()
        if not s or s.startswith("#") or "=" not in s:
            continue
        k, v = s.split("=", 1)
        k = k.strip()
        v = v.strip().strip('"').strip("'")
        data[k] = v
    return data


def _ensure_env_loaded() -> None:
    # soft load: real environment wins over .env
    loaded = _load_env_file(Path.cwd() / ".env")
    for k, v in loaded.items():
        os.environ.setdefault(k, v)


def _env_int(name: str, default: int, minimum: int | None = None) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if minimum is not None and value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUTHY


def _env_log_level(name: str, default: str) -> str:
    level = os.environ.get(name, default).strip().upper() or default
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{name} must be a logging level name, got {level!r}")
    return level


@dataclass
class Settings:
    sample_size: int = 10
    secure_random: bool = False
    log_level: str = "WARNING"
    log_dir: Path | None = None


def load_settings() -> Settings:
    _ensure_env_loaded()
    log_dir = os.environ.get("LOG_DIR")
    return Settings(
        sample_size=_env_int("RESERVOIR_SAMPLE_SIZE", 10, minimum=0),
        secure_random=_env_bool("RESERVOIR_SECURE_RANDOM", False),
        log_level=_env_log_level("LOG_LEVEL", "WARNING"),
        log_dir=Path(log_dir).resolve() if log_dir else None,
    )


def ensure_dirs(s: Settings) -> None:
    if s.log_dir is not None:
        s.log_dir.mkdir(parents=True, exist_ok=True)
