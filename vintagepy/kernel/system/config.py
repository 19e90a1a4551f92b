import logging
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class AppConfig:
    full_jpeg_quality: float
    lightweight_jpeg_quality: float
    resave_jpeg_quality: float
    optimized_jpeg_quality: float
    optimized_max_dimension: int
    thumbnail_size: int
    max_workers: int
    grain_seed: int
    log_level: int


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_log_level(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


# Global application constants
APP_CONFIG = AppConfig(
    full_jpeg_quality=0.92,
    lightweight_jpeg_quality=0.9,
    resave_jpeg_quality=0.9,
    optimized_jpeg_quality=0.8,
    optimized_max_dimension=2048,
    thumbnail_size=150,
    max_workers=max(1, _env_int("VINTAGEPY_MAX_WORKERS", (os.cpu_count() or 1) - 1)),
    grain_seed=_env_int("VINTAGEPY_GRAIN_SEED", 1975),
    log_level=_env_log_level("VINTAGEPY_LOG_LEVEL", logging.INFO),
)
