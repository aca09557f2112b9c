"""Environment-driven runtime settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path


logger = logging.getLogger(__name__)

_DATA_ENV = "TRANSFERVIZ_DATA"
_JITTER_ENV = "TRANSFERVIZ_SCATTER_JITTER"
_JITTER_SEED_ENV = "TRANSFERVIZ_JITTER_SEED"
_MAX_DATASETS_ENV = "TRANSFERVIZ_MAX_DATASETS"

DEFAULT_DATA_PATH = Path("All_Trans_2000_2024_Top5Leagues.csv")
_JITTER_DEFAULT = 0.35
_MAX_DATASETS_DEFAULT = 20


@dataclass(frozen=True)
class Settings:
    data_path: Path = DEFAULT_DATA_PATH
    scatter_jitter: float = _JITTER_DEFAULT
    jitter_seed: int | None = None
    max_datasets: int = _MAX_DATASETS_DEFAULT


def _env_float(name: str, default: float, *, clamp_min: float | None = None, clamp_max: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    if clamp_max is not None:
        value = min(clamp_max, value)
    return value


def _env_int(name: str, default: int | None, *, min_value: int | None = None) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %s", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def load_settings() -> Settings:
    data_path = os.getenv(_DATA_ENV)
    max_datasets = _env_int(_MAX_DATASETS_ENV, _MAX_DATASETS_DEFAULT, min_value=1)
    return Settings(
        data_path=Path(data_path) if data_path else DEFAULT_DATA_PATH,
        scatter_jitter=_env_float(_JITTER_ENV, _JITTER_DEFAULT, clamp_min=0.0, clamp_max=1.0),
        jitter_seed=_env_int(_JITTER_SEED_ENV, None),
        max_datasets=max_datasets if max_datasets is not None else _MAX_DATASETS_DEFAULT,
    )
