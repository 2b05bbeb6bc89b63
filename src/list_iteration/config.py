"""Load benchmark settings from ``benchmark_config.toml``."""

from __future__ import annotations

import dataclasses
import tomllib
from dataclasses import dataclass
from pathlib import Path

from .harness import LIST_SIZE, UNITS

DEFAULT_CONFIG_FILE = Path(__file__).parent.resolve() / "benchmark_config.toml"
LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class ConfigError(Exception):
    """Raised for a missing, unreadable or invalid benchmark config."""


@dataclass(frozen=True)
class BenchmarkConfig:
    list_size: int = LIST_SIZE
    unit: str = "ms"
    log_level: str = "INFO"
    log_file: Path | None = None

    def __post_init__(self):
        if isinstance(self.list_size, bool) or not isinstance(self.list_size, int):
            raise ConfigError(f"list_size must be an integer, got {self.list_size!r}")
        if self.list_size <= 0:
            raise ConfigError(f"list_size must be positive, got {self.list_size}")
        if not isinstance(self.unit, str) or self.unit not in UNITS:
            raise ConfigError(f"unit must be one of {sorted(UNITS)}, got {self.unit!r}")
        if not isinstance(self.log_level, str) or self.log_level not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}")

    def with_overrides(self, **overrides) -> BenchmarkConfig:
        """Return a copy with every non-``None`` override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(self, **changes)


def _upper(value):
    return value.upper() if isinstance(value, str) else value


def _table(cfg: dict, name: str) -> dict:
    table = cfg.get(name, {})
    if not isinstance(table, dict):
        raise ConfigError(f"[{name}] must be a table, got {table!r}")
    return table


def load_config(path: Path | str | None = None) -> BenchmarkConfig:
    config_file = Path(path) if path is not None else DEFAULT_CONFIG_FILE

    if not config_file.is_file():
        raise ConfigError(f"{config_file} not found")

    try:
        with open(config_file, "rb") as f:
            cfg = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigError(f"{config_file}: {e}") from e

    b = _table(cfg, "benchmark")
    o = _table(cfg, "output")

    log_file = o.get("log_file") or None
    if log_file is not None:
        if not isinstance(log_file, str):
            raise ConfigError(f"log_file must be a string, got {log_file!r}")
        log_file = Path(log_file)
        if not log_file.is_absolute():
            log_file = config_file.parent / log_file

    return BenchmarkConfig(
        list_size=b.get("list_size", LIST_SIZE),
        unit=b.get("unit", "ms"),
        log_level=_upper(o.get("log_level", "INFO")),
        log_file=log_file,
    )
