
"""Tunable defaults and settings validation"""
from typing import Any, Dict

CONFIG: Dict[str, Any] = {
    "ROWS": 20,
    "COLS": 10,
    "CELL_SIZE": 25,
    "GRAVITY_MS": 500,
    "LOCK_DELAY_MS": 300,
    "KEY_REPEAT_MS": 120,
    "HARD_DROP_MS_PER_ROW": 10,
    "CLEAR_ROW_MS": 200,
    "ALLOW_WALL_KICK": True,
    "ALLOW_FLOOR_KICK": True,
    "SEED": None,
}

TIMINGS = ("GRAVITY_MS", "LOCK_DELAY_MS", "KEY_REPEAT_MS", "HARD_DROP_MS_PER_ROW", "CLEAR_ROW_MS")


class ConfigError(ValueError):
    pass


def load_config(**overrides) -> Dict[str, Any]:
    """Return a copy of CONFIG with overrides applied (CONFIG is left untouched)."""
    unknown = sorted(set(overrides) - set(CONFIG))
    if unknown:
        raise ConfigError(f"unknown setting(s): {', '.join(unknown)}")
    cfg = dict(CONFIG)
    cfg.update(overrides)
    return cfg


def validate_config(cfg: Dict[str, Any]) -> None:
    rows, cols = cfg["ROWS"], cfg["COLS"]
    if rows <= 0 or cols <= 0:
        raise ConfigError(f"board dimensions must be positive, got {cols}x{rows}")
    # spawn column is drawn from [0, COLS-3) and every piece takes a forced first step
    if cols < 4:
        raise ConfigError(f"COLS must be at least 4, got {cols}")
    if rows < 2:
        raise ConfigError(f"ROWS must be at least 2, got {rows}")
    for key in TIMINGS:
        if cfg[key] < 0:
            raise ConfigError(f"{key} must not be negative, got {cfg[key]}")
