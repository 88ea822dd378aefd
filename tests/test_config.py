from __future__ import annotations

import pytest

from tetris_config import CONFIG, ConfigError, load_config, validate_config


def test_load_config_copies_defaults() -> None:
    cfg = load_config(GRAVITY_MS=250)
    assert cfg["GRAVITY_MS"] == 250
    assert CONFIG["GRAVITY_MS"] == 500
    assert cfg is not CONFIG


def test_unknown_setting_rejected() -> None:
    with pytest.raises(ConfigError, match="SPEED"):
        load_config(SPEED=3)


@pytest.mark.parametrize(
    "overrides",
    [{"ROWS": 0}, {"COLS": -1}, {"COLS": 3}, {"ROWS": 1}, {"LOCK_DELAY_MS": -5}],
)
def test_malformed_settings(overrides: dict) -> None:
    with pytest.raises(ConfigError):
        validate_config(load_config(**overrides))


def test_defaults_are_valid() -> None:
    validate_config(load_config())
