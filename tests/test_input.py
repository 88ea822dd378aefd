from __future__ import annotations

from tetris_input import ACTIONS, KeyRepeat


def test_due_once_per_interval() -> None:
    k = KeyRepeat(120)
    k.press("L", 1000)
    assert not k.due(1119)
    assert k.due(1120)
    assert not k.due(1200)
    assert k.due(1240)


def test_late_frames_catch_up_one_step_per_call() -> None:
    k = KeyRepeat(100)
    k.press("R", 0)
    assert k.due(350)
    assert k.due(350)
    assert k.due(350)
    assert not k.due(350)


def test_release_returns_action_once() -> None:
    k = KeyRepeat(120)
    k.press("SD", 0)
    assert k.release() == "SD"
    assert k.release() is None
    assert not k.due(10_000)


def test_reset_clears_everything() -> None:
    k = KeyRepeat(120)
    k.press("HD", 50)
    k.reset()
    assert k.action is None and not k.held
    assert k.release() is None


def test_action_names() -> None:
    assert set(ACTIONS) == {"L", "R", "SD", "HD", "SL", "SR", "Pause", "Continue", "Start"}
