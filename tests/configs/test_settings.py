"""Tests for settings loading and grid validation."""

import pytest
from pydantic import ValidationError

from gaze_follow.configs import AppSettings, GridSettings
from gaze_follow.core import GazeQuantizer


def test_defaults():
    settings = AppSettings()
    assert settings.display.base_path == "/faces/"
    assert settings.display.debug is False
    assert (settings.grid.p_min, settings.grid.p_max, settings.grid.step, settings.grid.size) == (-15, 15, 3, 256)
    assert settings.tilt.sensitivity_deg == 30.0
    assert settings.zmq.enabled is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("GAZE_FOLLOW__DISPLAY__BASE_PATH", "/static/eyes/")
    monkeypatch.setenv("GAZE_FOLLOW__DISPLAY__DEBUG", "true")
    monkeypatch.setenv("GAZE_FOLLOW__GRID__STEP", "5")
    monkeypatch.setenv("GAZE_FOLLOW__TILT__SENSITIVITY_DEG", "45")
    settings = AppSettings()
    assert settings.display.base_path == "/static/eyes/"
    assert settings.display.debug is True
    assert settings.grid.step == 5
    assert settings.tilt.sensitivity_deg == 45.0


@pytest.mark.parametrize("kwargs", [
    {"step": 4},
    {"p_min": 10, "p_max": -10},
    {"p_min": -10, "p_max": 10, "step": 4},
    {"step": 0},
    {"size": -1},
])
def test_invalid_grid(kwargs):
    with pytest.raises(ValidationError):
        GridSettings(**kwargs)


def test_invalid_grid_from_environment(monkeypatch):
    monkeypatch.setenv("GAZE_FOLLOW__GRID__STEP", "7")
    with pytest.raises(ValueError):
        AppSettings()


def test_quantizer_from_settings():
    quantizer = GazeQuantizer.from_settings(GridSettings(p_min=-20, p_max=20, step=10, size=128))
    assert quantizer.grid_values == (-20, -10, 0, 10, 20)
    assert quantizer.encode(-10, 20) == "gaze_pxm10p0_py20p0_128.webp"
