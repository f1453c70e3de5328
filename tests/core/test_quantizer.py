"""Tests for the gaze grid quantizer."""

import logging
import math

import pytest

from gaze_follow.core import quantizer as quantizer_module
from gaze_follow.core.quantizer import GazeQuantizer, clamp, round_half_away, sanitize
from gaze_follow.models import GridCoordinate
from gaze_follow.utils import ThrottledLogger

GRID = (-15, -12, -9, -6, -3, 0, 3, 6, 9, 12, 15)


@pytest.fixture
def quantizer():
    return GazeQuantizer()


def test_grid_values(quantizer):
    assert quantizer.grid_values == GRID


@pytest.mark.parametrize("x, y, expected", [
    (-1, -1, (-15, -15)),
    (1, 1, (15, 15)),
    (0, 0, (0, 0)),
    (2, -5, (15, -15)),
    (0.5, -0.5, (9, -9)),
    (0.19, -0.19, (3, -3)),
])
def test_quantize_known_points(quantizer, x, y, expected):
    assert quantizer.quantize(x, y) == GridCoordinate(*expected)


def test_out_of_domain_matches_clamped(quantizer):
    assert quantizer.quantize(2, -5) == quantizer.quantize(1, -1)


def test_range_invariant(quantizer):
    samples = [i / 37 for i in range(-100, 101)] + [math.inf, -math.inf, 1e300, -1e300]
    for x in samples:
        coord = quantizer.quantize(x, -x)
        assert coord.px in GRID
        assert coord.py in GRID


@pytest.mark.parametrize("value", [math.nan, None])
def test_missing_input_counts_as_centre(quantizer, value):
    assert quantizer.quantize(value, value) == GridCoordinate(0, 0)


def test_requantizing_grid_point_is_stable(quantizer):
    for value in GRID:
        normalized = value / 15
        assert quantizer.quantize_axis(normalized) == value


def test_symmetric_about_centre(quantizer):
    for i in range(-50, 51):
        v = i / 50
        assert quantizer.quantize_axis(-v) == -quantizer.quantize_axis(v)


@pytest.mark.parametrize("value, expected", [
    (0.5, 1), (-0.5, -1), (1.5, 2), (-1.5, -2), (2.5, 3), (0.49, 0), (-0.49, 0), (0.0, 0),
    (0.49999999999999994, 0), (-0.49999999999999994, 0), (2.4999999999999996, 2),
])
def test_round_half_away(value, expected):
    assert round_half_away(value) == expected


def test_clamp_and_sanitize():
    assert clamp(3, -1, 1) == 1
    assert clamp(-3, -1, 1) == -1
    assert sanitize(None) == 0.0
    assert sanitize(math.nan) == 0.0
    assert sanitize("2.5") == 2.5
    assert sanitize(math.inf) == math.inf


@pytest.mark.parametrize("px, py, size, expected", [
    (0, 0, 256, "gaze_px0p0_py0p0_256.webp"),
    (-3, 15, 256, "gaze_pxm3p0_py15p0_256.webp"),
    (-15, -15, 512, "gaze_pxm15p0_pym15p0_512.webp"),
])
def test_encode(quantizer, px, py, size, expected):
    assert quantizer.encode(px, py, size) == expected


def test_encode_defaults_to_configured_size():
    assert GazeQuantizer(size=128).encode(3, 0) == "gaze_px3p0_py0p0_128.webp"


def test_locate(quantizer):
    coord, asset = quantizer.locate(-0.2, 1)
    assert coord == GridCoordinate(-3, 15)
    assert asset == "gaze_pxm3p0_py15p0_256.webp"


def test_decode(quantizer):
    assert quantizer.decode("gaze_pxm3p0_py15p0_256.webp") == (GridCoordinate(-3, 15), 256)


@pytest.mark.parametrize("asset_id", [
    "gaze_px-3.0_py15p0_256.webp",
    "gaze_pxm3p0_py15p0_256.png",
    "face_px0p0_py0p0_256.webp",
    "gaze_px0p5_py0p0_256.webp",
])
def test_decode_rejects_malformed(quantizer, asset_id):
    with pytest.raises(ValueError):
        quantizer.decode(asset_id)


def test_assets_are_unique(quantizer):
    assets = list(quantizer.iter_assets())
    assert len(assets) == 121
    assert len(set(assets)) == 121
    assert assets[0] == "gaze_pxm15p0_py15p0_256.webp"
    assert assets[-1] == "gaze_px15p0_pym15p0_256.webp"
    for asset in assets:
        coord, size = quantizer.decode(asset)
        assert quantizer.encode(coord.px, coord.py, size) == asset


def test_custom_grid():
    q = GazeQuantizer(p_min=-8, p_max=8, step=4, size=64)
    assert q.grid_values == (-8, -4, 0, 4, 8)
    assert q.quantize(1, -1) == GridCoordinate(8, -8)
    assert q.quantize(0.4, 0) == GridCoordinate(4, 0)


@pytest.mark.parametrize("kwargs", [
    {"step": 0},
    {"step": 4},
    {"p_min": 15, "p_max": -15},
    {"p_min": -10, "p_max": 10, "step": 4},
    {"size": 0},
])
def test_invalid_grid_rejected(kwargs):
    with pytest.raises(ValueError):
        GazeQuantizer(**kwargs)


def test_just_below_half_step_stays_on_centre(quantizer):
    assert quantizer.quantize_axis(0.09999999999999999) == 0
    assert quantizer.quantize_axis(-0.09999999999999999) == 0


def test_nan_input_is_logged(quantizer, monkeypatch, caplog):
    monkeypatch.setattr(quantizer_module, "_throttled", ThrottledLogger(quantizer_module.logger, 0.0))
    with caplog.at_level(logging.WARNING, logger="gaze_follow.core.quantizer"):
        quantizer.quantize(float("nan"), 0)
    assert [r.getMessage() for r in caplog.records] == ["[1] NaN input coerced to 0."]


def test_missing_input_is_not_logged(quantizer, monkeypatch, caplog):
    monkeypatch.setattr(quantizer_module, "_throttled", ThrottledLogger(quantizer_module.logger, 0.0))
    with caplog.at_level(logging.WARNING, logger="gaze_follow.core.quantizer"):
        quantizer.quantize(None, 0.5)
    assert caplog.records == []
