import logging
import math
import re
from typing import Iterator, Optional

from ..models import GridCoordinate
from ..utils.logging import ThrottledLogger

logger = logging.getLogger(__name__)
_throttled = ThrottledLogger(logger)

_ASSET_PATTERN = re.compile(r"^gaze_px(m?\d+p\d)_py(m?\d+p\d)_(\d+)\.webp$")


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def sanitize(value: Optional[float]) -> float:
    """Coerces missing or NaN input to 0. Infinities pass through for clamping."""
    if value is None:
        return 0.0
    value = float(value)
    if math.isnan(value):
        _throttled.warning("NaN input coerced to 0.")
        return 0.0
    return value


def round_half_away(value: float) -> int:
    """
    Rounds to the nearest integer, ties away from zero (1.5 -> 2, -1.5 -> -2).

    Python's round() ties to even, which would make the grid asymmetric
    around its centre.
    """
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def _format_coordinate(value: int) -> str:
    return f"{float(value):.1f}".replace("-", "m").replace(".", "p")


def _parse_coordinate(token: str) -> int:
    value = float(token.replace("m", "-").replace("p", "."))
    if not value.is_integer():
        raise ValueError(f"Grid coordinate '{token}' is not integral.")
    return int(value)


class GazeQuantizer:
    """
    Snaps normalized gaze samples onto the discrete image grid.

    The grid is the arithmetic sequence ``p_min, p_min + step, ..., p_max`` on
    each axis. Instances hold only the grid bounds; every method is a pure
    function of its arguments.
    """

    def __init__(self, p_min: int = -15, p_max: int = 15, step: int = 3, size: int = 256):
        if step <= 0:
            raise ValueError("Grid step must be positive.")
        if p_min >= p_max:
            raise ValueError("Grid p_min must be lower than p_max.")
        if (p_max - p_min) % step:
            raise ValueError(f"Grid step {step} does not divide the span {p_min}..{p_max}.")
        if p_min % step:
            raise ValueError(f"Grid bounds {p_min}..{p_max} are not multiples of step {step}.")
        if size <= 0:
            raise ValueError("Image size must be positive.")

        self.p_min = p_min
        self.p_max = p_max
        self.step = step
        self.size = size

    @classmethod
    def from_settings(cls, grid) -> "GazeQuantizer":
        return cls(p_min=grid.p_min, p_max=grid.p_max, step=grid.step, size=grid.size)

    def __repr__(self) -> str:
        return f"GazeQuantizer(p_min={self.p_min}, p_max={self.p_max}, step={self.step}, size={self.size})"

    @property
    def grid_values(self) -> tuple[int, ...]:
        return tuple(range(self.p_min, self.p_max + 1, self.step))

    def quantize_axis(self, value: Optional[float]) -> int:
        v = clamp(sanitize(value), -1.0, 1.0)
        # Equals p_min + (v + 1) * span / 2; quantize_axis(-v) == -quantize_axis(v)
        # holds exactly on a zero-centred grid.
        raw = (self.p_min + self.p_max) / 2 + v * (self.p_max - self.p_min) / 2
        snapped = round_half_away(raw / self.step) * self.step
        return int(clamp(snapped, self.p_min, self.p_max))

    def quantize(self, x: Optional[float], y: Optional[float]) -> GridCoordinate:
        """
        Maps a sample to the nearest grid cell. Total over all inputs:
        out-of-domain values are clamped and NaN/None count as 0.
        """
        return GridCoordinate(self.quantize_axis(x), self.quantize_axis(y))

    def encode(self, px: int, py: int, size: Optional[int] = None) -> str:
        """
        Builds the asset identifier, e.g. ``gaze_pxm3p0_py15p0_256.webp``.

        Coordinates are written with one fractional digit, '-' becomes 'm'
        and '.' becomes 'p'.
        """
        if size is None:
            size = self.size
        return f"gaze_px{_format_coordinate(px)}_py{_format_coordinate(py)}_{size}.webp"

    def locate(self, x: Optional[float], y: Optional[float]) -> tuple[GridCoordinate, str]:
        coord = self.quantize(x, y)
        return coord, self.encode(coord.px, coord.py)

    @staticmethod
    def decode(asset_id: str) -> tuple[GridCoordinate, int]:
        """Inverse of encode. Raises ValueError for malformed identifiers."""
        match = _ASSET_PATTERN.match(asset_id)
        if match is None:
            raise ValueError(f"Not a gaze asset identifier: '{asset_id}'")
        px, py, size = match.groups()
        return GridCoordinate(_parse_coordinate(px), _parse_coordinate(py)), int(size)

    def iter_grid(self) -> Iterator[GridCoordinate]:
        """Every grid cell, row by row from the top (highest py) down."""
        values = self.grid_values
        for py in reversed(values):
            for px in values:
                yield GridCoordinate(px, py)

    def iter_assets(self) -> Iterator[str]:
        for coord in self.iter_grid():
            yield self.encode(coord.px, coord.py)
