import logging

from ..core.quantizer import clamp, sanitize
from ..models import NormalizedSample, Rect
from ..utils.logging import ThrottledLogger

logger = logging.getLogger(__name__)
_throttled = ThrottledLogger(logger)


def _axis(offset: float, half_extent: float) -> float:
    if half_extent <= 0:
        _throttled.warning("Reference rectangle has no extent; treating axis as centred.")
        return 0.0
    return clamp(offset / half_extent, -1.0, 1.0)


def normalize_pointer(rect: Rect, x: float, y: float) -> NormalizedSample:
    """
    Expresses an absolute pointer position as a gaze sample relative to the
    centre of ``rect``. Screen y grows downwards, gaze y grows upwards.
    """
    center_x, center_y = rect.center
    x, y = sanitize(x), sanitize(y)
    nx = _axis(x - center_x, rect.width / 2)
    ny = _axis(center_y - y, rect.height / 2)
    return NormalizedSample(nx, ny)
