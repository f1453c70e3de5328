import logging
from typing import Optional

from ..core.quantizer import clamp, sanitize
from ..models import NormalizedSample, OrientationReading
from ..utils.logging import ThrottledLogger

logger = logging.getLogger(__name__)
_throttled = ThrottledLogger(logger)


class TiltCalibration:
    """
    Zero-reference for device orientation readings.

    The first reading after a reset becomes the baseline; every reading,
    that one included, is then expressed relative to it.
    """

    def __init__(self):
        self._baseline: Optional[tuple[float, float]] = None

    @property
    def is_calibrated(self) -> bool:
        return self._baseline is not None

    @property
    def baseline(self) -> Optional[tuple[float, float]]:
        return self._baseline

    def reset(self) -> None:
        self._baseline = None

    def relative(self, reading: OrientationReading) -> tuple[float, float]:
        """Returns (d_beta, d_gamma), capturing the baseline if uncalibrated."""
        if reading.beta is None or reading.gamma is None:
            _throttled.debug("Orientation reading without beta or gamma; missing angle counts as 0.")
        beta, gamma = sanitize(reading.beta), sanitize(reading.gamma)
        if self._baseline is None:
            self._baseline = (beta, gamma)
            logger.debug("Tilt baseline captured: beta=%.1f gamma=%.1f", beta, gamma)
        base_beta, base_gamma = self._baseline
        return beta - base_beta, gamma - base_gamma


def normalize_tilt(d_beta: float, d_gamma: float, sensitivity_deg: float = 30.0) -> NormalizedSample:
    """
    Converts tilt deltas to a gaze sample. Both axes are inverted: tilting the
    device left (negative gamma) looks right, tilting it away (positive beta)
    looks down.
    """
    nx = clamp(-d_gamma / sensitivity_deg, -1.0, 1.0)
    ny = clamp(-d_beta / sensitivity_deg, -1.0, 1.0)
    return NormalizedSample(nx, ny)
