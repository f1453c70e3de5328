from .pointer import normalize_pointer
from .tilt import TiltCalibration, normalize_tilt

__all__ = ["TiltCalibration", "normalize_pointer", "normalize_tilt"]
