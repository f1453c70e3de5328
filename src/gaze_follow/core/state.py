from enum import Enum, auto


class InputMode(Enum):
    """
    Which input source currently drives a tracker.

    Pointer and touch input always win: any such event drops a tracker back
    to POINTER even while tilt tracking is switched on.
    """
    POINTER = auto()  # Mouse or touch position relative to the tracked element.
    TILT = auto()  # Device orientation relative to a calibrated baseline.


class PermissionResult(Enum):
    """Outcome of asking the platform for access to orientation sensors."""
    GRANTED = auto()
    DENIED = auto()
    UNSUPPORTED = auto()  # The platform does not gate the sensors behind consent.
