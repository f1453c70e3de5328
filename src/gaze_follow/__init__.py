from .app import FaceTracker
from .core import GazeQuantizer, InputMode, PermissionResult
from .core.manager import TrackerRegistry
from .models import GridCoordinate, NormalizedSample, OrientationReading, Rect

__all__ = [
    "FaceTracker",
    "GazeQuantizer",
    "GridCoordinate",
    "InputMode",
    "NormalizedSample",
    "OrientationReading",
    "PermissionResult",
    "Rect",
    "TrackerRegistry",
]
