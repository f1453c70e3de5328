from dataclasses import dataclass
from typing import Optional

@dataclass(slots=True, frozen=True)
class NormalizedSample:
    """
    Source-agnostic gaze input, each axis in [-1, 1].

    Positive x looks right, positive y looks up.
    """
    x: float
    y: float

@dataclass(slots=True, frozen=True)
class GridCoordinate:
    """A cell of the gaze grid for which a pre-rendered image exists."""
    px: int
    py: int

@dataclass(slots=True, frozen=True)
class OrientationReading:
    """
    A raw device-orientation sample in degrees.

    beta is the front-to-back tilt, gamma the left-to-right tilt. Either may
    be missing on devices that do not report it.
    """
    beta: Optional[float] = None
    gamma: Optional[float] = None

@dataclass(slots=True, frozen=True)
class Rect:
    """Reference rectangle in screen coordinates, y growing downwards."""
    left: float
    top: float
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return self.left + self.width / 2, self.top + self.height / 2
