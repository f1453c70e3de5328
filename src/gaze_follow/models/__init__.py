from .gaze import GridCoordinate, NormalizedSample, OrientationReading, Rect

__all__ = ["GridCoordinate", "NormalizedSample", "OrientationReading", "Rect"]
