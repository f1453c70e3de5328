from typing import Optional

from .app import FaceTracker
from .configs import AppSettings
from .core import DisplaySurface, GazeQuantizer
from .models import Rect
from .sinks import LogDisplay, LogOverlay, ZMQDisplay

def create_display(settings: AppSettings) -> DisplaySurface:
    """
    Picks the display surface for a headless session.
    A ZMQ display is bound before it is returned.
    """
    if settings.zmq.enabled:
        display = ZMQDisplay(host=settings.zmq.host, topic=settings.zmq.topic)
        display.start()
        return display
    return LogDisplay()

def create_tracker(
    settings: AppSettings,
    display: DisplaySurface,
    bounds: Rect,
    name: str = "tracker",
    quantizer: Optional[GazeQuantizer] = None,
) -> FaceTracker:
    """
    Builds a tracker wired to the configured grid, base path and tilt
    sensitivity. A debug overlay is attached only when enabled.
    """
    return FaceTracker(
        quantizer or GazeQuantizer.from_settings(settings.grid),
        display,
        bounds,
        base_path=settings.display.base_path,
        overlay=LogOverlay(name) if settings.display.debug else None,
        tilt_sensitivity=settings.tilt.sensitivity_deg,
        name=name,
    )
