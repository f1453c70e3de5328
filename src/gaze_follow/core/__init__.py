from .protocols import DiagnosticOverlay, DisplaySurface, Notifier
from .quantizer import GazeQuantizer, clamp, round_half_away, sanitize
from .state import InputMode, PermissionResult

__all__ = [
    "DiagnosticOverlay",
    "DisplaySurface",
    "GazeQuantizer",
    "InputMode",
    "Notifier",
    "PermissionResult",
    "clamp",
    "round_half_away",
    "sanitize",
]
