import logging
import math
from typing import Optional, Sequence

from ..acquisition import TiltCalibration, normalize_pointer, normalize_tilt
from ..core.protocols import DiagnosticOverlay, DisplaySurface
from ..core.quantizer import GazeQuantizer, round_half_away, sanitize
from ..core.state import InputMode
from ..models import OrientationReading, Rect

logger = logging.getLogger(__name__)


def _whole(value: float):
    return round_half_away(value) if math.isfinite(value) else value


class FaceTracker:
    """
    One face image that follows the pointer, touch or device tilt.

    Owns its own input mode and tilt calibration; nothing is shared between
    trackers. Each event runs one quantize, encode and display cycle
    synchronously. Event handlers return the displayed asset identifier, or
    None when the event was ignored.
    """

    def __init__(
        self,
        quantizer: GazeQuantizer,
        display: DisplaySurface,
        bounds: Rect,
        *,
        base_path: str = "/faces/",
        overlay: Optional[DiagnosticOverlay] = None,
        tilt_sensitivity: float = 30.0,
        name: str = "tracker",
    ):
        if tilt_sensitivity <= 0:
            raise ValueError("Tilt sensitivity must be positive.")

        self.quantizer = quantizer
        self.display = display
        self.overlay = overlay
        self.bounds = bounds
        self.base_path = base_path
        self.tilt_sensitivity = tilt_sensitivity
        self.name = name

        self.mode: InputMode = InputMode.POINTER
        self.calibration = TiltCalibration()
        self.current_asset: Optional[str] = None

        self.center()

    @property
    def orientation_enabled(self) -> bool:
        return self.mode is InputMode.TILT

    # --- Mode transitions ---

    def enable_orientation(self) -> None:
        """Switches to tilt mode. Always recalibrates on the next reading."""
        self.mode = InputMode.TILT
        self.calibration.reset()
        logger.info("%s: orientation mode enabled, awaiting calibration.", self.name)

    def disable_orientation(self) -> None:
        if self.mode is InputMode.TILT:
            logger.info("%s: orientation mode disabled.", self.name)
        self.mode = InputMode.POINTER

    # --- Events ---

    def center(self) -> str:
        """Looks straight ahead, i.e. at the centre of the bounds."""
        return self._set_from_client(*self.bounds.center)

    def on_pointer(self, x: float, y: float) -> str:
        """Mouse or pen position in screen coordinates. Cancels tilt mode."""
        asset = self._set_from_client(x, y)
        self.disable_orientation()
        return asset

    def on_touch(self, touches: Sequence[tuple[float, float]]) -> Optional[str]:
        """Follows the first active touch point. Cancels tilt mode."""
        if not touches:
            return None
        x, y = touches[0]
        asset = self._set_from_client(x, y)
        self.disable_orientation()
        return asset

    def on_orientation(self, reading: OrientationReading) -> Optional[str]:
        if self.mode is not InputMode.TILT:
            return None

        d_beta, d_gamma = self.calibration.relative(reading)
        sample = normalize_tilt(d_beta, d_gamma, self.tilt_sensitivity)
        asset = self._show(sample.x, sample.y)
        if self.overlay is not None:
            self.overlay.update(
                f"Orientation Mode\nBeta: {d_beta:.1f}, Gamma: {d_gamma:.1f}\nImage: {asset}"
            )
        return asset

    # --- Internals ---

    def _set_from_client(self, x: float, y: float) -> str:
        sample = normalize_pointer(self.bounds, x, y)
        asset = self._show(sample.x, sample.y)
        if self.overlay is not None:
            rel_x = _whole(sanitize(x) - self.bounds.left)
            rel_y = _whole(sanitize(y) - self.bounds.top)
            self.overlay.update(f"Mouse: ({rel_x}, {rel_y})\nImage: {asset}")
        return asset

    def _show(self, x: float, y: float) -> str:
        _, asset = self.quantizer.locate(x, y)
        self.current_asset = asset
        self.display.show(f"{self.base_path}{asset}")
        return asset
