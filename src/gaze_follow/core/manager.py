import logging
from typing import Callable, Iterator, Optional

from .protocols import Notifier
from .state import PermissionResult
from ..app.tracker import FaceTracker


logger = logging.getLogger(__name__)

ENABLE_LABEL = "Enable Motion Tracking"
DISABLE_LABEL = "Disable Motion Tracking"
POINTER_HEADLINE = "Move your cursor or tap anywhere"
TILT_HEADLINE = "Tilt your phone - face looks at you!"
DENIED_NOTICE = "Motion permission denied. Please enable it in your browser settings."


class TrackerRegistry:
    """
    Orchestration layer for every tracker on a page.

    Holds the global motion-tracking switch. Toggling it simply invokes each
    tracker's own transition; trackers keep their own mode, so a tracker that
    was touched drops back to pointer mode while the switch stays on.
    """
    def __init__(self, notifier: Optional[Notifier] = None):
        self.notifier = notifier
        self.orientation_mode: bool = False
        self._trackers: list[FaceTracker] = []

    def __iter__(self) -> Iterator[FaceTracker]:
        return iter(self._trackers)

    def __len__(self) -> int:
        return len(self._trackers)

    def register(self, tracker: FaceTracker) -> FaceTracker:
        self._trackers.append(tracker)
        if self.orientation_mode:
            tracker.enable_orientation()
        logger.debug("Registered tracker '%s' (%d total).", tracker.name, len(self._trackers))
        return tracker

    # --- Presentation ---

    @property
    def toggle_label(self) -> str:
        return DISABLE_LABEL if self.orientation_mode else ENABLE_LABEL

    @property
    def headline(self) -> str:
        return TILT_HEADLINE if self.orientation_mode else POINTER_HEADLINE

    # --- Actions ---

    def enable_orientation(self, permission: PermissionResult) -> bool:
        """
        Applies the outcome of the platform permission request.
        Returns: True if tilt tracking is now on.
        """
        if permission is PermissionResult.DENIED:
            logger.warning("Orientation permission denied; staying in pointer mode.")
            self._notify(DENIED_NOTICE)
            return False

        self.orientation_mode = True
        for tracker in self._trackers:
            tracker.enable_orientation()
        logger.info("Orientation mode enabled for %d tracker(s) (%s).", len(self._trackers), permission.name)
        return True

    def disable_orientation(self) -> None:
        self.orientation_mode = False
        for tracker in self._trackers:
            tracker.disable_orientation()
        logger.info("Orientation mode disabled.")

    def toggle_orientation(self, request_permission: Callable[[], PermissionResult]) -> bool:
        """
        Flips the global switch. When turning on, asks ``request_permission``
        first; a failing request is reported to the user and leaves tilt off.
        Returns: the new state of the switch.
        """
        if self.orientation_mode:
            self.disable_orientation()
            return False

        try:
            permission = request_permission()
        except Exception as e:
            logger.exception("Error requesting device orientation permission")
            self._notify(f"Error enabling motion tracking: {e}")
            return False

        return self.enable_orientation(permission)

    def _notify(self, message: str) -> None:
        if self.notifier is not None:
            self.notifier.notify(message)
