from typing import Protocol, runtime_checkable

@runtime_checkable
class DisplaySurface(Protocol):
    """
    Renders the image for the current gaze.

    Receives the resolved path (base path + asset identifier). Whether it is
    an <img> element, a window or a remote renderer, it must support this call.
    """
    def show(self, path: str) -> None: ...

@runtime_checkable
class DiagnosticOverlay(Protocol):
    """Optional debug text next to the display. Never affects tracking."""
    def update(self, text: str) -> None: ...

@runtime_checkable
class Notifier(Protocol):
    """Surfaces informational messages to the user (e.g. a denied permission)."""
    def notify(self, message: str) -> None: ...
