import logging
from typing import Optional

logger = logging.getLogger(__name__)


class LogDisplay:
    """Logs each image change instead of rendering it."""

    def __init__(self, name: str = "display"):
        self.name = name
        self._last: Optional[str] = None

    def show(self, path: str) -> None:
        if path != self._last:
            logger.info("%s -> %s", self.name, path)
            self._last = path


class LogOverlay:
    def __init__(self, name: str = "overlay"):
        self.name = name

    def update(self, text: str) -> None:
        logger.debug("%s: %s", self.name, text.replace("\n", " | "))


class LogNotifier:
    def notify(self, message: str) -> None:
        logger.warning("Notice: %s", message)
