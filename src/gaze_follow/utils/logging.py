import time
import logging

class ThrottledLogger:
    """
    Wraps a logger for call sites that fire on every input event.

    At most one record is emitted per interval; the record is prefixed with
    the number of calls since the last emitted one.
    """
    def __init__(self, logger: logging.Logger, interval_sec: float = 5.0) -> None:
        self._logger = logger
        self._interval = interval_sec
        self._last_log_time: float | None = None
        self._counter = 0

    def _due(self) -> bool:
        self._counter += 1
        now = time.monotonic()
        if self._last_log_time is None or now - self._last_log_time >= self._interval:
            self._last_log_time = now
            return True
        return False

    def warning(self, message: str, *args, **kwargs) -> None:
        if self._due():
            self._logger.warning("[%d] " + message, self._counter, *args, **kwargs)
            self._counter = 0

    def debug(self, message: str, *args, **kwargs) -> None:
        if self._due():
            self._logger.debug("[%d] " + message, self._counter, *args, **kwargs)
            self._counter = 0
