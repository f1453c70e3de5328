import logging
from typing import Final, Optional

import zmq

logger = logging.getLogger(__name__)

class ZMQDisplay:
    """
    Display surface that broadcasts image changes over ZMQ PUB/SUB.

    A remote renderer subscribes to the topic and loads the path itself.

    Wire Format (single frame, UTF-8):
    - Topic, a single space, then the resolved image path.
    """

    _ENCODING: Final[str] = "utf-8"

    def __init__(self, host: str = "tcp://*:5556", topic: str = "face"):
        """
        Args:
            host: The ZMQ binding address. Default binds to all interfaces on port 5556.
            topic: Prefix subscribers filter on.
        """
        self.host = host
        self.topic = topic
        self._last: Optional[str] = None

        self._ctx = zmq.Context.instance()
        self._sock = self._ctx.socket(zmq.PUB)

        # Only the latest gaze matters; drop backlog for slow subscribers
        self._sock.setsockopt(zmq.SNDHWM, 60)

    def frame(self, path: str) -> bytes:
        return f"{self.topic} {path}".encode(self._ENCODING)

    def start(self) -> None:
        """Bind the publisher socket."""
        try:
            self._sock.bind(self.host)
            logger.info(f"ZMQDisplay bound to {self.host}")
        except zmq.ZMQError as e:
            logger.error(f"Failed to bind ZMQDisplay to {self.host}: {e}")
            raise

    def show(self, path: str) -> None:
        if path == self._last:
            return
        try:
            self._sock.send(self.frame(path), zmq.NOBLOCK)
            self._last = path
        except zmq.ZMQError as e:
            # Input handling continues; the next change is sent as usual.
            logger.error(f"ZMQ broadcast failed: {e}")

    def close(self) -> None:
        logger.info("Closing ZMQDisplay...")
        self._sock.close(linger=0)
