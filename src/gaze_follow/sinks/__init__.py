from .log import LogDisplay, LogNotifier, LogOverlay
from .memory import MemoryDisplay, MemoryNotifier, MemoryOverlay
from .zmq import ZMQDisplay

__all__ = [
    "LogDisplay",
    "LogNotifier",
    "LogOverlay",
    "MemoryDisplay",
    "MemoryNotifier",
    "MemoryOverlay",
    "ZMQDisplay",
]
