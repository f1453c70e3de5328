from .app import AppSettings, DisplaySettings, GridSettings, TiltSettings, ZmqDisplayConfig
from .utils import LoggingConfig

__all__ = [
    "AppSettings",
    "DisplaySettings",
    "GridSettings",
    "LoggingConfig",
    "TiltSettings",
    "ZmqDisplayConfig",
]
