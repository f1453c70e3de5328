import logging
from importlib.metadata import PackageNotFoundError, version

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import BaseModel, PositiveFloat, PositiveInt, model_validator, Field

from .utils import LoggingConfig

logger = logging.getLogger(__name__)


def _package_version() -> str:
    try:
        return version("gaze-follow")
    except PackageNotFoundError:
        return "0.0.0+local"


class DisplaySettings(BaseModel):
    """Where the pre-rendered images live and whether the debug overlay is shown."""
    base_path: str = Field("/faces/", description="Prefix joined with the asset identifier to form the image path.")
    debug: bool = Field(False, description="Attach a diagnostic overlay to each tracker.")

class GridSettings(BaseModel):
    """
    Bounds of the gaze grid. Must match the generated image set.
    """
    p_min: int = Field(-15, description="Lowest grid coordinate on each axis.")
    p_max: int = Field(15, description="Highest grid coordinate on each axis.")
    step: PositiveInt = Field(3, description="Spacing between neighbouring grid coordinates.")
    size: PositiveInt = Field(256, description="Pixel size of the square images.")

    @model_validator(mode='after')
    def validate_grid(self) -> "GridSettings":
        if self.p_min >= self.p_max:
            raise ValueError('p_min must be lower than p_max.')
        if (self.p_max - self.p_min) % self.step:
            raise ValueError('step must evenly divide the p_min..p_max span.')
        if self.p_min % self.step:
            raise ValueError('p_min and p_max must be multiples of step.')
        return self

class TiltSettings(BaseModel):
    sensitivity_deg: PositiveFloat = Field(30.0, description="Tilt in degrees that maps to full deflection.")

class ZmqDisplayConfig(BaseModel):
    enabled: bool = False
    host: str = "tcp://*:5556"
    topic: str = "face"

class AppSettings(BaseSettings):
    """
    Main application settings, loaded from environment variables and defaults.
    """
    # Rendering
    display: DisplaySettings = Field(default_factory=DisplaySettings)
    grid: GridSettings = Field(default_factory=GridSettings)

    # Input
    tilt: TiltSettings = Field(default_factory=TiltSettings)

    # Remote display
    zmq: ZmqDisplayConfig = Field(default_factory=ZmqDisplayConfig)

    # Logging
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    __version__: str = _package_version()

    model_config = SettingsConfigDict(
        env_prefix="GAZE_FOLLOW__",
        env_file=".env",
        env_nested_delimiter='__',
        case_sensitive=False
    )
