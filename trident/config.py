"""Viewer configuration from environment variables."""

from typing import Tuple

from pydantic import Field
from pydantic_settings import BaseSettings

RGB = Tuple[int, int, int]


class ViewerConfig(BaseSettings):
    """
    Settings for the mesh viewer window.

    Every field can be overridden with a TRIDENT_* environment variable,
    e.g. TRIDENT_SCREEN_WIDTH=1024 or TRIDENT_ZOOM_RATIO=1.05. Pan speed is
    in screen pixels per frame; each zoom step multiplies or divides the
    scale by zoom_ratio.
    """
    screen_width: int = Field(640, gt=0)
    screen_height: int = Field(480, gt=0)
    pan_speed: float = 15.0
    zoom_ratio: float = Field(1.02, gt=1.0)
    frame_rate: int = Field(60, gt=0)
    title: str = "Trident Viewer"
    font_size: int = Field(16, gt=0)
    background_color: RGB = (255, 255, 255)
    text_color: RGB = (0, 0, 0)

    model_config = {"env_prefix": "TRIDENT_"}
