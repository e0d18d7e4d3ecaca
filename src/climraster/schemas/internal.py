"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully validated
and contains no optional fields that processing code depends on.
"""

from typing import Literal, Optional
from pydantic import ConfigDict
from climraster.schemas.base import ClimrasterBaseModel


class InternalRasterConfig(ClimrasterBaseModel):
    """Runtime raster conversion settings."""
    ensemble_notice: bool
    skip_missing: bool
    default_cell_size: float


class InternalStyleConfig(ClimrasterBaseModel):
    """Runtime style defaults."""
    color_ramp_anchors: tuple[str, ...]
    color_ramp_steps: int
    aspect_ratio: float
    backdrop_theme: str


class InternalPlotConfig(ClimrasterBaseModel):
    """Runtime plot appearance."""
    dpi: int
    panel_width: float
    panel_height: float
    max_columns: int
    colorbar_label: Optional[str]
    backdrop_linewidth: float
    backdrop_color: str


class InternalLoggingConfig(ClimrasterBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class InternalConfig(ClimrasterBaseModel):
    """Authoritative runtime configuration.

    Runtime modules receive InternalConfig and access fields directly:

        notify = config.raster.ensemble_notice  # NOT .get()

    Rules
    -----
    - NO .get() calls
    - NO fallback defaults
    """

    raster: InternalRasterConfig
    style: InternalStyleConfig
    plot: InternalPlotConfig
    logging: InternalLoggingConfig

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        str_strip_whitespace=True,
        frozen=True,  # Immutable after construction
    )
