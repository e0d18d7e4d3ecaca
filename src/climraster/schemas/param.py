"""ParamConfig: Expert defaults for climatology raster plots.

ALL tunable parameters have their default here. Runtime code never reads
ParamConfig directly - it only receives InternalConfig.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from climraster.schemas.base import ClimrasterBaseModel


BACKDROP_THEMES = ("none", "coastline", "countries")

# Dark blue -> cyan -> yellow -> red -> dark red
JET_ANCHORS = (
    "#00007F", "blue", "#007FFF", "cyan",
    "#7FFF7F", "yellow", "#FF7F00", "red", "#7F0000",
)


# =============================================================================
# Nested Configuration Models
# =============================================================================

class RasterConfig(ClimrasterBaseModel):
    """Grid to raster conversion settings."""
    ensemble_notice: bool = True
    skip_missing: bool = True
    default_cell_size: float = Field(1.0, gt=0, description="Cell size of single-cell axes")

    @field_validator("default_cell_size", mode="before")
    @classmethod
    def coerce_cell_size_to_float(cls, v):
        """Allow int or float for cell size."""
        return float(v)


class StyleConfig(ClimrasterBaseModel):
    """Default style options handed to the renderer."""
    color_ramp_anchors: tuple[str, ...] = JET_ANCHORS
    color_ramp_steps: int = Field(101, ge=2)
    aspect_ratio: float = Field(1.0, gt=0)
    backdrop_theme: str = "none"

    @field_validator("backdrop_theme", mode="before")
    @classmethod
    def normalize_theme_name(cls, v):
        """Normalize theme names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v


class PlotConfig(ClimrasterBaseModel):
    """Trellis plot appearance."""
    dpi: int = Field(150, ge=50)
    panel_width: float = Field(4.0, gt=0)
    panel_height: float = Field(3.5, gt=0)
    max_columns: int = Field(4, ge=1)
    colorbar_label: Optional[str] = None
    backdrop_linewidth: float = Field(0.6, gt=0)
    backdrop_color: str = "black"


class LoggingConfig(ClimrasterBaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


# =============================================================================
# Main ParamConfig
# =============================================================================

class ParamConfig(ClimrasterBaseModel):
    """Complete expert configuration with all defaults.

    Usage
    -----
    Not used directly by runtime code. It is the base layer in config
    resolution:

        internal_cfg = resolve_config(param_cfg, user_cfg)
    """

    raster: RasterConfig = Field(default_factory=RasterConfig)
    style: StyleConfig = Field(default_factory=StyleConfig)
    plot: PlotConfig = Field(default_factory=PlotConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
