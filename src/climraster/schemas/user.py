"""UserConfig: Forgiving, minimal user-facing configuration.

Accepts flat aliases for common settings (e.g., BACKDROP_THEME -> 
style.backdrop_theme, DPI -> plot.dpi). Users only specify what they want
to override from the expert defaults.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from climraster.schemas.base import ClimrasterBaseModel


class UserRasterConfig(ClimrasterBaseModel):
    """User-facing raster config."""
    ensemble_notice: Optional[bool] = None
    skip_missing: Optional[bool] = None
    default_cell_size: Optional[float] = None


class UserStyleConfig(ClimrasterBaseModel):
    """User-facing style config."""
    color_ramp_anchors: Optional[tuple[str, ...]] = None
    color_ramp_steps: Optional[int] = None
    aspect_ratio: Optional[float] = None
    backdrop_theme: Optional[str] = None

    @field_validator("backdrop_theme", mode="before")
    @classmethod
    def normalize_theme(cls, v):
        """Normalize theme names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v


class UserPlotConfig(ClimrasterBaseModel):
    """User-facing plot config."""
    dpi: Optional[int] = None
    panel_width: Optional[float] = None
    panel_height: Optional[float] = None
    max_columns: Optional[int] = None
    colorbar_label: Optional[str] = None
    backdrop_linewidth: Optional[float] = None
    backdrop_color: Optional[str] = None


class UserConfig(ClimrasterBaseModel):
    """User-facing configuration schema.

    Usage
    -----
        user_cfg = UserConfig(
            backdrop_theme="coastline",
            ensemble_notice=False,
            dpi=200,
        )

        internal = resolve_config(param_cfg, user_cfg)
    """

    # Flat aliases
    backdrop_theme: Optional[str] = Field(None, alias="BACKDROP_THEME")
    ensemble_notice: Optional[bool] = Field(None, alias="ENSEMBLE_NOTICE")
    color_ramp_steps: Optional[int] = Field(None, alias="COLOR_RAMP_STEPS")
    dpi: Optional[int] = Field(None, alias="DPI")
    max_columns: Optional[int] = Field(None, alias="MAX_COLUMNS")
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = Field(
        None, alias="LOG_LEVEL"
    )

    # Nested overrides (advanced users)
    raster: Optional[UserRasterConfig] = None
    style: Optional[UserStyleConfig] = None
    plot: Optional[UserPlotConfig] = None

    model_config = ClimrasterBaseModel.model_config.copy()
    # Allow forgiving input dictionaries (ignore unknown keys)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @field_validator("backdrop_theme", mode="before")
    @classmethod
    def normalize_theme(cls, v):
        """Normalize theme names to lowercase."""
        if isinstance(v, str):
            return v.lower().strip()
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept lowercase level names."""
        if isinstance(v, str):
            return v.upper().strip()
        return v

    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested InternalConfig structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        raster = {}
        if self.ensemble_notice is not None:
            raster["ensemble_notice"] = self.ensemble_notice
        if self.raster is not None:
            raster.update(self.raster.model_dump(exclude_none=True))
        if raster:
            overrides["raster"] = raster

        style = {}
        if self.backdrop_theme is not None:
            style["backdrop_theme"] = self.backdrop_theme
        if self.color_ramp_steps is not None:
            style["color_ramp_steps"] = self.color_ramp_steps
        if self.style is not None:
            style.update(self.style.model_dump(exclude_none=True))
        if style:
            overrides["style"] = style

        plot = {}
        if self.dpi is not None:
            plot["dpi"] = self.dpi
        if self.max_columns is not None:
            plot["max_columns"] = self.max_columns
        if self.plot is not None:
            plot.update(self.plot.model_dump(exclude_none=True))
        if plot:
            overrides["plot"] = plot

        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        return overrides
