"""Typed style options forwarded to the renderer."""

import logging
from typing import Any, Optional, Sequence, Union

from matplotlib.colors import LinearSegmentedColormap, to_hex
from pydantic import ConfigDict, Field, field_validator

from climraster.schemas.base import ClimrasterBaseModel
from climraster.schemas.param import JET_ANCHORS

__all__ = ['StyleOptions', 'default_color_ramp']

logger = logging.getLogger(__name__)


def default_color_ramp(anchors: Sequence[str] = JET_ANCHORS, steps: int = 101) -> list[str]:
    """Interpolate ``steps`` hex colors linearly between ``anchors``."""
    cmap = LinearSegmentedColormap.from_list("climraster_jet", list(anchors), N=steps)
    return [to_hex(cmap(i)) for i in range(steps)]


class StyleOptions(ClimrasterBaseModel):
    """Options the renderer understands.

    Parameters
    ----------
    color_ramp : list of str, optional
        Colors of the fill scale. None means the configured default ramp.
    overlay_layers : list
        Opaque layers drawn over every panel (backdrop themes are appended).
    aspect_ratio : float, optional
        Axes aspect. None means the configured default (1).
    panel_titles : list of str, optional
        Replace the derived panel names. Must be unique, one per panel.
    panels : list of str or int, optional
        Subset of panels to draw, by name or 1-based index.
    extra_render_hints : dict
        Passed to the renderer untouched (title, vmin, vmax, levels,
        contour, xlim, ylim, draw_scales, ...).
    """
    color_ramp: Optional[list[str]] = None
    overlay_layers: list[Any] = Field(default_factory=list)
    aspect_ratio: Optional[float] = Field(None, gt=0)
    panel_titles: Optional[list[str]] = None
    panels: Optional[list[Union[int, str]]] = None
    extra_render_hints: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        arbitrary_types_allowed=True,
    )

    @field_validator("panel_titles")
    @classmethod
    def titles_unique(cls, v):
        """Panel titles become column keys."""
        if v is not None and len(set(v)) != len(v):
            raise ValueError(f"panel_titles must be unique: {v}")
        return v

    def with_defaults(self, config) -> "StyleOptions":
        """Fill unset color ramp and aspect from InternalConfig.style."""
        update = {}
        if self.color_ramp is None:
            update["color_ramp"] = default_color_ramp(
                config.style.color_ramp_anchors, config.style.color_ramp_steps
            )
        if self.aspect_ratio is None:
            update["aspect_ratio"] = config.style.aspect_ratio
        return self.model_copy(update=update)

    def with_layer(self, layer) -> "StyleOptions":
        """Append an overlay layer, keeping caller layers first."""
        return self.model_copy(update={"overlay_layers": [*self.overlay_layers, layer]})
