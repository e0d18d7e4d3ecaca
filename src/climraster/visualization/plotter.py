"""Trellis rendering of spatial rasters.

One map panel per raster column, a shared color scale and one colorbar.
Backdrop layers switch the panels to cartopy GeoAxes.
"""

import logging
import math
from pathlib import Path
from typing import List, Tuple

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap

from climraster.raster import SpatialRaster
from climraster.visualization.backdrop import BackdropLayer
from climraster.visualization.style import StyleOptions

__all__ = ['ClimatologyPlotter']

logger = logging.getLogger(__name__)

_KNOWN_HINTS = {"title", "vmin", "vmax", "levels", "contour", "xlim", "ylim", "draw_scales"}


class ClimatologyPlotter:
    """Renders a SpatialRaster as a grid of map panels.

    **Panels:**

    Each raster column becomes one panel titled with its column name.
    ``StyleOptions.panels`` selects a subset by name or 1-based index.

    **Color scale:**

    All panels share one scale built from ``StyleOptions.color_ramp``.
    Limits come from the ``vmin``/``vmax`` render hints, or from the data
    range of the drawn panels.

    **Render hints:**

    ``title`` (figure title), ``contour`` (bool, draw contour lines),
    ``levels`` (contour levels), ``xlim``/``ylim`` (axis limits) and
    ``draw_scales`` (bool, draw axis ticks; off by default). Other hints
    are ignored with a debug message.

    Example usage::

        plotter = ClimatologyPlotter(config)
        fig = plotter.render(raster, style)
        plotter.save(fig, "plots/tas_clim.png")
    """

    def __init__(self, config):
        """Initialize plotter.

        Parameters
        ----------
        config : InternalConfig
            Resolved configuration; ``config.plot`` holds the appearance.
        """
        self.config = config
        plot_cfg = config.plot
        self.dpi = plot_cfg.dpi
        self.panel_size = (plot_cfg.panel_width, plot_cfg.panel_height)
        self.max_columns = plot_cfg.max_columns
        self.colorbar_label = plot_cfg.colorbar_label
        self.backdrop_linewidth = plot_cfg.backdrop_linewidth
        self.backdrop_color = plot_cfg.backdrop_color

        logger.debug("ClimatologyPlotter initialized (dpi=%s, max_columns=%s)",
                     self.dpi, self.max_columns)

    def render(self, raster: SpatialRaster, style: StyleOptions) -> plt.Figure:
        """Draw ``raster`` and return the matplotlib Figure."""
        names = self._select_panels(raster, style.panels)
        hints = dict(style.extra_render_hints)
        unknown = set(hints) - _KNOWN_HINTS
        if unknown:
            logger.debug("Ignoring unknown render hints: %s", sorted(unknown))

        lon, lat = raster.lon(), raster.lat()
        panels = [raster.panel(name) for name in names]
        vmin, vmax = self._color_limits(panels, hints)
        cmap = ListedColormap(style.color_ramp or ["#000000", "#ffffff"])

        fig, axes = self._setup_figure(len(names), use_geo=bool(style.overlay_layers))
        mesh = None
        for ax, name, values in zip(axes, names, panels):
            mesh = self._plot_panel(ax, lon, lat, values, cmap, vmin, vmax, hints)
            for layer in style.overlay_layers:
                self._add_layer(ax, layer)
            self._format_axis(ax, name, style.aspect_ratio or 1.0, hints)
        for ax in axes[len(names):]:
            ax.set_visible(False)

        fig.colorbar(mesh, ax=axes[:len(names)], label=self.colorbar_label,
                     fraction=0.046, pad=0.04)
        if hints.get("title"):
            fig.suptitle(hints["title"], fontsize=12, fontweight='bold')

        logger.info("✓ Rendered %d panel(s): %s", len(names), ", ".join(names))
        return fig

    def save(self, fig: plt.Figure, output_path) -> Path:
        """Save figure and close it."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, dpi=self.dpi, bbox_inches='tight')
        plt.close(fig)
        logger.info("✓ Plot saved: %s", output_path)
        return output_path

    def _select_panels(self, raster: SpatialRaster, panels) -> List[str]:
        """Resolve panel selectors (names or 1-based indices) to names."""
        available = raster.panel_names
        if panels is None:
            return available
        names = []
        for sel in panels:
            if isinstance(sel, int):
                if not 1 <= sel <= len(available):
                    raise ValueError(f"Panel index {sel} out of range 1..{len(available)}")
                names.append(available[sel - 1])
            elif sel in available:
                names.append(sel)
            else:
                raise ValueError(f"Unknown panel {sel!r}; available: {available}")
        if not names:
            raise ValueError("No panels selected")
        return names

    def _color_limits(self, panels: List[np.ndarray], hints: dict) -> Tuple[float, float]:
        finite = np.concatenate([p[np.isfinite(p)] for p in panels])
        vmin = hints.get("vmin", float(finite.min()) if finite.size else 0.0)
        vmax = hints.get("vmax", float(finite.max()) if finite.size else 1.0)
        return vmin, vmax

    def _setup_figure(self, n_panels: int, use_geo: bool):
        """Create a figure with enough axes for ``n_panels``."""
        ncols = min(self.max_columns, n_panels)
        nrows = math.ceil(n_panels / ncols)
        subplot_kw = {}
        if use_geo:
            import cartopy.crs as ccrs
            subplot_kw["projection"] = ccrs.PlateCarree()
        fig, axes = plt.subplots(
            nrows, ncols,
            figsize=(self.panel_size[0] * ncols, self.panel_size[1] * nrows),
            dpi=self.dpi,
            squeeze=False,
            subplot_kw=subplot_kw,
        )
        return fig, list(axes.ravel())

    def _plot_panel(self, ax, lon, lat, values, cmap, vmin, vmax, hints):
        """pcolormesh of one panel, optional contour lines."""
        extra = self._transform_kwargs(ax)
        mesh = ax.pcolormesh(
            lon, lat, values,
            cmap=cmap, vmin=vmin, vmax=vmax,
            shading='auto', zorder=1, **extra,
        )
        if hints.get("contour"):
            ax.contour(
                lon, lat, values,
                levels=hints.get("levels"),
                colors='black', linewidths=0.5, zorder=30, **extra,
            )
        return mesh

    def _add_layer(self, ax, layer) -> None:
        """Draw an overlay layer on GeoAxes."""
        feature = layer.feature if isinstance(layer, BackdropLayer) else layer
        ax.add_feature(
            feature,
            linewidth=self.backdrop_linewidth,
            edgecolor=self.backdrop_color,
            facecolor='none',
            zorder=50,
        )

    def _format_axis(self, ax, title: str, aspect: float, hints: dict) -> None:
        ax.set_title(title, fontsize=10)
        ax.set_aspect(aspect)
        if hints.get("xlim") is not None:
            ax.set_xlim(*hints["xlim"])
        if hints.get("ylim") is not None:
            ax.set_ylim(*hints["ylim"])
        if not hints.get("draw_scales", False):
            ax.set_xticks([])
            ax.set_yticks([])

    @staticmethod
    def _transform_kwargs(ax) -> dict:
        if ax.name == "cartopy.geoaxes":
            import cartopy.crs as ccrs
            return {"transform": ccrs.PlateCarree()}
        return {}
