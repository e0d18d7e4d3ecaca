"""Climatology grid to rendered trellis plot.

Stages run in a fixed order and any failure aborts the run:

    classify -> normalize -> assemble -> label + geometry -> render

No partial raster is ever returned.
"""

import logging
from typing import Callable, Optional, Sequence

from climraster.contracts.base import require
from climraster.grid.assembler import assemble
from climraster.grid.classifier import classify
from climraster.grid.geometry import build_geometry
from climraster.grid.labeler import panel_names
from climraster.grid.model import ClimatologyGrid
from climraster.grid.normalizer import normalize
from climraster.raster import SpatialRaster
from climraster.schemas import InternalConfig, resolve_config
from climraster.visualization.backdrop import resolve_backdrop
from climraster.visualization.plotter import ClimatologyPlotter
from climraster.visualization.style import StyleOptions

__all__ = ['prepare_raster', 'plot_climatology']

logger = logging.getLogger(__name__)


def prepare_raster(
    grid: ClimatologyGrid,
    config: Optional[InternalConfig] = None,
    aggregate: Optional[Callable[..., ClimatologyGrid]] = None,
    panel_titles: Optional[Sequence[str]] = None,
) -> SpatialRaster:
    """Convert a climatology grid into a SpatialRaster.

    Parameters
    ----------
    grid : ClimatologyGrid
        Climatology (must carry a climatology marker).
    config : InternalConfig, optional
        Resolved configuration. Defaults to resolve_config().
    aggregate : callable, optional
        Ensemble reduction used for multimember multigrids.
    panel_titles : sequence of str, optional
        Replace the derived panel names (one per panel, unique).

    Returns
    -------
    SpatialRaster

    Raises
    ------
    NotAClimatologyError, MalformedGridError, EmptyPanelAxisError,
    InvalidGeometryError
        From the stage that detects the problem.
    """
    config = config or resolve_config()

    classification = classify(grid)
    normalized = normalize(
        grid,
        classification,
        aggregate=aggregate,
        skip_missing=config.raster.skip_missing,
        notify=config.raster.ensemble_notice,
    )
    assembled = assemble(normalized)

    names = panel_names(normalized, classification.is_multigrid)
    if panel_titles is not None:
        if len(panel_titles) != len(names):
            raise ValueError(
                f"Got {len(panel_titles)} panel titles for {len(names)} panels"
            )
        names = list(panel_titles)

    geometry = build_geometry(normalized.coordinates, config.raster.default_cell_size)
    require(
        geometry.n_cells == assembled.pairs.shape[0],
        f"Geometry has {geometry.n_cells} cells, raster has {assembled.pairs.shape[0]}",
    )

    raster = SpatialRaster.from_matrix(
        assembled.matrix,
        assembled.pairs,
        names,
        geometry,
        is_multigrid=classification.is_multigrid,
    )
    logger.info("Raster ready: %d panel(s), dims=%s", raster.n_panels, geometry.dims)
    return raster


def plot_climatology(
    grid: ClimatologyGrid,
    backdrop_theme: Optional[str] = None,
    style: Optional[StyleOptions] = None,
    config: Optional[InternalConfig] = None,
    renderer=None,
    aggregate: Optional[Callable[..., ClimatologyGrid]] = None,
):
    """Plot a climatology grid as a trellis of maps.

    Parameters
    ----------
    grid : ClimatologyGrid
        Climatology of one variable (members as panels) or a multigrid
        (variables as panels; members averaged with a notice).
    backdrop_theme : str, optional
        "none", "coastline" or "countries". Defaults to
        ``config.style.backdrop_theme``.
    style : StyleOptions, optional
        Caller style. Unset color ramp and aspect get configured defaults;
        the backdrop layer is appended after caller layers.
    config : InternalConfig, optional
        Resolved configuration. Defaults to resolve_config().
    renderer : object, optional
        Anything with ``render(raster, style)``. Defaults to
        ClimatologyPlotter(config).
    aggregate : callable, optional
        Ensemble reduction used for multimember multigrids.

    Returns
    -------
    Whatever the renderer returns (a matplotlib Figure by default).

    Raises
    ------
    UnknownBackdropThemeError
        Before any array processing, if the theme is not recognized.

    Examples
    --------
    >>> fig = plot_climatology(clim, backdrop_theme="coastline",
    ...                        style=StyleOptions(panels=[1, 2]))
    """
    config = config or resolve_config()
    theme = backdrop_theme if backdrop_theme is not None else config.style.backdrop_theme
    layer = resolve_backdrop(theme)

    style = (style or StyleOptions()).with_defaults(config)
    if layer is not None:
        style = style.with_layer(layer)

    raster = prepare_raster(grid, config, aggregate=aggregate, panel_titles=style.panel_titles)

    renderer = renderer or ClimatologyPlotter(config)
    return renderer.render(raster, style)
