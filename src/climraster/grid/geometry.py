"""Raster grid topology from coordinate vectors."""

import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from climraster.contracts.base import require
from climraster.contracts.failure import InvalidGeometryError
from climraster.grid.model import GridCoordinates

__all__ = ['GridTopology', 'build_geometry']

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GridTopology:
    """Regular grid description.

    origin : (x0, y0) centre of the lower-left cell (min lon, min lat)
    cell_size : (dx, dy), both positive
    dims : (nx, ny) number of cells along lon and lat
    """
    origin: Tuple[float, float]
    cell_size: Tuple[float, float]
    dims: Tuple[int, int]

    @property
    def n_cells(self) -> int:
        return self.dims[0] * self.dims[1]

    def bounds(self) -> Tuple[float, float, float, float]:
        """(xmin, xmax, ymin, ymax) of the cell edges."""
        (x0, y0), (dx, dy), (nx, ny) = self.origin, self.cell_size, self.dims
        x1 = x0 + (nx - 1) * dx
        y1 = y0 + (ny - 1) * dy
        return (
            x0 - dx / 2, x1 + dx / 2,
            y0 - dy / 2, y1 + dy / 2,
        )


def build_geometry(coordinates: GridCoordinates, default_cell_size: float = 1.0) -> GridTopology:
    """Derive origin, cell size and dims from lat/lon vectors.

    Raises
    ------
    InvalidGeometryError
        If an axis is empty or its spacing is zero or not finite.
    """
    lon, lat = coordinates.lon, coordinates.lat
    require(
        len(lon) > 0 and len(lat) > 0,
        f"Empty coordinate axis (n_lon={len(lon)}, n_lat={len(lat)})",
        InvalidGeometryError,
    )
    dx = _spacing(lon, "lon", default_cell_size)
    dy = _spacing(lat, "lat", default_cell_size)
    topology = GridTopology(
        origin=(float(np.min(lon)), float(np.min(lat))),
        cell_size=(dx, dy),
        dims=(len(lon), len(lat)),
    )
    logger.debug("Grid topology: %s", topology)
    return topology


def _spacing(values: np.ndarray, name: str, default: float) -> float:
    if len(values) > 1:
        steps = np.abs(np.diff(values))
        step = float(np.mean(steps)) if np.all(steps > 0) else 0.0
    else:
        step = float(default)
    require(
        np.isfinite(step) and step > 0,
        f"Invalid '{name}' cell size {step}: spacing must be positive",
        InvalidGeometryError,
    )
    return step
