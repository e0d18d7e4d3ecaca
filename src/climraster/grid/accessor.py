"""Explicit accessor for grid dimensions and coordinates.

Pipeline stages read shapes and coordinates only through GridAccessor so
there is one definition of "axis length" and "grid spacing".
"""

from typing import Tuple

from climraster.grid.geometry import build_geometry
from climraster.grid.model import ClimatologyGrid, GridCoordinates, LAT_DIM, LON_DIM

__all__ = ['GridAccessor']


class GridAccessor:
    """Read-only view helpers over ClimatologyGrid."""

    def dimension_labels(self, grid: ClimatologyGrid) -> Tuple[str, ...]:
        return grid.dimension_labels

    def axis_length(self, grid: ClimatologyGrid, name: str) -> int:
        """Length of axis ``name``, 0 when the axis is absent."""
        if not grid.has_axis(name):
            return 0
        return grid.axis_length(name)

    def coordinates(self, grid: ClimatologyGrid) -> GridCoordinates:
        return grid.coordinates

    def shape(self, grid: ClimatologyGrid) -> Tuple[int, int]:
        """Spatial extent (n_lat, n_lon)."""
        return self.axis_length(grid, LAT_DIM), self.axis_length(grid, LON_DIM)

    def resolution(self, grid: ClimatologyGrid, default: float = 1.0) -> Tuple[float, float]:
        """Grid spacing (res_x, res_y); single-cell axes get ``default``."""
        return build_geometry(grid.coordinates, default_cell_size=default).cell_size
