"""Raster assembly: panel slices to a flattened, raster-ordered matrix.

Flattening and coordinate pairing share one convention: row-major over
(lat, lon), lat outer and lon inner. Rows are then permuted into raster
scan order (north to south, west to east).
"""

import logging
from typing import NamedTuple

import numpy as np

from climraster.contracts.grid import assert_normalized, assert_has_panels, assert_aligned
from climraster.grid.model import ClimatologyGrid, MEMBER_DIM

__all__ = [
    'AssembledRaster',
    'assemble',
    'flatten_slice',
    'unflatten_slice',
    'coordinate_pairs',
    'raster_order',
]

logger = logging.getLogger(__name__)


class AssembledRaster(NamedTuple):
    """Raster-ordered values and their cell coordinates.

    matrix : (n_cells, n_panels) array, one column per panel
    pairs : (n_cells, 2) array of (lon, lat), aligned with matrix rows
    """
    matrix: np.ndarray
    pairs: np.ndarray


def flatten_slice(values: np.ndarray) -> np.ndarray:
    """Flatten a (lat, lon) or (1, lat, lon) slice, lat outer and lon inner."""
    values = np.asarray(values)
    if values.ndim == 3:
        if values.shape[0] != 1:
            raise ValueError(f"Expected a singleton leading axis, got shape {values.shape}")
        values = values[0]
    if values.ndim != 2:
        raise ValueError(f"Expected a 2D (lat, lon) slice, got shape {values.shape}")
    return values.reshape(-1, order="C")


def unflatten_slice(values: np.ndarray, n_lat: int, n_lon: int) -> np.ndarray:
    """Inverse of flatten_slice."""
    return np.asarray(values).reshape((n_lat, n_lon), order="C")


def coordinate_pairs(lat: np.ndarray, lon: np.ndarray) -> np.ndarray:
    """(lon, lat) pairs in the same order flatten_slice emits values."""
    lat_grid, lon_grid = np.meshgrid(lat, lon, indexing='ij')
    return np.column_stack([lon_grid.ravel(order="C"), lat_grid.ravel(order="C")])


def raster_order(pairs: np.ndarray) -> np.ndarray:
    """Stable permutation sorting pairs by descending lat, then ascending lon."""
    # lexsort uses the last key as primary
    return np.lexsort((pairs[:, 0], -pairs[:, 1]))


def assemble(grid: ClimatologyGrid) -> AssembledRaster:
    """Assemble a normalized grid into a raster-ordered matrix.

    Parameters
    ----------
    grid : ClimatologyGrid
        Output of normalize(), dims (member, time, lat, lon).

    Returns
    -------
    AssembledRaster
        (n_lat * n_lon, n_panels) matrix and matching (lon, lat) pairs,
        both in descending-lat, ascending-lon order.

    Raises
    ------
    EmptyPanelAxisError
        If the member axis is empty.
    """
    assert_normalized(grid)
    n_panels = grid.axis_length(MEMBER_DIM)
    assert_has_panels(n_panels)

    coords = grid.coordinates
    pairs = coordinate_pairs(coords.lat, coords.lon)
    n_cells = pairs.shape[0]

    matrix = np.empty((n_cells, n_panels), dtype=np.result_type(grid.data.dtype, np.float64))
    for i in range(n_panels):
        matrix[:, i] = flatten_slice(grid.data[i])

    assert_aligned(matrix, pairs, n_panels)

    order = raster_order(pairs)
    logger.debug("Assembled %d panels x %d cells", n_panels, n_cells)
    return AssembledRaster(matrix=matrix[order], pairs=pairs[order])
