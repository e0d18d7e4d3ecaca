"""Grid stage contracts.

Each function enforces the guarantee a stage hands to the next one.
"""

import numpy as np

from climraster.contracts.base import require
from climraster.contracts.failure import (
    NotAClimatologyError,
    MalformedGridError,
    EmptyPanelAxisError,
)

# Canonical axis order after normalization
NORMALIZED_DIMS = ("member", "time", "lat", "lon")


def assert_climatology(grid) -> None:
    """Enforce the input contract: the grid is an aggregated climatology.

    Raises
    ------
    NotAClimatologyError
        If the grid carries no climatology marker.
    """
    require(
        grid.climatology_marker is not None,
        "The input grid is not a climatology: aggregate it with a "
        "climatology function first",
        NotAClimatologyError,
    )


def assert_normalized(grid) -> None:
    """Enforce the normalizer contract.

    The grid exposes exactly the axes (member, time, lat, lon), in that
    order, with a singleton time axis.

    Raises
    ------
    MalformedGridError
        If any invariant is violated
    """
    require(
        "member" in grid.dimension_labels,
        f"Normalize contract violated: no 'member' panel axis (dims={grid.dimension_labels})",
        MalformedGridError,
    )
    require(
        grid.dimension_labels == NORMALIZED_DIMS,
        f"Normalize contract violated: dims {grid.dimension_labels}, expected {NORMALIZED_DIMS}",
        MalformedGridError,
    )
    require(
        grid.data.shape[1] == 1,
        f"Normalize contract violated: time axis has length {grid.data.shape[1]}, expected 1",
        MalformedGridError,
    )


def assert_has_panels(n_panels: int) -> None:
    """Enforce at least one panel before assembly."""
    require(
        n_panels > 0,
        "Assemble contract violated: the panel axis is empty",
        EmptyPanelAxisError,
    )


def assert_aligned(matrix: np.ndarray, pairs: np.ndarray, n_panels: int) -> None:
    """Enforce value/coordinate alignment of an assembled raster.

    Row i of ``matrix`` must describe the cell at ``pairs[i]``; both come
    from the same (lat outer, lon inner) iteration.
    """
    require(
        matrix.ndim == 2 and pairs.ndim == 2 and pairs.shape[1] == 2,
        f"Assemble contract violated: matrix {matrix.shape}, pairs {pairs.shape}",
    )
    require(
        matrix.shape[0] == pairs.shape[0],
        f"Assemble contract violated: {matrix.shape[0]} rows but "
        f"{pairs.shape[0]} coordinate pairs",
    )
    require(
        matrix.shape[1] == n_panels,
        f"Assemble contract violated: {matrix.shape[1]} columns, expected {n_panels}",
    )
