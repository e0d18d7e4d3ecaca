"""SpatialRaster: flattened, geometry-annotated panels ready for rendering.

Rows of ``columns`` are raster-ordered: descending lat (north to south),
then ascending lon (west to east). One column per panel.
"""

import logging
from dataclasses import dataclass
from typing import List

import numpy as np
import pandas as pd
import xarray as xr

from climraster.contracts.base import require
from climraster.grid.geometry import GridTopology

__all__ = ['SpatialRaster']

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpatialRaster:
    """Raster panels plus grid topology.

    Parameters
    ----------
    geometry : GridTopology
        Origin, cell size and dims of the source grid.
    columns : pd.DataFrame
        One column per panel, ``nx * ny`` rows in raster order.
    coordinates : pd.DataFrame
        ``lon`` and ``lat`` of each row of ``columns``.
    is_multigrid : bool
        True when panels are variables rather than members.
    """
    geometry: GridTopology
    columns: pd.DataFrame
    coordinates: pd.DataFrame
    is_multigrid: bool = False

    def __post_init__(self):
        n_cells = self.geometry.n_cells
        require(
            len(self.columns) == n_cells,
            f"Raster has {len(self.columns)} rows, geometry expects {n_cells}",
        )
        require(
            len(self.coordinates) == n_cells,
            f"Raster has {len(self.coordinates)} coordinate rows, geometry expects {n_cells}",
        )
        require(
            self.columns.columns.is_unique,
            f"Panel names are not unique: {list(self.columns.columns)}",
        )

    @classmethod
    def from_matrix(
        cls,
        matrix: np.ndarray,
        pairs: np.ndarray,
        names: List[str],
        geometry: GridTopology,
        is_multigrid: bool = False,
    ) -> "SpatialRaster":
        require(
            matrix.shape[1] == len(names),
            f"{matrix.shape[1]} panels but {len(names)} names",
        )
        columns = pd.DataFrame(matrix, columns=list(names))
        coordinates = pd.DataFrame({"lon": pairs[:, 0], "lat": pairs[:, 1]})
        return cls(geometry=geometry, columns=columns, coordinates=coordinates,
                   is_multigrid=is_multigrid)

    @property
    def panel_names(self) -> List[str]:
        return list(self.columns.columns)

    @property
    def n_panels(self) -> int:
        return self.columns.shape[1]

    def lon(self) -> np.ndarray:
        """Ascending lon centres (x axis of a panel)."""
        return np.unique(self.coordinates["lon"].to_numpy())

    def lat(self) -> np.ndarray:
        """Descending lat centres (row order of a panel)."""
        return np.unique(self.coordinates["lat"].to_numpy())[::-1]

    def panel(self, name: str) -> np.ndarray:
        """2D (ny, nx) array of one panel, first row northernmost."""
        nx, ny = self.geometry.dims
        return self.columns[name].to_numpy().reshape((ny, nx))

    def to_dataset(self) -> xr.Dataset:
        """One (lat, lon) variable per panel."""
        lat, lon = self.lat(), self.lon()
        data_vars = {
            name: (("lat", "lon"), self.panel(name))
            for name in self.panel_names
        }
        return xr.Dataset(
            data_vars=data_vars,
            coords={"lat": lat, "lon": lon},
            attrs={
                "origin": self.geometry.origin,
                "cell_size": self.geometry.cell_size,
            },
        )
