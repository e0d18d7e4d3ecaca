"""Climatology grid model.

A ClimatologyGrid is an immutable value: an n-dimensional array with named
axes, lat/lon cell-centre coordinates and an explicit climatology marker.
Every transformation returns a new grid.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Sequence, Tuple

import numpy as np
import xarray as xr

from climraster.contracts.base import require
from climraster.contracts.failure import MalformedGridError

__all__ = [
    'ClimatologyGrid',
    'GridCoordinates',
    'VariableMetadata',
    'TIME_DIM',
    'MEMBER_DIM',
    'VARIABLE_DIM',
    'LAT_DIM',
    'LON_DIM',
    'RECOGNIZED_DIMS',
    'CLIMATOLOGY_ATTR',
]

TIME_DIM = "time"
MEMBER_DIM = "member"
VARIABLE_DIM = "var"
LAT_DIM = "lat"
LON_DIM = "lon"
RECOGNIZED_DIMS = (VARIABLE_DIM, MEMBER_DIM, TIME_DIM, LAT_DIM, LON_DIM)

# xarray attribute holding the climatology statistic name
CLIMATOLOGY_ATTR = "climatology:fun"


@dataclass(frozen=True)
class VariableMetadata:
    """Descriptor of one variable of a multigrid (used for panel names)."""
    var_name: str
    long_name: Optional[str] = None
    level: Optional[float] = None
    units: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.long_name if self.long_name else self.var_name


@dataclass(frozen=True)
class GridCoordinates:
    """Cell-centre coordinate vectors."""
    lat: np.ndarray
    lon: np.ndarray

    def __post_init__(self):
        object.__setattr__(self, "lat", np.asarray(self.lat, dtype=float).ravel())
        object.__setattr__(self, "lon", np.asarray(self.lon, dtype=float).ravel())

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self.lat), len(self.lon)


@dataclass(frozen=True)
class ClimatologyGrid:
    """Climatological grid with explicitly named axes.

    Parameters
    ----------
    data : np.ndarray
        Array whose rank matches ``dimension_labels``.
    dimension_labels : tuple of str
        Axis names, unique, drawn from RECOGNIZED_DIMS.
    coordinates : GridCoordinates
        lat/lon cell centres matching the lat/lon extents of ``data``.
    climatology_marker : str, optional
        Name of the statistic computed upstream (e.g. "mean"). None means
        the grid still holds raw data and cannot be plotted.
    variable_metadata : tuple of VariableMetadata
        One entry per variable for multigrids. Empty otherwise.

    Raises
    ------
    MalformedGridError
        If labels, rank and coordinates disagree.
    """
    data: np.ndarray
    dimension_labels: Tuple[str, ...]
    coordinates: GridCoordinates
    climatology_marker: Optional[str] = None
    variable_metadata: Tuple[VariableMetadata, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "data", np.asarray(self.data))
        object.__setattr__(self, "dimension_labels", tuple(self.dimension_labels))
        object.__setattr__(self, "variable_metadata", tuple(self.variable_metadata))

        labels = self.dimension_labels
        require(
            len(labels) == self.data.ndim,
            f"Grid has {self.data.ndim} dims but {len(labels)} labels: {labels}",
            MalformedGridError,
        )
        require(
            len(set(labels)) == len(labels),
            f"Duplicate dimension labels: {labels}",
            MalformedGridError,
        )
        unknown = [name for name in labels if name not in RECOGNIZED_DIMS]
        require(
            not unknown,
            f"Unrecognized dimension labels {unknown}; expected a subset of {RECOGNIZED_DIMS}",
            MalformedGridError,
        )
        for name, coord in ((LAT_DIM, self.coordinates.lat), (LON_DIM, self.coordinates.lon)):
            if name in labels:
                require(
                    self.axis_length(name) == len(coord),
                    f"'{name}' axis has length {self.axis_length(name)} "
                    f"but {len(coord)} coordinates",
                    MalformedGridError,
                )

    def has_axis(self, name: str) -> bool:
        return name in self.dimension_labels

    def axis_index(self, name: str) -> int:
        """Position of axis ``name`` in the data array."""
        require(
            name in self.dimension_labels,
            f"Grid has no '{name}' axis (dims={self.dimension_labels})",
            MalformedGridError,
        )
        return self.dimension_labels.index(name)

    def axis_length(self, name: str) -> int:
        return self.data.shape[self.axis_index(name)]

    def with_data(self, data: np.ndarray, dimension_labels: Sequence[str]) -> "ClimatologyGrid":
        """New grid sharing metadata, with replaced data and labels."""
        return replace(self, data=data, dimension_labels=tuple(dimension_labels))

    def relabel(self, old: str, new: str) -> "ClimatologyGrid":
        """Rename axis ``old`` to ``new``. Data is untouched."""
        index = self.axis_index(old)
        labels = list(self.dimension_labels)
        labels[index] = new
        return self.with_data(self.data, labels)

    @classmethod
    def from_dataarray(
        cls,
        da: xr.DataArray,
        variable_metadata: Sequence[VariableMetadata] = (),
    ) -> "ClimatologyGrid":
        """Build a grid from an xarray DataArray.

        The climatology marker is read from the ``climatology:fun``
        attribute; lat/lon coordinates from the matching coords.
        """
        require(
            LAT_DIM in da.coords and LON_DIM in da.coords,
            f"DataArray needs '{LAT_DIM}' and '{LON_DIM}' coordinates",
            MalformedGridError,
        )
        return cls(
            data=da.values,
            dimension_labels=tuple(str(d) for d in da.dims),
            coordinates=GridCoordinates(lat=da[LAT_DIM].values, lon=da[LON_DIM].values),
            climatology_marker=da.attrs.get(CLIMATOLOGY_ATTR),
            variable_metadata=tuple(variable_metadata),
        )

    def to_dataarray(self) -> xr.DataArray:
        """Convert to an xarray DataArray (marker stored as attribute)."""
        coords = {}
        if self.has_axis(LAT_DIM):
            coords[LAT_DIM] = self.coordinates.lat
        if self.has_axis(LON_DIM):
            coords[LON_DIM] = self.coordinates.lon
        attrs = {}
        if self.climatology_marker is not None:
            attrs[CLIMATOLOGY_ATTR] = self.climatology_marker
        return xr.DataArray(self.data, dims=self.dimension_labels, coords=coords, attrs=attrs)
