"""Test ClimatologyGrid construction, immutability and xarray interop."""

import numpy as np
import pytest
import xarray as xr

from climraster.contracts import MalformedGridError
from climraster.grid.model import (
    ClimatologyGrid,
    GridCoordinates,
    VariableMetadata,
    CLIMATOLOGY_ATTR,
)
from tests.helpers.fake_grid import make_climatology

pytestmark = pytest.mark.unit


def _coords(n_lat=2, n_lon=2):
    return GridCoordinates(lat=np.arange(n_lat, dtype=float), lon=np.arange(n_lon, dtype=float))


def test_rank_must_match_labels():
    with pytest.raises(MalformedGridError, match="labels"):
        ClimatologyGrid(np.zeros((2, 2)), ("member", "lat", "lon"), _coords())


def test_labels_must_be_unique():
    with pytest.raises(MalformedGridError, match="Duplicate"):
        ClimatologyGrid(np.zeros((2, 2, 2)), ("lat", "lat", "lon"), _coords())


def test_labels_must_be_recognized():
    with pytest.raises(MalformedGridError, match="Unrecognized"):
        ClimatologyGrid(np.zeros((2, 2, 2)), ("level", "lat", "lon"), _coords())


def test_coordinates_must_match_extent():
    with pytest.raises(MalformedGridError, match="'lon' axis has length 2 but 3"):
        ClimatologyGrid(np.zeros((2, 2)), ("lat", "lon"), _coords(2, 3))


def test_axis_helpers():
    grid = make_climatology({"member": 3, "lat": 2, "lon": 4})
    assert grid.axis_index("lat") == 1
    assert grid.axis_length("lon") == 4
    assert grid.has_axis("member")
    assert not grid.has_axis("time")


def test_missing_axis_raises():
    grid = make_climatology({"lat": 2, "lon": 2})
    with pytest.raises(MalformedGridError, match="no 'member' axis"):
        grid.axis_index("member")


def test_relabel_returns_new_grid():
    grid = make_climatology({"var": 2, "lat": 2, "lon": 2})
    relabeled = grid.relabel("var", "member")

    assert relabeled.dimension_labels == ("member", "lat", "lon")
    assert grid.dimension_labels == ("var", "lat", "lon")
    np.testing.assert_array_equal(relabeled.data, grid.data)
    assert relabeled.variable_metadata == grid.variable_metadata


def test_grid_is_frozen():
    grid = make_climatology({"lat": 2, "lon": 2})
    with pytest.raises(AttributeError):
        grid.climatology_marker = None


def test_from_dataarray_reads_marker():
    da = xr.DataArray(
        np.ones((2, 3, 4)),
        dims=("member", "lat", "lon"),
        coords={"lat": [1.0, 2.0, 3.0], "lon": [0.0, 1.0, 2.0, 3.0]},
        attrs={CLIMATOLOGY_ATTR: "mean"},
    )
    grid = ClimatologyGrid.from_dataarray(da)

    assert grid.climatology_marker == "mean"
    assert grid.dimension_labels == ("member", "lat", "lon")
    np.testing.assert_array_equal(grid.coordinates.lon, [0.0, 1.0, 2.0, 3.0])


def test_from_dataarray_without_marker():
    da = xr.DataArray(
        np.ones((2, 2)),
        dims=("lat", "lon"),
        coords={"lat": [1.0, 2.0], "lon": [0.0, 1.0]},
    )
    assert ClimatologyGrid.from_dataarray(da).climatology_marker is None


def test_from_dataarray_requires_spatial_coords():
    da = xr.DataArray(np.ones((2, 2)), dims=("lat", "lon"))
    with pytest.raises(MalformedGridError):
        ClimatologyGrid.from_dataarray(da)


def test_to_dataarray_round_trip():
    grid = make_climatology({"member": 2, "lat": 2, "lon": 3})
    back = ClimatologyGrid.from_dataarray(grid.to_dataarray())

    assert back.dimension_labels == grid.dimension_labels
    assert back.climatology_marker == "mean"
    np.testing.assert_array_equal(back.data, grid.data)


def test_variable_display_name_falls_back_to_short_name():
    assert VariableMetadata(var_name="tas").display_name == "tas"
    assert VariableMetadata(var_name="tas", long_name="Air temperature").display_name == "Air temperature"
