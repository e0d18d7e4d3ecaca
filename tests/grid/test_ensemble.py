"""Test ensemble reduction."""

import numpy as np
import pytest

from climraster.grid.ensemble import aggregate, ensemble_mean
from tests.helpers.fake_grid import make_climatology

pytestmark = pytest.mark.unit


def test_mean_drops_member_axis():
    grid = make_climatology({"member": 4, "lat": 2, "lon": 3})
    out = ensemble_mean(grid)

    assert out.dimension_labels == ("lat", "lon")
    np.testing.assert_allclose(out.data, grid.data.mean(axis=0))
    assert out.climatology_marker == grid.climatology_marker


def test_skip_missing():
    data = np.array([[[1.0, np.nan]], [[3.0, np.nan]]])
    grid = make_climatology({"member": 2, "lat": 1, "lon": 2}, data=data)

    out = aggregate(grid, skip_missing=True)
    assert out.data[0, 0] == 2.0
    assert np.isnan(out.data[0, 1])


def test_without_skip_missing_nan_propagates():
    data = np.array([[[1.0, 2.0]], [[np.nan, 4.0]]])
    grid = make_climatology({"member": 2, "lat": 1, "lon": 2}, data=data)

    out = aggregate(grid, skip_missing=False)
    assert np.isnan(out.data[0, 0])
    assert out.data[0, 1] == 3.0


@pytest.mark.parametrize("op, expected", [
    ("max", 3.0),
    ("min", 1.0),
    ("sum", 4.0),
    ("median", 2.0),
])
def test_other_ops(op, expected):
    data = np.array([[[1.0]], [[3.0]]])
    grid = make_climatology({"member": 2, "lat": 1, "lon": 1}, data=data)
    assert aggregate(grid, op=op).data[0, 0] == expected


def test_unknown_op():
    grid = make_climatology({"member": 2, "lat": 1, "lon": 1})
    with pytest.raises(ValueError, match="Unknown aggregation op"):
        aggregate(grid, op="mode")
