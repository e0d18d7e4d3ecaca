"""Test dimension normalization to a single panel axis."""

import logging

import numpy as np
import pytest

from climraster.contracts import MalformedGridError
from climraster.grid.classifier import classify
from climraster.grid.ensemble import aggregate
from climraster.grid.normalizer import normalize, ENSEMBLE_MEAN_NOTICE
from tests.helpers.fake_grid import make_climatology

pytestmark = pytest.mark.unit

CANONICAL = ("member", "time", "lat", "lon")


def _normalize(grid, **kwargs):
    return normalize(grid, classify(grid), **kwargs)


def _notices(caplog):
    return [r for r in caplog.records if r.getMessage() == ENSEMBLE_MEAN_NOTICE]


def test_ensemble_passes_through_with_time_added():
    grid = make_climatology({"member": 3, "lat": 2, "lon": 2})
    out = _normalize(grid)

    assert out.dimension_labels == CANONICAL
    assert out.data.shape == (3, 1, 2, 2)
    np.testing.assert_array_equal(out.data[:, 0], grid.data)


def test_single_grid_gets_singleton_member():
    grid = make_climatology({"lat": 2, "lon": 3})
    out = _normalize(grid)

    assert out.dimension_labels == CANONICAL
    assert out.data.shape == (1, 1, 2, 3)


def test_axes_are_reordered():
    grid = make_climatology({"lat": 2, "lon": 3, "time": 1, "member": 2})
    out = _normalize(grid)

    assert out.dimension_labels == CANONICAL
    np.testing.assert_array_equal(out.data[1, 0], grid.data[:, :, 0, 1])


def test_multigrid_without_members_relabels_variable_axis(caplog):
    grid = make_climatology({"var": 2, "lat": 2, "lon": 2})
    with caplog.at_level(logging.INFO, logger="climraster"):
        out = _normalize(grid)

    assert out.dimension_labels == CANONICAL
    assert out.data.shape == (2, 1, 2, 2)
    np.testing.assert_array_equal(out.data[:, 0], grid.data)
    assert _notices(caplog) == []


def test_multigrid_with_members_is_ensemble_mean(caplog):
    grid = make_climatology({"var": 2, "member": 4, "lat": 3, "lon": 3})
    with caplog.at_level(logging.INFO, logger="climraster"):
        out = _normalize(grid)

    assert out.dimension_labels == CANONICAL
    assert out.data.shape == (2, 1, 3, 3)
    np.testing.assert_allclose(out.data[:, 0], grid.data.mean(axis=1))
    assert len(_notices(caplog)) == 1


def test_single_member_multigrid_has_no_notice(caplog):
    grid = make_climatology({"var": 2, "member": 1, "lat": 2, "lon": 2})
    with caplog.at_level(logging.INFO, logger="climraster"):
        out = _normalize(grid)

    assert out.data.shape == (2, 1, 2, 2)
    assert _notices(caplog) == []


def test_notice_can_be_suppressed(caplog):
    grid = make_climatology({"var": 2, "member": 3, "lat": 2, "lon": 2})
    with caplog.at_level(logging.INFO, logger="climraster"):
        _normalize(grid, notify=False)

    assert _notices(caplog) == []


def test_multigrid_mean_skips_missing_values():
    data = np.ones((1, 2, 2, 2))
    data[0, 0, 0, 0] = np.nan
    grid = make_climatology({"var": 1, "member": 2, "lat": 2, "lon": 2}, data=data)
    out = _normalize(grid)

    assert out.data[0, 0, 0, 0] == 1.0


def test_custom_aggregator_is_used():
    calls = []

    def first_member(grid, axis, op, skip_missing):
        calls.append((axis, op, skip_missing))
        index = grid.axis_index(axis)
        labels = [d for d in grid.dimension_labels if d != axis]
        return grid.with_data(np.take(grid.data, 0, axis=index), labels)

    grid = make_climatology({"var": 2, "member": 3, "lat": 2, "lon": 2})
    out = _normalize(grid, aggregate=first_member, skip_missing=False)

    assert calls == [("member", "mean", False)]
    np.testing.assert_array_equal(out.data[:, 0], grid.data[:, 0])


def test_aggregator_leaving_member_axis_is_malformed():
    grid = make_climatology({"var": 2, "member": 3, "lat": 2, "lon": 2})
    with pytest.raises(MalformedGridError, match="member"):
        _normalize(grid, aggregate=lambda g, **kwargs: g)


def test_input_grid_is_not_modified():
    grid = make_climatology({"var": 2, "member": 3, "lat": 2, "lon": 2})
    before = grid.data.copy()
    _normalize(grid)

    assert grid.dimension_labels == ("var", "member", "lat", "lon")
    np.testing.assert_array_equal(grid.data, before)


def test_long_time_axis_is_malformed():
    grid = make_climatology({"time": 3, "member": 2, "lat": 2, "lon": 2})
    with pytest.raises(MalformedGridError, match="3 time steps"):
        _normalize(grid)


def test_missing_spatial_axis_is_malformed():
    grid = make_climatology({"member": 2, "lat": 2})
    with pytest.raises(MalformedGridError, match="'lon'"):
        _normalize(grid)
