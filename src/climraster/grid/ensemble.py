"""Ensemble reduction across an axis of a climatology grid."""

import logging
import warnings

import numpy as np

from climraster.grid.model import ClimatologyGrid, MEMBER_DIM

__all__ = ['aggregate', 'ensemble_mean']

logger = logging.getLogger(__name__)

_REDUCERS = {
    "mean": (np.mean, np.nanmean),
    "median": (np.median, np.nanmedian),
    "sum": (np.sum, np.nansum),
    "min": (np.min, np.nanmin),
    "max": (np.max, np.nanmax),
}


def aggregate(
    grid: ClimatologyGrid,
    axis: str = MEMBER_DIM,
    op: str = "mean",
    skip_missing: bool = True,
) -> ClimatologyGrid:
    """Reduce ``grid`` along ``axis`` with ``op``.

    Parameters
    ----------
    grid : ClimatologyGrid
        Input grid, left unchanged.
    axis : str
        Axis to collapse. Dropped from the result.
    op : str
        One of "mean", "median", "sum", "min", "max".
    skip_missing : bool
        Ignore NaN values (cells that are NaN in every realization stay NaN).

    Returns
    -------
    ClimatologyGrid
        New grid without ``axis``.
    """
    if op not in _REDUCERS:
        raise ValueError(f"Unknown aggregation op: {op}")

    index = grid.axis_index(axis)
    reducer = _REDUCERS[op][1 if skip_missing else 0]
    with warnings.catch_warnings():
        # all-NaN slices are expected over masked (e.g. ocean) cells
        warnings.simplefilter("ignore", category=RuntimeWarning)
        reduced = reducer(grid.data, axis=index)

    labels = [name for name in grid.dimension_labels if name != axis]
    logger.debug("Aggregated '%s' with %s: %s -> %s", axis, op, grid.data.shape, reduced.shape)
    return grid.with_data(reduced, labels)


def ensemble_mean(grid: ClimatologyGrid) -> ClimatologyGrid:
    """Member mean ignoring missing values."""
    return aggregate(grid, axis=MEMBER_DIM, op="mean", skip_missing=True)
