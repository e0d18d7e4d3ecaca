"""Dimension normalization.

Collapses and relabels axes so that one panel axis ("member") remains next
to a singleton time axis and the spatial axes:

- multigrid with members: member mean per variable, then var -> member
- multigrid without members: var -> member
- single variable: member axis kept (synthesised as a singleton if absent)
"""

import logging
from typing import Callable, Optional

import numpy as np

from climraster.contracts.base import require
from climraster.contracts.failure import MalformedGridError
from climraster.contracts.grid import assert_normalized, NORMALIZED_DIMS
from climraster.grid.accessor import GridAccessor
from climraster.grid.classifier import Classification
from climraster.grid.ensemble import aggregate as default_aggregate
from climraster.grid.model import (
    ClimatologyGrid,
    MEMBER_DIM,
    VARIABLE_DIM,
    TIME_DIM,
    LAT_DIM,
    LON_DIM,
)

__all__ = ['normalize', 'ENSEMBLE_MEAN_NOTICE']

logger = logging.getLogger(__name__)

ENSEMBLE_MEAN_NOTICE = "NOTE: The multimember mean will be displayed for each variable in the multigrid"

Aggregator = Callable[..., ClimatologyGrid]


def normalize(
    grid: ClimatologyGrid,
    classification: Classification,
    aggregate: Optional[Aggregator] = None,
    skip_missing: bool = True,
    notify: bool = True,
    accessor: Optional[GridAccessor] = None,
) -> ClimatologyGrid:
    """Return a new grid with dims (member, time, lat, lon).

    Parameters
    ----------
    grid : ClimatologyGrid
        Classified climatology. Never modified.
    classification : Classification
        Output of classify(grid).
    aggregate : callable, optional
        Ensemble reduction ``aggregate(grid, axis, op, skip_missing)``.
        Defaults to climraster.grid.ensemble.aggregate.
    skip_missing : bool
        Passed to the reduction.
    notify : bool
        Log the ensemble-mean notice when a multigrid carries more than
        one realization.

    Raises
    ------
    MalformedGridError
        Missing spatial axes, a time axis longer than one, or no panel axis
        after normalization.
    """
    accessor = accessor or GridAccessor()
    aggregate = aggregate or default_aggregate
    labels = accessor.dimension_labels(grid)

    for name in (LAT_DIM, LON_DIM):
        require(name in labels, f"Grid has no '{name}' axis (dims={labels})", MalformedGridError)

    if classification.is_multigrid:
        if classification.has_members:
            n_mem = accessor.axis_length(grid, MEMBER_DIM)
            if n_mem > 1 and notify:
                logger.info(ENSEMBLE_MEAN_NOTICE)
            grid = aggregate(grid, axis=MEMBER_DIM, op="mean", skip_missing=skip_missing)
            require(
                MEMBER_DIM not in accessor.dimension_labels(grid),
                "Ensemble reduction left a 'member' axis in the grid",
                MalformedGridError,
            )
        grid = grid.relabel(VARIABLE_DIM, MEMBER_DIM)
    elif not classification.has_members:
        grid = _add_singleton(grid, MEMBER_DIM)

    if TIME_DIM not in accessor.dimension_labels(grid):
        grid = _add_singleton(grid, TIME_DIM)
    n_time = accessor.axis_length(grid, TIME_DIM)
    require(
        n_time == 1,
        f"Climatology has {n_time} time steps; expected one aggregated step",
        MalformedGridError,
    )

    grid = _transpose(grid, NORMALIZED_DIMS)
    assert_normalized(grid)
    logger.debug("Normalized grid: dims=%s, shape=%s", grid.dimension_labels, grid.data.shape)
    return grid


def _add_singleton(grid: ClimatologyGrid, name: str) -> ClimatologyGrid:
    return grid.with_data(
        np.expand_dims(grid.data, axis=0),
        (name,) + grid.dimension_labels,
    )


def _transpose(grid: ClimatologyGrid, order) -> ClimatologyGrid:
    labels = grid.dimension_labels
    require(
        set(labels) == set(order),
        f"Cannot reorder dims {labels} to {order}",
        MalformedGridError,
    )
    axes = [labels.index(name) for name in order]
    return grid.with_data(np.transpose(grid.data, axes), order)
