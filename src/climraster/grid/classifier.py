"""Input shape classification."""

import logging
from typing import NamedTuple

from climraster.contracts.grid import assert_climatology
from climraster.grid.accessor import GridAccessor
from climraster.grid.model import ClimatologyGrid, MEMBER_DIM, VARIABLE_DIM

__all__ = ['Classification', 'classify']

logger = logging.getLogger(__name__)


class Classification(NamedTuple):
    """Shape flags of a climatology grid."""
    is_multigrid: bool
    has_members: bool


def classify(grid: ClimatologyGrid, accessor: GridAccessor = None) -> Classification:
    """Classify a grid as single/multi variable and single/multi realization.

    Raises
    ------
    NotAClimatologyError
        If the grid carries no climatology marker.
    """
    assert_climatology(grid)
    labels = (accessor or GridAccessor()).dimension_labels(grid)
    result = Classification(
        is_multigrid=VARIABLE_DIM in labels,
        has_members=MEMBER_DIM in labels,
    )
    logger.debug("Classified grid dims=%s: %s", labels, result)
    return result
