"""Panel names for assembled rasters."""

import logging
import re
from typing import List, Sequence

import numpy as np

from climraster.contracts.base import require
from climraster.contracts.failure import MalformedGridError
from climraster.grid.model import ClimatologyGrid, MEMBER_DIM

__all__ = ['panel_names', 'make_unique', 'member_names', 'variable_names']

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s")


def make_unique(names: Sequence[str], sep: str = ".") -> List[str]:
    """De-duplicate names, keeping first-seen order.

    The first occurrence is kept as is; repeats get ``.1``, ``.2``, ...
    skipping suffixes that would collide with another name.

    >>> make_unique(["tas", "tas", "pr", "tas"])
    ['tas', 'tas.1', 'pr', 'tas.2']
    """
    taken = set(names)
    seen = set()
    counters = {}
    result = []
    for name in names:
        if name not in seen:
            seen.add(name)
            result.append(name)
            continue
        k = counters.get(name, 0)
        while True:
            k += 1
            candidate = f"{name}{sep}{k}"
            if candidate not in taken:
                break
        counters[name] = k
        taken.add(candidate)
        seen.add(candidate)
        result.append(candidate)
    return result


def member_names(n_panels: int) -> List[str]:
    return [f"Member_{i}" for i in range(1, n_panels + 1)]


def variable_names(grid: ClimatologyGrid, n_panels: int) -> List[str]:
    """Names from variable metadata: long name, '@level' suffix, no spaces."""
    metadata = grid.variable_metadata
    require(
        len(metadata) == n_panels,
        f"Multigrid has {n_panels} variables but {len(metadata)} metadata entries",
        MalformedGridError,
    )
    names = []
    for meta in metadata:
        name = meta.display_name
        if _has_level(meta.level):
            name = f"{name}@{_format_level(meta.level)}"
        names.append(_WHITESPACE.sub("_", name))
    return make_unique(names)


def panel_names(grid: ClimatologyGrid, is_multigrid: bool) -> List[str]:
    """Unique panel names for a normalized grid."""
    n_panels = grid.axis_length(MEMBER_DIM)
    if is_multigrid:
        names = variable_names(grid, n_panels)
    else:
        names = member_names(n_panels)
    logger.debug("Panel names: %s", names)
    return names


def _has_level(level) -> bool:
    # NaN marks a missing level in netCDF metadata
    if level is None:
        return False
    return not (isinstance(level, (float, np.floating)) and np.isnan(level))


def _format_level(level) -> str:
    # 850.0 -> "850"
    if isinstance(level, (float, np.floating)) and float(level).is_integer():
        return str(int(level))
    return str(level)
