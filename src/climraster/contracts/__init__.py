"""Pipeline contracts and error taxonomy.

Contracts fail immediately and loudly when a stage does not produce the
invariants the next stage relies on.

Key principle:
- Pydantic validates config correctness
- Contracts validate grid and raster correctness
"""

from climraster.contracts.failure import (
    ContractViolation,
    NotAClimatologyError,
    MalformedGridError,
    EmptyPanelAxisError,
    InvalidGeometryError,
    UnknownBackdropThemeError,
)
from climraster.contracts.base import require
from climraster.contracts.grid import (
    assert_climatology,
    assert_normalized,
    assert_has_panels,
    assert_aligned,
)

__all__ = [
    "ContractViolation",
    "NotAClimatologyError",
    "MalformedGridError",
    "EmptyPanelAxisError",
    "InvalidGeometryError",
    "UnknownBackdropThemeError",
    "require",
    "assert_climatology",
    "assert_normalized",
    "assert_has_panels",
    "assert_aligned",
]
