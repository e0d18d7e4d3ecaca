"""Grid model and the array-to-raster stages.

- model: ClimatologyGrid, coordinates, variable metadata
- accessor: Explicit dimension/coordinate access
- classifier: Multigrid / ensemble classification
- normalizer: Collapse and relabel to a single panel axis
- ensemble: Reduction across members
- assembler: Flatten and raster-order panel slices
- labeler: Panel names
- geometry: Grid topology
"""

from climraster.grid.model import (
    ClimatologyGrid,
    GridCoordinates,
    VariableMetadata,
)
from climraster.grid.accessor import GridAccessor
from climraster.grid.classifier import Classification, classify
from climraster.grid.normalizer import normalize
from climraster.grid.ensemble import aggregate, ensemble_mean
from climraster.grid.assembler import AssembledRaster, assemble
from climraster.grid.labeler import panel_names
from climraster.grid.geometry import GridTopology, build_geometry

__all__ = [
    "ClimatologyGrid",
    "GridCoordinates",
    "VariableMetadata",
    "GridAccessor",
    "Classification",
    "classify",
    "normalize",
    "aggregate",
    "ensemble_mean",
    "AssembledRaster",
    "assemble",
    "panel_names",
    "GridTopology",
    "build_geometry",
]
