"""`climraster` - climatology grids to spatial rasters.

Subpackages:
- grid: Grid model, shape classification, normalization, assembly, labels
- visualization: Style options, backdrop layers, trellis plotting
- pipeline: The plot_climatology entry point
- contracts: Fail-fast stage contracts and the error taxonomy
- schemas: Pydantic configuration
"""

__version__ = "0.1.0"
