"""Pipeline entry points.

- runner: plot_climatology (grid to rendered plot) and prepare_raster
- logging_setup: configure_logging
"""

from climraster.pipeline.runner import plot_climatology, prepare_raster
from climraster.pipeline.logging_setup import configure_logging

__all__ = [
    "plot_climatology",
    "prepare_raster",
    "configure_logging",
]
