"""Style options, backdrop themes and trellis plotting for rasters."""

from .style import StyleOptions, default_color_ramp
from .backdrop import BackdropLayer, resolve_backdrop, validate_theme
from .plotter import ClimatologyPlotter

__all__ = [
    'StyleOptions',
    'default_color_ramp',
    'BackdropLayer',
    'resolve_backdrop',
    'validate_theme',
    'ClimatologyPlotter',
]
