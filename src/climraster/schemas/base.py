"""Shared pydantic base for the climraster config layers.

ParamConfig (raster, style, plot and logging defaults), UserConfig (flat
aliases such as BACKDROP_THEME or DPI) and the frozen InternalConfig handed
to the grid stages and the plotter all derive from ClimrasterBaseModel.
"""

from pydantic import BaseModel, ConfigDict


class ClimrasterBaseModel(BaseModel):
    """Rejects unknown keys and strips strings, so a misspelt section or a
    padded theme name like " Coastline " is caught or cleaned at load time.
    """

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        str_strip_whitespace=True,
    )
