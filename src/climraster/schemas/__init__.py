"""Pydantic configuration schemas for climraster.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
InternalConfig : class
    Fully validated, authoritative runtime configuration
ParamConfig : class
    Expert defaults (complete)
UserConfig : class
    User-facing configuration (forgiving, minimal)
"""

from climraster.schemas.resolve import resolve_config
from climraster.schemas.internal import InternalConfig
from climraster.schemas.param import ParamConfig
from climraster.schemas.user import UserConfig

__all__ = [
    'resolve_config',
    'InternalConfig',
    'ParamConfig',
    'UserConfig',
]
