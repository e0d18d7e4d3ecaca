"""Backdrop themes: reference geographic lines drawn over each panel."""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from climraster.contracts.base import require
from climraster.contracts.failure import UnknownBackdropThemeError
from climraster.schemas.param import BACKDROP_THEMES

__all__ = ['BackdropLayer', 'BACKDROP_THEMES', 'validate_theme', 'resolve_backdrop']

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BackdropLayer:
    """Vector layer for one backdrop theme.

    ``feature`` is a cartopy Feature added to GeoAxes by the renderer.
    """
    theme: str
    feature: Any


def validate_theme(theme: str) -> str:
    """Return the normalized theme name.

    Raises
    ------
    UnknownBackdropThemeError
        If ``theme`` is not one of BACKDROP_THEMES.
    """
    name = theme.lower().strip() if isinstance(theme, str) else theme
    require(
        name in BACKDROP_THEMES,
        f"Unknown backdrop theme {theme!r}; expected one of {BACKDROP_THEMES}",
        UnknownBackdropThemeError,
    )
    return name


def resolve_backdrop(theme: str) -> Optional[BackdropLayer]:
    """Layer for ``theme``, or None for "none"."""
    name = validate_theme(theme)
    if name == "none":
        return None

    import cartopy.feature as cfeature

    if name == "coastline":
        feature = cfeature.COASTLINE
    else:
        feature = cfeature.NaturalEarthFeature(
            category="cultural",
            name="admin_0_countries",
            scale="110m",
            facecolor="none",
        )
    logger.debug("Backdrop theme resolved: %s", name)
    return BackdropLayer(theme=name, feature=feature)
