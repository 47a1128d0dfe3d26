"""Reference ellipsoid surfaces and their geometric parameters.

A surface is identified by a :class:`SurfaceType` tag.  Resolving the tag
with :func:`ellipsoid_parameters` yields the semi-major axis ``a``, the
semi-minor axis ``b``, the flattening ``f`` and the first and second
eccentricities ``e`` and ``p``.  The eccentricities are always derived from
``a`` and ``b`` in the same call, so the five values never disagree.

Only the WGS84 Earth ellipsoid is currently defined.  Unrecognised tags and
strings never raise: they log a warning and fall back as documented on each
function.

References:
    1. NIMA Technical Report TR8350.2, *Department of Defense World Geodetic
       System 1984*.
"""

from __future__ import annotations

import enum
import logging
import math
from typing import NamedTuple

from geojax.constants import WGS84_a, WGS84_b, WGS84_f

logger = logging.getLogger(__name__)


class SurfaceType(enum.Enum):
    """Planetary surface model used to anchor a local frame.

    Attributes:
        EARTH_WGS84: The WGS84 Earth reference ellipsoid.
    """

    EARTH_WGS84 = "EARTH_WGS84"


class EllipsoidParameters(NamedTuple):
    """Geometric constants of a reference ellipsoid.

    Attributes:
        a: Semi-major (equatorial) axis [m].
        b: Semi-minor (polar) axis [m].
        f: Flattening [dimensionless].
        e: First eccentricity, ``sqrt(1 - b²/a²)``.
        p: Second eccentricity, ``sqrt(a²/b² - 1)``.
    """

    a: float
    b: float
    f: float
    e: float
    p: float


def _from_axes(a: float, b: float, f: float) -> EllipsoidParameters:
    # https://en.wikipedia.org/wiki/Eccentricity_(mathematics)#Ellipses
    e = math.sqrt(1.0 - (b * b) / (a * a))
    p = math.sqrt((a * a) / (b * b) - 1.0)
    return EllipsoidParameters(a=a, b=b, f=f, e=e, p=p)


WGS84 = _from_axes(WGS84_a, WGS84_b, WGS84_f)

_SURFACES = {
    SurfaceType.EARTH_WGS84: WGS84,
}


def ellipsoid_parameters(surface) -> EllipsoidParameters | None:
    """Resolve a surface tag to its ellipsoid parameters.

    Args:
        surface: A :class:`SurfaceType` member.

    Returns:
        EllipsoidParameters for a known surface, otherwise ``None``.  A
        ``None`` result means the caller should keep whatever parameters it
        already holds; it is never replaced by a default.

    Examples:
        ```python
        from geojax.ellipsoid import SurfaceType, ellipsoid_parameters
        params = ellipsoid_parameters(SurfaceType.EARTH_WGS84)
        params.e  # 0.0818191908...
        ```
    """
    params = _SURFACES.get(surface) if isinstance(surface, SurfaceType) else None
    if params is None:
        logger.warning("Unknown surface type [%s]", surface)
    return params


def surface_from_string(name: str) -> SurfaceType:
    """Parse a surface name, e.g. ``"EARTH_WGS84"``.

    Unrecognised names log a warning and return ``SurfaceType.EARTH_WGS84``.

    Args:
        name: Surface name.

    Returns:
        SurfaceType: The matching surface, or the WGS84 default.
    """
    for surface in SurfaceType:
        if surface.value == name:
            return surface

    logger.warning(
        "SurfaceType string %r not recognized, EARTH_WGS84 returned by default",
        name,
    )
    return SurfaceType.EARTH_WGS84


def surface_to_string(surface) -> str:
    """Format a surface tag as its canonical name.

    Unrecognised tags log a warning and return ``"EARTH_WGS84"``.

    Args:
        surface: A :class:`SurfaceType` member.

    Returns:
        str: The surface name.
    """
    if isinstance(surface, SurfaceType):
        return surface.value

    logger.warning(
        "SurfaceType %r not recognized, EARTH_WGS84 returned by default",
        surface,
    )
    return SurfaceType.EARTH_WGS84.value
