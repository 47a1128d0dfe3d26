"""Rotations between ECEF and the GLOBAL (East-North-Up) frame.

The GLOBAL frame is the local tangent plane at a reference point on the
ellipsoid, with axes:

- **East**: tangent to the surface, pointing geographic east
- **North**: tangent to the surface, pointing geographic north
- **Up**: along the ellipsoid normal, pointing outward

The rotation depends only on the geodetic latitude and longitude of the
reference point, not on its elevation.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from geojax.config import get_dtype
from geojax.utils import to_radians


def rotation_ecef_to_global(
    lat: ArrayLike,
    lon: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Compute the rotation matrix from ECEF to GLOBAL (ENU).

    Args:
        lat: Geodetic latitude of the reference point in *rad*
            (or *deg* if ``use_degrees=True``).
        lon: Longitude of the reference point in *rad*
            (or *deg* if ``use_degrees=True``).
        use_degrees: If ``True``, interpret latitude and longitude as degrees.

    Returns:
        3x3 rotation matrix (ECEF → GLOBAL).

    Examples:
        ```python
        from geojax.coordinates import rotation_ecef_to_global
        rot = rotation_ecef_to_global(45.0, 10.0, use_degrees=True)
        ```
    """
    lat = to_radians(jnp.asarray(lat, dtype=get_dtype()), use_degrees)
    lon = to_radians(jnp.asarray(lon, dtype=get_dtype()), use_degrees)

    sin_lat = jnp.sin(lat)
    cos_lat = jnp.cos(lat)
    sin_lon = jnp.sin(lon)
    cos_lon = jnp.cos(lon)

    # http://www.navipedia.net/index.php/Transformations_between_ECEF_and_ENU_coordinates
    return jnp.array([
        [-sin_lon, cos_lon, 0.0],                             # East
        [-cos_lon * sin_lat, -sin_lon * sin_lat, cos_lat],    # North
        [cos_lon * cos_lat, sin_lon * cos_lat, sin_lat],      # Up
    ])


def rotation_global_to_ecef(
    lat: ArrayLike,
    lon: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Compute the rotation matrix from GLOBAL (ENU) to ECEF.

    This is the transpose of :func:`rotation_ecef_to_global`.

    Args:
        lat: Geodetic latitude of the reference point.
        lon: Longitude of the reference point.
        use_degrees: If ``True``, interpret latitude and longitude as degrees.

    Returns:
        3x3 rotation matrix (GLOBAL → ECEF).
    """
    return rotation_ecef_to_global(lat, lon, use_degrees).T
