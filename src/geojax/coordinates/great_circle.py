"""Great-circle distance on a spherical Earth.

Uses the haversine formula against the fixed mean Earth radius
:data:`geojax.constants.R_EARTH_MEAN`.  The reference ellipsoid plays no part
here: this is a spherical approximation, not an ellipsoidal geodesic, and
can differ from the true geodesic length by up to about 0.5%.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from geojax.config import get_dtype
from geojax.constants import R_EARTH_MEAN
from geojax.utils import to_radians


def great_circle_distance(
    lat_a: ArrayLike,
    lon_a: ArrayLike,
    lat_b: ArrayLike,
    lon_b: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Haversine distance between two latitude/longitude pairs.

    .. math::

        h = \\sin^2\\frac{\\Delta\\phi}{2}
            + \\cos\\phi_A \\cos\\phi_B \\sin^2\\frac{\\Delta\\lambda}{2},
        \\qquad d = 2 R \\,\\mathrm{atan2}(\\sqrt{h}, \\sqrt{1 - h})

    Args:
        lat_a: Latitude of point A in *rad* (or *deg*).
        lon_a: Longitude of point A in *rad* (or *deg*).
        lat_b: Latitude of point B in *rad* (or *deg*).
        lon_b: Longitude of point B in *rad* (or *deg*).
        use_degrees: If ``True``, interpret all angles as degrees.

    Returns:
        jax.Array: Distance in *m*, always non-negative.

    Examples:
        ```python
        from geojax.coordinates import great_circle_distance
        d = great_circle_distance(0.0, 0.0, 0.0, 90.0, use_degrees=True)
        # d ≈ 10_007_543 m
        ```
    """
    dtype = get_dtype()
    lat_a = to_radians(jnp.asarray(lat_a, dtype=dtype), use_degrees)
    lon_a = to_radians(jnp.asarray(lon_a, dtype=dtype), use_degrees)
    lat_b = to_radians(jnp.asarray(lat_b, dtype=dtype), use_degrees)
    lon_b = to_radians(jnp.asarray(lon_b, dtype=dtype), use_degrees)

    sin_dlat = jnp.sin((lat_b - lat_a) / 2.0)
    sin_dlon = jnp.sin((lon_b - lon_a) / 2.0)

    h = sin_dlat * sin_dlat + sin_dlon * sin_dlon * jnp.cos(lat_a) * jnp.cos(lat_b)
    c = 2.0 * jnp.arctan2(jnp.sqrt(h), jnp.sqrt(1.0 - h))

    return R_EARTH_MEAN * c
