"""Spherical (geodetic) coordinate transformations.

Converts between geodetic coordinates ``[latitude, longitude, elevation]``
and Earth-Centered Earth-Fixed (ECEF) Cartesian coordinates ``[x, y, z]``
on a reference ellipsoid.  Note the component order: latitude comes first.

Both directions are closed-form.  The inverse uses Bowring's single-step
approximation, which is accurate to well below a millimetre for points
near the Earth's surface and needs no iteration.

Neither direction guards the poles: at ``|lat| = 90°`` the elevation term
``rho / cos(lat)`` degenerates and produces ``inf``/``nan`` following IEEE
float semantics.

All inputs and outputs use SI base units (metres, radians).

References:
    1. B. R. Bowring, *Transformation from spatial to geographical
       coordinates*, Survey Review 23(181), 1976.
    2. NIMA Technical Report TR8350.2, *Department of Defense World Geodetic
       System 1984*.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from geojax.config import get_dtype
from geojax.ellipsoid import WGS84, EllipsoidParameters
from geojax.utils import lat_lon_to_degrees, lat_lon_to_radians


def curvature_radius(
    lat: ArrayLike,
    ellipsoid: EllipsoidParameters = WGS84,
) -> Array:
    """Radius of curvature in the prime vertical.

    .. math::

        N = \\frac{a}{\\sqrt{1 - e^2 \\sin^2 \\phi}}

    Args:
        lat: Geodetic latitude in *rad*.
        ellipsoid: Reference ellipsoid parameters.

    Returns:
        jax.Array: ``N`` in *m*.
    """
    sin_lat = jnp.sin(lat)
    e2 = ellipsoid.e * ellipsoid.e
    return ellipsoid.a / jnp.sqrt(1.0 - e2 * sin_lat * sin_lat)


def position_spherical_to_ecef(
    x_sph: ArrayLike,
    ellipsoid: EllipsoidParameters = WGS84,
    use_degrees: bool = False,
) -> Array:
    """Convert a geodetic position to ECEF Cartesian coordinates.

    Args:
        x_sph: Geodetic coordinates ``[lat, lon, elevation]``.
            Latitude and longitude in *rad* (or *deg* if ``use_degrees=True``),
            elevation in *m* above the ellipsoid.
        ellipsoid: Reference ellipsoid parameters.
        use_degrees: If ``True``, interpret latitude and longitude as degrees.

    Returns:
        jax.Array: ECEF position ``[x, y, z]`` in *m*.

    Example:
        >>> import jax.numpy as jnp
        >>> from geojax.coordinates import position_spherical_to_ecef
        >>> x_ecef = position_spherical_to_ecef(jnp.array([0.0, 0.0, 0.0]))
        >>> float(x_ecef[0])  # semi-major axis on the equator
        6378137.0
    """
    x_sph = jnp.asarray(x_sph, dtype=get_dtype())
    if use_degrees:
        x_sph = lat_lon_to_radians(x_sph)

    lat = x_sph[0]
    lon = x_sph[1]
    elev = x_sph[2]

    cos_lat = jnp.cos(lat)
    sin_lat = jnp.sin(lat)
    cos_lon = jnp.cos(lon)
    sin_lon = jnp.sin(lon)

    N = curvature_radius(lat, ellipsoid)
    b2_a2 = (ellipsoid.b * ellipsoid.b) / (ellipsoid.a * ellipsoid.a)

    x = (elev + N) * cos_lat * cos_lon
    y = (elev + N) * cos_lat * sin_lon
    z = (b2_a2 * N + elev) * sin_lat

    return jnp.array([x, y, z])


def position_ecef_to_spherical(
    x_ecef: ArrayLike,
    ellipsoid: EllipsoidParameters = WGS84,
    use_degrees: bool = False,
) -> Array:
    """Convert ECEF Cartesian coordinates to a geodetic position.

    Uses Bowring's closed-form expression for the geodetic latitude:

    .. math::

        \\theta = \\arctan\\frac{z a}{\\rho b}, \\qquad
        \\phi = \\arctan\\frac{z + e'^2 b \\sin^3\\theta}
                             {\\rho - e^2 a \\cos^3\\theta}

    where :math:`\\rho = \\sqrt{x^2 + y^2}` is the distance from the polar
    axis, :math:`e` the first eccentricity and :math:`e'` the second
    eccentricity (``ellipsoid.p``).  Elevation follows as
    :math:`\\rho / \\cos\\phi - N(\\phi)`.

    Args:
        x_ecef: ECEF position ``[x, y, z]`` in *m*.
        ellipsoid: Reference ellipsoid parameters.
        use_degrees: If ``True``, return latitude and longitude in degrees.

    Returns:
        jax.Array: Geodetic coordinates ``[lat, lon, elevation]``.
            Latitude and longitude in *rad* (or *deg*), elevation in *m*
            above the ellipsoid.

    Example:
        >>> import jax.numpy as jnp
        >>> from geojax.constants import WGS84_a
        >>> from geojax.coordinates import position_ecef_to_spherical
        >>> x_sph = position_ecef_to_spherical(jnp.array([WGS84_a, 0.0, 0.0]))
        >>> float(x_sph[2])  # elevation
        0.0
    """
    x_ecef = jnp.asarray(x_ecef, dtype=get_dtype())

    x = x_ecef[0]
    y = x_ecef[1]
    z = x_ecef[2]

    a = ellipsoid.a
    b = ellipsoid.b

    rho = jnp.sqrt(x * x + y * y)
    theta = jnp.arctan((z * a) / (rho * b))

    lat = jnp.arctan(
        (z + ellipsoid.p ** 2 * b * jnp.sin(theta) ** 3)
        / (rho - ellipsoid.e ** 2 * a * jnp.cos(theta) ** 3)
    )
    lon = jnp.arctan2(y, x)

    elev = rho / jnp.cos(lat) - curvature_radius(lat, ellipsoid)

    x_sph = jnp.array([lat, lon, elev])
    if use_degrees:
        x_sph = lat_lon_to_degrees(x_sph)
    return x_sph
