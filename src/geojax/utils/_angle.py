"""Angle conversion helpers for the ``use_degrees`` convention.

Reference angles are stored in radians.  Callers may hand in or ask for
degrees at the boundary; these helpers do the conversion with ``jnp.where``
so they stay traceable when ``use_degrees`` is a traced boolean.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike


def to_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle to radians if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle value.
        use_degrees (bool): If ``True``, treat ``angle`` as degrees and convert.

    Returns:
        Angle in radians.
    """
    return jnp.where(use_degrees, jnp.deg2rad(angle), angle)


def from_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Convert angle from radians to degrees if ``use_degrees`` is True.

    Args:
        angle (ArrayLike): Angle in radians.
        use_degrees (bool): If ``True``, convert to degrees.

    Returns:
        Angle in radians or degrees.
    """
    return jnp.where(use_degrees, jnp.rad2deg(angle), angle)


def lat_lon_to_radians(x_sph: ArrayLike) -> Array:
    """Convert the latitude/longitude of ``[lat, lon, elev]`` from degrees.

    The elevation component is passed through untouched.

    Args:
        x_sph (ArrayLike): ``[lat_deg, lon_deg, elevation_m]``.

    Returns:
        ``[lat_rad, lon_rad, elevation_m]``.
    """
    x_sph = jnp.asarray(x_sph)
    return x_sph.at[:2].set(jnp.deg2rad(x_sph[:2]))


def lat_lon_to_degrees(x_sph: ArrayLike) -> Array:
    """Convert the latitude/longitude of ``[lat, lon, elev]`` to degrees.

    Args:
        x_sph (ArrayLike): ``[lat_rad, lon_rad, elevation_m]``.

    Returns:
        ``[lat_deg, lon_deg, elevation_m]``.
    """
    x_sph = jnp.asarray(x_sph)
    return x_sph.at[:2].set(jnp.rad2deg(x_sph[:2]))
