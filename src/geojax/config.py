"""Module-wide floating-point precision configuration.

geojax creates every array with the dtype returned by ``get_dtype()``.  The
default is ``jnp.float64``: ECEF coordinates are of order 6.4e6 m, and
float32 resolves them only to roughly half a metre, far too coarse for the
sub-micrometre round trips between local frames.  Importing geojax therefore
turns on JAX's ``jax_enable_x64`` flag.

Callers that can live with decimetre-level local positions may opt down with
``set_dtype(jnp.float32)`` (or a half-precision type) before building any
``SphericalCoordinates`` instance or JIT-compiling a transform.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

# Supported dtypes and the elevation tolerance (m) used by equality checks
_ELEVATION_TOLERANCES = {
    jnp.float16: 0.1,
    jnp.bfloat16: 0.1,
    jnp.float32: 1e-3,
    jnp.float64: 1e-6,
}

DEFAULT_DTYPE = jnp.float64

_dtype = DEFAULT_DTYPE


def set_dtype(dtype) -> None:
    """Select the float dtype used for every array geojax creates.

    Existing ``SphericalCoordinates`` instances keep the dtype their cache
    was built with until one of their setters runs.  Under ``jax.jit`` the
    dtype is read while tracing, so set it before compiling.

    Args:
        dtype: One of ``jnp.float16``, ``jnp.bfloat16``, ``jnp.float32``,
            or ``jnp.float64``.

    Raises:
        ValueError: If *dtype* is not a supported float type.
    """
    global _dtype
    if dtype not in _ELEVATION_TOLERANCES:
        supported = ", ".join(f"jnp.{d.__name__}" for d in _ELEVATION_TOLERANCES)
        raise ValueError(f"Unsupported dtype {dtype}. Must be one of: {supported}")

    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    _dtype = dtype


def get_dtype():
    """Return the active float dtype (default ``jnp.float64``)."""
    return _dtype


def get_elevation_eq_tolerance() -> float:
    """Return the elevation tolerance, in metres, for frame equality.

    Coarser dtypes get looser tolerances: 1e-6 m for float64, 1e-3 m for
    float32 and 0.1 m for the half-precision types.
    """
    return _ELEVATION_TOLERANCES[_dtype]


set_dtype(DEFAULT_DTYPE)
