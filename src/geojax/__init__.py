"""
geojax converts positions and velocities between geodetic coordinates and a
local tangent-plane frame anchored on the WGS84 ellipsoid, implemented in JAX.
"""

from .constants import (
    DEG2RAD,
    RAD2DEG,
    WGS84_a,
    WGS84_b,
    WGS84_f,
    R_EARTH_MEAN,
)

from .config import DEFAULT_DTYPE, set_dtype, get_dtype

from .ellipsoid import (
    SurfaceType,
    EllipsoidParameters,
    ellipsoid_parameters,
    surface_from_string,
    surface_to_string,
)

from .coordinates import (
    position_spherical_to_ecef,
    position_ecef_to_spherical,
    rotation_ecef_to_global,
    rotation_global_to_ecef,
    great_circle_distance,
)

from .spherical_coordinates import (
    CoordinateType,
    TransformCache,
    SphericalCoordinates,
)

__all__ = [
    # Constants
    "DEG2RAD",
    "RAD2DEG",
    "WGS84_a",
    "WGS84_b",
    "WGS84_f",
    "R_EARTH_MEAN",
    # Config
    "DEFAULT_DTYPE",
    "set_dtype",
    "get_dtype",
    # Ellipsoid
    "SurfaceType",
    "EllipsoidParameters",
    "ellipsoid_parameters",
    "surface_from_string",
    "surface_to_string",
    # Coordinates
    "position_spherical_to_ecef",
    "position_ecef_to_spherical",
    "rotation_ecef_to_global",
    "rotation_global_to_ecef",
    "great_circle_distance",
    # Spherical coordinates
    "CoordinateType",
    "TransformCache",
    "SphericalCoordinates",
]
