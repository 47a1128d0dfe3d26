"""Coordinate transformations.

This sub-module provides the stateless building blocks behind
:class:`geojax.SphericalCoordinates`:

- **Geodetic**: ellipsoid ``[lat, lon, elevation]`` ↔ ECEF
- **Topocentric**: ECEF ↔ GLOBAL (East-North-Up) rotation matrices
- **Local**: heading rotations between GLOBAL and the LOCAL / LOCAL2 frames
- **Great circle**: haversine distance on a spherical Earth
"""

from .geodetic import (
    curvature_radius,
    position_ecef_to_spherical,
    position_spherical_to_ecef,
)
from .great_circle import great_circle_distance
from .local import (
    heading_terms,
    rotation_global_to_local,
    rotation_local2_to_global,
    rotation_local_to_global,
)
from .topocentric import (
    rotation_ecef_to_global,
    rotation_global_to_ecef,
)

__all__ = [
    "curvature_radius",
    "position_spherical_to_ecef",
    "position_ecef_to_spherical",
    "great_circle_distance",
    "heading_terms",
    "rotation_local_to_global",
    "rotation_local2_to_global",
    "rotation_global_to_local",
    "rotation_ecef_to_global",
    "rotation_global_to_ecef",
]
