"""The spherical_coordinates module provides the ``SphericalCoordinates`` class.

A ``SphericalCoordinates`` instance anchors a local tangent-plane frame at a
reference point (latitude, longitude, elevation) on a reference ellipsoid,
rotated by a heading offset.  It converts positions and velocities between
five frames, always pivoting through ECEF:

- ``LOCAL``: East-North-Up rotated by the heading offset (primary convention)
- ``LOCAL2``: the second heading-sign convention kept for legacy callers
- ``GLOBAL``: East-North-Up at the reference point, no heading rotation
- ``SPHERICAL``: geodetic ``[lat, lon, elevation]`` in radians and metres
- ``ECEF``: Earth-Centered Earth-Fixed Cartesian

Every setter rebuilds the cached rotation matrices, heading terms and the
ECEF origin before it returns, so values read from the cache are never
stale.

The class is registered as a JAX pytree, making it compatible with
``jax.jit`` and ``jax.vmap``.  Frame tags are plain Python values and are
resolved at trace time.
"""

from __future__ import annotations

import enum
import logging
from typing import NamedTuple

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from geojax.config import get_dtype, get_elevation_eq_tolerance
from geojax.coordinates.geodetic import (
    position_ecef_to_spherical,
    position_spherical_to_ecef,
)
from geojax.coordinates.great_circle import great_circle_distance
from geojax.coordinates.local import (
    heading_terms,
    rotation_global_to_local,
    rotation_local2_to_global,
    rotation_local_to_global,
)
from geojax.coordinates.topocentric import rotation_ecef_to_global
from geojax.ellipsoid import (
    WGS84,
    EllipsoidParameters,
    SurfaceType,
    ellipsoid_parameters,
)
from geojax.utils import (
    from_radians,
    lat_lon_to_degrees,
    lat_lon_to_radians,
    to_radians,
)

logger = logging.getLogger(__name__)


class CoordinateType(enum.Enum):
    """Coordinate frame tag for position and velocity transforms.

    The lower-case string values are accepted anywhere a frame is expected.

    Attributes:
        SPHERICAL: Geodetic latitude, longitude and elevation.
        ECEF: Earth-Centered Earth-Fixed Cartesian.
        GLOBAL: East-North-Up at the reference point.
        LOCAL: East-North-Up rotated by the heading offset.
        LOCAL2: LOCAL with the second heading-sign convention.
    """

    SPHERICAL = "spherical"
    ECEF = "ecef"
    GLOBAL = "global"
    LOCAL = "local"
    LOCAL2 = "local2"


def _coerce_frame(frame) -> CoordinateType | None:
    if isinstance(frame, CoordinateType):
        return frame
    try:
        return CoordinateType(frame)
    except ValueError:
        return None


class TransformCache(NamedTuple):
    """State derived from the reference point and the ellipsoid.

    Attributes:
        rot_ecef_to_global: 3x3 rotation ECEF → GLOBAL.
        rot_global_to_ecef: 3x3 rotation GLOBAL → ECEF, the transpose of
            ``rot_ecef_to_global``.
        cos_hea: ``cos(-heading_offset)``.
        sin_hea: ``sin(-heading_offset)``.
        origin: ECEF position of the reference point [m].
    """

    rot_ecef_to_global: Array
    rot_global_to_ecef: Array
    cos_hea: Array
    sin_hea: Array
    origin: Array


class SphericalCoordinates:
    """Reference frame on an ellipsoid and the transforms it defines.

    Internal state is the surface tag with its ellipsoid parameters, the
    reference latitude/longitude/heading in radians, the reference
    elevation in metres, and a :class:`TransformCache`.

    Constructors:
        SphericalCoordinates()
        SphericalCoordinates(SurfaceType.EARTH_WGS84)
        SphericalCoordinates(SurfaceType.EARTH_WGS84, lat, lon, elev, heading)
        SphericalCoordinates(SurfaceType.EARTH_WGS84, 37.4, -122.1, 30.0, 0.0,
                             use_degrees=True)
        SphericalCoordinates(other)

    Examples:
        ```python
        from geojax import SphericalCoordinates, SurfaceType
        sc = SphericalCoordinates(SurfaceType.EARTH_WGS84, 47.37, 8.54, 408.0,
                                  0.0, use_degrees=True)
        lat_lon_elev = sc.spherical_from_local_position([10.0, 5.0, 0.0])
        ```
    """

    __slots__ = (
        '_surface', '_ellipsoid', '_lat', '_lon', '_elev', '_heading', '_cache',
    )

    def __init__(
        self,
        surface: SurfaceType | SphericalCoordinates = SurfaceType.EARTH_WGS84,
        latitude: ArrayLike = 0.0,
        longitude: ArrayLike = 0.0,
        elevation: ArrayLike = 0.0,
        heading: ArrayLike = 0.0,
        use_degrees: bool = False,
    ) -> None:
        """Initialize the reference frame and build the transform cache.

        Passing another instance as *surface* copies its surface and
        reference point and rebuilds the cache; the remaining arguments are
        then ignored, so a copy can not be moved in the same call.

        Args:
            surface: Surface tag, or another instance to copy.
            latitude: Reference latitude in *rad* (or *deg*).
            longitude: Reference longitude in *rad* (or *deg*).
            elevation: Reference elevation in *m* above the ellipsoid.
            heading: Heading offset from East to the local X axis in *rad*
                (or *deg*).
            use_degrees: If ``True``, interpret the angles as degrees.
        """
        if isinstance(surface, SphericalCoordinates):
            self._init_copy(surface)
            return

        dtype = get_dtype()
        self._ellipsoid = WGS84
        self._lat = to_radians(jnp.asarray(latitude, dtype=dtype), use_degrees)
        self._lon = to_radians(jnp.asarray(longitude, dtype=dtype), use_degrees)
        self._elev = jnp.asarray(elevation, dtype=dtype)
        self._heading = to_radians(jnp.asarray(heading, dtype=dtype), use_degrees)

        # Resolves the ellipsoid and builds the cache
        self.set_surface(surface)

    def _init_copy(self, other: SphericalCoordinates) -> None:
        self._surface = other._surface
        self._ellipsoid = other._ellipsoid
        self._lat = other._lat
        self._lon = other._lon
        self._elev = other._elev
        self._heading = other._heading
        self._update_transformation_matrix()

    @classmethod
    def _from_internal(cls, surface, ellipsoid, lat, lon, elev, heading, cache):
        """Create an instance from already-consistent state.

        Used by pytree unflatten.  The cache is taken as is, so the caller
        must guarantee it matches the reference values.
        """
        obj = object.__new__(cls)
        obj._surface = surface
        obj._ellipsoid = ellipsoid
        obj._lat = lat
        obj._lon = lon
        obj._elev = elev
        obj._heading = heading
        obj._cache = cache
        return obj

    # Accessors

    def surface(self) -> SurfaceType:
        """Surface tag this frame is anchored to."""
        return self._surface

    def ellipsoid(self) -> EllipsoidParameters:
        """Ellipsoid parameters currently used by the transforms."""
        return self._ellipsoid

    def latitude_reference(self, use_degrees: bool = False) -> Array:
        """Reference latitude in *rad* (or *deg*)."""
        return from_radians(self._lat, use_degrees)

    def longitude_reference(self, use_degrees: bool = False) -> Array:
        """Reference longitude in *rad* (or *deg*)."""
        return from_radians(self._lon, use_degrees)

    def elevation_reference(self) -> Array:
        """Reference elevation in *m* above the ellipsoid."""
        return self._elev

    def heading_offset(self, use_degrees: bool = False) -> Array:
        """Heading offset from East to the local X axis in *rad* (or *deg*)."""
        return from_radians(self._heading, use_degrees)

    def transform_cache(self) -> TransformCache:
        """Rotations, heading terms and ECEF origin derived from the state.

        Rebuilt by every setter, so it always matches the reference values.
        """
        return self._cache

    def origin(self) -> Array:
        """ECEF position of the reference point in *m*."""
        return self._cache.origin

    # Mutators

    def set_surface(self, surface: SurfaceType) -> None:
        """Set the surface tag and reload the ellipsoid parameters.

        An unknown tag is still recorded, but the ellipsoid parameters keep
        their previous values.

        Args:
            surface: Surface tag.
        """
        self._surface = surface
        params = ellipsoid_parameters(surface)
        if params is not None:
            self._ellipsoid = params
        self._update_transformation_matrix()

    def set_latitude_reference(self, angle: ArrayLike, use_degrees: bool = False) -> None:
        """Set the reference latitude and rebuild the cache.

        Args:
            angle: Geodetic latitude in *rad* (or *deg*).
            use_degrees: If ``True``, interpret ``angle`` as degrees.
        """
        self._lat = to_radians(jnp.asarray(angle, dtype=get_dtype()), use_degrees)
        self._update_transformation_matrix()

    def set_longitude_reference(self, angle: ArrayLike, use_degrees: bool = False) -> None:
        """Set the reference longitude and rebuild the cache.

        Args:
            angle: Longitude in *rad* (or *deg*), positive East.
            use_degrees: If ``True``, interpret ``angle`` as degrees.
        """
        self._lon = to_radians(jnp.asarray(angle, dtype=get_dtype()), use_degrees)
        self._update_transformation_matrix()

    def set_elevation_reference(self, elevation: ArrayLike) -> None:
        """Set the reference elevation and rebuild the cache.

        Args:
            elevation: Height above the ellipsoid in *m*.
        """
        self._elev = jnp.asarray(elevation, dtype=get_dtype())
        self._update_transformation_matrix()

    def set_heading_offset(self, angle: ArrayLike, use_degrees: bool = False) -> None:
        """Set the heading offset and rebuild the cache.

        Args:
            angle: Angle from East to the local X axis in *rad* (or *deg*).
            use_degrees: If ``True``, interpret ``angle`` as degrees.
        """
        self._heading = to_radians(jnp.asarray(angle, dtype=get_dtype()), use_degrees)
        self._update_transformation_matrix()

    def _update_transformation_matrix(self) -> None:
        """Rebuild the transform cache from the current state."""
        rot_ecef_to_global = rotation_ecef_to_global(self._lat, self._lon)

        # Heading is negated: positive headings have traditionally meant a
        # clockwise rotation from GLOBAL to LOCAL.
        cos_hea, sin_hea = heading_terms(self._heading)

        origin = position_spherical_to_ecef(
            jnp.array([self._lat, self._lon, self._elev]), self._ellipsoid
        )

        self._cache = TransformCache(
            rot_ecef_to_global=rot_ecef_to_global,
            rot_global_to_ecef=rot_ecef_to_global.T,
            cos_hea=cos_hea,
            sin_hea=sin_hea,
            origin=origin,
        )

    # Position transforms

    def position_transform(self, pos: ArrayLike, in_frame, out_frame) -> Array:
        """Convert a position between two coordinate frames.

        The input is first converted to ECEF and then to the output frame.
        ``SPHERICAL`` positions are ``[lat, lon, elevation]`` in radians and
        metres.  An unrecognised frame tag is logged and the input is
        returned unchanged.

        Args:
            pos: Position ``[x, y, z]`` in the input frame.
            in_frame: :class:`CoordinateType` (or its string value) of ``pos``.
            out_frame: :class:`CoordinateType` (or its string value) wanted.

        Returns:
            jax.Array: Position in the output frame.
        """
        pos = jnp.asarray(pos, dtype=get_dtype())

        src = _coerce_frame(in_frame)
        if src is None:
            logger.error("Invalid coordinate type [%s]", in_frame)
            return pos

        dst = _coerce_frame(out_frame)
        if dst is None:
            logger.error("Unknown coordinate type [%s]", out_frame)
            return pos

        return self._position_from_ecef(self._position_to_ecef(pos, src), dst)

    def _position_to_ecef(self, pos: Array, frame: CoordinateType) -> Array:
        cache = self._cache

        if frame is CoordinateType.LOCAL:
            rot = rotation_local_to_global(cache.cos_hea, cache.sin_hea)
            return cache.origin + cache.rot_global_to_ecef @ (rot @ pos)
        if frame is CoordinateType.LOCAL2:
            rot = rotation_local2_to_global(cache.cos_hea, cache.sin_hea)
            return cache.origin + cache.rot_global_to_ecef @ (rot @ pos)
        if frame is CoordinateType.GLOBAL:
            return cache.origin + cache.rot_global_to_ecef @ pos
        if frame is CoordinateType.SPHERICAL:
            return position_spherical_to_ecef(pos, self._ellipsoid)
        return pos

    def _position_from_ecef(self, x_ecef: Array, frame: CoordinateType) -> Array:
        cache = self._cache

        if frame is CoordinateType.SPHERICAL:
            return position_ecef_to_spherical(x_ecef, self._ellipsoid)
        if frame is CoordinateType.GLOBAL:
            return cache.rot_ecef_to_global @ (x_ecef - cache.origin)
        if frame in (CoordinateType.LOCAL, CoordinateType.LOCAL2):
            x_global = cache.rot_ecef_to_global @ (x_ecef - cache.origin)
            return rotation_global_to_local(cache.cos_hea, cache.sin_hea) @ x_global
        return x_ecef

    def spherical_from_local_position(self, xyz: ArrayLike) -> Array:
        """Convert a LOCAL position to ``[lat_deg, lon_deg, elevation_m]``."""
        result = self.position_transform(xyz, CoordinateType.LOCAL, CoordinateType.SPHERICAL)
        return lat_lon_to_degrees(result)

    def local_from_spherical_position(self, xyz: ArrayLike) -> Array:
        """Convert ``[lat_deg, lon_deg, elevation_m]`` to a LOCAL position."""
        x_sph = lat_lon_to_radians(jnp.asarray(xyz, dtype=get_dtype()))
        return self.position_transform(x_sph, CoordinateType.SPHERICAL, CoordinateType.LOCAL)

    # Velocity transforms

    def velocity_transform(self, vel: ArrayLike, in_frame, out_frame) -> Array:
        """Convert a velocity between two coordinate frames.

        Velocities are free vectors, so only the rotations apply; the origin
        offset and the curvature terms do not.  Velocities have no
        ``SPHERICAL`` representation: if either frame is ``SPHERICAL`` the
        input is returned unchanged without any diagnostic.  Other
        unrecognised frame tags are logged and the input is returned.

        Args:
            vel: Velocity ``[vx, vy, vz]`` in the input frame.
            in_frame: :class:`CoordinateType` (or its string value) of ``vel``.
            out_frame: :class:`CoordinateType` (or its string value) wanted.

        Returns:
            jax.Array: Velocity in the output frame.
        """
        vel = jnp.asarray(vel, dtype=get_dtype())

        src = _coerce_frame(in_frame)
        dst = _coerce_frame(out_frame)
        if src is CoordinateType.SPHERICAL or dst is CoordinateType.SPHERICAL:
            return vel

        if src is None:
            logger.error("Unknown coordinate type [%s]", in_frame)
            return vel
        if dst is None:
            logger.error("Unknown coordinate type [%s]", out_frame)
            return vel

        cache = self._cache

        if src is CoordinateType.LOCAL:
            rot = rotation_local_to_global(cache.cos_hea, cache.sin_hea)
            v_ecef = cache.rot_global_to_ecef @ (rot @ vel)
        elif src is CoordinateType.LOCAL2:
            rot = rotation_local2_to_global(cache.cos_hea, cache.sin_hea)
            v_ecef = cache.rot_global_to_ecef @ (rot @ vel)
        elif src is CoordinateType.GLOBAL:
            v_ecef = cache.rot_global_to_ecef @ vel
        else:
            v_ecef = vel

        if dst is CoordinateType.GLOBAL:
            return cache.rot_ecef_to_global @ v_ecef
        if dst in (CoordinateType.LOCAL, CoordinateType.LOCAL2):
            v_global = cache.rot_ecef_to_global @ v_ecef
            return rotation_global_to_local(cache.cos_hea, cache.sin_hea) @ v_global
        return v_ecef

    def global_from_local_velocity(self, xyz: ArrayLike) -> Array:
        """Convert a LOCAL velocity to GLOBAL."""
        return self.velocity_transform(xyz, CoordinateType.LOCAL, CoordinateType.GLOBAL)

    def local_from_global_velocity(self, xyz: ArrayLike) -> Array:
        """Convert a GLOBAL velocity to LOCAL."""
        return self.velocity_transform(xyz, CoordinateType.GLOBAL, CoordinateType.LOCAL)

    # Distance

    @staticmethod
    def distance(
        lat_a: ArrayLike,
        lon_a: ArrayLike,
        lat_b: ArrayLike,
        lon_b: ArrayLike,
        use_degrees: bool = False,
    ) -> Array:
        """Great-circle distance in *m*, see :func:`great_circle_distance`."""
        return great_circle_distance(lat_a, lon_a, lat_b, lon_b, use_degrees)

    # Comparison operators

    def __eq__(self, other):
        if not isinstance(other, SphericalCoordinates):
            return NotImplemented
        return (
            jnp.asarray(self._surface == other._surface)
            & (self._lat == other._lat)
            & (self._lon == other._lon)
            & (self._heading == other._heading)
            & (jnp.abs(self._elev - other._elev) <= get_elevation_eq_tolerance())
        )

    def __ne__(self, other):
        if not isinstance(other, SphericalCoordinates):
            return NotImplemented
        return ~self.__eq__(other)

    # Copying rebuilds the cache instead of sharing it

    def __copy__(self):
        return SphericalCoordinates(self)

    def __deepcopy__(self, memo):
        return SphericalCoordinates(self)

    # String representations

    def __repr__(self):
        return (
            f'SphericalCoordinates(surface={self._surface}, '
            f'latitude={float(self._lat)}, longitude={float(self._lon)}, '
            f'elevation={float(self._elev)}, heading={float(self._heading)})'
        )

    def __hash__(self):
        # Elevation is compared with a tolerance, so it stays out of the hash
        return hash((self._surface, float(self._lat), float(self._lon), float(self._heading)))


# Register SphericalCoordinates as a JAX pytree so it can be used with jit and vmap.
jax.tree_util.register_pytree_node(
    SphericalCoordinates,
    lambda sc: (
        (sc._lat, sc._lon, sc._elev, sc._heading, sc._cache),
        (sc._surface, sc._ellipsoid),
    ),
    lambda aux, children: SphericalCoordinates._from_internal(*aux, *children),
)
