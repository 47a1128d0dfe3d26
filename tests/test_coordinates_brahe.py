"""Cross-validation tests comparing geojax geodetic conversions against brahe 1.0+.

Both libraries run in float64 here.  brahe orders geodetic coordinates as
``[lon, lat, alt]`` and inverts ECEF iteratively; geojax orders them as
``[lat, lon, elevation]`` and uses Bowring's closed form, so the inverse
tolerances cover the closed-form error for points within a few kilometres
of the ellipsoid.
"""

import numpy as np
import pytest

import brahe as bh
import jax.numpy as jnp

from geojax.coordinates import (
    position_ecef_to_spherical,
    position_spherical_to_ecef,
)
from geojax.ellipsoid import SurfaceType
from geojax.spherical_coordinates import SphericalCoordinates

DEGREES = bh.AngleFormat.DEGREES
RADIANS = bh.AngleFormat.RADIANS

_REL_TOL = 1e-12
_POS_ATOL = 1e-5  # metres (published WGS84 b vs a(1 - f))
_ALT_ATOL = 1e-3  # metres
_ANGLE_DEG_ATOL = 1e-8  # degrees
_ANGLE_RAD_ATOL = 1e-10  # radians

_SURFACE_POINTS = [
    # (lon_deg, lat_deg, alt)
    (0.0, 0.0, 0.0),
    (90.0, 0.0, 0.0),
    (-105.0, 40.0, 1655.0),  # Boulder, CO
    (77.875, 20.9752, 0.0),
    (-73.9857, 40.7484, 443.0),  # Empire State Building
    (151.2093, -33.8688, 58.0),
    (-0.1276, 51.5072, 11.0),
    (10.0, 75.0, 2000.0),
    (179.5, -60.0, -50.0),
]


class TestSphericalToECEFVsBrahe:
    @pytest.mark.parametrize("lon_deg, lat_deg, alt", _SURFACE_POINTS)
    def test_spherical_to_ecef_degrees(self, lon_deg, lat_deg, alt):
        """position_spherical_to_ecef matches brahe in degrees."""
        expected = bh.position_geodetic_to_ecef(np.array([lon_deg, lat_deg, alt]), DEGREES)
        actual = np.array(position_spherical_to_ecef(
            jnp.array([lat_deg, lon_deg, alt]), use_degrees=True
        ))

        np.testing.assert_allclose(
            actual, expected,
            atol=_POS_ATOL, rtol=_REL_TOL,
            err_msg=f"spherical_to_ecef mismatch for ({lat_deg}, {lon_deg}, {alt})",
        )

    @pytest.mark.parametrize(
        "lat_rad, lon_rad, alt",
        [
            (0.0, 0.0, 0.0),
            (0.5, 1.0, 0.0),
            (0.3, -0.5, 100e3),
            (-1.2, 2.9, 35.0),
        ],
    )
    def test_spherical_to_ecef_radians(self, lat_rad, lon_rad, alt):
        """position_spherical_to_ecef matches brahe in radians."""
        expected = bh.position_geodetic_to_ecef(np.array([lon_rad, lat_rad, alt]), RADIANS)
        actual = np.array(position_spherical_to_ecef(jnp.array([lat_rad, lon_rad, alt])))

        np.testing.assert_allclose(
            actual, expected,
            atol=_POS_ATOL, rtol=_REL_TOL,
            err_msg=f"spherical_to_ecef mismatch for ({lat_rad}, {lon_rad}, {alt})",
        )


class TestECEFToSphericalVsBrahe:
    @pytest.mark.parametrize("lon_deg, lat_deg, alt", _SURFACE_POINTS)
    def test_ecef_to_spherical_degrees(self, lon_deg, lat_deg, alt):
        """Bowring's closed form agrees with brahe's iterative inverse."""
        x_ecef = bh.position_geodetic_to_ecef(np.array([lon_deg, lat_deg, alt]), DEGREES)

        expected = bh.position_ecef_to_geodetic(x_ecef, DEGREES)
        actual = np.array(position_ecef_to_spherical(jnp.array(x_ecef), use_degrees=True))

        np.testing.assert_allclose(
            actual[0], expected[1],
            atol=_ANGLE_DEG_ATOL,
            err_msg=f"ecef_to_spherical latitude mismatch for {x_ecef}",
        )
        np.testing.assert_allclose(
            actual[1], expected[0],
            atol=_ANGLE_DEG_ATOL,
            err_msg=f"ecef_to_spherical longitude mismatch for {x_ecef}",
        )
        np.testing.assert_allclose(
            actual[2], expected[2],
            atol=_ALT_ATOL,
            err_msg=f"ecef_to_spherical elevation mismatch for {x_ecef}",
        )

    @pytest.mark.parametrize(
        "x, y, z",
        [
            (6378137.0, 0.0, 0.0),
            (0.0, 6378137.0, 0.0),
            (-1275936.0, -4797210.0, 4020109.0),
        ],
    )
    def test_ecef_to_spherical_radians(self, x, y, z):
        x_ecef = np.array([x, y, z])

        expected = bh.position_ecef_to_geodetic(x_ecef, RADIANS)
        actual = np.array(position_ecef_to_spherical(jnp.array(x_ecef)))

        np.testing.assert_allclose(actual[0], expected[1], atol=_ANGLE_RAD_ATOL)
        np.testing.assert_allclose(actual[1], expected[0], atol=_ANGLE_RAD_ATOL)
        np.testing.assert_allclose(actual[2], expected[2], atol=_ALT_ATOL)


class TestReferenceOriginVsBrahe:
    @pytest.mark.parametrize("lon_deg, lat_deg, alt", _SURFACE_POINTS)
    def test_origin(self, lon_deg, lat_deg, alt):
        """The cached ECEF origin equals brahe's geodetic → ECEF."""
        sc = SphericalCoordinates(
            SurfaceType.EARTH_WGS84, lat_deg, lon_deg, alt, 0.0, use_degrees=True
        )
        expected = bh.position_geodetic_to_ecef(np.array([lon_deg, lat_deg, alt]), DEGREES)

        np.testing.assert_allclose(
            np.array(sc.origin()), expected, atol=_POS_ATOL, rtol=_REL_TOL,
        )
