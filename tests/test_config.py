"""Tests for the geojax.config module."""

import importlib

import jax
import jax.numpy as jnp
import pytest

import geojax.config
from geojax.config import (
    DEFAULT_DTYPE,
    get_dtype,
    get_elevation_eq_tolerance,
    set_dtype,
)
from geojax.constants import WGS84_a
from geojax.coordinates import position_spherical_to_ecef
from geojax.ellipsoid import SurfaceType
from geojax.spherical_coordinates import CoordinateType, SphericalCoordinates

pytestmark = pytest.mark.order("first")

_POS_TOL = 1e-6  # metres, paths that avoid SPHERICAL
_SPH_POS_TOL = 1e-3  # metres, paths through the Bowring closed form


@pytest.fixture(autouse=True)
def reset_dtype():
    """Restore the default dtype before and after each test."""
    set_dtype(DEFAULT_DTYPE)
    yield
    set_dtype(DEFAULT_DTYPE)


@pytest.fixture
def fresh_config():
    """Re-run the config module body to get its import-time state."""
    set_dtype(jnp.float32)
    importlib.reload(geojax.config)
    return geojax.config


class TestGetSetDtype:
    def test_default_dtype(self, fresh_config):
        assert DEFAULT_DTYPE == jnp.float64
        assert fresh_config.get_dtype() == jnp.float64
        assert get_dtype() == jnp.float64

    def test_import_enables_x64(self, fresh_config):
        assert jax.config.jax_enable_x64 is True

    def test_set_float32(self):
        set_dtype(jnp.float32)
        assert get_dtype() == jnp.float32

    def test_set_float16(self):
        set_dtype(jnp.float16)
        assert get_dtype() == jnp.float16

    def test_set_bfloat16(self):
        set_dtype(jnp.bfloat16)
        assert get_dtype() == jnp.bfloat16

    def test_roundtrip(self):
        for dtype in (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64):
            set_dtype(dtype)
            assert get_dtype() == dtype

    def test_invalid_dtype_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype(jnp.int32)

    def test_invalid_dtype_string_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype("float32")

    def test_invalid_dtype_keeps_previous(self):
        set_dtype(jnp.float32)
        with pytest.raises(ValueError):
            set_dtype(jnp.complex64)
        assert get_dtype() == jnp.float32


class TestElevationEqTolerance:
    def test_default_tolerance(self):
        assert get_elevation_eq_tolerance() == 1e-6

    def test_float32_tolerance(self):
        set_dtype(jnp.float32)
        assert get_elevation_eq_tolerance() == 1e-3

    def test_float16_tolerance(self):
        set_dtype(jnp.float16)
        assert get_elevation_eq_tolerance() == 0.1

    def test_bfloat16_tolerance(self):
        set_dtype(jnp.bfloat16)
        assert get_elevation_eq_tolerance() == 0.1


class TestDtypeSwitchingOutputs:
    """Verify that output dtypes match the configured dtype."""

    def test_spherical_to_ecef_dtype_default(self):
        x_ecef = position_spherical_to_ecef(jnp.array([0.1, 0.2, 0.0]))
        assert x_ecef.dtype == jnp.float64

    def test_spherical_to_ecef_dtype_float32(self):
        set_dtype(jnp.float32)
        x_ecef = position_spherical_to_ecef(jnp.array([0.1, 0.2, 0.0]))
        assert x_ecef.dtype == jnp.float32

    def test_reference_state_dtype_default(self):
        sc = SphericalCoordinates()
        assert sc.latitude_reference().dtype == jnp.float64
        assert sc.origin().dtype == jnp.float64
        assert sc.transform_cache().rot_ecef_to_global.dtype == jnp.float64

    def test_reference_state_dtype_float32(self):
        set_dtype(jnp.float32)
        sc = SphericalCoordinates()
        assert sc.origin().dtype == jnp.float32

    def test_position_transform_dtype_float32(self):
        set_dtype(jnp.float32)
        sc = SphericalCoordinates()
        out = sc.position_transform(
            [1.0, 2.0, 3.0], CoordinateType.GLOBAL, CoordinateType.ECEF
        )
        assert out.dtype == jnp.float32


class TestDefaultConfigurationPrecision:
    """Round trips in the configuration a caller gets straight after import."""

    @pytest.fixture
    def zurich(self, fresh_config):
        return SphericalCoordinates(
            SurfaceType.EARTH_WGS84, 47.3769, 8.5417, 408.0, 0.0, use_degrees=True
        )

    def test_local2_ecef_roundtrip(self, zurich):
        p = jnp.array([1.0, 2.0, 0.5])
        x_ecef = zurich.position_transform(p, CoordinateType.LOCAL2, CoordinateType.ECEF)
        back = zurich.position_transform(x_ecef, CoordinateType.ECEF, CoordinateType.LOCAL2)
        assert back.dtype == jnp.float64
        assert jnp.allclose(back, p, rtol=0.0, atol=_POS_TOL)

    def test_global_spherical_roundtrip(self, zurich):
        p = jnp.array([1.0, 2.0, 0.5])
        x_sph = zurich.position_transform(p, CoordinateType.GLOBAL, CoordinateType.SPHERICAL)
        back = zurich.position_transform(x_sph, CoordinateType.SPHERICAL, CoordinateType.GLOBAL)
        assert jnp.allclose(back, p, rtol=0.0, atol=_SPH_POS_TOL)

    def test_millimetre_offset_survives_ecef(self, zurich):
        out = zurich.position_transform(
            [0.001, 0.0, 0.0], CoordinateType.GLOBAL, CoordinateType.ECEF
        )
        back = zurich.position_transform(out, CoordinateType.ECEF, CoordinateType.GLOBAL)
        assert abs(float(back[0]) - 0.001) < 1e-8

    def test_local_origin_maps_to_reference(self, fresh_config):
        sc = SphericalCoordinates()
        x_sph = sc.spherical_from_local_position([0.0, 0.0, 0.0])
        assert jnp.allclose(x_sph, jnp.zeros(3), rtol=0.0, atol=1e-9)

    def test_local_unit_step_roundtrip(self, fresh_config):
        """At zero heading a LOCAL round trip comes back with x and y negated."""
        sc = SphericalCoordinates()
        x_sph = sc.spherical_from_local_position([1.0, 0.0, 0.0])
        back = sc.local_from_spherical_position(x_sph)
        assert jnp.allclose(back, jnp.array([-1.0, 0.0, 0.0]), rtol=0.0, atol=_POS_TOL)

    def test_equator_elevation_exact(self, fresh_config):
        sc = SphericalCoordinates()
        x_sph = sc.position_transform(
            [WGS84_a, 0.0, 0.0], CoordinateType.ECEF, CoordinateType.SPHERICAL
        )
        assert abs(float(x_sph[2])) < 1e-9
