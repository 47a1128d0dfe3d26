import pytest

from geojax.config import DEFAULT_DTYPE, set_dtype


@pytest.fixture(autouse=True)
def _restore_default_dtype():
    """Run every test in the shipped float64 configuration.

    test_config.py switches dtypes and restores them itself; this guards
    the remaining modules against any dtype left behind.
    """
    set_dtype(DEFAULT_DTYPE)
    yield
    set_dtype(DEFAULT_DTYPE)
