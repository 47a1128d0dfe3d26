"""Shared utility functions for geojax.

Provides the angle conversion helpers behind the ``use_degrees`` flag.
"""

from geojax.utils._angle import (
    from_radians,
    lat_lon_to_degrees,
    lat_lon_to_radians,
    to_radians,
)

__all__ = [
    "from_radians",
    "lat_lon_to_degrees",
    "lat_lon_to_radians",
    "to_radians",
]
