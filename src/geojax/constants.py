"""
The `constants` module defines the angle conversion factors and the Earth
figures used by the geodetic transforms.
"""

from jax.numpy import pi as PI

# Angles
"""
Multiply by this to turn degrees into radians. Units: *rad/deg*
"""
DEG2RAD = PI / 180.0

"""
Multiply by this to turn radians into degrees. Units: *deg/rad*
"""
RAD2DEG = 180.0 / PI

# WGS84 ellipsoid
"""
WGS84 equatorial radius (semi-major axis). [m]

References:

1. NIMA Technical Report TR8350.2, Table 3.1
"""
WGS84_a = 6378137.0

"""
WGS84 polar radius (semi-minor axis), as published to the micrometre. [m]

References:

1. NIMA Technical Report TR8350.2, Table 3.3
"""
WGS84_b = 6356752.314245

"""
WGS84 flattening, (a - b) / a.

References:

1. NIMA Technical Report TR8350.2, Table 3.1
"""
WGS84_f = 1.0 / 298.257223563

"""
Mean radius of a spherical Earth, used for great-circle distances. [m]

References:

1. IUGG mean radius R1, H. Moritz, *Geodetic Reference System 1980*
"""
R_EARTH_MEAN = 6371000.0
