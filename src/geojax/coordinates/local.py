"""Heading rotations between the GLOBAL frame and the two LOCAL frames.

The heading offset is the angle from geographic East to the local X axis.
Historically it has been expressed as a *clockwise* rotation taking the
GLOBAL frame to the LOCAL frame, while the matrices below follow the
right-hand rule.  :func:`heading_terms` therefore negates the heading
before taking its sine and cosine, and every other function in this module
expects those negated terms.

Two input conventions exist:

- ``LOCAL`` maps ``(x, y)`` through ``[[-c, s], [-s, -c]]``.
- ``LOCAL2`` maps ``(x, y)`` through ``[[c, s], [-s, c]]``.

Both share one output rotation, ``[[c, -s], [s, c]]``, which is the exact
inverse of the ``LOCAL2`` input rotation.  The ``LOCAL`` input rotation is
the negative of the output rotation, so a LOCAL round trip turns the
horizontal components by ``pi - 2h``; at zero heading it negates them.
The z (Up) component is never rotated.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike


def heading_terms(heading: ArrayLike) -> tuple[Array, Array]:
    """Return ``(cos(-heading), sin(-heading))``.

    Args:
        heading: Heading offset in *rad*, measured from East to the local
            X axis.

    Returns:
        tuple: ``(cos_hea, sin_hea)``.
    """
    heading = jnp.asarray(heading)
    return jnp.cos(-heading), jnp.sin(-heading)


def rotation_local_to_global(cos_hea: ArrayLike, sin_hea: ArrayLike) -> Array:
    """Rotation applied to ``LOCAL`` inputs before the ECEF step.

    Args:
        cos_hea: Cosine of the negated heading.
        sin_hea: Sine of the negated heading.

    Returns:
        3x3 matrix (LOCAL → GLOBAL).
    """
    return jnp.array([
        [-cos_hea, sin_hea, 0.0],
        [-sin_hea, -cos_hea, 0.0],
        [0.0, 0.0, 1.0],
    ])


def rotation_local2_to_global(cos_hea: ArrayLike, sin_hea: ArrayLike) -> Array:
    """Rotation applied to ``LOCAL2`` inputs before the ECEF step.

    Args:
        cos_hea: Cosine of the negated heading.
        sin_hea: Sine of the negated heading.

    Returns:
        3x3 matrix (LOCAL2 → GLOBAL).
    """
    return jnp.array([
        [cos_hea, sin_hea, 0.0],
        [-sin_hea, cos_hea, 0.0],
        [0.0, 0.0, 1.0],
    ])


def rotation_global_to_local(cos_hea: ArrayLike, sin_hea: ArrayLike) -> Array:
    """Rotation producing ``LOCAL`` and ``LOCAL2`` outputs from GLOBAL.

    Args:
        cos_hea: Cosine of the negated heading.
        sin_hea: Sine of the negated heading.

    Returns:
        3x3 matrix (GLOBAL → LOCAL/LOCAL2).
    """
    return jnp.array([
        [cos_hea, -sin_hea, 0.0],
        [sin_hea, cos_hea, 0.0],
        [0.0, 0.0, 1.0],
    ])
