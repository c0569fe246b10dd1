"""
Koch Snowflake Vertices
=======================
Generation of the snowflake boundary and its parametrization by t in [0, 1].

Vertices are points in the complex plane, stored as a closed 1-D array of
dtype complex128 (the first vertex is repeated at the end). Starting from an
equilateral triangle, every iteration replaces the middle third of each edge
with the two sides of an equilateral triangle erected outward on it.
"""
from __future__ import annotations

import logging
from math import sqrt
from numbers import Integral
from typing import TYPE_CHECKING, Union

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

# Corners of the base triangle, circumradius 1/sqrt(3), top vertex first.
BASE_TRIANGLE: tuple[complex, ...] = (
    complex(0.0, 1.0 / sqrt(3.0)),
    complex(-0.5, -1.0 / (2.0 * sqrt(3.0))),
    complex(0.5, -1.0 / (2.0 * sqrt(3.0))),
)


class InvalidArgumentError(ValueError):
    """Raised for a negative iteration level or a parameter outside [0, 1]."""


def _freeze(vertices: npt.NDArray[np.complex128]) -> npt.NDArray[np.complex128]:
    vertices.flags.writeable = False
    return vertices


def _as_vertices(vertices: npt.ArrayLike) -> npt.NDArray[np.complex128]:
    K = np.asarray(vertices, dtype=np.complex128)
    if K.ndim != 1:
        raise InvalidArgumentError(f"Vertex sequence must be one-dimensional, got shape {K.shape}.")
    if K.size < 2:
        raise InvalidArgumentError(f"Vertex sequence needs at least 2 points, got {K.size}.")
    return K


def base_triangle() -> npt.NDArray[np.complex128]:
    """Closed vertex sequence of the level-0 snowflake (4 points)."""
    return _freeze(np.array(BASE_TRIANGLE + BASE_TRIANGLE[:1], dtype=np.complex128))


def next_koch(vertices: npt.ArrayLike) -> npt.NDArray[np.complex128]:
    """
    Carry out a single step of the fractal iteration.

    Every edge (z1, z2) is replaced by the four points z1, w1, w2, w3 where w1 and w3
    lie at 1/3 and 2/3 along the edge and w2 is the apex of the equilateral triangle
    on [w1, w3]. The original vertices are kept, so a closed sequence stays closed.

    Args:
        vertices: Vertex sequence produced by the previous step.

    Raises:
        InvalidArgumentError: If the sequence is not one-dimensional or has fewer than 2 points.

    Returns:
        New vertex sequence with 4*U + 1 points, where U is the previous edge count.
    """
    K = _as_vertices(vertices)
    n_edges = K.size - 1

    z1 = K[:-1]
    z2 = K[1:]

    w1 = 2 * z1 / 3 + z2 / 3
    w3 = z1 / 3 + 2 * z2 / 3
    w2 = (w1 + w3) / 2 + 1j * sqrt(3.0) * (w1 - w3) / 2

    Kn = np.empty(4 * n_edges + 1, dtype=np.complex128)
    Kn[0::4] = K
    Kn[1::4] = w1
    Kn[2::4] = w2
    Kn[3::4] = w3
    return _freeze(Kn)


def koch(n: int) -> npt.NDArray[np.complex128]:
    """
    Vertices of the Koch snowflake after `n` iterations.

    Args:
        n: Iteration level, a non-negative integer.

    Raises:
        InvalidArgumentError: If `n` is negative or not an integer.

    Returns:
        Closed vertex sequence with 3 * 4**n + 1 points.
    """
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidArgumentError(f"Iteration level must be an integer, got {n!r}.")
    if n < 0:
        raise InvalidArgumentError(f"Iteration level must be non-negative, got {n}.")

    K = base_triangle()
    for _ in range(int(n)):
        K = next_koch(K)

    logger.debug(f"Generated Koch snowflake level {n} with {K.size} vertices.")
    return K


def koch_fn(
    vertices: npt.ArrayLike,
    t: Union[float, npt.ArrayLike]
) -> Union[complex, npt.NDArray[np.complex128]]:
    """
    Parametrize the polygon through `vertices` by t in [0, 1].

    The parameter is mapped to p = (M - 1) * t, where M is the number of vertices. The
    segment m = floor(p) is clamped to M - 2, so t = 1 belongs to the last segment and
    returns the last vertex exactly. Breakpoints sit at t = k / (M - 1).

    Args:
        vertices: Vertex sequence (at least 2 points).
        t: Scalar or array of parameters in [0, 1].

    Raises:
        InvalidArgumentError: If any parameter is outside [0, 1] or not finite.

    Returns:
        A complex number for scalar `t`, otherwise an array shaped like `t`.
    """
    K = _as_vertices(vertices)
    t_array = np.asarray(t, dtype=np.float64)

    if not np.all(np.isfinite(t_array)) or np.any(t_array < 0.0) or np.any(t_array > 1.0):
        raise InvalidArgumentError("Curve parameter must lie in [0, 1].")

    n_edges = K.size - 1
    p = n_edges * t_array
    m1 = np.minimum(np.floor(p).astype(np.int64), n_edges - 1)
    m2 = m1 + 1
    s = p - m1

    y = K[m1] * (1 - s) + K[m2] * s

    if t_array.ndim == 0:
        return complex(y)
    return y
