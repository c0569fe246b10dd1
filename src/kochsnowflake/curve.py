"""
Parametric Snowflake Curves
===========================
A closed polygon parametrized over [0, 1] with one linear piece per edge, and the
image of such a curve under an analytic map.

The breakpoints of the curve are known in advance (t_k = k / (M - 1) for M vertices),
so corners never have to be detected from samples: sampling always includes them.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Union

import numpy as np

from kochsnowflake.snowflake import InvalidArgumentError, koch, koch_fn

if TYPE_CHECKING:
    import numpy.typing as npt

    from kochsnowflake.maps import ComplexMap

logger = logging.getLogger(__name__)


class PiecewiseLinearCurve:
    """
    Curve through a vertex sequence, linear between consecutive vertices.
    """

    def __init__(self, vertices: npt.ArrayLike) -> None:
        """
        Args:
            vertices: Vertex sequence with at least 2 points.
        """
        K = np.array(vertices, dtype=np.complex128)
        if K.ndim != 1 or K.size < 2:
            raise InvalidArgumentError(f"A curve needs a 1-D sequence of at least 2 vertices, got shape {K.shape}.")
        K.flags.writeable = False
        self.vertices = K
        logger.debug(f"Built curve with {self.n_pieces} linear pieces.")

    @classmethod
    def from_level(cls, n: int) -> PiecewiseLinearCurve:
        """Snowflake curve after `n` iterations."""
        return cls(koch(n))

    @property
    def n_pieces(self) -> int:
        return self.vertices.size - 1

    @property
    def breakpoints(self) -> npt.NDArray[np.float64]:
        return np.arange(self.vertices.size, dtype=np.float64) / self.n_pieces

    @property
    def is_closed(self) -> bool:
        return bool(self.vertices[0] == self.vertices[-1])

    def __call__(self, t: Union[float, npt.ArrayLike]) -> Union[complex, npt.NDArray[np.complex128]]:
        return koch_fn(self.vertices, t)

    def pieces(self) -> list[tuple[float, float, Callable[[npt.ArrayLike], npt.NDArray[np.complex128]]]]:
        """
        The curve as separate linear pieces.

        Returns:
            A list of (t_start, t_end, path) with one entry per edge, where `path` maps
            t in [t_start, t_end] linearly from one vertex to the next.
        """
        ends = self.breakpoints
        result = []
        for k in range(self.n_pieces):
            z1, z2 = self.vertices[k], self.vertices[k + 1]
            a, b = float(ends[k]), float(ends[k + 1])

            def path(t, z1=z1, z2=z2, a=a, b=b):
                s = (np.asarray(t, dtype=np.float64) - a) / (b - a)
                return z1 * (1 - s) + z2 * s

            result.append((a, b, path))
        return result

    def parameters(self, n_samples: int) -> npt.NDArray[np.float64]:
        """
        Sorted parameter values: `n_samples` uniform ones merged with every breakpoint.
        """
        if n_samples < 2:
            raise InvalidArgumentError(f"At least 2 samples are required, got {n_samples}.")
        return np.union1d(np.linspace(0.0, 1.0, n_samples), self.breakpoints)

    def sample(self, n_samples: int = 1000) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.complex128]]:
        """
        Sample the curve for plotting.

        Returns:
            Parameter values and the corresponding points.
        """
        t = self.parameters(n_samples)
        return t, self(t)

    def arclength(self) -> float:
        """Exact length, the sum of the edge lengths."""
        return float(np.sum(np.abs(np.diff(self.vertices))))

    def map(self, complex_map: ComplexMap) -> MappedCurve:
        """Image of this curve under `complex_map`, see `maps.get_map`."""
        return MappedCurve(self, complex_map)

    def __len__(self) -> int:
        return self.vertices.size

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n_pieces={self.n_pieces})"


class MappedCurve:
    """
    Image f(z(t)) of a piecewise linear curve under an analytic map f.
    """

    def __init__(self, base: PiecewiseLinearCurve, complex_map: ComplexMap) -> None:
        self.base = base
        self.complex_map = complex_map

    @property
    def name(self) -> str:
        return self.complex_map.name

    @property
    def label(self) -> str:
        return self.complex_map.label

    def __call__(self, t: Union[float, npt.ArrayLike]) -> Union[complex, npt.NDArray[np.complex128]]:
        w = self.complex_map(self.base(t))
        if np.ndim(t) == 0:
            return complex(w)
        return w

    def sample(self, n_samples: int = 1000) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.complex128]]:
        t, z = self.base.sample(n_samples)
        return t, self.complex_map(z)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.complex_map.name!r}, n_pieces={self.base.n_pieces})"
