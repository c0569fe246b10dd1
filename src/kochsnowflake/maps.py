"""
Analytic maps used to deform the snowflake curve.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

import numpy as np
from scipy import special

if TYPE_CHECKING:
    import numpy.typing as npt

ComplexFunction = Callable[[np.ndarray], np.ndarray]


@dataclass(frozen=True)
class ComplexMap:
    """
    A pointwise complex function applied to sampled curves.

    Attributes:
        name: Registry key.
        label: Title used in plots.
        func: f(z), vectorized over complex arrays.
    """
    name: str
    label: str
    func: ComplexFunction

    def __call__(self, z: npt.ArrayLike) -> npt.NDArray[np.complex128]:
        return self.func(np.asarray(z, dtype=np.complex128))


def _quadratic(z):
    return z**2 + (1j / 5) * z - (1 + 1j) / 25


MAPS: dict[str, ComplexMap] = {
    m.name: m for m in (
        ComplexMap("exp", "exp(z)", np.exp),
        ComplexMap("sin", "sin(2z)", lambda z: np.sin(2 * z)),
        ComplexMap("asin", "asin(2z)", lambda z: np.arcsin(2 * z)),
        ComplexMap("bessel", "$J_0(z)$", lambda z: special.jv(0, z)),
        ComplexMap("reciprocal", "1/z", lambda z: 1 / z),
        ComplexMap("quadratic", "Image under $z^2 + (i/5)z - (1+i)/25$", _quadratic),
    )
}

# Maps shown together in the 2x2 deformation panel
PANEL_MAPS: tuple[str, ...] = ("exp", "sin", "asin", "bessel")


def get_map(name: str) -> ComplexMap:
    """
    Look up a map by its registry name.

    Raises:
        KeyError: If no map with this name exists.
    """
    try:
        return MAPS[name]
    except KeyError:
        raise KeyError(f"Unknown map '{name}'. Known maps: {', '.join(sorted(MAPS))}.") from None
