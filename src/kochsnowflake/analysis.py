"""
Length growth of the snowflake and its fractal dimension.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from math import log

import numpy as np

from kochsnowflake.curve import PiecewiseLinearCurve
from kochsnowflake.snowflake import InvalidArgumentError, koch

logger = logging.getLogger(__name__)

# Every iteration scales edges by 1/3 and multiplies their number by 4
LENGTH_RATIO: float = 4.0 / 3.0
SCALE_FACTOR: int = 3


def perimeter(n: int) -> float:
    """Perimeter of the snowflake polygon after `n` iterations."""
    return float(np.sum(np.abs(np.diff(koch(n)))))


def hausdorff_dimension() -> float:
    """Hausdorff dimension of the Koch curve, log 4 / log 3."""
    return log(4) / log(3)


def similarity_dimension(ratio: float, scale: float = SCALE_FACTOR) -> float:
    """
    Dimension of a self-similar curve from its length growth per iteration.

    One iteration shrinks pieces by `scale` and makes the length grow by `ratio`, so
    the number of copies is ratio * scale and the dimension is log(ratio * scale) / log(scale).

    Raises:
        InvalidArgumentError: If `ratio` is not positive or `scale` is not greater than 1.
    """
    if ratio <= 0:
        raise InvalidArgumentError(f"Length ratio must be positive, got {ratio}.")
    if scale <= 1:
        raise InvalidArgumentError(f"Scale factor must be greater than 1, got {scale}.")
    return log(ratio * scale) / log(scale)


@dataclass
class LengthStudy:
    """
    Arc lengths of the snowflake curve for the levels 0..max_level.
    """
    levels: list[int] = field(default_factory=list)
    lengths: list[float] = field(default_factory=list)

    @property
    def ratios(self) -> list[float]:
        """Successive ratios L(n+1) / L(n)."""
        return [b / a for a, b in zip(self.lengths[:-1], self.lengths[1:])]

    @property
    def dimension(self) -> float:
        """Dimension estimated from the last measured ratio."""
        if len(self.lengths) < 2:
            raise InvalidArgumentError("At least two levels are needed to estimate the dimension.")
        return similarity_dimension(self.ratios[-1])


def length_study(max_level: int) -> LengthStudy:
    """
    Measure the arc length of the snowflake curve for every level up to `max_level`.

    Raises:
        InvalidArgumentError: If `max_level` is negative.
    """
    if max_level < 0:
        raise InvalidArgumentError(f"Maximum level must be non-negative, got {max_level}.")

    study = LengthStudy()
    for n in range(max_level + 1):
        curve = PiecewiseLinearCurve.from_level(n)
        length = curve.arclength()
        study.levels.append(n)
        study.lengths.append(length)
        logger.info(f"L{n} = {length:.12g} ({curve.n_pieces} pieces)")

    return study
