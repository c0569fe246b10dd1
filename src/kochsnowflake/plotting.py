"""
Rendering of snowflake curves with matplotlib.

The functions only consume sampled points of the curves and return the created
figures; `finish` either shows a figure or writes it to disk.
"""
from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, Iterable, Optional, Union

import matplotlib.pyplot as plt
import numpy as np

from kochsnowflake import config
from kochsnowflake.maps import PANEL_MAPS, get_map
from kochsnowflake.snowflake import next_koch

if TYPE_CHECKING:
    import numpy.typing as npt
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

    from kochsnowflake.curve import MappedCurve, PiecewiseLinearCurve

logger = logging.getLogger(__name__)


def _plot_complex(ax: Axes, z: npt.NDArray[np.complex128], **kwargs) -> None:
    kwargs.setdefault("lw", config.LINE_WIDTH)
    ax.plot(z.real, z.imag, **kwargs)
    ax.set_aspect("equal")


def plot_segment_iteration() -> Figure:
    """
    One path segment before and after a single fractal iteration.
    """
    seg1 = np.array([-1.0, 1.0], dtype=np.complex128)
    # Traversed right to left so that the bump points up
    seg2 = next_koch(seg1[::-1])

    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(6, 6))
    for ax, seg, title in ((ax1, seg1, "Original path segment"), (ax2, seg2, "After one iteration")):
        _plot_complex(ax, seg)
        ax.set_ylim(-0.2, 0.7)
        ax.set_title(title, fontsize=config.FONT_SIZE)
    return fig


def plot_snowflake(curve: PiecewiseLinearCurve, n_samples: int = config.DEFAULT_SAMPLES) -> Figure:
    """
    Filled snowflake with a highlighted boundary.
    """
    _, z = curve.sample(n_samples)

    fig, ax = plt.subplots(figsize=(6, 6))
    ax.fill(z.real, z.imag, facecolor=config.FILL_COLOR, edgecolor=config.EDGE_COLOR, lw=config.EDGE_WIDTH)
    ax.set_aspect("equal")
    ax.set_title("Koch Snowflake", fontsize=config.FONT_SIZE)
    return fig


def plot_pieces(curve: PiecewiseLinearCurve) -> Figure:
    """
    The snowflake drawn piece by piece from its explicit breakpoints.
    """
    fig, ax = plt.subplots(figsize=(6, 6))
    for a, b, path in curve.pieces():
        _plot_complex(ax, path(np.array([a, b])), color="C0")
    ax.set_title("Koch snowflake (built a different way)", fontsize=config.FONT_SIZE)
    return fig


def plot_mapped(mapped: MappedCurve, n_samples: int = config.DEFAULT_SAMPLES, ax: Optional[Axes] = None) -> Figure:
    """
    Image of the snowflake under an analytic map.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 6))
    else:
        fig = ax.figure

    _, w = mapped.sample(n_samples)
    _plot_complex(ax, w)
    ax.set_title(mapped.label, fontsize=config.FONT_SIZE)
    return fig


def plot_map_panel(
    curve: PiecewiseLinearCurve,
    names: Iterable[str] = PANEL_MAPS,
    n_samples: int = config.DEFAULT_SAMPLES
) -> Figure:
    """
    Images of the snowflake under four maps in a 2x2 grid.
    """
    names = list(names)
    if len(names) != 4:
        raise ValueError(f"The map panel holds exactly 4 maps, got {len(names)}.")

    fig, axes = plt.subplots(2, 2, figsize=(9, 9))
    for ax, name in zip(axes.flat, names):
        plot_mapped(curve.map(get_map(name)), n_samples=n_samples, ax=ax)
    return fig


def finish(fig: Figure, name: str, output_dir: Optional[Union[str, os.PathLike]] = None) -> Optional[str]:
    """
    Show the figure, or save it as `<output_dir>/<name>.png` and close it.

    Returns:
        Path of the written file, or None when the figure was shown.
    """
    if output_dir is None:
        plt.show()
        return None

    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(str(output_dir), f"{name}.png")
    fig.savefig(path, dpi=150)
    plt.close(fig)
    logger.info(f"Saved figure: {path}")
    return path
