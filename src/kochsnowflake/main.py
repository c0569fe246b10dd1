"""
Command-Line Entry
==================
Parses the arguments, sets up logging, prints the length study and renders the figures.
"""
from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import matplotlib

from kochsnowflake import config
from kochsnowflake.analysis import hausdorff_dimension, length_study
from kochsnowflake.curve import PiecewiseLinearCurve
from kochsnowflake.logging_config import setup_logging
from kochsnowflake.maps import get_map
from kochsnowflake.snowflake import InvalidArgumentError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="kochsnowflake",
        description="Plot the Koch snowflake, its images under analytic maps, and study its length.",
    )
    ap.add_argument("--level", type=int, default=config.DEFAULT_LEVEL,
                    help="iteration level of the plotted curve")
    ap.add_argument("--max-level", type=int, default=config.DEFAULT_MAX_LEVEL,
                    help="highest level in the length study")
    ap.add_argument("--samples", type=int, default=config.DEFAULT_SAMPLES,
                    help="uniform samples per curve, breakpoints are always included")
    ap.add_argument("--output-dir", default=None,
                    help=f"save figures as PNG files here instead of showing them (e.g. {config.OUTPUT_PATH})")
    ap.add_argument("--no-plots", action="store_true", help="only print the numbers")
    ap.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    ap.add_argument("--log-file", default=None)
    return ap


def render(curve: PiecewiseLinearCurve, n_samples: int, output_dir: Optional[str]) -> None:
    if output_dir is not None:
        matplotlib.use("Agg")
    from kochsnowflake import plotting

    plotting.finish(plotting.plot_segment_iteration(), "segment", output_dir)
    plotting.finish(plotting.plot_snowflake(curve, n_samples), "snowflake", output_dir)
    plotting.finish(plotting.plot_pieces(curve), "snowflake_pieces", output_dir)
    plotting.finish(plotting.plot_map_panel(curve, n_samples=n_samples), "maps", output_dir)
    for name in ("reciprocal", "quadratic"):
        mapped = curve.map(get_map(name))
        plotting.finish(plotting.plot_mapped(mapped, n_samples), name, output_dir)


def run(args: argparse.Namespace) -> None:
    curve = PiecewiseLinearCurve.from_level(args.level)
    print(f"Level {args.level}: {len(curve)} vertices, {curve.n_pieces} linear pieces")

    besselz = curve.map(get_map("bessel"))
    _, w = besselz.sample(args.samples)
    print(f"Image under {besselz.label}: {w.size} sample points")

    study = length_study(args.max_level)
    for n, length in zip(study.levels, study.lengths):
        print(f"L{n} = {length:.12g}")
    for n, ratio in enumerate(study.ratios):
        print(f"L{n + 1}/L{n} = {ratio:.12g}")

    print(f"D = log(4)/log(3) = {hausdorff_dimension():.12g}")
    if len(study.levels) > 1:
        print(f"D (from measured ratio) = {study.dimension:.12g}")

    if not args.no_plots:
        render(curve, args.samples, args.output_dir)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    try:
        run(args)
    except InvalidArgumentError as e:
        logger.error(str(e))
        return 2
    return 0
