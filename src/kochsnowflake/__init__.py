"""Koch snowflake vertices, parametric curves, analytic deformations and length study."""
from kochsnowflake.analysis import LengthStudy, hausdorff_dimension, length_study, perimeter, similarity_dimension
from kochsnowflake.curve import MappedCurve, PiecewiseLinearCurve
from kochsnowflake.maps import MAPS, ComplexMap, get_map
from kochsnowflake.snowflake import InvalidArgumentError, base_triangle, koch, koch_fn, next_koch

__all__ = [
    "ComplexMap",
    "InvalidArgumentError",
    "LengthStudy",
    "MAPS",
    "MappedCurve",
    "PiecewiseLinearCurve",
    "base_triangle",
    "get_map",
    "hausdorff_dimension",
    "koch",
    "koch_fn",
    "length_study",
    "next_koch",
    "perimeter",
    "similarity_dimension",
]
