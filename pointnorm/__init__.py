"""pointnorm — Robust Point Normalization.

Load a whitespace-separated 3D point file, center it on its per-axis median,
scale it by the largest 5th-95th percentile range, and visualize the result.
"""

from .core import NormalizationResult, normalize_point_file, normalize_point_set, normalize_points, to_point_cloud
from .exceptions import EmptyInputError, PointNormError, SourceUnavailableError
from .loader import PointSet, load_points, parse_points
from .stats import RobustStats, estimate_center_and_scale, median, percentile

__all__ = [
    "NormalizationResult",
    "normalize_point_file",
    "normalize_point_set",
    "normalize_points",
    "to_point_cloud",
    "EmptyInputError",
    "PointNormError",
    "SourceUnavailableError",
    "PointSet",
    "load_points",
    "parse_points",
    "RobustStats",
    "estimate_center_and_scale",
    "median",
    "percentile",
]

__version__ = "1.0.0"
