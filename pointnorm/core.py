from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
import pyvista as pv

from .exceptions import EmptyInputError
from .loader import PointSet, load_points
from .stats import (
    DEFAULT_HIGH_PERCENTILE,
    DEFAULT_LOW_PERCENTILE,
    MIN_EXTENT,
    RobustStats,
    estimate_center_and_scale,
)

logger = logging.getLogger(__name__)

DEFAULT_COLOR = (0.9, 0.9, 0.1)


@dataclass(frozen=True)
class NormalizationResult:
    original: np.ndarray    # (N, 3) as loaded
    normalized: np.ndarray  # (N, 3)
    center: np.ndarray      # (3,)
    scale: float
    stats: RobustStats
    source: Optional[str] = None

    def __len__(self) -> int:
        return int(self.original.shape[0])


def _as_points(points) -> np.ndarray:
    pts = np.asarray(points, dtype=float)
    if pts.size == 0:
        pts = pts.reshape(0, 3)
    if pts.ndim != 2 or pts.shape[1] != 3:
        raise ValueError("points must have shape (N, 3).")
    return pts


def normalize_points(points, center, scale: float) -> np.ndarray:
    """Translate by ``-center`` then scale uniformly about the origin.

    Returns a new (N, 3) array; ``points`` is left untouched.
    """
    pts = _as_points(points)
    if pts.shape[0] == 0:
        raise EmptyInputError("Cannot normalize an empty point collection.", operation="normalize")
    c = np.asarray(center, dtype=float).reshape(3)
    return (pts - c[None, :]) * float(scale)


def to_point_cloud(points, color: Optional[Sequence[float]] = None) -> pv.PolyData:
    """Wrap points as a pyvista point cloud, optionally painted one RGB color.

    The color is stored as the ``"RGB"`` point array (floats in [0, 1]).
    """
    pts = _as_points(points)
    cloud = pv.PolyData(pts.copy())
    if color is not None:
        rgb = np.asarray(color, dtype=float).reshape(3)
        if np.any(rgb < 0.0) or np.any(rgb > 1.0):
            raise ValueError("color components must lie within [0, 1].")
        cloud.point_data["RGB"] = np.tile(rgb, (pts.shape[0], 1))
    return cloud


def normalize_point_set(
    point_set: PointSet,
    low: float = DEFAULT_LOW_PERCENTILE,
    high: float = DEFAULT_HIGH_PERCENTILE,
    min_extent: float = MIN_EXTENT,
    source: Optional[str] = None,
) -> NormalizationResult:
    """Estimate robust center/scale of ``point_set`` and normalize its points.

    The per-axis sequences of ``point_set`` are consumed by the estimate;
    its ``points`` are not.
    """
    if point_set.is_empty:
        raise EmptyInputError("No points loaded. Check the input file.", operation="load")

    logger.info("Computing robust (median/percentile) bounds...")
    stats = estimate_center_and_scale(
        point_set.x, point_set.y, point_set.z,
        low=low, high=high, min_extent=min_extent,
    )

    logger.info("Applying normalization...")
    normalized = normalize_points(point_set.points, stats.center, stats.scale)

    return NormalizationResult(
        original=point_set.points,
        normalized=normalized,
        center=stats.center,
        scale=stats.scale,
        stats=stats,
        source=source,
    )


def normalize_point_file(
    path: str | os.PathLike,
    low: float = DEFAULT_LOW_PERCENTILE,
    high: float = DEFAULT_HIGH_PERCENTILE,
    min_extent: float = MIN_EXTENT,
) -> NormalizationResult:
    """Load a point file and run the full normalization pipeline on it."""
    point_set = load_points(path)
    return normalize_point_set(point_set, low=low, high=high, min_extent=min_extent, source=str(path))
