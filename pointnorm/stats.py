"""Robust center and scale of a point set.

Order statistics are found by selection (``numpy.partition``) rather than a
full sort. Both :func:`percentile` and :func:`median` reorder an ndarray
argument in place: afterwards only the selected position is guaranteed to
hold its sorted value, with smaller-or-equal values before it and
greater-or-equal values after it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from .exceptions import EmptyInputError

logger = logging.getLogger(__name__)

DEFAULT_LOW_PERCENTILE = 0.05
DEFAULT_HIGH_PERCENTILE = 0.95
MIN_EXTENT = 1e-6


@dataclass(frozen=True)
class RobustStats:
    center: np.ndarray   # (3,) per-axis medians
    low: np.ndarray      # (3,) per-axis low percentiles
    high: np.ndarray     # (3,) per-axis high percentiles
    extents: np.ndarray  # (3,) high - low
    scale: float

    @property
    def max_extent(self) -> float:
        return float(self.extents.max())


def _as_sequence(values) -> np.ndarray:
    if isinstance(values, np.ndarray) and values.dtype.kind == "f":
        data = values if values.flags.writeable else values.astype(float)
    else:
        data = np.asarray(values, dtype=float)
    if data.ndim != 1:
        raise ValueError("Expected a 1-D sequence of values.")
    return data


def _select(data: np.ndarray, idx: int) -> float:
    data.partition(idx)
    return float(data[idx])


def percentile_index(n: int, p: float) -> int:
    """Index ``floor(p * (n - 1))`` of the p-th percentile in a sorted sequence of length n."""
    return int(np.floor(p * (n - 1)))


def percentile(values, p: float) -> float:
    """Value a full ascending sort would put at ``floor(p * (n - 1))``.

    Parameters
    ----------
    values:
        1-D sequence. A float ndarray is partially reordered in place; any
        other sequence is converted to a temporary array first.
    p:
        Fraction in ``[0, 1]``.
    """
    if not 0.0 <= p <= 1.0:
        raise ValueError("p must be within [0, 1].")
    data = _as_sequence(values)
    if data.size == 0:
        raise EmptyInputError("Cannot compute a percentile of an empty sequence.", operation="percentile")
    return _select(data, percentile_index(data.size, p))


def median(values) -> float:
    """Lower median: the sorted value at index ``n // 2``, no averaging."""
    data = _as_sequence(values)
    if data.size == 0:
        raise EmptyInputError("Cannot compute the median of an empty sequence.", operation="median")
    return _select(data, data.size // 2)


def robust_scale(extents, min_extent: float = MIN_EXTENT) -> float:
    """Reciprocal of the largest extent, or 1.0 when that extent is negligible."""
    max_extent = float(np.max(extents))
    if max_extent > min_extent:
        return 1.0 / max_extent
    return 1.0


def estimate_center_and_scale(
    x: np.ndarray,
    y: np.ndarray,
    z: np.ndarray,
    low: float = DEFAULT_LOW_PERCENTILE,
    high: float = DEFAULT_HIGH_PERCENTILE,
    min_extent: float = MIN_EXTENT,
) -> RobustStats:
    """Median center and isotropic percentile-range scale of three axis sequences.

    The sequences are consumed: each one is reordered by the median query and
    the percentile queries then run on the reordered data.
    """
    if not low <= high:
        raise ValueError("low percentile must not exceed high percentile.")

    axes = [_as_sequence(a) for a in (x, y, z)]
    if len({a.size for a in axes}) != 1:
        raise ValueError("Axis sequences must have equal length.")

    center = np.array([median(a) for a in axes], dtype=float)
    logger.info(f"  Robust center (median): ({center[0]:.6g}, {center[1]:.6g}, {center[2]:.6g})")

    lo = np.array([percentile(a, low) for a in axes], dtype=float)
    hi = np.array([percentile(a, high) for a in axes], dtype=float)
    extents = hi - lo
    logger.debug(f"  Robust extents: ({extents[0]:.6g}, {extents[1]:.6g}, {extents[2]:.6g})")

    scale = robust_scale(extents, min_extent)
    logger.info(f"  Robust scale: {scale:.6g} (from the {low:.0%}-{high:.0%} range)")

    return RobustStats(center=center, low=lo, high=hi, extents=extents, scale=scale)
