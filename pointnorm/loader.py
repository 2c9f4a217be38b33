from __future__ import annotations

import logging
import math
import os
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

import numpy as np

from .exceptions import SourceUnavailableError

logger = logging.getLogger(__name__)

# Leading numeric prefix, as strtod reads it (no inf/nan/hex/underscores).
_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_SPACE = re.compile(r"[ \t\n\r\f\v]*")


@dataclass(frozen=True)
class PointSet:
    points: np.ndarray  # (N, 3), read-only
    x: np.ndarray       # (N,), writable working copy
    y: np.ndarray
    z: np.ndarray

    def __len__(self) -> int:
        return int(self.points.shape[0])

    @property
    def is_empty(self) -> bool:
        return len(self) == 0


def _scan_numbers(text: str) -> Iterator[float]:
    """Yield numbers from ``text`` until one cannot be read.

    Like stream extraction, a number ends where its prefix ends, so
    ``"3abc"`` yields 3 and then stops at ``"abc"``. A dangling exponent
    (``"1e"``) or a non-finite value ends the scan without yielding.
    """
    pos = 0
    while True:
        pos = _SPACE.match(text, pos).end()
        m = _NUMBER.match(text, pos)
        if m is None:
            return
        end = m.end()
        if m.group(1) is None and text[end:end + 1] in ("e", "E"):
            return
        value = float(m.group())
        if not math.isfinite(value):
            return
        yield value
        pos = end


def _read_triples(values: Iterable[float]) -> list[tuple[float, float, float]]:
    triples = []
    triple = []
    for v in values:
        triple.append(v)
        if len(triple) == 3:
            triples.append(tuple(triple))
            triple = []
    # An incomplete trailing triple is dropped.
    return triples


def point_set_from_array(points: np.ndarray) -> PointSet:
    """Build a PointSet from an (N, 3) array.

    The point collection is copied and frozen; the per-axis sequences are
    separate writable copies, so reordering them never touches ``points``.
    """
    pts = np.array(points, dtype=float)
    if pts.size == 0:
        pts = pts.reshape(0, 3)
    if pts.ndim != 2 or pts.shape[1] != 3:
        raise ValueError("points must have shape (N, 3).")
    pts.setflags(write=False)
    return PointSet(
        points=pts,
        x=pts[:, 0].copy(),
        y=pts[:, 1].copy(),
        z=pts[:, 2].copy(),
    )


def parse_points(text: str) -> PointSet:
    """Parse whitespace-separated ``x y z`` triples.

    Reading stops where no further number can be read (the rest of the text
    is ignored) and an incomplete final triple is dropped. Empty input yields
    an empty PointSet.
    """
    triples = _read_triples(_scan_numbers(text))
    if not triples:
        return point_set_from_array(np.empty((0, 3), dtype=float))
    return point_set_from_array(np.asarray(triples, dtype=float))


def load_points(path: str | os.PathLike) -> PointSet:
    """Load a whitespace-separated point file.

    Undecodable bytes end the read like any other malformed data.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            logger.info(f"File opened: {path}. Reading points...")
            text = f.read()
    except OSError as e:
        raise SourceUnavailableError(f"Cannot open point file: {path}", path=str(path)) from e

    ps = parse_points(text)
    logger.info(f"  Points loaded: {len(ps)}")
    return ps
