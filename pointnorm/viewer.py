from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

import numpy as np
import pyvista as pv

from .core import DEFAULT_COLOR, to_point_cloud

logger = logging.getLogger(__name__)


@dataclass
class ViewStyle:
    point_size: float = 3.0
    background: str = "black"
    show_axes: bool = True
    render_points_as_spheres: bool = False
    window_title: str = "pointnorm"


# Receives (points, color, style); show_points is the default window.
PointSink = Callable[[np.ndarray, Optional[Sequence[float]], Optional[ViewStyle]], None]


def add_point_cloud(
    plotter: pv.Plotter,
    points: np.ndarray,
    color: Optional[Sequence[float]] = DEFAULT_COLOR,
    style: Optional[ViewStyle] = None,
):
    """Add ``points`` to ``plotter`` as a point cloud, painted ``color`` if given."""
    style = style or ViewStyle()
    cloud = to_point_cloud(points, color)
    if color is not None:
        return plotter.add_mesh(
            cloud,
            scalars="RGB",
            rgb=True,
            point_size=style.point_size,
            render_points_as_spheres=style.render_points_as_spheres,
            style="points",
        )
    return plotter.add_mesh(
        cloud,
        point_size=style.point_size,
        render_points_as_spheres=style.render_points_as_spheres,
        style="points",
    )


def show_points(
    points: np.ndarray,
    color: Optional[Sequence[float]] = DEFAULT_COLOR,
    style: Optional[ViewStyle] = None,
) -> None:
    """Open a window showing ``points`` and block until it is closed."""
    style = style or ViewStyle()
    plotter = pv.Plotter(title=style.window_title)
    plotter.set_background(style.background)
    add_point_cloud(plotter, points, color, style)
    if style.show_axes:
        plotter.add_axes()
    plotter.reset_camera()

    logger.info("Displaying geometry...")
    logger.info("Press 'Q' in the window to exit.")
    plotter.show()
    logger.info("Visualization window closed.")
