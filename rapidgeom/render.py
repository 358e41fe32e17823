"""
Render 2D geometry to a PNG image with matplotlib.

Meant for debugging and documentation figures; the geometry types themselves
never depend on this module.
"""

import logging
from typing import Any, Iterable, List, Optional, Tuple

import numpy as np

from .axis import Axis2d
from .circle import Circle2d
from .frame import Frame2d
from .point import Point2d

logger = logging.getLogger(__name__)


def render_2d(
    entities: Iterable[object],
    file_name: Optional[str] = None,
    width: int = 800,
    height: int = 600,
    margin: float = 0.1,
    axis_length: float = 1.0,
) -> None:
    """
    Render 2D points, axes, circles and frames.

    Axes are drawn as arrows of ``axis_length`` from their origin; frames as a
    red X arrow and a green Y arrow.

    Args:
        entities: Geometry to draw; unsupported types are skipped with a warning
        file_name: Path to save the PNG file. If None, displays in a UI window instead.
        width: Image width in pixels (default: 800)
        height: Image height in pixels (default: 600)
        margin: Margin around the geometry as a fraction of size (default: 0.1)
        axis_length: Drawn length of axes and frame directions

    Raises:
        ValueError: If none of the entities can be drawn
        ImportError: If matplotlib is not installed
    """
    try:
        import matplotlib.pyplot as plt
        from matplotlib.patches import Circle as MplCircle
    except ImportError:
        raise ImportError(
            "matplotlib is required for rendering. Install with: pip install matplotlib"
        )

    fig, ax = plt.subplots(figsize=(width / 100, height / 100), dpi=100)
    try:
        drawn = _draw_entities(ax, MplCircle, entities, axis_length, margin)
        if drawn == 0:
            raise ValueError("No drawable 2D geometry given")
        ax.grid(True, alpha=0.3)

        if file_name:
            fig.savefig(file_name, dpi=100, bbox_inches="tight")
            logger.info(f"Rendered {drawn} entities to {file_name}")
        else:
            plt.show()
    finally:
        plt.close(fig)


def _draw_entities(
    ax: Any,
    circle_patch: Any,
    entities: Iterable[object],
    axis_length: float,
    margin: float = 0.1,
) -> int:
    """Draw each supported entity on ``ax`` and fit the limits; returns the count drawn."""
    ax.set_aspect("equal")
    all_points: List[Tuple[float, float]] = []

    def draw_arrow(start: Point2d, dx: float, dy: float, color: str) -> None:
        ax.arrow(
            start.x,
            start.y,
            dx,
            dy,
            color=color,
            width=0.01 * axis_length,
            length_includes_head=True,
        )
        all_points.extend([(start.x, start.y), (start.x + dx, start.y + dy)])

    drawn = 0
    for entity in entities:
        if isinstance(entity, Point2d):
            ax.plot([entity.x], [entity.y], "ko")
            all_points.append((entity.x, entity.y))
        elif isinstance(entity, Circle2d):
            center = entity.center_point
            radius = entity.radius
            ax.add_patch(
                circle_patch(
                    (center.x, center.y),
                    radius,
                    fill=False,
                    edgecolor="black",
                    linewidth=2,
                )
            )
            all_points.extend(
                [
                    (center.x - radius, center.y - radius),
                    (center.x + radius, center.y + radius),
                ]
            )
        elif isinstance(entity, Axis2d):
            d = entity.direction
            draw_arrow(entity.origin_point, axis_length * d.x, axis_length * d.y, "blue")
        elif isinstance(entity, Frame2d):
            for direction, color in (
                (entity.x_direction, "red"),
                (entity.y_direction, "green"),
            ):
                draw_arrow(
                    entity.origin_point,
                    axis_length * direction.x,
                    axis_length * direction.y,
                    color,
                )
        else:
            logger.warning(f"Skipping unsupported entity type {type(entity).__name__}")
            continue
        drawn += 1

    if drawn == 0:
        return 0

    points = np.array(all_points)
    lower = points.min(axis=0)
    upper = points.max(axis=0)
    size = np.maximum(upper - lower, axis_length)
    pad = size * margin
    ax.set_xlim(lower[0] - pad[0], upper[0] + pad[0])
    ax.set_ylim(lower[1] - pad[1], upper[1] + pad[1])
    return drawn
