"""Drawing a simulated flight onto a canvas."""
from __future__ import annotations

import logging
import math

from .canvas import Canvas
from .color import Color
from .simulation import Simulator

logger = logging.getLogger(__name__)


class TrajectoryError(RuntimeError):
    """Raised when a projectile fails to land within the allowed ticks."""


def to_canvas_coordinates(x: float, y: float, canvas_height: int) -> tuple[int, int]:
    """Truncate a world position to a pixel, flipping y so the origin is top-left."""
    return math.trunc(x), canvas_height - math.trunc(y)


def trace_trajectory(
    simulator: Simulator,
    canvas: Canvas,
    marker: Color,
    max_ticks: int = 100_000,
) -> int:
    """Tick until the projectile lands, marking each position on ``canvas``.

    Positions that fall off the canvas are skipped. Returns the number of ticks
    taken to land.
    """
    ticks = 0
    plotted = 0
    while True:
        if ticks >= max_ticks:
            raise TrajectoryError(f"Projectile still airborne after {max_ticks} ticks")
        projectile = simulator.tick()
        ticks += 1
        position = projectile.position
        x, y = to_canvas_coordinates(position.x, position.y, canvas.height)
        if canvas.write_pixel(x, y, marker):
            plotted += 1
        if simulator.has_landed:
            break
    logger.info("Projectile landed after %d ticks (%d pixels plotted)", ticks, plotted)
    return ticks
