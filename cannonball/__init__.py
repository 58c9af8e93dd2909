"""Render a simulated cannonball trajectory to a plain-text PPM image."""

from .canvas import Canvas, PixelOutOfBoundsError
from .color import Color
from .matrix import Matrix
from .ppm import Ppm
from .simulation import Environment, Projectile, Simulator
from .trajectory import TrajectoryError, trace_trajectory
from .vector_math import Point, Vector

__all__ = [
    "Canvas",
    "Color",
    "Environment",
    "Matrix",
    "PixelOutOfBoundsError",
    "Point",
    "Ppm",
    "Projectile",
    "Simulator",
    "TrajectoryError",
    "Vector",
    "trace_trajectory",
]
