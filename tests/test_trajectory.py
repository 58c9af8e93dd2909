from __future__ import annotations

import logging

import pytest

from cannonball.canvas import Canvas
from cannonball.color import Color
from cannonball.simulation import Environment, Projectile, Simulator
from cannonball.trajectory import TrajectoryError, to_canvas_coordinates, trace_trajectory
from cannonball.vector_math import Point, Vector

MARKER = Color(1.0, 0.0, 0.0)
BLANK = Color(0.0, 0.0, 0.0)


def lob(vx: float, vy: float, gravity: float = -1.0) -> Simulator:
    environment = Environment(gravity=Vector(0.0, gravity, 0.0), wind=Vector(0.0, 0.0, 0.0))
    return Simulator(environment, Projectile(Point(0.0, 1.0, 0.0), Vector(vx, vy, 0.0)))


def test_canvas_coordinates_flip_and_truncate():
    assert to_canvas_coordinates(3.9, 2.7, canvas_height=10) == (3, 8)
    assert to_canvas_coordinates(-0.5, 0.5, canvas_height=10) == (0, 10)


def test_trace_marks_each_airborne_position():
    canvas = Canvas(20, 10)
    simulator = lob(vx=2.0, vy=3.0)

    ticks = trace_trajectory(simulator, canvas, MARKER)

    # positions: (2, 4), (4, 6), (6, 7), (8, 7), (10, 6), (12, 4), (14, 1), (16, -3)
    assert ticks == 8
    for x, y in [(2, 4), (4, 6), (6, 7), (8, 7), (10, 6), (12, 4), (14, 1)]:
        assert canvas.pixel_at(x, 10 - y) == MARKER
    marked = [pixel for pixel in canvas if pixel == MARKER]
    assert len(marked) == 7


def test_positions_off_canvas_are_skipped():
    canvas = Canvas(4, 4)

    trace_trajectory(lob(vx=2.0, vy=3.0), canvas, MARKER)

    assert canvas.pixel_at(2, 0) == MARKER
    assert canvas.pixel_at(0, 0) == BLANK


def test_trace_stops_on_landing():
    simulator = lob(vx=1.0, vy=0.0)

    trace_trajectory(simulator, Canvas(5, 5), MARKER)

    assert simulator.has_landed
    assert simulator.ticks == 2


def test_projectile_that_never_lands():
    simulator = lob(vx=1.0, vy=1.0, gravity=0.0)

    with pytest.raises(TrajectoryError):
        trace_trajectory(simulator, Canvas(5, 5), MARKER, max_ticks=50)
    assert simulator.ticks == 50


def test_landing_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="cannonball"):
        trace_trajectory(lob(vx=2.0, vy=3.0), Canvas(20, 10), MARKER)

    assert "landed after 8 ticks" in caplog.text
