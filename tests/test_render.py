from __future__ import annotations

import pytest

import render
from cannonball.canvas import Canvas
from cannonball.ppm import Ppm
from cannonball.vector_math import Point, Vector


def test_default_config_matches_classic_cannon():
    config = render.RenderConfig()
    simulator = render.build_simulator(config)

    assert (config.width, config.height) == (900, 550)
    assert simulator.environment.gravity == Vector(0.0, -0.1, 0.0)
    assert simulator.environment.wind == Vector(-0.01, 0.0, 0.0)
    assert simulator.projectile.position == Point(0.0, 1.0, 0.0)
    assert simulator.projectile.velocity.magnitude() == pytest.approx(11.25)


def test_render_draws_the_arc():
    config = render.RenderConfig(width=90, height=55, speed=3.0)

    ppm = render.render(config)

    assert isinstance(ppm, Ppm)
    lines = ppm.lines()
    assert lines[:3] == ["P3", "90 55", "255"]
    assert "255 0 0" in str(ppm)
    assert str(ppm) != str(Canvas(90, 55).to_ppm())


def test_main_writes_output(tmp_path):
    output = tmp_path / "arc.ppm"

    code = render.main(["--width", "60", "--height", "40", "--speed", "2.5", "--output", str(output)])

    assert code == 0
    text = output.read_text(encoding="ascii")
    assert text.startswith("P3\n60 40\n255\n")
    assert text.endswith("\n")


def test_main_reports_projectile_that_never_lands(tmp_path):
    output = tmp_path / "never.ppm"

    code = render.main([
        "--gravity", "0", "0", "0",
        "--max-ticks", "10",
        "--output", str(output),
    ])

    assert code == 1
    assert not output.exists()


def test_main_reports_unwritable_output(tmp_path):
    output = tmp_path / "missing" / "arc.ppm"

    code = render.main(["--width", "20", "--height", "20", "--speed", "1", "--output", str(output)])

    assert code == 1


def test_rejects_empty_canvas():
    with pytest.raises(SystemExit):
        render.main(["--width", "0"])
