from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from cannonball.canvas import Canvas
from cannonball.color import Color, red
from cannonball.logging_config import setup_logging
from cannonball.ppm import Ppm
from cannonball.simulation import Environment, Projectile, Simulator
from cannonball.trajectory import TrajectoryError, trace_trajectory
from cannonball.vector_math import normalize, to_point, to_vector

logger = logging.getLogger("cannonball.render")

Triplet = tuple[float, float, float]


@dataclass(slots=True)
class RenderConfig:
    width: int = 900
    height: int = 550
    gravity: Triplet = (0.0, -0.1, 0.0)
    wind: Triplet = (-0.01, 0.0, 0.0)
    start: Triplet = (0.0, 1.0, 0.0)
    direction: Triplet = (1.0, 1.8, 0.0)
    speed: float = 11.25
    max_ticks: int = 100_000
    output: str = "trajectory.ppm"
    marker: Color = field(default_factory=red)


def build_simulator(config: RenderConfig) -> Simulator:
    environment = Environment(
        gravity=to_vector(config.gravity),
        wind=to_vector(config.wind),
    )
    projectile = Projectile(
        position=to_point(config.start),
        velocity=normalize(to_vector(config.direction)) * config.speed,
    )
    return Simulator(environment, projectile)


def render(config: RenderConfig) -> Ppm:
    canvas = Canvas(config.width, config.height)
    simulator = build_simulator(config)
    trace_trajectory(simulator, canvas, config.marker, max_ticks=config.max_ticks)
    return canvas.to_ppm()


def build_parser() -> argparse.ArgumentParser:
    defaults = RenderConfig()
    parser = argparse.ArgumentParser(description="Fire a cannonball and save its trajectory as a P3 PPM image.")
    parser.add_argument("--width", type=int, default=defaults.width, help="Canvas width in pixels")
    parser.add_argument("--height", type=int, default=defaults.height, help="Canvas height in pixels")
    parser.add_argument("--gravity", nargs=3, type=float, default=defaults.gravity, metavar=("X", "Y", "Z"))
    parser.add_argument("--wind", nargs=3, type=float, default=defaults.wind, metavar=("X", "Y", "Z"))
    parser.add_argument("--start", nargs=3, type=float, default=defaults.start, metavar=("X", "Y", "Z"),
                        help="Launch position")
    parser.add_argument("--direction", nargs=3, type=float, default=defaults.direction, metavar=("X", "Y", "Z"),
                        help="Launch direction, normalized before scaling by --speed")
    parser.add_argument("--speed", type=float, default=defaults.speed, help="Launch speed per tick")
    parser.add_argument("--max-ticks", type=int, default=defaults.max_ticks,
                        help="Give up if the projectile has not landed after this many ticks")
    parser.add_argument("--output", "-o", default=defaults.output, help="Output PPM file path")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None, help="Also write logs to this file")
    return parser


def config_from_args(args: argparse.Namespace) -> RenderConfig:
    if args.width < 1 or args.height < 1:
        raise ValueError("Canvas width and height must be positive")
    if args.max_ticks < 1:
        raise ValueError("--max-ticks must be positive")
    return RenderConfig(
        width=args.width,
        height=args.height,
        gravity=tuple(args.gravity),
        wind=tuple(args.wind),
        start=tuple(args.start),
        direction=tuple(args.direction),
        speed=args.speed,
        max_ticks=args.max_ticks,
        output=args.output,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    try:
        config = config_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    logger.info("Cannon ball initialization...")
    logger.debug("Render config: %s", config)
    try:
        ppm = render(config)
        ppm.write_to_file(config.output)
    except TrajectoryError as exc:
        logger.error("%s", exc)
        return 1
    except OSError as exc:
        logger.error("Could not write %s: %s", config.output, exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
