from __future__ import annotations

from dataclasses import dataclass

from .vector_math import Point, Vector, accumulate, add


@dataclass(frozen=True, slots=True)
class Environment:
    gravity: Vector
    wind: Vector

    def __post_init__(self) -> None:
        # own copies, so later accumulation by a caller cannot reach in here
        object.__setattr__(self, "gravity", self.gravity.copy())
        object.__setattr__(self, "wind", self.wind.copy())

    @property
    def acceleration(self) -> Vector:
        """Velocity change applied on every tick."""
        return add(self.gravity, self.wind)


@dataclass(slots=True)
class Projectile:
    position: Point
    velocity: Vector

    def __post_init__(self) -> None:
        # ticking mutates these in place; never share the caller's objects
        self.position = self.position.copy()
        self.velocity = self.velocity.copy()

    @property
    def altitude(self) -> float:
        return self.position.y

    def snapshot(self) -> Projectile:
        return Projectile(position=self.position, velocity=self.velocity)


class Simulator:
    """Advances a projectile through a constant environment, one tick at a time.

    The simulator has no notion of the ground: it keeps ticking for as long as
    it is asked to, and deciding when the projectile has landed is left to the
    caller.
    """

    def __init__(self, environment: Environment, projectile: Projectile) -> None:
        self.environment = environment
        self.projectile = projectile
        self.ticks = 0

    @property
    def has_landed(self) -> bool:
        return self.projectile.altitude <= 0

    def tick(self) -> Projectile:
        """Move by the current velocity, then apply gravity and wind."""
        accumulate(self.projectile.position, self.projectile.velocity)
        accumulate(self.projectile.velocity, self.environment.acceleration)
        self.ticks += 1
        return self.projectile
