"""Asteroids: a wrapping ship shoots rocks that split into smaller ones."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, replace
from typing import Optional

from .geometry import Vec2

SHIP_HEIGHT = 25.0
SHIP_BASE = 22.0
MAX_SPEED = 5.0
SHOT_COOLDOWN = 0.5
BULLET_LIFETIME = 1.5
BULLET_SPEED = 7.0
STEER_STEP = 5.0
ASTEROID_COUNT = 10


@dataclass
class Ship:
    """The player's ship; ``rot`` is in degrees, zero pointing up."""

    pos: Vec2
    rot: float = 0.0
    vel: Vec2 = Vec2(0.0, 0.0)


@dataclass
class Bullet:
    """A shot fired at time ``shot_at``."""

    pos: Vec2
    vel: Vec2
    shot_at: float
    collided: bool = False


@dataclass
class Asteroid:
    """A polygonal rock; fewer sides means smaller pieces on impact."""

    pos: Vec2
    vel: Vec2
    rot: float
    rot_speed: float
    size: float
    sides: int
    collided: bool = False


def wrap_around(v: Vec2, width: float, height: float) -> Vec2:
    """Move a point that left the screen to the opposite edge."""
    x, y = v.x, v.y
    if x > width:
        x = 0.0
    if x < 0.0:
        x = width
    if y > height:
        y = 0.0
    if y < 0.0:
        y = height
    return Vec2(x, y)


class AsteroidsGame:
    """Game state advanced one frame at a time by :meth:`update`."""

    def __init__(
        self, width: float, height: float, rng: Optional[random.Random] = None
    ) -> None:
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.last_shot = -math.inf
        self.reset()

    @property
    def center(self) -> Vec2:
        return Vec2(self.width / 2.0, self.height / 2.0)

    @property
    def won(self) -> bool:
        """True when the game ended with every asteroid destroyed."""
        return self.game_over and not self.asteroids

    def _random_direction(self) -> Vec2:
        while True:
            direction = Vec2(self.rng.uniform(-1.0, 1.0), self.rng.uniform(-1.0, 1.0))
            if direction.length() > 0.0:
                return direction.normalize()

    def reset(self) -> None:
        """Start a new round with a fresh ship and a ring of asteroids."""
        self.ship = Ship(pos=self.center)
        self.bullets: list[Bullet] = []
        self.game_over = False
        radius = min(self.width, self.height)
        self.asteroids: list[Asteroid] = [
            Asteroid(
                pos=self.center + self._random_direction() * radius / 2.0,
                vel=Vec2(self.rng.uniform(-1.0, 1.0), self.rng.uniform(-1.0, 1.0)),
                rot=0.0,
                rot_speed=self.rng.uniform(-2.0, 2.0),
                size=radius / 10.0,
                sides=self.rng.randrange(3, 8),
            )
            for _ in range(ASTEROID_COUNT)
        ]

    def _fragment(self, asteroid: Asteroid, direction: Vec2) -> Asteroid:
        return Asteroid(
            pos=asteroid.pos,
            vel=direction.normalize() * self.rng.uniform(1.0, 3.0),
            rot=self.rng.uniform(0.0, 360.0),
            rot_speed=self.rng.uniform(-2.0, 2.0),
            size=asteroid.size * 0.8,
            sides=asteroid.sides - 1,
        )

    def update(
        self, now: float, thrust: bool = False, fire: bool = False, steer: int = 0
    ) -> bool:
        """Advance one frame at time ``now``; ``steer`` is -1 left, 1 right, 0 none.

        Returns False once the game is over.
        """
        if self.game_over:
            return False

        ship = self.ship
        rotation = math.radians(ship.rot)
        heading = Vec2(math.sin(rotation), -math.cos(rotation))

        acc = -ship.vel / 100.0
        if thrust:
            acc = heading / 3.0

        if fire and now - self.last_shot > SHOT_COOLDOWN:
            self.bullets.append(
                Bullet(
                    pos=ship.pos + heading * SHIP_HEIGHT / 2.0,
                    vel=heading * BULLET_SPEED,
                    shot_at=now,
                )
            )
            self.last_shot = now

        if steer > 0:
            ship.rot += STEER_STEP
        elif steer < 0:
            ship.rot -= STEER_STEP

        ship.vel = ship.vel + acc
        if ship.vel.length() > MAX_SPEED:
            ship.vel = ship.vel.normalize() * MAX_SPEED
        ship.pos = wrap_around(ship.pos + ship.vel, self.width, self.height)

        for bullet in self.bullets:
            bullet.pos = bullet.pos + bullet.vel

        for asteroid in self.asteroids:
            asteroid.pos = wrap_around(asteroid.pos + asteroid.vel, self.width, self.height)
            asteroid.rot += asteroid.rot_speed

        self.bullets = [b for b in self.bullets if b.shot_at + BULLET_LIFETIME > now]

        fragments: list[Asteroid] = []
        for asteroid in self.asteroids:
            if (asteroid.pos - ship.pos).length() < asteroid.size + SHIP_HEIGHT / 3.0:
                self.game_over = True
                break
            for bullet in self.bullets:
                if (asteroid.pos - bullet.pos).length() < asteroid.size:
                    asteroid.collided = True
                    bullet.collided = True
                    if asteroid.sides > 3:
                        fragments.append(
                            self._fragment(asteroid, Vec2(bullet.vel.y, -bullet.vel.x))
                        )
                        fragments.append(
                            self._fragment(asteroid, Vec2(-bullet.vel.y, bullet.vel.x))
                        )
                    break

        self.bullets = [
            b for b in self.bullets if b.shot_at + BULLET_LIFETIME > now and not b.collided
        ]
        self.asteroids = [a for a in self.asteroids if not a.collided] + fragments

        if not self.asteroids:
            self.game_over = True
        return not self.game_over

    def snapshot(self) -> Ship:
        """A copy of the ship's current state."""
        return replace(self.ship)