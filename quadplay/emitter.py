"""Particle emitters: spawning, ageing and recycling particles."""

from __future__ import annotations

import dataclasses
import random
from dataclasses import dataclass
from typing import Optional

from .geometry import Vec2
from .particle_config import BatchedCurve, Color, EmitterConfig


@dataclass
class Particle:
    """State of one live particle."""

    position: Vec2
    rotation: float
    size: float
    color: Color
    velocity: Vec2
    angular_velocity: float
    lifetime: float
    initial_size: float
    spawn_index: int
    life: float = 0.0
    lived: float = 0.0
    frame: int = 0
    uv: tuple[float, float, float, float] = (1.0, 1.0, 0.0, 0.0)


class Emitter:
    """Emits particles according to an :class:`EmitterConfig` and ages them."""

    def __init__(self, config: EmitterConfig, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.particles: list[Particle] = []
        self.position = Vec2(0.0, 0.0)
        self.particles_spawned = 0
        self.last_emit_time = 0.0
        self.time_passed = 0.0
        self.batched_size_curve: Optional[BatchedCurve] = None
        self.rebuild_size_curve()

    def reset(self) -> None:
        """Drop all particles and restart the emission cycle."""
        self.particles.clear()
        self.last_emit_time = 0.0
        self.time_passed = 0.0
        self.particles_spawned = 0

    def rebuild_size_curve(self) -> None:
        """Resample the size curve after ``config.size_curve`` changed."""
        curve = self.config.size_curve
        self.batched_size_curve = curve.batch() if curve is not None else None

    def _randomized(self, value: float, randomness: float) -> float:
        return value - value * self.rng.uniform(0.0, randomness)

    def _emit_particle(self, offset: Vec2) -> None:
        config = self.config
        offset = offset + config.emission_shape.random_point(self.rng)

        size = self._randomized(config.size, config.size_randomness)
        rotation = self._randomized(config.initial_rotation, config.initial_rotation_randomness)
        position = offset if config.local_coords else self.position + offset

        speed = self._randomized(config.initial_velocity, config.initial_velocity_randomness)
        spread = config.initial_direction_spread
        angle = self.rng.uniform(-spread / 2.0, spread / 2.0)
        velocity = config.initial_direction.rotated(angle) * speed

        angular_velocity = self._randomized(
            config.initial_angular_velocity, config.initial_angular_velocity_randomness
        )
        lifetime = self._randomized(config.lifetime, config.lifetime_randomness)

        self.particles.append(
            Particle(
                position=position,
                rotation=rotation,
                size=size,
                color=config.colors_curve.start,
                velocity=velocity,
                angular_velocity=angular_velocity,
                lifetime=lifetime,
                initial_size=size,
                spawn_index=self.particles_spawned,
            )
        )
        self.particles_spawned += 1

    def emit(self, pos: Vec2, n: int) -> None:
        """Emit ``n`` particles at once, ignoring ``emitting`` and ``amount``."""
        for _ in range(n):
            self._emit_particle(pos)
            self.particles_spawned += 1

    def _spawn_amount(self) -> int:
        config = self.config
        if config.amount <= 0:
            return 0
        gap = (config.lifetime / config.amount) * (1.0 - config.explosiveness)
        if gap < 0.001:
            return config.amount
        return int((self.time_passed - self.last_emit_time) / gap)

    def _age(self, particle: Particle, dt: float) -> None:
        config = self.config
        particle.velocity = particle.velocity + particle.velocity * (config.linear_accel * dt)
        particle.angular_velocity += particle.angular_velocity * config.angular_accel * dt
        particle.angular_velocity *= 1.0 - config.angular_damping

        fraction = particle.lived / particle.lifetime if particle.lifetime != 0.0 else 1.0
        particle.color = config.colors_curve.at(fraction)
        particle.position = particle.position + particle.velocity * dt
        particle.rotation += particle.angular_velocity * dt

        scale = self.batched_size_curve.get(fraction) if self.batched_size_curve else 1.0
        particle.size = particle.initial_size * scale

        if particle.lifetime != 0.0:
            particle.life = fraction

        particle.lived += dt
        particle.velocity = particle.velocity + config.gravity * dt

        atlas = config.atlas
        if atlas is not None:
            if particle.lifetime != 0.0:
                progress = particle.lived / particle.lifetime
                particle.frame = (
                    max(int(progress * (atlas.end_index - atlas.start_index)), 0)
                    + atlas.start_index
                )
            particle.uv = atlas.frame_uv(particle.frame)
        else:
            particle.uv = (0.0, 0.0, 1.0, 1.0)

    def update(self, dt: float) -> None:
        """Advance the emitter by ``dt`` seconds."""
        config = self.config
        if config.emitting:
            self.time_passed += dt
            for _ in range(self._spawn_amount()):
                self.last_emit_time = self.time_passed
                if self.particles_spawned < config.amount:
                    self._emit_particle(Vec2(0.0, 0.0))
                if len(self.particles) >= config.amount:
                    break

        if config.one_shot and self.time_passed > config.lifetime:
            self.time_passed = 0.0
            self.last_emit_time = 0.0
            config.emitting = False

        for particle in self.particles:
            self._age(particle, dt)

        survivors = []
        for particle in self.particles:
            if particle.lived >= particle.lifetime or particle.lived > config.lifetime:
                if particle.lived != particle.lifetime:
                    self.particles_spawned -= 1
            else:
                survivors.append(particle)
        self.particles = survivors

    def step(self, pos: Vec2, dt: float) -> None:
        """Place the emitter at ``pos`` and advance it by ``dt`` seconds."""
        self.position = pos
        self.update(dt)


class EmittersCache:
    """Many short-lived emitters sharing one configuration, recycled when done."""

    CACHE_DEFAULT_SIZE = 10

    def __init__(self, config: EmitterConfig, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self._cache: list[Emitter] = [
            Emitter(dataclasses.replace(config, emitting=False), self.rng)
            for _ in range(self.CACHE_DEFAULT_SIZE)
        ]
        self._active: list[tuple[Emitter, Vec2]] = []

    @property
    def active(self) -> list[Emitter]:
        """Emitters currently running."""
        return [emitter for emitter, _ in self._active]

    @property
    def cached_count(self) -> int:
        """Number of idle emitters ready for reuse."""
        return len(self._cache)

    def spawn(self, pos: Vec2) -> Emitter:
        """Start an emitter at ``pos``, reusing an idle one when possible."""
        if self._cache:
            emitter = self._cache.pop()
        else:
            emitter = Emitter(dataclasses.replace(self.config), self.rng)
        emitter.config.emitting = True
        emitter.reset()
        self._active.append((emitter, pos))
        return emitter

    def update(self, dt: float) -> None:
        """Advance every active emitter; finished ones return to the cache."""
        still_active = []
        for emitter, pos in self._active:
            emitter.position = pos
            emitter.update(dt)
            if emitter.config.emitting:
                still_active.append((emitter, pos))
            else:
                self._cache.append(emitter)
        self._active = still_active