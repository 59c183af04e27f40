"""Particle emitters: spawning, simulating and retiring particles over time."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, replace
from typing import Optional

from quadkit.geometry import Color, Vec2
from quadkit.particle_config import BatchedCurve, BlendMode, EmitterConfig


def _lerp_color(a: Color, b: Color, t: float) -> Color:
    return Color(
        a.r * (1.0 - t) + b.r * t,
        a.g * (1.0 - t) + b.g * t,
        a.b * (1.0 - t) + b.b * t,
        a.a * (1.0 - t) + b.a * t,
    )


@dataclass
class Particle:
    """State of one live particle: what is drawn and how it moves."""

    pos: Vec2
    rotation: float
    size: float
    color: Color
    spawn_index: int
    velocity: Vec2
    angular_velocity: float
    lifetime: float
    initial_size: float
    uv: tuple[float, float, float, float] = (1.0, 1.0, 0.0, 0.0)
    progress: float = 0.0
    lived: float = 0.0
    frame: int = 0


def _random_initial_vector(
    rng: random.Random, direction: Vec2, spread: float, velocity: float
) -> Vec2:
    angle = rng.uniform(-spread / 2.0, spread / 2.0)
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    rotated = Vec2(
        direction.x * cos_a - direction.y * sin_a,
        direction.x * sin_a + direction.y * cos_a,
    )
    return rotated * velocity


def _randomized(rng: random.Random, value: float, randomness: float) -> float:
    return value - value * rng.uniform(0.0, randomness)


class Emitter:
    """Spawns particles according to its config and advances them each frame."""

    MAX_PARTICLES = 10000

    def __init__(self, config: EmitterConfig, rng: Optional[random.Random] = None) -> None:
        self.config = config
        self._rng = rng if rng is not None else random.Random()
        self.particles: list[Particle] = []
        self.position = Vec2(0.0, 0.0)
        self._last_emit_time = 0.0
        self._time_passed = 0.0
        self._particles_spawned = 0
        self._batched_size_curve: Optional[BatchedCurve] = None
        self.rebuild_size_curve()
        self._mesh = config.shape.mesh()
        self._mesh_dirty = False
        self._blend_mode: BlendMode = config.blend_mode

    @property
    def mesh(self) -> tuple[list[float], list[int]]:
        """Geometry currently used for every particle."""
        return self._mesh

    @property
    def blend_mode(self) -> BlendMode:
        """Blend mode the emitter currently renders with."""
        return self._blend_mode

    @property
    def mesh_dirty(self) -> bool:
        return self._mesh_dirty

    def reset(self) -> None:
        """Drop every particle and restart the emission cycle."""
        self.particles.clear()
        self._last_emit_time = 0.0
        self._time_passed = 0.0
        self._particles_spawned = 0

    def rebuild_size_curve(self) -> None:
        """Resample the size curve after the config changed."""
        curve = self.config.size_curve
        self._batched_size_curve = curve.batch() if curve is not None else None

    def update_particle_mesh(self) -> None:
        """Rebuild the particle geometry from the config on the next update."""
        self._mesh_dirty = True

    def _emit_particle(self, offset: Vec2) -> None:
        if len(self.particles) >= self.MAX_PARTICLES:
            raise OverflowError(f"an emitter holds at most {self.MAX_PARTICLES} particles")
        config = self.config
        rng = self._rng
        offset = offset + config.emission_shape.random_point(rng)

        size = _randomized(rng, config.size, config.size_randomness)
        rotation = _randomized(rng, config.initial_rotation, config.initial_rotation_randomness)
        pos = offset if config.local_coords else self.position + offset

        velocity = _random_initial_vector(
            rng,
            config.initial_direction,
            config.initial_direction_spread,
            _randomized(rng, config.initial_velocity, config.initial_velocity_randomness),
        )
        angular_velocity = _randomized(
            rng, config.initial_angular_velocity, config.initial_angular_velocity_randomness
        )
        lifetime = _randomized(rng, config.lifetime, config.lifetime_randomness)

        self.particles.append(
            Particle(
                pos=pos,
                rotation=rotation,
                size=size,
                color=config.colors_curve.start,
                spawn_index=self._particles_spawned,
                velocity=velocity,
                angular_velocity=angular_velocity,
                lifetime=lifetime,
                initial_size=size,
            )
        )
        self._particles_spawned += 1

    def emit(self, pos: Vec2, n: int) -> None:
        """Emit n particles at once, ignoring the emitting flag and amount."""
        for _ in range(n):
            self._emit_particle(pos)
            self._particles_spawned += 1

    def _spawn_amount(self) -> int:
        config = self.config
        if config.amount <= 0:
            return 0
        gap = (config.lifetime / config.amount) * (1.0 - config.explosiveness)
        if gap < 0.001:
            return config.amount
        return int((self._time_passed - self._last_emit_time) / gap)

    def update(self, dt: float) -> None:
        """Advance the simulation by dt seconds."""
        config = self.config
        if self._mesh_dirty:
            self._mesh = config.shape.mesh()
            self._mesh_dirty = False

        if config.emitting:
            self._time_passed += dt
            for _ in range(self._spawn_amount()):
                self._last_emit_time = self._time_passed
                if self._particles_spawned < config.amount:
                    self._emit_particle(Vec2(0.0, 0.0))
                if len(self.particles) >= config.amount:
                    break

        if config.one_shot and self._time_passed > config.lifetime:
            self._time_passed = 0.0
            self._last_emit_time = 0.0
            config.emitting = False

        curve = self._batched_size_curve
        colors = config.colors_curve
        for particle in self.particles:
            particle.velocity = particle.velocity + particle.velocity * (config.linear_accel * dt)
            particle.angular_velocity += particle.angular_velocity * config.angular_accel * dt
            particle.angular_velocity *= 1.0 - config.angular_damping

            t = particle.lived / particle.lifetime if particle.lifetime != 0.0 else 0.0
            if t < 0.5:
                particle.color = _lerp_color(colors.start, colors.mid, t * 2.0)
            else:
                particle.color = _lerp_color(colors.mid, colors.end, (t - 0.5) * 2.0)

            particle.pos = particle.pos + particle.velocity * dt
            particle.rotation += particle.angular_velocity * dt
            particle.size = particle.initial_size * (curve.get(t) if curve is not None else 1.0)

            if particle.lifetime != 0.0:
                particle.progress = particle.lived / particle.lifetime

            particle.lived += dt
            particle.velocity = particle.velocity + config.gravity * dt

            atlas = config.atlas
            if atlas is not None:
                if particle.lifetime != 0.0:
                    span = atlas.end_index - atlas.start_index
                    particle.frame = (
                        int(particle.lived / particle.lifetime * span) + atlas.start_index
                    )
                x = particle.frame % atlas.n
                y = particle.frame // atlas.n
                particle.uv = (x / atlas.n, y / atlas.m, 1.0 / atlas.n, 1.0 / atlas.m)
            else:
                particle.uv = (0.0, 0.0, 1.0, 1.0)

        survivors: list[Particle] = []
        for particle in self.particles:
            expired = (
                particle.lived >= particle.lifetime or particle.lived > config.lifetime
            )
            if expired:
                if particle.lived != particle.lifetime:
                    self._particles_spawned -= 1
            else:
                survivors.append(particle)
        self.particles = survivors

    def _sync_blend_mode(self) -> None:
        if self.config.blend_mode != self._blend_mode:
            self._blend_mode = self.config.blend_mode

    def draw(self, pos: Vec2, dt: float) -> tuple[Particle, ...]:
        """Place the emitter at pos, advance by dt and return the particles to render."""
        self.position = pos
        self._sync_blend_mode()
        self.update(dt)
        return tuple(self.particles)


class EmittersCache:
    """Many short-lived emitters sharing one config, recycled through a pool."""

    CACHE_DEFAULT_SIZE = 10

    def __init__(self, config: EmitterConfig, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._config = config
        self._cache: list[Emitter] = [
            Emitter(replace(config, emitting=False), self._rng)
            for _ in range(self.CACHE_DEFAULT_SIZE)
        ]
        self._emitter = Emitter(replace(config), self._rng)
        self._active: list[tuple[Emitter, Vec2]] = []

    @property
    def active_count(self) -> int:
        return len(self._active)

    @property
    def cached_count(self) -> int:
        return len(self._cache)

    def spawn(self, pos: Vec2) -> None:
        """Start a fresh emission cycle at pos."""
        if self._cache:
            emitter = self._cache.pop()
        else:
            emitter = Emitter(replace(self._config), self._rng)
        emitter.update_particle_mesh()
        emitter.config.emitting = True
        emitter.reset()
        self._active.append((emitter, pos))

    def draw(self, dt: float) -> list[tuple[Vec2, tuple[Particle, ...]]]:
        """Advance every active emitter; finished ones go back to the pool."""
        if self._active:
            self._emitter._sync_blend_mode()
        drawn: list[tuple[Vec2, tuple[Particle, ...]]] = []
        still_active: list[tuple[Emitter, Vec2]] = []
        for emitter, pos in self._active:
            emitter.position = pos
            emitter.update(dt)
            drawn.append((pos, tuple(emitter.particles)))
            if emitter.config.emitting:
                still_active.append((emitter, pos))
            else:
                self._cache.append(emitter)
        self._active = still_active
        return drawn