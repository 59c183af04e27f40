"""Configuration types for particle emitters: curves, shapes, atlases and settings."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from quadkit.geometry import WHITE, Color, Vec2, polar_to_cartesian


class Interpolation(Enum):
    """How the key points of a curve are joined."""

    LINEAR = "linear"
    BEZIER = "bezier"


@dataclass(frozen=True)
class BatchedCurve:
    """A curve sampled at evenly spaced steps, ready for fast lookups."""

    points: tuple[float, ...]

    def get(self, t: float) -> float:
        """Value of the curve at t in 0..1, interpolated between samples."""
        if not self.points:
            raise ValueError("cannot sample an empty curve")
        count = len(self.points)
        t_scaled = t * count
        previous_ix = min(max(int(t_scaled), 0), count - 1)
        next_ix = min(previous_ix + 1, count - 1)
        previous = self.points[previous_ix]
        following = self.points[next_ix]
        return previous + (following - previous) * (t_scaled - previous_ix)


@dataclass
class Curve:
    """A curve given by (x, y) key points with x running from 0 to 1."""

    points: list[tuple[float, float]] = field(default_factory=list)
    interpolation: Interpolation = Interpolation.LINEAR
    resolution: int = 20

    def batch(self) -> BatchedCurve:
        """Sample the curve every 1/resolution along x."""
        if self.interpolation is Interpolation.BEZIER:
            raise ValueError("bezier interpolation is not supported")
        if self.resolution <= 0:
            raise ValueError("resolution must be positive")

        step = 1.0 / self.resolution
        x = 0.0
        samples: list[float] = []
        for (start_x, start_y), (end_x, end_y) in zip(self.points, self.points[1:]):
            while x <= end_x:
                t = (x - start_x) / (end_x - start_x)
                samples.append(start_y + (end_y - start_y) * t)
                x += step
        return BatchedCurve(tuple(samples))


@dataclass(frozen=True)
class PointShape:
    """Particles start exactly at the emitter position."""

    def random_point(self, rng: random.Random) -> Vec2:
        return Vec2(0.0, 0.0)


@dataclass(frozen=True)
class RectShape:
    """Particles start anywhere inside a rectangle centred on the emitter."""

    width: float
    height: float

    def random_point(self, rng: random.Random) -> Vec2:
        return Vec2(
            rng.uniform(-self.width / 2.0, self.width / 2.0),
            rng.uniform(-self.height / 2.0, self.height / 2.0),
        )


@dataclass(frozen=True)
class SphereShape:
    """Particles start uniformly inside a disc centred on the emitter."""

    radius: float

    def random_point(self, rng: random.Random) -> Vec2:
        rho = math.sqrt(rng.uniform(0.0, self.radius * self.radius))
        phi = rng.uniform(0.0, math.pi * 2.0)
        return polar_to_cartesian(rho, phi)


EmissionShape = Union[PointShape, RectShape, SphereShape]


@dataclass(frozen=True)
class ColorCurve:
    """Colours a particle takes at the start, middle and end of its life."""

    start: Color = WHITE
    mid: Color = WHITE
    end: Color = WHITE


# Each vertex is laid out as: x, y, z, u, v, r, g, b, a.
VERTEX_STRIDE = 9


@dataclass(frozen=True)
class RectangleParticle:
    """A quad stretched horizontally by the aspect ratio."""

    aspect_ratio: float = 1.0

    def mesh(self) -> tuple[list[float], list[int]]:
        """Interleaved vertices and triangle indices of the particle geometry."""
        a = self.aspect_ratio
        vertices = [
            -1.0 * a, -1.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0,
            1.0 * a, -1.0, 0.0, 1.0, 0.0, 1.0, 1.0, 1.0, 1.0,
            1.0 * a, 1.0, 0.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
            -1.0 * a, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0, 1.0,
        ]
        return vertices, [0, 1, 2, 0, 2, 3]


@dataclass(frozen=True)
class CircleParticle:
    """A triangle fan approximating a unit circle."""

    subdivisions: int

    def mesh(self) -> tuple[list[float], list[int]]:
        """Interleaved vertices and triangle indices of the particle geometry."""
        if self.subdivisions < 1:
            raise ValueError("a circle needs at least one subdivision")
        vertices = [0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0]
        indices: list[int] = []
        for i in range(self.subdivisions + 1):
            angle = i / self.subdivisions * math.pi * 2.0
            rx, ry = math.cos(angle), math.sin(angle)
            vertices.extend([rx, ry, 0.0, rx, ry, 1.0, 1.0, 1.0, 1.0])
            if i != self.subdivisions:
                indices.extend([0, i + 1, i + 2])
        return vertices, indices


@dataclass(frozen=True)
class CustomMeshParticle:
    """User supplied geometry in the standard vertex layout."""

    vertices: tuple[float, ...]
    indices: tuple[int, ...]

    def mesh(self) -> tuple[list[float], list[int]]:
        """Interleaved vertices and triangle indices of the particle geometry."""
        return list(self.vertices), list(self.indices)


ParticleShape = Union[RectangleParticle, CircleParticle, CustomMeshParticle]


class BlendMode(Enum):
    """How overlapping particles are combined."""

    ALPHA = "alpha"
    ADDITIVE = "additive"

    @property
    def blend_factors(self) -> tuple[str, str]:
        """Source and destination factors of the colour blend equation."""
        if self is BlendMode.ALPHA:
            return ("source_alpha", "one_minus_source_alpha")
        return ("source_alpha", "one")


@dataclass(frozen=True)
class AtlasConfig:
    """Sprite sheet of n columns and m rows; frames start_index..end_index animate."""

    n: int
    m: int
    start_index: int = 0
    end_index: Optional[int] = None

    def __post_init__(self) -> None:
        if self.end_index is None:
            object.__setattr__(self, "end_index", self.n * self.m)


@dataclass(frozen=True)
class ParticleMaterial:
    """Custom vertex and fragment shader source used to shade particles."""

    vertex: str
    fragment: str


@dataclass
class EmitterConfig:
    """Everything that controls how an emitter spawns, moves and shows particles."""

    local_coords: bool = False
    emission_shape: EmissionShape = field(default_factory=PointShape)
    one_shot: bool = False
    lifetime: float = 1.0
    lifetime_randomness: float = 0.0
    explosiveness: float = 0.0
    amount: int = 8
    shape: ParticleShape = field(default_factory=lambda: RectangleParticle(1.0))
    emitting: bool = True
    initial_direction: Vec2 = field(default_factory=lambda: Vec2(0.0, -1.0))
    initial_direction_spread: float = 0.0
    initial_velocity: float = 50.0
    initial_velocity_randomness: float = 0.0
    linear_accel: float = 0.0
    initial_rotation: float = 0.0
    initial_rotation_randomness: float = 0.0
    initial_angular_velocity: float = 0.0
    initial_angular_velocity_randomness: float = 0.0
    angular_accel: float = 0.0
    angular_damping: float = 0.0
    size: float = 10.0
    size_randomness: float = 0.0
    size_curve: Optional[Curve] = None
    blend_mode: BlendMode = BlendMode.ALPHA
    colors_curve: ColorCurve = field(default_factory=ColorCurve)
    gravity: Vec2 = field(default_factory=lambda: Vec2(0.0, 0.0))
    texture: Optional[object] = None
    atlas: Optional[AtlasConfig] = None
    material: Optional[ParticleMaterial] = None
    post_processing: bool = False