"""Falling leaves pushed around by gusts of wind."""
from __future__ import annotations

from dataclasses import dataclass, field
import math
import random
from typing import Any, List, Optional, Sequence, Tuple

from core.config import LeavesConfig
from physics.wind import WindEnvelope

LEAF_SIZE_CLASSES = 18
SPIN_SPEED = 20.0
EPSILON = 0.5  # Velocity changes by up to this much each tick
WOBBLE_DECAY = 0.99  # Wobble decays exponentially by this much each tick
WOBBLE_FACTOR = 4 * 0.005  # Wobble approaches the anchor by this much each tick
LEAF_SPACING = 10.0  # One leaf per this many units of virtual width
ANCHOR_JITTER = 16.0
BASE_FALL_SPEED = 6.32


def leaf_size_for(size_class: int) -> float:
    return float((size_class + 3) ** 4)


def fall_speed_for(size_class: int, rng: random.Random) -> float:
    # The halving truncates toward zero, so classes 1..3 share a base speed.
    size_bonus = int((2 - size_class) / 2)
    return BASE_FALL_SPEED * (1 + size_bonus + rng.uniform(0.0, 1.8))


@dataclass
class LeafParticle:
    position: List[float]
    anchor_x: float
    drift_speed: float
    wobble: float
    speed: float
    leaf_size: float
    angle: float
    spin_speed: float
    size_class: int
    texture: Any = None


@dataclass(frozen=True)
class LeafView:
    """What a renderer needs to draw one leaf."""

    position: Tuple[float, float]
    angle: float
    texture: Any


@dataclass
class LeavesParticleSystem:
    config: LeavesConfig
    viewport_size: Tuple[float, float]
    rng: random.Random
    textures: Optional[Sequence[Any]] = None
    wind: WindEnvelope = field(init=False)
    _particles: List[LeafParticle] = field(default_factory=list, init=False, repr=False)
    _enabled: bool = field(default=True, init=False)

    def __post_init__(self) -> None:
        width, height = self.viewport_size
        if width <= 0 or height <= 0:
            raise ValueError(f"Viewport size must be positive, got {self.viewport_size}")
        if self.textures is not None and len(self.textures) != LEAF_SIZE_CLASSES:
            raise ValueError(
                f"Expected {LEAF_SIZE_CLASSES} leaf textures, got {len(self.textures)}"
            )

        self._enabled = self.config.enabled
        self.wind = WindEnvelope(rng=self.rng)
        self._spawn_particles()

    @classmethod
    def create(
        cls,
        viewport_width: float,
        viewport_height: float,
        rng: random.Random,
        textures: Optional[Sequence[Any]] = None,
        virtual_width: Optional[float] = None,
    ) -> "LeavesParticleSystem":
        return cls(
            config=LeavesConfig(virtual_width=virtual_width),
            viewport_size=(viewport_width, viewport_height),
            rng=rng,
            textures=textures,
        )

    @classmethod
    def from_config(
        cls,
        config: LeavesConfig,
        viewport_size: Tuple[float, float],
        rng: random.Random,
        textures: Optional[Sequence[Any]] = None,
    ) -> "LeavesParticleSystem":
        return cls(config=config, viewport_size=viewport_size, rng=rng, textures=textures)

    @property
    def virtual_width(self) -> float:
        if self.config.virtual_width is not None:
            return self.config.virtual_width
        return self.viewport_size[0] * 2

    @property
    def virtual_height(self) -> float:
        return self.viewport_size[1]

    @property
    def enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = bool(enabled)

    def particles(self) -> Tuple[LeafView, ...]:
        return tuple(
            LeafView(
                position=(particle.position[0], particle.position[1]),
                angle=particle.angle,
                texture=particle.texture,
            )
            for particle in self._particles
        )

    def update(self, elapsed_time: float, gravity: float) -> None:
        if not self._enabled:
            return
        if gravity < 0:
            raise ValueError(f"Gravity must be non-negative, got {gravity}")

        wind_velocity = self.wind.update(elapsed_time)
        sq_g = math.sqrt(gravity)
        for particle in self._particles:
            self._integrate(particle, elapsed_time, sq_g, wind_velocity)

    def _spawn_particles(self) -> None:
        rng = self.rng
        virtual_width = self.virtual_width
        height = self.virtual_height
        leaf_count = int(virtual_width / LEAF_SPACING)

        for _ in range(leaf_count):
            size_class = rng.randrange(LEAF_SIZE_CLASSES)
            x = rng.uniform(0.0, virtual_width)
            y = rng.uniform(0.0, height)
            anchor_x = x + rng.uniform(-0.5, 0.5) * ANCHOR_JITTER
            # Drift changes with wind gusts.
            drift_speed = rng.uniform(-0.5, 0.5) * 0.3
            speed = fall_speed_for(size_class, rng)
            angle = rng.uniform(0.0, 360.0)
            spin_speed = rng.uniform(-SPIN_SPEED, SPIN_SPEED)

            self._particles.append(
                LeafParticle(
                    position=[x, y],
                    anchor_x=anchor_x,
                    drift_speed=drift_speed,
                    wobble=0.0,
                    speed=speed,
                    leaf_size=leaf_size_for(size_class),
                    angle=angle,
                    spin_speed=spin_speed,
                    size_class=size_class,
                    texture=self._texture_for(size_class),
                )
            )

    def _texture_for(self, size_class: int) -> Any:
        if self.textures is None:
            return None
        return self.textures[size_class]

    def _integrate(
        self, particle: LeafParticle, dt: float, sq_g: float, wind_velocity: float
    ) -> None:
        rng = self.rng

        # Falling
        particle.position[1] += particle.speed * dt * sq_g

        # Drifting: bigger leaves take longer to pick up the wind
        particle.drift_speed += (
            (wind_velocity - particle.drift_speed) / particle.leaf_size
            + rng.uniform(-EPSILON, EPSILON)
        )
        particle.anchor_x += particle.drift_speed * dt

        # Wobbling around the anchor
        particle.position[0] += particle.wobble * dt * sq_g
        anchor_delta = particle.anchor_x - particle.position[0]
        particle.wobble += WOBBLE_FACTOR * anchor_delta + rng.uniform(-EPSILON, EPSILON)
        particle.wobble *= WOBBLE_DECAY

        # Spinning
        particle.angle = math.fmod(particle.angle + particle.spin_speed * dt, 360.0)
