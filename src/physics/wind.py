"""Wind gust envelope shared by the leaf field."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
import random

STATE_LENGTH = 5.0  # Max seconds spent in any one state
WIND_SPEED = 30.0  # Max magnitude of a gust onset
DECAY_RATIO = 0.2  # Decay speed relative to attack speed
INITIAL_TIMER = 0.01


class WindState(IntEnum):
    RELEASING = 0
    ATTACKING = 1
    SUSTAINING = 2
    DECAYING = 3
    RESTING = 4

    def next(self) -> "WindState":
        return WindState((self + 1) % len(WindState))


@dataclass
class CountdownTimer:
    """Counts simulated seconds down to zero."""

    duration: float = 0.0
    _remaining: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        self._remaining = self.duration

    def start(self, duration: float) -> None:
        self.duration = duration
        self._remaining = duration

    def advance(self, dt: float) -> None:
        self._remaining -= dt

    def remaining(self) -> float:
        return self._remaining

    def expired(self) -> bool:
        return self._remaining <= 0.0


@dataclass
class WindEnvelope:
    """
    Attack/Decay/Sustain/Release/Rest envelope driving the wind velocity.

    Every state lasts a random time in [0, STATE_LENGTH]. A new gust onset is
    drawn each time the envelope enters RESTING, and the wind stops there.
    """

    rng: random.Random
    state: WindState = WindState.RELEASING
    gust_onset: float = 0.0
    gust_current_velocity: float = 0.0
    timer: CountdownTimer = field(default_factory=lambda: CountdownTimer(INITIAL_TIMER))

    def update(self, dt: float) -> float:
        # The timer is checked before it counts down, so RELEASING always
        # sees the time left in the state as of the start of this step.
        if self.timer.expired():
            self._advance_state()

        self._apply_state(dt)
        self.timer.advance(dt)
        return self.gust_current_velocity

    def _advance_state(self) -> None:
        self.state = self.state.next()
        if self.state == WindState.RESTING:
            self.gust_current_velocity = 0.0
            self.gust_onset = self.rng.uniform(-WIND_SPEED, WIND_SPEED)
        self.timer.start(self.rng.uniform(0.0, STATE_LENGTH))

    def _apply_state(self, dt: float) -> None:
        state = self.state
        if state == WindState.ATTACKING:
            self.gust_current_velocity += self.gust_onset * dt
        elif state == WindState.DECAYING:
            self.gust_current_velocity -= self.gust_onset * dt * DECAY_RATIO
        elif state == WindState.RELEASING:
            remaining = self.timer.remaining()
            if dt >= remaining:
                # Release finishes within this step.
                self.gust_current_velocity = 0.0
            else:
                self.gust_current_velocity -= self.gust_current_velocity * dt / remaining
        elif state in (WindState.SUSTAINING, WindState.RESTING):
            pass
        else:
            raise RuntimeError(f"Invalid wind state: {state!r}")
