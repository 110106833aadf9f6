"""Heartbeat-style blinking indicator driven by a damped spring."""

from __future__ import annotations

import math
import random
import sys
from enum import Enum
from typing import Dict, Optional, Tuple

from fuku.styles import UI_TICKS_PER_SECOND, Style

EMPTY_FRAME = "◯"
FULL_FRAME = "◉"

BLINK_FPS = UI_TICKS_PER_SECOND
BLINK_ANGULAR_FREQUENCY = 8.0
BLINK_DAMPING_RATIO = 0.7

SETTLE_TICKS = 2
BEAT1_TICKS = 1
MICRO_GAP_TICKS = 1
BEAT2_TICKS = 1
RECOVERY_TICKS = 3
CYCLE_TICKS = SETTLE_TICKS + BEAT1_TICKS + MICRO_GAP_TICKS + BEAT2_TICKS + RECOVERY_TICKS

FRAME_THRESHOLD = 0.3

POSITION_FULL = 1.0
POSITION_EMPTY = 0.0

_EPSILON = sys.float_info.epsilon


class Spring:
    """Damped harmonic oscillator with precomputed coefficients for a fixed time step."""

    def __init__(self, delta_time: float, angular_frequency: float, damping_ratio: float) -> None:
        omega = max(0.0, angular_frequency)
        zeta = max(0.0, damping_ratio)

        if omega < _EPSILON:
            coefficients = (1.0, 0.0, 0.0, 1.0)
        elif zeta > 1.0 + _EPSILON:
            za = -omega * zeta
            zb = omega * math.sqrt(zeta * zeta - 1.0)
            z1 = za - zb
            z2 = za + zb
            e1 = math.exp(z1 * delta_time)
            e2 = math.exp(z2 * delta_time)
            inv_two_zb = 1.0 / (2.0 * zb)
            e1_over = e1 * inv_two_zb
            e2_over = e2 * inv_two_zb
            z1e1_over = z1 * e1_over
            z2e2_over = z2 * e2_over
            coefficients = (
                e1_over * z2 - z2e2_over + e2,
                -e1_over + e2_over,
                (z1e1_over - z2e2_over + e2) * z2,
                -z1e1_over + z2e2_over,
            )
        elif zeta < 1.0 - _EPSILON:
            omega_zeta = omega * zeta
            alpha = omega * math.sqrt(1.0 - zeta * zeta)
            exp_term = math.exp(-omega_zeta * delta_time)
            cos_term = math.cos(alpha * delta_time)
            sin_term = math.sin(alpha * delta_time)
            inv_alpha = 1.0 / alpha
            exp_sin = exp_term * sin_term
            exp_cos = exp_term * cos_term
            exp_omega_zeta_sin_over_alpha = exp_term * omega_zeta * sin_term * inv_alpha
            coefficients = (
                exp_cos + exp_omega_zeta_sin_over_alpha,
                exp_sin * inv_alpha,
                -exp_sin * alpha - omega_zeta * exp_omega_zeta_sin_over_alpha,
                exp_cos - exp_omega_zeta_sin_over_alpha,
            )
        else:
            exp_term = math.exp(-omega * delta_time)
            time_exp = delta_time * exp_term
            time_exp_freq = time_exp * omega
            coefficients = (
                time_exp_freq + exp_term,
                time_exp,
                -omega * time_exp_freq,
                -time_exp_freq + exp_term,
            )

        self._pos_pos, self._pos_vel, self._vel_pos, self._vel_vel = coefficients

    def update(self, position: float, velocity: float, target: float) -> Tuple[float, float]:
        """Advance one time step toward ``target``; return the new position and velocity."""
        offset = position - target
        new_position = offset * self._pos_pos + velocity * self._pos_vel + target
        new_velocity = offset * self._vel_pos + velocity * self._vel_vel
        return new_position, new_velocity


class BlinkState(Enum):
    SETTLE = 0
    BEAT1 = 1
    MICRO_GAP = 2
    BEAT2 = 3
    RECOVERY = 4


# state -> (ticks spent in it, spring target while in it, following state)
_PHASES: Dict[BlinkState, Tuple[int, float, BlinkState]] = {
    BlinkState.SETTLE: (SETTLE_TICKS, POSITION_EMPTY, BlinkState.BEAT1),
    BlinkState.BEAT1: (BEAT1_TICKS, POSITION_FULL, BlinkState.MICRO_GAP),
    BlinkState.MICRO_GAP: (MICRO_GAP_TICKS, POSITION_EMPTY, BlinkState.BEAT2),
    BlinkState.BEAT2: (BEAT2_TICKS, POSITION_FULL, BlinkState.RECOVERY),
    BlinkState.RECOVERY: (RECOVERY_TICKS, POSITION_EMPTY, BlinkState.SETTLE),
}


class Blink:
    """A two-beat pulse animation advanced once per UI tick.

    Without an explicit ``tick_offset`` the animation starts at a random
    point of its cycle so that several indicators do not pulse in step.
    """

    def __init__(self, tick_offset: Optional[int] = None) -> None:
        self._spring = Spring(1.0 / BLINK_FPS, BLINK_ANGULAR_FREQUENCY, BLINK_DAMPING_RATIO)
        self._position = POSITION_EMPTY
        self._velocity = POSITION_EMPTY
        self._target = POSITION_EMPTY
        self._active = False
        self._tick_count = random.randrange(CYCLE_TICKS) if tick_offset is None else tick_offset
        self._state = BlinkState.SETTLE

    @property
    def state(self) -> BlinkState:
        return self._state

    @property
    def tick_count(self) -> int:
        return self._tick_count

    def start(self) -> None:
        self._active = True

    def stop(self) -> None:
        """Stop the animation and reset it to the empty frame."""
        self._active = False
        self._target = POSITION_EMPTY
        self._position = POSITION_EMPTY
        self._velocity = POSITION_EMPTY
        self._tick_count = 0
        self._state = BlinkState.SETTLE

    def update(self) -> None:
        """Advance the animation by one tick."""
        if not self._active:
            return

        self._tick_count += 1
        duration, target, following = _PHASES[self._state]
        self._target = target
        if self._tick_count >= duration:
            self._state = following
            self._target = _PHASES[following][1]
            self._tick_count = 0

        self._position, self._velocity = self._spring.update(
            self._position, self._velocity, self._target
        )

    def frame(self) -> str:
        if not self._active or self._position < FRAME_THRESHOLD:
            return EMPTY_FRAME
        return FULL_FRAME

    def render(self, style: Style) -> str:
        return style.render(self.frame())

    def is_active(self) -> bool:
        return self._active