"""
Spring Integrator
=================

Fixed time-step damped harmonic oscillator.

Each step advances one channel by exactly 1/sample_rate seconds using the
closed-form solution of

    x'' + 2ζω x' + ω² (x - target) = 0

rather than numerical integration. The solution is linear in the initial
displacement and velocity, so one step reduces to four coefficients that
are computed once per parameter set:

    x' = pos_pos * (x - target) + pos_vel * v + target
    v' = vel_pos * (x - target) + vel_vel * v

Damping regimes:
    ζ > 1   overdamped: two real decaying exponentials
    ζ < 1   underdamped: decaying sinusoid, may overshoot the target
    ζ ≈ 1   critically damped: fastest approach without overshoot

The integrator never rejects input. NaN and infinities propagate.
"""

import logging
import math
from typing import Optional, Tuple

import numpy as np

from termgym.models.spring import SpringParameters, SpringState


logger = logging.getLogger(__name__)


# Tolerance around ζ = 1 treated as critically damped
_CRITICAL_TOLERANCE = 1e-4


class Spring:
    """
    Pre-computed step coefficients for one parameter set.

    Attributes:
        params: Parameters the coefficients were derived from

    Example:
        spring = Spring(SpringParameters(4.0, 0.3, sample_rate=30))
        pos, vel = 0.0, 0.0
        for _ in range(60):
            pos, vel = spring.update(pos, vel, target=8.0)
    """

    __slots__ = ("params", "_pos_pos", "_pos_vel", "_vel_pos", "_vel_vel")

    def __init__(self, params: SpringParameters) -> None:
        self.params = params
        (
            self._pos_pos,
            self._pos_vel,
            self._vel_pos,
            self._vel_vel,
        ) = _coefficients(
            params.angular_frequency,
            params.damping_ratio,
            params.time_step,
        )

    @property
    def coefficients(self) -> Tuple[float, float, float, float]:
        """(pos_pos, pos_vel, vel_pos, vel_vel)."""
        return self._pos_pos, self._pos_vel, self._vel_pos, self._vel_vel

    def update(
        self,
        position: float,
        velocity: float,
        target: float,
    ) -> Tuple[float, float]:
        """
        Advance one time-step toward target.

        Returns:
            Tuple of (new_position, new_velocity)
        """
        displacement = position - target
        new_position = (
            displacement * self._pos_pos + velocity * self._pos_vel + target
        )
        new_velocity = displacement * self._vel_pos + velocity * self._vel_vel
        return new_position, new_velocity

    def step(self, state: SpringState) -> SpringState:
        """Advance a SpringState one time-step toward its own target."""
        position, velocity = self.update(
            state.position, state.velocity, state.target
        )
        return SpringState(
            position=position,
            velocity=velocity,
            target=state.target,
        )


def _coefficients(
    angular_frequency: float,
    damping_ratio: float,
    dt: float,
) -> Tuple[float, float, float, float]:
    """Step coefficients for the three damping regimes."""
    omega = angular_frequency
    zeta = damping_ratio

    if zeta > 1.0 + _CRITICAL_TOLERANCE:
        # Overdamped
        za = -omega * zeta
        zb = omega * math.sqrt(zeta * zeta - 1.0)
        z1 = za - zb
        z2 = za + zb
        e1 = math.exp(z1 * dt)
        e2 = math.exp(z2 * dt)

        inv_two_zb = 1.0 / (2.0 * zb)
        e1_over_two_zb = e1 * inv_two_zb
        e2_over_two_zb = e2 * inv_two_zb
        z1e1_over_two_zb = z1 * e1_over_two_zb
        z2e2_over_two_zb = z2 * e2_over_two_zb

        pos_pos = e1_over_two_zb * z2 - z2e2_over_two_zb + e2
        pos_vel = -e1_over_two_zb + e2_over_two_zb
        vel_pos = (z1e1_over_two_zb - z2e2_over_two_zb + e2) * z2
        vel_vel = -z1e1_over_two_zb + z2e2_over_two_zb

    elif zeta < 1.0 - _CRITICAL_TOLERANCE:
        # Underdamped
        omega_zeta = omega * zeta
        alpha = omega * math.sqrt(1.0 - zeta * zeta)

        exp_term = math.exp(-omega_zeta * dt)
        cos_term = math.cos(alpha * dt)
        sin_term = math.sin(alpha * dt)
        inv_alpha = 1.0 / alpha

        exp_sin = exp_term * sin_term
        exp_cos = exp_term * cos_term
        exp_omega_zeta_sin_over_alpha = exp_term * omega_zeta * sin_term * inv_alpha

        pos_pos = exp_cos + exp_omega_zeta_sin_over_alpha
        pos_vel = exp_sin * inv_alpha
        vel_pos = -exp_sin * alpha - omega_zeta * exp_omega_zeta_sin_over_alpha
        vel_vel = exp_cos - exp_omega_zeta_sin_over_alpha

    else:
        # Critically damped
        exp_term = math.exp(-omega * dt)
        time_exp = dt * exp_term
        time_exp_freq = time_exp * omega

        pos_pos = time_exp_freq + exp_term
        pos_vel = time_exp
        vel_pos = -omega * time_exp_freq
        vel_vel = -time_exp_freq + exp_term

    return pos_pos, pos_vel, vel_pos, vel_vel


def step(state: SpringState, params: SpringParameters) -> SpringState:
    """
    Advance a spring state by one fixed time-step.

    Pure function of the state and parameters. Callers stepping the same
    channel repeatedly should hold a Spring to reuse its coefficients.

    Args:
        state: Current position, velocity and target
        params: Spring parameters

    Returns:
        New SpringState with the same target
    """
    return Spring(params).step(state)


def is_settled(state: SpringState, epsilon: float = 0.5) -> bool:
    """
    Check the settling condition.

    The spring has arrived when it is both close to its target and
    carries no residual momentum, so an overshoot passing through the
    target does not count.
    """
    return abs(state.position - state.target) < epsilon and abs(state.velocity) < epsilon


def simulate(
    params: SpringParameters,
    position: float,
    velocity: float,
    target: float,
    steps: int,
) -> np.ndarray:
    """
    Run a spring toward a constant target.

    Args:
        params: Spring parameters
        position: Initial position
        velocity: Initial velocity
        target: Constant target
        steps: Number of time-steps to run

    Returns:
        Array of shape (steps + 1, 2) holding (position, velocity) per
        tick, row 0 being the initial state.
    """
    if steps < 0:
        raise ValueError("steps must be non-negative")

    spring = Spring(params)
    trajectory = np.empty((steps + 1, 2), dtype=float)
    trajectory[0] = (position, velocity)
    for i in range(1, steps + 1):
        position, velocity = spring.update(position, velocity, target)
        trajectory[i] = (position, velocity)
    return trajectory


def estimate_settle_ticks(
    params: SpringParameters,
    start: float,
    target: float,
    epsilon: float = 0.5,
    max_steps: int = 10_000,
    start_velocity: float = 0.0,
) -> Optional[int]:
    """
    First tick at which a spring released at `start` is settled on `target`.

    Returns:
        Tick count, or None if the spring does not settle within max_steps.
    """
    trajectory = simulate(params, start, start_velocity, target, max_steps)
    settled = (
        (np.abs(trajectory[:, 0] - target) < epsilon)
        & (np.abs(trajectory[:, 1]) < epsilon)
    )
    hits = np.flatnonzero(settled)
    if hits.size == 0:
        logger.debug(
            f"Spring ω={params.angular_frequency} ζ={params.damping_ratio} "
            f"did not settle within {max_steps} steps"
        )
        return None
    return int(hits[0])
