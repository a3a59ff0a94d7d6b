"""
Spring Models
=============

Value types for the spring physics pipeline.

These models are produced by the spring integrator and the multi-spring
composer, and consumed by the frame mapper and the cycle state machine.
They are immutable so a channel can only move forward through the
integrator's per-step update.
"""

from dataclasses import dataclass, field, replace
from typing import Dict


@dataclass(frozen=True, slots=True)
class SpringState:
    """
    Physical state of one animated channel.

    Attributes:
        position: Current position (animation units)
        velocity: Current velocity (animation units per second)
        target: Position the spring is pulled toward
    """

    position: float = 0.0
    velocity: float = 0.0
    target: float = 0.0

    @property
    def error(self) -> float:
        """Signed distance from the target."""
        return self.position - self.target

    def retarget(self, target: float) -> "SpringState":
        """Return a copy pulled toward a new target."""
        return replace(self, target=target)

    def __repr__(self) -> str:
        return (
            f"SpringState(pos={self.position:+.3f}, "
            f"vel={self.velocity:+.3f}, "
            f"target={self.target:+.2f})"
        )


@dataclass(frozen=True, slots=True)
class SpringParameters:
    """
    Immutable response characteristics of a spring channel.

    Attributes:
        angular_frequency: Oscillation speed (rad/s), must be > 0
        damping_ratio: 0 = undamped, 1 = critically damped, > 1 = overdamped
        sample_rate: Integration steps per second, must be > 0
    """

    angular_frequency: float
    damping_ratio: float
    sample_rate: float = 30.0

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.angular_frequency <= 0:
            raise ValueError("angular_frequency must be positive")
        if self.damping_ratio < 0:
            raise ValueError("damping_ratio must be non-negative")
        if self.sample_rate <= 0:
            raise ValueError("sample_rate must be positive")

    @property
    def time_step(self) -> float:
        """Seconds advanced by one integration step."""
        return 1.0 / self.sample_rate


@dataclass(frozen=True, slots=True)
class CompositeState:
    """
    Snapshot of every channel of a composer after one tick.

    Attributes:
        frame_index: Shared frame clock (ticks since reset)
        channels: Channel name -> SpringState
    """

    frame_index: int
    channels: Dict[str, SpringState] = field(default_factory=dict)

    def __getitem__(self, name: str) -> SpringState:
        return self.channels[name]

    def position(self, name: str) -> float:
        """Position of a channel, 0.0 if the channel does not exist."""
        state = self.channels.get(name)
        return state.position if state is not None else 0.0

    def to_dict(self) -> dict:
        """Export as dictionary for logging."""
        return {
            "frame_index": self.frame_index,
            **{
                name: round(state.position, 3)
                for name, state in self.channels.items()
            },
        }
