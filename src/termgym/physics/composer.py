"""
Multi-Spring Composer
=====================

Runs several independent spring channels on one shared frame clock.

Every channel is pulled toward a target derived from a shared base target
plus a phase-shifted oscillatory perturbation:

    target_i = base_i * target_scale_i + amplitude_i * sin(frame_index * rate_i)

base_i is the base target supplied by the caller for this tick, or a
per-channel override. Channels that would otherwise be identical drift
apart through their distinct rate, amplitude and spring parameters, which
gives the animation its organic asymmetry.

Channel presets:
    strength:   main, left, right, breath, tension
    meditation: breath, lung, heart
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence

from termgym.models.spring import CompositeState, SpringParameters, SpringState
from termgym.physics.spring import Spring


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ChannelSpec:
    """
    Fixed character of one animated channel.

    Attributes:
        name: Channel name (unique within a composer)
        angular_frequency: Spring angular frequency (rad/s)
        damping_ratio: Spring damping ratio
        target_scale: Multiplier applied to the base target
        amplitude: Amplitude of the sinusoidal perturbation
        rate: Perturbation phase advance per frame (rad/frame)
    """

    name: str
    angular_frequency: float
    damping_ratio: float
    target_scale: float = 1.0
    amplitude: float = 0.0
    rate: float = 0.0

    def target(self, base_target: float, frame_index: int) -> float:
        """Target for this channel on a given frame."""
        perturbation = self.amplitude * math.sin(frame_index * self.rate)
        return base_target * self.target_scale + perturbation


def strength_channels(
    angular_frequency: float = 4.0,
    damping_ratio: float = 0.3,
) -> List[ChannelSpec]:
    """Channel set of the strength exercise, primary channel first."""
    return [
        ChannelSpec("main", angular_frequency, damping_ratio),
        ChannelSpec(
            "left", angular_frequency * 1.1, damping_ratio * 0.9,
            amplitude=0.5, rate=0.02,
        ),
        ChannelSpec(
            "right", angular_frequency * 0.9, damping_ratio * 1.1,
            amplitude=0.4, rate=0.018,
        ),
        ChannelSpec("breath", 1.5, 0.8, target_scale=0.0, amplitude=2.0, rate=0.01),
        ChannelSpec(
            "tension", angular_frequency * 2.0, damping_ratio * 2.0,
            target_scale=1.2,
        ),
    ]


def meditation_channels() -> List[ChannelSpec]:
    """Channel set of the meditation exercise, primary channel first."""
    return [
        ChannelSpec("breath", 0.8, 0.9),
        # The lung target is supplied per phase through an override
        ChannelSpec("lung", 1.0, 0.8),
        ChannelSpec("heart", 0.5, 0.95, target_scale=0.0, amplitude=4.0, rate=0.005),
    ]


class MultiSpringComposer:
    """
    N spring channels advanced together once per tick.

    Attributes:
        specs: Channel specifications in declaration order
        sample_rate: Steps per second shared by all channels

    Example:
        composer = MultiSpringComposer(strength_channels(), sample_rate=30)

        state = composer.step(base_target=-8.0)
        print(state["main"].position, state["left"].position)
    """

    def __init__(
        self,
        specs: Sequence[ChannelSpec],
        sample_rate: float = 30.0,
        log_every_n_frames: int = 300,
    ) -> None:
        """
        Initialize composer.

        Args:
            specs: Channel specifications, names must be unique
            sample_rate: Integration steps per second
            log_every_n_frames: Log channel positions every N frames
        """
        if not specs:
            raise ValueError("at least one channel is required")
        names = [spec.name for spec in specs]
        if len(set(names)) != len(names):
            raise ValueError(f"duplicate channel names: {names}")

        self.specs = tuple(specs)
        self.sample_rate = sample_rate
        self.log_every_n_frames = log_every_n_frames

        self._springs: Dict[str, Spring] = {
            spec.name: Spring(
                SpringParameters(
                    angular_frequency=spec.angular_frequency,
                    damping_ratio=spec.damping_ratio,
                    sample_rate=sample_rate,
                )
            )
            for spec in self.specs
        }

        # Internal state
        self._states: Dict[str, SpringState] = {}
        self._frame_index: int = 0
        self.reset()

        logger.info(
            f"MultiSpringComposer initialized: channels={names}, "
            f"sample_rate={sample_rate}"
        )

    @property
    def frame_index(self) -> int:
        """Ticks since the last reset."""
        return self._frame_index

    def spring(self, name: str) -> Spring:
        """Spring used by a channel."""
        return self._springs[name]

    def step(
        self,
        base_target: float,
        overrides: Optional[Mapping[str, float]] = None,
    ) -> CompositeState:
        """
        Advance every channel exactly one step.

        Args:
            base_target: Shared base target for this tick
            overrides: Channel name -> base target replacing base_target

        Returns:
            CompositeState after the step
        """
        self._frame_index += 1
        overrides = overrides or {}

        for spec in self.specs:
            base = overrides.get(spec.name, base_target)
            target = spec.target(base, self._frame_index)
            current = self._states[spec.name].retarget(target)
            self._states[spec.name] = self._springs[spec.name].step(current)

        snapshot = self.snapshot()

        if self._frame_index % self.log_every_n_frames == 0:
            logger.debug(f"Composer [frame {self._frame_index}]: {snapshot.to_dict()}")

        return snapshot

    def snapshot(self) -> CompositeState:
        """Current state of every channel."""
        return CompositeState(
            frame_index=self._frame_index,
            channels=dict(self._states),
        )

    def reset(self, initial_target: float = 0.0) -> None:
        """Bring every channel to rest at 0 and restart the frame clock."""
        self._states = {
            spec.name: SpringState(position=0.0, velocity=0.0, target=initial_target)
            for spec in self.specs
        }
        self._frame_index = 0
