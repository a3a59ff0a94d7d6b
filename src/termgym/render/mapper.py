"""
State-to-Frame Mapper
=====================

Maps continuous spring state onto a discrete frame set.

Pipeline:
    1. normalize: primary position in [-R, +R] → [0, 1], clamped
       (spring overshoot can transiently leave the nominal range)
    2. quantize: floor(normalized * (N - 1)), clamped to [0, N - 1]
    3. hints: padding, tilt and overlay labels from the secondary channels

Integer offsets use truncation toward zero. All coefficients and
thresholds below are fixed constants, not configuration.
"""

import math
from typing import Callable

from termgym.models.render import FrameSelection, RenderHints
from termgym.models.spring import CompositeState
from termgym.render.frames import FrameSet


# Strength hint constants
STRENGTH_BASE_PADDING = 15
STRENGTH_MIN_PADDING = 5
STRENGTH_MAX_PADDING = 25
SIDE_OFFSET_COEFFICIENT = 0.3
BREATH_OFFSET_COEFFICIENT = 0.5
TILT_THRESHOLD = 1.0
TILT_RIGHT = "↗"
TILT_LEFT = "↖"
PEAK_ACTIVATION_THRESHOLD = 0.8
ENGAGED_THRESHOLD = 0.5
PEAK_OVERLAY_INDENT = 8
ENGAGED_OVERLAY_INDENT = 10

# Meditation hint constants
BREATH_BASE_PADDING = 10
BREATH_MIN_PADDING = 5
BREATH_MAX_PADDING = 20
LUNG_OFFSET_COEFFICIENT = 0.2
HEART_OFFSET_COEFFICIENT = 0.1
HEART_GLYPH = "♡"
HEART_STRONG_THRESHOLD = 3.0
HEART_MEDIUM_THRESHOLD = 1.0
HEART_STRONG_GLYPH = "💖"
HEART_MEDIUM_GLYPH = "💗"


HintRule = Callable[[CompositeState, float], RenderHints]


def normalize(position: float, animation_range: float) -> float:
    """Map [-R, +R] to [0, 1], clamping outside the range."""
    normalized = (position + animation_range) / (2 * animation_range)
    if normalized < 0.0:
        return 0.0
    if normalized > 1.0:
        return 1.0
    return normalized


def quantize(normalized: float, frame_count: int) -> int:
    """Index into a frame set of frame_count frames, in [0, frame_count - 1]."""
    index = math.floor(normalized * (frame_count - 1))
    return max(0, min(frame_count - 1, index))


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def strength_hints(composite: CompositeState, animation_range: float) -> RenderHints:
    """
    Hints for the strength exercise.

    Channels:
        left / right: asymmetric padding and tilt indicator
        breath: breathing micro-movement of the padding
        tension: intensity overlay label
    """
    left = composite.position("left")
    right = composite.position("right")

    left_offset = int(left * SIDE_OFFSET_COEFFICIENT)
    right_offset = int(right * SIDE_OFFSET_COEFFICIENT)
    breath_offset = int(composite.position("breath") * BREATH_OFFSET_COEFFICIENT)

    padding = _clamp(
        STRENGTH_BASE_PADDING + breath_offset + left_offset - right_offset,
        STRENGTH_MIN_PADDING,
        STRENGTH_MAX_PADDING,
    )
    line_padding = max(0, padding + int((left_offset - right_offset) / 2))

    tilt = None
    if abs(left - right) > TILT_THRESHOLD:
        tilt = TILT_RIGHT if left > right else TILT_LEFT

    intensity = normalize(composite.position("tension"), animation_range)
    overlay_key = None
    overlay_padding = 0
    if intensity > PEAK_ACTIVATION_THRESHOLD:
        overlay_key = "peak_activation"
        overlay_padding = padding + PEAK_OVERLAY_INDENT
    elif intensity > ENGAGED_THRESHOLD:
        overlay_key = "engaged"
        overlay_padding = padding + ENGAGED_OVERLAY_INDENT

    return RenderHints(
        padding=padding,
        line_padding=line_padding,
        tilt=tilt,
        overlay_key=overlay_key,
        overlay_padding=overlay_padding,
    )


def breath_hints(composite: CompositeState, animation_range: float) -> RenderHints:
    """
    Hints for the meditation exercise.

    Channels:
        lung / heart: padding pulse
        heart: heart glyph intensity
    """
    heart = composite.position("heart")
    lung_offset = int(composite.position("lung") * LUNG_OFFSET_COEFFICIENT)
    heart_offset = int(heart * HEART_OFFSET_COEFFICIENT)

    padding = _clamp(
        BREATH_BASE_PADDING + lung_offset + heart_offset,
        BREATH_MIN_PADDING,
        BREATH_MAX_PADDING,
    )

    glyph_swaps = ()
    if heart > HEART_STRONG_THRESHOLD:
        glyph_swaps = ((HEART_GLYPH, HEART_STRONG_GLYPH),)
    elif heart > HEART_MEDIUM_THRESHOLD:
        glyph_swaps = ((HEART_GLYPH, HEART_MEDIUM_GLYPH),)

    return RenderHints(
        padding=padding,
        line_padding=padding,
        glyph_swaps=glyph_swaps,
    )


def map_to_frame(
    composite: CompositeState,
    frame_set: FrameSet,
    primary: str = "main",
    animation_range: float = 8.0,
    derive_hints: HintRule = strength_hints,
) -> FrameSelection:
    """
    Select a frame and render hints for the current composite state.

    Args:
        composite: State of every channel after this tick
        frame_set: Frames to select from
        primary: Channel driving the frame index
        animation_range: Nominal physical range R of the primary channel
        derive_hints: Hint rule set of the exercise

    Returns:
        FrameSelection with an index in [0, len(frame_set) - 1]
    """
    normalized = normalize(composite.position(primary), animation_range)
    return FrameSelection(
        frame_index=quantize(normalized, len(frame_set)),
        normalized=normalized,
        hints=derive_hints(composite, animation_range),
    )
