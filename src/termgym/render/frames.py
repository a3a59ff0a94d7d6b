"""
Frame Sets
==========

Pre-authored ASCII-art frames for each exercise.

A frame set is ordered from one extreme (fully contracted / exhaled) to the
opposite extreme (fully expanded / inhaled). The mapper selects a frame by
quantizing the primary spring position onto this order.
"""

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple


@dataclass(frozen=True, slots=True)
class FrameSet:
    """
    Immutable ordered sequence of multi-line text frames.

    Attributes:
        name: Frame set name for logging
        frames: Frames 0..N-1, each a tuple of lines
    """

    name: str
    frames: Tuple[Tuple[str, ...], ...]

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.frames:
            raise ValueError("frame set must contain at least one frame")

    @classmethod
    def from_lines(cls, name: str, frames: Sequence[Sequence[str]]) -> "FrameSet":
        return cls(name=name, frames=tuple(tuple(frame) for frame in frames))

    def __len__(self) -> int:
        return len(self.frames)

    def __getitem__(self, index: int) -> Tuple[str, ...]:
        return self.frames[index]

    def __iter__(self) -> Iterator[Tuple[str, ...]]:
        return iter(self.frames)


# Glute squeeze: 0 = fully contracted, 4 = peak activation
GLUTE_FRAMES = FrameSet.from_lines("glute", [
    [
        "    ╭─────╮    ",
        "   ╱  ╭─╮  ╲   ",
        "  ╱  ╱   ╲  ╲  ",
        " ╱  ╱  ●  ╲  ╲ ",
        "╱  ╱       ╲  ╲",
        "╲  ╲       ╱  ╱",
        " ╲  ╲     ╱  ╱ ",
        "  ╲  ╲___╱  ╱  ",
        "   ╲_______╱   ",
    ],
    [
        "     ╭─────╮     ",
        "   ╭─╱  ╭─╮  ╲─╮   ",
        "  ╱  ╱  ╱   ╲  ╲  ╲  ",
        " ╱  ╱  ╱  ●  ╲  ╲  ╲ ",
        "╱  ╱  ╱       ╲  ╲  ╲",
        "╲  ╲  ╲       ╱  ╱  ╱",
        " ╲  ╲  ╲     ╱  ╱  ╱ ",
        "  ╲  ╲  ╲___╱  ╱  ╱  ",
        "   ╲─╲_______╱─╱   ",
    ],
    [
        "      ╭──────╮      ",
        "   ╭──╱   ╭─╮   ╲──╮   ",
        "  ╱   ╱   ╱   ╲   ╲   ╲  ",
        " ╱   ╱   ╱  ●  ╲   ╲   ╲ ",
        "╱   ╱   ╱       ╲   ╲   ╲",
        "╲   ╲   ╲       ╱   ╱   ╱",
        " ╲   ╲   ╲     ╱   ╱   ╱ ",
        "  ╲   ╲   ╲___╱   ╱   ╱  ",
        "   ╲──╲_________╱──╱   ",
    ],
    [
        "       ╭───────╮       ",
        "   ╭───╱    ╭─╮    ╲───╮   ",
        "  ╱    ╱    ╱   ╲    ╲    ╲  ",
        " ╱    ╱    ╱  ●  ╲    ╲    ╲ ",
        "╱    ╱    ╱       ╲    ╲    ╲",
        "╲    ╲    ╲       ╱    ╱    ╱",
        " ╲    ╲    ╲     ╱    ╱    ╱ ",
        "  ╲    ╲    ╲___╱    ╱    ╱  ",
        "   ╲───╲___________╱───╱   ",
    ],
    [
        "        ╭────────╮        ",
        "   ╭────╱     ╭─╮     ╲────╮   ",
        "  ╱     ╱     ╱   ╲     ╲     ╲  ",
        " ╱     ╱     ╱  ●  ╲     ╲     ╲ ",
        "╱     ╱     ╱       ╲     ╲     ╲",
        "╲     ╲     ╲       ╱     ╱     ╱",
        " ╲     ╲     ╲     ╱     ╱     ╱ ",
        "  ╲     ╲     ╲___╱     ╱     ╱  ",
        "   ╲────╲_____________╱────╱   ",
    ],
])


# Breathing: 0 = exhaled, 4 = peak inhale
BREATHING_FRAMES = FrameSet.from_lines("breathing", [
    [
        "           ╭─────╮           ",
        "         ╱         ╲         ",
        "       ╱    ╭───╮    ╲       ",
        "      ╱    ╱  ○  ╲    ╲      ",
        "     ╱    ╱       ╲    ╲     ",
        "    ╱    ╱    ♡    ╲    ╲    ",
        "   ╱    ╱           ╲    ╲   ",
        "  ╱    ╱             ╲    ╲  ",
        " ╱____╱               ╲____╲ ",
        "╱_____________________╲",
    ],
    [
        "          ╭───────╮          ",
        "        ╱           ╲        ",
        "      ╱    ╭─────╮    ╲      ",
        "     ╱    ╱   ○   ╲    ╲     ",
        "    ╱    ╱         ╲    ╲    ",
        "   ╱    ╱     ♡     ╲    ╲   ",
        "  ╱    ╱             ╲    ╲  ",
        " ╱    ╱               ╲    ╲ ",
        "╱____╱                 ╲____╲",
        "╱_______________________╲",
    ],
    [
        "         ╭─────────╮         ",
        "       ╱             ╲       ",
        "     ╱    ╭───────╮    ╲     ",
        "    ╱    ╱    ○    ╲    ╲    ",
        "   ╱    ╱           ╲    ╲   ",
        "  ╱    ╱      ♡      ╲    ╲  ",
        " ╱    ╱               ╲    ╲ ",
        "╱    ╱                 ╲    ╲",
        "╲____╱                 ╲____╱",
        "╲_________________________╱",
    ],
    [
        "        ╭───────────╮        ",
        "      ╱               ╲      ",
        "    ╱    ╭─────────╮    ╲    ",
        "   ╱    ╱     ○     ╲    ╲   ",
        "  ╱    ╱             ╲    ╲  ",
        " ╱    ╱       ♡       ╲    ╲ ",
        "╱    ╱                 ╲    ╲",
        "╲    ╱                 ╲    ╱",
        "╲____╱                 ╲____╱",
        "╲___________________________╱",
    ],
    [
        "       ╭─────────────╮       ",
        "     ╱                 ╲     ",
        "   ╱    ╭───────────╮    ╲   ",
        "  ╱    ╱      ○      ╲    ╲  ",
        " ╱    ╱               ╲    ╲ ",
        "╱    ╱        ♡        ╲    ╲",
        "╲    ╱                 ╲    ╱",
        "╲   ╱                   ╲   ╱",
        "╲___╱                   ╲___╱",
        "╲_____________________________╱",
    ],
])
