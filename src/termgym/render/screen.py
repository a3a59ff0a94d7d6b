"""
Screen Composer
===============

Lays out full screens as lists of text lines.

Screens:
    - compose_screen: one animation tick (banner, instruction, frame, counter, tips)
    - compose_summary: final message after cancellation
    - compose_welcome / compose_menu / compose_preparation: startup screens

Composition is pure; writing is left to a Renderer.
"""

from typing import List

from termgym.exercises.base import ExerciseSession
from termgym.i18n.localizer import Localizer


SCREEN_WIDTH = 60
COUNTER_INDENT = 25


def _banner(title: str, title_indent: int, subtitle: str, subtitle_indent: int) -> List[str]:
    return [
        "",
        "=" * SCREEN_WIDTH,
        " " * title_indent + title,
        " " * subtitle_indent + subtitle,
        "=" * SCREEN_WIDTH,
    ]


def center(text: str, width: int = SCREEN_WIDTH) -> str:
    """Left-pad text to center it, never with negative padding."""
    return " " * max(0, (width - len(text)) // 2) + text


def compose_screen(session: ExerciseSession, localizer: Localizer) -> List[str]:
    """
    Compose the screen for the session's current state.

    Args:
        session: Exercise session, already updated for this tick
        localizer: Text provider

    Returns:
        Screen lines, top to bottom
    """
    lines = _banner(localizer.t("title"), 20, localizer.t("subtitle"), 14)
    lines += [
        "",
        center(session.get_instructions()),
        "",
        "",
        " " * COUNTER_INDENT + localizer.t("watch_follow"),
        "",
    ]
    lines += session.render()
    lines += [
        "",
        "",
        " " * COUNTER_INDENT + session.get_counter(),
        "",
        "-" * SCREEN_WIDTH,
        localizer.t("tips_header"),
    ]
    lines += session.get_tips()
    lines.append("-" * SCREEN_WIDTH)
    return lines


def compose_summary(session: ExerciseSession, localizer: Localizer) -> List[str]:
    """Final message shown once after the loop stops."""
    return [
        "",
        localizer.t(session.kind.summary_key),
        localizer.t("keep_work"),
        "",
    ]


def compose_welcome(localizer: Localizer) -> List[str]:
    return _banner(localizer.t("welcome_title"), 17, localizer.t("welcome_subtitle"), 20)


def compose_menu(localizer: Localizer) -> List[str]:
    """Welcome banner followed by the numbered exercise choices."""
    return compose_welcome(localizer) + [
        "",
        localizer.t("exercise_selection"),
        localizer.t("exercise_buttock"),
        localizer.t("exercise_meditation"),
        "",
    ]


def compose_preparation(localizer: Localizer) -> List[str]:
    return compose_welcome(localizer) + [
        "",
        localizer.t("starting_countdown"),
        localizer.t("prepare_message"),
    ]
