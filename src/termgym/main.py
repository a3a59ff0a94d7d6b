"""
termgym Main Application
========================

Command-line entry point for the terminal gym.

Startup sequence:
    1. Parse flags (argparse, localized help)
    2. Load settings (YAML + environment + flags), configure logging
    3. Load the locale with fallback to the default language
    4. Select the exercise (flag or interactive menu)
    5. Preparation countdown
    6. Run the animation loop until SIGINT/SIGTERM

Exit status:
    0  normal cancellation or --help
    1  invalid configuration, or no exercise chosen (stdin closed)
    2  unrecognized flags (argparse)

Usage:
    termgym --lang zh
    termgym --exercise meditation --no-countdown
    python -m termgym --config termgym.yaml
"""

import argparse
import asyncio
import logging
import sys
import time
from typing import Callable, List, Optional

import yaml

from termgym.config import Settings, load_config, setup_logging
from termgym.exercises import ExerciseKind, create_exercise
from termgym.i18n.localizer import Localizer
from termgym.models.spring import SpringParameters
from termgym.physics.spring import estimate_settle_ticks
from termgym.render.screen import compose_menu, compose_preparation
from termgym.render.terminal import TerminalRenderer
from termgym.runtime.loop import AnimationLoop


logger = logging.getLogger(__name__)


# Menu choice -> exercise
MENU_CHOICES = {
    "1": ExerciseKind.STRENGTH,
    "2": ExerciseKind.MEDITATION,
}


# =============================================================================
# Command Line
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser.

    The built-in help is disabled; -h/--help prints the localized
    `language_help` text once the locale is known.
    """
    parser = argparse.ArgumentParser(
        prog="termgym",
        description="Spring-animated terminal exercises",
        add_help=False,
    )
    parser.add_argument("--lang", default=None, help="Language (en/zh)")
    parser.add_argument("-h", "--help", action="store_true", help="Show help")
    parser.add_argument(
        "--exercise",
        choices=[kind.value for kind in ExerciseKind],
        default=None,
        help="Skip the menu and start this exercise",
    )
    parser.add_argument("--config", default=None, help="Path to a YAML config file")
    parser.add_argument(
        "--no-countdown",
        action="store_true",
        help="Skip the preparation countdown",
    )
    return parser


def apply_cli_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Command-line flags take precedence over every other source."""
    if args.lang:
        locale = settings.locale.model_copy(update={"language": args.lang})
        settings = settings.model_copy(update={"locale": locale})
    return settings


# =============================================================================
# Startup Screens
# =============================================================================

def select_exercise(
    localizer: Localizer,
    renderer: TerminalRenderer,
    input_fn: Callable[[str], str] = input,
) -> Optional[ExerciseKind]:
    """
    Interactive numbered menu.

    Re-prompts on invalid input.

    Returns:
        Chosen exercise, or None if stdin was closed
    """
    renderer.clear()
    renderer.write_lines(compose_menu(localizer))

    prompt = localizer.t("enter_choice")
    while True:
        try:
            choice = input_fn(prompt).strip()
        except EOFError:
            logger.warning("Input closed before an exercise was chosen")
            return None

        if choice in MENU_CHOICES:
            return MENU_CHOICES[choice]
        renderer.write_lines([localizer.t("invalid_choice")])


def run_countdown(
    localizer: Localizer,
    renderer: TerminalRenderer,
    seconds: int,
    sleep: Optional[Callable[[float], None]] = None,
) -> None:
    """Preparation screen counting down `seconds` before the animation."""
    sleep = sleep or time.sleep
    renderer.clear()
    renderer.write_lines(compose_preparation(localizer))

    for remaining in range(seconds, 0, -1):
        sleep(1.0)
        renderer.write_inline(localizer.tf("starting_in", remaining))

    renderer.write_lines(["", "", localizer.t("lets_begin")])
    sleep(1.0)


def _log_settle_estimate(settings: Settings) -> None:
    params = SpringParameters(
        angular_frequency=settings.spring.angular_frequency,
        damping_ratio=settings.spring.damping_ratio,
        sample_rate=settings.animation.frame_rate,
    )
    animation_range = settings.animation.animation_range
    ticks = estimate_settle_ticks(
        params,
        start=-animation_range,
        target=animation_range,
        epsilon=settings.animation.settle_epsilon,
    )
    if ticks is None:
        logger.warning(
            f"Primary spring ω={params.angular_frequency} ζ={params.damping_ratio} "
            f"never settles; the cycle will not advance"
        )
    else:
        logger.info(
            f"Primary spring ω={params.angular_frequency} ζ={params.damping_ratio}: "
            f"~{ticks} ticks ({ticks / settings.animation.frame_rate:.1f}s) per half cycle"
        )


# =============================================================================
# Entry Point
# =============================================================================

def main(
    argv: Optional[List[str]] = None,
    renderer: Optional[TerminalRenderer] = None,
    input_fn: Callable[[str], str] = input,
    max_ticks: Optional[int] = None,
) -> int:
    """
    Run termgym.

    Args:
        argv: Command-line arguments (sys.argv[1:] if None)
        renderer: Output (stdout terminal if None)
        input_fn: Line reader for the interactive menu
        max_ticks: Stop the animation after this many ticks (None = until cancelled)

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)

    try:
        settings = apply_cli_overrides(load_config(args.config), args)
    except (ValueError, yaml.YAMLError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    setup_logging(settings)

    localizer = Localizer.load(
        settings.locale.language,
        directory=settings.locale.directory,
        default_language=settings.locale.default_language,
    )

    if args.help:
        print(localizer.t("language_help"))
        return 0

    renderer = renderer or TerminalRenderer()

    if args.exercise:
        kind = ExerciseKind(args.exercise)
    else:
        try:
            kind = select_exercise(localizer, renderer, input_fn)
        except KeyboardInterrupt:
            logger.info("Interrupted at the exercise menu")
            return 0
        if kind is None:
            return 1

    session = create_exercise(kind, localizer, settings)
    _log_settle_estimate(settings)

    renderer.hide_cursor()
    try:
        if not args.no_countdown and settings.startup.countdown_seconds > 0:
            run_countdown(localizer, renderer, settings.startup.countdown_seconds)

        loop = AnimationLoop(
            session,
            renderer,
            localizer,
            frame_rate=settings.animation.frame_rate,
            max_ticks=max_ticks,
        )
        asyncio.run(loop.run())
    except KeyboardInterrupt:
        # Interrupted before the loop took over signal handling
        logger.info("Interrupted during startup")
    finally:
        renderer.show_cursor()

    return 0


if __name__ == "__main__":
    sys.exit(main())
