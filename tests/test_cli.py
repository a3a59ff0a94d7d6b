"""
Command Line Tests
==================

Tests for flag parsing, the interactive menu, the countdown and the
full startup sequence.
"""

import pytest

from termgym.exercises import ExerciseKind
from termgym.main import build_parser, main, run_countdown, select_exercise


def scripted_input(*answers):
    """input() double replaying answers, then EOF."""
    remaining = list(answers)

    def read(prompt):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.lang is None
        assert args.exercise is None
        assert not args.help
        assert not args.no_countdown

    def test_flags(self):
        args = build_parser().parse_args([
            "--lang", "zh", "--exercise", "meditation", "--config", "x.yaml", "--no-countdown",
        ])
        assert args.lang == "zh"
        assert args.exercise == "meditation"
        assert args.config == "x.yaml"
        assert args.no_countdown

    def test_short_help(self):
        assert build_parser().parse_args(["-h"]).help

    def test_unknown_flag_exits_2(self):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--bogus"])
        assert exc_info.value.code == 2

    def test_unknown_exercise_exits_2(self):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--exercise", "yoga"])
        assert exc_info.value.code == 2


class TestSelectExercise:
    """Tests for the interactive menu."""

    def test_choices(self, renderer, localizer):
        assert select_exercise(localizer, renderer, scripted_input("1")) is ExerciseKind.STRENGTH
        assert select_exercise(localizer, renderer, scripted_input(" 2 ")) is ExerciseKind.MEDITATION

    def test_menu_rendered(self, renderer, localizer):
        select_exercise(localizer, renderer, scripted_input("1"))
        assert renderer.calls[0] == ("clear",)
        assert localizer.t("exercise_selection") in renderer.writes[0]

    def test_reprompts_on_invalid_input(self, renderer, localizer):
        kind = select_exercise(localizer, renderer, scripted_input("x", "3", "", "2"))
        assert kind is ExerciseKind.MEDITATION
        invalid = [lines for lines in renderer.writes if lines == [localizer.t("invalid_choice")]]
        assert len(invalid) == 3

    def test_eof(self, renderer, localizer):
        assert select_exercise(localizer, renderer, scripted_input()) is None


class TestCountdown:
    """Tests for the preparation countdown."""

    def test_counts_down(self, renderer, localizer):
        sleeps = []
        run_countdown(localizer, renderer, 3, sleep=sleeps.append)

        inline = [call[1] for call in renderer.calls if call[0] == "inline"]
        assert inline == ["Starting in 3...", "Starting in 2...", "Starting in 1..."]
        assert sleeps == [1.0, 1.0, 1.0, 1.0]
        assert renderer.writes[-1] == ["", "", localizer.t("lets_begin")]

    def test_preparation_screen_first(self, renderer, localizer):
        run_countdown(localizer, renderer, 1, sleep=lambda seconds: None)
        assert renderer.calls[0] == ("clear",)
        assert localizer.t("prepare_message") in renderer.writes[0]


class TestMain:
    """Tests for the full startup sequence."""

    def test_help(self, clean_env, restore_logging, capsys, localizer):
        assert main(["--help"]) == 0
        assert localizer.t("language_help") in capsys.readouterr().out

    def test_localized_help(self, clean_env, restore_logging, capsys):
        assert main(["--lang", "zh", "-h"]) == 0
        out = capsys.readouterr().out
        assert "termgym" in out
        assert "language_help" not in out

    def test_unknown_language_falls_back(self, clean_env, restore_logging, capsys, localizer):
        assert main(["--lang", "xx", "--help"]) == 0
        assert localizer.t("language_help") in capsys.readouterr().out

    def test_strength_run(self, clean_env, restore_logging, renderer, localizer):
        code = main(
            ["--exercise", "strength", "--no-countdown"],
            renderer=renderer,
            max_ticks=3,
        )
        assert code == 0
        assert renderer.calls[0] == ("hide_cursor",)
        assert renderer.calls[-1] == ("show_cursor",)
        assert localizer.t("workout_complete") in renderer.writes[-1]
        # Three ticks plus the summary
        assert renderer.clears == 4

    def test_menu_run(self, clean_env, restore_logging, renderer, localizer):
        code = main(
            ["--no-countdown"],
            renderer=renderer,
            input_fn=scripted_input("2"),
            max_ticks=2,
        )
        assert code == 0
        assert localizer.t("meditation_complete") in renderer.writes[-1]

    def test_menu_eof(self, clean_env, restore_logging, renderer):
        assert main([], renderer=renderer, input_fn=scripted_input()) == 1
        assert ("hide_cursor",) not in renderer.calls

    def test_interrupt_at_menu(self, clean_env, restore_logging, renderer):
        def interrupted(prompt):
            raise KeyboardInterrupt

        assert main([], renderer=renderer, input_fn=interrupted) == 0
        assert ("hide_cursor",) not in renderer.calls

    def test_interrupt_during_countdown(self, clean_env, restore_logging, renderer, monkeypatch):
        def interrupted(seconds):
            raise KeyboardInterrupt

        monkeypatch.setattr("termgym.main.time.sleep", interrupted)
        assert main(["--exercise", "strength"], renderer=renderer) == 0
        assert renderer.calls[-1] == ("show_cursor",)

    def test_empty_config_section_with_environment(
        self, clean_env, restore_logging, capsys, monkeypatch, localizer,
    ):
        (clean_env / "termgym.yaml").write_text("locale:\n", encoding="utf-8")
        monkeypatch.setenv("TERMGYM_LANG", "xx")
        assert main(["--help"]) == 0
        assert localizer.t("language_help") in capsys.readouterr().out

    def test_non_mapping_config(self, clean_env, restore_logging, capsys):
        path = clean_env / "list.yaml"
        path.write_text("- strength\n", encoding="utf-8")
        assert main(["--config", str(path), "--help"]) == 1
        assert "Invalid configuration" in capsys.readouterr().err

    def test_countdown_from_config(self, clean_env, restore_logging, renderer, monkeypatch):
        sleeps = []
        monkeypatch.setattr("termgym.main.time.sleep", sleeps.append)
        (clean_env / "termgym.yaml").write_text("startup:\n  countdown_seconds: 2\n", encoding="utf-8")

        assert main(["--exercise", "meditation"], renderer=renderer, max_ticks=1) == 0
        assert sleeps == [1.0, 1.0, 1.0]

    def test_invalid_config(self, clean_env, restore_logging, capsys):
        path = clean_env / "bad.yaml"
        path.write_text("animation:\n  frame_rate: 0\n", encoding="utf-8")
        assert main(["--config", str(path), "--exercise", "strength"]) == 1
        assert "Invalid configuration" in capsys.readouterr().err

    def test_lang_flag_beats_environment(self, clean_env, restore_logging, capsys, monkeypatch):
        monkeypatch.setenv("TERMGYM_LANG", "xx")
        assert main(["--lang", "zh", "--help"]) == 0
        out = capsys.readouterr().out
        assert "语言" in out or "用法" in out
