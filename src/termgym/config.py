"""
termgym Configuration
=====================

This module handles configuration loading for the terminal gym.

Configuration Sources (in order of precedence):
    1. Command-line flags (applied by main)
    2. Environment variables
    3. YAML config file
    4. Default values (lowest priority)

Environment Variable Mapping:
    TERMGYM_LANG               -> locale.language
    TERMGYM_LOCALE_DIR         -> locale.directory
    TERMGYM_FPS                -> animation.frame_rate
    TERMGYM_ANGULAR_FREQUENCY  -> spring.angular_frequency
    TERMGYM_DAMPING_RATIO      -> spring.damping_ratio
    TERMGYM_LOG_LEVEL          -> logging.level
    TERMGYM_LOG_FILE           -> logging.file

Settings are immutable once built. main() loads them once and passes them
down; there is no module-level settings instance.

Example:
    from termgym.config import load_config

    settings = load_config()
    print(settings.animation.frame_rate)
    print(settings.spring.damping_ratio)
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class AnimationConfig(_Frozen):
    """Frame pacing and physical range of the animation."""

    frame_rate: int = Field(default=30, ge=1, le=240, description="Ticks per second")
    animation_range: float = Field(
        default=8.0,
        gt=0,
        description="Magnitude R of the contract/expand extremes",
    )
    settle_epsilon: float = Field(
        default=0.5,
        gt=0,
        description="Position and velocity tolerance of the settling condition",
    )


class SpringConfig(_Frozen):
    """Primary spring parameters of the strength exercise."""

    angular_frequency: float = Field(default=4.0, gt=0, description="Angular frequency (rad/s)")
    damping_ratio: float = Field(default=0.3, ge=0, description="Damping ratio")


class MeditationConfig(_Frozen):
    """Breathing phase lengths in seconds (4-7-8 technique)."""

    inhale_seconds: float = Field(default=4.0, gt=0)
    hold_seconds: float = Field(default=7.0, gt=0)
    exhale_seconds: float = Field(default=8.0, gt=0)
    pause_seconds: float = Field(default=2.0, gt=0)


class LocaleConfig(_Frozen):
    """Localization configuration."""

    language: str = Field(default="en", description="Requested language code")
    default_language: str = Field(default="en", description="Fallback language code")
    directory: Optional[str] = Field(
        default=None,
        description="Directory of <code>.json locale files (bundled if unset)",
    )


class StartupConfig(_Frozen):
    """Preparation screen configuration."""

    countdown_seconds: int = Field(default=3, ge=0, le=60)


class LoggingConfig(_Frozen):
    """Logging configuration."""

    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(default="text", description="Log format: json or text")
    file: Optional[str] = Field(
        default=None,
        description="Log to this file instead of stderr",
    )


class Settings(_Frozen):
    """
    Main settings class for termgym.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    animation: AnimationConfig = Field(default_factory=AnimationConfig)
    spring: SpringConfig = Field(default_factory=SpringConfig)
    meditation: MeditationConfig = Field(default_factory=MeditationConfig)
    locale: LocaleConfig = Field(default_factory=LocaleConfig)
    startup: StartupConfig = Field(default_factory=StartupConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def default_search_paths() -> list:
    """Config file locations tried when no path is given."""
    return [
        Path("termgym.yaml"),
        Path("termgym.yml"),
        Path.home() / ".config" / "termgym" / "config.yaml",
    ]


def load_config(
    config_path: Optional[str] = None,
    environ: Optional[Dict[str, str]] = None,
) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to a YAML file. If None, searches common locations.
        environ: Environment mapping (os.environ if None)

    Returns:
        Settings: Loaded configuration

    Raises:
        ValueError: If the file or one of its sections is not a mapping
        pydantic.ValidationError: If a value is out of range
    """
    if config_path is None:
        for path in default_search_paths():
            if path.exists():
                config_path = str(path)
                break

    config_data: Dict[str, Any] = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}
        if not isinstance(config_data, dict):
            raise ValueError(
                f"Config file {config_path} must contain a mapping, "
                f"got {type(config_data).__name__}"
            )
        # An empty section (`locale:`) keeps its defaults
        config_data = {
            key: {} if value is None else value
            for key, value in config_data.items()
        }
    elif config_path:
        logger.warning(f"Config file {config_path} not found, using defaults")
    else:
        logger.debug("No config file found, using defaults and environment variables")

    _apply_env_overrides(config_data, os.environ if environ is None else environ)

    return Settings.model_validate(config_data)


def _section(config_data: dict, name: str) -> dict:
    """Mutable config section, created if absent."""
    section = config_data.setdefault(name, {})
    if not isinstance(section, dict):
        raise ValueError(f"Config section '{name}' must be a mapping, got {type(section).__name__}")
    return section


def _apply_env_overrides(config_data: dict, environ) -> None:
    """Apply environment variable overrides to config data."""

    # Locale settings
    if env_lang := environ.get("TERMGYM_LANG"):
        _section(config_data, "locale")["language"] = env_lang
    if env_dir := environ.get("TERMGYM_LOCALE_DIR"):
        _section(config_data, "locale")["directory"] = env_dir

    # Animation settings
    if env_fps := environ.get("TERMGYM_FPS"):
        _section(config_data, "animation")["frame_rate"] = int(env_fps)

    # Spring settings
    if env_freq := environ.get("TERMGYM_ANGULAR_FREQUENCY"):
        _section(config_data, "spring")["angular_frequency"] = float(env_freq)
    if env_damp := environ.get("TERMGYM_DAMPING_RATIO"):
        _section(config_data, "spring")["damping_ratio"] = float(env_damp)

    # Logging settings
    if env_log := environ.get("TERMGYM_LOG_LEVEL"):
        _section(config_data, "logging")["level"] = env_log
    if env_file := environ.get("TERMGYM_LOG_FILE"):
        _section(config_data, "logging")["file"] = env_file


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.WARNING)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        filename=settings.logging.file,
        force=True,
    )
