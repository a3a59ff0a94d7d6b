"""
Localizer
=========

Key-based translation table loaded from JSON locale files.

Lookup contract:
    - t(key) returns the translation, or the key itself when missing
    - tf(key, *args) formats the looked-up template with str.format
      positional placeholders ("Reps: {0}")

Locale resolution:
    1. <directory>/<language>.json
    2. <directory>/<default_language>.json, with a warning
    3. empty table (every lookup returns its key), with a warning

A missing or broken locale is never fatal.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Mapping, Optional, Union


logger = logging.getLogger(__name__)


# Locale files shipped with the package
BUNDLED_LOCALES_DIR = Path(__file__).resolve().parent.parent / "locales"
DEFAULT_LANGUAGE = "en"


class LocaleError(Exception):
    """Locale file missing, unreadable or malformed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Locale file {path}: {reason}")


def read_locale_file(path: Path) -> Dict[str, str]:
    """
    Read one locale file.

    Raises:
        LocaleError: If the file is missing, unreadable or not a flat
            JSON object of strings.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise LocaleError(path, "not found") from None
    except OSError as e:
        raise LocaleError(path, f"unreadable ({e})") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise LocaleError(path, f"invalid JSON ({e})") from e

    if not isinstance(data, dict):
        raise LocaleError(path, "expected a JSON object")

    return {str(key): str(value) for key, value in data.items()}


class Localizer:
    """
    Translation lookup for one language.

    Attributes:
        language: Language actually loaded (after fallback)
        requested_language: Language originally requested

    Example:
        localizer = Localizer.load("zh")

        print(localizer.t("title"))
        print(localizer.tf("rep_counter", 3))
    """

    def __init__(
        self,
        translations: Optional[Mapping[str, str]] = None,
        language: str = DEFAULT_LANGUAGE,
        requested_language: Optional[str] = None,
    ) -> None:
        self._translations: Dict[str, str] = dict(translations or {})
        self.language = language
        self.requested_language = requested_language or language

    @classmethod
    def load(
        cls,
        language: str = DEFAULT_LANGUAGE,
        directory: Optional[Union[str, Path]] = None,
        default_language: str = DEFAULT_LANGUAGE,
    ) -> "Localizer":
        """
        Load a language with fallback to the default language.

        Args:
            language: Requested language code (e.g. "en", "zh")
            directory: Directory of <code>.json files (bundled if None)
            default_language: Language used when the requested one fails

        Returns:
            Localizer, never raises for locale problems
        """
        locales_dir = Path(directory) if directory is not None else BUNDLED_LOCALES_DIR

        try:
            translations = read_locale_file(locales_dir / f"{language}.json")
            logger.info(f"Loaded locale '{language}' ({len(translations)} keys)")
            return cls(translations, language=language, requested_language=language)
        except LocaleError as e:
            if language == default_language:
                logger.warning(f"{e}; continuing without translations")
                return cls({}, language=language, requested_language=language)
            logger.warning(f"{e}; falling back to '{default_language}'")

        try:
            translations = read_locale_file(locales_dir / f"{default_language}.json")
        except LocaleError as e:
            logger.warning(f"{e}; continuing without translations")
            translations = {}

        return cls(translations, language=default_language, requested_language=language)

    @property
    def fell_back(self) -> bool:
        """Whether the requested language could not be loaded."""
        return self.language != self.requested_language

    def t(self, key: str) -> str:
        """Translate a key, returning the key itself if not found."""
        return self._translations.get(key, key)

    def tf(self, key: str, *args: object) -> str:
        """Translate a key and format the template positionally."""
        return self.t(key).format(*args)

    def __contains__(self, key: str) -> bool:
        return key in self._translations

    def __len__(self) -> int:
        return len(self._translations)
