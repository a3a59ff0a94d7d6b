"""
Localization Module
===================

Key → string lookup with identity fallback.

The animation core only needs `t(key)` and `tf(key, *args)`; a missing key
renders as the key itself.
"""

from termgym.i18n.localizer import (
    BUNDLED_LOCALES_DIR,
    DEFAULT_LANGUAGE,
    LocaleError,
    Localizer,
    read_locale_file,
)

__all__ = [
    "Localizer",
    "LocaleError",
    "read_locale_file",
    "BUNDLED_LOCALES_DIR",
    "DEFAULT_LANGUAGE",
]
