"""
Localized strings for a fan dial.

Each dial owns a `DialStrings` object built for one language. Strings are read
from the JSON catalogs in `locales/`, and a key missing from the chosen catalog
is served from en_US. Dials never share a strings object, so choosing a
language for one dial leaves every other dial's labels untouched.
"""

import json
import locale
import logging
from pathlib import Path
from typing import Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from fancontroller.core.fan_speed import FanSpeed

logger = logging.getLogger("FanController.I18n")

FALLBACK_LANGUAGE = "en_US"

# Native language names (endonyms). These are not translated.
LANGUAGE_MAP: Dict[str, str] = {
    "en_US": "English (US)",
    "de_DE": "Deutsch (Deutschland)",
    "es_ES": "Español (España)",
    "fr_FR": "Français (France)",
    "nl_NL": "Nederlands (Nederland)",
    "pl_PL": "Polski (Polska)",
}


def get_locales_path() -> Path:
    """Returns the absolute path to the 'locales' directory."""
    return Path(__file__).parent / "locales"


def load_catalog(language: str) -> Dict[str, str]:
    """Reads one language catalog. An unreadable catalog yields an empty dict."""
    catalog_file = get_locales_path() / f"{language}.json"
    try:
        with catalog_file.open('r', encoding='utf-8') as f:
            catalog = json.load(f)
    except (OSError, ValueError) as e:
        logger.error("Failed to load language catalog %s: %s", catalog_file, e)
        return {}
    if not isinstance(catalog, dict):
        logger.error("Language catalog %s does not hold an object.", catalog_file)
        return {}
    return catalog


def resolve_language(language_code: Optional[str] = None) -> str:
    """
    Maps a requested (or the system's) language code onto a supported one.

    "de-DE" and "de_DE" are the same language, and "fr_CA" resolves to the
    first supported variant of French. Anything else resolves to en_US.
    """
    if not language_code:
        try:
            language_code = locale.getlocale(locale.LC_CTYPE)[0]
        except (ValueError, TypeError) as e:
            logger.warning("Failed to read the system locale: %s", e)
        if not language_code:
            return FALLBACK_LANGUAGE

    requested = language_code.replace('-', '_')
    if requested in LANGUAGE_MAP:
        return requested
    base_language = requested.split('_')[0] + '_'
    for supported in LANGUAGE_MAP:
        if supported.startswith(base_language):
            return supported
    logger.warning("Language '%s' is not supported. Using %s.", language_code, FALLBACK_LANGUAGE)
    return FALLBACK_LANGUAGE


class DialStrings:
    """
    The user-facing strings of one dial, in one language.

    Strings are read by key (`get("FAN_OFF")`), by attribute
    (`strings.APP_WINDOW_TITLE`) or per speed (`label(FanSpeed.LOW)`).
    """

    def __init__(self, language_code: Optional[str] = None) -> None:
        self._fallback: Dict[str, str] = load_catalog(FALLBACK_LANGUAGE)
        if not self._fallback:
            raise RuntimeError(f"Failed to load the {FALLBACK_LANGUAGE} language catalog.")

        self.language = resolve_language(language_code)
        if self.language == FALLBACK_LANGUAGE:
            self._strings = self._fallback
        else:
            self._strings = load_catalog(self.language) or self._fallback
        logger.debug("DialStrings ready for language %s", self.language)

    def get(self, key: str) -> str:
        """Looks up `key`, falling back to en_US. Raises KeyError if no catalog has it."""
        value = self._strings.get(key)
        if value is None:
            value = self._fallback.get(key)
            if value is None:
                raise KeyError(f"String '{key}' is missing from all language catalogs.")
            logger.warning("String '%s' not found in %s; using %s.", key, self.language, FALLBACK_LANGUAGE)
        return str(value)

    def label(self, speed: "FanSpeed") -> str:
        """The display text for a fan speed."""
        return self.get(speed.label_key)

    def __getattr__(self, name: str) -> str:
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            return self.get(name)
        except KeyError as e:
            raise AttributeError(str(e)) from e
