"""Strict locale validation against CLDR data.

parse_locale() accepts anything and only normalizes case and separators.
This module is the explicit, opt-in layer for callers that need a locale
Babel actually has data for. It requires the optional Babel dependency:

    pip install localeparse[babel]

Only language and country are checked. CLDR carries no data for free-form
variants such as "WIN", so the variant is dropped before the lookup.

Python 3.13+. Uses Babel for CLDR locale data.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from localeparse.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE
from localeparse.core.babel_compat import babel_locale_api, require_babel
from localeparse.core.errors import LocaleValidationError
from localeparse.locale_utils import ParsedLocale, normalize_locale, parse_locale

if TYPE_CHECKING:
    from functools import _CacheInfo

    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "is_known_locale",
    "locale_cache_info",
    "to_babel_locale",
    "validate_locale",
]

logger = logging.getLogger(__name__)

_MAX_LANGUAGE_LENGTH = 8


def _is_well_formed(parsed: ParsedLocale) -> bool:
    """Check the shape Babel expects before touching its data files.

    Language: 2 to 8 ASCII letters. Country: empty, 2 ASCII letters,
    or a 3-digit UN M.49 area code.
    """
    language = parsed.language
    if not (language.isascii() and language.isalpha()):
        return False
    if not 2 <= len(language) <= _MAX_LANGUAGE_LENGTH:
        return False
    country = parsed.country
    if not country:
        return True
    if not country.isascii():
        return False
    return (len(country) == 2 and country.isalpha()) or (
        len(country) == 3 and country.isdigit()
    )


def _resolve(parsed: ParsedLocale) -> Locale:
    """Look up language[_COUNTRY] in CLDR, raising LocaleValidationError."""
    locale_class, unknown_locale_error = babel_locale_api("localeparse.validation")

    if parsed.variant:
        logger.debug(
            "Dropping variant '%s' from '%s' for CLDR lookup", parsed.variant, parsed
        )

    if not _is_well_formed(parsed):
        msg = f"'{parsed}' is not a well-formed language[_COUNTRY] locale"
        raise LocaleValidationError(msg, str(parsed))
    identifier = ParsedLocale(parsed.language, parsed.country).to_posix()
    try:
        # parse() resolves likely subtags: zh_CN -> zh_Hans_CN
        return locale_class.parse(identifier)
    except (unknown_locale_error, ValueError) as e:
        msg = f"Unknown locale '{parsed}': {e}"
        raise LocaleValidationError(msg, str(parsed)) from e


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _load_babel_locale(canonical: str) -> Locale:
    # Keyed on normalize_locale() output so every spelling shares one entry
    return _resolve(parse_locale(canonical))


def to_babel_locale(parsed: ParsedLocale, *, strict: bool = True) -> Locale:
    """Build a Babel Locale for an already-parsed locale.

    Args:
        parsed: Result of parse_locale()
        strict: If True (default), raise for locales CLDR does not know.
            If False, log a warning and return the DEFAULT_LOCALE instead.

    Returns:
        Babel Locale for language and country

    Raises:
        LocaleValidationError: If strict and the locale is malformed or unknown
        BabelImportError: If Babel is not installed
    """
    require_babel("to_babel_locale")
    try:
        return _resolve(parsed)
    except LocaleValidationError as e:
        if strict:
            raise
        logger.warning("%s. Falling back to %s", e, DEFAULT_LOCALE)
        return _load_babel_locale(normalize_locale(DEFAULT_LOCALE))


def get_babel_locale(value: str) -> Locale:
    """Parse a locale string and return the matching Babel Locale, with caching.

    The cache is keyed on the canonical form, so " de_DE", "DE_de" and
    "de-DE" share one entry and return the same object. Thread-safe via
    lru_cache internal locking. Only successful lookups are cached;
    unknown locales raise on every call.

    Args:
        value: Locale string in any form parse_locale() accepts

    Returns:
        Babel Locale object

    Raises:
        LocaleValidationError: If the locale is malformed or unknown to CLDR
        BabelImportError: If Babel is not installed

    Example:
        >>> locale = get_babel_locale(" EN-us ")
        >>> locale.language
        'en'
        >>> locale.territory
        'US'
    """
    require_babel("get_babel_locale")
    return _load_babel_locale(normalize_locale(value))


def locale_cache_info() -> _CacheInfo:
    """Hit/miss statistics of the get_babel_locale() cache."""
    return _load_babel_locale.cache_info()


def clear_locale_cache() -> None:
    """Clear the get_babel_locale() cache."""
    _load_babel_locale.cache_clear()


def is_known_locale(value: str) -> bool:
    """Check whether CLDR has data for a locale string.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("is_known_locale")
    try:
        _load_babel_locale(normalize_locale(value))
    except LocaleValidationError:
        return False
    return True


def validate_locale(value: str) -> ParsedLocale:
    """Parse a locale string and require CLDR to know it.

    Args:
        value: Locale string in any form parse_locale() accepts

    Returns:
        The ParsedLocale, variant included

    Raises:
        LocaleValidationError: If the locale is malformed or unknown to CLDR
        BabelImportError: If Babel is not installed
    """
    require_babel("validate_locale")
    parsed = parse_locale(value)
    _load_babel_locale(parsed.to_posix())
    return parsed
