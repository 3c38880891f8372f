"""Locale string parsing and normalization.

Turns free-form locale strings ("en", "EN_us", " de_DE.UTF-8 ", "en-US",
"en_US_WIN") into an immutable ParsedLocale with a lowercase language,
an uppercase country, and an untouched variant.

Parsing is tolerant by design: parse_locale() is a total function over
str and never raises. Callers that need a locale known to CLDR layer
localeparse.validation on top of it.

The pipeline is three isolated steps, each exported and testable on its own:
    strip_locale_input -> split_locale_segments -> normalize_language/country

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from localeparse.constants import (
    BCP47_SEPARATOR,
    DEFAULT_LOCALE,
    ENCODING_MARKER,
    LOCALE_ENV_VARS,
    LOCALE_SEPARATOR,
    MAX_LOCALE_SEGMENTS,
    MODIFIER_MARKER,
    PSEUDO_LOCALES,
)
from localeparse.core.errors import LocaleDetectionError

__all__ = [
    "ParsedLocale",
    "get_system_locale",
    "normalize_country",
    "normalize_language",
    "normalize_locale",
    "parse_locale",
    "split_locale_segments",
    "strip_locale_input",
]

logger = logging.getLogger(__name__)

# Characters that only keep their literal meaning when every slot is explicit
_LITERAL_CHARS = (BCP47_SEPARATOR, ENCODING_MARKER, MODIFIER_MARKER)


@dataclass(frozen=True, slots=True)
class ParsedLocale:
    """Immutable language/country/variant triple.

    Absent components are empty strings, never None. A ParsedLocale is
    fully determined by its three fields, so equality and hashing are by value.

    Examples:
        >>> parse_locale("EN_us")
        ParsedLocale(language='en', country='US', variant='')
        >>> str(parse_locale(" fr_CA "))
        'fr_CA'
    """

    language: str = ""
    country: str = ""
    variant: str = ""

    @property
    def has_country(self) -> bool:
        return bool(self.country)

    @property
    def has_variant(self) -> bool:
        return bool(self.variant)

    @property
    def is_empty(self) -> bool:
        """True when no component was recovered from the input."""
        return not (self.language or self.country or self.variant)

    def _join(self, separator: str, *, all_slots: bool = False) -> str:
        # Keep the empty country slot when a variant follows it so the
        # string re-parses to an equal value ("en__WIN").
        if self.variant or all_slots:
            return separator.join((self.language, self.country, self.variant))
        if self.country:
            return separator.join((self.language, self.country))
        return self.language

    def to_posix(self) -> str:
        """Canonical POSIX form, e.g. 'en_US' or 'en_US_WIN'.

        Literal hyphens, dots or at-signs in language or country would be
        read back as separators or suffixes, so such values spell out every
        slot: ParsedLocale("x.y") -> "x.y__".
        """
        literal = any(char in self.language + self.country for char in _LITERAL_CHARS)
        return self._join(LOCALE_SEPARATOR, all_slots=literal)

    def to_bcp47(self) -> str:
        """Same components joined with hyphens, e.g. 'en-US'."""
        return self._join(BCP47_SEPARATOR)

    def __str__(self) -> str:
        return self.to_posix()


def strip_locale_input(value: str) -> str:
    """Trim outer whitespace and drop POSIX encoding/modifier suffixes.

    Args:
        value: Raw locale string

    Returns:
        The locale part only, e.g. " de_DE.UTF-8 " -> "de_DE",
        "sr_RS@latin" -> "sr_RS". A marker at position 0 is not a suffix
        and is left in place.

    Suffixes are only recognized after the last "_" of a value with at
    most one "_". Once a variant slot is present the text is kept whole,
    so "en_US_v1.2" and "x.y_US" are not truncated.
    """
    text = value.strip()
    if text.count(LOCALE_SEPARATOR) <= 1:
        tail_start = text.rfind(LOCALE_SEPARATOR) + 1
        cuts = [
            index
            for index in (text.find(marker, tail_start) for marker in (MODIFIER_MARKER, ENCODING_MARKER))
            if index > 0
        ]
        if cuts:
            text = text[: min(cuts)]
    return text.strip()


def split_locale_segments(value: str) -> tuple[str, str, str]:
    """Split a stripped locale string into (language, country, variant).

    Values containing "_" split on "_" only and keep hyphens literal.
    Pure BCP-47 tags without "_" split on "-". Each segment is trimmed.
    Missing segments are empty strings. Segments past the third are merged
    into the variant with their original separator.

    Example:
        >>> split_locale_segments("en-US")
        ('en', 'US', '')
        >>> split_locale_segments("a_b_c_d")
        ('a', 'b', 'c_d')
        >>> split_locale_segments("en_US_WIN-64")
        ('en', 'US', 'WIN-64')
    """
    if not value:
        return ("", "", "")
    separator = LOCALE_SEPARATOR if LOCALE_SEPARATOR in value else BCP47_SEPARATOR
    parts = [part.strip() for part in value.split(separator, MAX_LOCALE_SEGMENTS - 1)]
    parts.extend([""] * (MAX_LOCALE_SEGMENTS - len(parts)))
    return (parts[0], parts[1], parts[2])


def normalize_language(segment: str) -> str:
    """Lowercase a language segment. Non-letters pass through unchanged."""
    return segment.lower()


def normalize_country(segment: str) -> str:
    """Uppercase a country segment. Non-letters pass through unchanged."""
    return segment.upper()


def parse_locale(value: str) -> ParsedLocale:
    """Parse a free-form locale string into a ParsedLocale.

    Total over str: empty, malformed, or unknown codes still produce a
    value. Codes are normalized syntactically only and never checked
    against a registry of real locales.

    Args:
        value: Locale string such as "en", "de_DE", "EN_us", " en_US_WIN "

    Returns:
        ParsedLocale with lowercase language, uppercase country, and the
        variant as given

    Example:
        >>> parse_locale(" EN_us ")
        ParsedLocale(language='en', country='US', variant='')
        >>> parse_locale("")
        ParsedLocale(language='', country='', variant='')
    """
    language, country, variant = split_locale_segments(strip_locale_input(value))
    return ParsedLocale(
        language=normalize_language(language),
        country=normalize_country(country),
        variant=variant,
    )


def normalize_locale(value: str) -> str:
    """Canonical POSIX string for a locale input.

    Suitable as a cache key: every spelling of the same locale maps to the
    same string, and the result is a fixed point of this function.

    Example:
        >>> normalize_locale("EN-us")
        'en_US'
        >>> normalize_locale("de_DE.UTF-8")
        'de_DE'
    """
    return parse_locale(value).to_posix()


def _usable(value: str | None) -> bool:
    if not value:
        return False
    # "C.UTF-8" names the C environment too
    stripped = strip_locale_input(value)
    return bool(stripped) and stripped not in PSEUDO_LOCALES


def get_system_locale(*, raise_on_failure: bool = False) -> ParsedLocale:
    """Detect the system locale from the OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    "C" and "POSIX" pseudo-locales (with or without an encoding suffix)
    and empty values are skipped.
    Encoding suffixes such as ".UTF-8" are dropped by parse_locale().

    Args:
        raise_on_failure: If True, raise LocaleDetectionError when no locale
            is found. If False (default), return DEFAULT_LOCALE parsed.

    Returns:
        Detected locale as a ParsedLocale

    Raises:
        LocaleDetectionError: If raise_on_failure is True and no locale is found
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError) as e:
        logger.debug("locale.getlocale() failed: %s", e)
        system_locale = None

    if _usable(system_locale):
        logger.debug("System locale from locale.getlocale(): %s", system_locale)
        return parse_locale(system_locale)

    for var in LOCALE_ENV_VARS:
        value = os.environ.get(var)
        if _usable(value):
            logger.debug("System locale from %s: %s", var, value)
            return parse_locale(value)

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise LocaleDetectionError(msg)

    logger.debug("No system locale configured, using %s", DEFAULT_LOCALE)
    return parse_locale(DEFAULT_LOCALE)
