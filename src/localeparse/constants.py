"""Shared constants for localeparse.

This module provides centralized configuration constants used by the
tolerant parser, system locale detection, and the strict validation layer.
Placing constants here avoids circular imports and provides a single
source of truth.

Constants are grouped by domain:
- Separators: Characters that delimit locale segments and suffixes
- Defaults: Fallback values for detection and non-strict validation
- Cache limits: Memory bounds for the Babel locale cache
- Environment: POSIX variables consulted for system locale detection

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Separators
    "LOCALE_SEPARATOR",
    "BCP47_SEPARATOR",
    "ENCODING_MARKER",
    "MODIFIER_MARKER",
    "MAX_LOCALE_SEGMENTS",
    # Defaults
    "DEFAULT_LOCALE",
    "PSEUDO_LOCALES",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Environment
    "LOCALE_ENV_VARS",
]

# ============================================================================
# SEPARATORS
# ============================================================================

# POSIX segment separator (en_US_WIN).
LOCALE_SEPARATOR: str = "_"

# BCP-47 segment separator (en-US). Converted to LOCALE_SEPARATOR before splitting.
BCP47_SEPARATOR: str = "-"

# Start of a POSIX encoding suffix (de_DE.UTF-8).
ENCODING_MARKER: str = "."

# Start of a POSIX modifier suffix (sr_RS@latin).
MODIFIER_MARKER: str = "@"

# Meaningful segments: language, country, variant.
# Anything past the variant slot is merged into the variant.
MAX_LOCALE_SEGMENTS: int = 3

# ============================================================================
# DEFAULTS
# ============================================================================

# Returned by get_system_locale() when nothing is configured, and used by
# to_babel_locale(strict=False) when CLDR does not know the requested locale.
DEFAULT_LOCALE: str = "en_US"

# Values that name the portable C environment rather than a real locale.
PSEUDO_LOCALES: frozenset[str] = frozenset({"C", "POSIX"})

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel Locale instances in the strict validation layer.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# ENVIRONMENT
# ============================================================================

# Consulted in order after locale.getlocale(); first usable value wins.
LOCALE_ENV_VARS: tuple[str, ...] = ("LC_ALL", "LC_MESSAGES", "LANG")
