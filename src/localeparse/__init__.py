"""localeparse - tolerant locale string parsing with optional CLDR validation.

Turns free-form strings such as "en", " EN_us ", "de_DE.UTF-8" or
"en_US_WIN" into an immutable ParsedLocale. Parsing never fails; strict
checking against CLDR is a separate, opt-in layer.

Public API:
    ParsedLocale - Immutable (language, country, variant) value
    parse_locale - Tolerant parser, total over str
    normalize_locale - Canonical POSIX string for a locale input
    get_system_locale - Locale from the OS and POSIX environment variables

Exceptions:
    LocaleError - Base exception class
    LocaleValidationError - Locale unknown to CLDR (strict layer)
    LocaleDetectionError - No system locale configured

Submodules:
    localeparse.locale_utils - Parser pipeline steps
    localeparse.validation - CLDR validation via Babel (requires localeparse[babel])
    localeparse.constants - Separators, defaults, cache bounds
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .core import LocaleDetectionError, LocaleError, LocaleValidationError
from .locale_utils import (
    ParsedLocale,
    get_system_locale,
    normalize_locale,
    parse_locale,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("localeparse")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "LocaleDetectionError",
    "LocaleError",
    "LocaleValidationError",
    "ParsedLocale",
    "__version__",
    "get_system_locale",
    "normalize_locale",
    "parse_locale",
]
