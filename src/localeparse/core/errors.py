"""Error types for the strict validation and system detection layers.

The tolerant parser (locale_utils.parse_locale) is total and never raises.
These exceptions belong to the opt-in layers around it, which callers use
when they need a locale that is known to CLDR or actually configured.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "LocaleDetectionError",
    "LocaleError",
    "LocaleValidationError",
]


class LocaleError(Exception):
    """Base exception for all localeparse errors.

    Attributes:
        locale_code: The locale input that caused the error (may be empty)
    """

    def __init__(self, message: str, locale_code: str = "") -> None:
        """Initialize LocaleError.

        Args:
            message: Human-readable error message
            locale_code: Offending locale input, if any
        """
        super().__init__(message)
        self.locale_code = locale_code


class LocaleValidationError(LocaleError, ValueError):
    """Locale is syntactically parseable but unknown to CLDR.

    Subclasses ValueError so callers catching Babel's historical
    ValueError contract keep working.
    """


class LocaleDetectionError(LocaleError, RuntimeError):
    """No usable locale found in the OS or the POSIX environment variables."""
