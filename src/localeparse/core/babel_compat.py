"""Lazy access to the optional Babel dependency.

The tolerant parser never imports Babel. Only localeparse.validation needs
it, and each of its public functions checks for it on entry so a missing
install fails with the name of the function that was called:

    from localeparse.core.babel_compat import babel_locale_api, require_babel

    def validate_locale(value: str) -> ParsedLocale:
        require_babel("validate_locale")
        ...

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale
    from babel.core import UnknownLocaleError

__all__ = [
    "BabelImportError",
    "babel_locale_api",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when strict locale validation is used without Babel installed."""

    def __init__(self, feature: str) -> None:
        """Create error naming the validation function that needs Babel.

        Args:
            feature: Name of the public function that was called
        """
        message = (
            f"{feature} requires Babel to check locales against CLDR data. "
            "Install with: pip install localeparse[babel]"
        )
        super().__init__(message)
        self.feature = feature


def require_babel(feature: str) -> None:
    """Raise BabelImportError naming feature if Babel is not installed.

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def babel_locale_api(feature: str) -> tuple[type[Locale], type[UnknownLocaleError]]:
    """Import Babel's Locale class and its unknown-locale exception.

    Args:
        feature: Name of the public function that was called, for the error

    Returns:
        (babel.Locale, babel.core.UnknownLocaleError)

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel(feature)
    from babel import Locale  # noqa: PLC0415
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return Locale, UnknownLocaleError
