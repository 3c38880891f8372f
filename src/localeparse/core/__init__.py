"""Core utilities shared by the parser and the validation layer.

Exports:
    LocaleError: Base exception for the strict and detection layers
    LocaleValidationError: Locale unknown to CLDR
    LocaleDetectionError: No system locale could be determined
    BabelImportError: Babel required but not installed

Python 3.13+.
"""

from .babel_compat import BabelImportError
from .errors import LocaleDetectionError, LocaleError, LocaleValidationError

__all__ = [
    "BabelImportError",
    "LocaleDetectionError",
    "LocaleError",
    "LocaleValidationError",
]
