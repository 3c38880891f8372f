"""Hypothesis strategies for localeparse property-based testing.

Usage:
    from tests.strategies import locale_codes, noisy_locale_inputs
    from tests.strategies.locales import locale_by_style

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - locale_by_style, noisy_locale_inputs, locale_with_suffix
"""

from .locales import (
    country_codes,
    language_codes,
    locale_by_style,
    locale_codes,
    locale_with_suffix,
    malformed_locales,
    noisy_locale_inputs,
    parsed_locales,
    random_case,
)

__all__ = [
    "country_codes",
    "language_codes",
    "locale_by_style",
    "locale_codes",
    "locale_with_suffix",
    "malformed_locales",
    "noisy_locale_inputs",
    "parsed_locales",
    "random_case",
]
