"""Pytest configuration for the localeparse tests.

Loads a Hypothesis profile (dev: 500 examples, ci: 50 derandomized,
verbose: 100 with progress) from HYPOTHESIS_PROFILE, or "ci" when CI=true.
The fuzz-marked parser test runs only with `pytest -m fuzz`.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from localeparse.validation import clear_locale_cache

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


# =============================================================================
# PROFILE SELECTION
# =============================================================================


def _detect_profile() -> str:
    """HYPOTHESIS_PROFILE if valid, else "ci" under CI=true, else "dev"."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZ MARKER
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the fuzz marker."""
    config.addinivalue_line(
        "markers",
        "fuzz: long-running parse_locale fuzz test (skipped unless -m fuzz)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip the fuzz-marked parser test unless `-m fuzz` selects it."""
    marker_expr = config.getoption("-m", default="")

    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def fresh_locale_cache():
    """Empty the Babel locale cache before and after the test."""
    clear_locale_cache()
    yield
    clear_locale_cache()
