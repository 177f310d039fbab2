"""Pytest configuration for monetext test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz

Shared fixtures pin locale conventions explicitly so expectations do not
drift with CLDR releases:
- en_ctx: English (US) with "$n" / "($n)" currency patterns
- fr_ctx: French layout with "." decimal and "n $" / "-n $" patterns
- kea_ctx: Cape Verdean layout whose currency decimal separator is "$"
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from monetext.constants import NBSP
from monetext.currency import Currency, CurrencyRegistry
from monetext.runtime import CurrencyConventions, LocaleContext, NumberConventions

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI profile: fast feedback (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


# =============================================================================
# AUTO-DETECT EXECUTION CONTEXT
# =============================================================================


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested.

    Behavior:
    - Normal test run (pytest tests/): Fuzz tests are SKIPPED
    - Explicit fuzz run (pytest -m fuzz): Fuzz tests run
    """
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# LOCALE AND CURRENCY FIXTURES
# =============================================================================


@pytest.fixture
def en_ctx() -> LocaleContext:
    """English (US) conventions: "1,234.56", "$n", "($n)"."""
    return LocaleContext(
        locale_code="en_US",
        language="en",
        territory="US",
        region_currency="USD",
    )


@pytest.fixture
def fr_ctx() -> LocaleContext:
    """French layout with "." decimal: "n $", "-n $"."""
    return LocaleContext(
        locale_code="fr_FR",
        language="fr",
        territory="FR",
        region_currency="EUR",
        currency=CurrencyConventions(positive_pattern=3, negative_pattern=8),
    )


@pytest.fixture
def kea_ctx() -> LocaleContext:
    """Cape Verdean layout pinned to a "$" currency separator ("1 123$45")."""
    return LocaleContext(
        locale_code="kea_CV",
        language="kea",
        territory="CV",
        region_currency="CVE",
        number=NumberConventions(decimal_separator=",", group_separator=NBSP),
        currency=CurrencyConventions(
            decimal_separator="$",
            group_separator=NBSP,
            positive_pattern=3,
            negative_pattern=8,
            decimal_separator_is_symbol=True,
        ),
    )


@pytest.fixture
def usd() -> Currency:
    return Currency.create("USD", 2, "US Dollar", "$")


@pytest.fixture
def eur() -> Currency:
    return Currency.create("EUR", 2, "Euro", "€")


@pytest.fixture
def jpy() -> Currency:
    return Currency.create("JPY", 0, "Japanese Yen", "¥")


@pytest.fixture
def cad() -> Currency:
    return Currency.create("CAD", 2, "Canadian Dollar", "CA$")


@pytest.fixture
def cve() -> Currency:
    return Currency.create("CVE", 2, "Cape Verdean Escudo", "$")


@pytest.fixture
def registry(
    usd: Currency, eur: Currency, jpy: Currency, cad: Currency
) -> CurrencyRegistry:
    """USD, EUR, JPY and CAD with invariant symbols."""
    return CurrencyRegistry("Majors", [usd, eur, jpy, cad])


@pytest.fixture
def kea_registry(cve: Currency, eur: Currency) -> CurrencyRegistry:
    """CVE (symbol "$") and EUR."""
    return CurrencyRegistry("Cabo Verde", [cve, eur])
