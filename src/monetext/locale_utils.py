"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling to ensure consistent cache keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from monetext.constants import DEFAULT_LOCALE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Normalize at the system boundary, then use the normalized form for
    cache keys and lookups.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "kea-CV")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "kea_CV")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from environment variables.

    Detection order: LC_ALL, LC_MESSAGES, LANG. Encoding suffixes
    (".UTF-8") are stripped and "C"/"POSIX" pseudo-locales are ignored.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return DEFAULT_LOCALE.

    Returns:
        Detected locale code in POSIX format.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.

    Example:
        >>> import os
        >>> os.environ['LANG'] = 'de_DE.UTF-8'
        >>> get_system_locale()
        'de_DE'
    """
    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX", ""):
            locale_code = value.split(".")[0].split("@")[0]
            if locale_code and locale_code not in ("C", "POSIX"):
                return normalize_locale(locale_code)

    if raise_on_failure:
        msg = "Cannot determine system locale from LC_ALL, LC_MESSAGES or LANG"
        raise RuntimeError(msg)
    return DEFAULT_LOCALE
