"""Locale utilities for catalog locale codes.

Catalogs declare their target locale in BCP-47 form ("pt-BR"); Babel and
POSIX tooling use underscores ("pt_BR"). Normalization happens once, at the
catalog boundary, so that store locales compare consistently.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from taglocalize.core.babel_compat import (
    get_locale_class,
    get_unknown_locale_error,
    is_babel_available,
)
from taglocalize.diagnostics import CatalogError, ErrorTemplate

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
    "validate_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    locale_class = get_locale_class()
    return locale_class.parse(normalize_locale(locale_code))


def validate_locale(locale_code: str, *, strict: bool = False) -> str:
    """Normalize a catalog locale code, checking it against CLDR if possible.

    Without Babel installed the code is only normalized, unless strict
    is set, in which case BabelImportError is raised.

    Args:
        locale_code: Locale code declared by a catalog
        strict: Require Babel to confirm the locale exists

    Returns:
        POSIX-formatted locale code

    Raises:
        CatalogError: If Babel does not recognize the locale
        BabelImportError: If strict and Babel is not installed
    """
    normalized = normalize_locale(locale_code)
    if not strict and not is_babel_available():
        return normalized
    unknown_locale_error = get_unknown_locale_error()
    try:
        get_babel_locale(normalized)
    except (unknown_locale_error, ValueError) as e:
        raise CatalogError(ErrorTemplate.catalog_locale_unknown(locale_code, str(e))) from e
    return normalized
