"""Registry of built-in catalog formats.

Python 3.13+.
"""

from __future__ import annotations

from types import MappingProxyType

from taglocalize.diagnostics import CatalogError, ErrorTemplate
from taglocalize.enums import CatalogFormat

from .arb_format import ArbTranslationParser, ArbTranslationSerializer
from .formats import CatalogFormatAdapter
from .json_format import JsonTranslationParser, JsonTranslationSerializer
from .xliff_format import XliffTranslationParser, XliffTranslationSerializer

__all__ = ["catalog_formats", "get_catalog_format"]

_FORMATS: MappingProxyType[str, CatalogFormatAdapter] = MappingProxyType({
    CatalogFormat.JSON: CatalogFormatAdapter(
        name=CatalogFormat.JSON,
        parser=JsonTranslationParser(),
        serializer_factory=JsonTranslationSerializer,
    ),
    CatalogFormat.ARB: CatalogFormatAdapter(
        name=CatalogFormat.ARB,
        parser=ArbTranslationParser(),
        serializer_factory=ArbTranslationSerializer,
    ),
    CatalogFormat.XLIFF: CatalogFormatAdapter(
        name=CatalogFormat.XLIFF,
        parser=XliffTranslationParser(),
        serializer_factory=XliffTranslationSerializer,
    ),
})


def catalog_formats() -> tuple[CatalogFormatAdapter, ...]:
    """All registered formats, in the order parsers are tried."""
    return tuple(_FORMATS.values())


def get_catalog_format(name: str) -> CatalogFormatAdapter:
    """Look up a format by name (case-insensitive).

    Raises:
        CatalogError: If no format with that name is registered
    """
    adapter = _FORMATS.get(name.lower())
    if adapter is None:
        diagnostic = ErrorTemplate.catalog_format_unknown(name, tuple(_FORMATS))
        raise CatalogError(diagnostic, format_name=name)
    return adapter
