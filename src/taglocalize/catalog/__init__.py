"""Translation catalog files: parsing, serialization and asset copying.

Python 3.13+.
"""

from .arb_format import ArbTranslationParser, ArbTranslationSerializer
from .assets import AssetTranslationHandler, AssetWriteResult, OutputPathFn
from .formats import (
    CatalogFormatAdapter,
    ParsedCatalog,
    TranslationParser,
    TranslationSerializer,
)
from .json_format import JsonTranslationParser, JsonTranslationSerializer
from .loading import PathCatalogLoader, load_catalog, parse_catalog, write_catalog
from .registry import catalog_formats, get_catalog_format
from .xliff_format import XliffTranslationParser, XliffTranslationSerializer

__all__ = [
    "ArbTranslationParser",
    "ArbTranslationSerializer",
    "AssetTranslationHandler",
    "AssetWriteResult",
    "CatalogFormatAdapter",
    "JsonTranslationParser",
    "JsonTranslationSerializer",
    "OutputPathFn",
    "ParsedCatalog",
    "PathCatalogLoader",
    "TranslationParser",
    "TranslationSerializer",
    "XliffTranslationParser",
    "XliffTranslationSerializer",
    "catalog_formats",
    "get_catalog_format",
    "load_catalog",
    "parse_catalog",
    "write_catalog",
]
