"""taglocalize - tagged-template message localization.

Source code marks user-visible text as tagged templates: static parts with
optional ":name:" placeholder blocks, interleaved with runtime values. At
run time a Localizer either renders the template unchanged or looks up a
translation by message id and reorders the values to fit it.

Public API:
    Localizer - Callable that renders (and optionally translates) templates
    localize - Pass-through Localizer
    load_translations - Build a translating Localizer from flat target texts
    make_template - Build a TemplateStrings from cooked (and raw) parts
    TemplateStrings - Static parts of a template with raw text and metadata
    parse_message - Extract id, placeholders and flat text from a template
    parse_translation - Parse flat {$name} target text
    TranslationStore - Immutable message id to translation mapping
    load_catalog - Read a JSON or ARB catalog file

Exceptions:
    LocalizeError - Base exception class
    TranslationNotFoundError - No catalog entry for a message
    PlaceholderNotFoundError - Translation names an unknown placeholder
    UnterminatedBlockError - Name or metadata block without closing marker
    CatalogError - Catalog file could not be read or written

Submodules:
    taglocalize.core - Template model and placeholder codec
    taglocalize.syntax - Message and translation parsing
    taglocalize.runtime - Store, translator and Localizer
    taglocalize.catalog - Catalog formats, loading and asset copying
    taglocalize.diagnostics - Error types and diagnostic formatting
"""

from .catalog import load_catalog
from .core import TemplateStrings, make_template
from .diagnostics import (
    CatalogError,
    LocalizeError,
    PlaceholderNotFoundError,
    TranslationNotFoundError,
    UnterminatedBlockError,
)
from .runtime import Localizer, TranslationStore, load_translations, localize
from .syntax import parse_message, parse_translation

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("taglocalize")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__recommended_encoding__ = "UTF-8"

__all__ = [
    "CatalogError",
    "LocalizeError",
    "Localizer",
    "PlaceholderNotFoundError",
    "TemplateStrings",
    "TranslationNotFoundError",
    "TranslationStore",
    "UnterminatedBlockError",
    "__recommended_encoding__",
    "__version__",
    "load_catalog",
    "load_translations",
    "localize",
    "make_template",
    "parse_message",
    "parse_translation",
]
