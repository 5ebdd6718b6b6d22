"""Reading and writing catalog files.

Components:
    parse_catalog - Parse catalog contents already in memory
    load_catalog - Read and parse one catalog file
    write_catalog - Serialize extracted messages to a catalog file
    PathCatalogLoader - Per-locale loader with path-traversal prevention

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from taglocalize.constants import MAX_CATALOG_SIZE
from taglocalize.diagnostics import CatalogError, ErrorTemplate
from taglocalize.locale_utils import validate_locale
from taglocalize.syntax import ParsedMessage
from taglocalize.types import LocaleCode

from .formats import ParsedCatalog, unique_messages
from .registry import catalog_formats, get_catalog_format

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Functions
    "parse_catalog",
    "load_catalog",
    "write_catalog",
    # Concrete loader
    "PathCatalogLoader",
]

logger = logging.getLogger(__name__)


def parse_catalog(
    path: str,
    contents: str,
    *,
    format_name: str | None = None,
    strict_locale: bool = False,
) -> ParsedCatalog:
    """Parse catalog contents.

    Args:
        path: File path, used for format detection and diagnostics
        contents: Catalog file contents
        format_name: Format to use; detected from path and contents if None
        strict_locale: Require Babel to confirm the declared locale exists

    Returns:
        ParsedCatalog with the store and any per-entry diagnostics

    Raises:
        CatalogError: If the contents are too large, no format accepts
            them, or they are not a valid catalog
    """
    if len(contents) > MAX_CATALOG_SIZE:
        diagnostic = ErrorTemplate.catalog_too_large(path, len(contents), MAX_CATALOG_SIZE)
        raise CatalogError(diagnostic, path=path)

    if format_name is not None:
        adapter = get_catalog_format(format_name)
    else:
        for candidate in catalog_formats():
            if candidate.parser.can_parse(path, contents):
                adapter = candidate
                break
        else:
            raise CatalogError(ErrorTemplate.catalog_no_parser(path), path=path)

    catalog = adapter.parser.parse(path, contents)
    if strict_locale and catalog.locale is not None:
        validate_locale(catalog.locale, strict=True)

    for diagnostic in catalog.diagnostics.messages:
        if diagnostic.severity == "error":
            logger.error("%s", diagnostic.message)
        else:
            logger.warning("%s", diagnostic.message)
    logger.info(
        "Loaded %s catalog %s for locale %s: %d message(s)",
        adapter.name,
        path,
        catalog.locale,
        len(catalog.store),
    )
    return catalog


def load_catalog(
    path: str | Path,
    *,
    format_name: str | None = None,
    strict_locale: bool = False,
) -> ParsedCatalog:
    """Read a catalog file (UTF-8) and parse it.

    Raises:
        CatalogError: See parse_catalog
        FileNotFoundError: If the file doesn't exist
        OSError: If the file cannot be read
    """
    contents = Path(path).read_text(encoding="utf-8")
    return parse_catalog(
        str(path), contents, format_name=format_name, strict_locale=strict_locale
    )


def write_catalog(
    path: str | Path,
    messages: Sequence[ParsedMessage],
    *,
    format_name: str,
    source_locale: LocaleCode,
    **options: Any,
) -> Path:
    """Serialize extracted messages and write them as a catalog file.

    Parent directories are created as needed. Messages repeating an
    earlier id are dropped with a warning.

    Args:
        path: Output file
        messages: Extracted messages, in source order
        format_name: Registered format to write
        source_locale: Locale the messages are written in
        **options: Format-specific serializer options, e.g.
            use_legacy_ids=True for xliff

    Returns:
        The path written

    Raises:
        CatalogError: If format_name is not registered
        TypeError: If the format does not accept one of the options
        OSError: If the file cannot be written
    """
    adapter = get_catalog_format(format_name)
    unique = unique_messages(messages)
    contents = adapter.serializer(source_locale, **options).serialize(unique)
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(contents, encoding="utf-8")
    logger.info("Wrote %s catalog %s with %d message(s)", adapter.name, output, len(unique))
    return output


@dataclass(frozen=True, slots=True)
class PathCatalogLoader:
    """Loads one catalog file per locale from a path template.

    Security:
        Locale codes containing path separators or ".." are rejected, and
        the resolved path must stay within a fixed root directory.

    Example:
        >>> loader = PathCatalogLoader("locales/messages.{locale}.json")
        >>> catalog = loader.load("fr")
        # Loads from: locales/messages.fr.json

    Attributes:
        path_template: Path template with {locale} placeholder
        root_dir: Fixed root directory for path traversal validation.
                  Defaults to the static prefix of path_template.
        format_name: Catalog format; detected per file if None
    """

    path_template: str
    root_dir: str | None = None
    format_name: str | None = None
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory and validate template.

        Raises:
            ValueError: If path_template does not contain {locale}
        """
        if "{locale}" not in self.path_template:
            msg = (
                f"path_template must contain '{{locale}}' placeholder, "
                f"got: '{self.path_template}'"
            )
            raise ValueError(msg)

        if self.root_dir is not None:
            resolved = Path(self.root_dir).resolve()
        else:
            static_prefix = self.path_template.split("{locale}")[0]
            static_dir = static_prefix.rpartition("/")[0] if "/" in static_prefix else ""
            resolved = Path(static_dir).resolve() if static_dir else Path.cwd().resolve()
        object.__setattr__(self, "_resolved_root", resolved)

    @staticmethod
    def _validate_locale(locale: LocaleCode) -> None:
        """Reject locale codes that could escape the catalog directory.

        Raises:
            ValueError: If locale contains unsafe path components
        """
        if not locale:
            msg = "Locale code cannot be empty"
            raise ValueError(msg)
        if ".." in locale:
            msg = f"Path traversal sequences not allowed in locale: '{locale}'"
            raise ValueError(msg)
        if "/" in locale or "\\" in locale:
            msg = f"Path separators not allowed in locale: '{locale}'"
            raise ValueError(msg)

    def describe_path(self, locale: LocaleCode) -> str:
        """Return the catalog path for a locale, for diagnostics."""
        return self.path_template.replace("{locale}", locale)

    def load(self, locale: LocaleCode) -> ParsedCatalog:
        """Load the catalog for a locale.

        Raises:
            ValueError: If locale is unsafe or the path escapes root_dir
            FileNotFoundError: If the file doesn't exist
            CatalogError: If the file is not a valid catalog
        """
        self._validate_locale(locale)
        full_path = Path(self.describe_path(locale)).resolve()
        try:
            full_path.relative_to(self._resolved_root)
        except ValueError:
            msg = f"Path traversal detected: resolved path escapes root directory. locale='{locale}'"
            raise ValueError(msg) from None
        return load_catalog(full_path, format_name=self.format_name)
