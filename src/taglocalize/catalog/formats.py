"""Catalog format protocols and shared result types.

Each catalog file format is one adapter: a parser that turns file contents
into a TranslationStore, and a serializer that writes extracted messages
back out. Adapters are selected by format name (see registry) or by asking
each parser whether it can read a given file.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

from taglocalize.diagnostics import CatalogError, Diagnostics, ErrorTemplate
from taglocalize.enums import CatalogFormat
from taglocalize.runtime import TranslationStore
from taglocalize.syntax import ParsedMessage
from taglocalize.types import LocaleCode

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocols
    "TranslationParser",
    "TranslationSerializer",
    # Adapter and result types
    "CatalogFormatAdapter",
    "ParsedCatalog",
    # Helpers shared by adapters
    "decode_json_object",
    "unique_messages",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ParsedCatalog:
    """Result of parsing one catalog file.

    Attributes:
        locale: Target locale declared by the file (None if undeclared)
        store: Parsed translations keyed by message id
        diagnostics: Warnings and per-entry errors found while parsing
    """

    locale: LocaleCode | None
    store: TranslationStore
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


class TranslationParser(Protocol):
    """Protocol for reading one catalog file format.

    This is a Protocol (structural typing) rather than ABC so that custom
    formats need not inherit from anything.
    """

    def can_parse(self, path: str, contents: str) -> bool:
        """Return True if this parser understands the given file."""

    def parse(self, path: str, contents: str) -> ParsedCatalog:
        """Parse file contents into a catalog.

        Raises:
            CatalogError: If the contents are not a valid catalog
        """


class TranslationSerializer(Protocol):
    """Protocol for writing extracted messages in one catalog file format."""

    def serialize(self, messages: Sequence[ParsedMessage]) -> str:
        """Render messages as the contents of a catalog file."""


@dataclass(frozen=True, slots=True)
class CatalogFormatAdapter:
    """One catalog file format: its name, parser and serializer factory.

    Attributes:
        name: Format name used for selection
        parser: Reads files of this format
        serializer_factory: Creates a serializer for a source locale and
            any format-specific keyword options
    """

    name: CatalogFormat
    parser: TranslationParser
    serializer_factory: Callable[..., TranslationSerializer]

    def serializer(self, source_locale: LocaleCode, **options: Any) -> TranslationSerializer:
        """Create a serializer for messages written in source_locale.

        Raises:
            TypeError: If the format does not accept one of the options
        """
        return self.serializer_factory(source_locale, **options)


def unique_messages(messages: Iterable[ParsedMessage]) -> list[ParsedMessage]:
    """Drop repeated message ids, keeping the first occurrence."""
    seen: set[str] = set()
    unique: list[ParsedMessage] = []
    for message in messages:
        if message.message_id in seen:
            logger.warning("Duplicate message id '%s'; keeping the first", message.message_id)
            continue
        seen.add(message.message_id)
        unique.append(message)
    return unique


def decode_json_object(
    path: str, contents: str, diagnostics: Diagnostics
) -> dict[str, Any]:
    """Decode a JSON catalog whose top level must be an object.

    Repeated keys are recorded as warnings; the first value is kept.

    Raises:
        CatalogError: If the contents are not JSON or not an object
    """

    def keep_first(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, value in pairs:
            if key in result:
                diagnostics.add(ErrorTemplate.catalog_duplicate_id(key, path))
                continue
            result[key] = value
        return result

    try:
        data = json.loads(contents, object_pairs_hook=keep_first)
    except json.JSONDecodeError as e:
        raise CatalogError(ErrorTemplate.catalog_unparseable(path, str(e)), path=path) from e
    if not isinstance(data, dict):
        diagnostic = ErrorTemplate.catalog_invalid_structure(path, "top level must be an object")
        raise CatalogError(diagnostic, path=path)
    return data
