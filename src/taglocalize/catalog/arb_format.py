"""Application Resource Bundle (ARB) catalog format.

    {
      "@@locale": "fr",
      "greeting": "Bonjour {$name} !",
      "@greeting": {
        "description": "Shown on the home page",
        "x-meaning": "salutation"
      }
    }

Keys beginning with "@" hold metadata and are not translations. The
serializer writes description and meaning of each message into its
"@id" entry when they are set.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import PurePath
from typing import Any

from taglocalize.diagnostics import CatalogError, Diagnostics, ErrorTemplate
from taglocalize.locale_utils import validate_locale
from taglocalize.runtime import TranslationStore
from taglocalize.syntax import ParsedMessage, ParsedTranslation, parse_translation
from taglocalize.types import LocaleCode, MessageId

from .formats import ParsedCatalog, decode_json_object, unique_messages

__all__ = ["ArbTranslationParser", "ArbTranslationSerializer"]

logger = logging.getLogger(__name__)

_LOCALE_KEY = "@@locale"
_METADATA_PREFIX = "@"


class ArbTranslationParser:
    """Reads ARB catalogs."""

    __slots__ = ()

    def can_parse(self, path: str, contents: str) -> bool:
        """True for .arb files whose top level declares @@locale."""
        if PurePath(path).suffix.lower() != ".arb":
            return False
        try:
            data = json.loads(contents)
        except json.JSONDecodeError:
            return False
        return isinstance(data, dict) and _LOCALE_KEY in data

    def parse(self, path: str, contents: str) -> ParsedCatalog:
        """Parse an ARB catalog.

        Raises:
            CatalogError: If the file is not JSON, lacks @@locale, or
                declares an unknown locale
        """
        diagnostics = Diagnostics()
        data = decode_json_object(path, contents, diagnostics)

        declared = data.get(_LOCALE_KEY)
        if not isinstance(declared, str) or not declared:
            diagnostic = ErrorTemplate.catalog_invalid_structure(
                path, f'"{_LOCALE_KEY}" must be a non-empty string'
            )
            raise CatalogError(diagnostic, path=path, format_name="arb")
        locale = validate_locale(declared)

        entries: dict[MessageId, ParsedTranslation] = {}
        for key, value in data.items():
            if key.startswith(_METADATA_PREFIX):
                continue
            if not isinstance(value, str):
                diagnostics.add(
                    ErrorTemplate.catalog_invalid_structure(
                        path, f'translation for "{key}" must be a string'
                    )
                )
                continue
            entries[key] = parse_translation(value)

        logger.debug("Parsed ARB catalog %s: %d message(s)", path, len(entries))
        return ParsedCatalog(
            locale=locale,
            store=TranslationStore(entries, locale=locale),
            diagnostics=diagnostics,
        )


@dataclass(frozen=True, slots=True)
class ArbTranslationSerializer:
    """Writes extracted messages as an ARB catalog.

    Attributes:
        source_locale: Locale the source messages are written in
    """

    source_locale: LocaleCode

    def serialize(self, messages: Sequence[ParsedMessage]) -> str:
        document: dict[str, Any] = {_LOCALE_KEY: self.source_locale}
        for message in unique_messages(messages):
            document[message.message_id] = message.message_string
            metadata: dict[str, str] = {}
            if message.description:
                metadata["description"] = message.description
            if message.meaning:
                metadata["x-meaning"] = message.meaning
            if metadata:
                document[f"{_METADATA_PREFIX}{message.message_id}"] = metadata
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"
