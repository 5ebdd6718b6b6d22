"""Simple JSON catalog format.

    {
      "locale": "fr",
      "translations": {
        "greeting": "Bonjour {$name} !"
      }
    }

Target texts use the flat {$name} placeholder syntax. The serializer
writes the source-language message_string of each extracted message.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import PurePath

from taglocalize.diagnostics import CatalogError, Diagnostics, ErrorTemplate
from taglocalize.locale_utils import validate_locale
from taglocalize.runtime import TranslationStore
from taglocalize.syntax import ParsedMessage, ParsedTranslation, parse_translation
from taglocalize.types import LocaleCode, MessageId

from .formats import ParsedCatalog, decode_json_object, unique_messages

__all__ = ["JsonTranslationParser", "JsonTranslationSerializer"]

logger = logging.getLogger(__name__)


class JsonTranslationParser:
    """Reads simple JSON catalogs."""

    __slots__ = ()

    def can_parse(self, path: str, contents: str) -> bool:
        """True for .json files whose top level has locale and translations."""
        if PurePath(path).suffix.lower() != ".json":
            return False
        try:
            data = json.loads(contents)
        except json.JSONDecodeError:
            return False
        return isinstance(data, dict) and "locale" in data and "translations" in data

    def parse(self, path: str, contents: str) -> ParsedCatalog:
        """Parse a JSON catalog.

        Entries whose value is not a string are recorded as errors and
        skipped; the rest of the catalog still loads.

        Raises:
            CatalogError: If the file is not JSON, lacks a translations
                object, or declares an unknown locale
        """
        diagnostics = Diagnostics()
        data = decode_json_object(path, contents, diagnostics)

        translations = data.get("translations")
        if not isinstance(translations, dict):
            diagnostic = ErrorTemplate.catalog_invalid_structure(
                path, '"translations" must be an object'
            )
            raise CatalogError(diagnostic, path=path, format_name="json")

        locale: LocaleCode | None = None
        declared = data.get("locale")
        if isinstance(declared, str) and declared:
            locale = validate_locale(declared)
        elif declared is not None:
            diagnostic = ErrorTemplate.catalog_invalid_structure(
                path, '"locale" must be a non-empty string'
            )
            raise CatalogError(diagnostic, path=path, format_name="json")

        entries: dict[MessageId, ParsedTranslation] = {}
        for message_id, text in translations.items():
            if not isinstance(text, str):
                diagnostics.add(
                    ErrorTemplate.catalog_invalid_structure(
                        path, f'translation for "{message_id}" must be a string'
                    )
                )
                continue
            entries[message_id] = parse_translation(text)

        logger.debug("Parsed JSON catalog %s: %d message(s)", path, len(entries))
        return ParsedCatalog(
            locale=locale,
            store=TranslationStore(entries, locale=locale),
            diagnostics=diagnostics,
        )


@dataclass(frozen=True, slots=True)
class JsonTranslationSerializer:
    """Writes extracted messages as a simple JSON catalog.

    Attributes:
        source_locale: Locale the source messages are written in
    """

    source_locale: LocaleCode

    def serialize(self, messages: Sequence[ParsedMessage]) -> str:
        translations = {
            message.message_id: message.message_string
            for message in unique_messages(messages)
        }
        document = {"locale": self.source_locale, "translations": translations}
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"
