"""Translation store: message id to parsed translation, per locale.

A store is built once, from a catalog or a plain mapping of flat target
texts, and is read-only afterwards. Readers on several threads are safe
because nothing mutates the underlying mapping after construction.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from taglocalize.syntax import ParsedTranslation, parse_translation
from taglocalize.types import LocaleCode, MessageId, TargetMessage

__all__ = ["TranslationStore"]

logger = logging.getLogger(__name__)


class TranslationStore(Mapping[MessageId, ParsedTranslation]):
    """Immutable mapping of message id to ParsedTranslation.

    No fallback entry: looking up a missing id raises KeyError, and the
    translator reports it as TranslationNotFoundError.

    Example:
        >>> store = TranslationStore.from_target_messages("fr", {"greeting": "Bonjour {$0} !"})
        >>> store["greeting"].placeholder_names
        ('0',)
        >>> store.locale
        'fr'
    """

    __slots__ = ("_entries", "_locale")

    def __init__(
        self,
        entries: Mapping[MessageId, ParsedTranslation] | None = None,
        *,
        locale: LocaleCode | None = None,
    ) -> None:
        """Initialize TranslationStore.

        Args:
            entries: Parsed translations keyed by message id (copied)
            locale: Target locale of the translations (optional)
        """
        self._entries: Mapping[MessageId, ParsedTranslation] = MappingProxyType(
            dict(entries or {})
        )
        self._locale = locale

    @classmethod
    def from_target_messages(
        cls,
        locale: LocaleCode | None,
        translations: Mapping[MessageId, TargetMessage],
    ) -> TranslationStore:
        """Build a store by parsing flat target texts.

        Args:
            locale: Target locale of the translations
            translations: Flat {$name} texts keyed by message id

        Returns:
            New TranslationStore
        """
        entries: dict[MessageId, ParsedTranslation] = {}
        for message_id, text in translations.items():
            entries[message_id] = parse_translation(text)
            logger.debug("Parsed translation: %s", message_id)
        store = cls(entries, locale=locale)
        logger.info(
            "TranslationStore built for locale %s with %d message(s)", locale, len(store)
        )
        return store

    @property
    def locale(self) -> LocaleCode | None:
        """Target locale of the translations."""
        return self._locale

    def merged(self, other: Mapping[MessageId, ParsedTranslation]) -> TranslationStore:
        """Return a new store with other's entries layered over this one.

        Entries in other replace entries with the same id. The locale of
        other is kept when it is a TranslationStore with a locale set.
        """
        entries = dict(self._entries)
        for message_id, translation in other.items():
            if message_id in entries:
                logger.debug("Overriding translation: %s", message_id)
            entries[message_id] = translation
        locale = self._locale
        if isinstance(other, TranslationStore) and other.locale is not None:
            locale = other.locale
        return TranslationStore(entries, locale=locale)

    def __getitem__(self, message_id: MessageId) -> ParsedTranslation:
        return self._entries[message_id]

    def __iter__(self) -> Iterator[MessageId]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"TranslationStore(locale={self._locale!r}, messages={len(self._entries)})"
