"""Tests for TranslationStore."""

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from taglocalize.runtime import TranslationStore
from taglocalize.syntax import parse_translation, serialize_translation
from tests.strategies import flat_translations


class TestTranslationStore:
    """Test store construction and lookup."""

    def test_from_target_messages(self) -> None:
        store = TranslationStore.from_target_messages("fr", {"greeting": "Bonjour {$name} !"})
        assert store.locale == "fr"
        assert len(store) == 1
        assert store["greeting"].placeholder_names == ("name",)

    def test_missing_id_raises_key_error(self) -> None:
        store = TranslationStore.from_target_messages("fr", {})
        with pytest.raises(KeyError):
            store["missing"]

    def test_get_returns_none_for_missing(self) -> None:
        store = TranslationStore()
        assert store.get("missing") is None
        assert store.locale is None

    def test_entries_copied(self) -> None:
        entries = {"a": parse_translation("A")}
        store = TranslationStore(entries, locale="fr")
        entries["b"] = parse_translation("B")
        assert "b" not in store

    def test_iteration(self) -> None:
        store = TranslationStore.from_target_messages("de", {"a": "A", "b": "B"})
        assert sorted(store) == ["a", "b"]

    def test_repr(self) -> None:
        store = TranslationStore.from_target_messages("de", {"a": "A"})
        assert repr(store) == "TranslationStore(locale='de', messages=1)"

    def test_logs_build(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="taglocalize.runtime.store"):
            TranslationStore.from_target_messages("fr", {"a": "A"})
        assert "TranslationStore built for locale fr with 1 message(s)" in caplog.text


class TestMerged:
    """Test layering stores."""

    def test_other_entries_override(self) -> None:
        base = TranslationStore.from_target_messages("fr", {"a": "old", "b": "B"})
        update = TranslationStore.from_target_messages("fr", {"a": "new"})
        merged = base.merged(update)
        assert serialize_translation(merged["a"]) == "new"
        assert serialize_translation(merged["b"]) == "B"
        assert serialize_translation(base["a"]) == "old"

    def test_locale_taken_from_other(self) -> None:
        base = TranslationStore.from_target_messages(None, {"a": "A"})
        update = TranslationStore.from_target_messages("fr_CA", {})
        assert base.merged(update).locale == "fr_CA"

    def test_locale_kept_for_plain_mapping(self) -> None:
        base = TranslationStore.from_target_messages("fr", {})
        merged = base.merged({"a": parse_translation("A")})
        assert merged.locale == "fr"
        assert "a" in merged

    @given(st.dictionaries(st.text(max_size=10), flat_translations(), max_size=5))
    def test_entries_preserved(self, translations: dict[str, str]) -> None:
        """Property: every input text is stored and flattens back unchanged."""
        store = TranslationStore.from_target_messages("fr", translations)
        assert len(store) == len(translations)
        for message_id, text in translations.items():
            assert serialize_translation(store[message_id]) == text
