"""Tests for the Localizer runtime entry point."""

import logging
from collections.abc import Sequence
from typing import Any

import pytest
from hypothesis import given, settings

from taglocalize.core import TemplateLiteral, TemplateStrings, make_template
from taglocalize.diagnostics import TranslationNotFoundError
from taglocalize.runtime import (
    Localizer,
    TranslationStore,
    load_translations,
    localize,
    render_template,
)
from taglocalize.syntax import parse_message
from tests.strategies import source_templates


class TestPassThrough:
    """Rendering without a translate hook."""

    def test_name_blocks_stripped(self) -> None:
        strings = make_template(["a", ":x:b", "c"], ["a", ":x:b", "c"])
        assert localize(strings, 1, 2) == "a1b2c"

    def test_escaped_marker_preserved(self) -> None:
        strings = make_template(["", ": rest"], ["", "\\: rest"])
        assert localize(strings, 5) == "5: rest"

    def test_first_part_rendered_verbatim(self) -> None:
        """Only parts after a substitution can carry a name block."""
        assert localize(make_template([":-) smile :D"], [":-) smile :D"])) == ":-) smile :D"
        assert localize(make_template([":note: x ", ""]), 1) == ":note: x 1"

    def test_inline_metadata_not_interpreted_when_rendering(self) -> None:
        strings = make_template([":site|Title@@home:Home"])
        assert localize(strings) == ":site|Title@@home:Home"

    def test_plain_sequence_accepted(self) -> None:
        assert localize(["Hello ", ":name:!"], "World") == "Hello World!"

    def test_values_converted_with_str(self) -> None:
        assert localize(["", " items at ", ""], 3, 1.5) == "3 items at 1.5"

    def test_wrong_substitution_count(self) -> None:
        with pytest.raises(ValueError):
            localize(["a", "b"])

    def test_unterminated_block_left_as_is(self) -> None:
        assert localize(["", ":oops"], 1) == "1:oops"

    def test_pass_through_localizer_flags(self) -> None:
        assert localize.translates is False
        assert localize.translate is None
        assert repr(localize) == "Localizer(translates=False)"

    @given(source_templates())
    def test_output_contains_every_value(self, template: tuple[TemplateStrings, list[int]]) -> None:
        """Property: pass-through renders every substitution in order."""
        strings, values = template
        expected = strings.parts[0]
        for value, part in zip(values, strings.parts[1:], strict=True):
            expected += str(value) + part.split(":", 2)[2]
        assert render_template(strings, values) == expected


class TestTranslating:
    """Rendering with a translate hook."""

    def test_load_translations(self) -> None:
        localizer = load_translations({"greeting": "Bonjour {$name} !"}, locale="fr")
        strings = make_template(["Hello ", ":name:!"], message_id="greeting")
        assert localizer.translates is True
        assert localizer(strings, "Ana") == "Bonjour Ana !"

    def test_load_translations_over_base(self) -> None:
        base = TranslationStore.from_target_messages("fr", {"a": "A", "b": "B"})
        localizer = load_translations({"a": "A2"}, base=base)
        assert localizer(make_template(["x"], message_id="a")) == "A2"
        assert localizer(make_template(["x"], message_id="b")) == "B"

    def test_load_translations_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="taglocalize.runtime.localize"):
            load_translations({"a": "A"}, locale="fr")
        assert "Loaded 1 translation(s) for locale fr" in caplog.text

    def test_missing_translation_propagates(self) -> None:
        localizer = Localizer.from_store(TranslationStore())
        with pytest.raises(TranslationNotFoundError):
            localizer(make_template(["Hi"], message_id="hi"))

    def test_translated_leading_marker_kept(self) -> None:
        localizer = load_translations({"m": "{$0}: done"})
        assert localizer(make_template(["", " finished"], message_id="m"), "Job") == "Job: done"

    def test_custom_hook(self) -> None:
        def shout(strings: TemplateStrings, values: list[Any]) -> tuple[TemplateStrings, Sequence[Any]]:
            values[:] = [str(v).upper() for v in values]
            return strings, values

        localizer = Localizer(shout)
        assert localizer(["Hi ", "!"], "ana") == "Hi ANA!"

    def test_hook_may_mutate_substitutions(self) -> None:
        seen: list[list[Any]] = []

        def record(strings: TemplateStrings, values: list[Any]) -> tuple[TemplateStrings, Sequence[Any]]:
            seen.append(values)
            values.append("extra")
            return make_template(["", "", ""]), values

        assert Localizer(record)(["", ""], "v") == "vextra"
        assert seen == [["v", "extra"]]

    def test_render_literal(self) -> None:
        localizer = load_translations({"hi": "Salut {$0}"})
        literal = TemplateLiteral(make_template(["Hi ", ""], message_id="hi"), ("Ana",))
        assert localizer.render(literal) == "Salut Ana"

    def test_repr(self) -> None:
        assert repr(load_translations({})) == "Localizer(translates=True)"


class TestIdentityTranslation:
    """Translating a message into its own source text changes nothing."""

    @pytest.mark.fuzz
    @settings(max_examples=1000)
    @given(source_templates())
    def test_identity_catalog_matches_pass_through(
        self, template: tuple[TemplateStrings, list[int]]
    ) -> None:
        strings, values = template
        message = parse_message(strings, values)
        localizer = load_translations({message.message_id: message.message_string})
        assert localizer(strings, *values) == localize(strings, *values)
