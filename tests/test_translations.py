"""Tests for flat translation text parsing."""

from hypothesis import given

from taglocalize.core import strip_placeholder_name
from taglocalize.syntax import parse_translation, serialize_translation
from tests.strategies import flat_translations


class TestParseTranslation:
    """Test parsing of {$name} translation text."""

    def test_no_placeholders(self) -> None:
        parsed = parse_translation("Bonjour")
        assert parsed.message_parts.parts == ("Bonjour",)
        assert parsed.placeholder_names == ()

    def test_empty_text(self) -> None:
        parsed = parse_translation("")
        assert parsed.message_parts.parts == ("",)
        assert parsed.placeholder_names == ()

    def test_placeholders_in_order(self) -> None:
        parsed = parse_translation("{$count} éléments de {$owner}")
        assert parsed.message_parts.parts == ("", " éléments de ", "")
        assert parsed.placeholder_names == ("count", "owner")

    def test_repeated_placeholder(self) -> None:
        parsed = parse_translation("{$0}-{$0}")
        assert parsed.placeholder_names == ("0", "0")

    def test_empty_name(self) -> None:
        parsed = parse_translation("a{$}b")
        assert parsed.placeholder_names == ("",)
        assert parsed.message_parts.parts == ("a", "b")

    def test_incomplete_token_is_literal(self) -> None:
        parsed = parse_translation("cost: {$price")
        assert parsed.message_parts.parts == ("cost: {$price",)
        assert parsed.placeholder_names == ()

    def test_leading_marker_escaped_in_raw(self) -> None:
        parsed = parse_translation("{$0}: total")
        assert parsed.message_parts.parts == ("", ": total")
        assert parsed.message_parts.raw == ("", "\\: total")

    def test_leading_marker_survives_render(self) -> None:
        """A literal ':' in a translation is never stripped as a name block."""
        parts = parse_translation("{$0}:x: kept").message_parts
        assert strip_placeholder_name(parts.parts[1], parts.raw[1]) == ":x: kept"


class TestSerializeTranslation:
    """Test flattening back to {$name} text."""

    def test_serialize(self) -> None:
        parsed = parse_translation("Salut {$1} et {$0}")
        assert serialize_translation(parsed) == "Salut {$1} et {$0}"

    @given(flat_translations())
    def test_round_trip_identity(self, text: str) -> None:
        """Property: parse then flatten reproduces the original text."""
        parsed = parse_translation(text)
        assert len(parsed.message_parts.parts) == len(parsed.placeholder_names) + 1
        assert serialize_translation(parsed) == text
