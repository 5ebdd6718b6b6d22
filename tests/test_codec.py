"""Tests for the placeholder-name and metadata block codec."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from taglocalize.core import (
    derive_placeholder_name,
    escape_leading_marker,
    split_block,
    strip_placeholder_name,
)
from taglocalize.core.codec import opens_block
from taglocalize.diagnostics import DiagnosticCode, UnterminatedBlockError


class TestOpensBlock:
    """Test block detection on raw and cooked parts."""

    def test_raw_marker_opens_block(self) -> None:
        assert opens_block(":name:text", ":name:text") is True

    def test_escaped_raw_marker_does_not_open_block(self) -> None:
        """Cooked part starts with ':' but the raw source escaped it."""
        assert opens_block(":name:text", "\\:name:text") is False

    def test_cooked_used_when_raw_empty(self) -> None:
        assert opens_block(":name:text", "") is True

    def test_plain_text(self) -> None:
        assert opens_block("text", "text") is False

    def test_empty_part(self) -> None:
        assert opens_block("", "") is False


class TestStripPlaceholderName:
    """Test render-time block removal."""

    def test_strips_named_block(self) -> None:
        assert strip_placeholder_name(":count: items", ":count: items") == " items"

    def test_escaped_marker_kept(self) -> None:
        assert strip_placeholder_name(": items", "\\: items") == ": items"

    def test_unterminated_block_left_unchanged(self) -> None:
        assert strip_placeholder_name(":oops", ":oops") == ":oops"

    def test_empty_block(self) -> None:
        assert strip_placeholder_name("::rest", "::rest") == "rest"

    def test_synthesized_part(self) -> None:
        assert strip_placeholder_name(":PH:!", "") == "!"

    @given(st.text().filter(lambda s: not s.startswith(":")))
    def test_parts_without_marker_unchanged(self, text: str) -> None:
        """Property: a part not starting with the marker is never altered."""
        assert strip_placeholder_name(text, text) == text


class TestSplitBlock:
    """Test block extraction used by the parsers."""

    def test_no_block(self) -> None:
        assert split_block("Hello", "Hello") == ("Hello", None)

    def test_block_and_text(self) -> None:
        assert split_block(":name:!", ":name:!") == ("!", "name")

    def test_empty_block_is_explicit_empty_name(self) -> None:
        assert split_block("::rest", "::rest") == ("rest", "")

    def test_block_only(self) -> None:
        assert split_block(":name:", ":name:") == ("", "name")

    def test_unterminated_block_raises(self) -> None:
        with pytest.raises(UnterminatedBlockError) as exc_info:
            split_block(":meaning|description Hello", ":meaning|description Hello")
        err = exc_info.value
        assert err.part == ":meaning|description Hello"
        assert err.diagnostic is not None
        assert err.diagnostic.code == DiagnosticCode.UNTERMINATED_BLOCK

    def test_unterminated_error_reports_raw_part(self) -> None:
        with pytest.raises(UnterminatedBlockError) as exc_info:
            split_block(":\tx", ":\\tx")
        assert exc_info.value.part == ":\\tx"


class TestDerivePlaceholderName:
    """Test explicit and positional placeholder naming."""

    def test_explicit_name(self) -> None:
        assert derive_placeholder_name(":name:!", ":name:!", 0) == ("name", "!")

    def test_positional_name(self) -> None:
        assert derive_placeholder_name(" and ", " and ", 3) == ("3", " and ")

    def test_escaped_marker_gets_positional_name(self) -> None:
        assert derive_placeholder_name(": rest", "\\: rest", 0) == ("0", ": rest")

    @given(st.integers(min_value=0, max_value=1000))
    def test_positional_name_is_index_string(self, index: int) -> None:
        """Property: unnamed slots are named by their 0-based index."""
        name, _ = derive_placeholder_name("text", "text", index)
        assert name == str(index)


class TestEscapeLeadingMarker:
    """Test raw variant construction for synthesized parts."""

    def test_leading_marker_escaped(self) -> None:
        assert escape_leading_marker(": rest") == "\\: rest"

    def test_other_text_unchanged(self) -> None:
        assert escape_leading_marker("rest: more") == "rest: more"

    def test_empty(self) -> None:
        assert escape_leading_marker("") == ""

    @given(st.text())
    def test_escaped_part_never_opens_block(self, text: str) -> None:
        """Property: after escaping, a part is never read as a block."""
        assert opens_block(text, escape_leading_marker(text)) is False
