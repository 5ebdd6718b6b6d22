"""Tests for asset copy-through."""

import logging
from pathlib import Path

import pytest

from taglocalize.catalog import AssetTranslationHandler
from taglocalize.diagnostics import DiagnosticCode, Diagnostics
from taglocalize.enums import WriteStatus


def _output_in(root: Path):
    return lambda locale, relative_path: root / locale / relative_path


class TestAssetTranslationHandler:
    """Test writing assets for each locale."""

    def test_can_translate_anything(self) -> None:
        assert AssetTranslationHandler().can_translate("img/logo.png", b"\x89PNG") is True

    def test_writes_each_locale(self, tmp_path: Path) -> None:
        diagnostics = Diagnostics()
        results = AssetTranslationHandler().translate(
            diagnostics, "img/logo.png", b"\x89PNG", _output_in(tmp_path), ["fr", "de"]
        )
        assert [r.locale for r in results] == ["fr", "de"]
        assert all(r.status == WriteStatus.WRITTEN for r in results)
        assert (tmp_path / "fr" / "img" / "logo.png").read_bytes() == b"\x89PNG"
        assert (tmp_path / "de" / "img" / "logo.png").read_bytes() == b"\x89PNG"
        assert len(diagnostics) == 0

    def test_source_locale_written_last(self, tmp_path: Path) -> None:
        results = AssetTranslationHandler().translate(
            Diagnostics(), "a.txt", b"a", _output_in(tmp_path), ["fr"], source_locale="en"
        )
        assert [r.locale for r in results] == ["fr", "en"]
        assert (tmp_path / "en" / "a.txt").read_bytes() == b"a"

    def test_no_locales(self, tmp_path: Path) -> None:
        results = AssetTranslationHandler().translate(
            Diagnostics(), "a.txt", b"a", _output_in(tmp_path), []
        )
        assert results == ()

    def test_failure_recorded_and_others_continue(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        blocker = tmp_path / "fr"
        blocker.write_bytes(b"not a directory")
        diagnostics = Diagnostics()
        with caplog.at_level(logging.ERROR, logger="taglocalize.catalog.assets"):
            results = AssetTranslationHandler().translate(
                diagnostics, "a.txt", b"a", _output_in(tmp_path), ["fr", "de"]
            )
        assert [r.status for r in results] == [WriteStatus.FAILED, WriteStatus.WRITTEN]
        assert diagnostics.has_errors is True
        assert diagnostics.errors[0].code == DiagnosticCode.ASSET_WRITE_FAILED
        assert (tmp_path / "de" / "a.txt").read_bytes() == b"a"
        assert "Unable to write asset" in caplog.text

    def test_output_path_failure_recorded_and_others_continue(self, tmp_path: Path) -> None:
        def output_path(locale: str, relative_path: str) -> Path:
            if locale == "fr":
                msg = f"no output directory configured for {locale}"
                raise ValueError(msg)
            return tmp_path / locale / relative_path

        diagnostics = Diagnostics()
        results = AssetTranslationHandler().translate(
            diagnostics, "a.txt", b"a", output_path, ["fr", "de"], source_locale="en"
        )
        assert [r.status for r in results] == [
            WriteStatus.FAILED,
            WriteStatus.WRITTEN,
            WriteStatus.WRITTEN,
        ]
        assert results[0].path is None
        assert len(diagnostics.errors) == 1
        assert "no output directory configured for fr" in diagnostics.errors[0].message
        assert (tmp_path / "de" / "a.txt").read_bytes() == b"a"
        assert (tmp_path / "en" / "a.txt").read_bytes() == b"a"
