"""Copy-through handling for non-translatable asset files.

Assets (images, fonts, unrelated scripts) are written unchanged into every
locale's output location. A write failure for one locale is recorded in
the diagnostics and the remaining locales are still written.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from taglocalize.diagnostics import Diagnostics, ErrorTemplate
from taglocalize.enums import WriteStatus
from taglocalize.types import LocaleCode

__all__ = ["AssetTranslationHandler", "AssetWriteResult", "OutputPathFn"]

logger = logging.getLogger(__name__)

type OutputPathFn = Callable[[LocaleCode, str], str | Path]
"""Map (locale, relative path) to the file to write."""


@dataclass(frozen=True, slots=True)
class AssetWriteResult:
    """Outcome of writing one asset for one locale.

    Attributes:
        locale: Locale the file was written for
        path: Output path attempted (None if it could not be computed)
        status: WRITTEN or FAILED
    """

    locale: LocaleCode
    path: Path | None
    status: WriteStatus


class AssetTranslationHandler:
    """Writes asset files unchanged for each target locale."""

    __slots__ = ()

    def can_translate(self, relative_path: str, contents: bytes) -> bool:
        """Any file can be copied through."""
        return True

    def translate(
        self,
        diagnostics: Diagnostics,
        relative_path: str,
        contents: bytes,
        output_path_fn: OutputPathFn,
        locales: Iterable[LocaleCode],
        source_locale: LocaleCode | None = None,
    ) -> tuple[AssetWriteResult, ...]:
        """Write contents once per locale, and once more for source_locale.

        Args:
            diagnostics: Collector for write failures
            relative_path: Asset path relative to the source root
            contents: Asset bytes, written as-is
            output_path_fn: Maps (locale, relative_path) to an output path
            locales: Target locales
            source_locale: Also write the untranslated copy for this locale

        Returns:
            One result per write attempted, in order
        """
        targets = list(locales)
        if source_locale is not None:
            targets.append(source_locale)
        return tuple(
            self._write_asset(diagnostics, locale, relative_path, contents, output_path_fn)
            for locale in targets
        )

    @staticmethod
    def _write_asset(
        diagnostics: Diagnostics,
        locale: LocaleCode,
        relative_path: str,
        contents: bytes,
        output_path_fn: OutputPathFn,
    ) -> AssetWriteResult:
        path: Path | None = None
        try:
            path = Path(output_path_fn(locale, relative_path))
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(contents)
        except Exception as e:  # pylint: disable=broad-exception-caught
            # output_path_fn is caller code and may raise anything
            target = str(path) if path is not None else relative_path
            diagnostics.add(ErrorTemplate.asset_write_failed(target, str(e)))
            logger.error("Unable to write asset %s for locale %s: %s", target, locale, e)
            return AssetWriteResult(locale=locale, path=path, status=WriteStatus.FAILED)
        logger.debug("Wrote asset %s for locale %s", path, locale)
        return AssetWriteResult(locale=locale, path=path, status=WriteStatus.WRITTEN)
