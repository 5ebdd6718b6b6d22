"""Runtime entry point for tagged templates.

A Localizer is the callable every call site uses. It is an explicit
configuration handle owned by the caller: built once at startup, with or
without a translate hook, then consulted on every call.

    >>> localize = load_translations({"greeting": "Bonjour {$name} !"})
    >>> localize(make_template(["Hello ", ":name:!"], message_id="greeting"), "Ana")
    'Bonjour Ana !'

Without a hook the template passes through unchanged apart from removing
placeholder-name blocks:

    >>> Localizer()(make_template(["Hello ", ":name:!"]), "Ana")
    'Hello Ana!'

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from taglocalize.core import (
    TemplateLiteral,
    TemplateStrings,
    check_substitution_count,
    make_template,
    strip_placeholder_name,
)
from taglocalize.types import LocaleCode, MessageId, TargetMessage

from .store import TranslationStore
from .translator import make_translate_hook

__all__ = [
    "Localizer",
    "TranslateHook",
    "load_translations",
    "localize",
    "render_template",
]

logger = logging.getLogger(__name__)

type TranslateHook = Callable[
    [TemplateStrings, list[Any]], tuple[TemplateStrings, Sequence[Any]]
]
"""Replace a template's parts and substitutions with translated ones.

The hook owns the pair for the duration of the call: it may mutate the
substitution list it receives and return it, or return new objects.
Callers must not rely on their list being untouched afterwards.
"""


def render_template(strings: TemplateStrings, substitutions: Sequence[Any]) -> str:
    """Interleave static parts and substitution values into a string.

    The first part is used as given. Every later part has its leading name
    block removed, using the raw part to tell an escaped marker from a
    block.

    Raises:
        ValueError: If parts and substitutions do not interleave
    """
    check_substitution_count(strings, substitutions)
    message = strings.parts[0]
    for index in range(1, len(strings.parts)):
        message += str(substitutions[index - 1]) + strip_placeholder_name(
            strings.parts[index], strings.raw[index]
        )
    return message


class Localizer:
    """Callable that renders tagged templates, translating when configured.

    Attributes:
        translate: The translate hook, or None for pass-through
    """

    __slots__ = ("_translate",)

    def __init__(self, translate: TranslateHook | None = None) -> None:
        """Initialize Localizer.

        Args:
            translate: Hook that maps (parts, substitutions) to translated
                (parts, substitutions). None renders templates unchanged.
        """
        self._translate = translate

    @classmethod
    def from_store(cls, store: Mapping[MessageId, Any]) -> Localizer:
        """Create a Localizer that translates with the given store."""
        return cls(make_translate_hook(store))

    @property
    def translate(self) -> TranslateHook | None:
        """The configured translate hook, or None."""
        return self._translate

    @property
    def translates(self) -> bool:
        """True if a translate hook is configured."""
        return self._translate is not None

    def __call__(self, strings: TemplateStrings | Sequence[str], *substitutions: Any) -> str:
        """Render a tagged template.

        Args:
            strings: Static parts; a plain sequence of str is treated as a
                synthesized template with no raw text
            *substitutions: Values for each slot between parts

        Returns:
            The final string

        Raises:
            ValueError: If parts and substitutions do not interleave
            TranslationNotFoundError: If translating and the catalog has no entry
            PlaceholderNotFoundError: If translating and the translation names
                an unknown placeholder
        """
        if not isinstance(strings, TemplateStrings):
            strings = make_template(strings)
        values: Sequence[Any] = list(substitutions)
        if self._translate is not None:
            strings, values = self._translate(strings, values)
        return render_template(strings, values)

    def render(self, literal: TemplateLiteral) -> str:
        """Render a TemplateLiteral (parts and values together)."""
        return self(literal.strings, *literal.substitutions)

    def __repr__(self) -> str:
        return f"Localizer(translates={self.translates})"


def load_translations(
    translations: Mapping[MessageId, TargetMessage],
    *,
    locale: LocaleCode | None = None,
    base: TranslationStore | None = None,
) -> Localizer:
    """Parse flat target texts and return a translating Localizer.

    Args:
        translations: Flat {$name} texts keyed by message id
        locale: Target locale of the translations
        base: Existing store to layer the new translations over

    Returns:
        Localizer whose hook translates with the resulting store
    """
    store = TranslationStore.from_target_messages(locale, translations)
    if base is not None:
        store = base.merged(store)
    logger.info("Loaded %d translation(s) for locale %s", len(store), store.locale)
    return Localizer.from_store(store)


localize = Localizer()
"""Pass-through Localizer: renders templates without translating."""
