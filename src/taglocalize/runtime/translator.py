"""Apply a catalog translation to a tagged template.

The template is parsed to find its message id and name its substitutions.
The matching translation supplies new static parts and the order in which
substitutions go between them; it may reorder, repeat or omit placeholders.
Source placeholders the translation never mentions are dropped silently so
that a language can leave out a clause.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from taglocalize.core import TemplateStrings
from taglocalize.diagnostics import (
    ErrorTemplate,
    PlaceholderNotFoundError,
    TranslationNotFoundError,
)
from taglocalize.syntax import (
    ParsedMessage,
    ParsedTranslation,
    describe_message,
    parse_message,
)
from taglocalize.types import MessageId

__all__ = [
    "find_translation",
    "make_translate_hook",
    "translate",
]

logger = logging.getLogger(__name__)


def find_translation(
    translations: Mapping[MessageId, ParsedTranslation], message: ParsedMessage
) -> ParsedTranslation:
    """Look a message up by id, then by each legacy id in order.

    Raises:
        TranslationNotFoundError: If no id has an entry
    """
    for lookup_id in message.lookup_ids:
        translation = translations.get(lookup_id)
        if translation is not None:
            if lookup_id != message.message_id:
                logger.debug(
                    "Message '%s' matched by legacy id '%s'", message.message_id, lookup_id
                )
            return translation

    diagnostic = ErrorTemplate.translation_not_found(
        message.message_id, describe_message(message)
    )
    raise TranslationNotFoundError(
        diagnostic,
        message_id=message.message_id,
        message_string=message.message_string,
        meaning=message.meaning,
    )


def translate(
    translations: Mapping[MessageId, ParsedTranslation],
    strings: TemplateStrings,
    substitutions: Sequence[Any],
) -> tuple[TemplateStrings, list[Any]]:
    """Translate the static parts and substitutions of a tagged template.

    Args:
        translations: Parsed translations keyed by message id
        strings: Static parts of the source template
        substitutions: Values for each slot of the source template

    Returns:
        Tuple of (parts, substitutions) in translation order, with
        len(parts) == len(substitutions) + 1

    Raises:
        ValueError: If parts and substitutions do not interleave
        TranslationNotFoundError: If the catalog has no entry for the message
        PlaceholderNotFoundError: If the translation names a placeholder
            the source message does not have

    Example:
        >>> store = TranslationStore.from_target_messages(
        ...     "fr", {"pair": "Salut {$1} et {$0}"}
        ... )
        >>> parts, values = translate(
        ...     store, make_template(["Hi ", " and ", ""], message_id="pair"), ["A", "B"]
        ... )
        >>> (parts.parts, values)
        (('Salut ', ' et ', ''), ['B', 'A'])
    """
    message = parse_message(strings, substitutions)
    translation = find_translation(translations, message)

    values: list[Any] = []
    for placeholder in translation.placeholder_names:
        if placeholder not in message.substitutions:
            diagnostic = ErrorTemplate.placeholder_not_found(
                placeholder, message.message_id, describe_message(message)
            )
            raise PlaceholderNotFoundError(
                diagnostic, placeholder_name=placeholder, message_id=message.message_id
            )
        values.append(message.substitutions[placeholder])

    logger.debug(
        "Translated message '%s' (%d of %d placeholder(s) used)",
        message.message_id,
        len(values),
        len(message.placeholder_names),
    )
    return translation.message_parts, values


def make_translate_hook(
    translations: Mapping[MessageId, ParsedTranslation],
) -> functools.partial[tuple[TemplateStrings, list[Any]]]:
    """Bind a store into a translate hook for Localizer."""
    return functools.partial(translate, translations)
