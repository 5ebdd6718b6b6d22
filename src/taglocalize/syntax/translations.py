"""Translated target text parsing.

Catalog adapters hand over each translation as flat text: literal segments
interleaved with {$name} placeholder tokens, no nesting. This module turns
that text into template-shaped static parts plus the placeholder order the
translation wants, and back.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from taglocalize.constants import PLACEHOLDER_TOKEN_PATTERN, PLACEHOLDER_TOKEN_TEMPLATE
from taglocalize.core import TemplateStrings, escape_leading_marker

__all__ = [
    "ParsedTranslation",
    "parse_translation",
    "serialize_translation",
]


@dataclass(frozen=True, slots=True)
class ParsedTranslation:
    """Target-language message: what to say and where to insert values.

    Attributes:
        message_parts: Static parts; raw variants escape a leading marker
        placeholder_names: Placeholder to insert between each pair of parts
    """

    message_parts: TemplateStrings
    placeholder_names: tuple[str, ...]


def parse_translation(text: str) -> ParsedTranslation:
    """Parse flat translated text into parts and placeholder order.

    Total: text without tokens yields one part and no names.

    Args:
        text: Translated text such as "Bonjour {$name} !"

    Returns:
        ParsedTranslation with len(parts) == len(names) + 1

    Example:
        >>> parsed = parse_translation("{$count} éléments de {$owner}")
        >>> parsed.message_parts.parts
        ('', ' éléments de ', '')
        >>> parsed.placeholder_names
        ('count', 'owner')
    """
    pieces = PLACEHOLDER_TOKEN_PATTERN.split(text)
    parts = [pieces[0]]
    names: list[str] = []
    for index in range(1, len(pieces) - 1, 2):
        names.append(pieces[index])
        parts.append(pieces[index + 1])

    raw = [escape_leading_marker(part) for part in parts]
    return ParsedTranslation(
        message_parts=TemplateStrings(parts=tuple(parts), raw=tuple(raw)),
        placeholder_names=tuple(names),
    )


def serialize_translation(translation: ParsedTranslation) -> str:
    """Flatten a ParsedTranslation back into {$name} text."""
    parts = translation.message_parts.parts
    flat = parts[0]
    for name, part in zip(translation.placeholder_names, parts[1:], strict=True):
        flat += PLACEHOLDER_TOKEN_TEMPLATE.format(name=name) + part
    return flat
