"""Source message parsing.

Converts the static parts and substitutions of a tagged template into a
canonical, placeholder-keyed ParsedMessage. The same structure identifies a
message for catalog lookup and supplies substitution values by name when a
translation reorders them.

Identity metadata normally comes from extraction and travels on
TemplateStrings. A template may also declare it inline, in a block that
opens the first static part:

    ":meaning|description@@custom-id␟legacy-id-1␟legacy-id-2:Hello"

When neither source provides an id, the canonical message string itself
serves as the opaque lookup key.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from taglocalize.constants import (
    ID_SEPARATOR,
    LEGACY_ID_INDICATOR,
    MEANING_SEPARATOR,
    PLACEHOLDER_TOKEN_TEMPLATE,
)
from taglocalize.core import (
    TemplateStrings,
    check_substitution_count,
    derive_placeholder_name,
    split_block,
)

__all__ = [
    "MessageMetadata",
    "ParsedMessage",
    "describe_message",
    "parse_message",
    "parse_metadata",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MessageMetadata:
    """Metadata declared in a leading block of the first static part.

    Attributes:
        text: The first part with the block removed
        meaning: Disambiguation context (optional)
        description: Note for translators (optional)
        custom_id: Explicit message id (optional)
        legacy_ids: Alternate ids for older catalogs
    """

    text: str
    meaning: str | None = None
    description: str | None = None
    custom_id: str | None = None
    legacy_ids: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ParsedMessage:
    """Canonical, placeholder-keyed view of a tagged template.

    Every substitution slot maps to exactly one name in placeholder_names.
    When two slots share an explicit name the later value wins in
    substitutions.

    Attributes:
        message_id: Opaque stable id used for catalog lookup
        message_string: Flat form, static text with {$name} tokens
        message_parts: Static parts with name blocks removed
        placeholder_names: Name for each substitution slot, in source order
        substitutions: Read-only mapping of placeholder name to value
        meaning: Disambiguation context (optional)
        description: Note for translators (optional)
        legacy_ids: Alternate ids for older catalogs
    """

    message_id: str
    message_string: str
    message_parts: tuple[str, ...]
    placeholder_names: tuple[str, ...]
    substitutions: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    meaning: str | None = None
    description: str | None = None
    legacy_ids: tuple[str, ...] = ()

    @property
    def lookup_ids(self) -> tuple[str, ...]:
        """Ids to try in a catalog, primary id first."""
        return (self.message_id, *self.legacy_ids)


def parse_metadata(cooked: str, raw: str) -> MessageMetadata:
    """Parse the metadata block at the start of the first static part.

    Args:
        cooked: Cooked first part
        raw: Raw first part; empty when unavailable

    Returns:
        MessageMetadata; only text is set when no block is present

    Raises:
        UnterminatedBlockError: If the block never closes

    Example:
        >>> meta = parse_metadata(":site|Page title@@home.title:Home", "")
        >>> (meta.meaning, meta.description, meta.custom_id, meta.text)
        ('site', 'Page title', 'home.title', 'Home')
    """
    text, block = split_block(cooked, raw)
    if block is None:
        return MessageMetadata(text=text)

    meaning_description_and_id, *legacy_ids = block.split(LEGACY_ID_INDICATOR)
    meaning_and_description, _, custom_id = meaning_description_and_id.partition(ID_SEPARATOR)
    meaning: str | None
    description: str | None
    if MEANING_SEPARATOR in meaning_and_description:
        meaning, _, description = meaning_and_description.partition(MEANING_SEPARATOR)
    else:
        meaning, description = None, meaning_and_description

    return MessageMetadata(
        text=text,
        meaning=meaning,
        description=description or None,
        custom_id=custom_id or None,
        legacy_ids=tuple(legacy_ids),
    )


def parse_message(strings: TemplateStrings, substitutions: Sequence[Any]) -> ParsedMessage:
    """Parse a tagged template into its canonical message.

    For each static part after the first, the name of the preceding
    substitution is the part's explicit name block, or the slot's 0-based
    index as a string.

    Args:
        strings: Static parts of the template
        substitutions: Values for each slot between parts

    Returns:
        ParsedMessage for lookup and placeholder resolution

    Raises:
        ValueError: If parts and substitutions do not interleave
        UnterminatedBlockError: If a name or metadata block never closes

    Example:
        >>> strings = make_template(["Hello ", ":name:!"])
        >>> message = parse_message(strings, ["World"])
        >>> message.message_string
        'Hello {$name}!'
        >>> dict(message.substitutions)
        {'name': 'World'}
    """
    check_substitution_count(strings, substitutions)
    metadata = parse_metadata(strings.parts[0], strings.raw[0])

    message_parts = [metadata.text]
    placeholder_names: list[str] = []
    bound: dict[str, Any] = {}
    message_string = metadata.text

    for index in range(1, len(strings.parts)):
        name, text = derive_placeholder_name(strings.parts[index], strings.raw[index], index - 1)
        placeholder_names.append(name)
        message_parts.append(text)
        bound[name] = substitutions[index - 1]
        message_string += PLACEHOLDER_TOKEN_TEMPLATE.format(name=name) + text

    message_id = strings.message_id or metadata.custom_id or message_string
    message = ParsedMessage(
        message_id=message_id,
        message_string=message_string,
        message_parts=tuple(message_parts),
        placeholder_names=tuple(placeholder_names),
        substitutions=MappingProxyType(bound),
        meaning=strings.meaning if strings.meaning is not None else metadata.meaning,
        description=(
            strings.description if strings.description is not None else metadata.description
        ),
        legacy_ids=strings.legacy_ids or metadata.legacy_ids,
    )
    logger.debug(
        "Parsed message '%s' with %d placeholder(s)", message_id, len(placeholder_names)
    )
    return message


def describe_message(message: ParsedMessage) -> str:
    """Describe a message for diagnostics: id, text and meaning.

    Example:
        >>> describe_message(parse_message(make_template(["Hi"], message_id="hi"), []))
        '"hi" ("Hi")'
    """
    meaning = f' - "{message.meaning}"' if message.meaning else ""
    return f'"{message.message_id}" ("{message.message_string}"{meaning})'
