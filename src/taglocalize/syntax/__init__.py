"""Message syntax package.

Parses both directions of the placeholder-aware message model:
source templates into ParsedMessage, and flat translated text
into ParsedTranslation.

Python 3.13+.
"""

from .messages import (
    MessageMetadata,
    ParsedMessage,
    describe_message,
    parse_message,
    parse_metadata,
)
from .translations import ParsedTranslation, parse_translation, serialize_translation

__all__ = [
    "MessageMetadata",
    "ParsedMessage",
    "ParsedTranslation",
    "describe_message",
    "parse_message",
    "parse_metadata",
    "parse_translation",
    "serialize_translation",
]
