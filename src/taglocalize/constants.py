"""Shared constants for taglocalize.

This module provides centralized configuration constants used across
the core, syntax, runtime and catalog packages. Placing constants here
avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Template markers: Placeholder-name and metadata block syntax
- Translation text: Flat target-message grammar
- Input limits: DoS prevention via size constraints

Python 3.13+. Zero external dependencies.
"""

import re

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Template markers
    "PLACEHOLDER_NAME_MARKER",
    "MEANING_SEPARATOR",
    "ID_SEPARATOR",
    "LEGACY_ID_INDICATOR",
    "ESCAPE_CHARACTER",
    # Translation text
    "PLACEHOLDER_TOKEN_PATTERN",
    "PLACEHOLDER_TOKEN_TEMPLATE",
    # Input limits
    "MAX_CATALOG_SIZE",
]

# ============================================================================
# TEMPLATE MARKERS
# ============================================================================
#
# A static part that follows a substitution may open with a placeholder name
# wrapped in markers:  "There are ", ":itemCount: items"
#
# The first static part may open with a metadata block using the same marker:
#   ":meaning|description@@custom-id␟legacy-id:Hello"
#
# A literal leading marker is written escaped in source (raw) text: "\:".

PLACEHOLDER_NAME_MARKER: str = ":"

MEANING_SEPARATOR: str = "|"

ID_SEPARATOR: str = "@@"

# U+241F SYMBOL FOR UNIT SEPARATOR
LEGACY_ID_INDICATOR: str = "␟"

ESCAPE_CHARACTER: str = "\\"

# ============================================================================
# TRANSLATION TEXT
# ============================================================================

# Literal text interleaved with {$name} tokens; name is any run without "}".
PLACEHOLDER_TOKEN_PATTERN: re.Pattern[str] = re.compile(r"\{\$([^}]*)\}")

PLACEHOLDER_TOKEN_TEMPLATE: str = "{{${name}}}"

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum catalog file size in characters (10 million).
MAX_CATALOG_SIZE: int = 10_000_000
