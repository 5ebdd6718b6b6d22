"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup errors (missing translations, placeholders)
        2000-2999: Template errors (malformed source messages)
        3000-3999: Catalog errors (translation file reading/writing)
        4000-4999: Asset errors (copy-through output)
    """

    # Lookup errors (1000-1999)
    TRANSLATION_NOT_FOUND = 1001
    PLACEHOLDER_NOT_FOUND = 1002

    # Template errors (2000-2999)
    UNTERMINATED_BLOCK = 2001
    SUBSTITUTION_COUNT_MISMATCH = 2002

    # Catalog errors (3000-3999)
    CATALOG_FORMAT_UNKNOWN = 3001
    CATALOG_UNPARSEABLE = 3002
    CATALOG_INVALID_STRUCTURE = 3003
    CATALOG_TOO_LARGE = 3004
    CATALOG_DUPLICATE_ID = 3005
    CATALOG_LOCALE_UNKNOWN = 3006
    CATALOG_MISSING_TARGET = 3007

    # Asset errors (4000-4999)
    ASSET_WRITE_FAILED = 4001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        message_id: Message identifier involved (lookup errors)
        placeholder_name: Placeholder name involved (lookup errors)
        location: Catalog or asset file path involved
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    help_url: str | None = None
    message_id: str | None = None
    placeholder_name: str | None = None
    location: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[TRANSLATION_NOT_FOUND]: No translation found for "greeting" ("Hello")
              = message: greeting
              = help: Add a translation for this message id to the catalog

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
