"""Localization exception hierarchy with structured diagnostics.

Integrates with diagnostic codes for Rust/Elm-inspired error messages.
All exceptions optionally store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "CatalogError",
    "LocalizeError",
    "PlaceholderNotFoundError",
    "TranslationNotFoundError",
    "UnterminatedBlockError",
]


class LocalizeError(Exception):
    """Base exception for all taglocalize errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocalizeError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class TranslationNotFoundError(LocalizeError):
    """No catalog entry exists for a message id.

    Never recovered locally: there is no silent fallback to the source text.

    Attributes:
        message_id: Id of the message that has no translation
        message_string: Canonical source text of the message
        meaning: Disambiguation context of the message (optional)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        message_id: str,
        message_string: str = "",
        meaning: str | None = None,
    ) -> None:
        """Initialize TranslationNotFoundError.

        Args:
            message: Error message string OR Diagnostic object
            message_id: Id of the message that has no translation
            message_string: Canonical source text of the message
            meaning: Disambiguation context of the message
        """
        super().__init__(message)
        self.message_id = message_id
        self.message_string = message_string
        self.meaning = meaning


class PlaceholderNotFoundError(LocalizeError):
    """Translation references a placeholder absent from the source message.

    Indicates a catalog entry that is inconsistent with the current source.

    Attributes:
        placeholder_name: The placeholder name the translation asked for
        message_id: Id of the message being translated
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        placeholder_name: str,
        message_id: str,
    ) -> None:
        """Initialize PlaceholderNotFoundError.

        Args:
            message: Error message string OR Diagnostic object
            placeholder_name: The placeholder name the translation asked for
            message_id: Id of the message being translated
        """
        super().__init__(message)
        self.placeholder_name = placeholder_name
        self.message_id = message_id


class UnterminatedBlockError(LocalizeError):
    """A static part opens a name or metadata block that never closes.

    Example:
        ":meaning|description Hello"  <- no closing ":"

    Attributes:
        part: The raw (or cooked, when raw is unavailable) offending part
    """

    def __init__(self, message: str | Diagnostic, *, part: str) -> None:
        """Initialize UnterminatedBlockError.

        Args:
            message: Error message string OR Diagnostic object
            part: The offending static part
        """
        super().__init__(message)
        self.part = part


class CatalogError(LocalizeError):
    """A translation catalog could not be read or written.

    Attributes:
        path: Catalog file path (empty if not file-based)
        format_name: Catalog format involved (empty if undetermined)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        path: str = "",
        format_name: str = "",
    ) -> None:
        """Initialize CatalogError.

        Args:
            message: Error message string OR Diagnostic object
            path: Catalog file path
            format_name: Catalog format involved
        """
        super().__init__(message)
        self.path = path
        self.format_name = format_name
