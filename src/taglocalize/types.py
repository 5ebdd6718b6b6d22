"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the package and by user
code when annotating call sites and catalog loaders.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "LocaleCode",
    "MessageId",
    "TargetMessage",
]

type MessageId = str
"""Opaque stable identifier of a message (e.g., 'home.title', '4286451273117902052')."""

type LocaleCode = str
"""BCP-47 locale code (e.g., 'en', 'fr', 'pt-BR')."""

type TargetMessage = str
"""Flat translated text with {$name} placeholder tokens."""
