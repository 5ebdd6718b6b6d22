"""Diagnostic system for localization errors.

Provides structured error diagnostics with codes, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .collector import Diagnostics
from .errors import (
    CatalogError,
    LocalizeError,
    PlaceholderNotFoundError,
    TranslationNotFoundError,
    UnterminatedBlockError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CatalogError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "Diagnostics",
    "ErrorTemplate",
    "LocalizeError",
    "OutputFormat",
    "PlaceholderNotFoundError",
    "TranslationNotFoundError",
    "UnterminatedBlockError",
]
