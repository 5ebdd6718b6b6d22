"""Diagnostics collector for batch operations.

Catalog parsing and asset copying process many items; a failure in one item
is recorded here instead of aborting the batch. Callers inspect has_errors
once the batch is done.

Python 3.13+.
"""

from dataclasses import dataclass, field

from .codes import Diagnostic
from .formatter import DiagnosticFormatter

__all__ = ["Diagnostics"]


@dataclass(slots=True)
class Diagnostics:
    """Accumulated warnings and errors from a batch operation.

    Attributes:
        messages: Diagnostics in the order they were recorded

    Example:
        >>> diagnostics = Diagnostics()
        >>> diagnostics.add(ErrorTemplate.catalog_duplicate_id("greeting"))
        >>> diagnostics.has_errors
        False
        >>> len(diagnostics.warnings)
        1
    """

    messages: list[Diagnostic] = field(default_factory=list)

    def add(self, diagnostic: Diagnostic) -> None:
        """Record a diagnostic."""
        self.messages.append(diagnostic)

    def merge(self, other: "Diagnostics") -> None:
        """Append all diagnostics from another collector."""
        self.messages.extend(other.messages)

    @property
    def errors(self) -> tuple[Diagnostic, ...]:
        """Diagnostics with error severity."""
        return tuple(d for d in self.messages if d.severity == "error")

    @property
    def warnings(self) -> tuple[Diagnostic, ...]:
        """Diagnostics with warning severity."""
        return tuple(d for d in self.messages if d.severity == "warning")

    @property
    def has_errors(self) -> bool:
        """True if at least one error was recorded."""
        return any(d.severity == "error" for d in self.messages)

    def format(self, formatter: DiagnosticFormatter | None = None) -> str:
        """Format all recorded diagnostics.

        Args:
            formatter: Formatter to use (default: Rust-style)

        Returns:
            Formatted diagnostics separated by blank lines
        """
        return (formatter or DiagnosticFormatter()).format_all(self.messages)

    def __len__(self) -> int:
        return len(self.messages)
