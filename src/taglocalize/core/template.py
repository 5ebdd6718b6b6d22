"""Template model: static parts, raw variants and substitutions.

A tagged template is N static parts interleaved with N-1 substitution
values. Each static part has a cooked (escape-processed) variant and a raw
(source text) variant. TemplateStrings holds the parts plus the identity
metadata an extraction step carries alongside the call site; TemplateLiteral
pairs them with the substitution values of one evaluation.

Python 3.13+.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any

from taglocalize.diagnostics import ErrorTemplate

__all__ = [
    "TemplateLiteral",
    "TemplateStrings",
    "check_substitution_count",
    "cook",
    "make_template",
]

_ESCAPE_SEQUENCE = re.compile(r"\\(.)", re.DOTALL)

_SIMPLE_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\n": "",  # line continuation
}


def cook(raw: str) -> str:
    """Process backslash escapes in source text.

    Known control escapes become their characters, a backslash-newline is a
    line continuation, and any other escaped character stands for itself
    (so "\\:" cooks to ":").

    Args:
        raw: Source text of a static part

    Returns:
        The cooked part
    """
    return _ESCAPE_SEQUENCE.sub(lambda m: _SIMPLE_ESCAPES.get(m.group(1), m.group(1)), raw)


@dataclass(frozen=True, slots=True)
class TemplateStrings:
    """Static parts of a tagged template with identity metadata.

    Behaves as a read-only sequence of the cooked parts.

    Attributes:
        parts: Cooked static parts, in order
        raw: Raw static parts; all empty for synthesized templates
        message_id: Stable id supplied by extraction (optional)
        meaning: Disambiguation context (optional)
        description: Note for translators (optional)
        legacy_ids: Alternate ids for older catalogs
    """

    parts: tuple[str, ...]
    raw: tuple[str, ...]
    message_id: str | None = None
    meaning: str | None = None
    description: str | None = None
    legacy_ids: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Normalize sequences to tuples and validate shape.

        Raises:
            ValueError: If there are no parts or raw and cooked lengths differ
        """
        object.__setattr__(self, "parts", tuple(self.parts))
        object.__setattr__(self, "raw", tuple(self.raw))
        object.__setattr__(self, "legacy_ids", tuple(self.legacy_ids))
        if not self.parts:
            msg = "A template needs at least one static part"
            raise ValueError(msg)
        if len(self.raw) != len(self.parts):
            msg = (
                f"raw has {len(self.raw)} part(s) but parts has {len(self.parts)}; "
                "they must have the same length"
            )
            raise ValueError(msg)

    @classmethod
    def from_source(
        cls,
        *raw_parts: str,
        message_id: str | None = None,
        meaning: str | None = None,
        description: str | None = None,
        legacy_ids: Sequence[str] = (),
    ) -> TemplateStrings:
        """Build a template from source text, cooking each part.

        Example:
            >>> strings = TemplateStrings.from_source("Total", "\\\\: done")
            >>> strings.parts
            ('Total', ': done')
        """
        return cls(
            parts=tuple(cook(part) for part in raw_parts),
            raw=raw_parts,
            message_id=message_id,
            meaning=meaning,
            description=description,
            legacy_ids=tuple(legacy_ids),
        )

    def __len__(self) -> int:
        return len(self.parts)

    def __getitem__(self, index: int) -> str:
        return self.parts[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.parts)


def make_template(
    cooked: Sequence[str],
    raw: Sequence[str] | None = None,
    *,
    message_id: str | None = None,
    meaning: str | None = None,
    description: str | None = None,
    legacy_ids: Sequence[str] = (),
) -> TemplateStrings:
    """Create the static-parts object passed to a localize call.

    Args:
        cooked: Parts with escape codes processed
        raw: Parts as written in source; None for a synthesized template
        message_id: Stable id supplied by extraction
        meaning: Disambiguation context
        description: Note for translators
        legacy_ids: Alternate ids for older catalogs

    Returns:
        TemplateStrings for the given parts
    """
    return TemplateStrings(
        parts=tuple(cooked),
        raw=tuple(raw) if raw is not None else ("",) * len(cooked),
        message_id=message_id,
        meaning=meaning,
        description=description,
        legacy_ids=tuple(legacy_ids),
    )


def check_substitution_count(strings: TemplateStrings, substitutions: Sequence[Any]) -> None:
    """Validate that static parts and substitutions interleave.

    Raises:
        ValueError: If len(parts) != len(substitutions) + 1
    """
    if len(strings.parts) != len(substitutions) + 1:
        diagnostic = ErrorTemplate.substitution_count_mismatch(
            len(strings.parts), len(substitutions)
        )
        raise ValueError(str(diagnostic))


@dataclass(frozen=True, slots=True)
class TemplateLiteral:
    """One evaluation of a tagged template: static parts plus values.

    Attributes:
        strings: Static parts and identity metadata
        substitutions: Expression values, one per slot between parts
    """

    strings: TemplateStrings
    substitutions: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        """Normalize substitutions and enforce the interleaving invariant.

        Raises:
            ValueError: If len(parts) != len(substitutions) + 1
        """
        object.__setattr__(self, "substitutions", tuple(self.substitutions))
        check_substitution_count(self.strings, self.substitutions)
