"""Placeholder-name and metadata block codec.

A static part that immediately follows a substitution may open with a
placeholder name wrapped in markers; the first static part may open with a
metadata block using the same marker:

    parts = (":greeting|Home page title@@home.title:Hello ", ":name:!")

Whether a leading marker opens a block is decided on the raw (pre-escape)
text, so that a literal marker written as "\\:" in source is not mistaken
for a block. Synthesized templates carry no raw text; for those the cooked
part is inspected instead. This is an approximation: synthesized templates
always supply explicit names and never need to escape the marker.

Both directions share these rules: parsing source messages, and parsing
translated target text back into template-shaped parts.

Python 3.13+.
"""

from taglocalize.constants import ESCAPE_CHARACTER, PLACEHOLDER_NAME_MARKER
from taglocalize.diagnostics import ErrorTemplate, UnterminatedBlockError

__all__ = [
    "derive_placeholder_name",
    "escape_leading_marker",
    "opens_block",
    "split_block",
    "strip_placeholder_name",
]


def opens_block(cooked: str, raw: str) -> bool:
    """Check whether a static part opens a name or metadata block.

    Args:
        cooked: Escape-processed part
        raw: Source text of the part; empty when unavailable

    Returns:
        True if the raw part (or cooked part, when raw is empty) starts
        with an unescaped marker
    """
    return (raw or cooked).startswith(PLACEHOLDER_NAME_MARKER)


def strip_placeholder_name(cooked: str, raw: str) -> str:
    """Remove a leading name block from a static part for display.

    Used at render time; never raises. An unterminated block leaves the
    part unchanged.

    Args:
        cooked: Escape-processed part
        raw: Source text of the part; empty when unavailable

    Returns:
        The cooked part without its leading block

    Example:
        >>> strip_placeholder_name(":count: items", ":count: items")
        ' items'
        >>> strip_placeholder_name(": items", "\\\\: items")
        ': items'
    """
    if not opens_block(cooked, raw):
        return cooked
    return cooked[cooked.find(PLACEHOLDER_NAME_MARKER, 1) + 1 :]


def split_block(cooked: str, raw: str) -> tuple[str, str | None]:
    """Split a static part into its leading block and remaining text.

    Args:
        cooked: Escape-processed part
        raw: Source text of the part; empty when unavailable

    Returns:
        Tuple of (text, block). block is None when the part opens no block;
        otherwise it is the text between the first and second marker.

    Raises:
        UnterminatedBlockError: If the part opens a block that never closes
    """
    if not opens_block(cooked, raw):
        return cooked, None
    end = cooked.find(PLACEHOLDER_NAME_MARKER, 1)
    if end == -1:
        part = raw or cooked
        raise UnterminatedBlockError(ErrorTemplate.unterminated_block(part), part=part)
    return cooked[end + 1 :], cooked[1:end]


def derive_placeholder_name(cooked: str, raw: str, index: int) -> tuple[str, str]:
    """Derive the placeholder name for the substitution preceding a part.

    Args:
        cooked: Escape-processed part following the substitution
        raw: Source text of the part; empty when unavailable
        index: 0-based ordinal of the preceding substitution slot

    Returns:
        Tuple of (name, text): the explicit block name or str(index), and
        the part with the block removed

    Raises:
        UnterminatedBlockError: If the part opens a block that never closes
    """
    text, block = split_block(cooked, raw)
    if block is None:
        return str(index), text
    return block, text


def escape_leading_marker(part: str) -> str:
    """Build the raw variant of a synthesized part.

    A part that starts with the marker is backslash-escaped so that feeding
    it back through the codec never reads literal text as a block.

    Args:
        part: Cooked part text

    Returns:
        Raw part text
    """
    if part.startswith(PLACEHOLDER_NAME_MARKER):
        return ESCAPE_CHARACTER + part
    return part
