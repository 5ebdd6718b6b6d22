"""Core template model shared across syntax and runtime layers.

This package provides the template structures and the placeholder codec
that both the syntax layer (message and translation parsing) and the
runtime layer (translation, rendering) depend on. By isolating them here,
we maintain a clean dependency graph:

    core <- syntax <- runtime <- catalog

Exports:
    TemplateStrings: Static parts (cooked + raw) with identity metadata
    TemplateLiteral: Static parts paired with substitution values
    make_template: Build TemplateStrings from cooked (and optional raw) parts
    strip_placeholder_name: Render-time removal of a leading name block
    split_block: Parse-time split of a leading block

Python 3.13+.
"""

from .codec import (
    derive_placeholder_name,
    escape_leading_marker,
    split_block,
    strip_placeholder_name,
)
from .template import (
    TemplateLiteral,
    TemplateStrings,
    check_substitution_count,
    cook,
    make_template,
)

__all__ = [
    "TemplateLiteral",
    "TemplateStrings",
    "check_substitution_count",
    "cook",
    "derive_placeholder_name",
    "escape_leading_marker",
    "make_template",
    "split_block",
    "strip_placeholder_name",
]
