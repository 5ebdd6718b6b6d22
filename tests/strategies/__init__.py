"""Hypothesis strategies for taglocalize property-based testing.

Usage:
    from tests.strategies import placeholder_names, flat_translations

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - placeholder_names, flat_translations, source_templates
"""

from .messages import (
    flat_translations,
    literal_text,
    placeholder_names,
    source_templates,
)

__all__ = [
    "flat_translations",
    "literal_text",
    "placeholder_names",
    "source_templates",
]
