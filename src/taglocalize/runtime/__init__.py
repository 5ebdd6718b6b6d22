"""Localization runtime package.

Provides the translation store, the translator and the Localizer entry
point. Depends on the syntax package for message parsing.

Python 3.13+.
"""

from .localize import Localizer, TranslateHook, load_translations, localize, render_template
from .store import TranslationStore
from .translator import find_translation, make_translate_hook, translate

__all__ = [
    "Localizer",
    "TranslateHook",
    "TranslationStore",
    "find_translation",
    "load_translations",
    "localize",
    "make_translate_hook",
    "render_template",
    "translate",
]
