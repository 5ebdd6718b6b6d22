"""Enumerations for taglocalize type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class CatalogFormat(StrEnum):
    """Name of a translation catalog file format.

    StrEnum provides automatic string conversion: str(CatalogFormat.JSON) == "json"
    """

    JSON = "json"
    """Simple JSON: {"locale": "fr", "translations": {"id": "text"}}"""

    ARB = "arb"
    """Application Resource Bundle: {"@@locale": "fr", "id": "text", "@id": {...}}"""

    XLIFF = "xliff"
    """XLIFF 1.2: <trans-unit id="id"><source>...</source><target>...</target></trans-unit>"""


class WriteStatus(StrEnum):
    """Outcome of writing one asset file for one locale.

    StrEnum provides automatic string conversion: str(WriteStatus.WRITTEN) == "written"
    """

    WRITTEN = "written"
    """File written to the locale output path"""

    FAILED = "failed"
    """Write failed; error recorded in diagnostics"""


__all__ = [
    "CatalogFormat",
    "WriteStatus",
]
