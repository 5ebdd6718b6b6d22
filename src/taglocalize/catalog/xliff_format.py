"""XLIFF 1.2 catalog format.

    <?xml version='1.0' encoding='UTF-8'?>
    <xliff xmlns="urn:oasis:names:tc:xliff:document:1.2" version="1.2">
      <file source-language="en" target-language="fr" datatype="plaintext" original="ng2.template">
        <body>
          <trans-unit id="greeting" datatype="html">
            <source>Hello <x id="name"/>!</source>
            <target>Bonjour <x id="name"/> !</target>
            <note priority="1" from="description">Home page</note>
            <note priority="1" from="meaning">salutation</note>
          </trans-unit>
        </body>
      </file>
    </xliff>

Placeholders are <x id="name"/> elements. Other inline elements (<g>, <mrk>,
...) contribute their text only. Units without a <target> are skipped with
a warning.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import PurePath

from lxml import etree

from taglocalize.constants import PLACEHOLDER_TOKEN_TEMPLATE
from taglocalize.diagnostics import CatalogError, Diagnostics, ErrorTemplate
from taglocalize.locale_utils import validate_locale
from taglocalize.runtime import TranslationStore
from taglocalize.syntax import ParsedMessage, ParsedTranslation, parse_translation
from taglocalize.types import LocaleCode, MessageId

from .formats import ParsedCatalog, unique_messages

__all__ = ["XLIFF_NAMESPACE", "XliffTranslationParser", "XliffTranslationSerializer"]

logger = logging.getLogger(__name__)

XLIFF_NAMESPACE = "urn:oasis:names:tc:xliff:document:1.2"

_XLIFF_VERSION = "1.2"
_SUFFIXES = (".xlf", ".xliff")

# Legacy XLIFF 1.2 ids are hex-encoded SHA-1 digests.
_LEGACY_ID_PATTERN = re.compile(r"[0-9a-fA-F]{40}")

# Elements whose text is message content; never re-indented.
_MIXED_CONTENT = frozenset({"source", "target", "note"})


def _tag(name: str) -> str:
    return f"{{{XLIFF_NAMESPACE}}}{name}"


def _localname(element: etree._Element) -> str:
    return etree.QName(element).localname


def _decode(contents: str) -> etree._Element:
    """Parse XML without resolving entities or touching the network.

    Raises:
        etree.XMLSyntaxError: If contents are not well-formed XML
    """
    parser = etree.XMLParser(resolve_entities=False, no_network=True, remove_blank_text=False)
    return etree.fromstring(contents.encode("utf-8"), parser)


def _flatten(element: etree._Element) -> str:
    """Render mixed content as flat {$name} text."""
    pieces = [element.text or ""]
    for child in element:
        # Comments and processing instructions have a non-str tag; keep their tail only.
        if isinstance(child.tag, str):
            if _localname(child) == "x":
                pieces.append(PLACEHOLDER_TOKEN_TEMPLATE.format(name=child.get("id", "")))
            else:
                pieces.append(_flatten(child))
        pieces.append(child.tail or "")
    return "".join(pieces)


def _indent(element: etree._Element, level: int = 0) -> None:
    children = list(element)
    if not children or _localname(element) in _MIXED_CONTENT:
        return
    inner = "\n" + "  " * (level + 1)
    element.text = inner
    for child in children:
        _indent(child, level + 1)
        child.tail = inner
    children[-1].tail = "\n" + "  " * level


class XliffTranslationParser:
    """Reads XLIFF 1.2 catalogs."""

    __slots__ = ()

    def can_parse(self, path: str, contents: str) -> bool:
        """True for .xlf/.xliff files whose root is <xliff version="1.2">."""
        if PurePath(path).suffix.lower() not in _SUFFIXES:
            return False
        try:
            root = _decode(contents)
        except etree.XMLSyntaxError:
            return False
        return _localname(root) == "xliff" and root.get("version") == _XLIFF_VERSION

    def parse(self, path: str, contents: str) -> ParsedCatalog:
        """Parse an XLIFF 1.2 catalog.

        The locale is the target-language of the first <file>. Units with
        no id or no <target> are recorded in diagnostics and skipped.

        Raises:
            CatalogError: If the file is not XML, is not an XLIFF document,
                or declares an unknown locale
        """
        diagnostics = Diagnostics()
        try:
            root = _decode(contents)
        except etree.XMLSyntaxError as e:
            diagnostic = ErrorTemplate.catalog_unparseable(path, str(e))
            raise CatalogError(diagnostic, path=path, format_name="xliff") from e

        if _localname(root) != "xliff":
            diagnostic = ErrorTemplate.catalog_invalid_structure(
                path, "root element must be <xliff>"
            )
            raise CatalogError(diagnostic, path=path, format_name="xliff")
        files = root.xpath('*[local-name()="file"]')
        if not files:
            diagnostic = ErrorTemplate.catalog_invalid_structure(path, "missing <file> element")
            raise CatalogError(diagnostic, path=path, format_name="xliff")

        declared = files[0].get("target-language")
        locale: LocaleCode | None = validate_locale(declared) if declared else None

        entries: dict[MessageId, ParsedTranslation] = {}
        for unit in root.xpath('//*[local-name()="trans-unit"]'):
            message_id = unit.get("id")
            if not message_id:
                diagnostics.add(
                    ErrorTemplate.catalog_invalid_structure(path, "<trans-unit> without an id")
                )
                continue
            targets = unit.xpath('*[local-name()="target"]')
            if not targets:
                diagnostics.add(ErrorTemplate.catalog_missing_target(path, message_id))
                continue
            if message_id in entries:
                diagnostics.add(ErrorTemplate.catalog_duplicate_id(message_id, path))
                continue
            entries[message_id] = parse_translation(_flatten(targets[0]))

        logger.debug("Parsed XLIFF catalog %s: %d message(s)", path, len(entries))
        return ParsedCatalog(
            locale=locale,
            store=TranslationStore(entries, locale=locale),
            diagnostics=diagnostics,
        )


@dataclass(frozen=True, slots=True)
class XliffTranslationSerializer:
    """Writes extracted messages as an XLIFF 1.2 catalog.

    Attributes:
        source_locale: Locale the source messages are written in
        use_legacy_ids: Write each message under its legacy XLIFF 1.2 id
            (a 40-character hex digest) when it has one
    """

    source_locale: LocaleCode
    use_legacy_ids: bool = False

    def serialize(self, messages: Sequence[ParsedMessage]) -> str:
        """Render messages as an XLIFF document with <source> only.

        Raises:
            ValueError: If message text contains characters XML cannot hold
        """
        root = etree.Element(_tag("xliff"), nsmap={None: XLIFF_NAMESPACE})
        root.set("version", _XLIFF_VERSION)
        file_element = etree.SubElement(root, _tag("file"))
        file_element.set("source-language", self.source_locale)
        file_element.set("datatype", "plaintext")
        file_element.set("original", "ng2.template")
        body = etree.SubElement(file_element, _tag("body"))

        for message in unique_messages(messages):
            unit = etree.SubElement(body, _tag("trans-unit"))
            unit.set("id", self.unit_id(message))
            unit.set("datatype", "html")
            source = etree.SubElement(unit, _tag("source"))
            source.text = message.message_parts[0]
            for name, text in zip(
                message.placeholder_names, message.message_parts[1:], strict=True
            ):
                placeholder = etree.SubElement(source, _tag("x"))
                placeholder.set("id", name)
                placeholder.tail = text
            for origin, value in (("description", message.description), ("meaning", message.meaning)):
                if value:
                    note = etree.SubElement(unit, _tag("note"))
                    note.set("priority", "1")
                    note.set("from", origin)
                    note.text = value

        _indent(root)
        return etree.tostring(root, xml_declaration=True, encoding="UTF-8").decode("utf-8") + "\n"

    def unit_id(self, message: ParsedMessage) -> str:
        """Id written for a message: a legacy digest if requested, else its id."""
        if self.use_legacy_ids:
            for legacy_id in message.legacy_ids:
                if _LEGACY_ID_PATTERN.fullmatch(legacy_id):
                    return legacy_id
        return message.message_id
