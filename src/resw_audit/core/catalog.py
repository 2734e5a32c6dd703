"""Catalog loaders — read ``.resw`` resource documents.

A ``.resw`` document is XML whose root holds one ``<data name="...">``
element per translatable entry, each with an optional ``<comment>`` child::

    <root>
      <data name="NewsTitle" xml:space="preserve">
        <value>News</value>
        <comment>Check translation</comment>
      </data>
    </root>
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from resw_audit.errors import CatalogParseError, CatalogReadError
from resw_audit.model.results import LocaleRecord

logger = logging.getLogger(__name__)

_BOM = "\ufeff"
_ENTRY_TAG = "data"
_COMMENT_TAG = "comment"


def read_document(path: Path) -> ET.Element:
    """Read and parse the document at *path*, returning its root element.

    A leading byte-order mark is stripped before parsing.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogReadError(path, str(exc)) from exc

    if text.startswith(_BOM):
        text = text[1:]

    try:
        return ET.fromstring(text)
    except ET.ParseError as exc:
        raise CatalogParseError(path, f"not well-formed XML ({exc})") from exc


def _entry_name(path: Path, entry: ET.Element) -> str:
    name = entry.get("name")
    if name is None:
        raise CatalogParseError(path, f"<{_ENTRY_TAG}> element without a 'name' attribute")
    return name


def load_reference_keys(path: Path) -> tuple[str, ...]:
    """Return the entry names of the reference document in document order.

    Duplicate names are kept; consumers decide how to treat them.
    """
    root = read_document(path)
    keys = tuple(_entry_name(path, entry) for entry in root.findall(_ENTRY_TAG))
    logger.debug("Loaded %d reference keys from %s", len(keys), path)
    return keys


def load_locale_records(path: Path) -> dict[str, LocaleRecord]:
    """Return the entries of a locale document keyed by name.

    When a name occurs more than once the last entry wins.
    """
    root = read_document(path)
    records: dict[str, LocaleRecord] = {}
    for entry in root.findall(_ENTRY_TAG):
        name = _entry_name(path, entry)
        comment = entry.find(_COMMENT_TAG)
        records[name] = LocaleRecord(
            name=name,
            comment=(comment.text or "") if comment is not None else None,
        )
    return records
