"""
XML tree access for E-utilities documents.

Wraps lxml so the record builders only see a handful of helpers:

  parse_document  : raw text -> root element (MalformedDocumentError)
  find_root       : depth-first lookup of the root tag (MissingRootError)
  element_children: direct element children, comments/PIs skipped
  attribute       : optional attribute value
  direct_text     : optional leading text of an element
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator

from lxml import etree

from entrez_records.parsers.errors import MalformedDocumentError, MissingRootError

logger = logging.getLogger(__name__)

# Leading <?xml ...?> declaration, including any encoding="..." it names.
_XML_DECLARATION = re.compile(r"^\ufeff?\s*<\?xml\s[^>]*\?>")


def _make_parser() -> etree.XMLParser:
    # DOCTYPEs are accepted but never fetched, validated or expanded.
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
        recover=False,
    )


def parse_document(xml: str | bytes) -> etree._Element:
    """Parse raw XML text into its root element.

    ``bytes`` are decoded as their XML declaration says. A ``str`` is already
    decoded, so its declaration is dropped and the text is parsed as UTF-8.
    """
    if isinstance(xml, str):
        raw = _XML_DECLARATION.sub("", xml, count=1).encode("utf-8")
    else:
        raw = xml
    if not raw.strip():
        raise MalformedDocumentError("Failed to parse XML: document is empty")
    try:
        return etree.fromstring(raw, parser=_make_parser())
    except etree.XMLSyntaxError as e:
        raise MalformedDocumentError(f"Failed to parse XML: {e}") from e


def is_element(node: object) -> bool:
    """True for element nodes; False for comments and processing instructions."""
    return isinstance(getattr(node, "tag", None), str)


def local_name(node: etree._Element) -> str:
    """Tag name without its namespace URI."""
    return etree.QName(node).localname


def element_children(node: etree._Element) -> Iterator[etree._Element]:
    """Yield the direct element children of *node* in document order."""
    for child in node:
        if is_element(child):
            yield child


def attribute(node: etree._Element, name: str) -> str | None:
    return node.get(name)


def direct_text(node: etree._Element) -> str | None:
    """Return the element's own leading text, or None when it has none.

    Text belonging to child elements is never included.
    """
    return node.text if node.text else None


def find_root(document: etree._Element, tag: str) -> etree._Element:
    """Locate the first element named *tag* in document order.

    The document element itself is checked first, then its descendants
    depth-first. If several elements match, the first one wins.
    """
    matches = (
        node for node in document.iter() if is_element(node) and local_name(node) == tag
    )
    root = next(matches, None)
    if root is None:
        raise MissingRootError(tag)
    if next(matches, None) is not None:
        logger.warning("Document contains more than one <%s>; using the first", tag)
    return root
