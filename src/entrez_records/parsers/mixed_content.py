"""
Re-serialization of mixed content.

PubMed abstracts interleave plain text with inline markup such as ``<i>``,
``<sup>`` or MathML. Instead of modelling rich text, the markup is written
back into the string as it was seen in the source.
"""

from __future__ import annotations

from lxml import etree

from entrez_records.constants import MAX_INLINE_DEPTH
from entrez_records.parsers.xml_tree import is_element, local_name


def _qualified_name(node: etree._Element) -> str:
    name = local_name(node)
    return f"{node.prefix}:{name}" if node.prefix else name


def _own_namespace_declarations(node: etree._Element) -> str:
    """Render the xmlns bindings declared on *node* itself, not inherited ones."""
    parent = node.getparent()
    inherited = parent.nsmap if parent is not None else {}
    decls = []
    for prefix, uri in node.nsmap.items():
        if inherited.get(prefix) == uri:
            continue
        decls.append(f' xmlns:{prefix}="{uri}"' if prefix else f' xmlns="{uri}"')
    return "".join(decls)


def _serialize_element(node: etree._Element, depth: int) -> str:
    name = _qualified_name(node)
    if depth < MAX_INLINE_DEPTH:
        inner = _serialize_content(node, depth + 1)
    else:
        inner = node.text or ""
    return f"<{name}{_own_namespace_declarations(node)}>{inner}</{name}>"


def _serialize_content(node: etree._Element, depth: int) -> str:
    parts = [node.text or ""]
    for child in node:
        if is_element(child):
            parts.append(_serialize_element(child, depth))
        # comments and PIs drop out, but the text after them stays
        parts.append(child.tail or "")
    return "".join(parts)


def serialize_mixed_content(node: etree._Element) -> str:
    """Return the content of *node* with inline elements re-emitted as tags.

    Text is appended verbatim (entities already decoded by the parser).
    Element children are written as ``<name>...</name>``; a namespaced child
    keeps its ``prefix:name`` and repeats the ``xmlns`` bindings it declares.
    Two levels of inline markup are reproduced, deeper elements contribute
    their direct text only. Attributes of inline elements are not kept.

    >>> serialize_mixed_content(etree.fromstring("<a>plain <i>em</i> more</a>"))
    'plain <i>em</i> more'
    """
    return _serialize_content(node, 1)
