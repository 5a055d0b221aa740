"""
Build ESearch results from eSearchResult XML.

ESearch returns::

    <?xml version="1.0" encoding="UTF-8" ?>
    <!DOCTYPE eSearchResult PUBLIC "-//NLM//DTD esearch 20060628//EN" "...">
    <eSearchResult>
      <Count>1873</Count><RetMax>20</RetMax><RetStart>0</RetStart>
      <QueryKey>1</QueryKey><WebEnv>MCID_...</WebEnv>
      <IdList><Id>33246200</Id>...</IdList>
      <TranslationSet>...</TranslationSet>
      <QueryTranslation>...</QueryTranslation>
    </eSearchResult>
"""

from __future__ import annotations

import logging
from typing import Any

from lxml import etree
from pydantic import ValidationError

from entrez_records.constants import ESEARCH_ROOT_TAG
from entrez_records.models.model_esearch import ESearchResult, Translation
from entrez_records.parsers.errors import InvalidRecordError
from entrez_records.parsers.xml_tree import (
    direct_text,
    element_children,
    find_root,
    local_name,
    parse_document,
)

logger = logging.getLogger(__name__)


def build_translation(node: etree._Element) -> Translation:
    fields: dict[str, Any] = {}
    for child in element_children(node):
        match local_name(child):
            case "From":
                fields["source"] = direct_text(child)
            case "To":
                fields["target"] = direct_text(child)
            case _:
                pass
    return Translation(**fields)


def build_esearch_result(node: etree._Element) -> ESearchResult:
    fields: dict[str, Any] = {}
    ids: list[str] = []
    translations: list[Translation] = []
    for child in element_children(node):
        match local_name(child):
            case "Count":
                fields["count"] = direct_text(child) or 0
            case "RetMax":
                fields["ret_max"] = direct_text(child) or 0
            case "RetStart":
                fields["ret_start"] = direct_text(child) or 0
            case "QueryKey":
                fields["query_key"] = direct_text(child)
            case "WebEnv":
                fields["web_env"] = direct_text(child)
            case "IdList":
                ids.extend(
                    text
                    for text in (
                        direct_text(entry)
                        for entry in element_children(child)
                        if local_name(entry) == "Id"
                    )
                    if text
                )
            case "TranslationSet":
                translations.extend(
                    build_translation(entry)
                    for entry in element_children(child)
                    if local_name(entry) == "Translation"
                )
            case "QueryTranslation":
                fields["query_translation"] = direct_text(child)
            case "ERROR":
                fields["error"] = direct_text(child)
            case _:
                pass
    try:
        return ESearchResult(
            id_list=tuple(ids), translation_set=tuple(translations), **fields
        )
    except ValidationError as e:
        # Count, RetMax, RetStart and QueryKey must be integers.
        raise InvalidRecordError(
            f"Invalid <{ESEARCH_ROOT_TAG}>: {e}", root_tag=ESEARCH_ROOT_TAG
        ) from e


def read_esearch_result(xml: str | bytes) -> ESearchResult:
    """Parse an ESearch XML document into an ``ESearchResult``.

    Raises ``MalformedDocumentError`` or ``MissingRootError`` like
    ``read_pubmed_article_set``, and ``InvalidRecordError`` when a numeric
    element such as ``Count`` is not an integer.
    """
    document = parse_document(xml)
    result = build_esearch_result(find_root(document, ESEARCH_ROOT_TAG))
    logger.debug("ESearch returned %d of %d ids", len(result.id_list), result.count)
    return result
