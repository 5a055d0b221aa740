"""
Build PubMed records from EFetch XML.

EFetch with db=pubmed and retmode=xml returns::

    <?xml version="1.0" ?>
    <!DOCTYPE PubmedArticleSet PUBLIC "-//NLM//DTD PubMedArticle, 1st January 2019//EN" "...">
    <PubmedArticleSet>
      <PubmedArticle>
        <MedlineCitation>...</MedlineCitation>
        <PubmedData>...</PubmedData>
      </PubmedArticle>
      ...
    </PubmedArticleSet>

``read_pubmed_article_set`` turns that text into a ``PubmedArticleSet``.

Each ``build_*`` function takes the element for one record, matches its direct
children against the tags that record models and ignores everything else:
the PubMed DTD has far more elements than are modelled here, and new ones
must never break a parse. Values are collected first and the frozen record is
created once at the end.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from lxml import etree

from entrez_records.constants import PUBMED_ROOT_TAG
from entrez_records.models.model_pubmed import (
    Abstract,
    AbstractText,
    Article,
    ArticleId,
    ArticleIdList,
    Author,
    ELocationId,
    HistoryDate,
    Issn,
    Journal,
    JournalIssue,
    MedlineCitation,
    MedlineJournalInfo,
    MeshHeading,
    MeshTerm,
    Pmid,
    PubDate,
    PubmedArticle,
    PubmedArticleSet,
    PubmedData,
    Reference,
    ReferenceList,
)
from entrez_records.parsers.mixed_content import serialize_mixed_content
from entrez_records.parsers.xml_tree import (
    attribute,
    direct_text,
    element_children,
    find_root,
    local_name,
    parse_document,
)

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


# ------------------------------------------------------------------
# PubmedData
# ------------------------------------------------------------------


def build_article_id(node: etree._Element) -> ArticleId:
    return ArticleId(id_type=attribute(node, "IdType"), value=direct_text(node))


def build_article_id_list(node: etree._Element) -> ArticleIdList:
    article_ids = []
    for child in element_children(node):
        match local_name(child):
            case "ArticleId":
                article_ids.append(build_article_id(child))
            case _:
                pass
    return ArticleIdList(article_ids=tuple(article_ids))


def build_reference(node: etree._Element) -> Reference:
    fields: dict[str, Any] = {}
    for child in element_children(node):
        match local_name(child):
            case "Citation":
                fields["citation"] = direct_text(child)
            case "ArticleIdList":
                fields["article_id_list"] = build_article_id_list(child)
            case _:
                pass
    return Reference(**fields)


def build_reference_list(node: etree._Element) -> ReferenceList:
    references = []
    for child in element_children(node):
        match local_name(child):
            case "Reference":
                references.append(build_reference(child))
            case _:
                pass
    return ReferenceList(references=tuple(references))


def _collect_date_parts(node: etree._Element) -> dict[str, Any]:
    parts: dict[str, Any] = {}
    for child in element_children(node):
        match local_name(child):
            case "Year":
                parts["year"] = direct_text(child)
            case "Month":
                parts["month"] = direct_text(child)
            case "Day":
                parts["day"] = direct_text(child)
            case _:
                pass
    return parts


def build_history_date(node: etree._Element) -> HistoryDate:
    return HistoryDate(
        pub_status=attribute(node, "PubStatus"), **_collect_date_parts(node)
    )


def build_pubmed_data(node: etree._Element) -> PubmedData:
    fields: dict[str, Any] = {}
    history: list[HistoryDate] = []
    for child in element_children(node):
        match local_name(child):
            case "PublicationStatus":
                fields["publication_status"] = direct_text(child)
            case "ArticleIdList":
                fields["article_id_list"] = build_article_id_list(child)
            case "ReferenceList":
                fields["reference_list"] = build_reference_list(child)
            case "History":
                history.extend(
                    build_history_date(entry)
                    for entry in element_children(child)
                    if local_name(entry) == "PubMedPubDate"
                )
            case _:
                pass
    return PubmedData(history=tuple(history), **fields)


# ------------------------------------------------------------------
# MedlineCitation
# ------------------------------------------------------------------


def build_pmid(node: etree._Element) -> Pmid:
    return Pmid(value=direct_text(node), version=attribute(node, "Version"))


def build_pub_date(node: etree._Element) -> PubDate:
    return PubDate(**_collect_date_parts(node))


def build_issn(node: etree._Element) -> Issn:
    return Issn(value=direct_text(node), issn_type=attribute(node, "IssnType"))


def build_journal_issue(node: etree._Element) -> JournalIssue:
    fields: dict[str, Any] = {"cited_medium": attribute(node, "CitedMedium")}
    for child in element_children(node):
        match local_name(child):
            case "Volume":
                fields["volume"] = direct_text(child)
            case "Issue":
                fields["issue"] = direct_text(child)
            case "PubDate":
                fields["pub_date"] = build_pub_date(child)
            case _:
                pass
    return JournalIssue(**fields)


def build_journal(node: etree._Element) -> Journal:
    fields: dict[str, Any] = {}
    for child in element_children(node):
        match local_name(child):
            case "ISSN":
                fields["issn"] = build_issn(child)
            case "JournalIssue":
                fields["journal_issue"] = build_journal_issue(child)
            case "Title":
                fields["title"] = direct_text(child)
            case "ISOAbbreviation":
                fields["iso_abbreviation"] = direct_text(child)
            case _:
                pass
    return Journal(**fields)


def build_elocation_id(node: etree._Element) -> ELocationId:
    return ELocationId(
        value=direct_text(node),
        eid_type=attribute(node, "EIdType"),
        valid_yn=attribute(node, "ValidYN"),
    )


def build_abstract_text(node: etree._Element) -> AbstractText:
    """Build one abstract section, keeping inline markup in ``value``."""
    return AbstractText(
        label=attribute(node, "Label"),
        nlm_category=attribute(node, "NlmCategory"),
        value=serialize_mixed_content(node) or None,
    )


def build_abstract(node: etree._Element) -> Abstract:
    texts = []
    for child in element_children(node):
        match local_name(child):
            case "AbstractText":
                texts.append(build_abstract_text(child))
            case _:
                pass
    return Abstract(texts=tuple(texts))


def build_author(node: etree._Element) -> Author:
    fields: dict[str, Any] = {"valid_yn": attribute(node, "ValidYN")}
    for child in element_children(node):
        match local_name(child):
            case "LastName":
                fields["last_name"] = direct_text(child)
            case "ForeName":
                fields["fore_name"] = direct_text(child)
            case "Initials":
                fields["initials"] = direct_text(child)
            case "CollectiveName":
                fields["collective_name"] = direct_text(child)
            case _:
                pass
    return Author(**fields)


def _build_repeated(
    node: etree._Element, tag: str, build: Callable[[etree._Element], _T]
) -> tuple[_T, ...]:
    return tuple(
        build(child) for child in element_children(node) if local_name(child) == tag
    )


def _repeated_text(node: etree._Element, tag: str) -> tuple[str, ...]:
    """Direct text of every *tag* child, skipping empty entries."""
    values = (
        direct_text(child)
        for child in element_children(node)
        if local_name(child) == tag
    )
    return tuple(value for value in values if value)


def build_article(node: etree._Element) -> Article:
    fields: dict[str, Any] = {"pub_model": attribute(node, "PubModel")}
    for child in element_children(node):
        match local_name(child):
            case "ArticleTitle":
                fields["title"] = direct_text(child)
            case "Journal":
                fields["journal"] = build_journal(child)
            case "ELocationID":
                fields["elocation_id"] = build_elocation_id(child)
            case "Language":
                fields["language"] = direct_text(child)
            case "Abstract":
                fields["abstract"] = build_abstract(child)
            case "AuthorList":
                fields["authors"] = _build_repeated(child, "Author", build_author)
            case "PublicationTypeList":
                fields["publication_types"] = _repeated_text(child, "PublicationType")
            case _:
                pass
    return Article(**fields)


def build_medline_journal_info(node: etree._Element) -> MedlineJournalInfo:
    fields: dict[str, Any] = {}
    for child in element_children(node):
        match local_name(child):
            case "Country":
                fields["country"] = direct_text(child)
            case "MedlineTA":
                fields["medline_ta"] = direct_text(child)
            case "NlmUniqueID":
                fields["nlm_unique_id"] = direct_text(child)
            case "ISSNLinking":
                fields["issn_linking"] = direct_text(child)
            case _:
                pass
    return MedlineJournalInfo(**fields)


def build_mesh_term(node: etree._Element) -> MeshTerm:
    return MeshTerm(
        value=direct_text(node),
        ui=attribute(node, "UI"),
        major_topic_yn=attribute(node, "MajorTopicYN"),
    )


def build_mesh_heading(node: etree._Element) -> MeshHeading:
    fields: dict[str, Any] = {}
    qualifiers: list[MeshTerm] = []
    for child in element_children(node):
        match local_name(child):
            case "DescriptorName":
                fields["descriptor_name"] = build_mesh_term(child)
            case "QualifierName":
                qualifiers.append(build_mesh_term(child))
            case _:
                pass
    return MeshHeading(qualifier_names=tuple(qualifiers), **fields)


def build_medline_citation(node: etree._Element) -> MedlineCitation:
    fields: dict[str, Any] = {
        "status": attribute(node, "Status"),
        "owner": attribute(node, "Owner"),
    }
    keywords: list[str] = []
    for child in element_children(node):
        match local_name(child):
            case "PMID":
                fields["pmid"] = build_pmid(child)
            case "DateRevised":
                fields["date_revised"] = build_pub_date(child)
            case "Article":
                fields["article"] = build_article(child)
            case "MedlineJournalInfo":
                fields["medline_journal_info"] = build_medline_journal_info(child)
            case "MeshHeadingList":
                fields["mesh_headings"] = _build_repeated(
                    child, "MeshHeading", build_mesh_heading
                )
            case "KeywordList":
                # A citation may carry one KeywordList per owner (NLM, NOTNLM).
                keywords.extend(_repeated_text(child, "Keyword"))
            case _:
                pass
    return MedlineCitation(keywords=tuple(keywords), **fields)


# ------------------------------------------------------------------
# Top level
# ------------------------------------------------------------------


def build_pubmed_article(node: etree._Element) -> PubmedArticle:
    fields: dict[str, Any] = {}
    for child in element_children(node):
        match local_name(child):
            case "MedlineCitation":
                fields["medline_citation"] = build_medline_citation(child)
            case "PubmedData":
                fields["pubmed_data"] = build_pubmed_data(child)
            case _:
                pass
    return PubmedArticle(**fields)


def build_pubmed_article_set(node: etree._Element) -> PubmedArticleSet:
    articles = []
    for child in element_children(node):
        match local_name(child):
            case "PubmedArticle":
                articles.append(build_pubmed_article(child))
            case _:
                pass
    return PubmedArticleSet(articles=tuple(articles))


def read_pubmed_article_set(xml: str | bytes) -> PubmedArticleSet:
    """Parse an EFetch PubMed XML document into a ``PubmedArticleSet``.

    Raises
    ------
    MalformedDocumentError
        The text is not well-formed XML.
    MissingRootError
        The document contains no ``PubmedArticleSet`` element.
    """
    document = parse_document(xml)
    root = find_root(document, PUBMED_ROOT_TAG)
    article_set = build_pubmed_article_set(root)
    logger.debug("Built %d PubMed articles", len(article_set.articles))
    return article_set
