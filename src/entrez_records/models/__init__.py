"""Data models for entrez-records."""

from entrez_records.models.model_esearch import ESearchResult, Translation
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

__all__ = [
    "Abstract",
    "AbstractText",
    "Article",
    "ArticleId",
    "ArticleIdList",
    "Author",
    "ELocationId",
    "ESearchResult",
    "HistoryDate",
    "Issn",
    "Journal",
    "JournalIssue",
    "MedlineCitation",
    "MedlineJournalInfo",
    "MeshHeading",
    "MeshTerm",
    "Pmid",
    "PubDate",
    "PubmedArticle",
    "PubmedArticleSet",
    "PubmedData",
    "Reference",
    "ReferenceList",
    "Translation",
]
