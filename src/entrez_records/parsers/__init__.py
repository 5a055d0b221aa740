"""Readers turning E-utilities XML into records."""

from entrez_records.parsers.errors import (
    InvalidRecordError,
    MalformedDocumentError,
    MissingRootError,
    ParsingError,
)
from entrez_records.parsers.esearch import read_esearch_result
from entrez_records.parsers.pubmed import read_pubmed_article_set

__all__ = [
    "InvalidRecordError",
    "MalformedDocumentError",
    "MissingRootError",
    "ParsingError",
    "read_esearch_result",
    "read_pubmed_article_set",
]
