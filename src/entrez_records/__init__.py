"""entrez-records: typed records from NCBI Entrez E-utilities XML."""

from entrez_records.parsers import (
    InvalidRecordError,
    MalformedDocumentError,
    MissingRootError,
    ParsingError,
    read_esearch_result,
    read_pubmed_article_set,
)

__version__ = "0.1.0"

__all__ = [
    "InvalidRecordError",
    "MalformedDocumentError",
    "MissingRootError",
    "ParsingError",
    "read_esearch_result",
    "read_pubmed_article_set",
]
