"""
Entrez E-utilities client.

Two typed methods:
  1. search      : ESearch a term, returns ESearchResult
  2. fetch_pubmed: EFetch PubMed records, returns PubmedArticleSet

Parsing failures from the readers (MalformedDocumentError, MissingRootError)
propagate unchanged; transport failures surface as DataSourceError.
"""

from __future__ import annotations

import logging

from entrez_records.config import Settings, get_settings
from entrez_records.constants import EFETCH_URL, ESEARCH_URL
from entrez_records.data_sources.base_client import (
    BaseClient,
    ClientConfig,
    RateLimitConfig,
)
from entrez_records.data_sources.eutils import EFetchRequest, ESearchRequest
from entrez_records.models.model_esearch import ESearchResult
from entrez_records.models.model_pubmed import PubmedArticleSet
from entrez_records.parsers.esearch import read_esearch_result
from entrez_records.parsers.pubmed import read_pubmed_article_set

logger = logging.getLogger(__name__)


class EntrezClient(BaseClient):
    """Client for NCBI ESearch / EFetch."""

    SEARCH_URL = ESEARCH_URL
    FETCH_URL = EFETCH_URL

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        super().__init__(
            ClientConfig(
                rate_limit=RateLimitConfig(
                    requests_per_second=self.settings.effective_rate_limit
                ),
                timeout_seconds=self.settings.timeout_seconds,
            )
        )

    @property
    def _source_name(self) -> str:
        return "entrez"

    def _identity(self) -> dict[str, str | None]:
        return {
            "api_key": self.settings.ncbi_api_key or None,
            "tool": self.settings.ncbi_tool or None,
            "email": self.settings.ncbi_email or None,
        }

    async def esearch_xml(self, request: ESearchRequest) -> str:
        """Run ESearch and return the raw XML text."""
        return await self._rest_get_xml(self.SEARCH_URL, request.to_params())

    async def efetch_xml(self, request: EFetchRequest) -> str:
        """Run EFetch and return the raw XML text."""
        return await self._rest_get_xml(self.FETCH_URL, request.to_params())

    async def search(
        self, term: str | ESearchRequest, retmax: int | None = None
    ) -> ESearchResult:
        """Search a database (PubMed by default) and return the parsed result."""
        if isinstance(term, ESearchRequest):
            request = term
        else:
            request = ESearchRequest(term=term, retmax=retmax, **self._identity())

        result = read_esearch_result(await self.esearch_xml(request))
        if result.error:
            logger.warning(
                "ESearch reported an error for %r: %s", request.term, result.error
            )
        return result

    async def fetch_pubmed(self, pmids: list[str]) -> PubmedArticleSet:
        """Fetch full PubMed records for ``pmids`` in a single request."""
        if not pmids:
            return PubmedArticleSet()

        request = EFetchRequest(ids=pmids, **self._identity())
        article_set = read_pubmed_article_set(await self.efetch_xml(request))
        logger.info(
            "Fetched %d of %d requested PMIDs", len(article_set.articles), len(pmids)
        )
        return article_set
