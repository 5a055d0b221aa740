"""
Request builders for the Entrez E-utilities.

  ESearchRequest: term query against a database, optionally on the history server
  EFetchRequest : full records for a list of UIDs

Both build the query parameters E-utilities expects (only the ones that are
set) and the full request URL.
"""

from __future__ import annotations

from urllib.parse import urlencode

from pydantic import BaseModel, field_validator, model_validator

from entrez_records.constants import DEFAULT_DB, EFETCH_URL, ESEARCH_URL


class _EutilsRequest(BaseModel):
    """Parameters shared by every E-utility."""

    db: str = DEFAULT_DB
    api_key: str | None = None
    tool: str | None = None
    email: str | None = None

    def _identity_params(self) -> dict[str, str]:
        params = {}
        if self.api_key:
            params["api_key"] = self.api_key
        if self.tool:
            params["tool"] = self.tool
        if self.email:
            params["email"] = self.email
        return params


class ESearchRequest(_EutilsRequest):
    """An ESearch call. ``term`` is required, everything else is optional."""

    term: str
    use_history: bool = True
    webenv: str | None = None
    query_key: str | None = None
    retstart: int | None = None
    retmax: int | None = None
    rettype: str | None = None  # "uilist" or "count"
    retmode: str | None = "xml"
    sort: str | None = None
    field: str | None = None
    idtype: str | None = None
    datetype: str | None = None  # "pdat", "mdat" or "edat"
    reldate: int | None = None
    mindate: str | None = None  # YYYY, YYYY/MM or YYYY/MM/DD
    maxdate: str | None = None

    @model_validator(mode="after")
    def check_date_range(self) -> ESearchRequest:
        # E-utilities ignores a date range unless both ends are given.
        if (self.mindate is None) != (self.maxdate is None):
            raise ValueError("mindate and maxdate must be given together")
        return self

    def to_params(self) -> dict[str, str]:
        params = {
            "db": self.db,
            "term": self.term,
            "usehistory": "y" if self.use_history else "n",
        }
        optional = {
            "WebEnv": self.webenv,
            "query_key": self.query_key,
            "retstart": self.retstart,
            "retmax": self.retmax,
            "rettype": self.rettype,
            "retmode": self.retmode,
            "sort": self.sort,
            "field": self.field,
            "idtype": self.idtype,
            "datetype": self.datetype,
            "reldate": self.reldate,
            "mindate": self.mindate,
            "maxdate": self.maxdate,
        }
        params.update({k: str(v) for k, v in optional.items() if v is not None})
        params.update(self._identity_params())
        return params

    def build_url(self) -> str:
        return f"{ESEARCH_URL}?{urlencode(self.to_params())}"


class EFetchRequest(_EutilsRequest):
    """An EFetch call for a list of UIDs (PMIDs for db=pubmed)."""

    ids: list[str]
    retmode: str = "xml"
    rettype: str | None = None

    @field_validator("ids")
    @classmethod
    def ids_not_empty(cls, ids: list[str]) -> list[str]:
        ids = [i.strip() for i in ids if i and i.strip()]
        if not ids:
            raise ValueError("EFetch needs at least one id")
        return ids

    def to_params(self) -> dict[str, str]:
        params = {
            "db": self.db,
            "id": ",".join(self.ids),
            "retmode": self.retmode,
        }
        if self.rettype:
            params["rettype"] = self.rettype
        params.update(self._identity_params())
        return params

    def build_url(self) -> str:
        return f"{EFETCH_URL}?{urlencode(self.to_params())}"
