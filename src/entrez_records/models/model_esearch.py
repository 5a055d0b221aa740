"""Pydantic models for ESearch results."""

from pydantic import BaseModel, ConfigDict


class Translation(BaseModel):
    """How ESearch rewrote one part of the query (e.g. a term into MeSH)."""

    model_config = ConfigDict(frozen=True)

    source: str | None = None  # <From>
    target: str | None = None  # <To>


class ESearchResult(BaseModel):
    """Parsed eSearchResult document.

    ``query_key`` and ``web_env`` are only present when the search was run
    with usehistory=y; ``error`` is set when NCBI rejected the query.
    """

    model_config = ConfigDict(frozen=True)

    count: int = 0
    ret_max: int = 0
    ret_start: int = 0
    query_key: int | None = None
    web_env: str | None = None
    id_list: tuple[str, ...] = ()
    translation_set: tuple[Translation, ...] = ()
    query_translation: str | None = None
    error: str | None = None
