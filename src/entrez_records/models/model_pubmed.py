"""
Pydantic models for PubMed EFetch records.

These mirror the PubmedArticleSet XML returned by EFetch (db=pubmed,
retmode=xml). Every record is frozen: it is built once by the parser and
never changed afterwards. Optional fields are None when the source element or
attribute is missing; repeated elements become tuples, empty when absent.
"""

from pydantic import BaseModel, ConfigDict


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


# ------------------------------------------------------------------
# Shared
# ------------------------------------------------------------------


class PubDate(_Record):
    """Year / month / day as written in the source; never resolved to a date.

    Months may be numeric ("03") or names ("Mar"), and some records carry a
    season instead, so the parts are kept as strings.
    """

    year: str | None = None
    month: str | None = None
    day: str | None = None


# ------------------------------------------------------------------
# PubmedData
# ------------------------------------------------------------------


class ArticleId(_Record):
    """An identifier of the article in some namespace (pubmed, doi, pmc ...)."""

    id_type: str | None = None  # IdType attribute
    value: str | None = None


class ArticleIdList(_Record):
    article_ids: tuple[ArticleId, ...] = ()


class Reference(_Record):
    """A cited work: free-text citation plus whatever ids PubMed resolved."""

    citation: str | None = None
    article_id_list: ArticleIdList = ArticleIdList()


class ReferenceList(_Record):
    references: tuple[Reference, ...] = ()


class HistoryDate(_Record):
    """One PubMedPubDate entry of the article history (received, accepted ...)."""

    pub_status: str | None = None  # PubStatus attribute
    year: str | None = None
    month: str | None = None
    day: str | None = None


class PubmedData(_Record):
    """Post-publication metadata maintained by PubMed."""

    publication_status: str | None = None  # e.g. "ppublish", "epublish"
    article_id_list: ArticleIdList | None = None
    reference_list: ReferenceList | None = None
    history: tuple[HistoryDate, ...] = ()


# ------------------------------------------------------------------
# MedlineCitation
# ------------------------------------------------------------------


class Pmid(_Record):
    value: str | None = None
    version: str | None = None  # Version attribute


class Issn(_Record):
    value: str | None = None
    issn_type: str | None = None  # "Print" or "Electronic"


class JournalIssue(_Record):
    cited_medium: str | None = None  # "Print" or "Internet"
    volume: str | None = None
    issue: str | None = None
    pub_date: PubDate | None = None


class Journal(_Record):
    issn: Issn | None = None
    journal_issue: JournalIssue | None = None
    title: str | None = None
    iso_abbreviation: str | None = None  # e.g. "N Engl J Med"


class ELocationId(_Record):
    """Electronic location of the article, usually a DOI or a publisher id."""

    value: str | None = None
    eid_type: str | None = None  # "doi" or "pii"
    valid_yn: str | None = None


class AbstractText(_Record):
    """One abstract section.

    ``value`` keeps inline markup (``<i>``, ``<sup>``, MathML ...) as literal
    tags; see ``entrez_records.parsers.mixed_content``.
    """

    label: str | None = None  # e.g. "BACKGROUND"
    nlm_category: str | None = None  # e.g. "METHODS"
    value: str | None = None


class Abstract(_Record):
    texts: tuple[AbstractText, ...] = ()


class Author(_Record):
    valid_yn: str | None = None
    last_name: str | None = None
    fore_name: str | None = None
    initials: str | None = None
    collective_name: str | None = None  # group authorship, instead of a name


class Article(_Record):
    """The Article element of a citation: title, journal, abstract, authors."""

    pub_model: str | None = None  # PubModel attribute, e.g. "Print-Electronic"
    title: str | None = None
    journal: Journal | None = None
    elocation_id: ELocationId | None = None
    language: str | None = None  # ISO 639-2, e.g. "eng"
    abstract: Abstract | None = None
    authors: tuple[Author, ...] = ()
    publication_types: tuple[str, ...] = ()  # NLM controlled vocabulary


class MedlineJournalInfo(_Record):
    country: str | None = None
    medline_ta: str | None = None  # MEDLINE title abbreviation
    nlm_unique_id: str | None = None
    issn_linking: str | None = None


class MeshTerm(_Record):
    """A MeSH descriptor or qualifier name."""

    value: str | None = None
    ui: str | None = None  # e.g. "D005234"
    major_topic_yn: str | None = None


class MeshHeading(_Record):
    descriptor_name: MeshTerm | None = None
    qualifier_names: tuple[MeshTerm, ...] = ()


class MedlineCitation(_Record):
    status: str | None = None  # Status attribute, e.g. "MEDLINE"
    owner: str | None = None  # Owner attribute, e.g. "NLM"
    pmid: Pmid | None = None
    date_revised: PubDate | None = None
    article: Article | None = None
    medline_journal_info: MedlineJournalInfo | None = None
    mesh_headings: tuple[MeshHeading, ...] = ()
    keywords: tuple[str, ...] = ()


# ------------------------------------------------------------------
# Top level
# ------------------------------------------------------------------


class PubmedArticle(_Record):
    medline_citation: MedlineCitation | None = None
    pubmed_data: PubmedData | None = None


class PubmedArticleSet(_Record):
    """Root of an EFetch result: the articles in document order."""

    articles: tuple[PubmedArticle, ...] = ()
