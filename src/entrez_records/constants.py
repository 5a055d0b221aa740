"""Project-wide constants."""

# -- Base client defaults ---------------------------------------------------
DEFAULT_TIMEOUT: float = 30.0

# NCBI allows 3 requests/second without an API key and 10 with one.
NCBI_RATE_LIMIT: float = 3.0
NCBI_RATE_LIMIT_WITH_KEY: float = 10.0

# -- Entrez E-utilities -----------------------------------------------------
NCBI_BASE_URL: str = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils"
ESEARCH_URL: str = f"{NCBI_BASE_URL}/esearch.fcgi"
EFETCH_URL: str = f"{NCBI_BASE_URL}/efetch.fcgi"
DEFAULT_DB: str = "pubmed"
DEFAULT_TOOL: str = "entrez-records"

# -- XML roots --------------------------------------------------------------
PUBMED_ROOT_TAG: str = "PubmedArticleSet"
ESEARCH_ROOT_TAG: str = "eSearchResult"

# -- Mixed content ----------------------------------------------------------
# Inline markup is re-emitted two levels deep (e.g. <mml:math><mml:mi>x</mml:mi>);
# anything nested further collapses to its direct text.
MAX_INLINE_DEPTH: int = 2
