"""Project-wide constants."""

# -- Base client defaults ---------------------------------------------------
DEFAULT_TIMEOUT: float = 30.0
USER_AGENT: str = "ncbi-toolkit/1.0.0"
SOURCE_NAME: str = "entrez"

# -- PubMed / NCBI ----------------------------------------------------------
NCBI_BASE_URL: str = "https://eutils.ncbi.nlm.nih.gov/entrez/eutils"
ESEARCH_ENDPOINT: str = "esearch.fcgi"
ESUMMARY_ENDPOINT: str = "esummary.fcgi"
ELINK_ENDPOINT: str = "elink.fcgi"
EFETCH_ENDPOINT: str = "efetch.fcgi"

DEFAULT_PAGE: int = 0
DEFAULT_PAGE_SIZE: int = 10

# Key in the ESummary "result" object that lists ids rather than a record
SUMMARY_UIDS_KEY: str = "uids"
# Key marking a per-PMID failure inside the ESummary "result" object
SUMMARY_ERROR_KEY: str = "error"

# -- Neighbor type → ELink linkname -----------------------------------------
LINK_NAMES: dict[str, str] = {
    "cites": "pubmed_pubmed_refs",
    "citedby": "pubmed_pubmed_citedin",
    "similar": "pubmed_pubmed",
}

# -- XML flattening ---------------------------------------------------------
XML_TEXT_KEY: str = "text"
