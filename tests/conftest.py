"""Pytest configuration and fixtures."""

import pytest

from ncbi_toolkit.config import get_settings
from ncbi_toolkit.data_sources.base_client import ClientConfig
from ncbi_toolkit.data_sources.entrez import EntrezClient


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Settings are lru_cached; reset so monkeypatched env vars take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client() -> EntrezClient:
    """Client with default config and no API key."""
    return EntrezClient(ClientConfig())


@pytest.fixture
def keyed_client() -> EntrezClient:
    """Client configured with an API key."""
    return EntrezClient(ClientConfig(api_key="secret-key"))


@pytest.fixture
def sample_summary_result() -> dict:
    """ESummary `result` object for two PMIDs, including the uids index."""
    return {
        "uids": ["31452104", "28445112"],
        "31452104": {
            "uid": "31452104",
            "pubdate": "2019 Aug 26",
            "source": "Nat Commun",
            "authors": [
                {"name": "Smith J", "authtype": "Author", "clusterid": ""},
                {"name": "Doe A", "authtype": "Author", "clusterid": ""},
            ],
            "title": "Gut microbiome and metabolic health.",
            "volume": "10",
            "issue": "1",
            "pages": "3812",
            "lang": ["eng"],
            "pubtype": ["Journal Article", "Review"],
            "recordstatus": "PubMed - indexed for MEDLINE",
            "articleids": [
                {"idtype": "pubmed", "idtypen": 1, "value": "31452104"},
                {"idtype": "doi", "idtypen": 3, "value": "10.1038/s41467-019-11812-6"},
                {"idtype": "pmc", "idtypen": 8, "value": "PMC6710274"},
            ],
        },
        "28445112": {
            "uid": "28445112",
            "pubdate": "2017",
            "source": "Cell",
            "title": "An older record without article ids.",
            "lang": ["eng"],
            "pubtype": ["Journal Article"],
        },
    }
