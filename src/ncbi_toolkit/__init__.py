"""ncbi-toolkit: async client for NCBI Entrez E-utilities."""

from ncbi_toolkit.data_sources.base_client import ClientConfig
from ncbi_toolkit.data_sources.entrez import EntrezClient
from ncbi_toolkit.errors import (
    EntrezError,
    EntrezParseError,
    EntrezTimeoutError,
    NetworkError,
    NoAbstractError,
    NotFoundError,
    UpstreamError,
)
from ncbi_toolkit.models import Paper, SearchResult

__all__ = [
    "EntrezClient",
    "ClientConfig",
    "Paper",
    "SearchResult",
    "EntrezError",
    "UpstreamError",
    "NotFoundError",
    "NoAbstractError",
    "EntrezParseError",
    "NetworkError",
    "EntrezTimeoutError",
]
