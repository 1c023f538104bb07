"""Integration tests against the live NCBI E-utilities service."""

import pytest

from ncbi_toolkit.data_sources.base_client import ClientConfig
from ncbi_toolkit.data_sources.entrez import EntrezClient
from ncbi_toolkit.errors import NotFoundError

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]

# Indexed record with a PubMed Central copy
KNOWN_PMID = 31452104


async def test_search_returns_page():
    async with EntrezClient(ClientConfig.from_settings()) as client:
        result = await client.search("metformin", limit=3)

    assert result.count > 3
    assert 0 < len(result.papers) <= 3
    assert all(p.pmid for p in result.papers)


async def test_summary_and_similar():
    async with EntrezClient(ClientConfig.from_settings()) as client:
        paper = await client.summary(KNOWN_PMID)
        similar = await client.neighbor(KNOWN_PMID, "similar")

    assert paper.pmid == KNOWN_PMID
    assert paper.title
    assert similar


async def test_unknown_pmid_not_found():
    async with EntrezClient(ClientConfig.from_settings()) as client:
        with pytest.raises(NotFoundError):
            await client.summary(999999999)
