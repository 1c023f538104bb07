"""
NCBI Entrez E-utilities client.

Six public coroutines:
  1. search     — ESearch a term, then summarize the current page
  2. summaries  — ESummary records for a list of PMIDs
  3. summary    — ESummary record for a single PMID
  4. neighbor   — ELink references, citing articles, or similar articles
  5. abstract   — EFetch the AbstractText node of a PubMed record
  6. fulltext   — EFetch the PubMed Central XML for a PMID
"""

from __future__ import annotations

import json
import logging
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from typing import Any, Literal

from pydantic import ValidationError

from ncbi_toolkit.constants import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    EFETCH_ENDPOINT,
    ELINK_ENDPOINT,
    ESEARCH_ENDPOINT,
    ESUMMARY_ENDPOINT,
    LINK_NAMES,
    SOURCE_NAME,
    SUMMARY_ERROR_KEY,
    SUMMARY_UIDS_KEY,
)
from ncbi_toolkit.data_sources.base_client import BaseClient, RequestContext
from ncbi_toolkit.errors import (
    EntrezParseError,
    NoAbstractError,
    NotFoundError,
)
from ncbi_toolkit.models.model_paper import Paper, SearchResult
from ncbi_toolkit.models.model_summary import SummaryRecord
from ncbi_toolkit.utils.xml import parse_xml

logger = logging.getLogger(__name__)

NeighborType = Literal["cites", "citedby", "similar"]

_ABSTRACT_PATH = (
    "PubmedArticleSet",
    "PubmedArticle",
    "MedlineCitation",
    "Article",
    "Abstract",
)


class EntrezClient(BaseClient):
    """Client for the PubMed side of NCBI E-utilities."""

    @property
    def _source_name(self) -> str:
        return SOURCE_NAME

    def _context(self, method: str) -> RequestContext:
        return RequestContext(source=self._source_name, method=method)

    async def search(
        self,
        term: str,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> SearchResult:
        """Search PubMed and return the total hit count plus one page of papers."""
        params = self._with_api_key(
            {
                "db": "pubmed",
                "term": term,
                "retstart": str(page * limit),
                "retmax": str(limit),
                "retmode": "json",
            }
        )
        data = await self._rest_get(
            self._endpoint(ESEARCH_ENDPOINT),
            params,
            context=self._context("search"),
        )

        esearch = data.get("esearchresult") if isinstance(data, dict) else None
        if not isinstance(esearch, dict) or "count" not in esearch:
            raise EntrezParseError("ESearch response has no esearchresult.count")
        try:
            count = int(esearch["count"])
        except (TypeError, ValueError) as e:
            raise EntrezParseError(
                f"ESearch count is not an integer: {esearch['count']!r}"
            ) from e

        ids = [str(pmid) for pmid in esearch.get("idlist") or []]
        return SearchResult(count=count, papers=await self.summaries(ids))

    async def summaries(self, pmids: list[str]) -> list[Paper]:
        """Fetch ESummary records for `pmids`; no request when the list is empty."""
        if not pmids:
            return []

        params = self._with_api_key(
            {
                "db": "pubmed",
                "id": ",".join(pmids),
                "retmode": "json",
            }
        )
        data = await self._rest_get(
            self._endpoint(ESUMMARY_ENDPOINT),
            params,
            context=self._context("summaries"),
        )
        result = data.get("result") if isinstance(data, dict) else None
        return self.convert_summaries(result or {})

    async def summary(self, pmid: int) -> Paper:
        """Fetch the ESummary record for a single PMID."""
        papers = await self.summaries([str(pmid)])
        if not papers:
            raise NotFoundError(f"No summary found for PMID {pmid}")
        return papers[0]

    async def neighbor(self, pmid: int, type: NeighborType) -> list[Paper]:
        """Return papers linked to `pmid`: its references, citers, or similar articles."""
        linkname = LINK_NAMES.get(type)
        if linkname is None:
            raise ValueError(
                f"Unknown neighbor type {type!r}; expected one of {sorted(LINK_NAMES)}"
            )

        params = self._with_api_key(
            {
                "db": "pubmed",
                "dbfrom": "pubmed",
                "cmd": "neighbor",
                "id": str(pmid),
                "retmode": "json",
            }
        )
        data = await self._rest_get(
            self._endpoint(ELINK_ENDPOINT),
            params,
            context=self._context("neighbor"),
        )
        ids = self._linked_ids(data, linkname)
        logger.debug("ELink %s for %s: %d ids", linkname, pmid, len(ids))
        return await self.summaries(ids)

    async def abstract(self, pmid: int) -> str:
        """
        Return the AbstractText node of a PubMed record as a JSON string.

        A plain abstract serializes as a quoted string; a structured one
        (Label attributes, several sections) serializes as an object or a
        list of objects with the section text under "text".
        """
        params = self._with_api_key(
            {
                "db": "pubmed",
                "id": str(pmid),
                "retmode": "xml",
            }
        )
        xml_text = await self._rest_get_text(
            self._endpoint(EFETCH_ENDPOINT),
            params,
            context=self._context("abstract"),
        )

        try:
            node: Any = parse_xml(xml_text)
        except ET.ParseError as e:
            raise EntrezParseError(f"Failed to parse XML: {e}") from e

        for key in _ABSTRACT_PATH:
            if not isinstance(node, dict) or key not in node:
                raise NoAbstractError(f"No abstract found for PMID {pmid}")
            node = node[key]

        abstract_text = node.get("AbstractText") if isinstance(node, dict) else None
        if abstract_text is None:
            return ""
        return json.dumps(abstract_text, ensure_ascii=False, separators=(",", ":"))

    async def fulltext(self, pmid: int) -> str:
        """Return the raw PubMed Central XML for `pmid`."""
        paper = await self.summary(pmid)
        if not paper.pmcid:
            raise NotFoundError(f"No full text available for PMID {pmid}")

        params = self._with_api_key(
            {
                "db": "pmc",
                "id": paper.pmcid,
                "retmode": "xml",
            }
        )
        return await self._rest_get_text(
            self._endpoint(EFETCH_ENDPOINT),
            params,
            context=self._context("fulltext"),
        )

    @staticmethod
    def _linked_ids(data: Any, linkname: str) -> list[str]:
        """Ids from the first linkset's linksetdb named `linkname`, or []."""
        linksets = data.get("linksets") if isinstance(data, dict) else None
        if not linksets or not isinstance(linksets[0], dict):
            return []
        for linksetdb in linksets[0].get("linksetdbs") or []:
            if linksetdb.get("linkname") == linkname:
                return [str(link) for link in linksetdb.get("links") or []]
        return []

    @staticmethod
    def convert_summaries(result: Mapping[str, Any]) -> list[Paper]:
        """Map an ESummary `result` object to Papers, skipping "uids" and error entries."""
        papers: list[Paper] = []

        for key, raw in result.items():
            if key == SUMMARY_UIDS_KEY:
                continue
            if not isinstance(raw, Mapping):
                continue
            if SUMMARY_ERROR_KEY in raw:
                # ESummary reports unknown PMIDs as {"uid": ..., "error": ...}
                logger.debug("No summary for %s: %s", key, raw[SUMMARY_ERROR_KEY])
                continue

            try:
                record = SummaryRecord.model_validate(dict(raw))
            except ValidationError as e:
                raise EntrezParseError(f"Malformed summary record {key}: {e}") from e
            papers.append(
                Paper(
                    pmid=record.uid,
                    title=record.title,
                    authors=[author.name for author in record.authors],
                    journal=record.source,
                    pubdate=record.pubdate,
                    volume=record.volume,
                    issue=record.issue,
                    pages=record.pages,
                    doi=record.article_id("doi"),
                    pmcid=record.article_id("pmc"),
                    pub_types=record.pubtype,
                    language=record.lang,
                    publication_status=record.recordstatus,
                )
            )

        return papers
