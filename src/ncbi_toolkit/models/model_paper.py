"""
Pydantic models for normalized PubMed records.

These are the data contracts between the Entrez client and its callers.
Callers receive these models - they never see raw API responses.
"""

from pydantic import BaseModel, ConfigDict, Field


class Paper(BaseModel):
    """A single PubMed article reduced to citation metadata."""

    model_config = ConfigDict(populate_by_name=True)

    pmid: int | None = None  # from the summary "uid"
    title: str = ""
    authors: list[str] = []  # display names, upstream order
    journal: str = ""  # ESummary "source", e.g. "Nature"
    pubdate: str | None = None  # free-form, e.g. "2023 Jun 15"
    volume: str = ""
    issue: str = ""
    pages: str = ""
    doi: str = ""
    pmcid: str = ""  # e.g. "PMC1234567"; empty when no full text
    pub_types: list[str] = Field([], alias="pubTypes")
    language: list[str] = []
    publication_status: str = Field("", alias="publicationStatus")


class SearchResult(BaseModel):
    """One page of ESearch hits with their summaries."""

    count: int  # total matches upstream, not len(papers)
    papers: list[Paper] = []
