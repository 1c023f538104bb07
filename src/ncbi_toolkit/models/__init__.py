"""Data models for ncbi-toolkit."""

from ncbi_toolkit.models.model_paper import Paper, SearchResult
from ncbi_toolkit.models.model_summary import ArticleId, Author, SummaryRecord

__all__ = ["Paper", "SearchResult", "SummaryRecord", "Author", "ArticleId"]
