"""
Pydantic models for raw ESummary records.

ESummary JSON varies between records (older citations lack article ids,
some have no authors, fields arrive as null).  Every field here is
optional and falls back to the same default the Paper mapping uses.
"""

from pydantic import BaseModel, model_validator


class _NullTolerantModel(BaseModel):
    @model_validator(mode="before")
    @classmethod
    def coerce_nones(cls, values: dict) -> dict:
        if not isinstance(values, dict):
            return values
        values = dict(values)
        for field_name, field_info in cls.model_fields.items():
            if not values.get(field_name) and field_info.default is not None:
                values[field_name] = field_info.default
        return values


class Author(_NullTolerantModel):
    """One entry of a summary's `authors` list."""

    name: str = ""
    authtype: str = ""


class ArticleId(_NullTolerantModel):
    """One entry of a summary's `articleids` list (doi, pmc, pubmed, ...)."""

    idtype: str = ""
    value: str = ""


class SummaryRecord(_NullTolerantModel):
    """A single record from the ESummary `result` object."""

    uid: str | int | None = None
    title: str = ""
    authors: list[Author] = []
    source: str = ""
    pubdate: str | None = None
    volume: str = ""
    issue: str = ""
    pages: str = ""
    articleids: list[ArticleId] = []
    pubtype: list[str] = []
    lang: list[str] = []
    recordstatus: str = ""

    def article_id(self, idtype: str) -> str:
        """Value of the first article id of `idtype`, or "" if none."""
        for aid in self.articleids:
            if aid.idtype == idtype:
                return aid.value
        return ""
