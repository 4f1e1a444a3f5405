"""wikiHow search response and scraped page models."""

from pydantic import BaseModel, Field


class WikiSearchHit(BaseModel):
    title: str = ""


class WikiQuery(BaseModel):
    search: list[WikiSearchHit] = []


class WikiSearchResult(BaseModel):
    """Response of ``api.php?action=query&list=search``. Missing keys decode as empty."""

    query: WikiQuery = Field(default_factory=WikiQuery)

    @property
    def titles(self) -> list[str]:
        return [hit.title for hit in self.query.search]


class ScrapedPage(BaseModel):
    """Step fragments scraped from one article, in document order."""

    title: str
    steps: list[str]
