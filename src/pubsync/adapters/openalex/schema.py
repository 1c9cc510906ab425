"""Pydantic models describing the OpenAlex ``/works`` payload."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class OpenAlexBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class OpenAlexSource(OpenAlexBaseModel):
    display_name: str | None = None


class OpenAlexLocation(OpenAlexBaseModel):
    source: OpenAlexSource | None = None


class OpenAlexAuthor(OpenAlexBaseModel):
    display_name: str | None = None


class OpenAlexAuthorship(OpenAlexBaseModel):
    author: OpenAlexAuthor


class OpenAlexOpenAccess(OpenAlexBaseModel):
    oa_url: str | None = None


class OpenAlexTopic(OpenAlexBaseModel):
    display_name: str


class OpenAlexWork(OpenAlexBaseModel):
    id: str
    title: str | None = None
    publication_date: str | None = None
    doi: str | None = None
    cited_by_count: int = Field(default=0, ge=0)
    primary_location: OpenAlexLocation | None = None
    authorships: list[OpenAlexAuthorship] = Field(default_factory=list["OpenAlexAuthorship"])
    open_access: OpenAlexOpenAccess | None = None
    topics: list[OpenAlexTopic] = Field(default_factory=list["OpenAlexTopic"])


class OpenAlexMeta(OpenAlexBaseModel):
    count: int | None = None
    page: int | None = None
    per_page: int | None = None


class OpenAlexWorksResponse(OpenAlexBaseModel):
    meta: OpenAlexMeta | None = None
    results: list[OpenAlexWork] = Field(default_factory=list["OpenAlexWork"])
