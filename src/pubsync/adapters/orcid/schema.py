"""Pydantic models describing the ORCID public API (v3.0) payloads.

Only the fields the sync reads are modelled; everything else is ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

WORK_TYPE_JOURNAL_ARTICLE = "journal-article"
EXTERNAL_ID_TYPE_DOI = "doi"
RELATIONSHIP_SELF = "self"
CITATION_TYPE_BIBTEX = "bibtex"


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class OrcidBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class OrcidValue(OrcidBaseModel):
    """ORCID wraps most scalars as ``{"value": ...}``."""

    value: str | None = None

    _normalize_value = field_validator("value", mode="before")(_blank_to_none)


class OrcidTitle(OrcidBaseModel):
    title: OrcidValue | None = None
    subtitle: OrcidValue | None = None


class OrcidPublicationDate(OrcidBaseModel):
    year: OrcidValue | None = None
    month: OrcidValue | None = None
    day: OrcidValue | None = None


class OrcidExternalId(OrcidBaseModel):
    type: str = Field(alias="external-id-type")
    value: str = Field(alias="external-id-value")
    relationship: str | None = Field(default=None, alias="external-id-relationship")


class OrcidExternalIds(OrcidBaseModel):
    external_id: list[OrcidExternalId] = Field(
        default_factory=list["OrcidExternalId"], alias="external-id"
    )


class OrcidWorkSummary(OrcidBaseModel):
    put_code: int = Field(alias="put-code")
    type: str | None = None
    title: OrcidTitle | None = None


class OrcidWorkGroup(OrcidBaseModel):
    work_summary: list[OrcidWorkSummary] = Field(
        default_factory=list["OrcidWorkSummary"], alias="work-summary"
    )

    @property
    def preferred_summary(self) -> OrcidWorkSummary | None:
        return self.work_summary[0] if self.work_summary else None


class OrcidWorksResponse(OrcidBaseModel):
    group: list[OrcidWorkGroup] = Field(default_factory=list["OrcidWorkGroup"])


class OrcidContributor(OrcidBaseModel):
    credit_name: OrcidValue | None = Field(default=None, alias="credit-name")


class OrcidContributors(OrcidBaseModel):
    contributor: list[OrcidContributor] = Field(default_factory=list["OrcidContributor"])


class OrcidCitation(OrcidBaseModel):
    citation_type: str | None = Field(default=None, alias="citation-type")
    citation_value: str | None = Field(default=None, alias="citation-value")


class OrcidWork(OrcidBaseModel):
    put_code: int = Field(alias="put-code")
    type: str | None = None
    title: OrcidTitle | None = None
    journal_title: OrcidValue | None = Field(default=None, alias="journal-title")
    publication_date: OrcidPublicationDate | None = Field(default=None, alias="publication-date")
    external_ids: OrcidExternalIds | None = Field(default=None, alias="external-ids")
    contributors: OrcidContributors | None = None
    citation: OrcidCitation | None = None
    url: OrcidValue | None = None


class OrcidBulkEntry(OrcidBaseModel):
    """One slot of a bulk response: either the work or the error that replaced it."""

    work: OrcidWork | None = None
    error: dict[str, object] | None = None


class OrcidBulkResponse(OrcidBaseModel):
    bulk: list[OrcidBulkEntry] = Field(default_factory=list["OrcidBulkEntry"])
