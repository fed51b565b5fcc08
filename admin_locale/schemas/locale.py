from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LocaleFieldValue(BaseModel):
    """Display payload of a LocaleField for one record."""

    model_config = ConfigDict(populate_by_name=True)

    id: Any
    locale: str | None = None
    locale_parent_id: Any | None = Field(default=None, alias="localeParentId")
    existing_localisations: dict[str, Any] = Field(default_factory=dict, alias="existingLocalisations")


class LocaleFieldUpdate(BaseModel):
    """Submitted locale field values, keyed by the resource's attribute names."""

    model_config = ConfigDict(extra="allow")


class RecordSummary(BaseModel):
    id: Any
    title: str
    locale: str | None = None
    locale_parent_id: Any | None = None


class ResourceListResponse(BaseModel):
    resource: str
    label: str
    items: list[RecordSummary]
    total: int
