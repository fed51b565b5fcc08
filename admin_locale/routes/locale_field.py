"""
Locale field admin routes

admin_router  (prefix: /api/v1/admin)
    GET  /resources/{resource}                             → list records (?locale= filter)
    GET  /resources/{resource}/filters/locale              → locale filter definition
    GET  /resources/{resource}/{record_id}/fields/locale   → resolved locale field
    PUT  /resources/{resource}/{record_id}/fields/locale   → validate + save locale field
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: TC002

from admin_locale.config import LocaleConfig, get_locale_config  # noqa: TC001
from admin_locale.database import get_db
from admin_locale.exceptions import ResourceNotFoundError
from admin_locale.fields.locale_field import LocaleField
from admin_locale.filters.locale_filter import LocaleFilter
from admin_locale.resources.base import Resource  # noqa: TC001
from admin_locale.resources.registry import ResourceRegistry, resource_registry
from admin_locale.schemas.locale import LocaleFieldUpdate, RecordSummary, ResourceListResponse
from admin_locale.services.locale_service import get_record, list_records

admin_router = APIRouter(tags=["Admin Locale"])
logger = logging.getLogger(__name__)


# ── Dependencies ───────────────────────────────────────────────────────────────


def get_resource_registry() -> ResourceRegistry:
    return resource_registry


def get_resource(
    resource: str,
    registry: ResourceRegistry = Depends(get_resource_registry),
) -> type[Resource]:
    resource_cls = registry.resource_for_uri_key(resource)
    if resource_cls is None:
        raise ResourceNotFoundError("Resource", resource)
    return resource_cls


def build_locale_field(
    resource_cls: type[Resource],
    config: LocaleConfig,
    registry: ResourceRegistry,
) -> LocaleField:
    return LocaleField(
        "Locale",
        resource_cls.locale_attribute,
        resource_cls.locale_parent_id_attribute,
        config,
        registry=registry,
    )


def _summarize(resource_cls: type[Resource], record: Any) -> RecordSummary:
    return RecordSummary(
        id=record.id,
        title=resource_cls(record).title(),
        locale=record.get_attribute(resource_cls.locale_attribute),
        locale_parent_id=record.get_attribute(resource_cls.locale_parent_id_attribute),
    )


async def _load_record(resource_cls: type[Resource], record_id: int, db: AsyncSession) -> Any:
    record = await get_record(resource_cls.model, record_id, db)
    if record is None:
        raise ResourceNotFoundError(resource_cls.model.__name__, record_id)
    return record


# ── Routes ─────────────────────────────────────────────────────────────────────


@admin_router.get("/resources/{resource}", response_model=ResourceListResponse)
async def list_resource_records(
    locale: str | None = Query(default=None),
    resource_cls: type[Resource] = Depends(get_resource),
    config: LocaleConfig = Depends(get_locale_config),
    db: AsyncSession = Depends(get_db),
) -> ResourceListResponse:
    """List a resource's records, optionally narrowed to one locale."""
    filters = []
    if locale is not None:
        locale_filter = LocaleFilter(config, resource_cls.locale_attribute)
        filters.append(lambda query: locale_filter.apply(query, locale))

    records = await list_records(resource_cls.model, db, filters=filters)
    items = [_summarize(resource_cls, record) for record in records]
    return ResourceListResponse(resource=resource_cls.uri_key, label=resource_cls.label(), items=items, total=len(items))


@admin_router.get("/resources/{resource}/filters/locale")
async def get_locale_filter(
    resource_cls: type[Resource] = Depends(get_resource),
    config: LocaleConfig = Depends(get_locale_config),
) -> dict[str, Any]:
    """Return the locale filter definition for the resource listing."""
    return LocaleFilter(config, resource_cls.locale_attribute).json_serialize()


@admin_router.get("/resources/{resource}/{record_id}/fields/locale")
async def get_locale_field(
    record_id: int,
    resource_cls: type[Resource] = Depends(get_resource),
    config: LocaleConfig = Depends(get_locale_config),
    registry: ResourceRegistry = Depends(get_resource_registry),
    db: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    """Return the resolved locale field of one record."""
    record = await _load_record(resource_cls, record_id, db)
    field = build_locale_field(resource_cls, config, registry)
    await field.resolve(record, db)
    return field.json_serialize()


@admin_router.put("/resources/{resource}/{record_id}/fields/locale")
async def update_locale_field(
    record_id: int,
    payload: LocaleFieldUpdate,
    resource_cls: type[Resource] = Depends(get_resource),
    config: LocaleConfig = Depends(get_locale_config),
    registry: ResourceRegistry = Depends(get_resource_registry),
    db: AsyncSession = Depends(get_db),
) -> dict[str, Any]:
    """Validate and save the submitted locale and locale parent id."""
    record = await _load_record(resource_cls, record_id, db)
    field = build_locale_field(resource_cls, config, registry)

    data = payload.model_dump()
    field.validate(data)
    field.fill(data, record)
    await db.commit()
    await db.refresh(record)
    logger.info(
        "Locale field saved: %s id=%s locale=%s",
        resource_cls.uri_key,
        record_id,
        record.get_attribute(resource_cls.locale_attribute),
    )

    await field.resolve(record, db)
    return field.json_serialize()
