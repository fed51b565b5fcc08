"""
Locale Service

Async query helpers behind LocaleField and the admin routes.

Functions:
    resolve_group_key           — locale-group key of a record
    find_sibling_localisations  — {locale: sibling_id} for a record's group
    list_root_resources         — {root_id: title} for every group root of a model
    get_record                  — fetch one record by primary key
    list_records                — list a model's records, optionally filtered
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: TC002

from admin_locale.models.localized import LocalizedMixin  # noqa: TC001
from admin_locale.resources.registry import ResourceRegistry  # noqa: TC001

logger = logging.getLogger(__name__)


def resolve_group_key(record: LocalizedMixin, parent_attr: str) -> Any:
    """Return the record's parent id when set, otherwise the record's own id."""
    parent_id = record.get_attribute(parent_attr)
    return parent_id if parent_id not in (None, "") else record.id


async def find_sibling_localisations(
    record: LocalizedMixin,
    locale_attr: str,
    parent_attr: str,
    locale_codes: Iterable[str],
    db: AsyncSession,
) -> dict[str, Any]:
    """Map each configured locale code to the id of a sibling record in that locale.

    Siblings are the other members of the record's locale group: rows whose
    parent id is the group key, plus the group root itself. Codes with no
    sibling are left out. When several siblings share a locale the one with
    the lowest id wins.
    """
    model = type(record)
    group_key = resolve_group_key(record, parent_attr)
    parent_col = model.column_for(parent_attr)
    id_col = model.column_for("id")

    result = await db.execute(
        select(model)
        .where(
            or_(parent_col == group_key, id_col == group_key),
            id_col != record.id,
        )
        .order_by(id_col)
    )
    siblings = list(result.scalars().all())

    existing: dict[str, Any] = {}
    for code in locale_codes:
        match = next((s for s in siblings if s.get_attribute(locale_attr) == code), None)
        if match is not None:
            existing[code] = match.id

    logger.debug(
        "Resolved %d sibling localisation(s) for %s id=%s (group=%s)",
        len(existing),
        model.__name__,
        record.id,
        group_key,
    )
    return existing


async def list_root_resources(
    model: type[LocalizedMixin],
    parent_attr: str,
    registry: ResourceRegistry,
    db: AsyncSession,
) -> dict[Any, str]:
    """Return ``{id: title}`` for every group root of ``model``.

    Returns an empty mapping when the model has no registered resource.
    """
    resource = registry.resource_for_model(model)
    if resource is None:
        logger.debug("No resource registered for %s; skipping root lookup", model.__name__)
        return {}

    id_col = model.column_for("id")
    result = await db.execute(
        select(model).where(model.column_for(parent_attr).is_(None)).order_by(id_col)
    )
    return {root.id: resource(root).title() for root in result.scalars().all()}


async def get_record(model: type[LocalizedMixin], record_id: Any, db: AsyncSession) -> LocalizedMixin | None:
    """Fetch a record by primary key. Returns None if not found."""
    return await db.get(model, record_id)


async def list_records(
    model: type[LocalizedMixin],
    db: AsyncSession,
    filters: Iterable[Callable[[Select], Select]] = (),
) -> list[LocalizedMixin]:
    """Return all records of ``model`` ordered by id, after applying each filter to the query."""
    query = select(model).order_by(model.column_for("id"))
    for apply_filter in filters:
        query = apply_filter(query)
    result = await db.execute(query)
    return list(result.scalars().all())
