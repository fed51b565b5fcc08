"""
LocaleField

Picks the locale of a record and links it to the other records of its
locale group. On display the field resolves:

  - the record's locale and locale-group parent id,
  - ``existingLocalisations``: {locale code: sibling id} for every configured
    locale already present in the group,
  - ``resources``: {root id: title} of every group root, for the group picker.

On save it writes the submitted locale and parent id onto the record.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from admin_locale.exceptions import ValidationError
from admin_locale.fields.base import Field
from admin_locale.i18n.locale import locale_options
from admin_locale.resources.registry import ResourceRegistry, resource_registry
from admin_locale.schemas.locale import LocaleFieldValue
from admin_locale.services.locale_service import find_sibling_localisations, list_root_resources

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from admin_locale.config import LocaleConfig
    from admin_locale.models.localized import LocalizedMixin

logger = logging.getLogger(__name__)


class LocaleField(Field):
    component = "locale-field"

    def __init__(
        self,
        name: str,
        locale_attribute: str,
        locale_parent_id_attribute: str,
        config: LocaleConfig,
        *,
        registry: ResourceRegistry | None = None,
    ) -> None:
        super().__init__(name, locale_attribute)
        self.locale_parent_id_attribute = locale_parent_id_attribute
        self.config = config
        self.registry = registry if registry is not None else resource_registry
        self._locales: dict[str, str] = dict(config.locales)
        self._max_locales_on_index: int | None = None
        self._conditions_updated()

    # ── Configuration ─────────────────────────────────────────────────────────

    @property
    def locale_codes(self) -> list[str]:
        return list(self._locales)

    def locales(self, locales: Mapping[str, str] | None) -> LocaleField:
        """Override the locales of this field instance."""
        self._locales = dict(locales or {})
        return self._conditions_updated()

    def max_locales_on_index(self, max_locales: int | None) -> LocaleField:
        """Override the index threshold for this field; ``None`` restores the configured value."""
        self._max_locales_on_index = max_locales
        return self._conditions_updated()

    @property
    def index_threshold(self) -> int:
        if self._max_locales_on_index is not None:
            return self._max_locales_on_index
        return self.config.max_locales_shown_on_index

    def _conditions_updated(self) -> LocaleField:
        # Too many locales to fit an index column: show the field on detail/forms only
        self.show_on_index = len(self._locales) <= self.index_threshold
        return self

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    async def resolve(self, record: LocalizedMixin, db: AsyncSession) -> None:
        existing = await find_sibling_localisations(
            record,
            self.attribute,
            self.locale_parent_id_attribute,
            self.locale_codes,
            db,
        )
        self.value = LocaleFieldValue(
            id=record.id,
            locale=record.get_attribute(self.attribute),
            locale_parent_id=record.get_attribute(self.locale_parent_id_attribute),
            existing_localisations=existing,
        ).model_dump(by_alias=True)

        resources = await list_root_resources(type(record), self.locale_parent_id_attribute, self.registry, db)

        self.with_meta(
            {
                "asHtml": True,
                "locales": locale_options(self._locales),
                "resources": resources,
                "localeParentIdAttribute": self.locale_parent_id_attribute,
                "localeAttribute": self.attribute,
            }
        )
        self.set_rules("required", "in:" + ",".join(self.locale_codes))

    def validate(self, payload: Mapping[str, Any]) -> None:
        """Check the submitted locale and parent id.

        The locale is required and must be one of the configured codes. The
        parent id, when submitted, must be empty or an integer id.

        Raises:
            ValidationError: if either value breaks those rules.
        """
        value = payload.get(self.attribute)
        if value is None or value == "":
            raise ValidationError(f"The {self.name} field is required.", field=self.attribute)
        if not isinstance(value, str) or value not in self._locales:
            raise ValidationError(
                f"The selected {self.name} is invalid.",
                field=self.attribute,
                details={"allowed": self.locale_codes},
            )
        if self.locale_parent_id_attribute in payload:
            self._parse_parent_id(payload[self.locale_parent_id_attribute])

    def _parse_parent_id(self, value: Any) -> int | None:
        """Return the submitted parent id as an int, or None when empty."""
        if value is None or value == "":
            return None
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().isdecimal():
            return int(value)
        raise ValidationError(
            f"The {self.name} parent must be an integer id.",
            field=self.locale_parent_id_attribute,
        )

    def fill(self, payload: Mapping[str, Any], record: LocalizedMixin) -> None:
        if self.locale_parent_id_attribute in payload:
            parent_id = self._parse_parent_id(payload[self.locale_parent_id_attribute])
            payload = {**payload, self.locale_parent_id_attribute: parent_id}
        self.fill_into(payload, record, self.locale_parent_id_attribute)
        self.fill_into(payload, record, self.attribute)
        logger.debug(
            "Filled locale field on %s id=%s: locale=%s parent=%s",
            type(record).__name__,
            record.id,
            record.get_attribute(self.attribute),
            record.get_attribute(self.locale_parent_id_attribute),
        )
