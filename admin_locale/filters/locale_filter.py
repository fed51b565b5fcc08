from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from sqlalchemy import Select, column  # noqa: TC002

from admin_locale.exceptions import ConfigurationError
from admin_locale.filters.base import Filter
from admin_locale.models.localized import LocalizedMixin

if TYPE_CHECKING:
    from admin_locale.config import LocaleConfig

logger = logging.getLogger(__name__)


class LocaleFilter(Filter):
    """Narrows a listing to records in one locale."""

    name = "Locale"
    component = "select-filter"

    def __init__(self, config: LocaleConfig, locale_field_key: str = "locale") -> None:
        self.locale_field_key = locale_field_key
        self._locales: dict[str, str] = dict(config.locales)

    def locales(self, locales: Mapping[str, str] | None) -> LocaleFilter:
        """Override the locales offered by this filter instance."""
        self._locales = dict(locales or {})
        return self

    def apply(self, query: Select, value: Any) -> Select:
        # Qualify the column on the queried model when there is one
        descriptions = query.column_descriptions
        entity = descriptions[0].get("entity") if descriptions else None
        if isinstance(entity, type) and issubclass(entity, LocalizedMixin):
            target = entity.column_for(self.locale_field_key)
        else:
            target = column(self.locale_field_key)
        logger.debug("Applying locale filter %s=%r", self.locale_field_key, value)
        return query.where(target == value)

    def options(self) -> dict[str, str]:
        return {label: code for code, label in self._locales.items()}

    def default(self) -> str:
        if not self._locales:
            raise ConfigurationError("LocaleFilter has no locales configured", setting="locales")
        return next(iter(self._locales))

    def current_value(self) -> str:
        return self.default() if self._locales else ""
