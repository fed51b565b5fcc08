"""
Field base class

Field: the contract between a resource attribute and the admin front-end.
A field names the front-end component that renders it, resolves a display
value from a record, carries arbitrary meta for the component, validation
rules, per-view visibility flags, and fills submitted values back onto the
record.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from admin_locale.models.localized import LocalizedMixin


class Field:
    """
    Base class for admin fields.

    Subclasses set ``component`` and usually override ``resolve`` and
    ``fill``; the defaults read and write ``attribute`` directly.
    """

    component: str = "text-field"

    def __init__(self, name: str, attribute: str | None = None) -> None:
        self.name = name
        self.attribute = attribute or name.lower().replace(" ", "_")
        self.value: Any = None
        self.meta: dict[str, Any] = {}
        self.rules: list[str] = []
        self.show_on_index = True
        self.show_on_detail = True
        self.show_on_creation = True
        self.show_on_update = True

    # ── Configuration ─────────────────────────────────────────────────────────

    def with_meta(self, meta: Mapping[str, Any]) -> Field:
        """Merge ``meta`` into the payload sent to the front-end component."""
        self.meta.update(meta)
        return self

    def set_rules(self, *rules: str) -> Field:
        self.rules = list(rules)
        return self

    def hide_from_index(self) -> Field:
        self.show_on_index = False
        return self

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    async def resolve(self, record: LocalizedMixin, db: AsyncSession) -> None:
        """Load the field's display value from ``record``."""
        self.value = record.get_attribute(self.attribute)

    def fill(self, payload: Mapping[str, Any], record: LocalizedMixin) -> None:
        """Copy the submitted value for this field onto ``record``."""
        self.fill_into(payload, record, self.attribute)

    @staticmethod
    def fill_into(payload: Mapping[str, Any], record: LocalizedMixin, attribute: str) -> None:
        # Attributes absent from the submission are left untouched
        if attribute in payload:
            record.set_attribute(attribute, payload[attribute])

    def json_serialize(self) -> dict[str, Any]:
        """Return the dict consumed by the front-end component."""
        return {
            "component": self.component,
            "name": self.name,
            "attribute": self.attribute,
            "value": self.value,
            "showOnIndex": self.show_on_index,
            "showOnDetail": self.show_on_detail,
            "showOnCreation": self.show_on_creation,
            "showOnUpdate": self.show_on_update,
            "rules": list(self.rules),
            **self.meta,
        }
