"""
Resource base class

A Resource wraps a single model instance for display in the admin panel.
Subclasses bind a model class, a URI key and the attribute used as the
record's title; the locale attributes tell locale fields and filters which
columns hold the locale code and the locale-group parent id.
"""

from __future__ import annotations

from typing import Any, ClassVar


class Resource:
    """Admin-panel view of one model instance."""

    model: ClassVar[type[Any]]
    uri_key: ClassVar[str]
    title_attribute: ClassVar[str] = "id"
    locale_attribute: ClassVar[str] = "locale"
    locale_parent_id_attribute: ClassVar[str] = "locale_parent_id"

    def __init__(self, record: Any) -> None:
        self.record = record

    @classmethod
    def label(cls) -> str:
        """Plural display label, e.g. "Pages"."""
        return f"{cls.model.__name__}s"

    def title(self) -> str:
        """Return the value used to identify this record in pickers and listings."""
        return str(getattr(self.record, self.title_attribute))
