"""
LocalizedMixin

Explicit named-attribute access for models that take part in locale groups.
Locale fields and filters are configured with attribute *names*; the mixin
resolves those names against the model's mapped columns only, so a typo in
a field definition fails loudly instead of reading or writing an arbitrary
Python attribute.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import inspect
from sqlalchemy.orm import ColumnProperty


class LocalizedMixin:
    """Mixin for declarative models whose rows belong to locale groups."""

    @classmethod
    def column_for(cls, name: str):
        """Return the instrumented column attribute for ``name``, usable in queries.

        Raises:
            AttributeError: if ``name`` is not a mapped column of the model.
        """
        prop = inspect(cls).attrs.get(name)
        if not isinstance(prop, ColumnProperty):
            raise AttributeError(f"{cls.__name__} has no column attribute '{name}'")
        return getattr(cls, name)

    def get_attribute(self, name: str) -> Any:
        self.column_for(name)
        return getattr(self, name)

    def set_attribute(self, name: str, value: Any) -> None:
        self.column_for(name)
        setattr(self, name, value)
