"""
Filter base class

Filter: a listing filter rendered by a front-end component. Subclasses
implement ``apply`` (narrow a SQLAlchemy Select) and ``options``
(label -> value mapping); ``default`` supplies the pre-selected value.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from sqlalchemy import Select  # noqa: TC002


class Filter(ABC):
    name: str = "Filter"
    component: str = "select-filter"

    @abstractmethod
    def apply(self, query: Select, value: Any) -> Select:
        """Return ``query`` narrowed to rows matching ``value``."""
        ...

    @abstractmethod
    def options(self) -> dict[str, Any]:
        """Return the selectable options as ``{label: value}``."""
        ...

    def default(self) -> Any:
        return ""

    def current_value(self) -> Any:
        """Value pre-selected in the rendered filter."""
        return self.default()

    def key(self) -> str:
        return type(self).__name__

    def json_serialize(self) -> dict[str, Any]:
        return {
            "class": self.key(),
            "name": self.name,
            "component": self.component,
            "options": [{"label": label, "value": value} for label, value in self.options().items()],
            "currentValue": self.current_value(),
        }
