"""
Resource Registry

ResourceRegistry: in-process registry mapping model classes and URI keys
to their admin Resource classes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from admin_locale.resources.base import Resource

logger = logging.getLogger(__name__)


class ResourceRegistry:
    """
    In-process registry of admin resources.

    Resources are indexed both by model class (for title lookups while
    resolving fields) and by URI key (for routing).
    """

    def __init__(self) -> None:
        self._by_model: dict[type[Any], type[Resource]] = {}
        self._by_uri_key: dict[str, type[Resource]] = {}

    # ── Registration ──────────────────────────────────────────────────────────

    def register(self, resource: type[Resource]) -> type[Resource]:
        """Register a resource class; returns it so this can be used as a decorator."""
        self._by_model[resource.model] = resource
        self._by_uri_key[resource.uri_key] = resource
        logger.info("Resource registered: %s -> %s", resource.uri_key, resource.model.__name__)
        return resource

    # ── Lookup ────────────────────────────────────────────────────────────────

    def resource_for_model(self, model: type[Any]) -> type[Resource] | None:
        """Return the resource registered for ``model``, or None."""
        return self._by_model.get(model)

    def resource_for_uri_key(self, uri_key: str) -> type[Resource] | None:
        """Return the resource registered under ``uri_key``, or None."""
        return self._by_uri_key.get(uri_key)

    def is_registered(self, uri_key: str) -> bool:
        return uri_key in self._by_uri_key


# ── Global singleton ──────────────────────────────────────────────────────────
# Populated at application start by register_default_resources().
resource_registry = ResourceRegistry()
