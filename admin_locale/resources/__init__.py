"""
Admin resources

Public API:
    Resource                    — base class wrapping a model instance
    ResourceRegistry            — model / URI-key lookup
    resource_registry           — global registry instance
    register_default_resources  — registers the built-in resources
"""

from .base import Resource
from .page import PageResource
from .registry import ResourceRegistry, resource_registry


def register_default_resources(registry: ResourceRegistry = resource_registry) -> ResourceRegistry:
    """Register the built-in resources, skipping any already present."""
    for resource in (PageResource,):
        if not registry.is_registered(resource.uri_key):
            registry.register(resource)
    return registry


__all__ = [
    "PageResource",
    "Resource",
    "ResourceRegistry",
    "register_default_resources",
    "resource_registry",
]
