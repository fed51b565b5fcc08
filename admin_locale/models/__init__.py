from .localized import LocalizedMixin
from .page import Page

__all__ = [
    "LocalizedMixin",
    "Page",
]
