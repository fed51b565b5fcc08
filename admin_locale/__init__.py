"""
Admin locale field

Public API:
    LocaleConfig  — locale mapping + index threshold passed to fields and filters
    LocaleField   — locale picker that links a record to its locale siblings
    LocaleFilter  — listing filter narrowing records to one locale
"""

from .config import LocaleConfig
from .fields.locale_field import LocaleField
from .filters.locale_filter import LocaleFilter

__all__ = ["LocaleConfig", "LocaleField", "LocaleFilter"]
