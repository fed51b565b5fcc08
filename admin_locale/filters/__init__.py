from .base import Filter
from .locale_filter import LocaleFilter

__all__ = ["Filter", "LocaleFilter"]
