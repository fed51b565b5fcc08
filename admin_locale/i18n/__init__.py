"""
i18n package

Locale helpers used to build locale picker options.
"""

from .locale import locale_options

__all__ = ["locale_options"]
