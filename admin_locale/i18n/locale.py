"""
Locale helpers

Pure functions for turning a locale configuration into picker options.
"""

from __future__ import annotations

from collections.abc import Mapping


def locale_options(locales: Mapping[str, str]) -> list[dict[str, str]]:
    """Turn a code -> label mapping into ``[{"label": ..., "value": code}]``, keeping order."""
    return [{"label": label, "value": code} for code, label in locales.items()]
