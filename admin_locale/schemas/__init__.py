from .locale import (
    LocaleFieldUpdate,
    LocaleFieldValue,
    RecordSummary,
    ResourceListResponse,
)

__all__ = [
    "LocaleFieldUpdate",
    "LocaleFieldValue",
    "RecordSummary",
    "ResourceListResponse",
]
