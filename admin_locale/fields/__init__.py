from .base import Field
from .locale_field import LocaleField

__all__ = ["Field", "LocaleField"]
