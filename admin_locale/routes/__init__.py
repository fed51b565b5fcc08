from .locale_field import admin_router

__all__ = ["admin_router"]
