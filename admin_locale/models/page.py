from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text

from admin_locale.database import Base
from admin_locale.models.localized import LocalizedMixin


class Page(LocalizedMixin, Base):
    """A localizable page.

    Rows with the same ``locale_parent_id`` are translations of one another;
    the group root has ``locale_parent_id`` NULL.
    """

    __tablename__ = "pages"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String, nullable=False)
    body = Column(Text, nullable=True)
    locale = Column(String(10), nullable=False, index=True)  # BCP 47 e.g. "en", "fr-CA"
    locale_parent_id = Column(
        Integer,
        ForeignKey("pages.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime,
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    __table_args__ = (
        Index("idx_pages_parent_locale", "locale_parent_id", "locale"),
    )
