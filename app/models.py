from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, String, Text, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column, validates

from app.database import Base
from app.slug import fold_category_name


# ---------------------------------------------------------------------------
# Content
# ---------------------------------------------------------------------------
class Content(Base):
    __tablename__ = "Contents"

    __table_args__ = (
        # One row per category name, compared case-insensitively.
        UniqueConstraint("categoryKey", name="uq_contents_category_key"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    category_name: Mapped[str] = mapped_column("categoryName", String(255), nullable=False)
    # casefold() can lengthen a string ("ß" -> "ss"), hence the wider column.
    category_key: Mapped[str] = mapped_column("categoryKey", String(1024), nullable=False)
    summarize_content: Mapped[Optional[str]] = mapped_column("summarizeContent", Text, nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    # Derived from category_name by the service; not unique.
    slug: Mapped[str] = mapped_column(String(300), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        "updatedAt",
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    @validates("category_name")
    def _sync_category_key(self, key: str, value: str) -> str:
        self.category_key = fold_category_name(value)
        return value

    def __repr__(self) -> str:
        return f"<Content(id={self.id}, category_name={self.category_name!r}, slug={self.slug!r})>"
