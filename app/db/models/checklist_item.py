"""ChecklistItem model: catalog essentials and user-added items."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Index, Integer, String, Uuid

from app.db.base import Base


class ChecklistItem(Base):
    __tablename__ = "checklist_items"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(String(255), nullable=False, index=True)

    text = Column(String(255), nullable=False)
    category = Column(String(100), nullable=True)
    completed = Column(Boolean, nullable=False, default=False)
    is_custom = Column(Boolean, nullable=False, default=False)
    position = Column(Integer, nullable=False, default=0)  # catalog order, custom items appended

    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        # Each catalog essential at most once per user; custom items may repeat
        Index(
            "uq_checklist_items_user_essential",
            "user_id",
            "text",
            unique=True,
            sqlite_where=is_custom.is_(False),
            postgresql_where=is_custom.is_(False),
        ),
    )
