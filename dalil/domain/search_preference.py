"""SQLAlchemy ORM model for saved search preferences."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from dalil.db.base import Base
from dalil.domain.mixins import TenantMixin, TimestampMixin, utcnow


class SearchPreference(Base, TenantMixin, TimestampMixin):
    __tablename__ = "search_preferences"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    search_term: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    # FilterCriteria / SortSpec, stored as their JSON dumps
    filters: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    sort: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    last_used: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
        index=True,
    )
