"""SQLAlchemy ORM model for legal texts (laws, decrees, orders, circulars...)."""

from __future__ import annotations

import uuid
from datetime import date
from typing import Any, Optional

from sqlalchemy import JSON, Date, Float, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dalil.db.base import Base
from dalil.domain.mixins import TenantMixin, TimestampMixin


class LegalText(Base, TenantMixin, TimestampMixin):
    __tablename__ = "legal_texts"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=lambda: str(uuid.uuid4())
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False, index=True)
    # "Loi" | "Décret exécutif" | "Ordonnance" | "Arrêté" | ...
    type: Mapped[Optional[str]] = mapped_column(String(100), index=True, nullable=True)
    # "En vigueur" | "Abrogé" | "Modifié" | ...
    status: Mapped[Optional[str]] = mapped_column(String(50), index=True, nullable=True)
    publication_date: Mapped[Optional[date]] = mapped_column(Date, index=True, nullable=True)
    source: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    author: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    # "manual" | "ocr" | "api" (NULL is treated as "manual")
    insertion_method: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    popularity: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    reference: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # Free-form display fields (Arabic title, JORA issue, ...)
    extra: Mapped[Optional[dict[str, Any]]] = mapped_column(JSON, nullable=True)
