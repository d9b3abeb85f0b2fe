from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import Boolean, DateTime, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.crm.models import Base, utcnow


def new_customer_id() -> str:
    return uuid.uuid4().hex


class Customer(Base):
    """
    A managed contact. The only persisted entity.

    `id` is the public identifier, assigned once at creation and never changed.
    `seq` is the row key and defines insertion order; it is never exposed.
    """

    __tablename__ = "customers"
    __table_args__ = (
        UniqueConstraint("id", name="uq_customers_id"),
    )

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(32), nullable=False, default=new_customer_id)

    name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False, default=utcnow)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "status": bool(self.status),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
