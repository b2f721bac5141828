from __future__ import annotations

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.db.base import Base


class AnimalORM(Base):
    __tablename__ = "animals"

    # Surrogate key; ordering by it gives insertion order
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    catalog_number: Mapped[str] = mapped_column(String(12), nullable=False, unique=True, index=True)
    name: Mapped[str] = mapped_column(String(30), nullable=False)
    breed: Mapped[str] = mapped_column(String(30), nullable=False)
    type: Mapped[str] = mapped_column(String(30), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    gender: Mapped[str] = mapped_column(String(10), nullable=False)
    is_healthy: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
