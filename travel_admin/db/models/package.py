from __future__ import annotations
from typing import Optional

from sqlalchemy import Integer, String, Text, DECIMAL
from sqlalchemy.orm import Mapped, mapped_column

from travel_admin.db.mixins import Base, CreatedUpdatedMixin


class Package(CreatedUpdatedMixin, Base):
    __tablename__ = "packages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    country: Mapped[str] = mapped_column(String(100), nullable=False)
    days: Mapped[int] = mapped_column(Integer, nullable=False)
    image: Mapped[Optional[str]] = mapped_column(Text)
    price: Mapped[Optional[float]] = mapped_column(DECIMAL(10, 2))
    stars: Mapped[Optional[int]] = mapped_column(Integer, default=4, server_default="4")
    description: Mapped[Optional[str]] = mapped_column(Text)

    # JSON stored as TEXT (see services/field_coder.py)
    itinerary: Mapped[Optional[str]] = mapped_column(Text)
    included: Mapped[Optional[str]] = mapped_column(Text)
    excluded: Mapped[Optional[str]] = mapped_column(Text)
    summary: Mapped[Optional[str]] = mapped_column(Text)
    images: Mapped[Optional[str]] = mapped_column(Text)
