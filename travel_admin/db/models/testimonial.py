from __future__ import annotations
from typing import Optional
from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from travel_admin.db.mixins import Base, CreatedUpdatedMixin


class Testimonial(CreatedUpdatedMixin, Base):
    __tablename__ = "testimonials"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    quote: Mapped[str] = mapped_column(Text, nullable=False)
    author_name: Mapped[str] = mapped_column(String(255), nullable=False)
    author_location: Mapped[Optional[str]] = mapped_column(String(255))
    image: Mapped[Optional[str]] = mapped_column(Text)
    gallery_images: Mapped[Optional[str]] = mapped_column(Text)  # JSON list as TEXT
    sort_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
