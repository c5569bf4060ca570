# travel_admin/db/models/enquiry.py
from __future__ import annotations

from datetime import date
from typing import Optional
from sqlalchemy import Date, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from travel_admin.db.mixins import Base, CreatedUpdatedMixin


class Enquiry(CreatedUpdatedMixin, Base):
    __tablename__ = "enquiries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    tour: Mapped[Optional[str]] = mapped_column(String(255))
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    mobile: Mapped[Optional[str]] = mapped_column(String(50))
    living_country: Mapped[Optional[str]] = mapped_column(String(100))
    nationality: Mapped[Optional[str]] = mapped_column(String(100))
    destination: Mapped[Optional[str]] = mapped_column(String(255))
    arrival_date: Mapped[Optional[date]] = mapped_column(Date)
    departure_date: Mapped[Optional[date]] = mapped_column(Date)
    adults: Mapped[Optional[int]] = mapped_column(Integer)
    children: Mapped[Optional[int]] = mapped_column(Integer)
    flight_status: Mapped[Optional[str]] = mapped_column(String(50))
    holiday_reason: Mapped[Optional[str]] = mapped_column(Text)
    message: Mapped[Optional[str]] = mapped_column(Text)
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="pending", server_default="pending")
