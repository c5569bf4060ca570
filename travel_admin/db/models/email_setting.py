# travel_admin/db/models/email_setting.py
from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from travel_admin.db.mixins import Base, CreatedUpdatedMixin


class EmailSetting(CreatedUpdatedMixin, Base):
    """Single-row table (id=1) holding the admin-editable sender identity."""
    __tablename__ = "email_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    from_email: Mapped[str] = mapped_column(String(255), nullable=False)
    from_name: Mapped[str] = mapped_column(String(255), nullable=False)
