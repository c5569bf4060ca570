# travel_admin/core/deps.py
from typing import Generator

from sqlalchemy.orm import Session

from travel_admin.db.session import SessionLocal


def get_db() -> Generator[Session, None, None]:
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
