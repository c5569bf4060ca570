# travel_admin/services/packages.py
"""
Package storage.

Reads go through `SELECT *` so each row carries exactly the columns the live
table has; older deployments still have `title` or a combined `inclusion`
column and the normalizer picks the right layout from what is present.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from sqlalchemy import delete, insert, text, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from travel_admin.db.models.package import Package
from travel_admin.services.package_normalizer import normalize_for_read, split_for_write

logger = logging.getLogger(__name__)


class DuplicateSlug(Exception):
    pass


def _fetch_one(db: Session, where: str, params: dict) -> Optional[Mapping[str, Any]]:
    return db.execute(text(f"SELECT * FROM packages WHERE {where}"), params).mappings().first()


def list_packages(db: Session, base_url: str) -> list[dict]:
    rows = db.execute(text("SELECT * FROM packages ORDER BY created_at DESC, id DESC")).mappings().all()
    return [normalize_for_read(r, base_url) for r in rows]


def get_package(db: Session, package_id: int, base_url: str) -> Optional[dict]:
    row = _fetch_one(db, "id = :id", {"id": package_id})
    return normalize_for_read(row, base_url) if row else None


def get_package_by_slug(db: Session, slug: str, base_url: str) -> Optional[dict]:
    row = _fetch_one(db, "slug = :slug", {"slug": slug})
    return normalize_for_read(row, base_url) if row else None


def create_package(db: Session, data: Mapping[str, Any]) -> int:
    row = split_for_write(data)
    try:
        result = db.execute(insert(Package.__table__).values(**row))
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateSlug(row["slug"]) from e
    package_id = result.inserted_primary_key[0]
    logger.info("Created package %s (%s)", package_id, row["slug"])
    return package_id


def update_package(db: Session, package_id: int, data: Mapping[str, Any]) -> bool:
    row = split_for_write(data)
    try:
        result = db.execute(
            update(Package.__table__).where(Package.__table__.c.id == package_id).values(**row)
        )
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise DuplicateSlug(row["slug"]) from e
    return result.rowcount > 0


def delete_package(db: Session, package_id: int) -> bool:
    result = db.execute(delete(Package.__table__).where(Package.__table__.c.id == package_id))
    db.commit()
    return result.rowcount > 0
