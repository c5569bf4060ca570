from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from travel_admin.api.v1.auth import require_admin
from travel_admin.core.config import settings
from travel_admin.core.deps import get_db
from travel_admin.schemas.package import PackageIn
from travel_admin.services import packages as svc

router = APIRouter(prefix="/packages", tags=["packages"])


def _or_404(pkg: Optional[dict]) -> dict:
    if pkg is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Package not found")
    return pkg


@router.get("")
def list_packages(
    slug: Optional[str] = Query(None, description="Return the single package with this slug"),
    db: Session = Depends(get_db),
):
    base_url = settings.public_base_url
    if slug:
        return {"package": _or_404(svc.get_package_by_slug(db, slug, base_url))}
    return {"packages": svc.list_packages(db, base_url)}


@router.get("/{package_id}")
def get_package(package_id: int, db: Session = Depends(get_db)):
    return {"package": _or_404(svc.get_package(db, package_id, settings.public_base_url))}


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_admin)])
def create_package(payload: PackageIn, db: Session = Depends(get_db)):
    try:
        package_id = svc.create_package(db, payload.model_dump())
    except svc.DuplicateSlug:
        raise HTTPException(status.HTTP_409_CONFLICT, detail="Slug already exists")
    return {"success": True, "package": svc.get_package(db, package_id, settings.public_base_url)}


@router.put("/{package_id}", dependencies=[Depends(require_admin)])
def update_package(package_id: int, payload: PackageIn, db: Session = Depends(get_db)):
    try:
        found = svc.update_package(db, package_id, payload.model_dump())
    except svc.DuplicateSlug:
        raise HTTPException(status.HTTP_409_CONFLICT, detail="Slug already exists")
    if not found:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Package not found")
    return {"success": True, "package": _or_404(svc.get_package(db, package_id, settings.public_base_url))}


@router.delete("/{package_id}", dependencies=[Depends(require_admin)])
def delete_package(package_id: int, db: Session = Depends(get_db)):
    if not svc.delete_package(db, package_id):
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Package not found")
    return {"success": True}
