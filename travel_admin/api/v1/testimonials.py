from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from travel_admin.api.v1.auth import require_admin
from travel_admin.core.deps import get_db
from travel_admin.db.models.testimonial import Testimonial
from travel_admin.schemas.testimonial import TestimonialCreate, TestimonialOut, TestimonialUpdate
from travel_admin.services.field_coder import decode, encode

router = APIRouter(prefix="/testimonials", tags=["testimonials"])


def _gallery(raw) -> list:
    value = decode(raw, [])
    return value if isinstance(value, list) else []


def _out(t: Testimonial) -> TestimonialOut:
    return TestimonialOut(
        id=t.id,
        quote=t.quote,
        author_name=t.author_name,
        author_location=t.author_location,
        image=t.image,
        gallery_images=_gallery(t.gallery_images),
        sort_order=t.sort_order,
        created_at=t.created_at,
        updated_at=t.updated_at,
    )


def _get_or_404(db: Session, testimonial_id: int) -> Testimonial:
    t = db.get(Testimonial, testimonial_id)
    if not t:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Testimonial not found")
    return t


@router.get("")
def list_testimonials(db: Session = Depends(get_db)):
    rows = db.query(Testimonial).order_by(Testimonial.sort_order.asc(), Testimonial.id.asc()).all()
    return {"testimonials": [_out(t) for t in rows]}


@router.get("/{testimonial_id}", response_model=TestimonialOut)
def get_testimonial(testimonial_id: int, db: Session = Depends(get_db)):
    return _out(_get_or_404(db, testimonial_id))


@router.post("", status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_admin)])
def create_testimonial(payload: TestimonialCreate, db: Session = Depends(get_db)):
    data = payload.model_dump()
    data["gallery_images"] = encode(data["gallery_images"])
    db.add(Testimonial(**data))
    db.commit()
    return {"success": True, "message": "Testimonial created successfully"}


@router.put("/{testimonial_id}", dependencies=[Depends(require_admin)])
def update_testimonial(testimonial_id: int, payload: TestimonialUpdate, db: Session = Depends(get_db)):
    t = _get_or_404(db, testimonial_id)
    changes = payload.model_dump(exclude_unset=True)
    # required columns can be changed but not cleared
    for field in ("quote", "author_name", "sort_order"):
        if changes.get(field, ...) is None:
            del changes[field]
    if not changes:
        return {"success": True, "message": "Nothing to update"}

    if "gallery_images" in changes:
        changes["gallery_images"] = encode(changes["gallery_images"])
    for field, value in changes.items():
        setattr(t, field, value)
    db.commit()
    return {"success": True, "message": "Testimonial updated successfully"}


@router.delete("/{testimonial_id}", dependencies=[Depends(require_admin)])
def delete_testimonial(testimonial_id: int, db: Session = Depends(get_db)):
    db.delete(_get_or_404(db, testimonial_id))
    db.commit()
    return {"success": True}
