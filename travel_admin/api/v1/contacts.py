from typing import List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from travel_admin.api.v1.auth import require_admin
from travel_admin.core.deps import get_db
from travel_admin.db.models.contact import Contact
from travel_admin.schemas.contact import ContactCreate, ContactOut
from travel_admin.schemas.enquiry import StatusIn
from travel_admin.services.email_settings import sender_for
from travel_admin.services.notifications import notify_new_contact

router = APIRouter(prefix="/contacts", tags=["contacts"])


def _get_or_404(db: Session, contact_id: int) -> Contact:
    contact = db.get(Contact, contact_id)
    if not contact:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Contact not found")
    return contact


@router.get("", dependencies=[Depends(require_admin)])
def list_contacts(
    db: Session = Depends(get_db),
    status_: Optional[str] = Query(None, alias="status", description="Filter by status"),
):
    qs = db.query(Contact)
    if status_:
        qs = qs.filter(Contact.status == status_)
    rows: List[Contact] = qs.order_by(Contact.created_at.desc(), Contact.id.desc()).all()
    return {"contacts": [ContactOut.model_validate(r) for r in rows]}


@router.get("/{contact_id}", dependencies=[Depends(require_admin)])
def get_contact(contact_id: int, db: Session = Depends(get_db)):
    return {"contact": ContactOut.model_validate(_get_or_404(db, contact_id))}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_contact(payload: ContactCreate, background: BackgroundTasks, db: Session = Depends(get_db)):
    contact = Contact(**payload.model_dump())
    db.add(contact)
    db.commit()

    background.add_task(notify_new_contact, payload.model_dump(), sender_for(db))
    return {"success": True, "message": "Contact submitted successfully"}


@router.put("/{contact_id}", dependencies=[Depends(require_admin)])
def update_contact_status(contact_id: int, payload: StatusIn, db: Session = Depends(get_db)):
    contact = _get_or_404(db, contact_id)
    contact.status = payload.status
    db.commit()
    return {"success": True, "message": "Contact updated successfully"}


@router.delete("/{contact_id}", dependencies=[Depends(require_admin)])
def delete_contact(contact_id: int, db: Session = Depends(get_db)):
    db.delete(_get_or_404(db, contact_id))
    db.commit()
    return {"success": True}
