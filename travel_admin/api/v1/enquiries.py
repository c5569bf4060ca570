from typing import List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from travel_admin.api.v1.auth import require_admin
from travel_admin.core.deps import get_db
from travel_admin.db.models.enquiry import Enquiry
from travel_admin.schemas.enquiry import EnquiryCreate, EnquiryOut, StatusIn
from travel_admin.services.email_settings import sender_for
from travel_admin.services.notifications import notify_new_enquiry

router = APIRouter(prefix="/enquiries", tags=["enquiries"])


def _get_or_404(db: Session, enquiry_id: int) -> Enquiry:
    enquiry = db.get(Enquiry, enquiry_id)
    if not enquiry:
        raise HTTPException(status.HTTP_404_NOT_FOUND, detail="Enquiry not found")
    return enquiry


@router.get("", dependencies=[Depends(require_admin)])
def list_enquiries(
    db: Session = Depends(get_db),
    status_: Optional[str] = Query(None, alias="status", description="Filter by status"),
):
    qs = db.query(Enquiry)
    if status_:
        qs = qs.filter(Enquiry.status == status_)
    rows: List[Enquiry] = qs.order_by(Enquiry.created_at.desc(), Enquiry.id.desc()).all()
    return {"enquiries": [EnquiryOut.model_validate(r) for r in rows]}


@router.get("/{enquiry_id}", dependencies=[Depends(require_admin)])
def get_enquiry(enquiry_id: int, db: Session = Depends(get_db)):
    return {"enquiry": EnquiryOut.model_validate(_get_or_404(db, enquiry_id))}


@router.post("", status_code=status.HTTP_201_CREATED)
def create_enquiry(payload: EnquiryCreate, background: BackgroundTasks, db: Session = Depends(get_db)):
    """
    Public enquiry form.
    - Stores the enquiry as 'pending'
    - Emails the admin inbox after the response is sent
    """
    enquiry = Enquiry(**payload.model_dump())
    db.add(enquiry)
    db.commit()
    db.refresh(enquiry)

    background.add_task(notify_new_enquiry, EnquiryOut.model_validate(enquiry).model_dump(), sender_for(db))
    return {"success": True, "message": "Enquiry submitted successfully"}


@router.put("/{enquiry_id}", dependencies=[Depends(require_admin)])
def update_enquiry_status(enquiry_id: int, payload: StatusIn, db: Session = Depends(get_db)):
    enquiry = _get_or_404(db, enquiry_id)
    enquiry.status = payload.status
    db.commit()
    return {"success": True, "message": "Enquiry updated successfully"}


@router.delete("/{enquiry_id}", dependencies=[Depends(require_admin)])
def delete_enquiry(enquiry_id: int, db: Session = Depends(get_db)):
    db.delete(_get_or_404(db, enquiry_id))
    db.commit()
    return {"success": True}
