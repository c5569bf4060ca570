from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from travel_admin.api.v1.auth import require_admin
from travel_admin.core.deps import get_db
from travel_admin.schemas.email_setting import EmailSettingIn, EmailSettingOut
from travel_admin.services.email_settings import get_email_setting, save_email_setting

router = APIRouter(prefix="/email-settings", tags=["email-settings"], dependencies=[Depends(require_admin)])


@router.get("")
def read_email_settings(db: Session = Depends(get_db)):
    row = get_email_setting(db)
    return {"settings": EmailSettingOut.model_validate(row) if row else None}


@router.post("")
def update_email_settings(payload: EmailSettingIn, db: Session = Depends(get_db)):
    row = save_email_setting(db, payload.from_email, payload.from_name)
    return {
        "success": True,
        "message": "Email settings updated successfully",
        "settings": EmailSettingOut.model_validate(row),
    }
