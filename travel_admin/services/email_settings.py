# travel_admin/services/email_settings.py
import logging
from typing import Optional

from sqlalchemy.orm import Session

from travel_admin.db.models.email_setting import EmailSetting
from travel_admin.services.notifications import Sender, default_sender

logger = logging.getLogger(__name__)

SETTINGS_ROW_ID = 1


def get_email_setting(db: Session) -> Optional[EmailSetting]:
    return db.get(EmailSetting, SETTINGS_ROW_ID)


def save_email_setting(db: Session, from_email: str, from_name: str) -> EmailSetting:
    row = get_email_setting(db)
    if row is None:
        row = EmailSetting(id=SETTINGS_ROW_ID, from_email=from_email, from_name=from_name)
        db.add(row)
    else:
        row.from_email = from_email
        row.from_name = from_name
    db.commit()
    db.refresh(row)
    logger.info("Email sender updated to %s <%s>", from_name, from_email)
    return row


def sender_for(db: Session) -> Sender:
    """Stored sender identity, or the one from settings when none was saved."""
    row = get_email_setting(db)
    if row is None:
        return default_sender()
    return Sender(email=row.from_email, name=row.from_name)
