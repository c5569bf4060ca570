# travel_admin/services/admin_seed.py
import logging

from sqlalchemy.orm import Session

from travel_admin.core.config import settings
from travel_admin.core.security import hash_password
from travel_admin.db.models.admin_user import AdminUser

logger = logging.getLogger(__name__)


def ensure_default_admin(db: Session) -> AdminUser:
    """Create the configured admin account on first start; leave an existing one alone."""
    user = db.query(AdminUser).filter(AdminUser.username == settings.ADMIN_USERNAME).first()
    if user:
        return user

    user = AdminUser(
        username=settings.ADMIN_USERNAME,
        email=settings.ADMIN_EMAIL,
        password_hash=hash_password(settings.ADMIN_PASSWORD),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Created default admin user %r", user.username)
    return user
