from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import or_
from sqlalchemy.orm import Session

from travel_admin.core.deps import get_db
from travel_admin.core.security import create_token, decode_token, verify_password
from travel_admin.db.models.admin_user import AdminUser
from travel_admin.schemas.auth import AdminOut, LoginIn, LoginOut

router = APIRouter(prefix="/auth", tags=["auth"])

bearer_scheme = HTTPBearer(auto_error=False)


@router.post("/login", response_model=LoginOut)
def login(data: LoginIn, db: Session = Depends(get_db)):
    user = (
        db.query(AdminUser)
        .filter(or_(AdminUser.username == data.username, AdminUser.email == data.username))
        .first()
    )
    if not user or not verify_password(data.password, user.password_hash):
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Invalid credentials")

    admin = AdminOut.model_validate(user)
    return LoginOut(user=admin, token=create_token(admin.model_dump()))


@router.post("/logout")
def logout():
    # tokens are stateless; the client drops its copy
    return {"success": True}


def require_admin(
    db: Session = Depends(get_db),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> AdminUser:
    """
    Dependency used by protected routes:
    - reads Authorization: Bearer <token>
    - verifies signature & expiry
    - checks the admin still exists
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "No token provided")
    try:
        payload = decode_token(credentials.credentials)
        user_id = int(payload["sub"])
    except ValueError:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Invalid or expired token")

    user = db.get(AdminUser, user_id)
    if not user:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "User no longer exists")
    return user


@router.get("/check")
def check(current: AdminUser = Depends(require_admin)):
    return {"authenticated": True, "user": AdminOut.model_validate(current)}
