from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from travel_admin.api.v1.auth import require_admin
from travel_admin.core.config import settings
from travel_admin.services.uploads import save_package_image

router = APIRouter(prefix="/upload", tags=["upload"])


@router.post("", dependencies=[Depends(require_admin)])
def upload_file(file: UploadFile | None = File(None)):
    if file is None:
        raise HTTPException(status_code=400, detail="No file provided")
    result = save_package_image(file, settings)
    return {"success": True, **result}
