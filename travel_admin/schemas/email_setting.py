from datetime import datetime

from pydantic import BaseModel, EmailStr, Field


class EmailSettingIn(BaseModel):
    from_email: EmailStr
    from_name: str = Field(min_length=1)


class EmailSettingOut(BaseModel):
    id: int
    from_email: str
    from_name: str
    updated_at: datetime | None

    class Config:
        from_attributes = True
