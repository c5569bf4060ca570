# travel_admin/schemas/auth.py
from pydantic import BaseModel


class LoginIn(BaseModel):
    username: str  # username or email
    password: str


class AdminOut(BaseModel):
    id: int
    username: str
    email: str

    class Config:
        from_attributes = True


class LoginOut(BaseModel):
    success: bool = True
    user: AdminOut
    token: str
