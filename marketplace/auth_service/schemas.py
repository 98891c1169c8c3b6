from datetime import datetime

from pydantic import EmailStr, Field

from ..common.schemas import CamelModel


class RegisterRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=256)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=256)


class UserOut(CamelModel):
    id: str
    email: str
    verified: bool
    created_at: datetime


class AuthResponse(CamelModel):
    message: str
    user: UserOut
    token: str
