"""
Auth Schemas
"""
from pydantic import BaseModel, EmailStr, ConfigDict, Field
from typing import Optional
from datetime import datetime
from uuid import UUID

from jobmatch.core.config import settings


class UserResponse(BaseModel):
    """Auth identity response schema"""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: EmailStr
    created_at: Optional[datetime] = None


class RegisterRequest(BaseModel):
    """Sign-up request schema"""
    email: EmailStr
    password: str = Field(min_length=settings.MIN_PASSWORD_LENGTH)
    full_name: Optional[str] = None


class LoginRequest(BaseModel):
    """Sign-in request schema"""
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    """Session response schema"""
    access_token: str
    token_type: str = "bearer"
    user: UserResponse


class LogoutResponse(BaseModel):
    message: str = "Signed out"
    redirect: str
