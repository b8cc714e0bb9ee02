"""
Admin Dashboard Schemas
"""
from pydantic import BaseModel, EmailStr, ConfigDict, Field
from typing import Optional, List
from datetime import datetime
from uuid import UUID

from jobmatch.core.config import settings


class ProfileSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    full_name: str
    email: Optional[str] = None


class CompanyWithAdmin(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    logo_url: Optional[str] = None
    industry: Optional[str] = None
    admin_id: Optional[UUID] = None
    admin: Optional[ProfileSummary] = None
    created_at: Optional[datetime] = None


class AdminWithUser(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    user: Optional[ProfileSummary] = None
    created_at: Optional[datetime] = None


class AdminDashboardResponse(BaseModel):
    companies: List[CompanyWithAdmin]
    admins: List[AdminWithUser]


class CompanyAccountCreate(BaseModel):
    email: EmailStr
    password: str = Field(min_length=settings.COMPANY_MIN_PASSWORD_LENGTH)
    company_name: str = Field(min_length=2)


class AdminUserCreate(BaseModel):
    email: EmailStr
    full_name: str = Field(min_length=2)


class CompanyAccountResponse(BaseModel):
    company_id: UUID
    admin_id: UUID
    message: str = "Company account has been created successfully."


class AdminUserResponse(BaseModel):
    admin_id: UUID
    user_id: UUID
    message: str = "Admin user has been created successfully."
