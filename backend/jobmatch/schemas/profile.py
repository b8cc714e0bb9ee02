"""
Profile Schemas
"""
from pydantic import BaseModel, EmailStr, ConfigDict, Field, field_validator
from typing import Optional, List, Any
from datetime import datetime
from enum import Enum
from uuid import UUID


class ViewMode(str, Enum):
    PUBLIC = "public"
    ANONYMOUS = "anonymous"


class ProfileResponse(BaseModel):
    """Stored profile row"""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    full_name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    title: Optional[str] = None
    years_of_experience: Optional[int] = None
    skills: Optional[List[str]] = None
    education: Optional[List[str]] = None
    work_history: Optional[List[Any]] = None
    anonymous_name: str
    anonymous_bio: Optional[str] = None
    anonymous_avatar_url: Optional[str] = None
    anonymous_title: Optional[str] = None
    anonymous_years_of_experience: Optional[str] = None
    anonymous_skills: Optional[List[str]] = None
    anonymous_education: Optional[List[str]] = None
    anonymous_work_history: Optional[List[Any]] = None
    is_actively_looking: bool = True
    created_at: Optional[datetime] = None


class ProfileUpdate(BaseModel):
    """
    Editable profile fields.

    ``anonymous_name`` is not editable; it is assigned once when the profile
    is created.
    """
    model_config = ConfigDict(extra="forbid")

    full_name: Optional[str] = Field(default=None, min_length=2)
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    title: Optional[str] = None
    years_of_experience: Optional[int] = Field(default=None, ge=0)
    skills: Optional[List[str]] = None
    education: Optional[List[str]] = None
    work_history: Optional[List[Any]] = None
    avatar_url: Optional[str] = None
    anonymous_bio: Optional[str] = None
    anonymous_title: Optional[str] = None
    anonymous_years_of_experience: Optional[str] = None
    anonymous_skills: Optional[List[str]] = None
    anonymous_education: Optional[List[str]] = None
    anonymous_work_history: Optional[List[Any]] = None
    anonymous_avatar_url: Optional[str] = None
    is_actively_looking: Optional[bool] = None

    @field_validator("full_name", "is_actively_looking")
    @classmethod
    def _not_null(cls, value):
        # may be omitted, but the stored columns are NOT NULL
        if value is None:
            raise ValueError("may not be null")
        return value


class ProfileView(BaseModel):
    """Display-time projection of either identity"""
    mode: ViewMode
    name: str
    bio: Optional[str] = None
    avatar: Optional[str] = None
    title: Optional[str] = None
    experience: str
    skills: List[str] = []
    education: List[str] = []
    work_history: List[Any] = []
