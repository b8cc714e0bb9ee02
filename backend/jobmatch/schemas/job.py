"""
Job Listing and Company Schemas
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List, Any
from datetime import datetime, date
from uuid import UUID

from jobmatch.utils.validators import is_http_url


class CompanyBase(BaseModel):
    """Company base schema"""
    name: str
    industry: Optional[str] = None
    size: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None


class CompanyResponse(CompanyBase):
    """Company response schema"""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    logo_url: Optional[str] = None
    founded_year: Optional[int] = None
    description: Optional[str] = None
    mission: Optional[str] = None
    benefits: Optional[List[str]] = None
    culture: Optional[str] = None
    admin_id: Optional[UUID] = None
    created_at: Optional[datetime] = None


class CompanyUpdate(BaseModel):
    """Company details form on the dashboard"""
    name: str = Field(min_length=2)
    website: Optional[str] = None
    industry: str = Field(min_length=2)
    size: str
    location: str = Field(min_length=2)
    description: str = Field(min_length=50)
    mission: str = Field(min_length=20)
    culture: str = Field(min_length=20)
    logo_url: Optional[str] = None

    @field_validator("website", "logo_url")
    @classmethod
    def _blank_or_url(cls, value: Optional[str]) -> Optional[str]:
        """Empty or a valid http(s) URL, stored exactly as entered"""
        if value and not is_http_url(value):
            raise ValueError("Please enter a valid URL.")
        return value


class CompanyListResponse(BaseModel):
    items: List[CompanyResponse]
    industries: List[str]
    total: int


class JobListingBase(BaseModel):
    """Job listing base schema"""
    title: str
    description: str
    requirements: Optional[List[str]] = None
    responsibilities: Optional[List[str]] = None
    location: Optional[str] = None
    is_remote: Optional[bool] = False
    job_type: Optional[str] = None
    salary_range: Optional[Any] = None
    skills_required: Optional[List[str]] = None
    experience_level: Optional[str] = None
    education_required: Optional[str] = None
    benefits: Optional[List[str]] = None
    application_deadline: Optional[date] = None


class JobListingCreate(JobListingBase):
    """Posted from the company dashboard"""
    title: str = Field(min_length=2)
    description: str = Field(min_length=20)


class JobListingStatusUpdate(BaseModel):
    is_active: bool


class JobListingResponse(JobListingBase):
    """Job listing response schema"""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    company_id: UUID
    is_active: bool
    created_at: Optional[datetime] = None


class JobListingWithCompany(JobListingResponse):
    company: Optional[CompanyResponse] = None


class CompanyDetailResponse(BaseModel):
    company: CompanyResponse
    jobs: List[JobListingResponse]


class CandidateListResponse(BaseModel):
    """Swipe deck: remaining listings the user has not decided on"""
    items: List[JobListingWithCompany]
    total: int
    exhausted: bool
    message: Optional[str] = None
