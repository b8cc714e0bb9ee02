"""
Application and Swipe Schemas
"""
from pydantic import BaseModel, ConfigDict
from typing import Optional, List
from datetime import datetime
from enum import Enum
from uuid import UUID

from jobmatch.schemas.job import JobListingResponse, JobListingWithCompany


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    INTERVIEW = "interview"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class SwipeDirection(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class SwipeRequest(BaseModel):
    direction: SwipeDirection


class DragRequest(BaseModel):
    """Raw horizontal drag offset released by the client"""
    offset_x: float
    offset_y: float = 0.0


class Notification(BaseModel):
    title: str
    description: str


class SwipeResponse(BaseModel):
    job_id: UUID
    direction: Optional[SwipeDirection] = None
    recorded: bool
    application_id: Optional[UUID] = None
    notification: Optional[Notification] = None


class ApplicationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    job_id: UUID
    user_id: UUID
    status: ApplicationStatus
    cover_letter: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ApplicationWithJob(ApplicationResponse):
    job: Optional[JobListingWithCompany] = None


class ApplicantSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    full_name: str
    email: Optional[str] = None
    title: Optional[str] = None


class CompanyApplication(ApplicationResponse):
    """Application as seen from the company dashboard"""
    job: Optional[JobListingResponse] = None
    user: Optional[ApplicantSummary] = None


class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus
    notes: Optional[str] = None


class ApplicationListResponse(BaseModel):
    items: List[ApplicationWithJob]
    total: int
