"""
Job Listing Model
"""
from sqlalchemy import Column, String, Text, Boolean, DateTime, Date, JSON, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from jobmatch.core.database import Base


class JobListing(Base):
    __tablename__ = "job_listings"

    # Primary Key
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    company_id = Column(Uuid(as_uuid=True), ForeignKey("companies.id", ondelete="CASCADE"), index=True, nullable=False)

    # Basic Info
    title = Column(String(500), nullable=False, index=True)
    description = Column(Text, nullable=False)
    requirements = Column(JSON, default=list)
    responsibilities = Column(JSON, default=list)

    # Conditions
    location = Column(String(255), index=True)
    is_remote = Column(Boolean, default=False)
    job_type = Column(String(50))  # full-time, part-time, contract
    salary_range = Column(JSON)  # {"min": ..., "max": ..., "currency": ...}
    skills_required = Column(JSON, default=list)
    experience_level = Column(String(50))
    education_required = Column(String(255))
    benefits = Column(JSON, default=list)
    application_deadline = Column(Date)

    # Listings are never deleted, only deactivated
    is_active = Column(Boolean, default=True, index=True, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    company = relationship("Company", back_populates="job_listings")
    applications = relationship("Application", back_populates="job", cascade="all, delete-orphan")
