"""
Profile Model
"""
from sqlalchemy import Column, String, Boolean, DateTime, Integer, Text, JSON, ForeignKey, Uuid
from sqlalchemy.sql import func

from jobmatch.core.database import Base


class Profile(Base):
    __tablename__ = "profiles"

    # Same id as the auth identity
    id = Column(Uuid(as_uuid=True), ForeignKey("auth_user.id", ondelete="CASCADE"), primary_key=True)

    # Public identity
    full_name = Column(String(255), nullable=False)
    email = Column(String(255), index=True)
    phone = Column(String(50))
    location = Column(String(255))
    bio = Column(Text)
    resume_url = Column(String(500))
    avatar_url = Column(String(500))
    title = Column(String(255))
    years_of_experience = Column(Integer)
    skills = Column(JSON, default=list)
    education = Column(JSON, default=list)
    work_history = Column(JSON, default=list)

    # Anonymous identity (anonymous_name is assigned once at creation)
    anonymous_name = Column(String(100), nullable=False)
    anonymous_bio = Column(Text)
    anonymous_avatar_url = Column(String(500))
    anonymous_title = Column(String(255))
    anonymous_years_of_experience = Column(String(50))
    anonymous_skills = Column(JSON, default=list)
    anonymous_education = Column(JSON, default=list)
    anonymous_work_history = Column(JSON, default=list)

    # Job search preferences
    job_types = Column(JSON, default=list)
    desired_salary_range = Column(JSON)
    remote_preference = Column(String(50))
    is_actively_looking = Column(Boolean, default=True, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
