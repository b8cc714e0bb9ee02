"""
Company Model
"""
from sqlalchemy import Column, String, Text, Integer, DateTime, JSON, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from jobmatch.core.database import Base


class Company(Base):
    __tablename__ = "companies"

    # Primary Key
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    # Basic Info
    name = Column(String(255), nullable=False, index=True)
    logo_url = Column(String(500))
    website = Column(String(500))
    industry = Column(String(100), index=True)
    size = Column(String(50))
    founded_year = Column(Integer)
    location = Column(String(255))
    description = Column(Text)
    mission = Column(Text)
    benefits = Column(JSON, default=list)
    culture = Column(Text)

    # Company admin (zero or one)
    admin_id = Column(Uuid(as_uuid=True), ForeignKey("auth_user.id", ondelete="SET NULL"), index=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    job_listings = relationship("JobListing", back_populates="company", cascade="all, delete-orphan")
    admin = relationship(
        "Profile",
        primaryjoin="foreign(Company.admin_id) == Profile.id",
        viewonly=True,
    )
