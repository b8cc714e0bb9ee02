"""
Application and Swipe Models
"""
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, UniqueConstraint, CheckConstraint, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from jobmatch.core.database import Base


APPLICATION_STATUSES = ("pending", "interview", "accepted", "rejected")
SWIPE_DIRECTIONS = ("left", "right")


class Application(Base):
    __tablename__ = "applications"

    # Primary Key
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    job_id = Column(Uuid(as_uuid=True), ForeignKey("job_listings.id", ondelete="CASCADE"), index=True, nullable=False)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("auth_user.id", ondelete="CASCADE"), index=True, nullable=False)

    cover_letter = Column(Text)
    status = Column(String(20), nullable=False, default="pending", index=True)
    notes = Column(Text)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    job = relationship("JobListing", back_populates="applications")
    user = relationship(
        "Profile",
        primaryjoin="foreign(Application.user_id) == Profile.id",
        viewonly=True,
    )

    __table_args__ = (
        UniqueConstraint("user_id", "job_id", name="uq_application_user_job"),
        CheckConstraint(
            "status IN ('pending', 'interview', 'accepted', 'rejected')",
            name="ck_application_status",
        ),
    )


class Swipe(Base):
    """Append-only record of a left/right decision"""

    __tablename__ = "swipes"

    # Primary Key
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("auth_user.id", ondelete="CASCADE"), index=True, nullable=False)
    job_id = Column(Uuid(as_uuid=True), ForeignKey("job_listings.id", ondelete="CASCADE"), index=True, nullable=False)
    direction = Column(String(5), nullable=False)

    # Timestamp
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        # At most one decision per (user, job)
        UniqueConstraint("user_id", "job_id", name="uq_swipe_user_job"),
        CheckConstraint("direction IN ('left', 'right')", name="ck_swipe_direction"),
    )
