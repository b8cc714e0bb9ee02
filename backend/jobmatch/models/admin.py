"""
Admin Model
"""
from sqlalchemy import Column, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from jobmatch.core.database import Base


class Admin(Base):
    """Marker row granting platform admin privileges"""

    __tablename__ = "admins"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("auth_user.id", ondelete="CASCADE"), unique=True, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship(
        "Profile",
        primaryjoin="foreign(Admin.user_id) == Profile.id",
        viewonly=True,
    )
