"""
Auth User Models
"""
from sqlalchemy import Column, String, Boolean, DateTime, JSON, Uuid
from sqlalchemy.sql import func
import uuid

from jobmatch.core.database import Base


class AuthUser(Base):
    """Authentication identity. Profile rows share this id."""

    __tablename__ = "auth_user"

    # Primary Key
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)

    # Authentication
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    # Arbitrary data passed at sign-up, e.g. {"full_name": "..."}
    user_metadata = Column(JSON, default=dict)

    # Status
    is_active = Column(Boolean, default=True)
    last_sign_in_at = Column(DateTime(timezone=True))

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())


class RevokedToken(Base):
    """Access tokens invalidated by sign-out"""

    __tablename__ = "revoked_token"

    jti = Column(String(64), primary_key=True)
    user_id = Column(Uuid(as_uuid=True), index=True)
    revoked_at = Column(DateTime(timezone=True), server_default=func.now())
