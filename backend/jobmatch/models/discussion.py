"""
Discussion Models
"""
from sqlalchemy import Column, String, Text, Integer, Boolean, DateTime, JSON, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from jobmatch.core.database import Base


class Thread(Base):
    __tablename__ = "threads"

    # Primary Key
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    author_id = Column(Uuid(as_uuid=True), ForeignKey("auth_user.id", ondelete="CASCADE"), index=True, nullable=False)

    # Content
    title = Column(String(500), nullable=False)
    content = Column(Text, nullable=False)
    is_anonymous = Column(Boolean, default=True, nullable=False)
    tags = Column(JSON, default=list)

    # Counters
    upvotes = Column(Integer, default=0, nullable=False)
    downvotes = Column(Integer, default=0, nullable=False)
    view_count = Column(Integer, default=0, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    author = relationship(
        "Profile",
        primaryjoin="foreign(Thread.author_id) == Profile.id",
        viewonly=True,
    )
    comments = relationship(
        "Comment",
        back_populates="thread",
        cascade="all, delete-orphan",
        order_by="Comment.created_at",
    )


class Comment(Base):
    __tablename__ = "comments"

    # Primary Key
    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    thread_id = Column(Uuid(as_uuid=True), ForeignKey("threads.id", ondelete="CASCADE"), index=True, nullable=False)
    author_id = Column(Uuid(as_uuid=True), ForeignKey("auth_user.id", ondelete="CASCADE"), index=True, nullable=False)
    parent_id = Column(Uuid(as_uuid=True), ForeignKey("comments.id", ondelete="CASCADE"))

    content = Column(Text, nullable=False)
    is_anonymous = Column(Boolean, default=True, nullable=False)
    upvotes = Column(Integer, default=0, nullable=False)
    downvotes = Column(Integer, default=0, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    thread = relationship("Thread", back_populates="comments")
    author = relationship(
        "Profile",
        primaryjoin="foreign(Comment.author_id) == Profile.id",
        viewonly=True,
    )
