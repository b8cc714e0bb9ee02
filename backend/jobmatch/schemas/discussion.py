"""
Discussion Schemas
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime
from uuid import UUID

from jobmatch.utils.validators import normalize_tags


class ThreadCreate(BaseModel):
    title: str = Field(min_length=5)
    content: str = Field(min_length=20)
    is_anonymous: bool = True
    tags: List[str] = []

    @field_validator("tags")
    @classmethod
    def _normalize_tags(cls, value: List[str]) -> List[str]:
        return normalize_tags(value)


class CommentCreate(BaseModel):
    content: str = Field(min_length=1)
    is_anonymous: bool = True
    parent_id: Optional[UUID] = None


class AuthorDisplay(BaseModel):
    """Name and avatar shown next to a post"""
    name: str
    avatar_url: Optional[str] = None


class CommentResponse(BaseModel):
    id: UUID
    thread_id: UUID
    parent_id: Optional[UUID] = None
    content: str
    is_anonymous: bool
    upvotes: int = 0
    downvotes: int = 0
    author: AuthorDisplay
    created_at: Optional[datetime] = None


class ThreadResponse(BaseModel):
    id: UUID
    title: str
    content: str
    is_anonymous: bool
    tags: List[str] = []
    upvotes: int = 0
    downvotes: int = 0
    view_count: int = 0
    author: AuthorDisplay
    created_at: Optional[datetime] = None


class ThreadDetailResponse(ThreadResponse):
    comments: List[CommentResponse] = []


class ThreadCreatedResponse(BaseModel):
    thread: ThreadResponse
    redirect: str


class ThreadListResponse(BaseModel):
    items: List[ThreadResponse]
    total: int
