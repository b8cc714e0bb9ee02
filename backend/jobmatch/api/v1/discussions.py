"""
Discussion API Routes
"""
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobmatch.core.database import get_db
from jobmatch.core.logging import logger
from jobmatch.dependencies import get_session_context, require_user
from jobmatch.models.user import AuthUser
from jobmatch.schemas.discussion import (
    CommentCreate,
    CommentResponse,
    ThreadCreate,
    ThreadCreatedResponse,
    ThreadDetailResponse,
    ThreadListResponse,
)
from jobmatch.services.discussion_service import DiscussionService, serialize_comment, serialize_thread
from jobmatch.services.session_context import SessionContext

router = APIRouter()


@router.get("", response_model=ThreadListResponse)
def list_threads(
    tab: str = "all",
    search: Optional[str] = None,
    ctx: SessionContext = Depends(get_session_context),
    db: Session = Depends(get_db)
):
    """Threads newest first; ``tab=my-threads`` shows only your own"""
    user_id = ctx.user.id if ctx.user else None
    try:
        threads = DiscussionService(db).list_threads(user_id=user_id, tab=tab, search=search)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching threads: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error fetching threads: {e}"
        )
    return ThreadListResponse(items=[serialize_thread(t) for t in threads], total=len(threads))


@router.post("", response_model=ThreadCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_thread(
    request: ThreadCreate,
    user: AuthUser = Depends(require_user),
    db: Session = Depends(get_db)
):
    """Post a thread (anonymous by default)"""
    try:
        thread = DiscussionService(db).create_thread(user.id, request)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating thread: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create thread: {e}"
        )
    return ThreadCreatedResponse(thread=serialize_thread(thread), redirect=f"/discussions/{thread.id}")


@router.get("/{thread_id}", response_model=ThreadDetailResponse)
def get_thread(thread_id: UUID, db: Session = Depends(get_db)):
    """Thread with its comments; counts a view"""
    thread = DiscussionService(db).get_thread(thread_id)
    return ThreadDetailResponse(
        **serialize_thread(thread),
        comments=[serialize_comment(c) for c in thread.comments],
    )


@router.post("/{thread_id}/comments", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
def add_comment(
    thread_id: UUID,
    request: CommentCreate,
    user: AuthUser = Depends(require_user),
    db: Session = Depends(get_db)
):
    try:
        comment = DiscussionService(db).add_comment(thread_id, user.id, request)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error adding comment to {thread_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to add comment: {e}"
        )
    return serialize_comment(comment)
