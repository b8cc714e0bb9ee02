"""
Discussion Service - forum threads and comments
"""
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from jobmatch.core.exceptions import JobMatchError, LoginRequired, NotFoundError
from jobmatch.core.logging import logger
from jobmatch.models.discussion import Comment, Thread
from jobmatch.models.profile import Profile
from jobmatch.repositories.discussion_repository import ThreadRepository
from jobmatch.schemas.discussion import CommentCreate, ThreadCreate
from jobmatch.utils.validators import contains_text


THREAD_TABS = ("all", "my-threads")


def author_display(author: Optional[Profile], is_anonymous: bool) -> Dict[str, Optional[str]]:
    """Anonymous posts show the author's anonymous identity instead of the real one"""
    if is_anonymous:
        return {
            "name": (author.anonymous_name if author else None) or "Anonymous User",
            "avatar_url": author.anonymous_avatar_url if author else None,
        }
    return {
        "name": (author.full_name if author else None) or "Unknown User",
        "avatar_url": author.avatar_url if author else None,
    }


def serialize_thread(thread: Thread) -> Dict[str, Any]:
    return {
        "id": thread.id,
        "title": thread.title,
        "content": thread.content,
        "is_anonymous": thread.is_anonymous,
        "tags": list(thread.tags or []),
        "upvotes": thread.upvotes or 0,
        "downvotes": thread.downvotes or 0,
        "view_count": thread.view_count or 0,
        "author": author_display(thread.author, thread.is_anonymous),
        "created_at": thread.created_at,
    }


def serialize_comment(comment: Comment) -> Dict[str, Any]:
    return {
        "id": comment.id,
        "thread_id": comment.thread_id,
        "parent_id": comment.parent_id,
        "content": comment.content,
        "is_anonymous": comment.is_anonymous,
        "upvotes": comment.upvotes or 0,
        "downvotes": comment.downvotes or 0,
        "author": author_display(comment.author, comment.is_anonymous),
        "created_at": comment.created_at,
    }


def search_threads(threads: List[Thread], query: Optional[str]) -> List[Thread]:
    """Match title, content or any tag"""
    if not query:
        return threads
    return [
        t for t in threads
        if contains_text(query, t.title, t.content, *(t.tags or []))
    ]


class DiscussionService:
    """Discussion service"""

    def __init__(self, db: Session):
        self.db = db
        self.threads = ThreadRepository(db)

    def list_threads(
        self,
        user_id: Optional[UUID] = None,
        tab: str = "all",
        search: Optional[str] = None
    ) -> List[Thread]:
        if tab not in THREAD_TABS:
            raise JobMatchError(f"Unknown discussion tab: {tab}")

        author_id = None
        if tab == "my-threads":
            if user_id is None:
                raise LoginRequired()
            author_id = user_id
        return search_threads(self.threads.get_all(author_id=author_id), search)

    def create_thread(self, user_id: UUID, request: ThreadCreate) -> Thread:
        thread = self.threads.create(Thread(
            author_id=user_id,
            title=request.title,
            content=request.content,
            is_anonymous=request.is_anonymous,
            tags=request.tags,
        ))
        logger.info(f"Thread {thread.id} created by {user_id}")
        return thread

    def get_thread(self, thread_id: UUID) -> Thread:
        thread = self.threads.get_by_id(thread_id)
        if thread is None:
            raise NotFoundError("Thread not found")
        return self.threads.increment_views(thread)

    def add_comment(self, thread_id: UUID, user_id: UUID, request: CommentCreate) -> Comment:
        if self.threads.get_by_id(thread_id) is None:
            raise NotFoundError("Thread not found")
        return self.threads.add_comment(Comment(
            thread_id=thread_id,
            author_id=user_id,
            parent_id=request.parent_id,
            content=request.content,
            is_anonymous=request.is_anonymous,
        ))
