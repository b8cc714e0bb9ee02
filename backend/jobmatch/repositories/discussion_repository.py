"""
Discussion Repository - threads and comments
"""
from sqlalchemy.orm import Session, joinedload
from typing import List, Optional
from uuid import UUID

from jobmatch.models.discussion import Thread, Comment


class ThreadRepository:
    """Thread data access layer"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, thread: Thread) -> Thread:
        self.db.add(thread)
        self.db.commit()
        self.db.refresh(thread)
        return thread

    def get_by_id(self, thread_id: UUID) -> Optional[Thread]:
        return self.db.query(Thread).options(
            joinedload(Thread.author),
            joinedload(Thread.comments).joinedload(Comment.author),
        ).filter(Thread.id == thread_id).first()

    def get_all(self, author_id: Optional[UUID] = None) -> List[Thread]:
        """Threads with author, newest first"""
        query = self.db.query(Thread).options(joinedload(Thread.author))
        if author_id:
            query = query.filter(Thread.author_id == author_id)
        return query.order_by(Thread.created_at.desc()).all()

    def increment_views(self, thread: Thread) -> Thread:
        thread.view_count = (thread.view_count or 0) + 1
        self.db.commit()
        self.db.refresh(thread)
        return thread

    def add_comment(self, comment: Comment) -> Comment:
        self.db.add(comment)
        self.db.commit()
        self.db.refresh(comment)
        return comment
