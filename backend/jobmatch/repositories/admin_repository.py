"""
Admin Repository
"""
from sqlalchemy.orm import Session, joinedload
from typing import List, Optional
from uuid import UUID

from jobmatch.models.admin import Admin


class AdminRepository:
    """Platform admin data access layer"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_user(self, user_id: UUID) -> Optional[Admin]:
        return self.db.query(Admin).filter(Admin.user_id == user_id).first()

    def get_all(self) -> List[Admin]:
        """Admins with user profile, newest first"""
        return self.db.query(Admin).options(
            joinedload(Admin.user)
        ).order_by(
            Admin.created_at.desc()
        ).all()
