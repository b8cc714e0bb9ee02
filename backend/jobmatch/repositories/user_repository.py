"""
User Repository
"""
from sqlalchemy.orm import Session
from typing import Optional
from uuid import UUID

from jobmatch.models.user import AuthUser, RevokedToken


class UserRepository:
    """Auth identity data access layer"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, user: AuthUser) -> AuthUser:
        """Create user"""
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user

    def get_by_id(self, user_id: UUID) -> Optional[AuthUser]:
        """Get user by ID"""
        return self.db.query(AuthUser).filter(AuthUser.id == user_id).first()

    def get_by_email(self, email: str) -> Optional[AuthUser]:
        """Get user by email (case-insensitive)"""
        return self.db.query(AuthUser).filter(AuthUser.email == email.lower()).first()

    def update(self, user: AuthUser) -> AuthUser:
        """Update user"""
        self.db.commit()
        self.db.refresh(user)
        return user

    def delete(self, user_id: UUID) -> bool:
        """Delete user"""
        user = self.get_by_id(user_id)
        if user:
            self.db.delete(user)
            self.db.commit()
            return True
        return False

    def revoke_token(self, jti: str, user_id: UUID) -> None:
        """Mark an access token as signed out"""
        if self.is_token_revoked(jti):
            return
        self.db.add(RevokedToken(jti=jti, user_id=user_id))
        self.db.commit()

    def is_token_revoked(self, jti: str) -> bool:
        return self.db.query(RevokedToken).filter(RevokedToken.jti == jti).first() is not None
