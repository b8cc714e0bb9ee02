"""
Profile Repository
"""
from sqlalchemy.orm import Session
from typing import Optional, Dict, Any
from uuid import UUID

from jobmatch.models.profile import Profile


class ProfileRepository:
    """Profile data access layer"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, profile: Profile) -> Profile:
        """Create profile"""
        self.db.add(profile)
        self.db.commit()
        self.db.refresh(profile)
        return profile

    def get_by_id(self, profile_id: UUID) -> Optional[Profile]:
        """Get profile by ID (same as the auth user id)"""
        return self.db.query(Profile).filter(Profile.id == profile_id).first()

    def update(self, profile: Profile, values: Dict[str, Any]) -> Profile:
        """Apply values and persist"""
        for key, value in values.items():
            setattr(profile, key, value)
        self.db.commit()
        self.db.refresh(profile)
        return profile
