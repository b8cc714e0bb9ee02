"""
Profile Service - lazy creation, editing and public/anonymous projection
"""
import random
from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobmatch.core.config import settings
from jobmatch.core.logging import logger
from jobmatch.models.application import Application
from jobmatch.models.profile import Profile
from jobmatch.models.user import AuthUser
from jobmatch.repositories.application_repository import ApplicationRepository
from jobmatch.repositories.profile_repository import ProfileRepository
from jobmatch.schemas.profile import ProfileUpdate, ProfileView, ViewMode


def generate_anonymous_name() -> str:
    """``Anonymous`` followed by a random number; collisions are not checked"""
    return f"{settings.ANONYMOUS_NAME_PREFIX}{random.randint(0, settings.ANONYMOUS_NAME_MAX)}"


def project_profile(profile: Profile, mode: ViewMode) -> ProfileView:
    """
    Build the display version of one identity.

    Pure read of the profile row: switching modes never writes anything.
    """
    if mode == ViewMode.PUBLIC:
        return ProfileView(
            mode=mode,
            name=profile.full_name,
            bio=profile.bio,
            avatar=profile.avatar_url,
            title=profile.title,
            experience=(
                f"{profile.years_of_experience} years"
                if profile.years_of_experience else "Not specified"
            ),
            skills=list(profile.skills or []),
            education=list(profile.education or []),
            work_history=list(profile.work_history or []),
        )

    return ProfileView(
        mode=mode,
        name=profile.anonymous_name or "Anonymous User",
        bio=profile.anonymous_bio or "No anonymous bio provided",
        avatar=profile.anonymous_avatar_url,
        title=profile.anonymous_title or "Professional",
        experience=profile.anonymous_years_of_experience or "Not specified",
        skills=list(profile.anonymous_skills or []),
        education=list(profile.anonymous_education or []),
        work_history=list(profile.anonymous_work_history or []),
    )


class ProfileService:
    """Profile service"""

    def __init__(self, db: Session):
        self.db = db
        self.profiles = ProfileRepository(db)

    def ensure_profile(self, user: AuthUser) -> Profile:
        """Return the user's profile, creating it on first sign-in"""
        profile = self.profiles.get_by_id(user.id)
        if profile is not None:
            return profile

        metadata = user.user_metadata or {}
        profile = Profile(
            id=user.id,
            email=user.email,
            full_name=metadata.get("full_name") or settings.DEFAULT_FULL_NAME,
            anonymous_name=generate_anonymous_name(),
            is_actively_looking=True,
        )
        try:
            profile = self.profiles.create(profile)
        except IntegrityError:
            # created concurrently by another request for the same user
            self.db.rollback()
            return self.profiles.get_by_id(user.id)

        logger.info(f"Created profile for user {user.id} as {profile.anonymous_name}")
        return profile

    def update_profile(self, profile: Profile, request: ProfileUpdate) -> Profile:
        values = request.model_dump(exclude_unset=True, mode="json")
        return self.profiles.update(profile, values)

    def recent_applications(self, profile: Profile) -> List[Application]:
        return ApplicationRepository(self.db).get_by_user(
            profile.id,
            limit=settings.PROFILE_RECENT_APPLICATIONS,
        )
