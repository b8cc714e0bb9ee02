"""
Profile API Routes
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobmatch.core.database import get_db
from jobmatch.core.logging import logger
from jobmatch.dependencies import require_profile
from jobmatch.models.profile import Profile
from jobmatch.schemas.application import ApplicationWithJob
from jobmatch.schemas.profile import ProfileResponse, ProfileUpdate, ViewMode
from jobmatch.services.profile_service import ProfileService, project_profile

router = APIRouter()


@router.get("")
def get_profile(
    view: ViewMode = ViewMode.PUBLIC,
    profile: Profile = Depends(require_profile),
    db: Session = Depends(get_db)
) -> Dict[str, Any]:
    """
    Profile page: one identity projected for display plus recent applications.

    Switching ``view`` between public and anonymous only changes the
    projection, never the stored row.
    """
    try:
        applications = ProfileService(db).recent_applications(profile)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching applications for {profile.id}: {e}")
        applications = []

    return {
        "view": project_profile(profile, view),
        "applications": [ApplicationWithJob.model_validate(a) for a in applications],
    }


@router.put("", response_model=ProfileResponse)
def update_profile(
    request: ProfileUpdate,
    profile: Profile = Depends(require_profile),
    db: Session = Depends(get_db)
):
    """Edit profile (the anonymous name is fixed at creation)"""
    try:
        return ProfileService(db).update_profile(profile, request)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error updating profile {profile.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update profile: {e}"
        )
