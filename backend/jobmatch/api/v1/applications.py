"""
Application API Routes
"""
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobmatch.core.database import get_db
from jobmatch.core.logging import logger
from jobmatch.dependencies import require_user
from jobmatch.models.user import AuthUser
from jobmatch.schemas.application import ApplicationListResponse, ApplicationWithJob
from jobmatch.services.application_service import ApplicationService

router = APIRouter()


@router.get("", response_model=ApplicationListResponse)
def list_applications(
    status_filter: str = Query("all", alias="status"),
    user: AuthUser = Depends(require_user),
    db: Session = Depends(get_db)
):
    """Track the status of your job applications (tab: all or one status)"""
    try:
        applications = ApplicationService(db).list_for_user(user.id, status_filter)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching applications for {user.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error fetching applications: {e}"
        )
    return ApplicationListResponse(
        items=[ApplicationWithJob.model_validate(a) for a in applications],
        total=len(applications),
    )
