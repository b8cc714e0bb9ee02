"""
Jobs API Routes - swipe deck
"""
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobmatch.core.database import get_db
from jobmatch.core.exceptions import SwipeFailedError
from jobmatch.core.logging import logger
from jobmatch.dependencies import require_user, get_swipe_guard
from jobmatch.models.user import AuthUser
from jobmatch.schemas.application import DragRequest, SwipeRequest, SwipeResponse
from jobmatch.schemas.job import CandidateListResponse, JobListingWithCompany
from jobmatch.services.matching_service import MatchingService, SwipeGuard, classify_drag, NO_MORE_JOBS_MESSAGE

router = APIRouter()


def _record(service: MatchingService, user: AuthUser, job_id: UUID, direction: str) -> SwipeResponse:
    try:
        outcome = service.swipe(user.id, job_id, direction)
    except SQLAlchemyError as e:
        raise SwipeFailedError(str(getattr(e, "orig", None) or e)) from e

    return SwipeResponse(
        job_id=job_id,
        direction=direction,
        recorded=True,
        application_id=outcome.application.id if outcome.application else None,
        notification=outcome.notification,
    )


@router.get("", response_model=CandidateListResponse)
def list_candidates(
    user: AuthUser = Depends(require_user),
    guard: SwipeGuard = Depends(get_swipe_guard),
    db: Session = Depends(get_db)
):
    """
    Active listings the user has not swiped on, newest first.

    An empty list is the terminal "no more jobs" state.
    """
    try:
        jobs = MatchingService(db, guard).get_candidates(user.id)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching jobs for {user.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error fetching jobs: {e}"
        )

    exhausted = len(jobs) == 0
    return CandidateListResponse(
        items=[JobListingWithCompany.model_validate(job) for job in jobs],
        total=len(jobs),
        exhausted=exhausted,
        message=NO_MORE_JOBS_MESSAGE if exhausted else None,
    )


@router.post("/{job_id}/swipe", response_model=SwipeResponse, status_code=status.HTTP_201_CREATED)
def swipe(
    job_id: UUID,
    request: SwipeRequest,
    user: AuthUser = Depends(require_user),
    guard: SwipeGuard = Depends(get_swipe_guard),
    db: Session = Depends(get_db)
):
    """Swipe right to apply, left to pass"""
    return _record(MatchingService(db, guard), user, job_id, request.direction.value)


@router.post("/{job_id}/drag", response_model=SwipeResponse)
def drag(
    job_id: UUID,
    request: DragRequest,
    user: AuthUser = Depends(require_user),
    guard: SwipeGuard = Depends(get_swipe_guard),
    db: Session = Depends(get_db)
):
    """Released drag gesture; below the threshold nothing is recorded"""
    direction = classify_drag(request.offset_x)
    if direction is None:
        return SwipeResponse(job_id=job_id, recorded=False)
    return _record(MatchingService(db, guard), user, job_id, direction)
