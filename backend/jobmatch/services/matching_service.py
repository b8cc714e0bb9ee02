"""
Matching Service - swipe deck and swipe-to-application transition

Per job and user a decision moves ``unseen -> left`` (no application) or
``unseen -> right -> application:pending``. Decisions are final.
"""
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, List, Optional, Set
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from jobmatch.core.exceptions import DuplicateSwipeError, JobMatchError, NotFoundError, SwipeInFlightError
from jobmatch.core.logging import logger
from jobmatch.models.application import Application, Swipe, SWIPE_DIRECTIONS
from jobmatch.models.job import JobListing
from jobmatch.repositories.application_repository import SwipeRepository
from jobmatch.repositories.job_repository import JobRepository


# Minimum horizontal drag distance that counts as a decision
DRAG_THRESHOLD = 100

NO_MORE_JOBS_MESSAGE = (
    "No more jobs to show. You've seen all available job listings. "
    "Check back later for new opportunities!"
)

RIGHT_SWIPE_NOTIFICATION = {
    "title": "Application submitted!",
    "description": "Your profile has been sent to the company.",
}


def classify_drag(offset_x: float, threshold: float = DRAG_THRESHOLD) -> Optional[str]:
    """Map a released drag to "right", "left" or None (snap back)"""
    if offset_x > threshold:
        return "right"
    if offset_x < -threshold:
        return "left"
    return None


class SwipeGuard:
    """
    Single-flight guard: at most one outstanding swipe per user.

    Shared by all requests, so it is created once with the application.
    """

    def __init__(self):
        self._in_flight: Set[UUID] = set()
        self._lock = threading.Lock()

    def acquire(self, user_id: UUID) -> bool:
        with self._lock:
            if user_id in self._in_flight:
                return False
            self._in_flight.add(user_id)
            return True

    def release(self, user_id: UUID) -> None:
        with self._lock:
            self._in_flight.discard(user_id)

    def is_in_flight(self, user_id: UUID) -> bool:
        with self._lock:
            return user_id in self._in_flight

    @contextmanager
    def hold(self, user_id: UUID):
        if not self.acquire(user_id):
            raise SwipeInFlightError()
        try:
            yield
        finally:
            self.release(user_id)


@dataclass
class SwipeOutcome:
    swipe: Swipe
    application: Optional[Application] = None
    notification: Optional[Dict[str, str]] = None


class MatchingService:
    """Builds the candidate deck and records swipes"""

    def __init__(self, db: Session, guard: SwipeGuard):
        self.db = db
        self.guard = guard
        self.jobs = JobRepository(db)
        self.swipes = SwipeRepository(db)

    def get_candidates(self, user_id: UUID) -> List[JobListing]:
        """
        Active listings the user has not swiped yet, newest first.

        Recomputed in full on every call.
        """
        swiped_ids = self.swipes.get_swiped_job_ids(user_id)
        return self.jobs.get_active(exclude_ids=swiped_ids)

    def swipe(self, user_id: UUID, job_id: UUID, direction: str) -> SwipeOutcome:
        """
        Record a decision on a listing.

        A right swipe writes the swipe and a pending application in one
        transaction. Raises SwipeInFlightError when another swipe of the same
        user is still being recorded (nothing is written in that case).
        """
        if direction not in SWIPE_DIRECTIONS:
            raise JobMatchError(f"Invalid swipe direction: {direction}")

        with self.guard.hold(user_id):
            job = self.jobs.get_by_id(job_id)
            if job is None or not job.is_active:
                raise NotFoundError("Job not found")

            swipe = Swipe(user_id=user_id, job_id=job_id, direction=direction)
            application = None
            if direction == "right":
                application = Application(user_id=user_id, job_id=job_id, status="pending")

            try:
                self.swipes.create_with_application(swipe, application)
            except IntegrityError:
                logger.warning(f"Duplicate swipe by {user_id} on job {job_id}")
                raise DuplicateSwipeError()
            except SQLAlchemyError as e:
                logger.error(f"Error recording swipe by {user_id} on job {job_id}: {e}")
                raise

        logger.info(f"User {user_id} swiped {direction} on job {job_id}")
        if application is not None:
            self.db.refresh(application)
            return SwipeOutcome(swipe=swipe, application=application, notification=RIGHT_SWIPE_NOTIFICATION)
        return SwipeOutcome(swipe=swipe)
