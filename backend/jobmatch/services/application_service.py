"""
Application Service
"""
from typing import Dict, FrozenSet, List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from jobmatch.core.exceptions import InvalidStatusTransitionError, JobMatchError
from jobmatch.core.logging import logger
from jobmatch.models.application import Application, APPLICATION_STATUSES
from jobmatch.repositories.application_repository import ApplicationRepository


# Review flow; accepted and rejected are final
ALLOWED_TRANSITIONS: Dict[str, FrozenSet[str]] = {
    "pending": frozenset({"interview", "accepted", "rejected"}),
    "interview": frozenset({"accepted", "rejected"}),
    "accepted": frozenset(),
    "rejected": frozenset(),
}


def can_transition(current: str, new: str) -> bool:
    return new in ALLOWED_TRANSITIONS.get(current, frozenset())


class ApplicationService:
    """Application listing and review"""

    def __init__(self, db: Session):
        self.db = db
        self.applications = ApplicationRepository(db)

    def list_for_user(self, user_id: UUID, status: Optional[str] = None) -> List[Application]:
        """User's applications, optionally narrowed to one status ("all" = no filter)"""
        if status in (None, "", "all"):
            status = None
        elif status not in APPLICATION_STATUSES:
            raise JobMatchError(f"Unknown application status: {status}")
        return self.applications.get_by_user(user_id, status=status)

    def transition(self, application: Application, new_status: str, notes: Optional[str] = None) -> Application:
        """Move an application along the review flow"""
        if not can_transition(application.status, new_status):
            raise InvalidStatusTransitionError(
                f"Cannot change application status from {application.status} to {new_status}"
            )
        previous = application.status
        application.status = new_status
        if notes is not None:
            application.notes = notes
        application = self.applications.update(application)
        logger.info(f"Application {application.id}: {previous} -> {new_status}")
        return application
