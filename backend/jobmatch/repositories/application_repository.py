"""
Application Repository - applications and swipes
"""
from sqlalchemy.orm import Session, joinedload
from typing import List, Optional
from uuid import UUID

from jobmatch.models.application import Application, Swipe
from jobmatch.models.job import JobListing


class ApplicationRepository:
    """Application data access layer"""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, application_id: UUID) -> Optional[Application]:
        return self.db.query(Application).options(
            joinedload(Application.job)
        ).filter(Application.id == application_id).first()

    def get_by_user(
        self,
        user_id: UUID,
        status: Optional[str] = None,
        limit: Optional[int] = None
    ) -> List[Application]:
        """User's applications with job and company, newest first"""
        query = self.db.query(Application).options(
            joinedload(Application.job).joinedload(JobListing.company)
        ).filter(Application.user_id == user_id)

        if status:
            query = query.filter(Application.status == status)

        query = query.order_by(Application.created_at.desc())
        if limit:
            query = query.limit(limit)
        return query.all()

    def get_by_company(self, company_id: UUID) -> List[Application]:
        """Applications to a company's listings with job and applicant, newest first"""
        return self.db.query(Application).join(
            JobListing, Application.job_id == JobListing.id
        ).options(
            joinedload(Application.job),
            joinedload(Application.user),
        ).filter(
            JobListing.company_id == company_id
        ).order_by(
            Application.created_at.desc()
        ).all()

    def update(self, application: Application) -> Application:
        self.db.commit()
        self.db.refresh(application)
        return application


class SwipeRepository:
    """Swipe data access layer"""

    def __init__(self, db: Session):
        self.db = db

    def get_swiped_job_ids(self, user_id: UUID) -> List[UUID]:
        """Ids of every listing the user already decided on"""
        rows = self.db.query(Swipe.job_id).filter(Swipe.user_id == user_id).all()
        return [row.job_id for row in rows]

    def create_with_application(
        self,
        swipe: Swipe,
        application: Optional[Application] = None
    ) -> Swipe:
        """
        Insert the swipe and, for a right swipe, its application in one commit.

        Either both rows are written or neither is: any failure rolls the
        session back and re-raises.
        """
        try:
            self.db.add(swipe)
            if application is not None:
                self.db.add(application)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(swipe)
        return swipe
