"""
Job Repository - job listing data access
"""
from sqlalchemy.orm import Session, joinedload
from typing import List, Optional, Iterable
from uuid import UUID

from jobmatch.models.job import JobListing


class JobRepository:
    """Job listing data access layer"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, job: JobListing) -> JobListing:
        """Create job listing"""
        self.db.add(job)
        self.db.commit()
        self.db.refresh(job)
        return job

    def get_by_id(self, job_id: UUID) -> Optional[JobListing]:
        """Get job listing by ID"""
        return self.db.query(JobListing).filter(JobListing.id == job_id).first()

    def get_active(self, exclude_ids: Optional[Iterable[UUID]] = None) -> List[JobListing]:
        """
        Active listings with company, newest first.

        Args:
            exclude_ids: listing ids to leave out (e.g. already swiped)
        """
        query = self.db.query(JobListing).options(
            joinedload(JobListing.company)
        ).filter(JobListing.is_active == True)  # noqa: E712

        exclude_ids = list(exclude_ids or [])
        if exclude_ids:
            query = query.filter(JobListing.id.notin_(exclude_ids))

        return query.order_by(JobListing.created_at.desc()).all()

    def get_active_by_company(self, company_id: UUID) -> List[JobListing]:
        """Active listings of one company, newest first"""
        return self.db.query(JobListing).filter(
            JobListing.company_id == company_id,
            JobListing.is_active == True  # noqa: E712
        ).order_by(
            JobListing.created_at.desc()
        ).all()

    def get_by_company(self, company_id: UUID) -> List[JobListing]:
        """All listings of one company including inactive, newest first"""
        return self.db.query(JobListing).filter(
            JobListing.company_id == company_id
        ).order_by(
            JobListing.created_at.desc()
        ).all()

    def update(self, job: JobListing) -> JobListing:
        """Update job listing"""
        self.db.commit()
        self.db.refresh(job)
        return job
