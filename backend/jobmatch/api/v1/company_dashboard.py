"""
Company Dashboard API Routes

Only for the user referenced as a company's admin; everyone else is sent
home.
"""
from typing import Any, Dict
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobmatch.core.database import get_db
from jobmatch.core.logging import logger
from jobmatch.dependencies import require_company
from jobmatch.models.company import Company
from jobmatch.schemas.application import ApplicationStatusUpdate, CompanyApplication
from jobmatch.schemas.job import CompanyResponse, CompanyUpdate, JobListingCreate, JobListingResponse, JobListingStatusUpdate
from jobmatch.services.company_service import CompanyService

router = APIRouter()


def _backend_error(action: str, e: SQLAlchemyError) -> HTTPException:
    logger.error(f"Company dashboard: failed to {action}: {e}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}: {e}"
    )


@router.get("/dashboard")
def get_dashboard(
    company: Company = Depends(require_company),
    db: Session = Depends(get_db)
) -> Dict[str, Any]:
    """Company details, its listings and the applications received"""
    service = CompanyService(db)
    try:
        applications = service.get_applications(company)
        jobs = service.jobs.get_by_company(company.id)
    except SQLAlchemyError as e:
        raise _backend_error("fetch applications", e)

    return {
        "company": CompanyResponse.model_validate(company),
        "jobs": [JobListingResponse.model_validate(job) for job in jobs],
        "applications": [CompanyApplication.model_validate(a) for a in applications],
    }


@router.put("/dashboard", response_model=CompanyResponse)
def update_company(
    request: CompanyUpdate,
    company: Company = Depends(require_company),
    db: Session = Depends(get_db)
):
    """Update company details"""
    try:
        return CompanyService(db).update_company(company, request)
    except SQLAlchemyError as e:
        db.rollback()
        raise _backend_error("update company details", e)


@router.post("/jobs", response_model=JobListingResponse, status_code=status.HTTP_201_CREATED)
def post_job(
    request: JobListingCreate,
    company: Company = Depends(require_company),
    db: Session = Depends(get_db)
):
    """Post a new job listing"""
    try:
        return CompanyService(db).post_job(company, request)
    except SQLAlchemyError as e:
        db.rollback()
        raise _backend_error("post job", e)


@router.patch("/jobs/{job_id}", response_model=JobListingResponse)
def set_job_status(
    job_id: UUID,
    request: JobListingStatusUpdate,
    company: Company = Depends(require_company),
    db: Session = Depends(get_db)
):
    """Activate or deactivate a listing"""
    try:
        return CompanyService(db).set_job_active(company, job_id, request.is_active)
    except SQLAlchemyError as e:
        db.rollback()
        raise _backend_error("update job", e)


@router.patch("/applications/{application_id}", response_model=CompanyApplication)
def review_application(
    application_id: UUID,
    request: ApplicationStatusUpdate,
    company: Company = Depends(require_company),
    db: Session = Depends(get_db)
):
    """Move an applicant along pending -> interview -> accepted/rejected"""
    try:
        return CompanyService(db).review_application(
            company, application_id, request.status.value, request.notes
        )
    except SQLAlchemyError as e:
        db.rollback()
        raise _backend_error("update application", e)
