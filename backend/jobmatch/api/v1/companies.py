"""
Company API Routes
"""
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobmatch.core.database import get_db
from jobmatch.core.logging import logger
from jobmatch.schemas.job import CompanyListResponse, CompanyDetailResponse, CompanyResponse, JobListingResponse
from jobmatch.services.company_service import CompanyService

router = APIRouter()


@router.get("", response_model=CompanyListResponse)
def list_companies(
    search: Optional[str] = None,
    industry: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """
    Company directory ordered by name.

    ``industries`` is always taken from the full list so filters stay
    available while a search is active.
    """
    try:
        companies, industries = CompanyService(db).list_companies(search, industry)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching companies: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error fetching companies: {e}"
        )
    return CompanyListResponse(items=companies, industries=industries, total=len(companies))


@router.get("/{company_id}", response_model=CompanyDetailResponse)
def get_company(company_id: UUID, db: Session = Depends(get_db)):
    """Company page with its open positions"""
    try:
        company, jobs = CompanyService(db).get_company_detail(company_id)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching company {company_id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error fetching company: {e}"
        )
    return CompanyDetailResponse(
        company=CompanyResponse.model_validate(company),
        jobs=[JobListingResponse.model_validate(job) for job in jobs],
    )
