"""
Company Service - directory, detail page and company dashboard
"""
from typing import Any, Dict, List, Optional, Tuple
from uuid import UUID

from sqlalchemy.orm import Session

from jobmatch.core.cache import get_cache, set_cache, invalidate_companies, COMPANIES_CACHE_KEY
from jobmatch.core.exceptions import NotFoundError
from jobmatch.core.logging import logger
from jobmatch.models.application import Application
from jobmatch.models.company import Company
from jobmatch.models.job import JobListing
from jobmatch.repositories.application_repository import ApplicationRepository
from jobmatch.repositories.company_repository import CompanyRepository
from jobmatch.repositories.job_repository import JobRepository
from jobmatch.schemas.job import CompanyResponse, CompanyUpdate, JobListingCreate
from jobmatch.services.application_service import ApplicationService
from jobmatch.utils.validators import contains_text


def extract_industries(companies: List[Dict[str, Any]]) -> List[str]:
    """Unique non-empty industries in first-seen order"""
    industries: List[str] = []
    for company in companies:
        industry = company.get("industry")
        if industry and industry not in industries:
            industries.append(industry)
    return industries


def filter_companies(
    companies: List[Dict[str, Any]],
    search: Optional[str] = None,
    industry: Optional[str] = None
) -> List[Dict[str, Any]]:
    """Search name/description/industry, then narrow to one industry"""
    filtered = companies
    if search:
        filtered = [
            c for c in filtered
            if contains_text(search, c.get("name"), c.get("description"), c.get("industry"))
        ]
    if industry:
        filtered = [c for c in filtered if c.get("industry") == industry]
    return filtered


class CompanyService:
    """Company service"""

    def __init__(self, db: Session):
        self.db = db
        self.companies = CompanyRepository(db)
        self.jobs = JobRepository(db)

    def get_directory(self) -> List[Dict[str, Any]]:
        """All companies ordered by name, served from cache when present"""
        cached = get_cache(COMPANIES_CACHE_KEY)
        if cached is not None:
            return cached

        companies = [
            CompanyResponse.model_validate(c).model_dump(mode="json")
            for c in self.companies.get_all()
        ]
        set_cache(COMPANIES_CACHE_KEY, companies)
        return companies

    def list_companies(
        self,
        search: Optional[str] = None,
        industry: Optional[str] = None
    ) -> Tuple[List[Dict[str, Any]], List[str]]:
        companies = self.get_directory()
        return filter_companies(companies, search, industry), extract_industries(companies)

    def get_company_detail(self, company_id: UUID) -> Tuple[Company, List[JobListing]]:
        company = self.companies.get_by_id(company_id)
        if company is None:
            raise NotFoundError("Company not found")
        return company, self.jobs.get_active_by_company(company_id)

    def get_company_for_admin(self, user_id: UUID) -> Optional[Company]:
        return self.companies.get_by_admin(user_id)

    def update_company(self, company: Company, request: CompanyUpdate) -> Company:
        company = self.companies.update(company, request.model_dump(exclude_unset=True))
        invalidate_companies()
        logger.info(f"Company {company.id} details updated")
        return company

    def post_job(self, company: Company, request: JobListingCreate) -> JobListing:
        job = self.jobs.create(JobListing(company_id=company.id, is_active=True, **request.model_dump()))
        logger.info(f"Company {company.id} posted job {job.id}")
        return job

    def set_job_active(self, company: Company, job_id: UUID, is_active: bool) -> JobListing:
        job = self.jobs.get_by_id(job_id)
        if job is None or job.company_id != company.id:
            raise NotFoundError("Job not found")
        job.is_active = is_active
        return self.jobs.update(job)

    def get_applications(self, company: Company) -> List[Application]:
        return ApplicationRepository(self.db).get_by_company(company.id)

    def review_application(
        self,
        company: Company,
        application_id: UUID,
        status: str,
        notes: Optional[str] = None
    ) -> Application:
        application = ApplicationRepository(self.db).get_by_id(application_id)
        if application is None or application.job.company_id != company.id:
            raise NotFoundError("Application not found")
        return ApplicationService(self.db).transition(application, status, notes)
