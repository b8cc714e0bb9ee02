"""
Admin Dashboard API Routes

Every route depends on ``require_platform_admin``: users without an admin
row are redirected home before any data is read.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobmatch.core.database import get_db
from jobmatch.core.logging import logger
from jobmatch.dependencies import require_platform_admin
from jobmatch.models.user import AuthUser
from jobmatch.schemas.admin import (
    AdminDashboardResponse,
    AdminUserCreate,
    AdminUserResponse,
    AdminWithUser,
    CompanyAccountCreate,
    CompanyAccountResponse,
    CompanyWithAdmin,
)
from jobmatch.services.admin_service import AdminService
from jobmatch.services.provisioning_service import ProvisioningService

router = APIRouter()


@router.get("", response_model=AdminDashboardResponse)
def get_dashboard(
    admin: AuthUser = Depends(require_platform_admin),
    db: Session = Depends(get_db)
):
    """Manage company accounts and system access"""
    try:
        companies, admins = AdminService(db).get_dashboard()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching admin dashboard: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Error fetching admin data: {e}"
        )
    return AdminDashboardResponse(
        companies=[CompanyWithAdmin.model_validate(c) for c in companies],
        admins=[AdminWithUser.model_validate(a) for a in admins],
    )


@router.post("/companies", response_model=CompanyAccountResponse, status_code=status.HTTP_201_CREATED)
def create_company_account(
    request: CompanyAccountCreate,
    admin: AuthUser = Depends(require_platform_admin),
    db: Session = Depends(get_db)
):
    """Create credentials for a new company to access their dashboard"""
    company = ProvisioningService(db).create_company_account(
        request.email, request.password, request.company_name
    )
    return CompanyAccountResponse(company_id=company.id, admin_id=company.admin_id)


@router.post("/admins", response_model=AdminUserResponse, status_code=status.HTTP_201_CREATED)
def create_admin_user(
    request: AdminUserCreate,
    admin: AuthUser = Depends(require_platform_admin),
    db: Session = Depends(get_db)
):
    """Add a new administrator to the system"""
    try:
        created = ProvisioningService(db).create_admin_user(request.email, request.full_name)
    except SQLAlchemyError as e:
        logger.error(f"Error creating admin user {request.email}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to create admin user: {e}"
        )
    return AdminUserResponse(admin_id=created.id, user_id=created.user_id)
