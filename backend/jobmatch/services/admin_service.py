"""
Admin Service
"""
from typing import List, Tuple
from uuid import UUID

from sqlalchemy.orm import Session

from jobmatch.models.admin import Admin
from jobmatch.models.company import Company
from jobmatch.repositories.admin_repository import AdminRepository
from jobmatch.repositories.company_repository import CompanyRepository


class AdminService:
    """Platform admin checks and dashboard data"""

    def __init__(self, db: Session):
        self.db = db
        self.admins = AdminRepository(db)

    def is_admin(self, user_id: UUID) -> bool:
        return self.admins.get_by_user(user_id) is not None

    def get_dashboard(self) -> Tuple[List[Company], List[Admin]]:
        """Companies with their admin and all admins, newest first"""
        return CompanyRepository(self.db).get_all_with_admin(), self.admins.get_all()
