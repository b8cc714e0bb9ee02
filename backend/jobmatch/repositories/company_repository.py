"""
Company Repository
"""
from sqlalchemy.orm import Session, joinedload
from typing import List, Optional, Dict, Any
from uuid import UUID

from jobmatch.models.company import Company


class CompanyRepository:
    """Company data access layer"""

    def __init__(self, db: Session):
        self.db = db

    def create(self, company: Company) -> Company:
        """Create company"""
        self.db.add(company)
        self.db.commit()
        self.db.refresh(company)
        return company

    def get_by_id(self, company_id: UUID) -> Optional[Company]:
        """Get company by ID"""
        return self.db.query(Company).filter(Company.id == company_id).first()

    def get_by_admin(self, admin_id: UUID) -> Optional[Company]:
        """Get the company administered by this user"""
        return self.db.query(Company).filter(Company.admin_id == admin_id).first()

    def is_company_admin(self, user_id: UUID) -> bool:
        """True when any company references this user as admin"""
        return self.db.query(Company.id).filter(Company.admin_id == user_id).first() is not None

    def get_all(self) -> List[Company]:
        """All companies ordered by name"""
        return self.db.query(Company).order_by(Company.name).all()

    def get_all_with_admin(self) -> List[Company]:
        """All companies with admin profile, newest first"""
        return self.db.query(Company).options(
            joinedload(Company.admin)
        ).order_by(
            Company.created_at.desc()
        ).all()

    def update(self, company: Company, values: Dict[str, Any]) -> Company:
        """Apply values and persist"""
        for key, value in values.items():
            setattr(company, key, value)
        self.db.commit()
        self.db.refresh(company)
        return company

    def delete(self, company_id: UUID) -> bool:
        """Delete company"""
        company = self.get_by_id(company_id)
        if company:
            self.db.delete(company)
            self.db.commit()
            return True
        return False
