"""
Provisioning Service - platform admin creates company accounts and admins

Company accounts are written in three dependent steps (auth identity,
company row, admin profile), each committed on its own. When
``PROVISIONING_COMPENSATE`` is on, a failure undoes the completed steps in
reverse order; when off, the completed steps are left in place and the
orphaned identity is logged.
"""
import secrets
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobmatch.core.cache import invalidate_companies
from jobmatch.core.config import settings
from jobmatch.core.exceptions import ConflictError, ProvisioningError
from jobmatch.core.logging import logger
from jobmatch.core.security import hash_password
from jobmatch.models.admin import Admin
from jobmatch.models.company import Company
from jobmatch.models.profile import Profile
from jobmatch.models.user import AuthUser
from jobmatch.repositories.admin_repository import AdminRepository
from jobmatch.repositories.company_repository import CompanyRepository
from jobmatch.repositories.profile_repository import ProfileRepository
from jobmatch.repositories.user_repository import UserRepository
from jobmatch.services.auth_service import AuthService
from jobmatch.services.profile_service import generate_anonymous_name


class ProvisioningService:
    """Company account and admin creation"""

    def __init__(self, db: Session, compensate: Optional[bool] = None):
        self.db = db
        self.compensate = settings.PROVISIONING_COMPENSATE if compensate is None else compensate
        self.users = UserRepository(db)
        self.companies = CompanyRepository(db)
        self.profiles = ProfileRepository(db)
        self.admins = AdminRepository(db)

    def create_company_account(self, email: str, password: str, company_name: str) -> Company:
        """
        Create identity -> company -> admin profile.

        Raises:
            AuthError: the email is already registered (nothing written)
            ProvisioningError: a later step failed
        """
        completed: List[Tuple[str, UUID]] = []
        step = "auth_user"
        try:
            user = AuthService(self.db).create_identity(email, password)
            completed.append(("auth_user", user.id))

            step = "company"
            company = self.companies.create(Company(name=company_name, admin_id=user.id))
            completed.append(("company", company.id))
            invalidate_companies()

            step = "profile"
            self.profiles.create(Profile(
                id=user.id,
                email=user.email,
                full_name=f"{company_name} Admin",
                anonymous_name=generate_anonymous_name(),
                is_actively_looking=True,
            ))
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Company provisioning for {email} failed at step '{step}': {e}")
            compensated = False
            if self.compensate:
                compensated = self._undo(completed)
            elif completed:
                logger.warning(
                    f"Provisioning left completed steps in place for {email}: "
                    f"{', '.join(name for name, _ in completed)}"
                )
            raise ProvisioningError(
                f"Failed to create company account: {getattr(e, 'orig', None) or e}",
                step=step,
                compensated=compensated,
                original_error=e,
            )

        logger.info(f"Provisioned company {company.id} with admin {user.id}")
        return company

    def _undo(self, completed: List[Tuple[str, UUID]]) -> bool:
        """Delete completed steps newest first. Returns False if any undo failed."""
        for name, row_id in reversed(completed):
            try:
                if name == "company":
                    self.companies.delete(row_id)
                    invalidate_companies()
                elif name == "auth_user":
                    self.users.delete(row_id)
                logger.info(f"Compensated provisioning step '{name}' ({row_id})")
            except SQLAlchemyError as e:
                self.db.rollback()
                logger.error(f"Could not undo provisioning step '{name}' ({row_id}): {e}")
                return False
        return True

    def create_admin_user(self, email: str, full_name: str) -> Admin:
        """
        Grant platform admin rights, creating the identity and profile if needed.

        Runs as a single transaction: either everything is written or nothing.
        """
        try:
            user = self.users.get_by_email(email)
            if user is None:
                user = AuthUser(
                    email=email.lower(),
                    # no usable password until the admin resets it
                    password_hash=hash_password(secrets.token_urlsafe(32)),
                    user_metadata={"full_name": full_name},
                )
                self.db.add(user)
                self.db.flush()

            if self.admins.get_by_user(user.id) is not None:
                raise ConflictError("User is already an admin")

            if self.profiles.get_by_id(user.id) is None:
                self.db.add(Profile(
                    id=user.id,
                    email=user.email,
                    full_name=full_name,
                    anonymous_name=generate_anonymous_name(),
                    is_actively_looking=True,
                ))

            admin = Admin(user_id=user.id)
            self.db.add(admin)
            self.db.commit()
        except (SQLAlchemyError, ConflictError):
            self.db.rollback()
            raise

        self.db.refresh(admin)
        logger.info(f"Created admin {admin.id} for user {user.id}")
        return admin
