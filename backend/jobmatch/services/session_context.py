"""
Session Context

Who is signed in and what they can do. One context is opened per request
(resolve session, hydrate profile, compute the company-admin flag) and
closed when the request ends (unsubscribe from auth-state changes).
"""
from typing import Any, Optional, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobmatch.core.logging import logger
from jobmatch.models.profile import Profile
from jobmatch.models.user import AuthUser
from jobmatch.repositories.company_repository import CompanyRepository
from jobmatch.services.auth_service import AuthEvent, AuthEvents, AuthService
from jobmatch.services.profile_service import ProfileService


class SessionContext:
    """Signed-in user, their profile and the derived company-admin flag"""

    def __init__(self, db: Session, events: AuthEvents):
        self.db = db
        self.events = events
        self.token: Optional[str] = None
        self.user: Optional[AuthUser] = None
        self.profile: Optional[Profile] = None
        self.is_company_admin = False
        self._unsubscribe = None

    @property
    def auth(self) -> AuthService:
        """Auth calls made through the context are tagged with it as origin"""
        return AuthService(self.db, self.events, origin=self)

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def open(self, token: Optional[str] = None) -> "SessionContext":
        self._unsubscribe = self.events.subscribe(self._on_auth_event)
        self.token = token
        user = self.auth.get_user_for_token(token) if token else None
        self._resolve(user)
        return self

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def sign_up(self, email: str, password: str, full_name: Optional[str] = None) -> Tuple[AuthUser, str]:
        user, token = self.auth.sign_up(email, password, full_name)
        self.token = token
        return user, token

    def sign_in(self, email: str, password: str) -> Tuple[AuthUser, str]:
        user, token = self.auth.sign_in(email, password)
        self.token = token
        return user, token

    def sign_out(self) -> None:
        if self.token is None:
            self._clear()
            return
        self.auth.sign_out(self.token)
        self.token = None

    def _on_auth_event(self, event: AuthEvent, user: Optional[AuthUser], origin: Any) -> None:
        if event is AuthEvent.SIGNED_OUT:
            # any sign-out of this user ends this context's session too
            if origin is self or (user is not None and self.user is not None and user.id == self.user.id):
                self._clear()
        elif origin is self:
            self._resolve(user)

    def _clear(self) -> None:
        self.user = None
        self.profile = None
        self.is_company_admin = False

    def _resolve(self, user: Optional[AuthUser]) -> None:
        self._clear()
        self.user = user
        if user is None:
            return

        try:
            self.profile = ProfileService(self.db).ensure_profile(user)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error fetching/creating profile for {user.id}: {e}")
            self.profile = None

        try:
            self.is_company_admin = CompanyRepository(self.db).is_company_admin(user.id)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error checking company admin for {user.id}: {e}")
            self.is_company_admin = False
