"""
Dependency Injection
"""
from typing import Generator, Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from jobmatch.core.database import get_db
from jobmatch.core.exceptions import HomeRedirect, LoginRequired
from jobmatch.models.company import Company
from jobmatch.models.profile import Profile
from jobmatch.models.user import AuthUser
from jobmatch.services.admin_service import AdminService
from jobmatch.services.auth_service import AuthEvents
from jobmatch.services.company_service import CompanyService
from jobmatch.services.matching_service import SwipeGuard
from jobmatch.services.session_context import SessionContext


# Security (a missing token means "no session", not an error)
security = HTTPBearer(auto_error=False)


def get_auth_events(request: Request) -> AuthEvents:
    """Application-wide auth event registry created in the lifespan"""
    return request.app.state.auth_events


def get_swipe_guard(request: Request) -> SwipeGuard:
    """Application-wide single-flight guard created in the lifespan"""
    return request.app.state.swipe_guard


def get_session_context(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
    events: AuthEvents = Depends(get_auth_events),
) -> Generator[SessionContext, None, None]:
    """Open a session context for the request and close it afterwards"""
    ctx = SessionContext(db, events)
    try:
        yield ctx.open(credentials.credentials if credentials else None)
    finally:
        ctx.close()


def require_user(ctx: SessionContext = Depends(get_session_context)) -> AuthUser:
    """Signed-in user, otherwise redirect to login"""
    if ctx.user is None:
        raise LoginRequired()
    return ctx.user


def require_profile(
    ctx: SessionContext = Depends(get_session_context),
    user: AuthUser = Depends(require_user),
) -> Profile:
    """Signed-in user's profile; an unresolved profile also redirects to login"""
    if ctx.profile is None:
        raise LoginRequired()
    return ctx.profile


def require_platform_admin(
    user: AuthUser = Depends(require_user),
    db: Session = Depends(get_db),
) -> AuthUser:
    """Admin pages: users without an admin row go home before anything is fetched"""
    if not AdminService(db).is_admin(user.id):
        raise HomeRedirect()
    return user


def require_company(
    user: AuthUser = Depends(require_user),
    db: Session = Depends(get_db),
) -> Company:
    """Company dashboard: the company this user administers, otherwise go home"""
    company = CompanyService(db).get_company_for_admin(user.id)
    if company is None:
        raise HomeRedirect()
    return company
