"""
Authentication API Routes
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from jobmatch.core.config import settings
from jobmatch.dependencies import get_session_context
from jobmatch.schemas.profile import ProfileResponse
from jobmatch.schemas.user import RegisterRequest, LoginRequest, TokenResponse, LogoutResponse, UserResponse
from jobmatch.services.session_context import SessionContext

router = APIRouter()


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(
    request: RegisterRequest,
    ctx: SessionContext = Depends(get_session_context)
):
    """
    Sign up and start a session.

    Failures (e.g. "User already registered") come back verbatim as 400.
    """
    user, token = ctx.sign_up(request.email, request.password, request.full_name)
    return TokenResponse(access_token=token, user=UserResponse.model_validate(user))


@router.post("/login", response_model=TokenResponse)
def login(
    request: LoginRequest,
    ctx: SessionContext = Depends(get_session_context)
):
    """Sign in with email and password"""
    user, token = ctx.sign_in(request.email, request.password)
    return TokenResponse(access_token=token, user=UserResponse.model_validate(user))


@router.post("/logout", response_model=LogoutResponse)
def logout(ctx: SessionContext = Depends(get_session_context)):
    """Sign out and send the client home"""
    ctx.sign_out()
    return LogoutResponse(redirect=settings.HOME_ROUTE)


@router.get("/session")
def get_session(ctx: SessionContext = Depends(get_session_context)) -> Dict[str, Any]:
    """Who is signed in, their profile and whether they administer a company"""
    return {
        "user": UserResponse.model_validate(ctx.user) if ctx.user else None,
        "profile": ProfileResponse.model_validate(ctx.profile) if ctx.profile else None,
        "is_company_admin": ctx.is_company_admin,
    }
