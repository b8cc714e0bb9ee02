"""
Navigation API Route
"""
from fastapi import APIRouter, Depends

from jobmatch.dependencies import get_session_context
from jobmatch.schemas.navigation import NavigationResponse
from jobmatch.services.navigation import build_navigation
from jobmatch.services.session_context import SessionContext

router = APIRouter()


@router.get("", response_model=NavigationResponse)
def get_navigation(ctx: SessionContext = Depends(get_session_context)):
    """Links for the navbar, depending on sign-in and company-admin state"""
    return build_navigation(ctx)
