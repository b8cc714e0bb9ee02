"""
FastAPI Application Entry Point
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from contextlib import asynccontextmanager

from jobmatch.core.config import settings
from jobmatch.core.exceptions import JobMatchError, RedirectRequired
from jobmatch.core.logging import logger
from jobmatch.services.auth_service import AuthEvents
from jobmatch.services.matching_service import SwipeGuard
from jobmatch.api.v1 import (
    admin,
    applications,
    auth,
    companies,
    company_dashboard,
    discussions,
    jobs,
    navigation,
    profile,
)


def _log_auth_event(event, user, origin) -> None:
    logger.info(f"Auth event {event.value} for {user.email if user else 'anonymous'}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    # Startup
    logger.info(f"Starting {settings.APP_NAME} backend...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(f"Debug Mode: {settings.DEBUG}")

    app.state.auth_events = AuthEvents()
    app.state.swipe_guard = SwipeGuard()
    unsubscribe = app.state.auth_events.subscribe(_log_auth_event)

    yield

    # Shutdown
    unsubscribe()
    logger.info(f"Shutting down {settings.APP_NAME} backend...")


# Create FastAPI app
app = FastAPI(
    title=f"{settings.APP_NAME} API",
    description="Anonymous job matching: swipe on jobs, apply, discuss",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(JobMatchError)
async def jobmatch_error_handler(request: Request, exc: JobMatchError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"title": exc.title, "detail": exc.message},
    )


@app.exception_handler(RedirectRequired)
async def redirect_handler(request: Request, exc: RedirectRequired):
    return RedirectResponse(url=exc.location, status_code=303)


app.include_router(auth.router, prefix="/api/v1/auth", tags=["Auth"])
app.include_router(navigation.router, prefix="/api/v1/navigation", tags=["Navigation"])
app.include_router(profile.router, prefix="/api/v1/profile", tags=["Profile"])
app.include_router(jobs.router, prefix="/api/v1/jobs", tags=["Jobs"])
app.include_router(companies.router, prefix="/api/v1/companies", tags=["Companies"])
app.include_router(applications.router, prefix="/api/v1/applications", tags=["Applications"])
app.include_router(company_dashboard.router, prefix="/api/v1/company", tags=["Company Dashboard"])
app.include_router(discussions.router, prefix="/api/v1/discussions", tags=["Discussions"])
app.include_router(admin.router, prefix="/api/v1/admin", tags=["Admin"])


@app.get("/", tags=["Root"])
async def root():
    """Home"""
    return {
        "message": "Find your next opportunity, anonymously",
        "version": "0.1.0",
        "links": {
            "jobs": "/api/v1/jobs",
            "companies": "/api/v1/companies",
            "discussions": "/api/v1/discussions",
        },
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "environment": settings.ENVIRONMENT,
    }
