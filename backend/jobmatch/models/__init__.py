"""
SQLAlchemy Models
"""
from jobmatch.models.user import AuthUser, RevokedToken
from jobmatch.models.profile import Profile
from jobmatch.models.company import Company
from jobmatch.models.job import JobListing
from jobmatch.models.application import Application, Swipe, APPLICATION_STATUSES, SWIPE_DIRECTIONS
from jobmatch.models.discussion import Thread, Comment
from jobmatch.models.admin import Admin

__all__ = [
    "AuthUser",
    "RevokedToken",
    "Profile",
    "Company",
    "JobListing",
    "Application",
    "Swipe",
    "Thread",
    "Comment",
    "Admin",
    "APPLICATION_STATUSES",
    "SWIPE_DIRECTIONS",
]
