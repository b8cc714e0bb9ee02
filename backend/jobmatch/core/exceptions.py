"""Application exceptions, translated to HTTP responses in ``jobmatch.main``."""

from typing import Optional

from jobmatch.core.config import settings


class JobMatchError(Exception):
    """
    Base class for errors surfaced to the user as a notification.

    Attributes:
        message: Text shown to the user (backend message when there is one)
        title: Notification title
        status_code: HTTP status used when the error leaves an API route
    """

    status_code = 400

    def __init__(self, message: str, title: str = "Error"):
        self.message = message
        self.title = title
        super().__init__(message)


class AuthError(JobMatchError):
    """Bad credentials, duplicate email. Message is surfaced verbatim."""

    status_code = 400


class NotFoundError(JobMatchError):
    status_code = 404


class ConflictError(JobMatchError):
    status_code = 409


class SwipeInFlightError(ConflictError):
    """A swipe for this user is already being recorded."""

    def __init__(self, message: str = "A swipe is already being processed. Please wait."):
        super().__init__(message)


class DuplicateSwipeError(ConflictError):
    """The user already recorded a decision for this listing."""

    def __init__(self, message: str = "You have already responded to this job."):
        super().__init__(message)


class InvalidStatusTransitionError(JobMatchError):
    status_code = 400


class SwipeFailedError(JobMatchError):
    """The swipe could not be written; carries the backend message."""

    status_code = 500

    def __init__(self, backend_message: str):
        super().__init__(f"Failed to process your action. Please try again. ({backend_message})")


class ProvisioningError(JobMatchError):
    """
    Multi-step company provisioning failed part way.

    Attributes:
        step: Name of the step that failed ("auth_user", "company", "profile")
        compensated: True when the already-completed steps were undone
        original_error: The exception raised by the failing step
    """

    status_code = 500

    def __init__(
        self,
        message: str,
        step: str,
        compensated: bool,
        original_error: Optional[Exception] = None,
    ):
        self.step = step
        self.compensated = compensated
        self.original_error = original_error
        super().__init__(message)


class RedirectRequired(Exception):
    """Authorization failure answered with a silent redirect, not an error."""

    location = "/"

    def __init__(self, location: Optional[str] = None):
        if location is not None:
            self.location = location
        super().__init__(self.location)


class LoginRequired(RedirectRequired):
    def __init__(self):
        super().__init__(settings.LOGIN_ROUTE)


class HomeRedirect(RedirectRequired):
    def __init__(self):
        super().__init__(settings.HOME_ROUTE)
