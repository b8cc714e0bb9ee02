"""
Authentication Service

Identity lifecycle (sign up / sign in / sign out) plus the auth-state
change notifications that session contexts subscribe to.
"""
import threading
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, List, Optional, Tuple
from uuid import UUID

from sqlalchemy.orm import Session

from jobmatch.core.exceptions import AuthError
from jobmatch.core.logging import logger
from jobmatch.core.security import hash_password, verify_password, create_access_token, decode_token
from jobmatch.models.user import AuthUser
from jobmatch.repositories.user_repository import UserRepository


class AuthEvent(str, Enum):
    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"


# listener(event, user, origin) - origin is whatever object triggered the change
AuthListener = Callable[[AuthEvent, Optional[AuthUser], Any], None]


class AuthEvents:
    """Application-wide auth-state change subscriptions"""

    def __init__(self):
        self._listeners: List[AuthListener] = []
        self._lock = threading.Lock()

    def subscribe(self, listener: AuthListener) -> Callable[[], None]:
        """Register a listener and return the matching unsubscribe callable"""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def emit(self, event: AuthEvent, user: Optional[AuthUser], origin: Any = None) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(event, user, origin)
            except Exception:
                # a broken subscriber must not fail the sign-in/out itself
                logger.exception(f"Auth listener failed on {event.value}")

    @property
    def listener_count(self) -> int:
        with self._lock:
            return len(self._listeners)


class AuthService:
    """Authentication service for user management"""

    def __init__(self, db: Session, events: Optional[AuthEvents] = None, origin: Any = None):
        self.db = db
        self.users = UserRepository(db)
        self.events = events
        self.origin = origin

    def _emit(self, event: AuthEvent, user: Optional[AuthUser]) -> None:
        if self.events is not None:
            self.events.emit(event, user, self.origin)

    def create_identity(self, email: str, password: str, full_name: Optional[str] = None) -> AuthUser:
        """Create an auth identity without starting a session"""
        if self.users.get_by_email(email):
            raise AuthError("User already registered")

        metadata = {"full_name": full_name} if full_name else {}
        user = AuthUser(
            email=email.lower(),
            password_hash=hash_password(password),
            user_metadata=metadata,
        )
        return self.users.create(user)

    def sign_up(self, email: str, password: str, full_name: Optional[str] = None) -> Tuple[AuthUser, str]:
        """Register and sign in. Returns the user and an access token."""
        user = self.create_identity(email, password, full_name)
        logger.info(f"Registered user {user.id}")
        token = create_access_token(str(user.id))
        self._emit(AuthEvent.SIGNED_IN, user)
        return user, token

    def sign_in(self, email: str, password: str) -> Tuple[AuthUser, str]:
        """Verify credentials. Returns the user and an access token."""
        user = self.users.get_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            raise AuthError("Invalid login credentials")
        if not user.is_active:
            raise AuthError("User is banned")

        user.last_sign_in_at = datetime.now(timezone.utc)
        self.users.update(user)
        token = create_access_token(str(user.id))
        self._emit(AuthEvent.SIGNED_IN, user)
        return user, token

    def sign_out(self, token: str) -> None:
        """Revoke the token and notify subscribers"""
        payload = decode_token(token)
        if not payload or not payload.get("jti"):
            raise AuthError("Invalid session")

        user = self.users.get_by_id(UUID(payload["sub"]))
        self.users.revoke_token(payload["jti"], UUID(payload["sub"]))
        self._emit(AuthEvent.SIGNED_OUT, user)

    def get_user_for_token(self, token: str) -> Optional[AuthUser]:
        """Resolve the session behind a token; None when there is none"""
        payload = decode_token(token)
        if not payload:
            return None

        user_id = payload.get("sub")
        jti = payload.get("jti")
        if not user_id or not jti or self.users.is_token_revoked(jti):
            return None

        try:
            user = self.users.get_by_id(UUID(user_id))
        except ValueError:
            return None
        if user is None or not user.is_active:
            return None
        return user
