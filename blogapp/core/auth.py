"""Request authentication from the encrypted session cookie.

``authenticate_from_session`` is installed as an application-wide dependency,
so every request resolves its identity before the route body runs. Handlers
that need the identity declare ``Depends(authenticate_from_session)`` and get
the same cached ``AuthContext``.
"""
import logging
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Request
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from blogapp.core.config import get_settings
from blogapp.core.security import SessionCodec, get_session_codec, verify_session_token
from blogapp.db.session import get_db
from blogapp.models.user import User
from blogapp.services import store

logger = logging.getLogger(__name__)
settings = get_settings()


@dataclass(frozen=True)
class AuthContext:
    current_user: User | None = None

    @property
    def acting_user(self) -> User | None:
        return self.current_user

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None


def resolve_current_user(db: Session, codec: SessionCodec, token: str | None) -> User | None:
    """Return the user named by the cookie, or None (absent, bad or stale)."""
    if not token:
        return None

    user_id = verify_session_token(codec, token, max_age=settings.session_cookie_max_age)
    if user_id is None:
        return None

    user = store.find_user_by_id(db, user_id)
    if user is None:
        logger.info("Session cookie names missing user %s; continuing unauthenticated", user_id)
    return user


def authenticate_from_session(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    codec: Annotated[SessionCodec, Depends(get_session_codec)],
) -> AuthContext:
    token = request.cookies.get(settings.session_cookie_name)
    auth = AuthContext(current_user=resolve_current_user(db, codec, token))
    request.state.auth = auth
    return auth


CurrentAuth = Annotated[AuthContext, Depends(authenticate_from_session)]


def authenticate_user(request: Request, auth: AuthContext) -> RedirectResponse | None:
    """Guard for protected actions: a redirect to the login form, or None when logged in."""
    if auth.is_authenticated:
        return None
    return RedirectResponse(request.url_for("new_session"), status_code=303)
