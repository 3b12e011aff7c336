"""Session routes: login form, login, logout. Session held in an encrypted cookie."""
from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Form
from fastapi.responses import HTMLResponse, RedirectResponse
from sqlalchemy.orm import Session

from blogapp.core.auth import CurrentAuth
from blogapp.core.config import get_settings
from blogapp.core.security import SessionCodec, create_session_token, get_session_codec
from blogapp.db.session import get_db
from blogapp.schemas.user import SessionOutSchema, UserOutSchema
from blogapp.services import sessions
from blogapp.templating import templates

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sessions"])
settings = get_settings()

LOGIN_FAILED = "Invalid email or password, please try again."
LOGIN_NOTICE = "Session was successfully created."


@router.get("/sessions/new", response_class=HTMLResponse, name="new_session")
def new_session(request: Request, auth: CurrentAuth):
    """Show login form."""
    return templates.TemplateResponse(
        request,
        "sessions/new.html",
        {"current_user": auth.current_user, "error": None, "email": None},
    )


@router.post("/sessions", name="create_session")
def create_session(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
    codec: Annotated[SessionCodec, Depends(get_session_codec)],
    auth: CurrentAuth,
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
):
    """Authenticate and set the session cookie; redirect to the user's page."""
    user = sessions.create(db, email, password)
    if user is None:
        # Same response for unknown email and wrong password
        return templates.TemplateResponse(
            request,
            "sessions/new.html",
            {"current_user": auth.current_user, "error": LOGIN_FAILED, "email": email},
        )

    url = request.url_for("user_show", user_id=user.id).include_query_params(notice=LOGIN_NOTICE)
    response = RedirectResponse(url, status_code=303)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=create_session_token(codec, user.id),
        max_age=settings.session_cookie_max_age,
        httponly=True,
        samesite="lax",
        path="/",
    )
    return response


def _destroy(request: Request) -> RedirectResponse:
    response = RedirectResponse(request.url_for("new_session"), status_code=303)
    # path must match the one used in set_cookie()
    response.delete_cookie(settings.session_cookie_name, path="/")
    return response


@router.delete("/sessions/current", name="destroy_session")
def destroy_session(request: Request, auth: CurrentAuth):
    """Clear the session cookie. Safe to call without a session."""
    if auth.is_authenticated:
        logger.info("Logout for user %s", auth.current_user.id)
    return _destroy(request)


@router.post("/logout", name="logout")
def logout(request: Request, auth: CurrentAuth):
    """Form-friendly alias of DELETE /sessions/current."""
    return destroy_session(request, auth)


@router.get("/sessions/current", response_model=SessionOutSchema)
def show_session(auth: CurrentAuth):
    """Report the acting identity for this request."""
    user = auth.acting_user
    return SessionOutSchema(
        authenticated=user is not None,
        user=UserOutSchema.model_validate(user) if user is not None else None,
    )
