"""User routes: signup, profile page, JSON listing, delete."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from sqlalchemy import select
from sqlalchemy.orm import Session

from blogapp.core.auth import CurrentAuth, authenticate_user
from blogapp.core.security import hash_password
from blogapp.db.session import get_db
from blogapp.models.user import User
from blogapp.schemas.user import UserCreateSchema, UserOutSchema
from blogapp.services import store
from blogapp.templating import templates

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


def _get_user_or_404(db: Session, user_id: int) -> User:
    user = store.find_user_by_id(db, user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.get("", response_model=list[UserOutSchema])
def list_users(db: Annotated[Session, Depends(get_db)]):
    return db.execute(select(User).order_by(User.id)).scalars().all()


@router.post("", response_model=UserOutSchema, status_code=201)
def create_user(body: UserCreateSchema, db: Annotated[Session, Depends(get_db)]):
    """Sign up. Email is stored normalized; duplicates are rejected."""
    email_norm = store.normalize_email(body.email)
    if not email_norm:
        raise HTTPException(status_code=422, detail="Email is required")
    if not body.password:
        raise HTTPException(status_code=422, detail="Password is required")
    if store.find_user_by_email(db, email_norm):
        raise HTTPException(status_code=409, detail="Email already registered")

    user = User(email=email_norm, password_hash=hash_password(body.password))
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Created user %s", user.id)
    return user


@router.get("/{user_id}", response_class=HTMLResponse, name="user_show")
def show_user(
    request: Request,
    user_id: int,
    db: Annotated[Session, Depends(get_db)],
    auth: CurrentAuth,
    notice: str | None = None,
):
    user = _get_user_or_404(db, user_id)
    return templates.TemplateResponse(
        request,
        "users/show.html",
        {"current_user": auth.current_user, "user": user, "notice": notice},
    )


@router.delete("/{user_id}")
def delete_user(
    request: Request,
    user_id: int,
    db: Annotated[Session, Depends(get_db)],
    auth: CurrentAuth,
):
    redirect = authenticate_user(request, auth)
    if redirect is not None:
        return redirect
    user = _get_user_or_404(db, user_id)
    post_ids = [post.id for blog in user.blogs for post in blog.posts]
    if store.count_comments(db, post_ids):
        raise HTTPException(status_code=409, detail="User has posts with comments")
    db.delete(user)
    db.commit()
    logger.info("Deleted user %s", user_id)
    return {"deleted": user_id}
