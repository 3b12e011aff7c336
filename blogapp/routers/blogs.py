"""Blog routes (JSON). Writes require a logged-in user."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy import select
from sqlalchemy.orm import Session

from blogapp.core.auth import CurrentAuth, authenticate_user
from blogapp.db.session import get_db
from blogapp.models.blog import Blog
from blogapp.schemas.blog import BlogCreateSchema, BlogOutSchema, BlogUpdateSchema
from blogapp.services import store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/blogs", tags=["blogs"])


def _get_blog_or_404(db: Session, blog_id: int) -> Blog:
    blog = db.get(Blog, blog_id)
    if blog is None:
        raise HTTPException(status_code=404, detail="Blog not found")
    return blog


@router.get("", response_model=list[BlogOutSchema])
def list_blogs(db: Annotated[Session, Depends(get_db)], user_id: int | None = None):
    stmt = select(Blog).order_by(Blog.id)
    if user_id is not None:
        stmt = stmt.where(Blog.user_id == user_id)
    return db.execute(stmt).scalars().all()


@router.get("/{blog_id}", response_model=BlogOutSchema)
def show_blog(blog_id: int, db: Annotated[Session, Depends(get_db)]):
    return _get_blog_or_404(db, blog_id)


@router.post("", response_model=BlogOutSchema, status_code=201)
def create_blog(
    request: Request,
    body: BlogCreateSchema,
    db: Annotated[Session, Depends(get_db)],
    auth: CurrentAuth,
):
    redirect = authenticate_user(request, auth)
    if redirect is not None:
        return redirect
    blog = Blog(name=body.name, user_id=auth.acting_user.id)
    db.add(blog)
    db.commit()
    db.refresh(blog)
    logger.info("Created blog %s for user %s", blog.id, blog.user_id)
    return blog


@router.patch("/{blog_id}", response_model=BlogOutSchema)
def update_blog(
    request: Request,
    blog_id: int,
    body: BlogUpdateSchema,
    db: Annotated[Session, Depends(get_db)],
    auth: CurrentAuth,
):
    redirect = authenticate_user(request, auth)
    if redirect is not None:
        return redirect
    blog = _get_blog_or_404(db, blog_id)
    if body.name is not None:
        blog.name = body.name
    db.commit()
    db.refresh(blog)
    return blog


@router.delete("/{blog_id}")
def delete_blog(
    request: Request,
    blog_id: int,
    db: Annotated[Session, Depends(get_db)],
    auth: CurrentAuth,
):
    redirect = authenticate_user(request, auth)
    if redirect is not None:
        return redirect
    blog = _get_blog_or_404(db, blog_id)
    if store.count_comments(db, [post.id for post in blog.posts]):
        raise HTTPException(status_code=409, detail="Blog has posts with comments")
    db.delete(blog)
    db.commit()
    logger.info("Deleted blog %s", blog_id)
    return {"deleted": blog_id}
