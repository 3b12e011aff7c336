"""Post routes: JSON CRUD, the post page and the comments-list event endpoint."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from sqlalchemy import select
from sqlalchemy.orm import Session

from blogapp.components import CommentsList, CommentsListState, Draft, KeyDown, initial_state
from blogapp.core.auth import CurrentAuth, authenticate_user
from blogapp.db.session import get_db
from blogapp.models.blog import Blog
from blogapp.models.post import Post
from blogapp.schemas.blog import PostCreateSchema, PostOutSchema, PostUpdateSchema
from blogapp.schemas.comment import KeyDownEventSchema
from blogapp.services import store
from blogapp.templating import templates

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["posts"])


def _get_post_or_404(db: Session, post_id: int) -> Post:
    post = store.find_post(db, post_id)
    if post is None:
        raise HTTPException(status_code=404, detail="Post not found")
    return post


@router.get("", response_model=list[PostOutSchema])
def list_posts(db: Annotated[Session, Depends(get_db)], blog_id: int | None = None):
    stmt = select(Post).order_by(Post.id)
    if blog_id is not None:
        stmt = stmt.where(Post.blog_id == blog_id)
    return db.execute(stmt).scalars().all()


@router.get("/{post_id}", response_class=HTMLResponse, name="post_show")
def show_post(
    request: Request,
    post_id: int,
    db: Annotated[Session, Depends(get_db)],
    auth: CurrentAuth,
):
    """Post page hosting the comments list and its editor."""
    post = _get_post_or_404(db, post_id)
    comments_list = CommentsList(db, post.id)
    return templates.TemplateResponse(
        request,
        "posts/show.html",
        {
            "current_user": auth.current_user,
            "post": post,
            "comments_list": comments_list.render(),
        },
    )


@router.post("/{post_id}/comments_list/events", response_class=HTMLResponse, name="comments_list_events")
def comments_list_events(
    post_id: int,
    event: KeyDownEventSchema,
    db: Annotated[Session, Depends(get_db)],
):
    """Run one editor keydown through the component; return the re-rendered list."""
    post = _get_post_or_404(db, post_id)
    state = initial_state(post.id)
    if event.comment_id is not None:
        state = CommentsListState(post_id=post.id, draft=Draft(post_id=post.id, comment_id=event.comment_id))
    comments_list = CommentsList(db, post.id, state=state)
    comments_list.dispatch(KeyDown(key_code=event.key_code, value=event.value))
    return HTMLResponse(comments_list.render())


@router.post("", response_model=PostOutSchema, status_code=201)
def create_post(
    request: Request,
    body: PostCreateSchema,
    db: Annotated[Session, Depends(get_db)],
    auth: CurrentAuth,
):
    redirect = authenticate_user(request, auth)
    if redirect is not None:
        return redirect
    if db.get(Blog, body.blog_id) is None:
        raise HTTPException(status_code=404, detail="Blog not found")
    post = Post(blog_id=body.blog_id, name=body.name, body=body.body)
    db.add(post)
    db.commit()
    db.refresh(post)
    logger.info("Created post %s in blog %s", post.id, post.blog_id)
    return post


@router.patch("/{post_id}", response_model=PostOutSchema)
def update_post(
    request: Request,
    post_id: int,
    body: PostUpdateSchema,
    db: Annotated[Session, Depends(get_db)],
    auth: CurrentAuth,
):
    redirect = authenticate_user(request, auth)
    if redirect is not None:
        return redirect
    post = _get_post_or_404(db, post_id)
    if body.name is not None:
        post.name = body.name
    if body.body is not None:
        post.body = body.body
    db.commit()
    db.refresh(post)
    return post


@router.delete("/{post_id}")
def delete_post(
    request: Request,
    post_id: int,
    db: Annotated[Session, Depends(get_db)],
    auth: CurrentAuth,
):
    redirect = authenticate_user(request, auth)
    if redirect is not None:
        return redirect
    post = _get_post_or_404(db, post_id)
    if store.count_comments(db, [post.id]):
        raise HTTPException(status_code=409, detail="Post has comments")
    db.delete(post)
    db.commit()
    logger.info("Deleted post %s", post_id)
    return {"deleted": post_id}
