"""Comment routes (JSON). Comments are created and edited, never deleted."""
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.orm import Session

from blogapp.db.session import get_db
from blogapp.models.comment import Comment
from blogapp.schemas.comment import CommentCreateSchema, CommentOutSchema, CommentUpdateSchema
from blogapp.services import store

router = APIRouter(prefix="/comments", tags=["comments"])


def _get_comment_or_404(db: Session, comment_id: int) -> Comment:
    comment = db.get(Comment, comment_id)
    if comment is None:
        raise HTTPException(status_code=404, detail="Comment not found")
    return comment


@router.get("", response_model=list[CommentOutSchema])
def list_comments(db: Annotated[Session, Depends(get_db)], post_id: int | None = None):
    """All comments, or one post's comments in creation order."""
    if post_id is not None:
        return store.list_comments_for_post(db, post_id)
    return db.execute(select(Comment).order_by(Comment.id)).scalars().all()


@router.get("/{comment_id}", response_model=CommentOutSchema)
def show_comment(comment_id: int, db: Annotated[Session, Depends(get_db)]):
    return _get_comment_or_404(db, comment_id)


@router.post("", response_model=CommentOutSchema, status_code=201)
def create_comment(body: CommentCreateSchema, db: Annotated[Session, Depends(get_db)]):
    if store.find_post(db, body.post_id) is None:
        raise HTTPException(status_code=404, detail="Post not found")
    return store.create_or_update_comment(db, post_id=body.post_id, body=body.body)


@router.patch("/{comment_id}", response_model=CommentOutSchema)
def update_comment(
    comment_id: int,
    body: CommentUpdateSchema,
    db: Annotated[Session, Depends(get_db)],
):
    comment = _get_comment_or_404(db, comment_id)
    return store.create_or_update_comment(
        db, post_id=comment.post_id, body=body.body, comment_id=comment.id
    )
