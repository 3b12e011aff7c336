"""Record lookups and writes used by auth, sessions and the comment editor.

Lookups return None on absence; absence is an expected branch, not an error.
"""
import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from blogapp.core import security
from blogapp.models.comment import Comment
from blogapp.models.post import Post
from blogapp.models.user import User

logger = logging.getLogger(__name__)


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


def find_user_by_email(db: Session, email: str | None) -> User | None:
    email_norm = normalize_email(email)
    if not email_norm:
        return None
    return db.execute(select(User).where(User.email == email_norm)).scalar_one_or_none()


def find_user_by_id(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def verify_password(user: User, plaintext: str) -> bool:
    return security.verify_password(plaintext, user.password_hash)


def find_post(db: Session, post_id: int) -> Post | None:
    return db.get(Post, post_id)


def create_or_update_comment(
    db: Session,
    post_id: int,
    body: str,
    comment_id: int | None = None,
) -> Comment:
    """Persist body on comment_id when it belongs to post_id, else create a new comment.

    The body is stored as given, empty strings included.
    """
    comment = db.get(Comment, comment_id) if comment_id is not None else None
    if comment is None or comment.post_id != post_id:
        comment = Comment(post_id=post_id, body=body)
        db.add(comment)
    else:
        comment.body = body
    db.commit()
    db.refresh(comment)
    logger.info("Saved comment %s on post %s", comment.id, comment.post_id)
    return comment


def count_comments(db: Session, post_ids: list[int]) -> int:
    """Number of comments attached to any of post_ids."""
    if not post_ids:
        return 0
    return db.execute(
        select(func.count(Comment.id)).where(Comment.post_id.in_(post_ids))
    ).scalar_one()


def list_comments_for_post(db: Session, post_id: int) -> list[Comment]:
    """Comments of a post in creation order."""
    result = db.execute(
        select(Comment)
        .where(Comment.post_id == post_id)
        .order_by(Comment.created_at.asc(), Comment.id.asc())
    )
    return list(result.scalars().all())
