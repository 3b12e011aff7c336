"""Pydantic schemas for comments and comment-editor events."""
from datetime import datetime

from pydantic import BaseModel


class CommentCreateSchema(BaseModel):
    post_id: int
    body: str = ""


class CommentUpdateSchema(BaseModel):
    body: str


class CommentOutSchema(BaseModel):
    id: int
    post_id: int
    body: str
    created_at: datetime | None = None

    class Config:
        from_attributes = True


class KeyDownEventSchema(BaseModel):
    """A keydown forwarded from the in-page editor."""

    key_code: int
    value: str = ""
    comment_id: int | None = None
