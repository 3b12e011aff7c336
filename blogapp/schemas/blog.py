"""Pydantic schemas for blogs and posts."""
from datetime import datetime

from pydantic import BaseModel


class BlogCreateSchema(BaseModel):
    name: str | None = None


class BlogUpdateSchema(BaseModel):
    name: str | None = None


class BlogOutSchema(BaseModel):
    id: int
    name: str | None
    user_id: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class PostCreateSchema(BaseModel):
    blog_id: int
    name: str | None = None
    body: str | None = None


class PostUpdateSchema(BaseModel):
    name: str | None = None
    body: str | None = None


class PostOutSchema(BaseModel):
    id: int
    blog_id: int
    name: str | None
    body: str | None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True
